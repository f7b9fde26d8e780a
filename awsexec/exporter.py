"""Credential exporters: obtain credentials for a named AWS profile."""

import logging
import subprocess
from abc import ABC, abstractmethod
from datetime import timezone

import boto3
from botocore.exceptions import BotoCoreError, ClientError, ProfileNotFound

from .credentials import Credentials
from .errors import CredentialExportError

logger = logging.getLogger(__name__)

DEFAULT_EXPORTER = 'aws-cli'


class CredentialExporter(ABC):
    """Source of credentials for a profile."""

    @abstractmethod
    def export_credentials(self, profile):
        """
        Export credentials for a profile.

        Args:
            profile: Name of the AWS profile, empty for the default profile

        Returns:
            Credentials: The exported credential record

        Raises:
            CredentialExportError: If no usable credentials could be obtained
        """


class AwsCliExporter(CredentialExporter):
    """Exports credentials with `aws configure export-credentials`."""

    def __init__(self, executable='aws', timeout=None):
        self.executable = executable
        self.timeout = timeout

    def build_command(self, profile):
        # `process` is the credential_process JSON format
        cmd = [self.executable, 'configure', 'export-credentials', '--format', 'process']
        if profile:
            cmd.extend(['--profile', profile])
        return cmd

    def export_credentials(self, profile):
        cmd = self.build_command(profile)
        logger.debug('Running %s', ' '.join(cmd))

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise CredentialExportError(
                f'AWS CLI not found ({self.executable}). '
                'Please install the AWS CLI to export credentials.'
            ) from e
        except subprocess.CalledProcessError as e:
            raise CredentialExportError(
                f'aws configure export-credentials failed with exit code {e.returncode}: '
                f'{(e.stderr or "").strip()}'
            ) from e
        except subprocess.TimeoutExpired as e:
            raise CredentialExportError(
                f'aws configure export-credentials timed out after {e.timeout} seconds'
            ) from e
        except OSError as e:
            raise CredentialExportError(
                f'failed to execute aws configure export-credentials: {e}'
            ) from e

        return Credentials.from_json(result.stdout)


class SessionExporter(CredentialExporter):
    """Exports credentials resolved in-process by boto3 for the profile."""

    def export_credentials(self, profile):
        logger.debug('Resolving credentials with boto3 for profile %r', profile)

        try:
            session = boto3.Session(profile_name=profile or None)
            credentials = session.get_credentials()
            if credentials is None:
                raise CredentialExportError(
                    f'no credentials found for profile "{profile or "default"}"'
                )
            frozen = credentials.get_frozen_credentials()
        except ProfileNotFound as e:
            raise CredentialExportError(str(e)) from e
        except ClientError as e:
            error = e.response.get('Error', {})
            raise CredentialExportError(
                f'AWS Error ({error.get("Code", "Unknown")}): {error.get("Message", str(e))}'
            ) from e
        except BotoCoreError as e:
            raise CredentialExportError(str(e)) from e

        return Credentials(
            access_key_id=frozen.access_key or '',
            secret_access_key=frozen.secret_key or '',
            session_token=frozen.token or '',
            expiration=format_expiry(getattr(credentials, '_expiry_time', None)),
        )


def format_expiry(expiry_time):
    """Render a credential expiry as an ISO-8601 UTC timestamp, '' if unknown."""
    if expiry_time is None:
        return ''
    if expiry_time.tzinfo is None:
        expiry_time = expiry_time.replace(tzinfo=timezone.utc)
    return expiry_time.astimezone(timezone.utc).isoformat()


EXPORTERS = {
    'aws-cli': lambda timeout: AwsCliExporter(timeout=timeout),
    'boto3': lambda timeout: SessionExporter(),
}


def get_exporter(name=DEFAULT_EXPORTER, timeout=None):
    """Create the exporter registered under name."""
    try:
        factory = EXPORTERS[name]
    except KeyError:
        raise ValueError(
            f'unknown exporter "{name}", expected one of: {", ".join(sorted(EXPORTERS))}'
        ) from None
    return factory(timeout)
