"""Credential record in the credential_process output format."""

import json
from dataclasses import dataclass, field

from .errors import CredentialExportError

ACCESS_KEY_ID_VAR = 'AWS_ACCESS_KEY_ID'
SECRET_ACCESS_KEY_VAR = 'AWS_SECRET_ACCESS_KEY'
SESSION_TOKEN_VAR = 'AWS_SESSION_TOKEN'
EXPIRATION_VAR = 'AWS_CREDENTIAL_EXPIRATION'


@dataclass(frozen=True)
class Credentials:
    """Short-lived AWS credentials for a single invocation."""

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: str = field(default='', repr=False)
    expiration: str = ''
    version: int = 1

    def __post_init__(self):
        missing = [
            key for key, value in (
                ('AccessKeyId', self.access_key_id),
                ('SecretAccessKey', self.secret_access_key),
            )
            if not value
        ]
        if missing:
            raise CredentialExportError(
                f'credentials are missing required fields: {", ".join(missing)}'
            )

    @classmethod
    def from_dict(cls, data):
        """
        Build a record from a credential_process style mapping.

        Args:
            data: Mapping with Version, AccessKeyId, SecretAccessKey and
                optionally SessionToken and Expiration keys

        Returns:
            Credentials: The validated record
        """
        if not isinstance(data, dict):
            raise CredentialExportError(
                f'expected a JSON object, got {type(data).__name__}'
            )

        version = data.get('Version')
        if version is None:
            version = 1
        elif isinstance(version, bool) or not isinstance(version, int):
            raise CredentialExportError(f'invalid credentials Version: {version!r}')

        fields = {}
        for key in ('AccessKeyId', 'SecretAccessKey', 'SessionToken', 'Expiration'):
            value = data.get(key) or ''
            if not isinstance(value, str):
                raise CredentialExportError(f'credentials field {key} must be a string')
            fields[key] = value

        return cls(
            access_key_id=fields['AccessKeyId'],
            secret_access_key=fields['SecretAccessKey'],
            session_token=fields['SessionToken'],
            expiration=fields['Expiration'],
            version=version,
        )

    @classmethod
    def from_json(cls, text):
        """Parse the JSON object printed by a credential exporter."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CredentialExportError(f'failed to parse credentials JSON: {e}') from e
        return cls.from_dict(data)

    def to_environ(self):
        """Return the AWS SDK environment variables for these credentials."""
        env = {
            ACCESS_KEY_ID_VAR: self.access_key_id,
            SECRET_ACCESS_KEY_VAR: self.secret_access_key,
        }
        if self.session_token:
            env[SESSION_TOKEN_VAR] = self.session_token
        if self.expiration:
            env[EXPIRATION_VAR] = self.expiration
        return env
