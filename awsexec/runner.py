"""The parse, export and exec pipeline."""

import logging

from .arguments import resolve_args
from .errors import ArgumentError, CredentialExportError
from .exporter import AwsCliExporter
from .launcher import execute_command

logger = logging.getLogger(__name__)


def run(args, exporter=None, environ=None):
    """
    Run a command with credentials exported for a profile.

    On success the current process is replaced and this function does not
    return.

    Args:
        args: Invocation arguments, `[profile] -- command [args...]`
        exporter: CredentialExporter to use, defaults to AwsCliExporter
        environ: Environment to read AWS_PROFILE from and pass to the
            command, defaults to os.environ
    """
    if exporter is None:
        exporter = AwsCliExporter()

    try:
        profile, command = resolve_args(args, environ)
    except ArgumentError as e:
        raise type(e)(f'failed to parse arguments: {e}') from e

    logger.debug('Exporting credentials for profile %r with %s', profile, type(exporter).__name__)
    try:
        credentials = exporter.export_credentials(profile)
    except Exception as e:
        raise CredentialExportError(f'failed to export credentials: {e}') from e

    execute_command(credentials, command, environ)
