"""Replace the current process with a command running under AWS credentials."""

import logging
import os
import shutil
import sys

from .errors import CommandNotFoundError, LaunchError

logger = logging.getLogger(__name__)


def resolve_executable(name, path=None):
    """Locate name on the search path, or use it directly if it contains a slash."""
    resolved = shutil.which(name, path=path)
    if resolved is None:
        raise CommandNotFoundError(f'command not found: {name}')
    return resolved


def build_environment(credentials, base=None):
    """
    Build the child environment.

    The base environment keeps its order; credential variables are applied
    last and override any existing values.
    """
    if base is None:
        base = os.environ
    return {**base, **credentials.to_environ()}


def execute_command(credentials, command, environ=None):
    """
    Replace the current process with command.

    Does not return on success. The full command is passed as argv, so the
    command name as typed becomes argv[0].

    Args:
        credentials: Credentials to inject
        command: Non-empty list of the executable and its arguments
        environ: Base environment, defaults to os.environ

    Raises:
        CommandNotFoundError: If the executable cannot be resolved
        LaunchError: If the process could not be replaced
    """
    if not command:
        raise LaunchError('command is empty')

    if environ is None:
        environ = os.environ

    cmd_path = resolve_executable(command[0], path=environ.get('PATH'))
    env = build_environment(credentials, environ)

    logger.debug('Executing %s as %r', cmd_path, command)

    # Buffered output would be discarded by the exec
    sys.stdout.flush()
    sys.stderr.flush()

    try:
        os.execve(cmd_path, list(command), env)
    except OSError as e:
        raise LaunchError(f'failed to execute command: {e}') from e
