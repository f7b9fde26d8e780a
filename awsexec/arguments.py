"""Splitting of invocation arguments into a profile and a command."""

import logging
import os

from .errors import (
    MissingSeparatorError,
    NoCommandError,
    ProfileRequiredError,
    UnexpectedArgumentsError,
)

logger = logging.getLogger(__name__)

SEPARATOR = '--'
PROFILE_ENV_VAR = 'AWS_PROFILE'


def resolve_args(args, environ=None):
    """
    Resolve the profile and the command to execute.
    
    Accepted forms:
        [profile] -- command [args...]
        -- command [args...]          (profile taken from AWS_PROFILE)
    
    Args:
        args: Arguments following the tool's own options
        environ: Mapping used to look up AWS_PROFILE, defaults to os.environ
        
    Returns:
        tuple: (profile, command) where command is a non-empty list
    """
    if environ is None:
        environ = os.environ
    
    args = list(args)
    
    try:
        separator_index = args.index(SEPARATOR)
    except ValueError:
        raise MissingSeparatorError(f"missing '{SEPARATOR}' separator") from None
    
    if separator_index > 1:
        extra = ' '.join(args[1:separator_index])
        raise UnexpectedArgumentsError(
            f"only one profile may be given before '{SEPARATOR}', got extra arguments: {extra}"
        )
    
    if separator_index == 1:
        profile = args[0]
        if not profile:
            raise ProfileRequiredError('profile name must not be empty')
    else:
        profile = environ.get(PROFILE_ENV_VAR, '')
        if not profile:
            raise ProfileRequiredError(
                f'{PROFILE_ENV_VAR} environment variable is required '
                'when profile is not specified as an argument'
            )
    
    command = args[separator_index + 1:]
    if not command:
        raise NoCommandError(f"no command specified after '{SEPARATOR}'")
    
    logger.debug('Resolved profile %r and command %r', profile, command)
    return profile, command
