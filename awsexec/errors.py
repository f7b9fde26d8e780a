"""Exception types raised by awsexec."""


class AwsexecError(Exception):
    """Base class for every failure that aborts an invocation."""


class ArgumentError(AwsexecError):
    """The invocation could not be split into a profile and a command."""


class MissingSeparatorError(ArgumentError):
    pass


class ProfileRequiredError(ArgumentError):
    pass


class NoCommandError(ArgumentError):
    pass


class UnexpectedArgumentsError(ArgumentError):
    pass


class CredentialExportError(AwsexecError):
    """Credentials could not be obtained for the requested profile."""


class LaunchError(AwsexecError):
    """The target command could not replace the current process."""


class CommandNotFoundError(LaunchError):
    pass
