"""awsexec - Run a command with credentials exported from an AWS profile."""

__version__ = "0.1.0"
__commit__ = "unknown"
__date__ = "unknown"

from .credentials import Credentials
from .exporter import CredentialExporter, AwsCliExporter, SessionExporter
from .runner import run

__all__ = ["Credentials", "CredentialExporter", "AwsCliExporter", "SessionExporter", "run"]
