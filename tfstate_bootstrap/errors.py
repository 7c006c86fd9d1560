"""Error types raised while provisioning the Terraform state backend."""
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ProvisioningResult


class ProvisioningError(Exception):
    """Base class for all fatal provisioning errors."""

    def __init__(self, message: str, result: Optional["ProvisioningResult"] = None):
        super().__init__(message)
        self.message = message
        self.result = result


class ConfigError(ProvisioningError):
    """Missing or invalid input (config file, arguments, request fields)."""


class CredentialsError(ProvisioningError):
    """AWS credentials are missing or cannot be used."""


class BucketProvisionError(ProvisioningError):
    """The state bucket could not be created and does not exist."""


class TableProvisionError(ProvisioningError):
    """The lock table could not be created, does not exist, or never became active."""
