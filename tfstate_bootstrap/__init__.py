"""Bootstrap the S3 bucket and DynamoDB lock table for a Terraform state backend."""
from .errors import (
    ProvisioningError,
    ConfigError,
    CredentialsError,
    BucketProvisionError,
    TableProvisionError,
)
from .models import (
    NamingScheme,
    ProvisioningRequest,
    ProvisioningResult,
    ResourceNames,
    ResourceStatus,
    resource_names,
)
from .workflow import ProvisioningWorkflow

__version__ = "0.1.0"

__all__ = [
    "ProvisioningError",
    "ConfigError",
    "CredentialsError",
    "BucketProvisionError",
    "TableProvisionError",
    "NamingScheme",
    "ProvisioningRequest",
    "ProvisioningResult",
    "ResourceNames",
    "ResourceStatus",
    "resource_names",
    "ProvisioningWorkflow",
]
