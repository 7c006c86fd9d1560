"""Value types passed through the provisioning workflow."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

from .errors import ConfigError

if TYPE_CHECKING:
    from .terraform.backend_config import BackendConfig

BUCKET_PREFIX = "terraform-state-"
TABLE_PREFIX = "terraform-locks-"


class NamingScheme(str, Enum):
    """How the resource-name suffix is derived from a request."""

    POSTFIX = "postfix"
    ACCOUNT_ENVIRONMENT = "account_environment"


class ResourceStatus(str, Enum):
    """How a provisioning step succeeded."""

    CREATED = "created"
    EXISTING = "existing"


@dataclass(frozen=True)
class ProvisioningRequest:
    """Inputs for one provisioning run.

    `account_id_or_postfix` holds the configured postfix for
    `NamingScheme.POSTFIX` and the AWS account id for
    `NamingScheme.ACCOUNT_ENVIRONMENT`.
    """
    region: str
    environment: str
    account_id_or_postfix: str
    naming: NamingScheme = NamingScheme.POSTFIX

    def __post_init__(self):
        for field_name in ("region", "environment", "account_id_or_postfix"):
            value = getattr(self, field_name)
            if value is None or not str(value).strip():
                raise ConfigError(f"'{field_name}' must not be empty")


@dataclass(frozen=True)
class ResourceNames:
    bucket_name: str
    table_name: str


def resource_names(request: ProvisioningRequest) -> ResourceNames:
    """Derive the bucket and table names for a request."""
    if request.naming is NamingScheme.ACCOUNT_ENVIRONMENT:
        suffix = f"{request.account_id_or_postfix}-{request.environment}"
    else:
        suffix = request.account_id_or_postfix

    return ResourceNames(
        bucket_name=f"{BUCKET_PREFIX}{suffix}",
        table_name=f"{TABLE_PREFIX}{suffix}",
    )


@dataclass
class ProvisioningResult:
    """Outcome of a provisioning run. Never persisted."""
    bucket_created_or_exists: bool = False
    table_created_or_exists: bool = False
    backend_config: Optional[str] = None
    bucket_status: Optional[ResourceStatus] = None
    table_status: Optional[ResourceStatus] = None
    backend: Optional["BackendConfig"] = None

    @property
    def succeeded(self) -> bool:
        return (
            self.bucket_created_or_exists
            and self.table_created_or_exists
            and self.backend_config is not None
        )
