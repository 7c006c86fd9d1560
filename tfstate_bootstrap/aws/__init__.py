"""AWS resources backing the Terraform state backend."""
from .clients import create_client
from .credentials import CredentialsChecker
from .s3_bucket import StateBucket
from .dynamodb_table import LockTable

__all__ = ["create_client", "CredentialsChecker", "StateBucket", "LockTable"]
