"""Terraform backend configuration output."""
from .backend_config import BackendConfig, STATE_KEY

__all__ = ["BackendConfig", "STATE_KEY"]
