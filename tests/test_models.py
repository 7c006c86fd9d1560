"""Tests for request validation and resource naming."""
import pytest
from dataclasses import FrozenInstanceError

from tfstate_bootstrap.errors import ConfigError
from tfstate_bootstrap.models import (
    NamingScheme,
    ProvisioningRequest,
    ProvisioningResult,
    ResourceStatus,
    resource_names,
)


class TestProvisioningRequest:
    """Test request invariants."""

    @pytest.mark.parametrize("field", ["region", "environment", "account_id_or_postfix"])
    def test_empty_field_rejected(self, field):
        values = {"region": "eu-west-1", "environment": "dev", "account_id_or_postfix": "acme"}
        values[field] = "   "

        with pytest.raises(ConfigError) as exc_info:
            ProvisioningRequest(**values)

        assert field in str(exc_info.value)

    def test_request_is_immutable(self):
        request = ProvisioningRequest("eu-west-1", "dev", "acme")

        with pytest.raises(FrozenInstanceError):
            request.region = "us-east-1"


class TestResourceNames:
    """Test name derivation for both naming schemes."""

    def test_postfix_naming(self):
        request = ProvisioningRequest("us-east-1", "prod", "acme", NamingScheme.POSTFIX)

        names = resource_names(request)

        assert names.bucket_name == "terraform-state-acme"
        assert names.table_name == "terraform-locks-acme"

    def test_account_environment_naming(self):
        request = ProvisioningRequest(
            "eu-central-1", "staging", "123456789012", NamingScheme.ACCOUNT_ENVIRONMENT
        )

        names = resource_names(request)

        assert names.bucket_name == "terraform-state-123456789012-staging"
        assert names.table_name == "terraform-locks-123456789012-staging"

    def test_names_are_deterministic(self):
        first = ProvisioningRequest("us-west-2", "dev", "111122223333", NamingScheme.ACCOUNT_ENVIRONMENT)
        second = ProvisioningRequest("us-west-2", "dev", "111122223333", NamingScheme.ACCOUNT_ENVIRONMENT)

        assert resource_names(first) == resource_names(first)
        assert resource_names(first) == resource_names(second)


class TestProvisioningResult:
    """Test the success flag."""

    def test_default_result_not_succeeded(self):
        assert ProvisioningResult().succeeded is False

    def test_both_steps_without_descriptor_not_succeeded(self):
        result = ProvisioningResult(bucket_created_or_exists=True, table_created_or_exists=True)

        assert result.succeeded is False

    def test_complete_result_succeeded(self):
        result = ProvisioningResult(
            bucket_created_or_exists=True,
            table_created_or_exists=True,
            backend_config="terraform {}",
            bucket_status=ResourceStatus.CREATED,
            table_status=ResourceStatus.EXISTING,
        )

        assert result.succeeded is True
