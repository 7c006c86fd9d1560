"""Tests for the KEY=value config-file loader."""
import pytest
from unittest.mock import patch

from tfstate_bootstrap.errors import ConfigError
from tfstate_bootstrap.models import NamingScheme, resource_names
from tfstate_bootstrap.utils.config_file import load_request, read_config_file


class TestConfigFile:
    """Test parsing and validation of the config file."""

    @pytest.fixture
    def write_config(self, tmp_path):
        def _write(content):
            path = tmp_path / "terraform-backend.conf"
            path.write_text(content, encoding="utf-8")
            return path
        return _write

    def test_load_request(self, write_config):
        path = write_config(
            "# backend settings\n"
            "AWS_REGION=eu-west-1\n"
            "ENVIRONMENT=dev\n"
            "POSTFIX=acme-dev\n"
        )

        request = load_request(path)

        assert request.region == "eu-west-1"
        assert request.environment == "dev"
        assert request.account_id_or_postfix == "acme-dev"
        assert request.naming is NamingScheme.POSTFIX
        assert resource_names(request).bucket_name == "terraform-state-acme-dev"

    def test_quotes_export_and_unknown_keys(self, write_config):
        path = write_config(
            'export AWS_REGION="us-east-2"\n'
            "ENVIRONMENT='prod'\n"
            "POSTFIX=shared\n"
            "OWNER=platform-team\n"
        )

        request = load_request(path)

        assert request.region == "us-east-2"
        assert request.environment == "prod"
        assert request.account_id_or_postfix == "shared"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            read_config_file(tmp_path / "missing.conf")

        assert "not found" in str(exc_info.value)

    def test_missing_key(self, write_config):
        path = write_config("AWS_REGION=eu-west-1\nENVIRONMENT=dev\n")

        with pytest.raises(ConfigError) as exc_info:
            load_request(path)

        assert "POSTFIX" in str(exc_info.value)

    def test_empty_value_counts_as_missing(self, write_config):
        path = write_config("AWS_REGION=\nENVIRONMENT=dev\nPOSTFIX=acme\n")

        with pytest.raises(ConfigError) as exc_info:
            load_request(path)

        assert "AWS_REGION" in str(exc_info.value)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "terraform-backend.conf"
        path.write_bytes(b"AWS_REGION=eu-west-1\nENVIRONMENT=dev\nPOSTFIX=\xff\xfe\n")

        with pytest.raises(ConfigError) as exc_info:
            read_config_file(path)

        assert "could not be read" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_unreadable_file(self, write_config):
        path = write_config("AWS_REGION=eu-west-1\nENVIRONMENT=dev\nPOSTFIX=acme\n")

        with patch(
            'tfstate_bootstrap.utils.config_file.dotenv_values',
            side_effect=PermissionError(13, "Permission denied")
        ):
            with pytest.raises(ConfigError) as exc_info:
                read_config_file(path)

        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_variables_not_expanded_from_environment(self, write_config, monkeypatch):
        monkeypatch.setenv("TEAM_SUFFIX", "injected")
        path = write_config(
            "AWS_REGION=eu-west-1\n"
            "ENVIRONMENT=dev\n"
            "POSTFIX=acme${TEAM_SUFFIX}\n"
        )

        request = load_request(path)

        assert request.account_id_or_postfix == "acme${TEAM_SUFFIX}"
