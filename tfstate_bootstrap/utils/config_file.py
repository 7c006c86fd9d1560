"""Load a provisioning request from a KEY=value config file."""
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values

from ..errors import ConfigError
from ..models import NamingScheme, ProvisioningRequest
from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = "terraform-backend.conf"
REQUIRED_KEYS = ("AWS_REGION", "ENVIRONMENT", "POSTFIX")


def read_config_file(path) -> Dict[str, Optional[str]]:
    """Parse a KEY=value file.

    Comments, quoted values and `export` prefixes are accepted. `${VAR}`
    references are kept literally, never expanded from the environment.

    Raises:
        ConfigError: The file does not exist or cannot be read as UTF-8
    """
    config_path = Path(path)
    if not config_path.is_file():
        logger.error("config_file_not_found", path=str(config_path))
        raise ConfigError(f"Configuration file '{config_path}' not found")

    try:
        return dotenv_values(config_path, interpolate=False, encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        logger.error("config_file_unreadable", path=str(config_path), error=str(e))
        raise ConfigError(f"Configuration file '{config_path}' could not be read: {e}") from e


def load_request(path=DEFAULT_CONFIG_FILE) -> ProvisioningRequest:
    """Build a postfix-named ProvisioningRequest from a config file.

    Raises:
        ConfigError: The file is missing or a mandatory key is absent or empty
    """
    values = read_config_file(path)

    missing = [key for key in REQUIRED_KEYS if not (values.get(key) or "").strip()]
    if missing:
        logger.error("config_keys_missing", path=str(path), missing=",".join(missing))
        raise ConfigError(
            f"Missing required key(s) in '{path}': {', '.join(missing)}"
        )

    logger.info("config_file_loaded", path=str(path))

    return ProvisioningRequest(
        region=values["AWS_REGION"].strip(),
        environment=values["ENVIRONMENT"].strip(),
        account_id_or_postfix=values["POSTFIX"].strip(),
        naming=NamingScheme.POSTFIX,
    )
