"""boto3 client factory for both LocalStack and AWS."""
from typing import Optional

import boto3
from botocore.exceptions import InvalidRegionError, ProfileNotFound

from ..errors import ConfigError, CredentialsError
from ..utils.config import Settings, get_settings
from ..utils.logger import get_logger

logger = get_logger(__name__)


def create_client(service: str, region: str, settings: Optional[Settings] = None):
    """Create a boto3 client for `service` in `region`.

    Args:
        service: boto3 service name (s3, dynamodb, sts)
        region: AWS region
        settings: Runtime settings (loaded from the environment when omitted)

    Returns:
        boto3 client
    """
    settings = settings or get_settings()

    try:
        session = boto3.session.Session(profile_name=settings.aws_profile)
    except ProfileNotFound as e:
        logger.error("aws_profile_not_found", profile=settings.aws_profile)
        raise CredentialsError(str(e)) from e

    client_config = {"region_name": region}

    # LocalStack accepts any credentials
    if settings.is_local_environment:
        client_config["endpoint_url"] = settings.localstack_endpoint
        client_config["aws_access_key_id"] = "test"
        client_config["aws_secret_access_key"] = "test"

    logger.debug(
        "aws_client_created",
        service=service,
        region=region,
        endpoint=settings.localstack_endpoint if settings.is_local_environment else "AWS"
    )

    try:
        return session.client(service, **client_config)
    except InvalidRegionError as e:
        logger.error("aws_region_invalid", region=region)
        raise ConfigError(f"Invalid AWS region '{region}'") from e
