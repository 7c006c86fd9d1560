"""Caller-identity check run before any resource is touched."""
from typing import Dict

from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

from ..errors import CredentialsError
from ..utils.logger import get_logger

logger = get_logger(__name__)

CONFIGURE_HINT = (
    "Configure credentials with 'aws configure' or the AWS_* environment variables. "
    "See: https://docs.aws.amazon.com/cli/latest/userguide/cli-chap-configure.html"
)


class CredentialsChecker:
    """Verify that the current credentials can call AWS."""

    def __init__(self, sts_client):
        """Initialize the checker.

        Args:
            sts_client: boto3 STS client
        """
        self.sts = sts_client

    def verify(self) -> Dict[str, str]:
        """Call sts:GetCallerIdentity.

        Returns:
            Dictionary with account_id, arn and user_id

        Raises:
            CredentialsError: No credentials found or the call was rejected
        """
        try:
            identity = self.sts.get_caller_identity()
        except NoCredentialsError as e:
            logger.error("aws_credentials_not_found", error=str(e))
            raise CredentialsError(f"No AWS credentials found. {CONFIGURE_HINT}") from e
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', '')
            logger.error("aws_credentials_rejected", error=str(e), error_code=error_code)
            raise CredentialsError(
                f"AWS credentials are not usable ({error_code}). {CONFIGURE_HINT}"
            ) from e
        except BotoCoreError as e:
            logger.error("aws_credentials_check_failed", error=str(e))
            raise CredentialsError(f"Could not verify AWS credentials: {e}") from e

        caller = {
            "account_id": identity.get("Account", ""),
            "arn": identity.get("Arn", ""),
            "user_id": identity.get("UserId", ""),
        }

        logger.info(
            "aws_credentials_verified",
            account_id=caller["account_id"],
            arn=caller["arn"]
        )

        return caller
