"""DynamoDB table used by Terraform for state locking."""
from botocore.exceptions import BotoCoreError, ClientError, WaiterError

from ..errors import TableProvisionError
from ..models import ResourceStatus
from ..utils.logger import get_logger

logger = get_logger(__name__)

LOCK_KEY = "LockID"


class LockTable:
    """Create-or-detect the Terraform lock table."""

    def __init__(self, dynamodb_client, region: str):
        self.dynamodb = dynamodb_client
        self.region = region

    def ensure(self, table_name: str) -> ResourceStatus:
        """Create the lock table and wait for it, or detect that it already exists.

        Args:
            table_name: Table to provision

        Returns:
            ResourceStatus.CREATED or ResourceStatus.EXISTING

        Raises:
            TableProvisionError: Creation failed and the table does not exist,
                or the table never became active
        """
        logger.info("dynamodb_table_creating", table=table_name, region=self.region)

        try:
            self.dynamodb.create_table(
                TableName=table_name,
                AttributeDefinitions=[
                    {'AttributeName': LOCK_KEY, 'AttributeType': 'S'}
                ],
                KeySchema=[
                    {'AttributeName': LOCK_KEY, 'KeyType': 'HASH'}
                ],
                BillingMode='PAY_PER_REQUEST'
            )
        except (ClientError, BotoCoreError) as create_error:
            logger.warning(
                "dynamodb_table_creation_failed",
                table=table_name,
                error=str(create_error)
            )

            if self.exists(table_name):
                logger.info(
                    "dynamodb_table_already_exists",
                    table=table_name,
                    status="no new table created"
                )
                return ResourceStatus.EXISTING

            logger.error("dynamodb_table_not_found_after_failure", table=table_name)
            raise TableProvisionError(
                f"Failed to create DynamoDB table '{table_name}' and it does not appear to exist. "
                f"Check your AWS credentials and permissions. ({create_error})"
            ) from create_error

        logger.info("dynamodb_table_created", table=table_name)
        self.wait_until_active(table_name)
        return ResourceStatus.CREATED

    def wait_until_active(self, table_name: str) -> None:
        """Block on the provider's table_exists waiter.

        Raises:
            TableProvisionError: The waiter gave up or failed
        """
        logger.info("dynamodb_table_waiting", table=table_name)
        try:
            waiter = self.dynamodb.get_waiter('table_exists')
            waiter.wait(TableName=table_name)
        except (WaiterError, ClientError, BotoCoreError) as e:
            logger.error("dynamodb_table_wait_failed", table=table_name, error=str(e))
            raise TableProvisionError(
                f"DynamoDB table '{table_name}' did not become active: {e}"
            ) from e

        logger.info("dynamodb_table_active", table=table_name)

    def exists(self, table_name: str) -> bool:
        """Check whether the table exists."""
        try:
            self.dynamodb.describe_table(TableName=table_name)
            return True
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', '')
            logger.debug("dynamodb_table_probe_failed", table=table_name, error_code=error_code)
            return False
        except BotoCoreError as e:
            logger.debug("dynamodb_table_probe_failed", table=table_name, error=str(e))
            return False
