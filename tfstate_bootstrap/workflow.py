"""
Terraform state backend provisioning workflow.

Credentials check -> S3 state bucket -> DynamoDB lock table -> backend config.
Each step runs only if the previous one succeeded.
"""
from typing import Optional

from .aws.clients import create_client
from .aws.credentials import CredentialsChecker
from .aws.dynamodb_table import LockTable
from .aws.s3_bucket import StateBucket
from .errors import BucketProvisionError, TableProvisionError
from .models import NamingScheme, ProvisioningRequest, ProvisioningResult, resource_names
from .terraform.backend_config import BackendConfig
from .utils.config import Settings
from .utils.logger import get_logger

logger = get_logger(__name__)


class ProvisioningWorkflow:
    """
    Provision the S3 bucket and DynamoDB table for a Terraform backend.

    Re-running with the same request is safe: a resource that already exists
    counts as provisioned. A half-provisioned backend never yields a backend
    configuration.
    """

    def __init__(
        self,
        credentials: CredentialsChecker,
        bucket: StateBucket,
        table: LockTable
    ):
        self.credentials = credentials
        self.bucket = bucket
        self.table = table

    @classmethod
    def for_region(cls, region: str, settings: Optional[Settings] = None) -> "ProvisioningWorkflow":
        """Build a workflow with boto3 clients for `region`."""
        return cls(
            credentials=CredentialsChecker(create_client('sts', region, settings)),
            bucket=StateBucket(create_client('s3', region, settings), region),
            table=LockTable(create_client('dynamodb', region, settings), region),
        )

    def provision(self, request: ProvisioningRequest) -> ProvisioningResult:
        """
        Run the workflow for one request.

        Args:
            request: Region, environment and naming inputs

        Returns:
            ProvisioningResult with the rendered backend configuration

        Raises:
            CredentialsError: Credentials unusable, nothing was touched
            BucketProvisionError: Bucket step failed, table step skipped
            TableProvisionError: Table step failed
        """
        names = resource_names(request)
        result = ProvisioningResult()

        logger.info(
            "provisioning_started",
            region=request.region,
            environment=request.environment,
            bucket=names.bucket_name,
            table=names.table_name
        )

        caller = self.credentials.verify()
        if (
            request.naming is NamingScheme.ACCOUNT_ENVIRONMENT
            and caller.get("account_id")
            and caller["account_id"] != request.account_id_or_postfix
        ):
            logger.warning(
                "account_id_mismatch",
                requested=request.account_id_or_postfix,
                account_id=caller["account_id"]
            )

        try:
            result.bucket_status = self.bucket.ensure(names.bucket_name)
        except BucketProvisionError as e:
            e.result = result
            raise
        result.bucket_created_or_exists = True

        try:
            result.table_status = self.table.ensure(names.table_name)
        except TableProvisionError as e:
            e.result = result
            raise
        result.table_created_or_exists = True

        backend = BackendConfig(
            bucket=names.bucket_name,
            region=request.region,
            dynamodb_table=names.table_name
        )
        result.backend = backend
        result.backend_config = backend.render()

        logger.info(
            "provisioning_completed",
            bucket=names.bucket_name,
            bucket_status=result.bucket_status.value,
            table=names.table_name,
            table_status=result.table_status.value
        )

        return result
