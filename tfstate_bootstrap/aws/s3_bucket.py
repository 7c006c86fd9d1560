"""S3 bucket that holds the Terraform state files."""
from botocore.exceptions import BotoCoreError, ClientError

from ..errors import BucketProvisionError
from ..models import ResourceStatus
from ..utils.logger import get_logger

logger = get_logger(__name__)


class StateBucket:
    """Create-or-detect a versioned S3 bucket in one region."""

    def __init__(self, s3_client, region: str):
        """Initialize the bucket handler.

        Args:
            s3_client: boto3 S3 client
            region: Region the bucket is created in
        """
        self.s3_client = s3_client
        self.region = region

    def ensure(self, bucket_name: str) -> ResourceStatus:
        """Create the bucket, or detect that it already exists.

        Args:
            bucket_name: Bucket to provision

        Returns:
            ResourceStatus.CREATED or ResourceStatus.EXISTING

        Raises:
            BucketProvisionError: Creation failed and the bucket does not exist
        """
        logger.info("s3_bucket_creating", bucket=bucket_name, region=self.region)

        try:
            self._create(bucket_name)
        except (ClientError, BotoCoreError) as create_error:
            logger.warning(
                "s3_bucket_creation_failed",
                bucket=bucket_name,
                error=str(create_error)
            )

            if self.exists(bucket_name):
                logger.info(
                    "s3_bucket_already_exists",
                    bucket=bucket_name,
                    status="no new bucket created"
                )
                return ResourceStatus.EXISTING

            logger.error("s3_bucket_not_found_after_failure", bucket=bucket_name)
            raise BucketProvisionError(
                f"Failed to create S3 bucket '{bucket_name}' and it does not appear to exist. "
                f"Check your AWS credentials and permissions. ({create_error})"
            ) from create_error

        logger.info("s3_bucket_created", bucket=bucket_name)
        self.enable_versioning(bucket_name)
        return ResourceStatus.CREATED

    def _create(self, bucket_name: str) -> None:
        # us-east-1 rejects an explicit LocationConstraint
        if self.region == 'us-east-1':
            self.s3_client.create_bucket(Bucket=bucket_name)
        else:
            self.s3_client.create_bucket(
                Bucket=bucket_name,
                CreateBucketConfiguration={'LocationConstraint': self.region}
            )

    def enable_versioning(self, bucket_name: str) -> bool:
        """Turn on object versioning. Failure is only a warning.

        Returns:
            True if versioning was enabled
        """
        try:
            self.s3_client.put_bucket_versioning(
                Bucket=bucket_name,
                VersioningConfiguration={'Status': 'Enabled'}
            )
        except (ClientError, BotoCoreError) as e:
            logger.warning(
                "s3_bucket_versioning_failed",
                bucket=bucket_name,
                error=str(e),
                hint="Versioning is recommended for production state buckets"
            )
            return False

        logger.info("s3_bucket_versioning_enabled", bucket=bucket_name)
        return True

    def exists(self, bucket_name: str) -> bool:
        """Check whether the bucket exists and is reachable with these credentials."""
        try:
            self.s3_client.head_bucket(Bucket=bucket_name)
            return True
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', '')
            logger.debug("s3_bucket_probe_failed", bucket=bucket_name, error_code=error_code)
            return False
        except BotoCoreError as e:
            logger.debug("s3_bucket_probe_failed", bucket=bucket_name, error=str(e))
            return False
