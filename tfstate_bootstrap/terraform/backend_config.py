"""Terraform S3 backend configuration block."""
from dataclasses import dataclass
from pathlib import Path

from ..utils.logger import get_logger

logger = get_logger(__name__)

STATE_KEY = "terraform/state"


@dataclass(frozen=True)
class BackendConfig:
    """Names Terraform needs to use the provisioned backend."""
    bucket: str
    region: str
    dynamodb_table: str
    key: str = STATE_KEY

    def render(self) -> str:
        """Render the `terraform { backend "s3" { ... } }` block."""
        return "\n".join([
            "terraform {",
            "  backend \"s3\" {",
            f"    bucket         = \"{self.bucket}\"",
            f"    key            = \"{self.key}\"",
            f"    region         = \"{self.region}\"",
            f"    dynamodb_table = \"{self.dynamodb_table}\"",
            "  }",
            "}",
        ]) + "\n"

    def write(self, path) -> Path:
        """Write the rendered block to `path`, creating parent directories.

        Returns:
            Path that was written
        """
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")

        logger.info("backend_config_written", path=str(output_path))
        return output_path
