"""Configuration management using Pydantic settings."""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # AWS session
    aws_profile: Optional[str] = None

    # LocalStack
    localstack_endpoint: Optional[str] = None
    use_localstack: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "human"

    @property
    def is_local_environment(self) -> bool:
        """Check if running against LocalStack."""
        return self.use_localstack and self.localstack_endpoint is not None


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
