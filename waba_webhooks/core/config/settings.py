"""
Settings for the WABA webhook service.

Simple, reliable environment variable configuration. Components never read the
global settings directly: they receive a PipelineSettings value at construction.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env file for local development - look in current working directory
load_dotenv(".env")

DEFAULT_QUALITY_UPDATE_QUEUE = "message-template-quality-update"


def _get_version_from_pyproject() -> str:
    """
    Read version from pyproject.toml file.

    Returns:
        Version string from pyproject.toml, or fallback version
    """
    current_path = Path(__file__)
    for parent in [current_path.parent, *current_path.parents]:
        pyproject_path = parent / "pyproject.toml"
        if pyproject_path.exists():
            try:
                with open(pyproject_path, "rb") as f:
                    pyproject_data = tomllib.load(f)
                    version = pyproject_data.get("project", {}).get("version")
                    if version:
                        return version
            except (OSError, tomllib.TOMLDecodeError):
                continue

    return "0.1.0"


@dataclass(frozen=True)
class PipelineSettings:
    """Resolved, immutable settings handed to the webhook pipeline components."""

    quality_update_queue_name: str = DEFAULT_QUALITY_UPDATE_QUEUE


class Settings:
    """Application settings with environment-based configuration."""

    def __init__(self):
        # ================================================================
        # Version & General Configuration
        # ================================================================
        self.version: str = _get_version_from_pyproject()
        self.port: int = int(os.getenv("PORT", "8000"))
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.log_dir: str = os.getenv("LOG_DIR", "./logs")

        # Development/Production detection
        self.environment: str = os.getenv("ENVIRONMENT", "DEV")

        # ================================================================
        # Queue Configuration
        # ================================================================
        # Environment form of aws.sqs.message.template.quality.update.queue.name
        self.quality_update_queue_name: str = os.getenv(
            "AWS_SQS_MESSAGE_TEMPLATE_QUALITY_UPDATE_QUEUE_NAME",
            DEFAULT_QUALITY_UPDATE_QUEUE,
        )

        # ================================================================
        # Redis Configuration (Optional)
        # ================================================================
        self.redis_url: str | None = os.getenv("REDIS_URL")
        self.redis_max_connections: int = int(os.getenv("REDIS_MAX_CONNECTIONS", "64"))

        self._validate_settings()

    def _validate_settings(self):
        """Validate settings values."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        self.log_level = self.log_level.upper()

        valid_environments = ["DEV", "PROD"]
        if self.environment.upper() not in valid_environments:
            self.environment = "DEV"  # Default fallback
        self.environment = self.environment.upper()

        if not self.quality_update_queue_name.strip():
            raise ValueError(
                "AWS_SQS_MESSAGE_TEMPLATE_QUALITY_UPDATE_QUEUE_NAME cannot be empty"
            )
        self.quality_update_queue_name = self.quality_update_queue_name.strip()

    def pipeline_settings(self) -> PipelineSettings:
        """Snapshot the values the webhook pipeline needs."""
        return PipelineSettings(quality_update_queue_name=self.quality_update_queue_name)

    @property
    def has_redis(self) -> bool:
        """Check if Redis is configured."""
        return self.redis_url is not None

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "DEV"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "PROD"


# Global settings instance
settings = Settings()
