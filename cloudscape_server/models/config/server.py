"""Server configuration models."""

import logging
from pathlib import Path

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_CONFIG_PATH = Path.home() / ".cloudscape-mcp" / "config.yaml"


class ServerConfig(BaseSettings):
    """MCP server configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CLOUDSCAPE_MCP_",
        env_file=".env",
        extra="ignore",
    )

    # Set by the installer in the host's MCP settings
    fastmcp_log_level: str | None = Field(default=None, alias="FASTMCP_LOG_LEVEL")

    server_name: str = "aws-cloudscape-mcp-server"
    server_version: str = "0.1.0"
    log_level: str | None = None
    log_file: Path | None = None
    catalog_path: Path | None = None

    @field_validator("log_level", "fastmcp_log_level")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        """Normalize log level names."""
        if v is None:
            return v
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def resolved_log_level(self) -> str:
        """Log level after applying CLOUDSCAPE_MCP_LOG_LEVEL, then FASTMCP_LOG_LEVEL."""
        return self.log_level or self.fastmcp_log_level or "INFO"

    @classmethod
    def load_from_file(cls, config_path: Path | None = None) -> "ServerConfig":
        """Load configuration from a YAML file, falling back to defaults."""
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}
            return cls(**config_data)
        except (yaml.YAMLError, ValidationError, TypeError) as e:
            logger.warning(f"Ignoring invalid configuration file {config_path}: {e}")
            return cls()


__all__ = ["ServerConfig", "LOG_LEVELS", "DEFAULT_CONFIG_PATH"]
