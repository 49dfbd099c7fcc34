"""Configuration models for Cloudscape Server."""

from cloudscape_server.models.config.server import *

__all__ = ["ServerConfig", "LOG_LEVELS", "DEFAULT_CONFIG_PATH"]
