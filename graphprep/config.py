"""
graphprep configuration

Settings are loaded from:
1. Environment variables (prefixed with GRAPHPREP_)
2. A .env file in the working directory

Key settings:
- GRAPHPREP_LOG_LEVEL: Log level for CLI and server entry points (default: WARNING)
- GRAPHPREP_API_HOST / GRAPHPREP_API_PORT: Bind address for `graphprep serve`
- GRAPHPREP_JSON_INDENT: Indentation of JSON printed by the CLI and MCP tools
  (default: 2; 0 puts each value on its own line without indentation)
"""

import logging
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """graphprep configuration settings."""

    log_level: str = "WARNING"

    api_host: str = "127.0.0.1"
    api_port: int = 8765

    json_indent: int = 2

    model_config = SettingsConfigDict(
        env_prefix="GRAPHPREP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def log_level_value(self) -> int:
        """Numeric log level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


settings = Settings()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging on stderr for entry points."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
