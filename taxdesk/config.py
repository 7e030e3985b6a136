"""
config.py — TaxDesk settings.

Usage:
    from taxdesk.config import settings
    print(settings.upcoming_window_days)

Import the module-level singleton directly; do not build Settings per call.
"""
import logging
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s — %(message)s"

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TAXDESK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore any extra env vars
    )

    # --- Application ---
    debug: bool = False
    log_level: str = "INFO"
    app_version: str = "0.1.0"

    # --- Dashboard ---
    # Pending compliance items due within this many days count as upcoming
    upcoming_window_days: int = Field(default=7, ge=0)
    recent_tasks_limit: int = Field(default=5, ge=1)

    @property
    def effective_log_level(self) -> int:
        """DEBUG when debug is on, otherwise the named log_level (INFO if unknown)."""
        if self.debug:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def configure_logging(config: Optional[Settings] = None) -> None:
    """Configure root logging once, before anything else logs."""
    config = settings if config is None else config
    logging.basicConfig(level=config.effective_log_level, format=LOG_FORMAT)
    logger.info("TaxDesk v%s logging configured", config.app_version)


# Module-level singleton — import this throughout the codebase
settings = Settings()
