"""
Core configuration module using Pydantic Settings.

This module defines the toolkit settings loaded from environment variables
prefixed with ``DDD_`` (or a ``.env`` file). Every setting has a default,
so importing the package never requires configuration.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Toolkit settings loaded from environment variables.

    Settings are validated using Pydantic with type hints.
    """

    model_config = SettingsConfigDict(
        env_prefix="DDD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Logging Configuration
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")
    log_file_enabled: bool = Field(default=False)
    log_file_path: str = Field(default="logs/ddd.log")
    log_file_max_bytes: int = Field(default=10485760, ge=1024)  # 10 MB
    log_file_backup_count: int = Field(default=5, ge=0)

    # -------------------------------------------------------------------------
    # Event Dispatcher
    # -------------------------------------------------------------------------
    event_dispatcher_max_workers: int = Field(
        default=0,
        ge=0,
        le=64,
        description="Worker threads for event delivery. 0 delivers synchronously."
    )
    event_dispatcher_max_dead_letters: int = Field(
        default=1000,
        ge=0,
        description="Listener failures kept for inspection. Oldest are dropped first."
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def is_dispatch_async(self) -> bool:
        """Check if event delivery is offloaded to worker threads."""
        return self.event_dispatcher_max_workers > 0


# Singleton instance of settings
settings = Settings()
