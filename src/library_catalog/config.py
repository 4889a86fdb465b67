"""Runtime settings for the library catalog.

Settings only control diagnostics. The borrow limit and the scenario
output are fixed and never read from configuration.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogConfig(BaseSettings):
    """Settings loaded from ``LIBRARY_CATALOG_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="LIBRARY_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging regardless of log_level",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept lower-case level names from the environment."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def effective_log_level(self) -> str:
        """Level actually applied to the root logger."""
        return "DEBUG" if self.debug else self.log_level


class _ConfigStore:
    """Internal storage for the configuration singleton."""

    _instance: CatalogConfig | None = None


def get_config() -> CatalogConfig:
    """Get or create the process-wide configuration instance."""
    if _ConfigStore._instance is None:
        _ConfigStore._instance = CatalogConfig()
    return _ConfigStore._instance


def reset_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    _ConfigStore._instance = None
