"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Request parameter names are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from restws.core.constants import (
    REPRESENTATION_CUSTOM_PREFIX,
    REQUEST_PROPERTY_FOR_REPRESENTATION,
    REQUEST_PROPERTY_FOR_SEARCH_ID,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; validate_request_parameters rejects
    combinations that would make representation or search selection
    ambiguous.
    """

    # App
    app_name: str = "restws"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/ws/rest/v1"

    # Platform version search handlers are matched against (supported_versions)
    platform_version: str = "1.9.0"

    # Request parameters
    search_selector_parameter: str = REQUEST_PROPERTY_FOR_SEARCH_ID
    representation_parameter: str = REQUEST_PROPERTY_FOR_REPRESENTATION
    custom_representation_prefix: str = REPRESENTATION_CUSTOM_PREFIX
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RESTWS_",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_request_parameters(self) -> "Settings":
        """Validate reserved request parameter names.

        - Selector and representation parameters must be non-empty and distinct.
        - Custom representation prefix must be non-empty (otherwise every token is custom).
        - Log level must be a standard logging level name.
        """
        if not self.search_selector_parameter.strip():
            raise ValueError("RESTWS_SEARCH_SELECTOR_PARAMETER must not be empty")
        if not self.representation_parameter.strip():
            raise ValueError("RESTWS_REPRESENTATION_PARAMETER must not be empty")
        if self.search_selector_parameter == self.representation_parameter:
            raise ValueError(
                "Search selector and representation parameters must differ, "
                f"both are {self.search_selector_parameter!r}"
            )
        if not self.custom_representation_prefix:
            raise ValueError("RESTWS_CUSTOM_REPRESENTATION_PREFIX must not be empty")
        if not self.platform_version.strip():
            raise ValueError("RESTWS_PLATFORM_VERSION must not be empty")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"RESTWS_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
