"""
Settings and environment management module for the Insight Panel backend.

This module provides centralized configuration management using pydantic-settings,
which automatically loads settings from environment variables and .env files.

Key Features:
- Environment variable validation and type coercion
- Sensible defaults for development
- Singleton pattern via @lru_cache for efficient access
- Panel option defaults used when the host omits or mangles a value

Environment Variables:
- APP_NAME: Display name reported by the API (default: Insight Panel API)
- LOG_LEVEL: Root logging level (default: INFO)
- CORS_ORIGINS: JSON list of allowed dashboard origins
- DEFAULT_INSIGHT_MODE: Insight mode used when the host sends none (default: balanced)
- DEFAULT_SENSITIVITY: Sensitivity used when the host value is not a finite number (default: 60)

Usage:
    from insight_panel.core.config import get_settings

    settings = get_settings()
    mode = settings.default_insight_mode
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The class inherits from pydantic-settings BaseSettings which provides:
    - Automatic loading from environment variables (case-insensitive)
    - Support for .env file loading
    - Type validation and coercion
    - Default values for optional settings

    Attributes:
        app_name: Name reported by the root endpoint and OpenAPI title.
        log_level: Logging level applied by logging.basicConfig at startup.
        cors_origins: Origins allowed to call the API (dashboard dev servers).
        default_insight_mode: Fallback insight mode for missing/unknown options.
        default_sensitivity: Fallback sensitivity for missing/unparseable options.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',  # Ignore extra environment variables not defined in this class
        case_sensitive=False,
    )

    # =========================================================================
    # Service settings
    # =========================================================================

    app_name: str = 'Insight Panel API'

    log_level: str = 'INFO'

    # Dashboard host dev server origins
    cors_origins: List[str] = [
        'http://localhost:3000',
        'http://127.0.0.1:3000',
    ]

    # =========================================================================
    # Panel option defaults
    # These mirror the defaults registered by the panel option builder.
    # =========================================================================

    # One of: safe, balanced, aggressive
    default_insight_mode: str = 'balanced'

    # Nominal range is 0-100; the engine does not clamp it
    default_sensitivity: float = 60.0


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Returns:
        Settings: The cached settings instance.

    Note:
        To refresh settings in tests, clear the cache:
        >>> get_settings.cache_clear()
    """
    return Settings()
