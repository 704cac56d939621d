"""
Core infrastructure package for the Insight Panel backend.

Provides:
- Configuration management via pydantic-settings
- FastAPI dependency injection utilities

Re-exports key components so other modules can simply write:

    from insight_panel.core import get_settings, SettingsDep
"""

from insight_panel.core.config import Settings, get_settings
from insight_panel.core.dependencies import (
    get_settings_dependency,
    SettingsDep,
)

__all__ = [
    # Configuration management (from config.py)
    'Settings',
    'get_settings',
    # FastAPI dependency injection (from dependencies.py)
    'get_settings_dependency',
    'SettingsDep',
]
