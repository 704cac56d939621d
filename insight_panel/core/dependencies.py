"""
FastAPI dependency injection module for the Insight Panel backend.

Key Dependencies Provided:
- get_settings_dependency: Returns the cached Settings singleton
- SettingsDep: Type alias for injecting Settings into endpoints

Usage Examples:
    @router.post("/panel")
    async def panel_view(request: PanelRequest, settings: SettingsDep) -> PanelView:
        ...

In tests the settings can be swapped without touching the environment:

    app.dependency_overrides[get_settings_dependency] = lambda: Settings(default_sensitivity=40)
"""

from typing import Annotated

from fastapi import Depends

from insight_panel.core.config import Settings, get_settings


def get_settings_dependency() -> Settings:
    """
    Return the Settings singleton instance.

    This is a thin wrapper around get_settings() to enable FastAPI's
    dependency override mechanism for testing.

    Returns:
        Settings: The cached Settings instance with all configuration values.
    """
    return get_settings()


# Usage: async def endpoint(settings: SettingsDep)
SettingsDep = Annotated[Settings, Depends(get_settings_dependency)]
