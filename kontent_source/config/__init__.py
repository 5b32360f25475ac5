"""
Configuration Management.

Configuration sources (in order of precedence):
1. Environment variables
2. .env file
3. Default values

Example:
    from kontent_source.config import get_settings

    settings = get_settings()
    project_id = settings.require_project_id()
"""

from kontent_source.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
