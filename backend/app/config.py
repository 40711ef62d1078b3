"""
Application configuration using Pydantic settings.

Re-exports from the devconnector.config module so that backend code can
import settings relative to the app package.
"""

from devconnector.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
