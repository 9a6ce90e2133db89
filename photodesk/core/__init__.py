"""Core app configuration, errors, security and database."""

from photodesk.core.config import get_settings, settings

__all__ = ["get_settings", "settings"]
