from .settings import get_settings, settings

__all__ = ["get_settings", "settings"]
