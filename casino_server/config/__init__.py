from .settings import Settings, settings, load_settings

__all__ = ["Settings", "settings", "load_settings"]
