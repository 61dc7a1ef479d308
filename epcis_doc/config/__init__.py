from .settings import DocumentDefaults, Settings, settings

__all__ = ['DocumentDefaults', 'Settings', 'settings']
