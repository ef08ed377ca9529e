"""Configuración centralizada."""
from exampulse.shared.config.settings import settings, Settings

__all__ = ["settings", "Settings"]
