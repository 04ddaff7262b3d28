"""
8Pass settings layer.
Typed application settings over a persistent key-value store.
"""

__version__ = "2.0.0"

from .logging_handler import setup_logging, QtLogHandler
from .settings_manager import (
    KeyValueStore,
    QSettingsStore,
    MemoryStore,
    SettingsError,
    StoreError,
    default_store,
)
from .secure_storage import SecureStorage
from .event_bus import EventBus
from .password_notifier import PasswordChangeNotifier
from .app_settings import AppSettings, AnalyticsConsent

__all__ = [
    'setup_logging',
    'QtLogHandler',
    'KeyValueStore',
    'QSettingsStore',
    'MemoryStore',
    'SettingsError',
    'StoreError',
    'default_store',
    'SecureStorage',
    'EventBus',
    'PasswordChangeNotifier',
    'AppSettings',
    'AnalyticsConsent',
]
