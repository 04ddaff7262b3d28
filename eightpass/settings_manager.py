# eightpass/settings_manager.py
"""
Persistent string key-value stores behind the typed settings facade.
The default store is QSettings, the same backend the desktop app has
always used, so existing installations keep their values.
"""

import os
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from PyQt6.QtCore import QSettings

logger = logging.getLogger(__name__)

# Application constants
APP_NAME = "8Pass"
APP_ORGANIZATION = "8Pass"

# Points the default store at an INI file instead of the native location
SETTINGS_FILE_ENV = "EIGHTPASS_SETTINGS_FILE"


class SettingsError(Exception):
    """Base class for settings errors."""


class StoreError(SettingsError):
    """Raised when a store cannot persist its pending changes."""


class KeyValueStore(ABC):
    """
    A persistent mapping from string keys to string values.
    Implementations must raise from save() instead of failing silently.
    """

    @abstractmethod
    def contains(self, key: str) -> bool:
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Returns the stored value, or None if the key is missing.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str):
        pass

    @abstractmethod
    def remove(self, key: str):
        pass

    @abstractmethod
    def save(self):
        """
        Durably persists all pending changes.
        """
        pass


class QSettingsStore(KeyValueStore):
    """
    KeyValueStore backed by QSettings.
    Values are always read back as str, whatever the native format stored.
    """

    def __init__(self, qsettings: Optional[QSettings] = None):
        self.qsettings = qsettings if qsettings is not None else QSettings(APP_ORGANIZATION, APP_NAME)

    @classmethod
    def from_file(cls, path: str) -> "QSettingsStore":
        """
        Opens (or creates on first save) an INI file store at the given path.
        """
        return cls(QSettings(str(path), QSettings.Format.IniFormat))

    def contains(self, key: str) -> bool:
        return self.qsettings.contains(key)

    def get(self, key: str) -> Optional[str]:
        if not self.qsettings.contains(key):
            return None
        return self.qsettings.value(key, "", type=str)

    def set(self, key: str, value: str):
        self.qsettings.setValue(key, value)

    def remove(self, key: str):
        self.qsettings.remove(key)

    def save(self):
        self.qsettings.sync()
        status = self.qsettings.status()
        if status != QSettings.Status.NoError:
            raise StoreError(f"Failed to save settings to {self.qsettings.fileName()}: {status.name}")
        logger.debug(f"Settings synced to {self.qsettings.fileName()}")

    def get_qsettings(self) -> QSettings:
        """
        Provides direct access to the underlying QSettings object.
        """
        return self.qsettings


class MemoryStore(KeyValueStore):
    """
    In-memory KeyValueStore. Nothing survives the process; save() is a no-op
    apart from counting, which makes it handy for tests and dry runs.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})
        self.save_count = 0

    def contains(self, key: str) -> bool:
        return key in self.data

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str):
        self.data[key] = value

    def remove(self, key: str):
        self.data.pop(key, None)

    def save(self):
        self.save_count += 1


def default_store() -> KeyValueStore:
    """
    Returns the platform-default store.
    Honors EIGHTPASS_SETTINGS_FILE when set.
    """
    path = os.environ.get(SETTINGS_FILE_ENV)
    if path:
        logger.info(f"Using settings file from {SETTINGS_FILE_ENV}: {path}")
        return QSettingsStore.from_file(path)
    return QSettingsStore()
