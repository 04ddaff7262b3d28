# eightpass/app_settings.py
"""
Typed application settings on top of a string key-value store.

Every property is a thin encoding layer over get()/set(). Booleans are
stored as "1"/"0", counters as decimal strings. A missing key is never an
error, each property defines what absence means.
"""

import logging
import re
import threading
import uuid
from enum import Enum
from typing import Optional, Union

from .event_bus import EventBus
from .password_notifier import PasswordChangeNotifier
from .secure_storage import SecureStorage
from .settings_manager import KeyValueStore, default_store

logger = logging.getLogger(__name__)

# Persisted key names, shared with existing installations
KEY_ANALYTICS = "Analytics"
KEY_HIDE_BIN = "HideRecycleBin"
KEY_INSTANCE_ID = "InstanceId"
KEY_PASSWORD = "Password"
KEY_TOAST_SHOWNS = "ToastShowns"
KEY_USE_INT_BROWSER = "UseIntegratedBrowser"
KEY_SEARCHINPW = "SearchInPW"
KEY_SYNC_TOAST = "SyncToast"
KEY_AUTOUPDATE = "AutoUpdate"
KEY_AUWLAN = "AutoUpdateWLAN"

# ASCII digits only, no underscores
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


class AnalyticsConsent(Enum):
    """
    Whether the user agreed to analytics collection.
    UNDECIDED is a state of its own, not a falsy DENIED.
    """
    UNDECIDED = ""
    ALLOWED = "1"
    DENIED = "0"

    @classmethod
    def from_value(cls, value: Union["AnalyticsConsent", bool, None]) -> "AnalyticsConsent":
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.UNDECIDED
        if isinstance(value, bool):
            return cls.ALLOWED if value else cls.DENIED
        raise TypeError(f"Expected AnalyticsConsent, bool or None, got {type(value).__name__}")


def _flag(value: bool) -> str:
    return "1" if value else "0"


class AppSettings:
    """
    Typed facade over a KeyValueStore.

    Use AppSettings.instance() for the process-wide object, or construct one
    and pass it around explicitly.
    """

    _instance: Optional["AppSettings"] = None
    _instance_lock = threading.Lock()

    def __init__(self, store: KeyValueStore, event_bus: Optional[EventBus] = None,
                 secure_storage: Optional[SecureStorage] = None):
        """
        Binds the store and provisions the installation id on first use.

        Args:
            store: Backing KeyValueStore
            event_bus: Optional EventBus notified about writes
            secure_storage: Vault for the derived password key

        Raises:
            ValueError: if store is None
        """
        if store is None:
            raise ValueError("store must not be None")

        self._store = store
        self._lock = threading.RLock()
        self.event_bus = event_bus
        self._global_pass = PasswordChangeNotifier(self, secure_storage, event_bus)

        if not self._store.contains(KEY_INSTANCE_ID):
            self._instance_id = uuid.uuid4().hex
            self._store.set(KEY_INSTANCE_ID, self._instance_id)
            self._store.save()
            logger.info(f"Provisioned new instance id {self._instance_id}")
        else:
            self._instance_id = self._store.get(KEY_INSTANCE_ID)

    @classmethod
    def instance(cls) -> "AppSettings":
        """
        Gets the cached instance, creating it on the default store first.
        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls(default_store(), EventBus())
        return cls._instance

    # --- Generic key access ---

    def get(self, key: str) -> Optional[str]:
        """
        Returns the raw stored value, or None if the key is missing.
        """
        with self._lock:
            return self._store.get(key)

    def set(self, key: str, value: Optional[str]):
        """
        Writes a raw value and saves, unless it equals the stored one.
        None removes the key.
        """
        with self._lock:
            if value is None:
                if not self._store.contains(key):
                    return
                self._store.remove(key)
            elif not self._store.contains(key):
                self._store.set(key, value)
            elif self._store.get(key) != value:
                self._store.set(key, value)
            else:
                return

            self._store.save()

        logger.debug(f"Setting written: {key}")
        if self.event_bus is not None:
            self.event_bus.settings_changed.emit(key)

    def __getitem__(self, key: str) -> Optional[str]:
        return self.get(key)

    def __setitem__(self, key: str, value: Optional[str]):
        self.set(key, value)

    # --- Identity ---

    @property
    def store(self) -> KeyValueStore:
        return self._store

    @property
    def instance_id(self) -> str:
        """The 8Pass installation id."""
        return self._instance_id

    @property
    def global_pass(self) -> PasswordChangeNotifier:
        """The handler notified whenever the password is written."""
        return self._global_pass

    # --- Typed properties ---

    @property
    def allow_analytics(self) -> AnalyticsConsent:
        value = self.get(KEY_ANALYTICS)
        if not value:
            return AnalyticsConsent.UNDECIDED
        return AnalyticsConsent.ALLOWED if value == "1" else AnalyticsConsent.DENIED

    @allow_analytics.setter
    def allow_analytics(self, value: Union[AnalyticsConsent, bool, None]):
        self.set(KEY_ANALYTICS, AnalyticsConsent.from_value(value).value)

    @property
    def hide_recycle_bin(self) -> bool:
        return self.get(KEY_HIDE_BIN) == "1"

    @hide_recycle_bin.setter
    def hide_recycle_bin(self, value: bool):
        self.set(KEY_HIDE_BIN, _flag(value))

    @property
    def password(self) -> Optional[str]:
        """The password to open 8Pass."""
        return self.get(KEY_PASSWORD)

    @password.setter
    def password(self, value: Optional[str]):
        self.set(KEY_PASSWORD, value)
        self._global_pass.on_password_entered()

    @property
    def toast_shown_count(self) -> int:
        """
        Number of times the toast was shown.
        A malformed stored value raises ValueError.
        """
        value = self.get(KEY_TOAST_SHOWNS)
        if value is None:
            return 0
        text = value.strip()
        if not _DECIMAL_RE.fullmatch(text):
            raise ValueError(f"Invalid {KEY_TOAST_SHOWNS} value: {value!r}")
        return int(text)

    @toast_shown_count.setter
    def toast_shown_count(self, value: int):
        self.set(KEY_TOAST_SHOWNS, str(int(value)))

    @property
    def use_integrated_browser(self) -> bool:
        """Open tapped URLs in the integrated browser."""
        value = self.get(KEY_USE_INT_BROWSER)
        return value is None or value == "1"

    @use_integrated_browser.setter
    def use_integrated_browser(self, value: bool):
        self.set(KEY_USE_INT_BROWSER, _flag(value))

    @property
    def search_in_pw(self) -> bool:
        value = self.get(KEY_SEARCHINPW)
        return value is None or value == "1"

    @search_in_pw.setter
    def search_in_pw(self, value: bool):
        self.set(KEY_SEARCHINPW, _flag(value))

    @property
    def sync_toast(self) -> bool:
        value = self.get(KEY_SYNC_TOAST)
        return value is None or value == "1"

    @sync_toast.setter
    def sync_toast(self, value: bool):
        self.set(KEY_SYNC_TOAST, _flag(value))

    @property
    def auto_update(self) -> bool:
        return self.get(KEY_AUTOUPDATE) == "1"

    @auto_update.setter
    def auto_update(self, value: bool):
        self.set(KEY_AUTOUPDATE, _flag(value))

    @property
    def auto_update_wlan(self) -> bool:
        return self.get(KEY_AUWLAN) == "1"

    @auto_update_wlan.setter
    def auto_update_wlan(self, value: bool):
        self.set(KEY_AUWLAN, _flag(value))
