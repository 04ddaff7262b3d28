# eightpass/password_notifier.py
"""
Reacts to the app password being written.

The derived key (never the password itself) is cached in memory and in
the OS keyring, so other components can check the unlock state.
"""

import hashlib
import hmac
import logging
import weakref
from typing import Optional

from .event_bus import EventBus
from .secure_storage import SecureStorage

logger = logging.getLogger(__name__)

GLOBAL_PASS_KEY = "global_pass_key"
KDF_ITERATIONS = 100_000


def derive_key(password: str, salt: str) -> str:
    """
    PBKDF2-HMAC-SHA256 of the password, hex encoded.
    The installation id is used as salt.
    """
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), KDF_ITERATIONS
    )
    return digest.hex()


class PasswordChangeNotifier:
    """
    Owned by AppSettings and called from its password setter.
    Keeps only a weak reference back to the settings.
    """

    def __init__(self, settings, secure_storage: Optional[SecureStorage] = None,
                 event_bus: Optional[EventBus] = None):
        self._settings = weakref.ref(settings)
        self.secure_storage = secure_storage if secure_storage is not None else SecureStorage()
        self.event_bus = event_bus
        self._derived_key: Optional[str] = None
        self._derived_from: Optional[str] = None

    @property
    def is_unlocked(self) -> bool:
        return self._derived_key is not None

    def on_password_entered(self):
        """
        Refreshes the derived key from the current password.
        Never raises: failures are logged and the caller carries on.
        """
        try:
            self._apply_password()
        except Exception as e:
            logger.error(f"Failed to handle password change: {e}", exc_info=True)

    def _apply_password(self):
        settings = self._settings()
        if settings is None:
            logger.warning("Settings already released, ignoring password change")
            return

        password = settings.password
        if password and self._derived_key is not None and password == self._derived_from:
            logger.debug("Password unchanged, keeping derived key")
        elif password:
            self._derived_key = derive_key(password, settings.instance_id)
            self._derived_from = password
            self.secure_storage.set_credential(GLOBAL_PASS_KEY, self._derived_key)
            logger.info("🔑 Password entered, derived key refreshed")
        else:
            self._derived_key = None
            self._derived_from = None
            self.secure_storage.delete_credential(GLOBAL_PASS_KEY)
            logger.info("Password cleared, derived key removed")

        if self.event_bus is not None:
            self.event_bus.password_entered.emit()

    def verify(self, candidate: str) -> bool:
        """
        Checks a candidate password against the derived key.
        A successful check unlocks the handler.

        Args:
            candidate: Password typed by the user
        Returns:
            True if the candidate matches the stored password.
        """
        settings = self._settings()
        if settings is None or not candidate:
            return False

        expected = self._derived_key or self.secure_storage.get_credential(GLOBAL_PASS_KEY)
        if not expected:
            return False

        if hmac.compare_digest(derive_key(candidate, settings.instance_id), expected):
            self._derived_key = expected
            self._derived_from = candidate
            return True
        return False

    def lock(self):
        """
        Drops the cached unlock state. The keyring copy is kept.
        """
        self._derived_key = None
        self._derived_from = None
        logger.debug("Global password handler locked")
