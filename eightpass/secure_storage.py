# eightpass/secure_storage.py
"""
Secure credential management using the keyring library.
Holds secrets derived from the app password so they never land in the
plain settings store.
"""

import logging

import keyring
from keyring.errors import PasswordDeleteError

logger = logging.getLogger(__name__)

# Use a single, consistent service name for the application
KEYRING_SERVICE_NAME = "8Pass"


class SecureStorage:
    """A wrapper for the keyring library."""

    def __init__(self, service_name: str = KEYRING_SERVICE_NAME):
        self.service_name = service_name

    def set_credential(self, key: str, secret: str) -> bool:
        """
        Saves a credential to the OS secure vault.

        Args:
            key: The unique identifier (e.g., "global_pass_key")
            secret: The secret to store.
        Returns:
            True if the vault accepted the secret.
        """
        try:
            keyring.set_password(self.service_name, key, secret)
            logger.info(f"Securely stored credential for: {key}")
            return True
        except Exception as e:
            logger.error(f"Failed to store credential for {key}: {e}", exc_info=True)
            return False

    def get_credential(self, key: str) -> str | None:
        """
        Retrieves a credential from the OS secure vault.

        Args:
            key: The unique identifier (e.g., "global_pass_key")
        Returns:
            The stored secret or None if not found.
        """
        try:
            secret = keyring.get_password(self.service_name, key)
            if secret:
                logger.debug(f"Retrieved credential for: {key}")
            return secret
        except Exception as e:
            logger.error(f"Failed to retrieve credential for {key}: {e}", exc_info=True)
            return None

    def delete_credential(self, key: str):
        """
        Deletes a credential from the OS secure vault.

        Args:
            key: The unique identifier (e.g., "global_pass_key")
        """
        try:
            keyring.delete_password(self.service_name, key)
            logger.info(f"Deleted credential for: {key}")
        except PasswordDeleteError:
            logger.warning(f"No credential found to delete for: {key}")
        except Exception as e:
            logger.error(f"Failed to delete credential for {key}: {e}", exc_info=True)
