from collections import Counter

import keyring
import pytest
from keyring.backend import KeyringBackend
from keyring.errors import PasswordDeleteError

from eightpass.settings_manager import MemoryStore


class InMemoryKeyring(KeyringBackend):
    priority = 1

    def __init__(self):
        super().__init__()
        self.passwords = {}

    def get_password(self, service, username):
        return self.passwords.get((service, username))

    def set_password(self, service, username, password):
        self.passwords[(service, username)] = password

    def delete_password(self, service, username):
        try:
            del self.passwords[(service, username)]
        except KeyError:
            raise PasswordDeleteError(username)


class CountingStore(MemoryStore):
    """MemoryStore that records every mutation per key."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.mutations = Counter()

    def set(self, key, value):
        self.mutations[key] += 1
        super().set(key, value)

    def remove(self, key):
        self.mutations[key] += 1
        super().remove(key)


@pytest.fixture(autouse=True)
def memory_keyring():
    backend = InMemoryKeyring()
    keyring.set_keyring(backend)
    return backend


@pytest.fixture
def store():
    return CountingStore()
