# bindle_core/keyring/provider.py

from __future__ import annotations
from bindle_core.constants import KEYRING_VERSION
from bindle_core.errors import KeyringNotFoundError
from bindle_core.keys import Keyring, SignatureKey


class KeyringStore:
    """
    Durable home for a Keyring. The signing engine never talks to a store
    directly: callers load() before verifying and save() after key generation.

    Load-then-save is not locked; exclusive access is the caller's problem.
    """
    name: str = "base"

    def load(self) -> Keyring:
        """Return the stored keyring, or raise KeyringNotFoundError."""
        raise NotImplementedError

    def save(self, keyring: Keyring) -> None:
        raise NotImplementedError

    def add_key(self, key: SignatureKey) -> Keyring:
        """Append ``key`` to the stored keyring, creating the keyring if needed."""
        try:
            keyring = self.load()
        except KeyringNotFoundError:
            keyring = Keyring(version=KEYRING_VERSION, keys=[])
        keyring.add(key)
        self.save(keyring)
        return keyring
