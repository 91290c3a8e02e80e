import copy
from typing import Optional
from bindle_core.errors import KeyringNotFoundError
from bindle_core.keys import Keyring
from bindle_core.keyring.provider import KeyringStore


class InMemoryKeyringStore(KeyringStore):
    name = "memory"

    def __init__(self, keyring: Optional[Keyring] = None):
        self._keyring = copy.deepcopy(keyring)

    # copies keep callers from mutating the stored value in place
    def load(self) -> Keyring:
        if self._keyring is None:
            raise KeyringNotFoundError("no keyring has been saved")
        return copy.deepcopy(self._keyring)

    def save(self, keyring: Keyring) -> None:
        self._keyring = copy.deepcopy(keyring)
