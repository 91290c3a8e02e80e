# bindle_core/keyring/providers/toml_provider.py

from __future__ import annotations
import os
from bindle_core.encoding import dumps_keyring, loads_keyring
from bindle_core.errors import KeyringNotFoundError
from bindle_core.keys import Keyring
from bindle_core.keyring.provider import KeyringStore
from bindle_core.logger import get_logger

log = get_logger("Bindle.Keyring.TOML")


class TomlKeyringStore(KeyringStore):
    """keyring.toml on disk, the format shared with other bindle clients."""
    name = "toml"

    def __init__(self, path: str):
        self.path = str(path)

    def load(self) -> Keyring:
        try:
            with open(self.path, "rb") as f:
                data = f.read()
        except FileNotFoundError as e:
            raise KeyringNotFoundError(f"keyring not found: {self.path}") from e
        keyring = loads_keyring(data)
        log.debug(f"[KEYRING] loaded {len(keyring)} key(s) from {self.path}")
        return keyring

    def save(self, keyring: Keyring) -> None:
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        # overwrite, owner read/write only
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(dumps_keyring(keyring))
        log.info(f"[KEYRING] saved {len(keyring)} key(s) to {self.path}")
