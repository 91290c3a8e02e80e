# bindle_core/keyring/__init__.py

from .provider import KeyringStore
from .providers.memory_provider import InMemoryKeyringStore
from .providers.sqlite_provider import SQLiteKeyringStore
from .providers.toml_provider import TomlKeyringStore
from .local import default_keyring_path, read_private_key, write_private_key
import os


def load_keyring_store(config: dict | None = None) -> KeyringStore:
    """
    Pick the keyring backend from config or environment.

        - toml (default): BINDLE_KEYRING_PATH, else the per-user keyring.toml
        - sqlite: BINDLE_KEYRING_DB
        - memory
    """
    config = config or {}
    provider = config.get("provider") or os.getenv("BINDLE_KEYRING_PROVIDER", "toml")

    if provider == "memory":
        return InMemoryKeyringStore()

    if provider == "toml":
        path = config.get("path") or os.getenv("BINDLE_KEYRING_PATH") or default_keyring_path()
        return TomlKeyringStore(path)

    if provider == "sqlite":
        db_path = config.get("sqlite_path") or os.getenv("BINDLE_KEYRING_DB", "db/keyring.db")
        return SQLiteKeyringStore(db_path)

    raise ValueError(f"Unknown keyring provider: {provider}")


__all__ = [
    "KeyringStore",
    "InMemoryKeyringStore",
    "SQLiteKeyringStore",
    "TomlKeyringStore",
    "default_keyring_path",
    "load_keyring_store",
    "read_private_key",
    "write_private_key",
]
