"""
bindle_core.keyring.local
-------------------------
Locations and file helpers for key material on the local machine.
"""

from __future__ import annotations
import os, sys
from pathlib import Path
from bindle_core.utils import b64d, b64e


def _user_config_dir() -> Path:
    if sys.platform == "win32" and os.getenv("APPDATA"):
        return Path(os.environ["APPDATA"])
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    if os.getenv("XDG_CONFIG_HOME"):
        return Path(os.environ["XDG_CONFIG_HOME"])
    return Path.home() / ".config"


def default_keyring_path() -> str:
    try:
        base = _user_config_dir() / "bindle"
    except RuntimeError:
        # no resolvable home directory
        base = Path(".bindle")
    return str(base / "keyring.toml")


def write_private_key(priv: bytes, path: str) -> None:
    """Write ``priv`` base64-encoded, readable by the owner only."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="ascii") as f:
        f.write(b64e(priv))


def read_private_key(path: str) -> bytes:
    with open(path, "r", encoding="ascii") as f:
        return b64d(f.read().strip(), "private key")
