"""
bindle_core.keys
----------------
Key material model: a public signing key bound to an author label and the
roles it may sign for, plus the keyring that collects such keys.

A ``SignatureKey`` never carries its private half. ``generate_signature_key``
hands the private seed back separately and the caller decides where it lives.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple
from .constants import KEYRING_VERSION
from .crypto import ed25519_generate, ed25519_sign, ed25519_verify
from .errors import DecodingError
from .logger import get_logger
from .roles import Role, parse_role
from .utils import b64d, b64e

log = get_logger("Bindle.Keys")


@dataclass
class SignatureKey:
    label: str
    roles: List[Role]
    key: str                  # base64 Ed25519 public key
    label_signature: str = ""  # base64 self-signature over ``label``

    def __post_init__(self):
        self.roles = [parse_role(r) for r in self.roles]

    def includes_role(self, role) -> bool:
        value = role.value if isinstance(role, Role) else role
        return any(str(r) == value for r in self.roles)

    def public_key_bytes(self) -> bytes:
        return b64d(self.key, "public key")

    def verify_label(self) -> bool:
        """True if ``label_signature`` is this key's signature over ``label``."""
        if not self.label_signature:
            return False
        try:
            sig = b64d(self.label_signature, "label signature")
            return ed25519_verify(self.public_key_bytes(), sig, self.label.encode("utf-8"))
        except DecodingError:
            return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "roles": [r.value for r in self.roles],
            "key": self.key,
            "labelSignature": self.label_signature,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SignatureKey":
        return cls(
            label=data["label"],
            roles=[parse_role(r) for r in data.get("roles", [])],
            key=data["key"],
            label_signature=data.get("labelSignature", ""),
        )


@dataclass
class Keyring:
    version: str = KEYRING_VERSION
    keys: List[SignatureKey] = field(default_factory=list)

    def __iter__(self) -> Iterator[SignatureKey]:
        return iter(self.keys)

    def __len__(self) -> int:
        return len(self.keys)

    def add(self, key: SignatureKey) -> None:
        self.keys.append(key)

    def find(self, key_b64: str) -> Optional[SignatureKey]:
        """First key whose encoded public key equals ``key_b64``."""
        return next((k for k in self.keys if k.key == key_b64), None)

    def to_dict(self) -> Dict[str, Any]:
        # "key" is singular on the wire, one table per entry
        return {"version": self.version, "key": [k.to_dict() for k in self.keys]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Keyring":
        return cls(
            version=data.get("version", KEYRING_VERSION),
            keys=[SignatureKey.from_dict(k) for k in data.get("key", [])],
        )

    @classmethod
    def of(cls, keys: Iterable[SignatureKey]) -> "Keyring":
        return cls(keys=list(keys))


def generate_signature_key(author: str, role) -> Tuple[SignatureKey, bytes]:
    """
    Create a new Ed25519 key pair for ``author``, authorized for ``role``.

    The label signature binds the author string to this specific key.
    Returns ``(signature_key, private_seed)``.
    """
    role = parse_role(role)
    priv, pub = ed25519_generate()
    label_sig = ed25519_sign(priv, author.encode("utf-8"))

    sig_key = SignatureKey(
        label=author,
        roles=[role],
        key=b64e(pub),
        label_signature=b64e(label_sig),
    )
    log.info(f"[KEYGEN] generated {role.value} key for {author!r}")
    return sig_key, priv
