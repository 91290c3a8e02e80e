"""
bindle_core.crypto
------------------
Ed25519 primitives used for invoice signatures and key self-signatures.

Keys travel as raw bytes here: a 32-byte private seed (or the 64-byte
seed || public key form), 32-byte public keys and 64-byte signatures.
Base64 handling stays at the model layer.
"""

from __future__ import annotations
from typing import Tuple
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519
from .errors import DecodingError

# --------- Ed25519 (sign/verify) ----------
def ed25519_generate() -> Tuple[bytes, bytes]:
    sk = ed25519.Ed25519PrivateKey.generate()
    pk = sk.public_key()
    return sk.private_bytes_raw(), pk.public_bytes_raw()

def load_private_key(priv_raw: bytes) -> ed25519.Ed25519PrivateKey:
    # 64-byte form is seed || public key, as written by other bindle clients
    if len(priv_raw) == 64:
        priv_raw = priv_raw[:32]
    try:
        return ed25519.Ed25519PrivateKey.from_private_bytes(priv_raw)
    except ValueError as e:
        raise DecodingError(f"invalid Ed25519 private key: {e}") from e

def load_public_key(pub_raw: bytes) -> ed25519.Ed25519PublicKey:
    try:
        return ed25519.Ed25519PublicKey.from_public_bytes(pub_raw)
    except ValueError as e:
        raise DecodingError(f"invalid Ed25519 public key: {e}") from e

def public_key_for(priv_raw: bytes) -> bytes:
    return load_private_key(priv_raw).public_key().public_bytes_raw()

def ed25519_sign(priv_raw: bytes, data: bytes) -> bytes:
    return load_private_key(priv_raw).sign(data)

def ed25519_verify(pub_raw: bytes, sig: bytes, data: bytes) -> bool:
    pk = load_public_key(pub_raw)
    try:
        pk.verify(sig, data)
        return True
    except InvalidSignature:
        return False
