"""
bindle_core
===========
Signing and verification for bindle invoices.

Provides:
- Invoice model and TOML wire codec
- Ed25519 signature keys bound to an author and a closed set of roles
- Canonical cleartext, signature generation and multi-party verification
- Pluggable keyring persistence (TOML file default, SQLite, memory)
- A thin HTTP client for exchanging invoices with a bindle server
"""

from .errors import (
    AuthorNotPresentError,
    DecodingError,
    InvalidRoleError,
    InvalidSignatureError,
    KeyringError,
    KeyringNotFoundError,
    RoleMismatchError,
    SignatureError,
    UnknownKeyError,
)
from .invoice import BindleSpec, Condition, Group, Invoice, Label, Parcel, Signature, new_parcel
from .keys import Keyring, SignatureKey, generate_signature_key
from .roles import Role, parse_role
from .signing import generate_cleartext, generate_creator_signature, generate_signature
from .verification import verify_signatures

__all__ = [
    "AuthorNotPresentError",
    "BindleSpec",
    "Condition",
    "DecodingError",
    "Group",
    "InvalidRoleError",
    "InvalidSignatureError",
    "Invoice",
    "Keyring",
    "KeyringError",
    "KeyringNotFoundError",
    "Label",
    "Parcel",
    "Role",
    "RoleMismatchError",
    "Signature",
    "SignatureError",
    "SignatureKey",
    "UnknownKeyError",
    "generate_cleartext",
    "generate_creator_signature",
    "generate_signature",
    "generate_signature_key",
    "new_parcel",
    "parse_role",
    "verify_signatures",
]
