"""
bindle_core.errors
------------------
Exception hierarchy for signing, verification and keyring persistence.

Every signing/verification failure is local and non-retriable. Callers should
treat any ``SignatureError`` as "do not trust this invoice".
"""

from __future__ import annotations


class SignatureError(Exception):
    pass


class InvalidRoleError(SignatureError):
    """Role string outside the closed role set."""

    def __init__(self, role):
        self.role = role
        super().__init__(f"invalid role: {role!r}")


class RoleMismatchError(SignatureError):
    """Key is not authorized for the requested or claimed role."""

    def __init__(self, role, key_roles=()):
        self.role = role
        self.key_roles = tuple(key_roles)
        allowed = ", ".join(str(r) for r in self.key_roles) or "none"
        super().__init__(f"key is not authorized for role {str(role)!r} (allowed: {allowed})")


class AuthorNotPresentError(SignatureError):
    def __init__(self, author: str):
        self.author = author
        super().__init__(f"author {author!r} is not listed in the invoice authors")


class UnknownKeyError(SignatureError):
    def __init__(self, key_b64: str, by: str = ""):
        self.key = key_b64
        self.by = by
        super().__init__(f"signature by {by!r} uses a key that is not in the trusted key set")


class InvalidSignatureError(SignatureError):
    def __init__(self, by: str = "", role=None):
        self.by = by
        self.role = role
        super().__init__(f"signature by {by!r} for role {str(role)!r} does not match the invoice")


class DecodingError(SignatureError):
    """Malformed base64 payload for a key or signature."""
    pass


# --------- Keyring persistence ----------
class KeyringError(Exception):
    pass


class KeyringNotFoundError(KeyringError, FileNotFoundError):
    pass
