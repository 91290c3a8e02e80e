"""
bindle_core.verification
------------------------
Checks every signature on an invoice against a caller-supplied set of trusted
keys. All-or-nothing: the first signature that fails raises, and nothing on
the invoice is modified.

An invoice with no signatures passes. Policies such as "at least one approver
signature" are the caller's to enforce on top of this.
"""

from __future__ import annotations
from typing import Iterable, Union
from .crypto import ed25519_verify
from .errors import InvalidSignatureError, RoleMismatchError, UnknownKeyError
from .invoice import Invoice, Signature
from .keys import Keyring, SignatureKey
from .logger import get_logger
from .signing import generate_cleartext
from .utils import b64d

log = get_logger("Bindle.Verify")

TrustedKeys = Union[Keyring, Iterable[SignatureKey]]


def verify_signature(invoice: Invoice, sig: Signature, trusted: Keyring) -> None:
    key = trusted.find(sig.key)
    if key is None:
        log.warning(f"[VERIFY] {invoice.name()}: unknown key for signature by {sig.by!r}")
        raise UnknownKeyError(sig.key, sig.by)

    if not key.includes_role(sig.role):
        log.warning(f"[VERIFY] {invoice.name()}: key {key.label!r} not authorized as {sig.role.value}")
        raise RoleMismatchError(sig.role, key.roles)

    # a signed invoice always has authors; without them nothing can match
    if not invoice.authors:
        log.warning(f"[VERIFY] {invoice.name()}: invoice has no authors")
        raise InvalidSignatureError(sig.by, sig.role)

    cleartext = generate_cleartext(invoice, sig.role).encode("utf-8")
    pub = b64d(sig.key, "public key")
    raw_sig = b64d(sig.signature, "signature")

    if not ed25519_verify(pub, raw_sig, cleartext):
        log.warning(f"[VERIFY] {invoice.name()}: bad {sig.role.value} signature by {sig.by!r}")
        raise InvalidSignatureError(sig.by, sig.role)


def verify_signatures(invoice: Invoice, trusted_keys: TrustedKeys) -> None:
    """
    Raise on the first signature that cannot be trusted:

    - UnknownKeyError: the signature's key is not among ``trusted_keys``
    - RoleMismatchError: the trusted key is not authorized for the claimed role
    - InvalidSignatureError: the signature does not cover the invoice as it is now
    - DecodingError: key or signature is not valid base64 / Ed25519 material
    """
    trusted = trusted_keys if isinstance(trusted_keys, Keyring) else Keyring.of(trusted_keys)

    for sig in invoice.signatures:
        verify_signature(invoice, sig, trusted)

    log.debug(f"[VERIFY] {invoice.name()}: {len(invoice.signatures)} signature(s) ok")
