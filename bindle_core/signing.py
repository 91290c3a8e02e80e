"""
bindle_core.signing
-------------------
Canonical cleartext construction and signature generation for invoices.

Cleartext format (lines joined by "\\n", no trailing newline):

    Matt Butcher <matt.butcher@example.com>     <- invoice.authors[0]
    mybindle                                    <- bindle name
    0.1.0                                       <- bindle version
    creator                                     <- role being signed for
    ~                                           <- separator
    e1706ab0a39ac88094b6d54a3f5cdba41fe5a901... <- parcel sha256, in invoice order
    098fa798779ac88094b6d54a3f5cdba41fe5a901...

The signing timestamp is not part of the cleartext, and the first author is
used no matter who signs.
"""

from __future__ import annotations
from .constants import CLEARTEXT_SEPARATOR
from .crypto import ed25519_sign
from .errors import AuthorNotPresentError, RoleMismatchError
from .invoice import Invoice, Signature
from .keys import SignatureKey
from .logger import get_logger
from .roles import Role, parse_role
from .utils import b64e, now_unix

log = get_logger("Bindle.Signing")


def generate_cleartext(invoice: Invoice, role) -> str:
    role = parse_role(role)
    if not invoice.authors:
        raise AuthorNotPresentError("")

    parts = [
        invoice.authors[0],
        invoice.bindle.name,
        invoice.bindle.version,
        role.value,
        CLEARTEXT_SEPARATOR,
    ]
    parts.extend(p.label.sha256 for p in invoice.parcels)
    return "\n".join(parts)


def generate_signature(
    invoice: Invoice,
    author: str,
    role,
    signing_key: SignatureKey,
    private_key: bytes,
) -> Signature:
    """
    Sign ``invoice`` as ``author`` for ``role`` and append the new signature.

    Raises InvalidRoleError, RoleMismatchError (key not provisioned for the
    role) or AuthorNotPresentError (author not listed on the invoice). Existing
    signatures are never touched. Returns the appended signature.
    """
    role = parse_role(role)
    if not signing_key.includes_role(role):
        raise RoleMismatchError(role, signing_key.roles)
    if author not in invoice.authors:
        raise AuthorNotPresentError(author)

    cleartext = generate_cleartext(invoice, role)
    at = now_unix()
    sig = ed25519_sign(private_key, cleartext.encode("utf-8"))

    signature = Signature(
        by=author,
        signature=b64e(sig),
        key=signing_key.key,
        role=role,
        at=at,
    )
    invoice.add_signature(signature)
    log.info(f"[SIGN] {invoice.name()} signed by {author!r} as {role.value}")
    return signature


def generate_creator_signature(invoice: Invoice, signing_key: SignatureKey, private_key: bytes) -> Signature:
    """Creator signature on behalf of the invoice's first author."""
    if not invoice.authors:
        raise AuthorNotPresentError("")
    return generate_signature(invoice, invoice.authors[0], Role.CREATOR, signing_key, private_key)
