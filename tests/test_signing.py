import pytest
from bindle_core.errors import AuthorNotPresentError, InvalidRoleError, RoleMismatchError
from bindle_core.invoice import BindleSpec, Invoice
from bindle_core.keys import generate_signature_key
from bindle_core.roles import Role
from bindle_core.signing import generate_cleartext, generate_creator_signature, generate_signature
from bindle_core.utils import b64d
from bindle_core.verification import verify_signatures


def test_cleartext_layout(invoice):
    lines = generate_cleartext(invoice, "approver").split("\n")

    assert lines[:5] == ["Alice", "example.com/proj", "0.1.0", "approver", "~"]
    assert lines[5:] == [p.label.sha256 for p in invoice.parcels]


def test_cleartext_is_deterministic(invoice):
    first = generate_cleartext(invoice, Role.HOST)
    assert all(generate_cleartext(invoice, "host") == first for _ in range(5))
    assert not first.endswith("\n")


def test_cleartext_without_parcels():
    inv = Invoice(bindle=BindleSpec(name="empty", version="1.0.0", authors=["Alice"]))
    assert generate_cleartext(inv, "creator") == "Alice\nempty\n1.0.0\ncreator\n~"


def test_cleartext_always_uses_first_author(invoice):
    # Bob signs, but the metadata line stays Alice
    assert generate_cleartext(invoice, "approver").startswith("Alice\n")


def test_signature_fields(invoice, creator_key):
    key, priv = creator_key

    sig = generate_signature(invoice, "Alice", "creator", key, priv)

    assert invoice.signatures == (sig,)
    assert sig.by == "Alice"
    assert sig.role is Role.CREATOR
    assert sig.key == key.key
    assert len(b64d(sig.signature)) == 64
    assert sig.at > 0


def test_role_enforcement(invoice, approver_key):
    key, priv = approver_key
    bob = invoice.authors[1]

    with pytest.raises(RoleMismatchError):
        generate_signature(invoice, bob, "creator", key, priv)
    assert invoice.signatures == ()

    generate_signature(invoice, bob, "approver", key, priv)
    verify_signatures(invoice, [key])


def test_invalid_role(invoice, creator_key):
    key, priv = creator_key
    with pytest.raises(InvalidRoleError):
        generate_signature(invoice, "Alice", "owner", key, priv)
    with pytest.raises(InvalidRoleError):
        generate_signature(invoice, "Alice", "Creator", key, priv)


def test_author_must_be_listed(invoice, creator_key):
    key, priv = creator_key
    with pytest.raises(AuthorNotPresentError):
        generate_signature(invoice, "Mallory", "creator", key, priv)
    assert invoice.signatures == ()


def test_signing_is_append_only(invoice, creator_key, approver_key):
    ckey, cpriv = creator_key
    akey, apriv = approver_key

    first = generate_signature(invoice, "Alice", "creator", ckey, cpriv)
    second = generate_signature(invoice, invoice.authors[1], "approver", akey, apriv)
    third = generate_signature(invoice, "Alice", "creator", ckey, cpriv)

    assert invoice.signatures == (first, second, third)


def test_creator_signature_uses_first_author(invoice, creator_key):
    key, priv = creator_key

    sig = generate_creator_signature(invoice, key, priv)

    assert sig.by == "Alice"
    assert sig.role is Role.CREATOR
    verify_signatures(invoice, [key])


def test_creator_signature_requires_authors(creator_key):
    key, priv = creator_key
    inv = Invoice(bindle=BindleSpec(name="anon", version="1.0.0"))
    with pytest.raises(AuthorNotPresentError):
        generate_creator_signature(inv, key, priv)


def test_sign_logs(invoice, creator_key, caplog):
    key, priv = creator_key
    generate_signature(invoice, "Alice", "creator", key, priv)
    assert "[SIGN] example.com/proj/0.1.0" in caplog.text
    assert priv.hex() not in caplog.text


def test_multi_role_key(invoice):
    key, priv = generate_signature_key("Alice", "creator")
    key.roles.append(Role.HOST)

    generate_signature(invoice, "Alice", "host", key, priv)
    generate_signature(invoice, "Alice", "creator", key, priv)
    verify_signatures(invoice, [key])
