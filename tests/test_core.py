import pytest
from bindle_core.crypto import ed25519_generate, ed25519_sign, ed25519_verify, public_key_for
from bindle_core.errors import DecodingError, UnknownKeyError
from bindle_core.keys import Keyring, generate_signature_key
from bindle_core.signing import generate_cleartext, generate_signature
from bindle_core.verification import verify_signatures


def test_sign_verify():
    priv, pub = ed25519_generate()
    sig = ed25519_sign(priv, b"hello")
    assert ed25519_verify(pub, sig, b"hello")
    assert not ed25519_verify(pub, sig, b"hello!")


def test_private_key_long_form_accepted():
    priv, pub = ed25519_generate()
    # seed || public key, as other bindle clients store it
    assert public_key_for(priv + pub) == pub
    assert ed25519_verify(pub, ed25519_sign(priv + pub, b"x"), b"x")


def test_bad_public_key_length():
    with pytest.raises(DecodingError):
        ed25519_verify(b"\x00" * 5, b"\x00" * 64, b"x")


def test_simple_invoice_scenario(simple_invoice):
    key, priv = generate_signature_key("Alice", "creator")

    generate_signature(simple_invoice, "Alice", "creator", key, priv)

    assert generate_cleartext(simple_invoice, "creator") == "Alice\nproj\n0.1.0\ncreator\n~\nabc123"
    verify_signatures(simple_invoice, [key])

    with pytest.raises(UnknownKeyError):
        verify_signatures(simple_invoice, [])


def test_round_trip_with_keyring(invoice, creator_key, approver_key):
    ckey, cpriv = creator_key
    akey, apriv = approver_key

    generate_signature(invoice, "Alice", "creator", ckey, cpriv)
    generate_signature(invoice, invoice.authors[1], "approver", akey, apriv)

    verify_signatures(invoice, Keyring.of([ckey, akey]))
