import pytest
from bindle_core.invoice import BindleSpec, Invoice, Label, Parcel, new_parcel
from bindle_core.keys import generate_signature_key

ALICE = "Alice"
BOB = 'Bob Builder <"bob@example.com">'


@pytest.fixture
def invoice():
    return Invoice(
        bindle=BindleSpec(name="example.com/proj", version="0.1.0", authors=[ALICE, BOB]),
        parcels=[
            new_parcel("a.txt", "text/plain", b"first parcel"),
            new_parcel("b.bin", "application/octet-stream", b"\x00\x01\x02"),
            new_parcel("c.wasm", "application/wasm", b"\x00asm"),
        ],
    )


@pytest.fixture
def simple_invoice():
    return Invoice(
        bindle=BindleSpec(name="proj", version="0.1.0", authors=[ALICE]),
        parcels=[Parcel(label=Label(sha256="abc123"))],
    )


@pytest.fixture
def creator_key():
    return generate_signature_key(ALICE, "creator")


@pytest.fixture
def approver_key():
    return generate_signature_key(BOB, "approver")
