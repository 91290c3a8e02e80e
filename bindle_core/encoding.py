"""
bindle_core.encoding
--------------------
TOML wire codec. Invoices, keyrings and server responses are exchanged as
TOML documents whose table and key names follow the bindle format.
"""

from __future__ import annotations
import tomllib
from typing import Any, Dict, List, Union
import tomli_w
from .invoice import Invoice, Label
from .keys import Keyring

Text = Union[str, bytes]


def loads(data: Text) -> Dict[str, Any]:
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    return tomllib.loads(data)


def dumps(obj: Dict[str, Any]) -> str:
    return tomli_w.dumps(obj)


def dumps_invoice(invoice: Invoice) -> str:
    return tomli_w.dumps(invoice.to_dict())


def loads_invoice(data: Text) -> Invoice:
    return Invoice.from_dict(loads(data))


def dumps_keyring(keyring: Keyring) -> str:
    return tomli_w.dumps(keyring.to_dict())


def loads_keyring(data: Text) -> Keyring:
    return Keyring.from_dict(loads(data))


def loads_labels(data: Text, table: str = "missing") -> List[Label]:
    return [Label.from_dict(l) for l in loads(data).get(table, [])]


def loads_error(data: Text) -> str:
    """The ``error`` message of a server error body, or "" if there is none."""
    try:
        return str(loads(data).get("error", ""))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError):
        return ""
