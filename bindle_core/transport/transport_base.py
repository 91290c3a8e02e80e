from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
from bindle_core.invoice import Invoice, Label


class TransportError(Exception):
    """Non-2xx response or unusable body from a bindle server."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


@dataclass
class InvoiceCreateResponse:
    invoice: Invoice
    # parcels the server does not have yet
    missing: List[Label] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "InvoiceCreateResponse":
        return cls(
            invoice=Invoice.from_dict(data["invoice"]),
            missing=[Label.from_dict(l) for l in data.get("missing", [])],
        )


class BaseInvoiceClient:
    """
    Invoice exchange with a bindle server. Ids are ``<name>/<version>``.

    Carries invoices only; signing and verification happen before create and
    after get, in the caller.
    """
    name: str = "base"

    def get_invoice(self, bindle_id: str, yanked: bool = False) -> Invoice:
        raise NotImplementedError

    def create_invoice(self, invoice: Invoice) -> InvoiceCreateResponse:
        raise NotImplementedError

    def yank_invoice(self, bindle_id: str) -> None:
        raise NotImplementedError

    def get_missing_parcels(self, bindle_id: str) -> List[Label]:
        raise NotImplementedError

    def close(self) -> None:
        return
