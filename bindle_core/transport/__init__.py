# bindle_core/transport/__init__.py
import os
from bindle_core.transport.transport_base import BaseInvoiceClient, InvoiceCreateResponse, TransportError
from bindle_core.transport.transport_http import HTTPInvoiceClient


def transport_factory(base_url: str | None = None) -> BaseInvoiceClient:
    """Client for ``base_url``, else BINDLE_URL, else a local server."""
    url = base_url or os.getenv("BINDLE_URL", "http://localhost:8080/v1")
    return HTTPInvoiceClient(url)


__all__ = [
    "BaseInvoiceClient",
    "HTTPInvoiceClient",
    "InvoiceCreateResponse",
    "TransportError",
    "transport_factory",
]
