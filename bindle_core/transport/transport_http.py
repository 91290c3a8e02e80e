# bindle_core/transport/transport_http.py
from typing import List, Optional
import requests
from bindle_core.constants import INVOICE_ENDPOINT, RELATIONSHIP_ENDPOINT, TOML_MIME_TYPE
from bindle_core.encoding import loads, dumps_invoice, loads_error, loads_invoice, loads_labels
from bindle_core.invoice import Invoice, Label
from bindle_core.logger import get_logger
from bindle_core.transport.transport_base import BaseInvoiceClient, InvoiceCreateResponse, TransportError

log = get_logger("Bindle.Transport.HTTP")


class HTTPInvoiceClient(BaseInvoiceClient):
    """
    HTTP client for the invoice endpoints of a bindle server.

    ``base_url`` includes any version prefix, e.g. https://bindle.example.com/v1.
    Request and response bodies are TOML.
    """
    name = "http"

    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: float = 30):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, body: Optional[str] = None, params=None) -> requests.Response:
        url = f"{self.base_url}{path}"
        headers = {}
        data = None
        if body is not None:
            headers["Content-Type"] = TOML_MIME_TYPE
            data = body.encode("utf-8")

        log.debug(f"[HTTP] {method} {url}")
        try:
            res = self.session.request(method, url, data=data, headers=headers, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not res.ok:
            detail = loads_error(res.content)
            log.error(f"[HTTP] {method} {url} -> {res.status_code} {detail}")
            msg = f"Error making request (HTTP status code {res.status_code})"
            if detail:
                msg = f"{msg}: {detail}"
            raise TransportError(msg, status_code=res.status_code)
        return res

    def get_invoice(self, bindle_id: str, yanked: bool = False) -> Invoice:
        params = {"yanked": "true"} if yanked else None
        res = self._request("GET", f"/{INVOICE_ENDPOINT}/{bindle_id}", params=params)
        return loads_invoice(res.content)

    def create_invoice(self, invoice: Invoice) -> InvoiceCreateResponse:
        res = self._request("POST", f"/{INVOICE_ENDPOINT}", body=dumps_invoice(invoice))
        resp = InvoiceCreateResponse.from_dict(loads(res.content))
        log.info(f"[HTTP] created {invoice.name()} missing={len(resp.missing)}")
        return resp

    def yank_invoice(self, bindle_id: str) -> None:
        self._request("DELETE", f"/{INVOICE_ENDPOINT}/{bindle_id}")
        log.info(f"[HTTP] yanked {bindle_id}")

    def get_missing_parcels(self, bindle_id: str) -> List[Label]:
        res = self._request("GET", f"/{RELATIONSHIP_ENDPOINT}/missing/{bindle_id}")
        return loads_labels(res.content)

    def close(self) -> None:
        self.session.close()
