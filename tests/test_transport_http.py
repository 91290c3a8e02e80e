import pytest
from bindle_core.encoding import dumps, dumps_invoice, loads_invoice
from bindle_core.transport import HTTPInvoiceClient, TransportError, transport_factory


class FakeResponse:
    def __init__(self, status_code=200, body=""):
        self.status_code = status_code
        self.content = body.encode("utf-8")

    @property
    def ok(self):
        return 200 <= self.status_code < 300


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        return self.responses.pop(0)

    def close(self):
        self.closed = True


def test_get_invoice(invoice):
    session = FakeSession(FakeResponse(body=dumps_invoice(invoice)))
    client = HTTPInvoiceClient("http://bindle.test/v1/", session=session)

    got = client.get_invoice(invoice.name())

    assert got == invoice
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("GET", "http://bindle.test/v1/_i/example.com/proj/0.1.0")
    assert kwargs["params"] is None


def test_get_yanked_invoice(invoice):
    session = FakeSession(FakeResponse(body=dumps_invoice(invoice)))
    HTTPInvoiceClient("http://bindle.test/v1", session=session).get_invoice("x/1.0.0", yanked=True)
    assert session.calls[0][2]["params"] == {"yanked": "true"}


def test_create_invoice(invoice):
    body = dumps({
        "invoice": invoice.to_dict(),
        "missing": [invoice.parcels[0].label.to_dict()],
    })
    session = FakeSession(FakeResponse(status_code=201, body=body))
    client = HTTPInvoiceClient("http://bindle.test/v1", session=session)

    resp = client.create_invoice(invoice)

    assert resp.invoice == invoice
    assert [l.sha256 for l in resp.missing] == [invoice.parcels[0].label.sha256]
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", "http://bindle.test/v1/_i")
    assert kwargs["headers"]["Content-Type"] == "application/toml"
    assert loads_invoice(kwargs["data"]) == invoice


def test_yank_and_missing(invoice):
    missing = dumps({"missing": [p.label.to_dict() for p in invoice.parcels]})
    session = FakeSession(FakeResponse(), FakeResponse(body=missing))
    client = HTTPInvoiceClient("http://bindle.test/v1", session=session)

    client.yank_invoice("example.com/proj/0.1.0")
    labels = client.get_missing_parcels("example.com/proj/0.1.0")

    assert session.calls[0][:2] == ("DELETE", "http://bindle.test/v1/_i/example.com/proj/0.1.0")
    assert session.calls[1][1] == "http://bindle.test/v1/_r/missing/example.com/proj/0.1.0"
    assert len(labels) == 3


def test_error_with_message():
    session = FakeSession(FakeResponse(status_code=404, body='error = "invoice not found"'))
    client = HTTPInvoiceClient("http://bindle.test/v1", session=session)

    with pytest.raises(TransportError) as exc:
        client.get_invoice("nope/1.0.0")

    assert exc.value.status_code == 404
    assert "invoice not found" in str(exc.value)


def test_error_without_body():
    session = FakeSession(FakeResponse(status_code=500, body="<html>boom</html>"))
    client = HTTPInvoiceClient("http://bindle.test/v1", session=session)

    with pytest.raises(TransportError) as exc:
        client.yank_invoice("x/1.0.0")
    assert str(exc.value) == "Error making request (HTTP status code 500)"


def test_transport_factory(monkeypatch):
    monkeypatch.setenv("BINDLE_URL", "https://bindle.example.com/v1/")
    client = transport_factory()
    assert client.base_url == "https://bindle.example.com/v1"
    client.close()

    monkeypatch.delenv("BINDLE_URL")
    assert transport_factory().base_url == "http://localhost:8080/v1"
