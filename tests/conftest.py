import httpx
import pytest

from edsm_api import EdsmClient


class RecordingHandler:
    """httpx.MockTransport handler that returns a fixed response and records requests."""

    def __init__(self, content: bytes, status_code: int = 200, exc: Exception | None = None):
        self.content = content
        self.status_code = status_code
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return httpx.Response(self.status_code, content=self.content)


@pytest.fixture
def make_client():
    """Return a factory building an EdsmClient backed by a mock transport.

    The factory returns ``(client, handler)``; ``handler.requests`` lists the
    requests the client sent.
    """

    def _make(content: bytes = b"{}", status_code: int = 200, exc: Exception | None = None):
        handler = RecordingHandler(content, status_code, exc)
        client = EdsmClient(
            base_url="https://test.edsm.net",
            transport=httpx.MockTransport(handler),
        )
        return client, handler

    return _make
