"""Test helpers."""

import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict


class ASGIAdapter(BaseAdapter):
    """requests transport adapter that forwards to a FastAPI ``TestClient``.

    Mount it on a ``requests.Session`` to exercise a requests-based
    client against the in-process application.
    """

    def __init__(self, test_client):
        super().__init__()
        self.test_client = test_client

    def send(self, request, **kwargs):
        upstream = self.test_client.request(
            request.method,
            request.url,
            content=request.body,
            headers={k: v for k, v in request.headers.items() if k.lower() != "content-length"},
        )
        response = requests.Response()
        response.status_code = upstream.status_code
        response.reason = upstream.reason_phrase
        response.headers = CaseInsensitiveDict(upstream.headers)
        response._content = upstream.content
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


class UnreachableAdapter(BaseAdapter):
    """Adapter that fails every request as if the server were down."""

    def send(self, request, **kwargs):
        raise requests.ConnectionError(f"connection refused: {request.url}")

    def close(self):
        pass
