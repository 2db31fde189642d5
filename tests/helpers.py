"""Upstream stub shared by the unit tests."""
import json
from typing import List, Optional

import httpx

DEFAULT_URL = "https://llm.example.test/v1/chat/completions"


class UpstreamStub:
    """Records outbound requests and answers them with a canned response."""

    def __init__(self, status_code: int = 200, body=None, exc: Optional[Exception] = None,
                 redirect_to: Optional[str] = None):
        self.status_code = status_code
        self.body = body if body is not None else {"choices": []}
        self.exc = exc
        self.redirect_to = redirect_to
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.redirect_to and str(request.url) != self.redirect_to:
            return httpx.Response(307, headers={"Location": self.redirect_to})
        if isinstance(self.body, (str, bytes)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_payload(self) -> dict:
        return json.loads(self.last_request.content)
