"""Shared fixtures: a fake ``requests`` response and stubs for get/post/head."""

import pytest
import requests


class FakeResponse:
    def __init__(
        self,
        body: bytes = b"",
        status_code: int = 200,
        headers: dict | None = None,
        read_error: Exception | None = None,
    ):
        self._body = body
        self.status_code = status_code
        self.headers = headers or {}
        self._read_error = read_error
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True
        return False

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")

    def iter_content(self, chunk_size=1):
        # 청크 경계에서 \r\n 이 나뉘는 경우도 포함되도록 작은 단위로 반환
        for i in range(0, len(self._body), 3):
            yield self._body[i : i + 3]
        if self._read_error:
            raise self._read_error


class HttpStub:
    """Records calls and replays one response (or raises one error)."""

    def __init__(self):
        self.calls: list[dict] = []
        self.response: FakeResponse = FakeResponse()
        self.error: Exception | None = None

    def __call__(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error:
            raise self.error
        return self.response


@pytest.fixture
def http_get(monkeypatch) -> HttpStub:
    stub = HttpStub()
    monkeypatch.setattr("utils.loader.requests.get", stub)
    return stub


@pytest.fixture
def fake_response():
    return FakeResponse
