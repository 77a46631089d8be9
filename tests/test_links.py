import webbrowser

import requests

from core.result import Absent, Ok
from utils import links


def test_save_skips_existing_file(tmp_path, http_get) -> None:
    target = tmp_path / "image.png"
    target.write_bytes(b"old")

    assert links.save(target, "http://example.com/image.png") is True
    assert target.read_bytes() == b"old"
    assert http_get.calls == []


def test_save_writes_bytes_verbatim(tmp_path, http_get, fake_response) -> None:
    payload = bytes(range(256)) * 4
    http_get.response = fake_response(payload)
    target = tmp_path / "data.bin"

    assert links.save(str(target), "http://example.com/data.bin") is True
    assert target.read_bytes() == payload
    assert http_get.calls[0]["stream"] is True


def test_save_failure_removes_partial_file(tmp_path, http_get, fake_response) -> None:
    http_get.response = fake_response(
        b"partial", read_error=requests.exceptions.ChunkedEncodingError("cut")
    )
    target = tmp_path / "broken.bin"

    assert links.save(target, "http://example.com/broken.bin") is False
    assert not target.exists()


def test_save_http_error(tmp_path, http_get, fake_response) -> None:
    http_get.response = fake_response(status_code=404)
    target = tmp_path / "missing.bin"
    assert links.save(target, "http://example.com/missing.bin") is False
    assert not target.exists()


def test_save_none_arguments(tmp_path, http_get) -> None:
    assert links.save(None, "http://example.com") is False
    assert links.save(tmp_path / "x", None) is False
    assert http_get.calls == []


def test_post_sends_raw_payload(monkeypatch, fake_response) -> None:
    calls: dict = {}

    def fake_post(url, data=None, headers=None, stream=None, timeout=None):
        calls.update(url=url, data=data, headers=headers, stream=stream)
        return fake_response(b"accepted\r\nid=7\r\n")

    monkeypatch.setattr("utils.links.requests.post", fake_post)

    assert links.post("http://example.com/api", "name=검색&x=1") == Ok("accepted\nid=7")
    assert calls["data"] == "name=검색&x=1".encode("utf-8")
    assert calls["headers"]["Content-Type"] == "application/x-www-form-urlencoded"
    assert calls["stream"] is True


def test_post_errors_are_absent(monkeypatch) -> None:
    def failing_post(url, **kwargs):
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr("utils.links.requests.post", failing_post)
    assert links.post("http://example.com", "a=1") == Absent()
    assert links.post(None, "a=1") == Absent()
    assert links.post("http://example.com", None) == Absent()


def test_open_link(monkeypatch) -> None:
    opened = []
    monkeypatch.setattr(
        "utils.links.webbrowser.open", lambda url: opened.append(url) or True
    )
    assert links.open_link("https://www.python.org") is True
    assert opened == ["https://www.python.org"]
    assert links.open_link(None) is False


def test_open_link_failure(monkeypatch) -> None:
    def no_browser(url):
        raise webbrowser.Error("could not locate runnable browser")

    monkeypatch.setattr("utils.links.webbrowser.open", no_browser)
    assert links.open_link("https://www.python.org") is False

    monkeypatch.setattr("utils.links.webbrowser.open", lambda url: False)
    assert links.open_link("https://www.python.org") is False
