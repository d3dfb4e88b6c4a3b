import errno

import requests
import pytest
import responses

from steam_icons import downloader
from steam_icons.config import CDN_BASE_URL
from steam_icons.downloader import fetch_icon, icon_present, icon_url, write_icon
from steam_icons.errors import FetchFailure, WriteFailure

ICON_URL = "https://cdn.cloudflare.steamstatic.com/steamcommunity/public/images/apps/220/abcd1234.ico"


def test_icon_url_uses_cdn_template():
    assert icon_url("220", "abcd1234.ico") == ICON_URL


def test_icon_url_custom_base_trailing_slash():
    assert icon_url("10", "x.ico", "http://cdn.test/apps/") == "http://cdn.test/apps/10/x.ico"


def test_default_base_url():
    assert CDN_BASE_URL + "/220/abcd1234.ico" == ICON_URL


def test_icon_present(icon_dir):
    assert not icon_present(str(icon_dir), "abcd1234.ico")
    (icon_dir / "abcd1234.ico").write_bytes(b"")
    # zero-byte file still counts
    assert icon_present(str(icon_dir), "abcd1234.ico")


@responses.activate
def test_fetch_icon_returns_body():
    responses.add(responses.GET, ICON_URL, body=b"\x00\x00\x01\x00icon", status=200)
    assert fetch_icon(ICON_URL) == b"\x00\x00\x01\x00icon"
    assert len(responses.calls) == 1


@responses.activate
def test_fetch_icon_404_is_fetch_failure():
    responses.add(responses.GET, ICON_URL, status=404)
    with pytest.raises(FetchFailure) as exc:
        fetch_icon(ICON_URL, game_id="220")
    assert exc.value.status_code == 404
    assert exc.value.game_id == "220"
    assert exc.value.url == ICON_URL


@responses.activate
def test_fetch_icon_server_error_single_attempt():
    responses.add(responses.GET, ICON_URL, status=503)
    with pytest.raises(FetchFailure, match="503"):
        fetch_icon(ICON_URL)
    assert len(responses.calls) == 1


@responses.activate
def test_fetch_icon_connection_error():
    responses.add(responses.GET, ICON_URL, body=requests.ConnectionError("offline"))
    with pytest.raises(FetchFailure) as exc:
        fetch_icon(ICON_URL)
    assert isinstance(exc.value.cause, requests.ConnectionError)
    assert exc.value.status_code is None


def test_write_icon(icon_dir):
    target = icon_dir / "abcd1234.ico"
    write_icon(str(target), b"first")
    write_icon(str(target), b"second")
    assert target.read_bytes() == b"second"


def test_write_icon_missing_directory(tmp_path):
    target = tmp_path / "no-such-dir" / "abcd1234.ico"
    with pytest.raises(WriteFailure) as exc:
        write_icon(str(target), b"data")
    assert exc.value.path == str(target)
    assert isinstance(exc.value.cause, OSError)


class _ShortWrite:
    """File wrapper that puts two bytes on disk and then reports a full disk."""

    def __init__(self, f):
        self.f = f

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.f.close()

    def write(self, data):
        self.f.write(data[:2])
        self.f.flush()
        raise OSError(errno.ENOSPC, "No space left on device")


def _disk_full_open(monkeypatch):
    real_open = open
    monkeypatch.setattr(
        downloader, "open", lambda path, mode="r": _ShortWrite(real_open(path, mode)), raising=False
    )


def test_write_icon_failure_leaves_no_partial_file(monkeypatch, icon_dir):
    _disk_full_open(monkeypatch)
    target = icon_dir / "abcd1234.ico"

    with pytest.raises(WriteFailure, match="No space left"):
        write_icon(str(target), b"full icon bytes")

    assert list(icon_dir.iterdir()) == []


def test_write_icon_failure_keeps_existing_file(monkeypatch, icon_dir):
    target = icon_dir / "abcd1234.ico"
    target.write_bytes(b"old")
    _disk_full_open(monkeypatch)

    with pytest.raises(WriteFailure):
        write_icon(str(target), b"new icon bytes")

    assert [p.name for p in icon_dir.iterdir()] == ["abcd1234.ico"]
    assert target.read_bytes() == b"old"
