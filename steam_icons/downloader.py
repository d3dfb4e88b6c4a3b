"""
Steam CDN icon download: build the icon URL, check whether the icon is already
in the local icon directory, fetch the bytes, write them to disk.
"""

import os
from typing import Callable

import requests

from .config import CDN_BASE_URL, HEADERS, REQUEST_TIMEOUT
from .errors import FetchFailure, WriteFailure

# fetch-by-URL and write-bytes-to-path; the restorer accepts fakes of either
IconFetcher = Callable[[str], bytes]
IconWriter = Callable[[str, bytes], None]


def icon_url(game_id: str, icon_filename: str, base_url: str = CDN_BASE_URL) -> str:
    """CDN URL for an app icon. base_url should not end with /."""
    return f"{base_url.rstrip('/')}/{game_id}/{icon_filename}"


def icon_path(icon_dir: str, icon_filename: str) -> str:
    return os.path.join(icon_dir, icon_filename)


def icon_present(icon_dir: str, icon_filename: str) -> bool:
    """True if a file of that name exists. Size and content are not checked."""
    return os.path.exists(icon_path(icon_dir, icon_filename))


def fetch_icon(url: str, timeout: float = REQUEST_TIMEOUT, game_id: str | None = None) -> bytes:
    """
    Single GET of url. Returns the response body on 2xx.

    Raises FetchFailure on a non-2xx status or a connection problem. There is no
    retry; run the tool again to pick up icons that failed.
    """
    try:
        resp = requests.get(url, headers=HEADERS, timeout=timeout)
    except requests.RequestException as e:
        raise FetchFailure(
            "Could not reach the Steam CDN. Check your connection.",
            url,
            game_id=game_id,
            cause=e,
        ) from e

    if resp.status_code == 404:
        raise FetchFailure(
            f"Icon not found on the Steam CDN (404): {url}",
            url,
            game_id=game_id,
            status_code=404,
        )
    if not 200 <= resp.status_code < 300:
        raise FetchFailure(
            f"Steam CDN returned HTTP {resp.status_code} for {url}",
            url,
            game_id=game_id,
            status_code=resp.status_code,
        )
    return resp.content


def write_icon(path: str, data: bytes) -> None:
    """
    Write data to path, replacing any file already there. Raises WriteFailure on OSError.

    The bytes go to a .part file first and are moved into place only once fully
    written, so a failed write never leaves a partial icon that later runs would skip.
    """
    part_path = path + ".part"
    try:
        with open(part_path, "wb") as f:
            f.write(data)
        os.replace(part_path, path)
    except OSError as e:
        try:
            os.remove(part_path)
        except OSError:
            pass
        raise WriteFailure(
            f"Could not write {os.path.basename(path)}. {e.strerror or e}. Check permissions.",
            path,
            cause=e,
        ) from e
