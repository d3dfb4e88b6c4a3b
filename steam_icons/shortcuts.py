"""
Find Steam .url shortcuts in a directory and pull the game ID and icon filename out of them.

A Steam shortcut looks like:

    [InternetShortcut]
    IDList=
    IconIndex=0
    URL=steam://rungameid/220
    IconFile=C:\\Program Files (x86)\\Steam\\steam\\games\\abcd1234.ico

Only the [InternetShortcut] section is read. Store and community page links
(https://store.steampowered.com/app/220/...) are accepted as the URL too.
"""

import logging
import os
import re
from dataclasses import dataclass

from .config import SHORTCUT_EXT
from .errors import ParseFailure

log = logging.getLogger(__name__)

SECTION_HEADER = "[internetshortcut]"

_RUNGAMEID_RE = re.compile(r"^steam://rungameid/(\d+)/?$", re.IGNORECASE)
_APP_PAGE_RE = re.compile(
    r"^https?://(?:store\.steampowered\.com|steamcommunity\.com)/app/(\d+)(?:[/?#].*)?$",
    re.IGNORECASE,
)
_ICON_NAME_RE = re.compile(r"^[^.\\/]+\.ico$", re.IGNORECASE)


@dataclass(frozen=True)
class ShortcutRecord:
    game_id: str
    icon_filename: str
    icon_dir: str = ""
    source: str = ""


def find_shortcuts(directory: str) -> list[str]:
    """
    Return paths of .url files directly inside directory, sorted by name.

    Directories, symlinks and anything that is not a regular file are skipped.
    Raises OSError if the directory cannot be listed.
    """
    shortcuts: list[str] = []
    for name in sorted(os.listdir(directory)):
        path = os.path.join(directory, name)
        if not name.lower().endswith(SHORTCUT_EXT):
            log.debug("Skipping non-shortcut entry %s", name)
            continue
        if os.path.islink(path):
            log.warning("Skipping symlink %s", name)
            continue
        if not os.path.isfile(path):
            log.debug("Skipping non-file %s", name)
            continue
        shortcuts.append(path)
    return shortcuts


def extract_game_id(url: str) -> str | None:
    """Game ID from a steam://rungameid/ link or a store/community /app/ page, else None."""
    url = url.strip().strip('"')
    for pattern in (_RUNGAMEID_RE, _APP_PAGE_RE):
        match = pattern.match(url)
        if match:
            return match.group(1)
    return None


def split_icon_path(value: str) -> tuple[str, str] | None:
    """
    Split an IconFile value into (directory, filename). The directory keeps its
    trailing separator. Returns None unless the filename is a plain name.ico.
    """
    value = value.strip().strip('"')
    cut = max(value.rfind("\\"), value.rfind("/")) + 1
    icon_dir, icon_filename = value[:cut], value[cut:]
    if not _ICON_NAME_RE.match(icon_filename):
        return None
    return icon_dir, icon_filename


def parse_shortcut(text: str, source: str = "<shortcut>") -> ShortcutRecord:
    """
    Parse the text of one .url file into a ShortcutRecord.

    Raises ParseFailure when the URL or IconFile line is missing, malformed,
    or given twice in the [InternetShortcut] section.
    """
    name = os.path.basename(source)
    url_value: str | None = None
    icon_value: str | None = None
    in_section = False

    for raw_line in text.lstrip("\ufeff").splitlines():
        line = raw_line.strip()
        if not line or line.startswith(";"):
            continue
        if line.startswith("["):
            in_section = line.lower() == SECTION_HEADER
            continue
        if not in_section:
            continue

        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip().lower()
        if key == "url":
            if url_value is not None:
                raise ParseFailure(f"Game URL given more than once in {name}", source)
            url_value = value
        elif key == "iconfile":
            if icon_value is not None:
                raise ParseFailure(f"IconFile given more than once in {name}", source)
            icon_value = value

    if url_value is None or icon_value is None:
        raise ParseFailure(
            f"Shortcut could not be parsed or was not a Steam shortcut file: {name}", source
        )

    game_id = extract_game_id(url_value)
    if game_id is None:
        raise ParseFailure(f"Not a Steam game link in {name}: {url_value.strip()}", source)

    icon_parts = split_icon_path(icon_value)
    if icon_parts is None:
        raise ParseFailure(f"Unrecognized icon file in {name}: {icon_value.strip()}", source)
    icon_dir, icon_filename = icon_parts

    return ShortcutRecord(
        game_id=game_id,
        icon_filename=icon_filename,
        icon_dir=icon_dir,
        source=source,
    )


def read_shortcut(path: str) -> ShortcutRecord:
    """Read and parse a .url file. An unreadable file is a ParseFailure, not a crash."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError as e:
        raise ParseFailure(f"Could not read {os.path.basename(path)}: {e}", path) from e
    return parse_shortcut(text, source=path)
