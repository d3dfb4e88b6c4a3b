import pytest

STEAM_ICON_DIR = "C:\\Program Files (x86)\\Steam\\steam\\games\\"


def shortcut_text(game_url: str | None, icon_file: str | None) -> str:
    lines = ["[{000214A0-0000-0000-C000-000000000046}]", "Prop3=19,0", "[InternetShortcut]", "IDList=", "IconIndex=0"]
    if game_url is not None:
        lines.append(f"URL={game_url}")
    if icon_file is not None:
        lines.append(f"IconFile={icon_file}")
    return "\r\n".join(lines) + "\r\n"


@pytest.fixture
def shortcut_dir(tmp_path):
    d = tmp_path / "shortcuts"
    d.mkdir()
    return d


@pytest.fixture
def icon_dir(tmp_path):
    d = tmp_path / "games"
    d.mkdir()
    return d


@pytest.fixture
def make_shortcut(shortcut_dir):
    """Write a Steam .url shortcut into shortcut_dir and return its path."""
    def _make(name: str, game_id: str | None = "220", icon: str | None = "abcd1234.ico", text: str | None = None):
        if text is None:
            url = f"steam://rungameid/{game_id}" if game_id is not None else None
            icon_file = STEAM_ICON_DIR + icon if icon is not None else None
            text = shortcut_text(url, icon_file)
        path = shortcut_dir / name
        path.write_text(text, encoding="utf-8", newline="")
        return str(path)

    return _make
