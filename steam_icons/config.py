"""
Fixed locations and the run configuration passed into the restore pipeline.
"""

import os
from dataclasses import dataclass

from . import __version__

# Steam writes shortcut icons here; shortcuts reference it in their IconFile line.
LOCAL_ICON_DIR = "C:\\Program Files (x86)\\Steam\\steam\\games\\"
CDN_BASE_URL = "https://cdn.cloudflare.steamstatic.com/steamcommunity/public/images/apps"
SHORTCUT_EXT = ".url"
REQUEST_TIMEOUT = 30
HEADERS = {
    "User-Agent": f"steam-icon-restorer/{__version__}",
}


@dataclass(frozen=True)
class RestoreConfig:
    shortcut_dir: str
    icon_dir: str = LOCAL_ICON_DIR
    base_url: str = CDN_BASE_URL
    timeout: float = REQUEST_TIMEOUT

    @classmethod
    def from_cwd(cls) -> "RestoreConfig":
        """Shortcuts in the current directory, icons into Steam's fixed icon directory."""
        return cls(shortcut_dir=os.getcwd())
