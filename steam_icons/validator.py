"""
Start-up checks for the shortcut directory and Steam's icon directory; no network calls.
"""

import os

MSG_NO_SHORTCUT_DIR = "Shortcut directory not found. Run this from the folder containing your Steam shortcuts."
MSG_SHORTCUT_DIR_UNREADABLE = "Cannot list the shortcut directory. Check permissions."
MSG_NO_ICON_DIR = "Steam icon directory not found. Icons cannot be written until Steam is installed there."


def validate_shortcut_dir(path: str) -> tuple[bool, str]:
    """
    Verify that path is a directory this process can list.

    Returns:
        (success: bool, message: str)
        On failure, message is a user-friendly error string.
    """
    if not os.path.isdir(path):
        return False, MSG_NO_SHORTCUT_DIR
    if not os.access(path, os.R_OK | os.X_OK):
        return False, MSG_SHORTCUT_DIR_UNREADABLE
    return True, ""


def check_icon_dir(path: str) -> tuple[bool, str]:
    """Whether the icon directory exists. A missing one is reported but does not stop a run."""
    if not os.path.isdir(path):
        return False, MSG_NO_ICON_DIR
    return True, ""


def same_dir(a: str, b: str) -> bool:
    """Compare Windows-style directory strings, ignoring case, separator style and a trailing separator."""
    def norm(p: str) -> str:
        return p.replace("/", "\\").rstrip("\\").lower()

    return norm(a) == norm(b)
