"""
Per-shortcut failures. None of these abort a run; the restorer records them and moves on.
"""


class IconRestoreError(Exception):
    """Base class; str(error) is a user-friendly message."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.message = message
        self.source = source


class ParseFailure(IconRestoreError):
    """Shortcut is not a Steam shortcut, or is missing its URL or IconFile line."""


class FetchFailure(IconRestoreError):
    def __init__(
        self,
        message: str,
        url: str,
        game_id: str | None = None,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.url = url
        self.game_id = game_id
        self.status_code = status_code
        self.cause = cause


class WriteFailure(IconRestoreError):
    def __init__(self, message: str, path: str, cause: OSError | None = None):
        super().__init__(message)
        self.path = path
        self.cause = cause
