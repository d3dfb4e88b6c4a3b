"""
Restore pipeline: for each shortcut in the configured directory, parse it, skip it
if its icon is already on disk, otherwise download the icon and write it.

Per shortcut:
    Discovered -> Parsed -> Skipped (icon present)
                         -> Fetching -> Written | FetchFailed | WriteFailed
    Discovered -> ParseFailed

Every per-shortcut failure is logged and recorded and the run moves on. Only a
failure to list the shortcut directory escapes restore_icons().
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Callable

from .config import RestoreConfig
from .downloader import IconFetcher, IconWriter, fetch_icon, icon_path, icon_present, icon_url, write_icon
from .errors import FetchFailure, ParseFailure, WriteFailure
from .shortcuts import ShortcutRecord, find_shortcuts, read_shortcut
from .validator import same_dir

log = logging.getLogger(__name__)


class Outcome(str, Enum):
    SKIPPED = "skipped"
    WRITTEN = "written"
    PARSE_FAILED = "parse_failed"
    FETCH_FAILED = "fetch_failed"
    WRITE_FAILED = "write_failed"


@dataclass(frozen=True)
class ShortcutOutcome:
    path: str
    outcome: Outcome
    record: ShortcutRecord | None = None
    message: str = ""


@dataclass
class RestoreReport:
    outcomes: list[ShortcutOutcome] = field(default_factory=list)
    downloads: int = 0

    def count(self, outcome: Outcome) -> int:
        return sum(1 for o in self.outcomes if o.outcome is outcome)

    @property
    def failed(self) -> int:
        return sum(
            self.count(o) for o in (Outcome.PARSE_FAILED, Outcome.FETCH_FAILED, Outcome.WRITE_FAILED)
        )

    def summary(self) -> str:
        if not self.outcomes:
            return "No shortcuts found."
        parts = [
            f"{self.count(Outcome.WRITTEN)} icon(s) restored",
            f"{self.count(Outcome.SKIPPED)} already present",
        ]
        if self.failed:
            parts.append(f"{self.failed} failed")
        return ", ".join(parts) + "."


def process_shortcut(
    path: str,
    config: RestoreConfig,
    fetch: IconFetcher,
    write: IconWriter,
) -> ShortcutOutcome:
    """Run one shortcut through parse, presence check, fetch and write."""
    name = os.path.basename(path)
    try:
        record = read_shortcut(path)
    except ParseFailure as e:
        log.warning("%s", e)
        return ShortcutOutcome(path, Outcome.PARSE_FAILED, message=str(e))

    if record.icon_dir and not same_dir(record.icon_dir, config.icon_dir):
        log.warning(
            "%s points at icon directory %s, restoring into %s instead",
            name,
            record.icon_dir,
            config.icon_dir,
        )

    if icon_present(config.icon_dir, record.icon_filename):
        log.info("Icon already exists for game #%s", record.game_id)
        return ShortcutOutcome(path, Outcome.SKIPPED, record, "Icon already present.")

    url = icon_url(record.game_id, record.icon_filename, config.base_url)
    log.info("Downloading icon for game #%s from %s", record.game_id, url)
    try:
        data = fetch(url)
    except FetchFailure as e:
        if e.game_id is None:
            e.game_id = record.game_id
        e.source = path
        log.error("Game #%s (%s): %s", record.game_id, name, e)
        return ShortcutOutcome(path, Outcome.FETCH_FAILED, record, str(e))

    target = icon_path(config.icon_dir, record.icon_filename)
    try:
        write(target, data)
    except WriteFailure as e:
        e.source = path
        log.error("Game #%s (%s): %s", record.game_id, name, e)
        return ShortcutOutcome(path, Outcome.WRITE_FAILED, record, str(e))

    log.info("Saved %s (%d bytes)", target, len(data))
    return ShortcutOutcome(path, Outcome.WRITTEN, record, "Icon restored.")


def restore_icons(
    config: RestoreConfig,
    fetch: IconFetcher | None = None,
    write: IconWriter = write_icon,
    progress_callback: Callable[[int, int, str], None] | None = None,
) -> RestoreReport:
    """
    Restore every missing icon referenced by shortcuts in config.shortcut_dir.

    fetch defaults to a CDN fetch with config.timeout; write defaults to write_icon.
    progress_callback(current_1based_index, total, shortcut_name) is called before
    each shortcut and once more with "Done" at the end.

    Raises OSError if config.shortcut_dir cannot be listed.
    """
    if fetch is None:
        fetch = partial(fetch_icon, timeout=config.timeout)

    shortcuts = find_shortcuts(config.shortcut_dir)
    total = len(shortcuts)
    log.info("Found %d shortcut(s) in %s", total, config.shortcut_dir)

    report = RestoreReport()
    for i, path in enumerate(shortcuts):
        if progress_callback:
            progress_callback(i + 1, total, os.path.basename(path))
        result = process_shortcut(path, config, fetch, write)
        if result.outcome in (Outcome.WRITTEN, Outcome.FETCH_FAILED, Outcome.WRITE_FAILED):
            report.downloads += 1
        report.outcomes.append(result)

    if progress_callback:
        progress_callback(total, total, "Done")
    return report
