"""
Steam Icon Restorer: run from the folder holding your Steam .url shortcuts.
Downloads each missing shortcut icon from the Steam CDN into Steam's icon directory.
"""

import logging

from .config import RestoreConfig
from .logging_setup import setup_logging
from .restorer import Outcome, restore_icons
from .validator import check_icon_dir, validate_shortcut_dir

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_SHORTCUT_DIR = 1
EXIT_INTERRUPTED = 130


def log_progress(current: int, total: int, name: str) -> None:
    if name != "Done":
        log.info("%d/%d: %s", current, total, name)


def run(config: RestoreConfig) -> int:
    log.info("Processing shortcuts in %s", config.shortcut_dir)

    ok, msg = validate_shortcut_dir(config.shortcut_dir)
    if not ok:
        log.error(msg)
        return EXIT_NO_SHORTCUT_DIR

    ok, msg = check_icon_dir(config.icon_dir)
    if not ok:
        log.warning("%s (%s)", msg, config.icon_dir)

    log.info("Press Ctrl+C at any time to exit")
    try:
        report = restore_icons(config, progress_callback=log_progress)
    except KeyboardInterrupt:
        log.info("Ctrl+C received, exiting...")
        return EXIT_INTERRUPTED
    except OSError as e:
        log.error("Could not list shortcuts in %s: %s", config.shortcut_dir, e)
        return EXIT_NO_SHORTCUT_DIR

    log.info(report.summary())
    if report.count(Outcome.WRITTEN):
        log.info("Refresh any open pages that still show broken icons.")
    return EXIT_OK


def main() -> int:
    setup_logging()
    return run(RestoreConfig.from_cwd())
