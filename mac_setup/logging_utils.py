"""Run log for mac-setup.

The log is the record of what a setup run changed on the machine: every
command line, every profile edit, and the git identity that was written.
It is opened before the first step and never shared with the prompts, which
own stdout.
"""

from __future__ import annotations

import logging
import os
import sys
import tempfile
from pathlib import Path

from .config import DEFAULT_LOG_PATH

LOG_FILE_NAME = "mac-setup.log"

# The log holds the user's git email, so keep it private.
LOG_FILE_MODE = 0o600

FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"


class SetupLogHandler(logging.FileHandler):
    """File handler for the run log; at most one is attached to the root logger."""


def _current_handler(root: logging.Logger):
    for h in root.handlers:
        if isinstance(h, SetupLogHandler):
            return h
    return None


def fallback_log_path() -> Path:
    return Path(tempfile.gettempdir()) / LOG_FILE_NAME


def _open_log(path: Path) -> SetupLogHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        os.close(os.open(path, os.O_CREAT | os.O_WRONLY, LOG_FILE_MODE))
    handler = SetupLogHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))
    return handler


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = False,
) -> str:
    """Attach the run log to the root logger and return its path.

    ``~/Library/Logs`` can be missing or unwritable on a fresh or managed
    account; the log then goes to the temp directory, since the current
    directory may be just as unwritable. Calling again keeps the first log.
    """

    root = logging.getLogger()
    root.setLevel(level)

    existing = _current_handler(root)
    if existing is not None:
        return existing.baseFilename

    requested = Path(os.path.expanduser(log_path))
    try:
        handler = _open_log(requested)
    except OSError as e:
        fallback = fallback_log_path()
        handler = _open_log(fallback)
        root.addHandler(handler)
        logging.getLogger(__name__).warning("Cannot write %s (%s); logging to %s", requested, e, fallback)
    else:
        root.addHandler(handler)

    if also_console:
        # stderr, so --verbose output stays out of the prompt stream.
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root.addHandler(console)

    logging.getLogger(__name__).info("mac-setup run started (pid %d), log %s", os.getpid(), handler.baseFilename)
    return handler.baseFilename
