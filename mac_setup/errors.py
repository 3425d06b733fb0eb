from __future__ import annotations

import shlex
from typing import Sequence


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


class SetupError(Exception):
    """Base class for errors raised by the setup pipeline."""


class UnsupportedPlatformError(SetupError):
    def __init__(self, platform: str) -> None:
        super().__init__(f"Unsupported platform: {platform}")
        self.platform = platform


class SetupAborted(SetupError):
    """The user declined something later steps cannot do without.

    Not a failure: the run ends with exit status 0.
    """


class CommandError(SetupError, RuntimeError):
    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        msg = f"Command failed ({returncode}): {fmt_argv(self.argv)}"
        if stderr:
            msg += f"\n{stderr}"
        super().__init__(msg)
