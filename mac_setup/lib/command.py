from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Mapping, Protocol, Sequence

from ..errors import CommandError, fmt_argv

logger = logging.getLogger(__name__)

# Shell convention for "command not found".
NOT_FOUND_RC = 127


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class Runner(Protocol):
    def __call__(
        self,
        argv: Sequence[str],
        *,
        check: bool = True,
        env: Mapping[str, str] | None = None,
        cwd: str | None = None,
        input_text: str | None = None,
        capture: bool = True,
        dry_run: bool = False,
    ) -> CmdResult:
        ...


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    input_text: str | None = None,
    capture: bool = True,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - capture=False leaves stdout/stderr attached to the terminal, for
      installers that print progress or ask for a password.
    - A missing executable is reported as return code 127, like a shell would.
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    logger.info("CMD %s", fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    pipe = subprocess.PIPE if capture else None
    try:
        p = subprocess.run(
            argv_list,
            input=input_text,
            text=True,
            stdout=pipe,
            stderr=pipe,
            cwd=cwd,
            env=dict(os.environ, **(env or {})),
        )
    except FileNotFoundError:
        stderr = f"{argv_list[0]}: command not found"
        logger.debug("STDERR %s", stderr)
        if check:
            raise CommandError(argv_list, NOT_FOUND_RC, stderr) from None
        return CmdResult(argv=argv_list, returncode=NOT_FOUND_RC, stdout="", stderr=stderr)

    stdout = p.stdout or ""
    stderr = p.stderr or ""
    if stdout:
        logger.debug("STDOUT %s", stdout.strip())
    if stderr:
        logger.debug("STDERR %s", stderr.strip())

    if check and p.returncode != 0:
        raise CommandError(argv_list, p.returncode, stderr)

    return CmdResult(argv=argv_list, returncode=p.returncode, stdout=stdout, stderr=stderr)


def parse_env_dump(dump: str) -> dict[str, str]:
    """Parse NUL-separated ``env -0`` output into a mapping."""

    out: dict[str, str] = {}
    for entry in dump.split("\0"):
        if not entry or "=" not in entry:
            continue
        key, _, value = entry.partition("=")
        out[key] = value
    return out
