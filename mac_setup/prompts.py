from __future__ import annotations

import logging
import re
import sys
from typing import Iterable, List, Optional, Protocol, TextIO

from .console import Reporter

logger = logging.getLogger(__name__)

_YES = re.compile(r"^[Yy]$")
_NO = re.compile(r"^[Nn]$")


class LineReader(Protocol):
    def read_line(self) -> Optional[str]:
        """Return one line without its newline, or None at end of input."""
        ...


class StdinReader:
    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdin

    def read_line(self) -> Optional[str]:
        line = self.stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")


class ScriptedReader:
    """Feeds a fixed sequence of answers; end of input once exhausted."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers: List[str] = list(answers)
        self.consumed = 0

    def read_line(self) -> Optional[str]:
        if self.consumed >= len(self._answers):
            return None
        line = self._answers[self.consumed]
        self.consumed += 1
        return line

    @property
    def remaining(self) -> int:
        return len(self._answers) - self.consumed


class Prompter:
    def __init__(self, reader: LineReader, reporter: Reporter) -> None:
        self.reader = reader
        self.reporter = reporter

    def _read(self) -> str:
        line = self.reader.read_line()
        return (line or "").strip()

    def prompt_with_default(self, text: str, default: str) -> str:
        self.reporter.ask(f"{text} (default: {default}): ")
        value = self._read() or default
        logger.info("Prompt %r -> %r", text, value)
        return value

    def prompt_yes_no(self, text: str, default: bool = True) -> bool:
        """Ask a yes/no question.

        The default letter is substituted before matching, so pressing enter
        and typing the default are the same answer. Responses that are
        neither a lone y nor a lone n resolve to the default.
        """

        self.reporter.ask(f"{text} {'(Y/n)' if default else '(y/N)'}: ")
        response = self._read() or ("y" if default else "n")
        if _YES.match(response):
            answer = True
        elif _NO.match(response):
            answer = False
        else:
            answer = default
        logger.info("Confirm %r -> %s", text, answer)
        return answer
