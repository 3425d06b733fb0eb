from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.text import Text

logger = logging.getLogger(__name__)

RULE = "=" * 40


class Reporter:
    """Coloured status lines for the interactive session.

    Messages are also mirrored to the log so the log file alone tells the
    story of a run.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(highlight=False)

    def header(self, title: str) -> None:
        logger.info("== %s ==", title)
        self.console.print()
        self.console.print(Text(RULE, style="blue"))
        self.console.print(Text(title, style="blue"))
        self.console.print(Text(RULE, style="blue"))
        self.console.print()

    def success(self, message: str) -> None:
        logger.info(message)
        self.console.print(Text(f"✓ {message}", style="green"))

    def error(self, message: str) -> None:
        logger.error(message)
        self.console.print(Text(f"✗ {message}", style="red"))

    def warning(self, message: str) -> None:
        logger.warning(message)
        self.console.print(Text(f"⚠ {message}", style="yellow"))

    def notice(self, message: str) -> None:
        self.console.print()
        self.console.print(Text(message, style="yellow"))

    def echo(self, message: str = "", style: Optional[str] = None) -> None:
        self.console.print(Text(message, style=style or ""))

    def ask(self, prompt: str) -> None:
        self.console.print(Text(prompt), end="")
