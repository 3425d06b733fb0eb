from __future__ import annotations

import logging
import os
from typing import Optional, Sequence

from ..context import SetupContext

logger = logging.getLogger(__name__)

# Apple Silicon first, then Intel.
BREW_PREFIXES = ("/opt/homebrew/bin", "/usr/local/bin")


def brew_installed(ctx: SetupContext) -> bool:
    return ctx.which("brew") is not None


def brew_update(ctx: SetupContext) -> None:
    ctx.run(["brew", "update"], capture=False)


def install_homebrew(ctx: SetupContext) -> None:
    """Fetch the official installer and run it attached to the terminal.

    The installer asks for a sudo password and a confirmation, so it must
    not have its output captured.
    """

    script = ctx.run(["curl", "-fsSL", ctx.config.homebrew_install_url]).stdout
    ctx.run(["/bin/bash", "-c", script], capture=False)

    if not brew_installed(ctx):
        prefix = find_brew_prefix()
        if prefix:
            logger.info("Adding %s to PATH for this session", prefix)
            ctx.prepend_path(prefix)


def find_brew_prefix() -> Optional[str]:
    for prefix in BREW_PREFIXES:
        if os.access(os.path.join(prefix, "brew"), os.X_OK):
            return prefix
    return None


def brew_install(ctx: SetupContext, packages: Sequence[str]) -> None:
    if not packages:
        return
    ctx.run(["brew", "install", *packages], capture=False)
