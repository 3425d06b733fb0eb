from __future__ import annotations

import logging

from ..context import SetupContext
from ..lib.brew import brew_installed, brew_update, install_homebrew

logger = logging.getLogger(__name__)


class HomebrewStep:
    step_id = "10_homebrew"

    def run(self, ctx: SetupContext) -> None:
        ctx.reporter.header("Step 1: Homebrew Installation")

        if brew_installed(ctx):
            ctx.reporter.success("Homebrew is already installed")
            if ctx.prompts.prompt_yes_no("Update Homebrew?"):
                brew_update(ctx)
                ctx.reporter.success("Homebrew updated")
            return

        if ctx.prompts.prompt_yes_no("Install Homebrew?"):
            install_homebrew(ctx)
            ctx.reporter.success("Homebrew installed")
        else:
            # Later brew-dependent installs are left to fail on their own.
            ctx.reporter.warning("Homebrew installation skipped")
