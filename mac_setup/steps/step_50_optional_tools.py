from __future__ import annotations

import logging

from ..context import SetupContext
from ..lib.brew import brew_install
from ..lib.npm import npm_install_global

logger = logging.getLogger(__name__)


class OptionalToolsStep:
    step_id = "50_optional_tools"

    def run(self, ctx: SetupContext) -> None:
        cfg = ctx.config
        ctx.reporter.header("Step 5: Optional Development Tools")

        if ctx.prompts.prompt_yes_no(
            f"Install additional development tools ({', '.join(cfg.cli_tools)})?"
        ):
            brew_install(ctx, cfg.cli_tools)
            ctx.reporter.success("Development tools installed")

        if ctx.prompts.prompt_yes_no(
            f"Install Node package manager alternatives ({', '.join(cfg.node_package_managers)})?"
        ):
            npm_install_global(ctx, cfg.node_package_managers)
            ctx.reporter.success("Package managers installed")

        if ctx.prompts.prompt_yes_no(f"Install code formatter ({', '.join(cfg.formatters)})?"):
            npm_install_global(ctx, cfg.formatters)
            ctx.reporter.success("Prettier installed globally")
