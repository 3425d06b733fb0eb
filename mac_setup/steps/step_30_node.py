from __future__ import annotations

import logging

from ..context import SetupContext
from ..errors import SetupAborted
from ..lib.nvm import (
    install_nvm,
    load_nvm,
    nvm_alias_default,
    nvm_install,
    nvm_installed,
    nvm_use,
)

logger = logging.getLogger(__name__)


class NodeStep:
    step_id = "30_node"

    def run(self, ctx: SetupContext) -> None:
        ctx.reporter.header("Step 3: NVM and Node.js Installation")

        self._ensure_nvm(ctx)

        if ctx.which("node"):
            self._offer_switch(ctx)
        else:
            self._first_install(ctx)

    def _ensure_nvm(self, ctx: SetupContext) -> None:
        # NVM_DIR is exported by load_nvm; the installer must not see it
        # before ~/.nvm exists.
        if nvm_installed(ctx):
            ctx.reporter.success("NVM is already installed")
            load_nvm(ctx)
            return

        if not ctx.prompts.prompt_yes_no("Install NVM (Node Version Manager)?"):
            ctx.reporter.warning("NVM installation skipped")
            raise SetupAborted("NVM declined")

        install_nvm(ctx)
        load_nvm(ctx)
        ctx.reporter.success("NVM installed")

    def _offer_switch(self, ctx: SetupContext) -> None:
        current = ctx.run(["node", "-v"]).stdout.strip()
        ctx.node_version = current
        ctx.reporter.success(f"Node.js is already installed: {current}")

        if not ctx.prompts.prompt_yes_no("Install a different Node.js version?"):
            return

        version = ctx.prompts.prompt_with_default(
            "Node.js version", ctx.config.default_node_version
        )
        nvm_install(ctx, version)
        # Session only; the persisted default alias stays where it was.
        nvm_use(ctx, version)
        ctx.reporter.success(f"Node.js {version} installed and activated")

    def _first_install(self, ctx: SetupContext) -> None:
        version = ctx.prompts.prompt_with_default(
            "Node.js version to install", ctx.config.default_node_version
        )
        nvm_install(ctx, version)
        nvm_use(ctx, version)
        # New shells have nothing else to go on, so pin the default alias.
        nvm_alias_default(ctx, version)
        ctx.reporter.success(f"Node.js {version} installed")
