from __future__ import annotations

import logging
from typing import Sequence

from ..context import SetupContext
from ..lib.nvm import nvm_installed
from ..lib.ssh import public_key_path

logger = logging.getLogger(__name__)

NOT_INSTALLED = "not installed"


def _version(ctx: SetupContext, argv: Sequence[str]) -> str:
    if ctx.which(argv[0]) is None:
        return NOT_INSTALLED
    r = ctx.run(argv, check=False)
    lines = r.stdout.strip().splitlines()
    if not r.ok or not lines:
        return NOT_INSTALLED
    return lines[0]


class SummaryStep:
    step_id = "90_summary"

    def run(self, ctx: SetupContext) -> None:
        rep = ctx.reporter
        rep.header("Setup Complete!")

        rep.echo("Your macOS development environment has been configured!", style="green")
        rep.echo()
        rep.echo("Summary of installed/configured tools:")
        versions = {
            "Homebrew": _version(ctx, ["brew", "--version"]),
            "Git": _version(ctx, ["git", "--version"]),
            "Node.js": _version(ctx, ["node", "-v"]),
            "npm": _version(ctx, ["npm", "-v"]),
        }
        for name, version in versions.items():
            rep.echo(f"  • {name}: {version}")
        logger.info("Versions: %s", versions)

        if nvm_installed(ctx):
            rep.echo("  • NVM: installed")

        rep.notice("Next steps:")
        rep.echo(f"1. Reload your shell: source {ctx.shell_profile}")
        rep.echo("2. Verify Node.js: node -v && npm -v")
        rep.echo("3. Clone your repositories and start coding!")

        if public_key_path(ctx.ssh_key_path).is_file():
            rep.notice("SSH Key Tip:")
            rep.echo("Your SSH key has been created. Add it to GitHub at:")
            rep.echo(ctx.config.github_keys_url)

        rep.echo()
