from __future__ import annotations

import logging

from ..context import SetupContext
from ..lib.profile import ALIASES_BLOCK, NVM_BLOCK, ensure_block, ensure_file

logger = logging.getLogger(__name__)


class ShellProfileStep:
    step_id = "40_shell_profile"

    def run(self, ctx: SetupContext) -> None:
        ctx.reporter.header("Step 4: Bash Profile Configuration")

        # Both dialects are always edited; the running shell does not matter here.
        profiles = ctx.profiles

        for path in profiles:
            if ensure_file(path, dry_run=ctx.dry_run):
                ctx.reporter.success(f"Created {path}")

        for path in profiles:
            if ensure_block(path, NVM_BLOCK, dry_run=ctx.dry_run):
                ctx.reporter.success(f"NVM configuration added to {path}")

        for path in profiles:
            if ensure_block(path, ALIASES_BLOCK, dry_run=ctx.dry_run):
                ctx.reporter.success(f"Development aliases added to {path}")
