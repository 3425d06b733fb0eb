from __future__ import annotations

from typing import Sequence

from ..context import SetupContext


def npm_install_global(ctx: SetupContext, packages: Sequence[str]) -> None:
    if not packages:
        return
    ctx.run(["npm", "install", "-g", *packages], capture=False)
