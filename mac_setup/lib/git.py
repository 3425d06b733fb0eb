from __future__ import annotations

import logging

from ..context import SetupContext

logger = logging.getLogger(__name__)


def git_config_get(ctx: SetupContext, key: str) -> str:
    """Read a global git setting; unset (non-zero exit) reads as ''."""

    r = ctx.run(["git", "config", "--global", key], check=False)
    if not r.ok:
        return ""
    return r.stdout.strip()


def git_config_set(ctx: SetupContext, key: str, value: str) -> None:
    ctx.run(["git", "config", "--global", key, value])
