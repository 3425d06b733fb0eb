from __future__ import annotations

import logging

from ..context import SetupContext
from ..errors import UnsupportedPlatformError

logger = logging.getLogger(__name__)

SUPPORTED_PLATFORM = "darwin"


def check_platform(ctx: SetupContext) -> None:
    """Refuse to run anywhere but macOS. Must not touch the filesystem."""

    if not ctx.platform.startswith(SUPPORTED_PLATFORM):
        ctx.reporter.error("This script is designed for macOS only")
        raise UnsupportedPlatformError(ctx.platform)


class CheckPlatformStep:
    step_id = "00_check_platform"

    def run(self, ctx: SetupContext) -> None:
        check_platform(ctx)

        logger.info("Platform %s ok", ctx.platform)
        ctx.reporter.header("macOS Development Environment Setup")
        ctx.reporter.echo("This script will configure your macOS environment for development.")
        ctx.reporter.echo("You'll be prompted for configuration options with sensible defaults.")
