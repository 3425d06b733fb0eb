from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import load_setup_config
from .context import SetupContext
from .errors import CommandError, UnsupportedPlatformError
from .logging_utils import configure_logging
from .pipeline import PipelineResult, run_pipeline
from .steps import (
    CheckPlatformStep,
    GitStep,
    HomebrewStep,
    NodeStep,
    OptionalToolsStep,
    ShellProfileStep,
    SummaryStep,
)
from .steps.step_00_check_platform import check_platform

logger = logging.getLogger(__name__)


def build_steps():
    return [
        CheckPlatformStep(),
        HomebrewStep(),
        GitStep(),
        NodeStep(),
        ShellProfileStep(),
        OptionalToolsStep(),
        SummaryStep(),
    ]


def run(ctx: SetupContext) -> int:
    """Run the setup pipeline and map its outcome to an exit status."""

    try:
        result: PipelineResult = run_pipeline(ctx=ctx, steps=build_steps())
    except UnsupportedPlatformError as e:
        logger.error("%s", e)
        return 1
    except CommandError as e:
        logger.error("%s", e)
        ctx.reporter.error(str(e))
        return e.returncode if e.returncode > 0 else 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130
    except Exception:
        logger.exception("Setup failed")
        raise

    logger.info("Ran steps: %s", result.ran_steps)
    if result.aborted_at:
        logger.info("Finished early at %s", result.aborted_at)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="mac-setup",
        description="Interactive macOS developer workstation setup.",
    )
    p.add_argument("--config", default=None, help="YAML file overriding built-in defaults")
    p.add_argument("--log", default=None, help="Path to setup log")
    p.add_argument("--dry-run", action="store_true", help="Log commands and file edits without running them")
    p.add_argument("--verbose", action="store_true", help="Also log to the terminal")

    args = p.parse_args(argv)

    cfg = load_setup_config(args.config)
    ctx = SetupContext(config=cfg, dry_run=bool(args.dry_run))

    # Before logging: an unsupported host must be left exactly as it was.
    try:
        check_platform(ctx)
    except UnsupportedPlatformError:
        return 1

    configure_logging(
        log_path=args.log or cfg.log_path,
        level=logging.DEBUG if args.verbose else logging.INFO,
        also_console=bool(args.verbose),
    )

    return run(ctx)


def cli() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    cli()
