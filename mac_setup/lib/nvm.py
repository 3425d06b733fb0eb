"""NVM helpers.

nvm is a shell function rather than an executable, so each call sources
``nvm.sh`` in a fresh bash and passes the nvm arguments positionally.
Anything that has to outlive that bash (PATH after ``nvm use``, the
variables ``nvm.sh`` exports) is read back and stored in ``ctx.env``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from ..context import SetupContext
from .command import CmdResult, parse_env_dump

logger = logging.getLogger(__name__)

NVM_EXEC = '. "$NVM_DIR/nvm.sh" && nvm "$@"'
NVM_USE_PRINT_PATH = '. "$NVM_DIR/nvm.sh" && nvm use "$1" 1>&2 && printf "%s" "$PATH"'
NVM_SOURCE_ENV = '. "$NVM_DIR/nvm.sh" 1>&2 && env -0'


def nvm_script(ctx: SetupContext) -> Path:
    return ctx.nvm_dir / "nvm.sh"


def nvm_installed(ctx: SetupContext) -> bool:
    p = nvm_script(ctx)
    return p.is_file() and p.stat().st_size > 0


def export_nvm_dir(ctx: SetupContext) -> None:
    ctx.update_env({"NVM_DIR": str(ctx.nvm_dir)})


def install_nvm(ctx: SetupContext) -> None:
    script = ctx.run(["curl", "-fsSL", ctx.config.nvm_install_url]).stdout
    ctx.run(["bash"], input_text=script, capture=False)


def load_nvm(ctx: SetupContext) -> None:
    """Source nvm.sh into the context environment."""

    export_nvm_dir(ctx)
    r = ctx.run(["bash", "-c", NVM_SOURCE_ENV])
    sourced = parse_env_dump(r.stdout)
    ctx.update_env({k: v for k, v in sourced.items() if k == "PATH" or k.startswith("NVM_")})
    ctx.nvm_loaded = True
    logger.info("Loaded %s", nvm_script(ctx))


def nvm(ctx: SetupContext, args: Sequence[str], *, capture: bool = False) -> CmdResult:
    return ctx.run(["bash", "-c", NVM_EXEC, "nvm", *args], capture=capture)


def nvm_install(ctx: SetupContext, version: str) -> None:
    nvm(ctx, ["install", version])


def nvm_use(ctx: SetupContext, version: str) -> None:
    """Activate ``version`` for the rest of this run (not persisted)."""

    r = ctx.run(["bash", "-c", NVM_USE_PRINT_PATH, "nvm", version])
    if r.stdout:
        ctx.update_env({"PATH": r.stdout})
    ctx.node_version = version


def nvm_alias_default(ctx: SetupContext, version: str) -> None:
    nvm(ctx, ["alias", "default", version])
