from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict

from ..context import SetupContext

logger = logging.getLogger(__name__)

_AGENT_VAR = re.compile(r"^(SSH_AUTH_SOCK|SSH_AGENT_PID)=([^;]+);")


def parse_agent_output(output: str) -> Dict[str, str]:
    """Pick the exported variables out of ``ssh-agent -s`` output."""

    found: Dict[str, str] = {}
    for line in output.splitlines():
        m = _AGENT_VAR.match(line.strip())
        if m:
            found[m.group(1)] = m.group(2)
    return found


def generate_key(ctx: SetupContext, path: Path, comment: str) -> None:
    if not ctx.dry_run:
        path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
    ctx.run(["ssh-keygen", "-t", "ed25519", "-C", comment, "-f", str(path), "-N", ""])


def start_agent(ctx: SetupContext) -> None:
    r = ctx.run(["ssh-agent", "-s"])
    agent_env = parse_agent_output(r.stdout)
    if agent_env:
        ctx.update_env(agent_env)
        logger.info("ssh-agent running (pid=%s)", agent_env.get("SSH_AGENT_PID"))


def add_to_keychain(ctx: SetupContext, path: Path) -> None:
    ctx.run(["ssh-add", "--apple-use-keychain", str(path)])


def public_key_path(path: Path) -> Path:
    return path.with_name(path.name + ".pub")
