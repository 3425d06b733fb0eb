from __future__ import annotations

import logging
import os
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

from .config import SetupConfig
from .console import Reporter
from .lib.command import CmdResult, Runner, run_cmd
from .prompts import LineReader, Prompter, StdinReader

logger = logging.getLogger(__name__)


@dataclass
class SetupContext:
    """Everything the steps share.

    ``env`` is a private copy of the process environment. Steps that would
    ``export`` or ``source`` something in a shell update it instead, and
    every command run through :meth:`run` sees it.
    """

    config: SetupConfig = field(default_factory=SetupConfig)
    reporter: Reporter = field(default_factory=Reporter)
    reader: LineReader = field(default_factory=StdinReader)
    runner: Runner = run_cmd
    env: Dict[str, str] = field(default_factory=lambda: dict(os.environ))
    platform: str = field(default_factory=lambda: sys.platform)
    dry_run: bool = False

    git_name: Optional[str] = None
    git_email: Optional[str] = None
    nvm_loaded: bool = False
    node_version: Optional[str] = None

    def __post_init__(self) -> None:
        self.prompts = Prompter(self.reader, self.reporter)

    @property
    def home(self) -> Path:
        home = self.env.get("HOME")
        return Path(home) if home else Path.home()

    def expand(self, path: str) -> Path:
        if path == "~" or path.startswith("~/"):
            return self.home / path[2:]
        return Path(path)

    @property
    def nvm_dir(self) -> Path:
        return self.home / ".nvm"

    @property
    def ssh_key_path(self) -> Path:
        return self.expand(self.config.ssh_key_path)

    @property
    def bash_profile(self) -> Path:
        return self.home / self.config.bash_profile

    @property
    def zsh_profile(self) -> Path:
        return self.home / self.config.zsh_profile

    @property
    def profiles(self) -> list[Path]:
        return [self.bash_profile, self.zsh_profile]

    @property
    def shell_name(self) -> str:
        if self.env.get("ZSH_VERSION") or self.env.get("SHELL", "").endswith("zsh"):
            return "zsh"
        return "bash"

    @property
    def shell_profile(self) -> Path:
        return self.zsh_profile if self.shell_name == "zsh" else self.bash_profile

    def run(
        self,
        argv: Sequence[str],
        *,
        check: bool = True,
        input_text: Optional[str] = None,
        capture: bool = True,
    ) -> CmdResult:
        return self.runner(
            argv,
            check=check,
            env=self.env,
            input_text=input_text,
            capture=capture,
            dry_run=self.dry_run,
        )

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name, path=self.env.get("PATH", ""))

    def update_env(self, values: Mapping[str, str]) -> None:
        for key, value in values.items():
            if self.env.get(key) != value:
                logger.debug("env %s=%s", key, value)
                self.env[key] = value

    def prepend_path(self, directory: str) -> None:
        parts = [p for p in self.env.get("PATH", "").split(os.pathsep) if p]
        if directory in parts:
            return
        self.env["PATH"] = os.pathsep.join([directory, *parts])
