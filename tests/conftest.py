"""
Shared fixtures: a throwaway HOME, scripted answers, and fake command runners.
"""

import io
import os
import stat
from pathlib import Path
from typing import Callable, Dict, List, Optional, Set

import pytest
from rich.console import Console

from mac_setup.config import SetupConfig
from mac_setup.console import Reporter
from mac_setup.context import SetupContext
from mac_setup.errors import CommandError
from mac_setup.lib.command import CmdResult
from mac_setup.lib.nvm import NVM_EXEC, NVM_SOURCE_ENV, NVM_USE_PRINT_PATH
from mac_setup.prompts import ScriptedReader


def make_executable(directory: Path, name: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    p = directory / name
    p.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    p.chmod(p.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return p


Handler = Callable[[List[str], Optional[str], Dict[str, str]], Optional[CmdResult]]


class FakeRunner:
    """Records every command; answers via handlers, else succeeds silently."""

    def __init__(self, *handlers: Handler) -> None:
        self.handlers: List[Handler] = list(handlers)
        self.calls: List[List[str]] = []
        self.inputs: List[Optional[str]] = []

    def __call__(
        self,
        argv,
        *,
        check=True,
        env=None,
        cwd=None,
        input_text=None,
        capture=True,
        dry_run=False,
    ) -> CmdResult:
        argv = list(argv)
        self.calls.append(argv)
        self.inputs.append(input_text)
        self.last_env = dict(env or {})

        result = CmdResult(argv=argv, returncode=0, stdout="", stderr="")
        if not dry_run:
            for handler in self.handlers:
                r = handler(argv, input_text, self.last_env)
                if r is not None:
                    result = r
                    break

        if check and result.returncode != 0:
            raise CommandError(argv, result.returncode, result.stderr)
        return result

    def called(self, *prefix: str) -> bool:
        return any(call[: len(prefix)] == list(prefix) for call in self.calls)

    def commands(self) -> List[str]:
        return [call[0] for call in self.calls]


class FakeNvm:
    """Models nvm: installed versions, a persisted default alias, and PATH.

    The active node is whichever version directory comes first on the PATH
    a command runs with, as with the real thing.
    """

    def __init__(self, home: Path, base_path: str) -> None:
        self.home = home
        self.base_path = base_path
        self.installed: Set[str] = set()
        self.default: Optional[str] = None

    def bin_dir(self, version: str) -> Path:
        return self.home / ".nvm" / "versions" / "node" / f"v{version}" / "bin"

    def seed(self, version: str, *, default: bool = True) -> None:
        self._install(version)
        if default:
            self.default = version

    def _install(self, version: str) -> None:
        self.installed.add(version)
        make_executable(self.bin_dir(version), "node")
        make_executable(self.bin_dir(version), "npm")

    def _path_for(self, version: Optional[str]) -> str:
        if version is None:
            return self.base_path
        return os.pathsep.join([str(self.bin_dir(version)), self.base_path])

    def _active(self, path: str) -> Optional[str]:
        for part in path.split(os.pathsep):
            for version in self.installed:
                if part == str(self.bin_dir(version)):
                    return version
        return None

    def __call__(self, argv: List[str], input_text: Optional[str], env: Dict[str, str]) -> Optional[CmdResult]:
        def ok(stdout: str = "") -> CmdResult:
            return CmdResult(argv=argv, returncode=0, stdout=stdout, stderr="")

        if argv[:3] == ["bash", "-c", NVM_SOURCE_ENV]:
            dump = {
                "NVM_DIR": str(self.home / ".nvm"),
                "NVM_CD_FLAGS": "",
                "PATH": self._path_for(self.default),
                "HOME": str(self.home),
            }
            return ok("".join(f"{k}={v}\0" for k, v in dump.items()))

        if argv[:3] == ["bash", "-c", NVM_USE_PRINT_PATH]:
            version = argv[4]
            if version not in self.installed:
                return CmdResult(argv=argv, returncode=3, stdout="", stderr="N/A: version not installed")
            return ok(self._path_for(version))

        if argv[:3] == ["bash", "-c", NVM_EXEC]:
            args = argv[4:]
            if args[:1] == ["install"]:
                self._install(args[1])
                return ok()
            if args[:2] == ["alias", "default"]:
                self.default = args[2]
                return ok()
            return ok()

        if argv == ["node", "-v"]:
            version = self._active(env.get("PATH", ""))
            return ok(f"v{version}\n" if version else "")

        return None


@pytest.fixture
def home(tmp_path):
    h = tmp_path / "home"
    h.mkdir()
    return h


@pytest.fixture
def bin_dir(tmp_path):
    b = tmp_path / "bin"
    b.mkdir()
    return b


@pytest.fixture
def make_ctx(home, bin_dir):
    """Build a SetupContext with scripted answers and captured console output."""

    def _make(
        answers=(),
        *,
        runner=None,
        platform: str = "darwin",
        env: Optional[Dict[str, str]] = None,
        config: Optional[SetupConfig] = None,
        dry_run: bool = False,
    ) -> SetupContext:
        console = Console(file=io.StringIO(), width=200, highlight=False, color_system=None)
        base_env = {"HOME": str(home), "PATH": str(bin_dir), "SHELL": "/bin/zsh"}
        base_env.update(env or {})
        return SetupContext(
            config=config or SetupConfig(),
            reporter=Reporter(console),
            reader=ScriptedReader(answers),
            runner=runner or FakeRunner(),
            env=base_env,
            platform=platform,
            dry_run=dry_run,
        )

    return _make


def output_of(ctx: SetupContext) -> str:
    return ctx.reporter.console.file.getvalue()
