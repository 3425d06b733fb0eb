from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

DEFAULT_LOG_PATH = "~/Library/Logs/mac-setup.log"

HOMEBREW_INSTALL_URL = "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"
NVM_VERSION = "v0.39.0"
NVM_INSTALL_URL = "https://raw.githubusercontent.com/nvm-sh/nvm/{version}/install.sh"
GITHUB_KEYS_URL = "https://github.com/settings/keys"


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    return raw.get(name) or {}


@dataclass(frozen=True)
class SetupConfig:
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def log_path(self) -> str:
        return str(_section(self.raw, "paths").get("log") or DEFAULT_LOG_PATH)

    @property
    def homebrew_install_url(self) -> str:
        return str(_section(self.raw, "homebrew").get("install_url") or HOMEBREW_INSTALL_URL)

    @property
    def nvm_version(self) -> str:
        return str(_section(self.raw, "nvm").get("version") or NVM_VERSION)

    @property
    def nvm_install_url(self) -> str:
        url = _section(self.raw, "nvm").get("install_url")
        return str(url or NVM_INSTALL_URL.format(version=self.nvm_version))

    @property
    def default_node_version(self) -> str:
        return str(_section(self.raw, "node").get("default_version") or "lts/iron")

    @property
    def default_git_name(self) -> str:
        return str(_section(self.raw, "git").get("default_name") or "John Doe")

    @property
    def default_git_email(self) -> str:
        return str(_section(self.raw, "git").get("default_email") or "you@example.com")

    @property
    def git_default_branch(self) -> str:
        return str(_section(self.raw, "git").get("default_branch") or "main")

    @property
    def git_pull_rebase(self) -> bool:
        return bool(_section(self.raw, "git").get("pull_rebase", False))

    @property
    def ssh_key_path(self) -> str:
        return str(_section(self.raw, "ssh").get("key_path") or "~/.ssh/id_ed25519")

    @property
    def github_keys_url(self) -> str:
        return str(_section(self.raw, "ssh").get("keys_url") or GITHUB_KEYS_URL)

    @property
    def bash_profile(self) -> str:
        return str(_section(self.raw, "profiles").get("bash") or ".bash_profile")

    @property
    def zsh_profile(self) -> str:
        return str(_section(self.raw, "profiles").get("zsh") or ".zshrc")

    @property
    def cli_tools(self) -> List[str]:
        return list(_section(self.raw, "tools").get("cli") or ["git", "curl", "wget"])

    @property
    def node_package_managers(self) -> List[str]:
        return list(_section(self.raw, "tools").get("node_package_managers") or ["yarn", "pnpm"])

    @property
    def formatters(self) -> List[str]:
        return list(_section(self.raw, "tools").get("formatters") or ["prettier"])


def load_setup_config(path: Optional[str] = None) -> SetupConfig:
    """Load YAML overrides; no path means built-in defaults."""

    if path is None:
        return SetupConfig()

    p = Path(path).expanduser()
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("setup config must be YAML")

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{p.name} must contain a mapping/object")

    return SetupConfig(raw=raw)
