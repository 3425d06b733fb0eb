"""Marker-guarded edits to shell startup files.

A profile is treated as a sequence of line-blocks separated by blank lines.
A block we own is identified by a marker substring; it is appended only when
no existing block carries that marker, so applying the same block any number
of times leaves the file as if it had been applied once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProfileBlock:
    marker: str
    text: str


NVM_BLOCK = ProfileBlock(
    marker="NVM_DIR",
    text=(
        "\n"
        "# NVM Configuration\n"
        'export NVM_DIR="$HOME/.nvm"\n'
        '[ -s "$NVM_DIR/nvm.sh" ] && \\. "$NVM_DIR/nvm.sh"\n'
        '[ -s "$NVM_DIR/bash_completion" ] && \\. "$NVM_DIR/bash_completion"\n'
        "\n"
    ),
)

ALIASES_BLOCK = ProfileBlock(
    marker="Development Aliases",
    text=(
        "\n"
        "# Development Aliases\n"
        'alias ll="ls -lah"\n'
        'alias gs="git status"\n'
        'alias ga="git add"\n'
        'alias gc="git commit -m"\n'
        'alias gp="git push"\n'
        'alias gl="git log --oneline -10"\n'
        "\n"
    ),
)


def split_blocks(text: str) -> List[List[str]]:
    blocks: List[List[str]] = []
    current: List[str] = []
    for line in text.splitlines():
        if line.strip():
            current.append(line)
        elif current:
            blocks.append(current)
            current = []
    if current:
        blocks.append(current)
    return blocks


def has_block(text: str, marker: str) -> bool:
    return any(marker in line for block in split_blocks(text) for line in block)


def ensure_file(path: Path, *, dry_run: bool = False) -> bool:
    """Create an empty file if missing. Returns True if it was created."""

    if path.exists():
        return False
    if dry_run:
        logger.info("Would create %s", path)
        return True
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    logger.info("Created %s", path)
    return True


def ensure_block(path: Path, block: ProfileBlock, *, dry_run: bool = False) -> bool:
    """Append ``block`` to ``path`` unless a block with its marker exists.

    Returns True if the block was appended.
    """

    # Profiles are not guaranteed to be UTF-8; undecodable bytes must not hide a marker.
    current = path.read_text(encoding="utf-8", errors="surrogateescape") if path.exists() else ""
    if has_block(current, block.marker):
        logger.info("%s already contains %r", path, block.marker)
        return False

    if dry_run:
        logger.info("Would append %r block to %s", block.marker, path)
        return True

    with path.open("a", encoding="utf-8") as f:
        f.write(block.text)
    logger.info("Appended %r block to %s", block.marker, path)
    return True
