"""macOS developer workstation setup.

Core design goals:
- Linear, interactive, one-shot
- Idempotent steps (command-exists, file-exists and marker checks)
- Fail fast on the first unguarded command failure
- Centralized logging
"""

__all__ = []
