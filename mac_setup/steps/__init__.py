from .step_00_check_platform import CheckPlatformStep
from .step_10_homebrew import HomebrewStep
from .step_20_git import GitStep
from .step_30_node import NodeStep
from .step_40_shell_profile import ShellProfileStep
from .step_50_optional_tools import OptionalToolsStep
from .step_90_summary import SummaryStep

__all__ = [
    "CheckPlatformStep",
    "HomebrewStep",
    "GitStep",
    "NodeStep",
    "ShellProfileStep",
    "OptionalToolsStep",
    "SummaryStep",
]
