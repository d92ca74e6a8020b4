"""
Tool checks for zoclaw commands.

Callers pass a mapping of tool name -> install hint. Missing tools are
reported on stderr and turned into a non-zero status for the caller to return.
"""

import shutil
import sys

REQUIRED_TOOLS = {
    "bash": "https://www.gnu.org/software/bash/  (or your system package manager)",
}


def missing_tools(tools: dict) -> list[str]:
    """Return the names in `tools` that are not on PATH, in table order."""
    return [name for name in tools if not shutil.which(name)]


def check_dependencies(tools: dict) -> int:
    """
    Report any tool in `tools` that is absent from PATH.

    Returns 0 when everything is present, 1 otherwise.
    """
    missing = missing_tools(tools)
    for name in missing:
        print(
            f"zoclaw: {name} not found on PATH; install from {tools[name]}",
            file=sys.stderr,
        )
    return 1 if missing else 0
