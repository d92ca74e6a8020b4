"""
Command table for the zoclaw dispatcher.

Each command maps to a shell script shipped in the package's scripts/
directory. The table is fixed at import time.
"""

from pathlib import Path
from types import MappingProxyType
from typing import NamedTuple

SCRIPTS_DIR = Path(__file__).parent / "scripts"


class Command(NamedTuple):
    name: str
    script: str
    description: str


COMMANDS = MappingProxyType(
    {
        "init": Command(
            "init", "setup.sh", "Full setup (Tailscale + OpenClaw + bootstrap)"
        ),
        "bootstrap": Command(
            "bootstrap", "bootstrap.sh", "Config patches only (if already installed)"
        ),
    }
)


def resolve_script(name: str, scripts_dir: Path = SCRIPTS_DIR) -> Path:
    """Return the script path for command `name`. Raises KeyError if unknown."""
    return Path(scripts_dir) / COMMANDS[name].script
