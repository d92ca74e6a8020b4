"""
zoclaw CLI entry point.

Maps one command name to a bundled shell script and runs it with bash,
relaying the script's exit status. Argument parsing is a pure function so it
can be tested without spawning anything.

Usage:
    zoclaw init [--next]
    zoclaw bootstrap [--next]
"""

import sys
from dataclasses import dataclass
from pathlib import Path

from zoclaw.commands import COMMANDS, SCRIPTS_DIR, resolve_script
from zoclaw.dependencies import REQUIRED_TOOLS, check_dependencies
from zoclaw.environment import build_env
from zoclaw.runner import run_script

PROG = "zoclaw"

OPTIONS = [
    ("--next", "Use @next (dev) channel for dependencies"),
]


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Invocation:
    command: str | None
    flags: tuple[str, ...] = ()

    @property
    def next_channel(self) -> bool:
        return "--next" in self.flags


def parse_args(argv) -> Invocation:
    """
    Split argv into a command name and flags.

    The first token not starting with '-' is the command; every '-' token is a
    flag wherever it appears. Only --next has meaning; other flags are kept
    but never rejected.
    """
    argv = list(argv)
    command = next((a for a in argv if not a.startswith("-")), None)
    flags = tuple(a for a in argv if a.startswith("-"))
    return Invocation(command=command, flags=flags)


# ---------------------------------------------------------------------------
# Usage
# ---------------------------------------------------------------------------


def format_usage() -> str:
    lines = [f"Usage: {PROG} <command> [options]", "", "Commands:"]
    for cmd in COMMANDS.values():
        lines.append(f"  {cmd.name:10s}  {cmd.description}")
    lines += ["", "Options:"]
    for flag, help_text in OPTIONS:
        lines.append(f"  {flag:10s}  {help_text}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv=None, scripts_dir: Path = SCRIPTS_DIR) -> int:
    invocation = parse_args(sys.argv[1:] if argv is None else argv)

    if invocation.command not in COMMANDS:
        print(format_usage())
        # No command is a help request; an unknown one is a user error.
        return 0 if invocation.command is None else 1

    script = resolve_script(invocation.command, scripts_dir)
    env = build_env(next_channel=invocation.next_channel)

    if check_dependencies(REQUIRED_TOOLS) != 0:
        return 1
    return run_script(script, env)


if __name__ == "__main__":
    sys.exit(main())
