"""
Runs a dispatched script and relays its exit status.

The child inherits stdin, stdout and stderr so interactive prompts and
streaming output reach the user directly.
"""

import subprocess
import sys
from pathlib import Path

_FALLBACK_STATUS = 1


def run_script(script: Path, env=None, interpreter: str = "bash") -> int:
    """
    Run `interpreter script` and block until it exits.

    Returns the child's exit status. Returns 1 when the script is missing,
    the interpreter cannot be launched, or the child was killed by a signal.
    """
    script = Path(script)
    if not script.is_file():
        print(f"zoclaw: script not found: {script}", file=sys.stderr)
        return _FALLBACK_STATUS

    try:
        result = subprocess.run(
            [interpreter, str(script)],
            env=dict(env) if env is not None else None,
        )
    except OSError as exc:
        print(f"zoclaw: failed to run {interpreter} {script}: {exc}", file=sys.stderr)
        return _FALLBACK_STATUS

    # Negative means terminated by signal; there is no exit status to relay.
    if result.returncode < 0:
        return _FALLBACK_STATUS
    return result.returncode
