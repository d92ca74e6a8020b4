"""Run black and ruff over src/ and tests/, then syntax-check the bundled
shell scripts with `bash -n`. Exits non-zero if any step fails."""

import subprocess
import sys
from pathlib import Path

TARGETS = ["src/", "tests/"]
SHELL_SCRIPTS = sorted(Path("src/zoclaw/scripts").glob("*.sh"))


def run(cmd):
    print(f"$ {' '.join(cmd)}")
    result = subprocess.run(cmd, capture_output=False)
    return result.returncode


def main():
    failed = []
    if run([sys.executable, "-m", "black"] + TARGETS) != 0:
        failed.append("black")
    if run([sys.executable, "-m", "ruff", "check", "--fix"] + TARGETS) != 0:
        failed.append("ruff")
    for script in SHELL_SCRIPTS:
        if run(["bash", "-n", str(script)]) != 0:
            failed.append(script.name)

    if failed:
        print(f"\nChecks failed: {', '.join(failed)}")
        sys.exit(1)

    print("\nAll checks passed.")


if __name__ == "__main__":
    main()
