"""
Pytest configuration and shared fixtures.

Marks:
    unit        -- no external tools needed
    integration -- requires bash on PATH; runs real stub scripts

Integration tests are skipped automatically when bash is absent, so the unit
test suite always runs cleanly.
"""

import shutil

import pytest

_HAVE_BASH = shutil.which("bash") is not None


# ---------------------------------------------------------------------------
# Auto-skip via markers
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(config, items):
    for item in items:
        if item.get_closest_marker("integration") and not _HAVE_BASH:
            item.add_marker(pytest.mark.skip(reason="integration deps missing: bash"))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def scripts_dir(tmp_path):
    """An empty scripts directory; populate it with write_script()."""
    path = tmp_path / "scripts"
    path.mkdir()
    return path


@pytest.fixture()
def write_script(scripts_dir):
    """Write a stub bash script into scripts_dir and return its path."""

    def _write(name: str, body: str):
        script = scripts_dir / name
        script.write_text("#!/usr/bin/env bash\n" + body + "\n", encoding="utf-8")
        return script

    return _write
