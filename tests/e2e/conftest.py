"""E2E test fixtures: real contents index, isolated output directories."""

import subprocess
import sys

import pytest


def _run_cli(*args, timeout=60):
    """Run the apk-file CLI and return CompletedProcess."""
    cmd = [sys.executable, "-m", "apk_file.cli", *args]
    return subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)


@pytest.fixture
def run_cli():
    return _run_cli


@pytest.fixture
def e2e_output_dir(tmp_path):
    """Isolated output dir for CLI invocations."""
    d = tmp_path / "output"
    d.mkdir()
    return d
