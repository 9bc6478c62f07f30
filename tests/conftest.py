"""Shared fixtures for b32u64 tests."""

import pytest

from b32u64.api.cli import main


@pytest.fixture
def run_cli(capsys):
    """Run the CLI with argv and return (exit_code, stdout, stderr)."""
    def _run(*argv):
        code = main(list(argv))
        out, err = capsys.readouterr()
        return code, out, err
    return _run
