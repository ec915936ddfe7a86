"""
Pytest configuration and shared fixtures for hofkit tests.
"""

import pytest

from hofkit.cli import main


@pytest.fixture
def tutorial_values():
    """The integer list used throughout the filter and reduce examples."""
    return [1, 2, 3, 4, 5, 6, 890]


@pytest.fixture
def population():
    """City populations used by the mapping examples."""
    return {"City 1": 1000, "City 2": 6000, "City 3": 2500, "City 4": 4000}


@pytest.fixture
def recording_callback():
    """
    Factory fixture for callbacks that record every argument they receive.

    The returned callable exposes the recorded arguments as ``.calls``.
    An optional ``fail_on`` value makes the callback raise ValueError when
    it sees that argument.
    """

    def _create(func, fail_on=object()):
        def callback(*args):
            callback.calls.append(args if len(args) > 1 else args[0])
            if args[-1] == fail_on:
                raise ValueError(f"bad element {args[-1]!r}")
            return func(*args)

        callback.calls = []
        return callback

    return _create


@pytest.fixture
def run_cli(capsys):
    """Fixture to run the CLI and capture (exit_code, stdout, stderr)."""

    def _run(*argv: str) -> tuple[int, str, str]:
        code = main(["--no-color", *argv])
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run
