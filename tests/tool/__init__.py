"""Test helpers for hanabi-canvas tools."""

import pytest

from hanabi_canvas.tool.hanabi_canvas import main


def run_command(args: list[str], capsys: pytest.CaptureFixture[str]) -> str:
    """Run the command line tool and return what it printed."""
    main(args)
    return capsys.readouterr().out
