"""Command-line entry point in scripted mode."""

from __future__ import annotations

from typer.testing import CliRunner

from main import app

runner = CliRunner()


def test_scripted_solved_board_exits_zero() -> None:
    result = runner.invoke(app, ["-q", "shuffle=0", "--seed", "1", "--moves", ""])
    assert result.exit_code == 0, result.output
    assert "solved=True" in result.output
    assert "start=1,2,3,4,5,6,7,8," in result.output


def test_scripted_move_off_goal_exits_one() -> None:
    result = runner.invoke(app, ["-q", "width=2&height=2&shuffle=0", "--moves", "r"])
    assert result.exit_code == 1
    assert "start=1,2,,3" in result.output
    assert "moves=1 solved=False" in result.output


def test_scripted_round_trip() -> None:
    result = runner.invoke(app, ["-q", "shuffle=0", "--moves", "rdul"])
    assert result.exit_code == 0, result.output
    assert "moves=4 solved=True" in result.output


def test_start_option_is_used() -> None:
    result = runner.invoke(app, ["-q", "shuffle=0&start=1,2,3,4,5,6,7,,8", "--moves", "l"])
    assert result.exit_code == 0, result.output
    assert "moves=1 solved=True" in result.output
