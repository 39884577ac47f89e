"""Command line entry point."""

from __future__ import annotations

from typer.testing import CliRunner

from tilesolver.main import EXIT_INVALID, EXIT_NO_SOLUTION, app

runner = CliRunner()


def test_solve_prints_moves() -> None:
    result = runner.invoke(app, ["solve", "0", "1", "2", "3", "4", "5", "6", "8", "7"])
    assert result.exit_code == 0, result.output
    assert "1 moves: 7" in result.output


def test_solve_goal() -> None:
    result = runner.invoke(app, ["solve", "0", "1", "2", "3"])
    assert result.exit_code == 0, result.output
    assert "0 moves" in result.output


def test_solve_rejects_invalid_grid() -> None:
    result = runner.invoke(app, ["solve", "0", "1", "2"])
    assert result.exit_code == EXIT_INVALID
    assert "Invalid grid" in result.output

    result = runner.invoke(app, ["solve", "0", "0", "1", "3"])
    assert result.exit_code == EXIT_INVALID


def test_solve_reports_no_solution() -> None:
    result = runner.invoke(app, ["solve", "1", "0", "2", "3", "4", "5", "6", "7", "8"])
    assert result.exit_code == EXIT_NO_SOLUTION
    assert "no solution" in result.output


def test_solve_budget_from_environment() -> None:
    result = runner.invoke(
        app,
        ["solve", "1", "2", "0", "3", "4", "5", "6", "7", "8"],
        env={"TILESOLVER_MAX_EXPANSIONS": "1"},
    )
    assert result.exit_code == EXIT_NO_SOLUTION
    assert "budget_exceeded" in result.output


def test_shuffle() -> None:
    result = runner.invoke(app, ["shuffle", "-s", "3", "-m", "10", "--seed", "2"])
    assert result.exit_code == 0, result.output
    assert "Shuffled" in result.output


def test_demo_animates_solution() -> None:
    result = runner.invoke(app, ["demo", "-s", "3", "-m", "12", "--seed", "1", "-d", "0"])
    assert result.exit_code == 0, result.output
    assert "Solved in" in result.output


def test_demo_on_2x2_full_cycle() -> None:
    result = runner.invoke(app, ["demo", "-s", "2", "-m", "12", "--seed", "0", "-d", "0"])
    assert result.exit_code == 0, result.output
    assert "Solved in" in result.output
