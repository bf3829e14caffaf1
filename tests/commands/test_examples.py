"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from reachctl.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["adjacency", "--examples"], ["reachctl adjacency -e A:B"]),
    (["matrix", "--examples"], ["--kind path", "--strategy per-pair"]),
    (["path", "--examples"], ["reachctl path A C"]),
    (["generate", "--examples"], ["--seed 42"]),
]


@pytest.mark.parametrize(
    ("args", "keywords"),
    EXAMPLES_COMMANDS,
    ids=[args[0] for args, _ in EXAMPLES_COMMANDS],
)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output


def test_examples_hidden_from_normal_run(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["matrix", "--help"])
    assert "--examples" in result.output
    assert "reachctl matrix -e A:B -e B:C" not in result.output
