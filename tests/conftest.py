"""Shared pytest fixtures for reachctl tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from reachctl.domain.graph import Graph
from reachctl.services.telemetry import _current_span, disable_telemetry

CYCLE_EDGES = [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def cycle_graph() -> Graph:
    """4-cycle A -> B -> C -> D -> A."""
    return Graph.build(CYCLE_EDGES)


@pytest.fixture
def chain_graph() -> Graph:
    """Chain A -> B -> C plus an isolated D."""
    g = Graph.build([("A", "B"), ("B", "C")])
    g.add_edge("D", "D")
    return g


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no config overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("REACHCTL_CONFIG", raising=False)
    for name in ("REACHCTL_GENERATE__SEED", "REACHCTL_REACHABILITY__STRATEGY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """The CLI enables telemetry on --verbose; never leak it across tests."""
    yield
    disable_telemetry()
    _current_span.set(None)
