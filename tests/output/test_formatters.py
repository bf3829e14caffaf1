"""Tests for the format_result dispatcher and OutputSettings."""

import json

from reachctl.domain.graph import Graph
from reachctl.output.formatters import OutputSettings, format_result
from reachctl.services.graph import GraphService
from reachctl.services.result import ServiceError, ServiceResult


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


def _path_result() -> ServiceResult:
    return GraphService(Graph.build([("A", "B")])).path_matrix()


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.cells.true == "1"
        assert s.cells.false == "0"


class TestFormatResult:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_path_result(), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "path_matrix"
        assert data["data"]["matrix"]["rows"]["A"] == [["A", True], ["B", True]]

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_path_result(), settings=settings))["ok"] is True

    def test_quiet_mode(self) -> None:
        output = format_result(_path_result(), settings=OutputSettings(quiet=True))
        assert output == "A[1,1]\nB[0,1]"

    def test_quiet_custom_cells(self) -> None:
        settings = OutputSettings(quiet=True, true_char="T", false_char="F")
        assert format_result(_path_result(), settings=settings) == "A[T,T]\nB[F,T]"

    def test_default_is_rich(self) -> None:
        assert "PATH MATRIX" in format_result(_path_result())

    def test_error_json(self) -> None:
        data = json.loads(format_result(_err(msg="bad"), settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["message"] == "bad"
