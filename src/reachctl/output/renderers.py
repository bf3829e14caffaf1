"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from reachctl.output.console import bit_style, create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from reachctl.services.result import ServiceResult


@dataclass(frozen=True)
class CellChars:
    """Characters printed for True / False matrix cells."""

    true: str = "1"
    false: str = "0"

    def __call__(self, value: bool) -> str:
        return self.true if value else self.false


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    cells: CellChars | None = None,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)
    cells = cells or CellChars()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, cells=cells, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult, *, cells: CellChars | None = None) -> str:
    """Render minimal, pipe-friendly output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    cells = cells or CellChars()
    d = result.data
    if result.op == "adjacency_list":
        return "\n".join(_adjacency_lines(d.get("adjacency", {})))
    if result.op in ("adjacency_matrix", "path_matrix"):
        return "\n".join(_bit_rows(d.get("matrix", {}), cells))
    if result.op == "matrices":
        blocks = [
            _bit_rows(d.get("path_matrix", {}), cells),
            _bit_rows(d.get("adjacency_matrix", {}), cells),
        ]
        return "\n\n".join("\n".join(rows) for rows in blocks)
    if result.op == "has_path":
        return "true" if d.get("reachable") else "false"
    if result.op == "generate":
        return "\n".join(f"{src} {dest}" for src, dest in d.get("edges", []))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _adjacency_lines(adjacency: dict[str, list[str]]) -> list[str]:
    return [f"{label}: [{','.join(neighbors)}]" for label, neighbors in adjacency.items()]


def _bit_rows(matrix: dict[str, Any], cells: CellChars) -> list[str]:
    """``A[1,0,1]`` style rows, one per label."""
    rows: dict[str, list[list[Any]]] = matrix.get("rows", {})
    return [
        f"{label}[{','.join(cells(bool(value)) for _, value in row)}]"
        for label, row in rows.items()
    ]


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="reach.ok")
    op = Text(f"  {result.op}", style="reach.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="reach.key")
    console.print(k, Text(str(value)), end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations")
    if annotations:
        line += "  (" + ", ".join(f"{ak}={av}" for ak, av in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _matrix_table(matrix: dict[str, Any], cells: CellChars, *, title: str) -> Table | Text:
    """Build a Rich Table with a header row and column of labels."""
    labels: list[str] = matrix.get("labels", [])
    if not labels:
        return Text(f"{title}: (empty graph)", style="dim")

    table = Table(title=title, show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("", style="reach.label", no_wrap=True)
    for label in labels:
        table.add_column(Text(label), justify="center", no_wrap=True)

    for label, row in matrix.get("rows", {}).items():
        rendered: list[Any] = [Text(label)]
        for col, value in row:
            rendered.append(Text(cells(bool(value)), style=bit_style(value, diagonal=col == label)))
        table.add_row(*rendered)
    return table


def _print_adjacency(console: Console, data: dict[str, Any]) -> None:
    adjacency: dict[str, list[str]] = data.get("adjacency") or data.get("adjacency_list", {})
    console.print(f"Total vertices: [bold]{data.get('vertex_count', len(adjacency))}[/bold]")
    for label, neighbors in adjacency.items():
        console.print(
            Text(f"{label}", style="reach.label"),
            Text(f": [{','.join(neighbors)}]"),
            sep="",
        )


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="reach.error")
    op = Text(f"  {result.op}", style="reach.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Graph renderers ───────────────────────────────────────────────────


def _render_adjacency_list(
    result: ServiceResult, console: Console, *, cells: CellChars, verbose: bool = False
) -> None:
    """Render ``Total vertices: N`` followed by ``label: [n1,n2]`` lines."""
    _print_adjacency(console, result.data)
    if verbose:
        console.print(f"\n{result.data.get('edge_count', 0)} edges")
        _render_meta(console, result)


def _render_matrix(
    result: ServiceResult, console: Console, *, cells: CellChars, verbose: bool = False
) -> None:
    """Render a single adjacency or path matrix."""
    title = "PATH MATRIX" if result.op == "path_matrix" else "ADJACENCY MATRIX"
    console.print(_matrix_table(result.data.get("matrix", {}), cells, title=title))
    if verbose:
        strategy = result.data.get("strategy")
        if strategy:
            _field(console, "strategy", strategy)
        _render_meta(console, result)


def _render_matrices(
    result: ServiceResult, console: Console, *, cells: CellChars, verbose: bool = False
) -> None:
    """Render the full report: adjacency list, path matrix, adjacency matrix."""
    d = result.data
    _print_adjacency(console, d)
    console.print()
    console.print(_matrix_table(d.get("path_matrix", {}), cells, title="PATH MATRIX"))
    console.print()
    console.print(_matrix_table(d.get("adjacency_matrix", {}), cells, title="ADJACENCY MATRIX"))
    if verbose:
        console.print()
        _field(console, "edges", d.get("edge_count", 0))
        _field(console, "strategy", d.get("strategy", ""))
        _render_meta(console, result)


def _render_has_path(
    result: ServiceResult, console: Console, *, cells: CellChars, verbose: bool = False
) -> None:
    d = result.data
    reachable = bool(d.get("reachable"))
    verdict = Text("reachable", style="reach.true") if reachable else Text("not reachable")
    console.print(
        Text(str(d.get("source", "?")), style="reach.label"),
        Text(" → "),
        Text(str(d.get("target", "?")), style="reach.label"),
        Text(": "),
        verdict,
        sep="",
    )
    if verbose:
        _render_meta(console, result)


def _render_generate(
    result: ServiceResult, console: Console, *, cells: CellChars, verbose: bool = False
) -> None:
    d = result.data
    edges: list[list[str]] = d.get("edges", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Source", style="reach.label")
    table.add_column("Dest", style="reach.label")
    for src, dest in edges:
        table.add_row(Text(src), Text(dest))
    console.print(table)
    seed = d.get("seed")
    suffix = f", seed {seed}" if seed is not None else ""
    console.print(f"\n{d.get('count', len(edges))} edges over {d.get('letters', '?')} letters{suffix}")
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(
    result: ServiceResult, console: Console, *, cells: CellChars, verbose: bool = False
) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "adjacency_list": _render_adjacency_list,
    "adjacency_matrix": _render_matrix,
    "path_matrix": _render_matrix,
    "matrices": _render_matrices,
    "has_path": _render_has_path,
    "generate": _render_generate,
}
