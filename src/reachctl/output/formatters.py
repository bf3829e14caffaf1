"""Rich/JSON output dispatch.

The CLI renders ServiceResult for humans (Rich tables), for pipes
(``--quiet`` bit rows), or for machines (``--json``).  The formatter
layer picks the mode from :class:`OutputSettings`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from reachctl.output.renderers import CellChars, render_quiet, render_result

if TYPE_CHECKING:
    from reachctl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags resolved from the CLI settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    true_char: str = "1"
    false_char: str = "0"
    width: int | None = None

    @property
    def cells(self) -> CellChars:
        return CellChars(true=self.true_char, false=self.false_char)


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result, cells=settings.cells)
    return render_result(
        result,
        verbose=settings.verbose,
        cells=settings.cells,
        width=settings.width,
    )
