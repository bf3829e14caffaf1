"""GenerateService — sample a random edge list without building matrices."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reachctl.services.result import ServiceResult
from reachctl.services.telemetry import traced

if TYPE_CHECKING:
    from reachctl.domain.generator import EdgeGenerator


class GenerateService:
    """Wraps an :class:`EdgeGenerator` so its output flows through ServiceResult."""

    def __init__(self, generator: EdgeGenerator) -> None:
        self._generator = generator

    @traced
    def generate(self) -> ServiceResult:
        edges = self._generator.edges()
        return ServiceResult.success(
            "generate",
            {
                "count": len(edges),
                "letters": self._generator.num_letters,
                "seed": self._generator.seed,
                "edges": [[src, dest] for src, dest in edges],
            },
        )
