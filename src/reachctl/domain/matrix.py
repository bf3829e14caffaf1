"""Matrix — immutable square boolean table over a graph's vertex labels.

Rows and columns share one label order (the graph's sorted labels).
Each row is stored as an ordered tuple of ``(column, value)`` pairs,
matching the ``label -> [(col, bool), ...]`` shape consumers render.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from reachctl.domain.errors import UnknownVertexError

Row: TypeAlias = tuple[tuple[Any, bool], ...]


@dataclass(frozen=True)
class Matrix:
    """Square boolean matrix indexed by vertex label.

    ``matrix[row][col]`` returns the entry; ``matrix[row]`` is a fresh
    ``dict`` so callers can never mutate the stored rows.
    """

    labels: tuple[Any, ...]
    _rows: dict[Any, Row] = field(repr=False)

    @classmethod
    def from_predicate(cls, labels: Sequence[Any], predicate: Callable[[Any, Any], bool]) -> Matrix:
        """Build a matrix by evaluating ``predicate(row, col)`` for every ordered pair."""
        ordered = tuple(labels)
        rows = {row: tuple((col, bool(predicate(row, col))) for col in ordered) for row in ordered}
        return cls(labels=ordered, _rows=rows)

    @property
    def rows(self) -> dict[Any, list[tuple[Any, bool]]]:
        """Row label -> ordered ``(column, value)`` pairs."""
        return {label: list(self._rows[label]) for label in self.labels}

    def row(self, label: Any) -> Row:
        try:
            return self._rows[label]
        except KeyError:
            raise UnknownVertexError(label) from None

    def entries(self) -> Iterator[tuple[Any, Any, bool]]:
        """Yield ``(row, column, value)`` triples in row-major label order."""
        for label in self.labels:
            for col, value in self._rows[label]:
                yield label, col, value

    def count_true(self) -> int:
        return sum(1 for _, _, value in self.entries() if value)

    def to_data(self) -> dict[str, Any]:
        """JSON-ready representation (labels stringified)."""
        return {
            "labels": [str(label) for label in self.labels],
            "rows": {
                str(label): [[str(col), value] for col, value in self._rows[label]]
                for label in self.labels
            },
        }

    def __hash__(self) -> int:
        return hash((self.labels, tuple(self._rows[label] for label in self.labels)))

    def __getitem__(self, label: Any) -> dict[Any, bool]:
        return dict(self.row(label))

    def __contains__(self, label: object) -> bool:
        return label in self._rows

    def __iter__(self) -> Iterator[Any]:
        return iter(self.labels)

    def __len__(self) -> int:
        return len(self.labels)
