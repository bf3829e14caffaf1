"""Random edge generation over the first N capital letters.

The random source is injected (a ``random.Random`` or a seed) so runs
are reproducible and tests stay deterministic.
"""

from __future__ import annotations

import logging
import random
import string
from collections.abc import Iterator

from reachctl.domain.graph import Edge

logger = logging.getLogger(__name__)

MAX_LETTERS = len(string.ascii_uppercase)


def alphabet(num_letters: int) -> list[str]:
    """The first *num_letters* capital letters, clamped to 26."""
    if num_letters < 1:
        msg = f"num_letters must be >= 1, got {num_letters}"
        raise ValueError(msg)
    return list(string.ascii_uppercase[: min(num_letters, MAX_LETTERS)])


class EdgeGenerator:
    """Seedable stream of uniformly sampled labeled edges.

    Usage::

        gen = EdgeGenerator(25, 15, seed=7)
        graph = Graph.build(gen)
    """

    def __init__(
        self,
        num_edges: int,
        num_letters: int,
        *,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        if num_edges < 0:
            msg = f"num_edges must be >= 0, got {num_edges}"
            raise ValueError(msg)
        if num_letters > MAX_LETTERS:
            logger.debug("Clamped num_letters %d to %d", num_letters, MAX_LETTERS)
        self.num_edges = num_edges
        self.labels = alphabet(num_letters)
        self.seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def num_letters(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[Edge]:
        for _ in range(self.num_edges):
            yield Edge(self._rng.choice(self.labels), self._rng.choice(self.labels))

    def edges(self) -> list[Edge]:
        return list(self)
