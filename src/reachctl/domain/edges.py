"""Edge parsing — literal edge tokens and edge-list files.

Pure functions. Accepted token forms::

    A:B    A,B    A->B    A B

Edge-list files hold one token per line; blank lines and ``#``
comments are skipped.
"""

from __future__ import annotations

import re
from pathlib import Path

from reachctl.domain.graph import Edge

# Longest separators first so "A->B" never splits on whitespace.
_SEPARATOR = re.compile(r"\s*(?:->|:|,)\s*|\s+")


def parse_edge(token: str) -> Edge:
    """Parse a single ``SRC:DEST`` style token into an :class:`Edge`.

    Raises:
        ValueError: If the token does not hold exactly two non-empty labels.
    """
    parts = _SEPARATOR.split(token.strip(), maxsplit=1)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        msg = f"Invalid edge {token!r}: expected SRC:DEST"
        raise ValueError(msg)
    src, dest = parts
    if _SEPARATOR.search(dest):
        msg = f"Invalid edge {token!r}: expected exactly two labels"
        raise ValueError(msg)
    return Edge(src, dest)


def parse_edges(tokens: list[str] | tuple[str, ...]) -> list[Edge]:
    """Parse every token in order."""
    return [parse_edge(token) for token in tokens]


def read_edge_file(path: Path) -> list[Edge]:
    """Read an edge-list file.

    Raises:
        ValueError: On the first malformed line, naming its line number.
    """
    edges: list[Edge] = []
    text = path.read_text(encoding="utf-8")
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        try:
            edges.append(parse_edge(line))
        except ValueError as exc:
            msg = f"{path}:{lineno}: {exc}"
            raise ValueError(msg) from exc
    return edges
