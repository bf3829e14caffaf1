"""reachctl — directed graph reachability matrices from labeled edges."""

__version__ = "0.1.0"
