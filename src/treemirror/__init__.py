"""treemirror: one-way incremental mirroring of a directory tree."""

__version__ = "0.1.0"
