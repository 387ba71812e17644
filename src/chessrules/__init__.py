"""Chess rules engine: board, movement templates, legality and checkmate."""

__version__ = "0.1.0"
