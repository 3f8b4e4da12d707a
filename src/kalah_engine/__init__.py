"""Kalah rules engine: positions, legal moves, sowing and board rendering."""

__version__ = "0.1.0"
