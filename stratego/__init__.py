"""Stratego game engine: board, pieces, battles, turns and a computer opponent."""

__version__ = "0.1.0"