"""Otrio, a board game for four players, played in the terminal."""

__version__ = "0.1.0"