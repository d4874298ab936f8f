"""Exceptions raised outside the search hot path."""

from __future__ import annotations


class ScrabbleError(Exception):
    """Base class for all game errors."""


class FileError(ScrabbleError):
    """A board, tile bag or dictionary file could not be read."""


class CommandError(ScrabbleError):
    """A typed command could not be parsed."""


class MoveError(ScrabbleError):
    """A parsed move is not legal for the current board or hand."""
