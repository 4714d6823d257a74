"""Exception types raised by the result pipeline."""

from __future__ import annotations


class MatchVisionError(Exception):
    """Base class for pipeline errors."""


class ExtractionShapeError(MatchVisionError, ValueError):
    """Raw extraction is neither an individual nor a team-grouped payload."""
