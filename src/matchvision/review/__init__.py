"""Reviewer-side helpers applied to bulk results before they are committed."""

from .assignment import MatchDraft, PlayerSessionDraft, assign_results_to_sets, result_to_match

__all__ = [
    "MatchDraft",
    "PlayerSessionDraft",
    "assign_results_to_sets",
    "result_to_match",
]
