from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringWeights:
    """Bonuses and penalties applied while aligning a pattern to a candidate."""

    first_char_match_bonus: int = 10
    case_sensitive_bonus: int = 2
    match_score: int = 1
    match_following_separator_bonus: int = 20
    camel_case_match_bonus: int = 20
    adjacent_match_bonus: int = 5
    unmatched_leading_char_penalty: int = -5
    max_unmatched_leading_char_penalty: int = -15
    unmatched_char_penalty: int = 1
    separators: frozenset[str] = frozenset("/-_ .\\")

    def __post_init__(self) -> None:
        if self.match_score <= 0:
            raise ValueError("match_score must be positive.")
        if self.case_sensitive_bonus < self.match_score:
            raise ValueError("case_sensitive_bonus must be at least match_score.")
        if self.unmatched_leading_char_penalty > 0:
            raise ValueError("unmatched_leading_char_penalty must not be positive.")
        if self.max_unmatched_leading_char_penalty > 0:
            raise ValueError("max_unmatched_leading_char_penalty must not be positive.")
        if self.unmatched_char_penalty < 0:
            raise ValueError("unmatched_char_penalty must not be negative.")
        if not self.separators:
            raise ValueError("separators must not be empty.")
        # Accept any iterable of characters, e.g. a plain "/-_" string.
        object.__setattr__(self, "separators", frozenset(self.separators))


DEFAULT_WEIGHTS = ScoringWeights()
