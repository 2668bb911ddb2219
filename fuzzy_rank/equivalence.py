from __future__ import annotations

from collections.abc import Collection
from functools import lru_cache

from fuzzy_rank.weights import DEFAULT_WEIGHTS, ScoringWeights


@lru_cache(maxsize=4096)
def fold(char: str) -> str:
    """Return the case fold key of a single character.

    The key is the full ``casefold()`` string, compared whole. ``"ß"`` and
    ``"ẞ"`` both fold to ``"ss"`` and so match each other, while neither
    matches a lone ``"s"``.
    """
    return char.casefold()


def is_separator(char: str, separators: Collection[str]) -> bool:
    return char in separators


class CharacterEquivalence:
    """Decide whether two characters match, and how strongly.

    Calling an instance returns ``case_sensitive_bonus`` for identical
    characters, ``match_score`` for characters with the same case fold or for
    two separators, and 0 otherwise. The relation is symmetric.
    """

    def __init__(self, weights: ScoringWeights = DEFAULT_WEIGHTS) -> None:
        self._exact_score = weights.case_sensitive_bonus
        self._match_score = weights.match_score
        self._separators = weights.separators

    def __call__(self, a: str, b: str) -> int:
        if a == b:
            return self._exact_score
        if fold(a) == fold(b):
            return self._match_score
        if self.is_separator(a) and self.is_separator(b):
            return self._match_score
        return 0

    def is_separator(self, char: str) -> bool:
        return is_separator(char, self._separators)
