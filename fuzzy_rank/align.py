from __future__ import annotations

from fuzzy_rank.equivalence import CharacterEquivalence
from fuzzy_rank.models import Match
from fuzzy_rank.weights import DEFAULT_WEIGHTS, ScoringWeights


class Aligner:
    """Align one pattern against candidate strings in a single scan.

    Matching a pattern character is not locked in at the first equivalent
    candidate character. The best-scoring occurrence seen so far is kept
    pending and only committed once the following candidate character lines
    up with the following pattern character, or the candidate ends. Given the
    pattern ``"tk"`` and the candidate ``"The Black Knight"`` this prefers the
    ``K`` of ``Knight``, which follows a separator, over the ``k`` of
    ``Black``.
    """

    def __init__(self, pattern: str, weights: ScoringWeights = DEFAULT_WEIGHTS) -> None:
        self.pattern = pattern
        self.weights = weights
        self._equivalence = CharacterEquivalence(weights)

    def align(self, match: Match) -> bool:
        """Score ``match.text`` in place; return whether every pattern char matched.

        The match's score and index buffer are reset first, so one record can be
        reused across candidates.
        """
        weights = self.weights
        equivalence = self._equivalence
        pattern = self.pattern
        pattern_length = len(pattern)
        text = match.text
        text_length = len(text)
        matched_indexes = match.matched_indexes
        matched_indexes.clear()
        match.score = 0

        pattern_index = 0
        pending_score = -1
        pending_index = -1
        adjacent_bonus = 0
        last_char = ""
        last_index = -1

        for index, char in enumerate(text):
            if pattern_index < pattern_length:
                score = equivalence(pattern[pattern_index], char)
                if score > 0:
                    if index == 0:
                        score += weights.first_char_match_bonus
                    if last_char.islower() and char.isupper():
                        score += weights.camel_case_match_bonus
                    if index > 0 and equivalence.is_separator(last_char):
                        score += weights.match_following_separator_bonus
                    if matched_indexes and matched_indexes[-1] == last_index:
                        # The amplifier keeps growing over the whole alignment.
                        bonus = adjacent_bonus * 2 + weights.adjacent_match_bonus
                        score += bonus
                        adjacent_bonus += bonus
                    if score > pending_score:
                        pending_score = score
                        pending_index = index

            if pending_index >= 0 and self._should_commit(
                pattern_index, index, text
            ):
                if not matched_indexes:
                    pending_score += max(
                        pending_index * weights.unmatched_leading_char_penalty,
                        weights.max_unmatched_leading_char_penalty,
                    )
                match.score += pending_score
                matched_indexes.append(pending_index)
                pending_score = -1
                pending_index = -1
                pattern_index += 1

            last_char = char
            last_index = index

        match.score += (
            len(matched_indexes) - text_length
        ) * weights.unmatched_char_penalty
        return pattern_length > 0 and len(matched_indexes) == pattern_length

    def _should_commit(self, pattern_index: int, index: int, text: str) -> bool:
        next_index = index + 1
        if next_index >= len(text):
            return True
        next_pattern_index = pattern_index + 1
        if next_pattern_index >= len(self.pattern):
            return False
        return (
            self._equivalence(self.pattern[next_pattern_index], text[next_index]) > 0
        )
