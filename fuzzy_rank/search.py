from __future__ import annotations

import logging
from collections.abc import Sequence
from operator import attrgetter

from fuzzy_rank.align import Aligner
from fuzzy_rank.models import Candidate, Match, Source, StringSource
from fuzzy_rank.weights import DEFAULT_WEIGHTS, ScoringWeights

logger = logging.getLogger(__name__)


def decode_candidate(candidate: Candidate) -> str:
    """Return candidate text, replacing undecodable UTF-8 bytes with U+FFFD."""
    if isinstance(candidate, bytes):
        return candidate.decode("utf-8", errors="replace")
    return candidate


def compare(
    pattern: str,
    target: Candidate,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> Match | None:
    """Align ``pattern`` against a single ``target``."""
    if not pattern:
        return None
    match = Match(text=decode_candidate(target))
    if Aligner(pattern, weights).align(match):
        return match
    return None


def find(
    pattern: str,
    candidates: Sequence[Candidate],
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[Match]:
    """Return every candidate matching ``pattern``, best first.

    Bonuses are awarded when a matched character is the first character of
    the candidate, follows a separator such as ``_``, starts a camelCase hump,
    or directly follows the previous matched character. Penalties apply to
    leading characters before the first match (capped) and to every unmatched
    candidate character. Equal scores keep their input order.
    """
    return find_from(pattern, StringSource(candidates), weights=weights)


def find_from(
    pattern: str,
    source: Source,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[Match]:
    matches: list[Match] = []
    if not pattern:
        return matches

    aligner = Aligner(pattern, weights)
    candidate_count = len(source)
    match = Match(text="")
    for index in range(candidate_count):
        match.text = decode_candidate(source.string_at(index))
        match.index = index
        if aligner.align(match):
            matches.append(match)
            match = Match(text="")

    # list.sort is stable, also with reverse=True.
    matches.sort(key=attrgetter("score"), reverse=True)
    logger.debug(
        "Pattern %r matched %d of %d candidates", pattern, len(matches), candidate_count
    )
    return matches


def best_match(
    pattern: str,
    candidates: Sequence[Candidate],
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> Match | None:
    """Return the best match of ``pattern`` in ``candidates``, or ``None``.

    Equivalent to the first element of :func:`find` without collecting every
    match; extra memory stays proportional to the pattern length.
    """
    return best_match_from(pattern, StringSource(candidates), weights=weights)


def best_match_from(
    pattern: str,
    source: Source,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> Match | None:
    if not pattern:
        return None

    aligner = Aligner(pattern, weights)
    current = Match(text="")
    best = Match(text="")
    found = False
    candidate_count = len(source)
    for index in range(candidate_count):
        current.text = decode_candidate(source.string_at(index))
        current.index = index
        if aligner.align(current) and (not found or current.score > best.score):
            # The previous best becomes the scratch record for the next candidate.
            best, current = current, best
            found = True

    if not found:
        logger.debug("Pattern %r matched none of %d candidates", pattern, candidate_count)
        return None
    logger.debug(
        "Pattern %r best match is candidate %d with score %d",
        pattern,
        best.index,
        best.score,
    )
    return best
