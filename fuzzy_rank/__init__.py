from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from fuzzy_rank.align import Aligner
from fuzzy_rank.dictionary import load_dictionary
from fuzzy_rank.equivalence import CharacterEquivalence
from fuzzy_rank.models import Match, ProjectedSource, Source, StringSource
from fuzzy_rank.search import best_match, best_match_from, compare, find, find_from
from fuzzy_rank.weights import DEFAULT_WEIGHTS, ScoringWeights

try:
    __version__ = version("fuzzy-rank")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "DEFAULT_WEIGHTS",
    "Aligner",
    "CharacterEquivalence",
    "Match",
    "ProjectedSource",
    "ScoringWeights",
    "Source",
    "StringSource",
    "__version__",
    "best_match",
    "best_match_from",
    "compare",
    "find",
    "find_from",
    "load_dictionary",
]
