"""
Fuzzy matchers - Score how well a query matches an application name.

Every matcher implements the same contract:
  match(candidate, query) -> int | None

  - Comparison is case-insensitive
  - None means "no match"
  - Higher scores are better matches
  - Results depend only on (candidate, query)

Scoring itself is delegated to rapidfuzz.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from rapidfuzz import fuzz, utils

# Bonus added on top of partial_ratio (0-100) so names that start with
# the query outrank names that merely contain it.
PREFIX_BONUS = 50
WORD_START_BONUS = 25


class Matcher(ABC):
    """Base class for fuzzy matchers used by the ranking pipeline."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Matcher identifier, as used in settings.toml."""
        ...

    @abstractmethod
    def match(self, candidate: str, query: str) -> Optional[int]:
        """Return a non-negative score, or None if the query does not match."""
        ...


def is_subsequence(query: str, candidate: str) -> bool:
    """True if every character of query occurs in candidate, in order."""
    remaining = iter(candidate)
    return all(char in remaining for char in query)


class SubsequenceMatcher(Matcher):
    """
    Match when the query's characters appear in order in the name.

    "fi" matches "Firefox" and "Files" but not "GIMP". Among matches,
    contiguous runs score higher than scattered characters (partial_ratio),
    and a match at the start of the name or of a word gets a bonus.
    """

    name = "subsequence"

    def match(self, candidate: str, query: str) -> Optional[int]:
        candidate = candidate.casefold()
        query = query.casefold()

        if not query:
            return 0
        if not is_subsequence(query, candidate):
            return None

        score = fuzz.partial_ratio(query, candidate)
        if candidate.startswith(query):
            score += PREFIX_BONUS
        elif any(word.startswith(query) for word in candidate.split()):
            score += WORD_START_BONUS

        return int(round(score))


class WeightedRatioMatcher(Matcher):
    """
    Typo-tolerant matching using rapidfuzz's weighted ratio.

    "firefx" still finds "Firefox". Scores below fuzzy_threshold
    (0-100) count as no match.
    """

    name = "weighted"

    def __init__(self, fuzzy_threshold: int = 50):
        self.fuzzy_threshold = fuzzy_threshold

    def match(self, candidate: str, query: str) -> Optional[int]:
        if not query:
            return 0

        score = fuzz.WRatio(
            query,
            candidate,
            processor=utils.default_process,
            score_cutoff=self.fuzzy_threshold,
        )
        # rapidfuzz reports anything under the cutoff as 0
        if not score:
            return None
        return int(round(score))


MATCHERS = {
    SubsequenceMatcher.name: SubsequenceMatcher,
    WeightedRatioMatcher.name: WeightedRatioMatcher,
}


def make_matcher(settings: Dict[str, Any]) -> Matcher:
    """
    Build the matcher configured in the [search] settings table.

    Args:
        settings: Full settings dict as returned by load_settings()

    Returns:
        A Matcher instance

    Raises:
        ValueError: If the configured matcher name is unknown
    """
    search = settings.get("search", {})
    name = search.get("matcher", SubsequenceMatcher.name)

    if name == WeightedRatioMatcher.name:
        return WeightedRatioMatcher(fuzzy_threshold=search.get("fuzzy_threshold", 50))
    if name in MATCHERS:
        return MATCHERS[name]()

    raise ValueError(f"Unknown matcher '{name}', expected one of: {', '.join(sorted(MATCHERS))}")
