"""
Search package - Fuzzy ranking of application entries.

Entries are scored by a pluggable matcher and the ranking pipeline keeps
a filtered, sorted view of them for the current query.
"""

from .entry import Entry, InvalidEntry, ScoredEntry
from .matcher import Matcher, SubsequenceMatcher, WeightedRatioMatcher, make_matcher
from .pipeline import PipelineNotReady, RankingPipeline

__all__ = [
    "Entry",
    "InvalidEntry",
    "ScoredEntry",
    "Matcher",
    "SubsequenceMatcher",
    "WeightedRatioMatcher",
    "make_matcher",
    "PipelineNotReady",
    "RankingPipeline",
]
