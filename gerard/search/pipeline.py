"""
Ranking Pipeline - Filter, score and sort entries for the current query.

On every query change the pipeline:
  1. Scores every entry with the injected matcher
  2. Drops entries whose score is not strictly positive
  3. Sorts the survivors by descending score (stable: ties keep
     collection order, so rows don't jitter between keystrokes)
  4. Publishes the new ordered view in one step and notifies subscribers

An empty query bypasses the matcher and shows every entry, unranked,
in collection order.

Everything is recomputed from scratch on each call. With a few hundred
installed applications this stays well inside a keystroke.
"""

from typing import Callable, Iterable, Optional

from loguru import logger

from gerard.search.entry import Entry, ScoredEntry
from gerard.search.matcher import Matcher

ViewListener = Callable[[tuple[ScoredEntry, ...]], None]

NEUTRAL_SCORE = 0


class PipelineNotReady(RuntimeError):
    """Raised when a query is applied before the entry collection exists."""


class RankingPipeline:
    """
    Owns the authoritative entry collection and the ordered view.

    Not thread-safe: call it from the thread running the UI main loop.

    Example:
        pipeline = RankingPipeline(SubsequenceMatcher(), entries)
        pipeline.subscribe(lambda view: print([s.display_name for s in view]))
        pipeline.set_query("fi")
    """

    def __init__(self, matcher: Matcher, entries: Optional[Iterable[Entry]] = None):
        self.matcher = matcher
        self._entries: Optional[list[Entry]] = None
        self._query = ""
        self._view: tuple[ScoredEntry, ...] = ()
        self._listeners: list[ViewListener] = []

        if entries is not None:
            self.populate(entries)

    @property
    def query(self) -> str:
        """The most recently applied query."""
        return self._query

    @property
    def view(self) -> tuple[ScoredEntry, ...]:
        """The current ordered view (replaced wholesale on each change)."""
        return self._view

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Every entry in the collection, in insertion order."""
        return tuple(self._entries or ())

    @property
    def ready(self) -> bool:
        """True once populate() has established the entry collection."""
        return self._entries is not None

    def __len__(self) -> int:
        return len(self._entries or ())

    def subscribe(self, listener: ViewListener) -> None:
        """Call listener(view) every time a new view is published."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: ViewListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def populate(self, entries: Iterable[Entry]) -> None:
        """
        Establish the collection (or append to it) and re-apply the query.

        Args:
            entries: Entries in enumeration order
        """
        if self._entries is None:
            self._entries = []
        self._entries.extend(entries)
        logger.debug(f"Pipeline holds {len(self._entries)} entries")
        self._apply(self._query)

    def extend(self, entries: Iterable[Entry]) -> None:
        """Append entries, e.g. from a later rescan."""
        self.populate(entries)

    def add(self, entry: Entry) -> None:
        self.populate([entry])

    def set_query(self, query: str) -> tuple[ScoredEntry, ...]:
        """
        Recompute the ordered view for a new query.

        Never fails for any string: text that matches nothing simply
        produces an empty view. A listener that raises is logged and
        the remaining listeners are still notified.

        Args:
            query: The search text, exactly as typed

        Returns:
            The newly published view

        Raises:
            PipelineNotReady: If called before populate()
        """
        if self._entries is None:
            raise PipelineNotReady("set_query() called before the entry collection was populated")

        self._query = query
        return self._apply(query)

    def _apply(self, query: str) -> tuple[ScoredEntry, ...]:
        if not query:
            view = tuple(ScoredEntry(entry, NEUTRAL_SCORE) for entry in self._entries)
        else:
            matches = [
                scored for scored in (self._score(entry, query) for entry in self._entries)
                if scored.score > 0
            ]
            # sorted() is stable, so equal scores keep collection order
            view = tuple(sorted(matches, key=lambda scored: -scored.score))

        self._view = view
        logger.debug(f"Query {query!r}: {len(view)}/{len(self._entries)} entries shown")

        for listener in list(self._listeners):
            try:
                listener(view)
            except Exception:
                logger.exception(f"View listener {listener!r} failed")

        return view

    def _score(self, entry: Entry, query: str) -> ScoredEntry:
        """Score one entry; a matcher error counts as no match."""
        try:
            score = self.matcher.match(entry.display_name, query)
        except Exception as e:
            logger.warning(f"{type(self.matcher).__name__} failed on {entry.display_name!r}: {e}")
            score = None

        if score is None:
            return ScoredEntry(entry, NEUTRAL_SCORE)
        return ScoredEntry(entry, score)
