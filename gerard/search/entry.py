"""
Entry model - One launchable application tracked by the search pipeline.

Entries are immutable: the relevance score for the current query is not
stored on the entry but carried beside it in the ordered view as a
ScoredEntry, so a renderer can never read a score left over from an
earlier query.
"""

from dataclasses import dataclass
from typing import Any, NamedTuple


class InvalidEntry(ValueError):
    """Raised when an entry is created without a display name."""


@dataclass(frozen=True, eq=False)
class Entry:
    """
    A launchable application descriptor.

    Entries compare and hash by identity, so two applications with the
    same name (e.g. installed from two data directories) stay distinct.

    Attributes:
        display_name: Text shown to the user and matched against queries
        icon_reference: Icon name or GIcon, passed through to the view
        launch_target: Whatever the launch collaborator needs to start it
    """
    display_name: str
    icon_reference: Any = None
    launch_target: Any = None

    def __post_init__(self):
        if not isinstance(self.display_name, str) or not self.display_name:
            raise InvalidEntry(f"Entry requires a non-empty display name, got {self.display_name!r}")


class ScoredEntry(NamedTuple):
    """An entry paired with its relevance for the query that produced it."""
    entry: Entry
    score: int = 0

    @property
    def display_name(self) -> str:
        return self.entry.display_name

    @property
    def icon_reference(self):
        return self.entry.icon_reference

    @property
    def launch_target(self):
        return self.entry.launch_target
