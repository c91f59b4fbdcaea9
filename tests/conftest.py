"""
Shared test fixtures for the Gerard test suite.

Provides sample entries, a deterministic stub matcher, and settings
files that use real file I/O (no mocking of the filesystem).
"""

import pytest
import toml

from gerard.search.entry import Entry
from gerard.search.matcher import Matcher


class TableMatcher(Matcher):
    """Matcher returning canned scores per display name; unknown names don't match."""

    name = "table"

    def __init__(self, scores):
        self.scores = scores
        self.calls = []

    def match(self, candidate, query):
        self.calls.append((candidate, query))
        return self.scores.get(candidate)


@pytest.fixture
def app_entries():
    """Firefox, Files and GIMP, in that order."""
    return [
        Entry("Firefox", icon_reference="firefox", launch_target="firefox"),
        Entry("Files", icon_reference="org.gnome.Nautilus", launch_target="nautilus"),
        Entry("GIMP", icon_reference="gimp", launch_target="gimp"),
    ]


@pytest.fixture
def table_matcher():
    """Build a TableMatcher from a {display_name: score} dict."""
    return TableMatcher


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "launcher": {"close_delay_ms": 300, "width": 800, "height": 400},
        "search": {"matcher": "weighted", "fuzzy_threshold": 70},
        "applications": {"include_hidden": True},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
