"""
Gerard Launcher - Main Ignis Configuration

This file is the entry point for Ignis. It loads the installed
applications into the ranking pipeline and opens the search window.

Usage:
  ignis init -c /path/to/gerard/config.py
"""

from ignis.app import IgnisApp
from loguru import logger

from gerard.panels.search import SearchPanel
from gerard.search.matcher import make_matcher
from gerard.search.pipeline import RankingPipeline
from gerard.services.applications import load_entries
from gerard.services.launcher import Activator
from gerard.utils.helpers import exit_launcher, load_settings, load_stylesheet

app = IgnisApp.get_default()

settings = load_settings()
load_stylesheet(app)

close_delay_ms = settings["launcher"]["close_delay_ms"]

pipeline = RankingPipeline(make_matcher(settings))
activator = Activator(on_launched=lambda: exit_launcher(close_delay_ms))
search_panel = SearchPanel(pipeline, activator, settings)

pipeline.populate(load_entries(include_hidden=settings["applications"]["include_hidden"]))

search_window = search_panel.create_window()
search_window.panel = search_panel

logger.info(f"Gerard initialized with {len(pipeline)} applications")
