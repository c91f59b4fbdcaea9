# Gerard Panels Package
"""
UI panels for the Gerard launcher.

Panels:
  - SearchPanel: search entry and ranked application list
"""

from .search import SearchPanel

__all__ = ["SearchPanel"]
