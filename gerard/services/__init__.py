# Gerard Services Package
"""
Collaborators around the search core: enumerating installed
applications and launching the one the user picks.
"""

from .applications import entries_from_apps, load_entries
from .launcher import Activator, LaunchFailure, launch_target

__all__ = ["entries_from_apps", "load_entries", "Activator", "LaunchFailure", "launch_target"]
