# Gerard Utilities Package
"""
Shared utility functions and helpers for the Gerard launcher.
"""

from .helpers import config_dir, exit_launcher, load_settings, load_stylesheet

__all__ = ["config_dir", "exit_launcher", "load_settings", "load_stylesheet"]
