# Gerard Launcher Package
"""
Fuzzy-search application launcher for Ignis/GTK.

Type to filter installed applications, best match first; Enter or a
click launches the selection and closes the launcher.
"""

__version__ = "0.1.0-dev"
