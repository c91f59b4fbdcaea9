"""
Application enumeration - Turn installed desktop applications into Entries.

Applications come from Ignis' ApplicationsService, which reads the
.desktop files from the XDG data directories. Duplicates (the same app
installed in two directories) are kept as separate entries.
"""

from typing import Iterable

from loguru import logger

from gerard.search.entry import Entry, InvalidEntry


def entries_from_apps(apps: Iterable, include_hidden: bool = False) -> list[Entry]:
    """
    Convert Application objects to Entries, preserving enumeration order.

    Args:
        apps: Objects exposing name, icon and launch() (Ignis Application)
        include_hidden: Keep apps marked NoDisplay/Hidden

    Returns:
        List of Entry, with app as launch_target
    """
    entries = []
    for app in apps:
        if not include_hidden and getattr(app, "is_hidden", False):
            continue

        try:
            entries.append(Entry(
                display_name=app.name,
                icon_reference=app.icon,
                launch_target=app,
            ))
        except InvalidEntry:
            logger.warning(f"Skipping application without a name: {getattr(app, 'id', app)!r}")

    return entries


def load_entries(include_hidden: bool = False) -> list[Entry]:
    """
    Enumerate installed applications through ApplicationsService.

    Args:
        include_hidden: Keep apps marked NoDisplay/Hidden

    Returns:
        List of Entry in the service's order
    """
    from ignis.services.applications import ApplicationsService

    apps = ApplicationsService.get_default().apps
    entries = entries_from_apps(apps, include_hidden=include_hidden)
    logger.debug(f"Loaded {len(entries)} of {len(apps)} applications")
    return entries
