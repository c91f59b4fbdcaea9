"""
Launch collaborator - Start the program behind an activated entry.

A launch target is either an object with a launch() method (Ignis
Application) or a command line given as a string or path. Once a
launch succeeds the launcher is expected to exit; a failed launch
raises LaunchFailure and is not retried.
"""

import os
import shlex
import subprocess
from typing import Any, Callable

from loguru import logger

from gerard.search.entry import Entry
from gerard.utils.helpers import exit_launcher


class LaunchFailure(RuntimeError):
    """Raised when the program behind an entry could not be started."""


def launch_target(target: Any) -> None:
    """
    Start the program described by target.

    Args:
        target: Application object, command string or path to an executable

    Raises:
        LaunchFailure: If the target is empty or the program did not start
    """
    if hasattr(target, "launch"):
        try:
            target.launch()
        except Exception as e:
            raise LaunchFailure(f"Failed to launch {target!r}: {e}") from e
        return

    if isinstance(target, os.PathLike):
        argv = [os.fspath(target)]
    elif isinstance(target, str):
        try:
            argv = shlex.split(target)
        except ValueError as e:
            raise LaunchFailure(f"Malformed launch command {target!r}: {e}") from e
    else:
        raise LaunchFailure(f"Don't know how to launch {target!r}")

    if not argv:
        raise LaunchFailure("Empty launch command")

    try:
        subprocess.Popen(
            argv,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except (OSError, ValueError) as e:
        raise LaunchFailure(f"Failed to launch {argv[0]!r}: {e}") from e


class Activator:
    """
    Launch an entry, then close the launcher.

    Args:
        launch: Launch collaborator, called with entry.launch_target
        on_launched: Called after a successful launch (exits by default)
    """

    def __init__(
        self,
        launch: Callable[[Any], None] = launch_target,
        on_launched: Callable[[], None] = exit_launcher,
    ):
        self._launch = launch
        self._on_launched = on_launched

    def activate(self, entry: Entry) -> None:
        """
        Launch entry and exit the launcher.

        Raises:
            LaunchFailure: If launching fails; the launcher is left running
        """
        try:
            self._launch(entry.launch_target)
        except LaunchFailure:
            logger.error(f"Could not launch {entry.display_name}")
            raise

        logger.debug(f"Launched {entry.display_name}")
        self._on_launched()
