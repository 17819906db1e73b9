"""
Helper utilities for acting on resolved results.

Activation of any ResultItem: launch apps, open files and URLs, run
commands and aliases, copy values to the clipboard.
"""

import subprocess
from pathlib import Path

from loguru import logger

from seekr.search.results import (
    AliasResult,
    AppResult,
    BookmarkResult,
    CalculatorResult,
    ClipboardResult,
    CommandResult,
    FileResult,
    ResultItem,
    SystemCommandResult,
    WebResult,
)


def _spawn(args, shell: bool = False) -> None:
    """Start a detached process, discarding its output."""
    try:
        subprocess.Popen(
            args,
            shell=shell,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except FileNotFoundError:
        logger.warning(f"Command not found: {args if shell else args[0]}")
    except OSError:
        logger.exception(f"Failed to start: {args}")


def open_url(url: str) -> None:
    """Open URL or path with the desktop's default handler."""
    _spawn(["xdg-open", url])


def run_command(command_line: str) -> None:
    """Execute a shell command line."""
    _spawn(command_line, shell=True)


def copy_to_clipboard(text: str) -> None:
    """Copy text using wl-copy."""
    _spawn(["wl-copy", text])


def launch_app(executable: str) -> None:
    """Launch a desktop entry by id, or open any other path."""
    path = Path(executable)
    if path.suffix == ".desktop":
        _spawn(["gtk-launch", path.stem])
    else:
        open_url(executable)


def run_alias(commands) -> None:
    """Run alias entries in order: URLs are opened, the rest executed."""
    for command in commands:
        if command.startswith(("http://", "https://")):
            open_url(command)
        else:
            run_command(command)


def activate(item: ResultItem) -> None:
    """
    Perform the action behind a result.

    Weather results (and unknown kinds) have no action.
    """
    if isinstance(item, AppResult):
        launch_app(item.executable)
    elif isinstance(item, FileResult):
        open_url(item.path)
    elif isinstance(item, (BookmarkResult, WebResult)):
        open_url(item.url)
    elif isinstance(item, (CommandResult, SystemCommandResult)):
        run_command(item.command_line)
    elif isinstance(item, (CalculatorResult, ClipboardResult)):
        copy_to_clipboard(item.value)
    elif isinstance(item, AliasResult):
        run_alias(item.commands)
    else:
        logger.debug(f"No action for {item.kind} result '{item.title}'")
