"""
Intent Classifier - Decides which branch of the router handles a query.

Classification is a pure function of the query and the config:

  1. Weather    "weather <city>"   (falls through if the lookup fails)
  2. Alias      whole query is an alias key (always checked, non-exclusive)
  3. Exactly one of, first match wins:
       shell command   > cmd
       web search      g term / ? term
       system command  lock, sleep, shutdown, restart (+ Hungarian)
       calculator      digits and + - * / ( ) % only
       clipboard       clip
       default         converter, then app/bookmark/file search
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from seekr.config import SearchConfig

WEATHER_PATTERN = re.compile(r"^(?:weather|időjárás)\s+(.+)$", re.IGNORECASE)
CALCULATOR_PATTERN = re.compile(r"[0-9+\-*/().%\s]+")

SHELL_PREFIX = ">"
CLIPBOARD_KEYWORD = "clip"

# token -> (title, command line)
SYSTEM_COMMANDS = {
    "lock": ("Lock screen", "xdg-screensaver lock"),
    "zár": ("Lock screen", "xdg-screensaver lock"),
    "sleep": ("Suspend", "systemctl suspend"),
    "alvás": ("Suspend", "systemctl suspend"),
    "shutdown": ("Shut down", "systemctl poweroff"),
    "leállítás": ("Shut down", "systemctl poweroff"),
    "kikapcs": ("Shut down", "systemctl poweroff"),
    "restart": ("Restart", "systemctl reboot"),
    "újraindítás": ("Restart", "systemctl reboot"),
}


class Branch(str, Enum):
    SHELL_COMMAND = "shell_command"
    WEB_SEARCH = "web_search"
    SYSTEM_COMMAND = "system_command"
    CALCULATOR = "calculator"
    CLIPBOARD = "clipboard"
    DEFAULT = "default"


@dataclass(frozen=True)
class Intent:
    """Outcome of classify(): optional weather/alias steps plus one branch."""

    branch: Branch
    weather_location: Optional[str] = None
    alias_key: Optional[str] = None


@dataclass(frozen=True)
class Rule:
    """One row of the exclusive branch table."""

    branch: Branch
    flag: str  # SearchConfig attribute that enables the rule
    predicate: Callable[[str, SearchConfig], bool]


def weather_location(query: str) -> Optional[str]:
    """Return the location part of a weather query, or None."""
    match = WEATHER_PATTERN.match(query)
    if not match:
        return None
    location = match.group(1).strip()
    return location or None


def is_shell_command(query: str, config: SearchConfig) -> bool:
    return query.startswith(SHELL_PREFIX)


def is_web_search(query: str, config: SearchConfig) -> bool:
    return any(query.startswith(prefix) for prefix in config.web_search_prefixes)


def is_system_command(query: str, config: SearchConfig) -> bool:
    return query.lower() in SYSTEM_COMMANDS


def is_calculation(query: str, config: SearchConfig) -> bool:
    return bool(CALCULATOR_PATTERN.fullmatch(query))


def is_clipboard(query: str, config: SearchConfig) -> bool:
    return query.lower() == CLIPBOARD_KEYWORD


RULES = (
    Rule(Branch.SHELL_COMMAND, "enable_commands", is_shell_command),
    Rule(Branch.WEB_SEARCH, "enable_web_search", is_web_search),
    Rule(Branch.SYSTEM_COMMAND, "enable_sys_commands", is_system_command),
    Rule(Branch.CALCULATOR, "enable_calculator", is_calculation),
    Rule(Branch.CLIPBOARD, "enable_clipboard", is_clipboard),
)


def select_branch(query: str, config: SearchConfig) -> Branch:
    """First enabled rule whose predicate matches; DEFAULT otherwise."""
    for rule in RULES:
        if getattr(config, rule.flag) and rule.predicate(query, config):
            return rule.branch
    return Branch.DEFAULT


def classify(query: str, config: SearchConfig) -> Intent:
    """
    Classify a raw query.

    Args:
        query: The text as typed (not stripped; prefixes are positional)
        config: Feature flags and alias table

    Returns:
        Intent describing the weather step, the alias step and the branch
    """
    location = weather_location(query) if config.enable_weather else None
    alias_key = query.lower() if query.lower() in config.aliases else None

    return Intent(
        branch=select_branch(query, config),
        weather_location=location,
        alias_key=alias_key,
    )
