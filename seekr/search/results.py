"""
Result Items - The tagged result variants every branch produces.

Every result shares kind, title and description. Each kind adds the payload
its activation needs (a path to open, a command to run, a value to copy).
"""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class ResultItem:
    """A single search result from any handler."""

    kind: ClassVar[str] = "result"

    title: str
    description: str = ""


@dataclass
class AppResult(ResultItem):
    """Installed application; executable is the desktop-entry path."""

    kind: ClassVar[str] = "app"

    executable: str = ""
    icon: str = "application"


@dataclass
class FileResult(ResultItem):
    kind: ClassVar[str] = "file"

    path: str = ""


@dataclass
class BookmarkResult(ResultItem):
    kind: ClassVar[str] = "bookmark"

    url: str = ""


@dataclass
class WebResult(ResultItem):
    kind: ClassVar[str] = "web"

    url: str = ""


@dataclass
class CommandResult(ResultItem):
    """Arbitrary shell command typed after '>'."""

    kind: ClassVar[str] = "command"

    command_line: str = ""


@dataclass
class SystemCommandResult(ResultItem):
    """One of the fixed OS actions (lock, suspend, poweroff, reboot)."""

    kind: ClassVar[str] = "syscommand"

    command_line: str = ""


@dataclass
class CalculatorResult(ResultItem):
    """Arithmetic or conversion result; value is the display string."""

    kind: ClassVar[str] = "calculator"

    value: str = ""


@dataclass
class ClipboardResult(ResultItem):
    kind: ClassVar[str] = "clipboard"

    value: str = ""


@dataclass
class AliasResult(ResultItem):
    """User alias; each command is a URL to open or a shell line to run."""

    kind: ClassVar[str] = "alias"

    commands: tuple = field(default_factory=tuple)


@dataclass
class WeatherResult(ResultItem):
    kind: ClassVar[str] = "weather"

    temperature: str = ""
    feels_like: str = ""
    humidity: str = ""
    condition: str = ""
