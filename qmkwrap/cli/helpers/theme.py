"""Theme for consistent Rich styling across CLI commands."""

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


class Colors:
    """Standardized color palette for CLI output."""

    SUCCESS = "bold green"
    ERROR = "bold red"
    CRITICAL = "bold white on red"


class Icons:
    """Standardized icons for different message types."""

    SUCCESS = "✅"
    ERROR = "❌"

    _TEXT_FALLBACKS = {
        "SUCCESS": "✓",
        "ERROR": "✗",
    }

    @classmethod
    def get_icon(cls, name: str, use_emoji: bool = True) -> str:
        """Get an icon by name, falling back to plain text."""
        if use_emoji:
            return str(getattr(cls, name, ""))
        return cls._TEXT_FALLBACKS.get(name, "")


QMKWRAP_THEME = Theme(
    {
        "success": Colors.SUCCESS,
        "error": Colors.ERROR,
        "critical": Colors.CRITICAL,
    }
)


class ThemedConsole:
    """Rich console wrapper printing status lines with icons.

    Messages are printed as ``Text`` so paths and build output are never
    interpreted as Rich markup, and are never wrapped.
    """

    def __init__(self, use_emoji: bool = True, stderr: bool = False):
        self.use_emoji = use_emoji
        self.console = Console(theme=QMKWRAP_THEME, stderr=stderr)

    def _print(self, icon_name: str, message: str, style: str) -> None:
        icon = Icons.get_icon(icon_name, self.use_emoji)
        line = f"{icon} {message}" if icon else message
        self.console.print(Text(line, style=style), soft_wrap=True)

    def print_success(self, message: str) -> None:
        self._print("SUCCESS", message, "success")

    def print_error(self, message: str) -> None:
        self._print("ERROR", message, "error")

    def print_critical(self, message: str) -> None:
        # Critical lines carry their own "CRITICAL:" prefix
        self.console.print(Text(message, style="critical"), soft_wrap=True)


def get_themed_console(use_emoji: bool = True, stderr: bool = False) -> ThemedConsole:
    """Get a themed console instance."""
    return ThemedConsole(use_emoji=use_emoji, stderr=stderr)
