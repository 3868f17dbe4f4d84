"""Rich console display components for the UCS renamer."""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..naming.models import Filename
from ..storage.models import RenamePlan


class RenameDisplay:
    """Handles all rich console output for rename operations."""

    def __init__(
        self, console: Optional[Console] = None, error_console: Optional[Console] = None
    ):
        """Initialize with optional console instances."""
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def show_filename_preview(self, filename: Filename, plan: RenamePlan) -> None:
        """Display the assembled segments and the resulting filename."""
        table = Table(title="UCS Filename")
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Value", style="magenta")

        rows = [
            ("CatID", filename.cat_id),
            ("FXName", filename.fx_name),
            ("CreatorID", filename.creator_id),
            ("SourceID", filename.source_id),
        ]
        # Values are user input, never markup
        for field_name, value in rows:
            table.add_row(field_name, Text(value))
        user_data = Text(filename.user_data) if filename.user_data else None
        table.add_row("UserData", user_data or Text("(none)", style="dim"))

        self.console.print(table)

        result = Text()
        result.append(plan.old_name, style="dim")
        result.append(" → ")
        result.append(plan.new_name, style="bold green")
        self.console.print(result)

    def show_success_message(self, message: str) -> None:
        """Display a success message."""
        self.console.print(Text(f"✓ {message}", style="green"))

    def show_warning_message(self, message: str) -> None:
        """Display a warning message."""
        self.error_console.print(Text(f"⚠ {message}", style="yellow"))

    def show_error_message(self, message: str) -> None:
        """Display an error message."""
        self.error_console.print(Text(f"✗ {message}", style="red"))

    def show_info_message(self, message: str) -> None:
        """Display an informational message."""
        self.console.print(Text(f"ℹ {message}", style="blue"))


class InteractivePrompts:
    """Handles interactive user prompts with rich formatting."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize with optional console instance."""
        self.console = console or Console()

    def confirm(self, message: str) -> bool:
        """Ask for yes/no confirmation. Anything but yes is a no."""
        prompt = Text(f"{message} (y/n) ", style="yellow")
        try:
            response = self.console.input(prompt).strip().lower()
        except (EOFError, UnicodeDecodeError):
            self.console.print()
            return False

        return response in ("y", "yes")
