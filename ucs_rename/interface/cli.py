"""CLI command for the UCS renamer."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..catalog.services import CategoryCatalog
from ..core.config import AppInfo, RenamerSettings
from ..core.exceptions import UCSRenameError
from ..naming.services import FieldPrompter, FilenameBuilder
from ..selection.services import CategorySelector, FzfSelector
from ..storage.services import FileRenamer
from .display import InteractivePrompts, RenameDisplay

# Initialize Rich consoles and Typer app
console = Console()
err_console = Console(stderr=True)
app = typer.Typer(
    name=AppInfo.NAME,
    help=AppInfo.DESCRIPTION,
    rich_markup_mode="rich",
    add_completion=False,
)

# Initialize display components
display = RenameDisplay(console, err_console)
prompts = InteractivePrompts(console)

logger = logging.getLogger(__name__)


def handle_error(error: UCSRenameError) -> None:
    """Centralized error handling."""
    display.show_error_message(error.message)
    if error.details:
        err_console.print(f"Details: {error.details}", style="dim", markup=False)

    raise typer.Exit(1)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _is_interactive() -> bool:
    return sys.stdout.isatty()


def _create_selector() -> CategorySelector:
    return FzfSelector()


def _print_categories(catalog: CategoryCatalog) -> None:
    """Plain listing, one category per line. fzf reads this as its candidate feed."""
    for line in catalog.render_lines():
        typer.echo(line)


@app.command()
def rename(
    ctx: typer.Context,
    filename: Optional[Path] = typer.Argument(
        None, help="Audio file to rename", show_default=False
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Force confirm rename"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose output"
    ),
):
    """Rename a file using the Universal Category System (UCS) filename pattern.

    Asks a series of questions to build a conforming filename and carries the
    source file's extension forward:

    CatID_FXName_CreatorID_SourceID_UserData.Extension

    CatID, FXName, CreatorID and SourceID are required. UserData is optional.

    Set UCS_CAT_ID, UCS_CREATOR_ID, UCS_SOURCE_ID or UCS_USER_DATA to skip the
    matching prompt. UCS_CSV_FILE replaces the bundled category list.

    fzf is required to pick a CatID interactively. When stdout is not a
    terminal the category list is printed instead.
    """
    configure_logging(verbose)
    settings = RenamerSettings.from_env()

    try:
        if not _is_interactive():
            _print_categories(CategoryCatalog.load(settings.catalog_path))
            return

        if filename is None:
            typer.echo(ctx.get_help())
            return

        catalog = CategoryCatalog.load(settings.catalog_path)
        renamer = FileRenamer()
        source = renamer.inspect(filename)

        builder = FilenameBuilder(
            settings,
            catalog,
            _create_selector(),
            FieldPrompter(console, err_console),
        )
        ucs_filename = builder.build()

        plan = renamer.plan(source, ucs_filename.render(source.extension))
        display.show_filename_preview(ucs_filename, plan)

        if plan.is_noop:
            display.show_warning_message(f"{plan.old_name} already has this name")
            return

        new_path = renamer.confirm_and_rename(plan, prompts.confirm, force=yes)
        if new_path is None:
            display.show_info_message("Rename cancelled")
            return

        display.show_success_message(f"Renamed to {plan.new_name}")

    except UCSRenameError as e:
        handle_error(e)
