"""Interactive collection of UCS filename fields."""

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console

from .models import (
    CREATOR_ID,
    FX_NAME,
    PROMPTED_FIELDS,
    SOURCE_ID,
    USER_DATA,
    FieldSpec,
    Filename,
    PromptState,
)
from ..catalog.services import CategoryCatalog
from ..core.config import FilenameConfig, RenamerSettings
from ..core.exceptions import (
    DelimiterConflictError,
    FieldValidationError,
    InputDecodeError,
    InputExhaustedError,
    RequiredFieldMissingError,
    SelectionCancelledError,
    UnknownCategoryError,
)
from ..selection.services import CategorySelector, parse_selection

logger = logging.getLogger(__name__)


def normalize_field(value: str) -> str:
    """Collapse whitespace runs into single hyphens."""
    return FilenameConfig.WHITESPACE_REPLACEMENT.join(value.split())


def validate_field(spec: FieldSpec, raw: str) -> str:
    """Validate one line of input for ``spec`` and return the normalized value."""
    trimmed = raw.strip()
    if spec.required and not trimmed:
        raise RequiredFieldMissingError(spec.name)
    if FilenameConfig.DELIMITER in trimmed:
        raise DelimiterConflictError(spec.name, FilenameConfig.DELIMITER)
    return normalize_field(trimmed)


class FieldPrompter:
    """Prompts for field values until one validates.

    There is no retry limit; the loop ends on a valid value or end of input.
    With ``reprompt=False`` the first validation error is raised instead.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        input_stream: Optional[TextIO] = None,
        reprompt: bool = True,
    ):
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)
        self.input_stream = input_stream
        self.reprompt = reprompt
        self.attempts = 0

    def _read_line(self, spec: FieldSpec) -> Optional[str]:
        stream = self.input_stream or sys.stdin
        try:
            line = stream.readline()
        except UnicodeDecodeError as e:
            self.console.print()
            raise InputDecodeError(spec.name, details=str(e))
        if not line:
            return None
        return line

    def prompt(self, spec: FieldSpec, override: Optional[str] = None) -> str:
        """Return the value for ``spec``.

        A non-empty ``override`` is returned as is, without normalization.
        """
        if override:
            logger.debug("Using override for %s", spec.name)
            return override

        self.attempts = 0
        state = PromptState.PROMPTING
        raw = value = None

        while True:
            if state is PromptState.PROMPTING:
                self.console.print(f"[cyan]{spec.name}:[/cyan] ", end="")
                raw = self._read_line(spec)
                if raw is None:
                    state = PromptState.FAILED
                else:
                    self.attempts += 1
                    state = PromptState.VALIDATING

            elif state is PromptState.VALIDATING:
                try:
                    value = validate_field(spec, raw)
                except FieldValidationError as e:
                    if not self.reprompt:
                        raise
                    self.error_console.print(f"[red]Invalid: {e}[/red]")
                    state = PromptState.PROMPTING
                else:
                    state = PromptState.ACCEPTED

            elif state is PromptState.ACCEPTED:
                return value

            else:
                # Terminate the dangling prompt line
                self.console.print()
                raise InputExhaustedError(spec.name)


class FilenameBuilder:
    """Builds a ``Filename`` from overrides, the selector and prompts."""

    def __init__(
        self,
        settings: RenamerSettings,
        catalog: CategoryCatalog,
        selector: CategorySelector,
        prompter: FieldPrompter,
    ):
        self.settings = settings
        self.catalog = catalog
        self.selector = selector
        self.prompter = prompter

    def resolve_category(self) -> str:
        """Return a CatID known to the catalog.

        Uses the CatID override when set, otherwise asks the selector.
        """
        override = self.settings.cat_id_override
        if override:
            logger.debug("Using CatID override %s", override)
            return self._validate_cat_id(override)

        choice = self.selector.select(self.catalog.render_lines())
        if choice is None:
            raise SelectionCancelledError()

        cat_id = parse_selection(choice)
        if not cat_id:
            raise SelectionCancelledError(details="selector returned an empty line")
        return self._validate_cat_id(cat_id)

    def _validate_cat_id(self, cat_id: str) -> str:
        if self.catalog.lookup(cat_id) is None:
            raise UnknownCategoryError(cat_id)
        return cat_id

    def _override_for(self, spec: FieldSpec) -> Optional[str]:
        if spec.override is None:
            return None
        return getattr(self.settings, spec.override)

    def collect_fields(self, cat_id: str) -> Filename:
        """Prompt for the fields that follow the CatID."""
        values = {
            spec.name: self.prompter.prompt(spec, self._override_for(spec))
            for spec in PROMPTED_FIELDS
        }
        return Filename(
            cat_id=cat_id,
            fx_name=values[FX_NAME.name],
            creator_id=values[CREATOR_ID.name],
            source_id=values[SOURCE_ID.name],
            user_data=values[USER_DATA.name],
        )

    def build(self) -> Filename:
        cat_id = self.resolve_category()
        self.prompter.console.print(f"CatID: {cat_id}", markup=False)
        return self.collect_fields(cat_id)
