"""Configuration constants and settings for the UCS renamer."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


class EnvVars:
    """Environment variables that override interactive prompts."""

    CAT_ID = "UCS_CAT_ID"
    CREATOR_ID = "UCS_CREATOR_ID"
    SOURCE_ID = "UCS_SOURCE_ID"
    USER_DATA = "UCS_USER_DATA"
    CSV_FILE = "UCS_CSV_FILE"


class FilenameConfig:
    """Filename layout constants."""

    DELIMITER = "_"
    WHITESPACE_REPLACEMENT = "-"
    LAYOUT = "CatID_FXName_CreatorID_SourceID_UserData.Extension"


class CatalogConfig:
    """Category CSV layout."""

    FIELD_COUNT = 6
    CATEGORY_COLUMN = 0
    SUBCATEGORY_COLUMN = 1
    CATID_COLUMN = 2
    CATSHORT_COLUMN = 3
    SYNONYMS_COLUMN = 5
    HEADER_CATID = "CatID"
    DEFAULT_FILENAME = "UCS-v8.2.csv"


class SelectorConfig:
    """Fuzzy selector (fzf) invocation settings."""

    EXECUTABLE = "fzf"
    FLAGS = ["--ansi", "--no-preview"]
    HEADER = "\nSelect a CatID"
    NO_MATCH_EXIT_CODE = 1
    INTERRUPTED_EXIT_CODE = 130

    @classmethod
    def cancelled_exit_codes(cls) -> tuple:
        """Exit statuses fzf uses when the user leaves without a choice."""
        return (cls.NO_MATCH_EXIT_CODE, cls.INTERRUPTED_EXIT_CODE)


class AppInfo:
    """Application metadata."""

    NAME = "ucsrename"
    DESCRIPTION = "Rename audio files using the Universal Category System filename pattern"


class Paths:
    """Default paths and directories."""

    @staticmethod
    def get_data_dir() -> Path:
        """Get the bundled data directory."""
        return Path(__file__).resolve().parent.parent / "data"

    @staticmethod
    def get_default_catalog() -> Path:
        """Get the bundled UCS category CSV."""
        return Paths.get_data_dir() / CatalogConfig.DEFAULT_FILENAME


@dataclass(frozen=True)
class RenamerSettings:
    """Explicit overrides handed to the filename builder.

    Every field is optional. An override that is set bypasses the matching
    interactive prompt; ``catalog_path_override`` replaces the bundled CSV.
    """

    cat_id_override: Optional[str] = None
    creator_id_override: Optional[str] = None
    source_id_override: Optional[str] = None
    user_data_override: Optional[str] = None
    catalog_path_override: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RenamerSettings":
        """Build settings from environment variables. Empty values count as unset."""
        if environ is None:
            environ = os.environ

        def _get(name: str) -> Optional[str]:
            return environ.get(name) or None

        csv_file = _get(EnvVars.CSV_FILE)
        return cls(
            cat_id_override=_get(EnvVars.CAT_ID),
            creator_id_override=_get(EnvVars.CREATOR_ID),
            source_id_override=_get(EnvVars.SOURCE_ID),
            user_data_override=_get(EnvVars.USER_DATA),
            catalog_path_override=Path(csv_file) if csv_file else None,
        )

    @property
    def catalog_path(self) -> Path:
        """Catalog file to load."""
        return self.catalog_path_override or Paths.get_default_catalog()
