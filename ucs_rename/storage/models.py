"""Storage domain models."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SourceFile:
    """The file being renamed."""

    path: Path
    extension: str

    @property
    def filename(self) -> str:
        """Just the filename without path."""
        return self.path.name


@dataclass(frozen=True)
class RenamePlan:
    """A pending rename in the working directory."""

    old_name: str
    new_name: str

    @property
    def is_noop(self) -> bool:
        return self.old_name == self.new_name
