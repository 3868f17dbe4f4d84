"""File service for inspecting and renaming the source file."""

import logging
import os
import stat
from pathlib import Path
from typing import Callable, Optional

from .models import RenamePlan, SourceFile
from ..core.exceptions import (
    FileOperationError,
    NoExtensionError,
    NotAFileError,
    RenameError,
)

logger = logging.getLogger(__name__)


def file_extension(name: str) -> str:
    """Suffix from the last dot of the base name, dotfiles included (".wav" -> ".wav")."""
    index = name.rfind(".")
    if index < 0:
        return ""
    return name[index:]


class FileRenamer:
    """Handles the single rename performed per invocation."""

    def __init__(self, working_dir: Optional[Path] = None):
        """Initialize with optional working directory."""
        self.working_dir = working_dir or Path.cwd()

    def inspect(self, filename: Path) -> SourceFile:
        """Check that ``filename`` is a regular file with an extension."""
        path = Path(filename)
        try:
            file_stat = path.stat()
        except OSError as e:
            raise FileOperationError(
                "Cannot access source file",
                file_path=str(path),
                operation="stat",
                details=e.strerror or str(e),
            )

        if stat.S_ISDIR(file_stat.st_mode):
            raise NotAFileError(path.name or str(path))

        extension = file_extension(path.name)
        if not extension:
            raise NoExtensionError(str(path))

        return SourceFile(path=path, extension=extension)

    def plan(self, source: SourceFile, new_name: str) -> RenamePlan:
        """Plan a rename of the source's base name within the working directory."""
        return RenamePlan(old_name=source.filename, new_name=new_name)

    def rename(self, plan: RenamePlan) -> Path:
        """Perform the rename. Never overwrites a different existing file."""
        old_path = self.working_dir / plan.old_name
        new_path = self.working_dir / plan.new_name

        if plan.is_noop:
            logger.debug("%s already has the target name", old_path)
            return new_path

        if new_path.exists():
            raise RenameError(
                f"Target already exists: {plan.new_name}", file_path=str(old_path)
            )

        logger.debug("Renaming %s to %s", old_path, new_path)
        try:
            os.rename(old_path, new_path)
        except OSError as e:
            raise RenameError(
                f"Failed to rename {plan.old_name}",
                file_path=str(old_path),
                details=e.strerror or str(e),
            )
        return new_path

    def confirm_and_rename(
        self,
        plan: RenamePlan,
        confirm: Callable[[str], bool],
        force: bool = False,
    ) -> Optional[Path]:
        """Rename when forced or confirmed. Returns None when the user declined."""
        if force:
            return self.rename(plan)

        if not confirm(f'Rename "{plan.old_name}" to "{plan.new_name}"?'):
            logger.debug("Rename declined")
            return None

        return self.rename(plan)
