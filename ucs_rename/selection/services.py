"""Interactive category selection through an external fuzzy finder."""

import logging
import shutil
import subprocess
from typing import Optional, Protocol, Sequence

from ..core.config import SelectorConfig
from ..core.exceptions import SelectorExecutionError

logger = logging.getLogger(__name__)


class CategorySelector(Protocol):
    """Pick one line out of a list of candidates.

    Returns the chosen line, or None when the user cancelled.
    """

    def select(self, lines: Sequence[str]) -> Optional[str]: ...


class FzfSelector:
    """Runs fzf with the candidate lines on its stdin and reads the choice from stdout."""

    def __init__(
        self,
        executable: Optional[str] = None,
        header: str = SelectorConfig.HEADER,
    ):
        self.executable = executable
        self.header = header

    def _resolve_executable(self) -> str:
        if self.executable:
            return self.executable
        found = shutil.which(SelectorConfig.EXECUTABLE)
        if not found:
            raise SelectorExecutionError(
                f"{SelectorConfig.EXECUTABLE} executable not found",
                details="install fzf or set UCS_CAT_ID",
            )
        return found

    def build_command(self, executable: str) -> list:
        command = [executable, *SelectorConfig.FLAGS]
        if self.header:
            command.append(f"--header={self.header}")
        return command

    def select(self, lines: Sequence[str]) -> Optional[str]:
        command = self.build_command(self._resolve_executable())
        logger.debug("Running selector: %s", command)

        try:
            # fzf draws its UI on the controlling terminal, stderr is left attached
            result = subprocess.run(
                command,
                input="\n".join(lines) + "\n",
                stdout=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            raise SelectorExecutionError("Failed to start selector", details=str(e))

        logger.debug("Selector exited with status %d", result.returncode)

        if result.returncode in SelectorConfig.cancelled_exit_codes():
            return None
        if result.returncode != 0:
            raise SelectorExecutionError(
                "Selector failed",
                exit_code=result.returncode,
                details=f"exit status {result.returncode}",
            )

        choice = result.stdout.strip()
        return choice or None


def parse_selection(choice: str) -> str:
    """Extract the CatID from a selector line such as ``"AMBPark: AMBIENCE PARK -- ..."``."""
    tokens = choice.split()
    if not tokens:
        return ""
    return tokens[0].rstrip(":|")
