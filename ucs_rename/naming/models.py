"""Filename domain models."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..core.config import FilenameConfig


class Requirement(Enum):
    """Whether a field may be left empty."""

    REQUIRED = "required"
    OPTIONAL = "optional"


class PromptState(Enum):
    """States of the field prompt loop."""

    PROMPTING = "prompting"
    VALIDATING = "validating"
    ACCEPTED = "accepted"
    FAILED = "failed"


@dataclass(frozen=True)
class FieldSpec:
    """A prompted filename field.

    ``override`` names the ``RenamerSettings`` attribute that can supply the
    value without prompting.
    """

    name: str
    requirement: Requirement
    override: Optional[str] = None

    @property
    def required(self) -> bool:
        return self.requirement is Requirement.REQUIRED


FX_NAME = FieldSpec("FXName", Requirement.REQUIRED)
CREATOR_ID = FieldSpec("CreatorID", Requirement.REQUIRED, "creator_id_override")
SOURCE_ID = FieldSpec("SourceID", Requirement.REQUIRED, "source_id_override")
USER_DATA = FieldSpec("UserData", Requirement.OPTIONAL, "user_data_override")

PROMPTED_FIELDS = (FX_NAME, CREATOR_ID, SOURCE_ID, USER_DATA)


@dataclass(frozen=True)
class Filename:
    """A UCS filename.

    Segments must not contain the delimiter, because it separates segments in
    the rendered filename.
    """

    cat_id: str
    fx_name: str
    creator_id: str
    source_id: str
    user_data: str = ""

    @property
    def segments(self) -> List[str]:
        """Non-empty segments in filename order."""
        segs = [self.cat_id, self.fx_name, self.creator_id, self.source_id]
        if self.user_data:
            segs.append(self.user_data)
        return segs

    def render(self, extension: str) -> str:
        """Assemble ``CatID_FXName_CreatorID_SourceID[_UserData]<extension>``."""
        return FilenameConfig.DELIMITER.join(self.segments) + extension
