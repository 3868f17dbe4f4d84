"""Catalog domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """A single UCS category entry."""

    category: str
    subcategory: str
    cat_id: str
    cat_short: str
    synonyms: str = ""

    @property
    def selector_line(self) -> str:
        """Line shown in the fuzzy selector. The CatID must stay the first token."""
        return f"{self.cat_id}: {self.category} {self.subcategory} -- {self.synonyms}"
