"""Category catalog service backed by the UCS CSV file."""

import csv
import logging
from pathlib import Path
from typing import Iterator, List, Optional

from .models import Category
from ..core.config import CatalogConfig, Paths
from ..core.exceptions import CatalogLoadError

logger = logging.getLogger(__name__)


class CategoryCatalog:
    """Ordered, read-only list of UCS categories sorted by CatID."""

    def __init__(self, categories: List[Category]):
        self._categories = sorted(categories, key=lambda c: c.cat_id)
        self._by_id = {c.cat_id: c for c in self._categories}

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "CategoryCatalog":
        """Load the catalog from ``path`` or the bundled CSV."""
        csv_path = Path(path) if path else Paths.get_default_catalog()
        logger.debug("Loading categories from %s", csv_path)

        try:
            with open(csv_path, newline="", encoding="utf-8-sig") as f:
                rows = list(csv.reader(f))
        except OSError as e:
            raise CatalogLoadError(
                "Failed to read category file", file_path=str(csv_path), details=str(e)
            )
        except (csv.Error, UnicodeDecodeError) as e:
            raise CatalogLoadError(
                "Malformed category file", file_path=str(csv_path), details=str(e)
            )

        catalog = cls(_parse_rows(rows))
        logger.debug("Loaded %d categories", len(catalog))
        return catalog

    def lookup(self, cat_id: str) -> Optional[Category]:
        """Return the category for ``cat_id`` or None."""
        return self._by_id.get(cat_id)

    def __contains__(self, cat_id: str) -> bool:
        return cat_id in self._by_id

    def list(self) -> List[Category]:
        """All categories in ascending CatID order."""
        return list(self._categories)

    def render_lines(self) -> List[str]:
        """Selector lines, one per category."""
        return [c.selector_line for c in self._categories]

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)


def _parse_rows(rows: List[List[str]]) -> List[Category]:
    categories = []
    for row in rows:
        # Rows with any other shape are not category entries
        if len(row) != CatalogConfig.FIELD_COUNT:
            continue
        if row[CatalogConfig.CATID_COLUMN] == CatalogConfig.HEADER_CATID:
            continue
        categories.append(
            Category(
                category=row[CatalogConfig.CATEGORY_COLUMN],
                subcategory=row[CatalogConfig.SUBCATEGORY_COLUMN],
                cat_id=row[CatalogConfig.CATID_COLUMN],
                cat_short=row[CatalogConfig.CATSHORT_COLUMN],
                synonyms=row[CatalogConfig.SYNONYMS_COLUMN],
            )
        )
    return categories


def load_categories(path: Optional[Path] = None) -> List[Category]:
    """Return the full list of UCS categories.

    The bundled CSV is used unless ``path`` is given. Compatible CSV files are
    available at https://universalcategorysystem.com.
    """
    return CategoryCatalog.load(path).list()
