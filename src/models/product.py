"""
Product data model.

One catalog row, optionally annotated with downloaded asset paths.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..common.text_utils import sanitize_name


@dataclass
class ProductRecord:
    """
    A product listed in the catalog README.

    Created by the catalog parser, annotated by the asset enricher
    (logo, images) and consumed once by the content generator.
    """

    # Catalog row (always present)
    name: str
    website: str
    description: str
    deal: str

    # Enclosing headings ("" when the row precedes any heading)
    category: str = ""
    subcategory: str = ""

    # Local asset paths, set only after a successful download
    logo: Optional[str] = None
    images: Optional[List[str]] = None

    @property
    def slug(self) -> str:
        return sanitize_name(self.name)
