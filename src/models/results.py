"""
Step result models.

Enrichment and generation report their outcome through these instead of
raising, so the caller can log and move on to the next product.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class AssetResult:
    """Outcome of downloading a single asset (logo or preview image)."""
    name: str
    path: Optional[str] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.path is not None


@dataclass
class EnrichmentResult:
    """
    Outcome of enriching one product.

    ok is False only when the product could not be enriched at all
    (directory creation, homepage fetch or homepage parsing failed).
    Missing assets on an otherwise reachable homepage are reported
    through logo/preview.
    """
    product_name: str
    ok: bool
    error: str = ""
    logo: Optional[AssetResult] = None
    preview: Optional[AssetResult] = None


@dataclass
class GenerationResult:
    """Outcome of writing one content file."""
    product_name: str
    ok: bool
    path: Optional[str] = None
    error: str = ""
