"""
Asset enrichment for catalog products.

Modules:
    html_parser    - HomepageAssetParser for favicon / og:image discovery
    asset_enricher - AssetEnricher (fetch, probe, download)
"""

from .asset_enricher import LOGO_FILENAME, PREVIEW_FILENAME, AssetEnricher
from .html_parser import FALLBACK_FAVICON_PATHS, HomepageAssetParser

__all__ = [
    'AssetEnricher',
    'HomepageAssetParser',
    'FALLBACK_FAVICON_PATHS',
    'LOGO_FILENAME',
    'PREVIEW_FILENAME',
]
