"""
Catalog Pipeline

Runs the three stages in order, each over the full product list:
parse the README, enrich every product, generate every page.
Products are processed one at a time.
"""

from __future__ import annotations

import logging
from typing import List

import requests

from ..catalog import load_catalog
from ..common.config_loader import load_category_tags
from ..enrichment import AssetEnricher
from ..generation import ContentGenerator
from ..models import ProductRecord

logger = logging.getLogger(__name__)


class CatalogPipeline:
    """End-to-end catalog to site content run."""

    def __init__(
        self,
        catalog_path: str,
        images_dir: str,
        content_dir: str,
        enricher: AssetEnricher | None = None,
        generator: ContentGenerator | None = None,
    ):
        """
        Initialize the pipeline.

        Args:
            catalog_path: README to parse
            images_dir: Root directory for downloaded assets
            content_dir: Directory for generated pages
            enricher: Preconfigured enricher (defaults to one on images_dir)
            generator: Preconfigured generator (defaults to one on content_dir
                with the configured category tags)
        """
        self.catalog_path = catalog_path
        self.images_dir = images_dir
        self.content_dir = content_dir
        self.enricher = enricher
        self.generator = generator

    def run(self) -> List[ProductRecord]:
        """
        Parse, enrich and generate.

        Returns:
            The enriched products

        Raises:
            FileNotFoundError: If the catalog README is missing
        """
        products = load_catalog(self.catalog_path)

        enricher = self.enricher
        session = None
        if enricher is None:
            # Shared session for TCP connection reuse across products
            session = requests.Session()
            enricher = AssetEnricher(self.images_dir, session=session)

        try:
            for i, product in enumerate(products, 1):
                logger.info("[%d/%d] Fetching assets for %s", i, len(products), product.name)
                result = enricher.enrich(product)
                if result.ok:
                    logger.info(
                        "%s: logo=%s og-image=%s",
                        product.name,
                        "yes" if product.logo else "no",
                        "yes" if product.images else "no",
                    )
        finally:
            if session is not None:
                session.close()

        generator = self.generator or ContentGenerator(self.content_dir, load_category_tags())
        generator.generate_all(products)

        return products
