"""
MDX Content Generator

Writes one MDX page per product: a front-matter block followed by a
short body with the product link and its deal. Existing files are
overwritten.
"""

from __future__ import annotations

import logging
import os
from datetime import date, datetime, timezone
from typing import Dict, List

from ..common.text_utils import escape_quotes
from ..enrichment import LOGO_FILENAME, PREVIEW_FILENAME
from ..models import GenerationResult, ProductRecord

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """---
title: '{title}'
date: '{date}'
tags:
{tags}
images:
  - '{image}'
logo: '{logo}'
summary: '{summary}'
category: '{category}'
deal: '{deal}'
subcategory: '{subcategory}'
website: '{website_value}'
layout: {layout}
---

## [{title}]({website})

{title} <br/>
{summary}

## Rare Deal

{deal}
"""


class ContentGenerator:
    """
    Renders and writes product pages.

    Usage:
        generator = ContentGenerator("data/products", load_category_tags())
        results = generator.generate_all(products)
    """

    def __init__(
        self,
        content_dir: str,
        category_tags: Dict[str, List[str]],
        public_images_path: str = "/static/images",
        extension: str = "mdx",
        layout: str = "PostLayout",
        today: date | None = None,
    ):
        """
        Initialize the generator.

        Args:
            content_dir: Directory receiving <slug>.<extension> files
            category_tags: Category heading to tag list table
            public_images_path: Site URL prefix the image directory is served under
            extension: Content file extension
            layout: Page layout identifier written to front-matter
            today: Fixed page date (defaults to the current UTC date per render)
        """
        self.content_dir = content_dir
        self.category_tags = category_tags
        self.public_images_path = public_images_path.rstrip("/")
        self.extension = extension
        self.layout = layout
        self.today = today

    def tags_for(self, category: str) -> List[str]:
        """Tags for a category; unknown categories get none."""
        return list(self.category_tags.get(category, []))

    def output_path(self, product: ProductRecord) -> str:
        return os.path.join(self.content_dir, f"{product.slug}.{self.extension}")

    def _page_date(self) -> str:
        if self.today is not None:
            return self.today.isoformat()
        return datetime.now(timezone.utc).date().isoformat()

    def render(self, product: ProductRecord) -> str:
        """
        Render the MDX page for a product.

        Args:
            product: Enriched product

        Returns:
            Page content (front-matter and body)
        """
        image_base = f"{self.public_images_path}/product/{product.slug}"
        tags = "\n".join(f"  - '{tag}'" for tag in self.tags_for(product.category))

        return PAGE_TEMPLATE.format(
            title=escape_quotes(product.name),
            date=self._page_date(),
            tags=tags,
            image=f"{image_base}/{PREVIEW_FILENAME}" if product.images else "",
            logo=f"{image_base}/{LOGO_FILENAME}" if product.logo else "",
            summary=escape_quotes(product.description),
            category=escape_quotes(product.category),
            deal=escape_quotes(product.deal),
            subcategory=escape_quotes(product.subcategory),
            website=product.website,
            website_value=escape_quotes(product.website),
            layout=self.layout,
        )

    def generate(self, product: ProductRecord) -> GenerationResult:
        """
        Write the page for one product, overwriting any existing file.

        Args:
            product: Enriched product

        Returns:
            GenerationResult with the written path or the error
        """
        logger.info("Generating page for %s", product.name)
        path = self.output_path(product)
        try:
            content = self.render(product)
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except (OSError, ValueError) as e:
            logger.error("Could not generate page for %s: %s", product.name, e)
            return GenerationResult(product_name=product.name, ok=False, error=str(e))

        return GenerationResult(product_name=product.name, ok=True, path=path)

    def generate_all(self, products: List[ProductRecord]) -> List[GenerationResult]:
        """
        Write pages for all products.

        A failure on one product does not stop the others.

        Args:
            products: Enriched products

        Returns:
            One GenerationResult per product, in input order
        """
        os.makedirs(self.content_dir, exist_ok=True)
        return [self.generate(product) for product in products]
