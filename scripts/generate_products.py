#!/usr/bin/env python3
"""
Product Page Generation Script

Parses the catalog README, downloads each product's logo and og:image,
and writes one MDX page per product.

Every run re-downloads and re-writes everything.

Usage:
    python3 scripts/generate_products.py
    python3 scripts/generate_products.py --readme ../README.md
    python3 scripts/generate_products.py --content-dir data/products --verbose
"""

import argparse
import logging
import os
import sys

import requests

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.common.config_loader import load_category_tags, load_site_settings
from src.common.log_config import setup_logging
from src.enrichment import AssetEnricher
from src.enrichment.asset_enricher import DEFAULT_HEADERS
from src.generation import ContentGenerator
from src.pipeline import CatalogPipeline

logger = logging.getLogger("src.scripts.generate_products")


def main():
    settings = load_site_settings()
    paths = settings.get("paths", {})
    content = settings.get("content", {})
    http = settings.get("http", {})

    parser = argparse.ArgumentParser(
        description="Generate product pages from the catalog README"
    )
    parser.add_argument(
        "--readme", "-r",
        default=paths.get("catalog", "README.md"),
        help="Catalog README to parse (default: %(default)s)"
    )
    parser.add_argument(
        "--images-dir", "-i",
        default=paths.get("images_dir", "public/static/images"),
        help="Root directory for downloaded images (default: %(default)s)"
    )
    parser.add_argument(
        "--content-dir", "-c",
        default=paths.get("content_dir", "data/products"),
        help="Directory for generated pages (default: %(default)s)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    headers = dict(DEFAULT_HEADERS)
    if http.get("user_agent"):
        headers["User-Agent"] = http["user_agent"]

    session = requests.Session()
    enricher = AssetEnricher(
        args.images_dir,
        session=session,
        timeout=http.get("timeout", 30),
        headers=headers,
    )
    generator = ContentGenerator(
        args.content_dir,
        load_category_tags(),
        public_images_path=paths.get("public_images_path", "/static/images"),
        extension=content.get("extension", "mdx"),
        layout=content.get("layout", "PostLayout"),
    )

    pipeline = CatalogPipeline(
        catalog_path=args.readme,
        images_dir=args.images_dir,
        content_dir=args.content_dir,
        enricher=enricher,
        generator=generator,
    )

    try:
        pipeline.run()
    except (OSError, ValueError) as e:
        logger.error("Error: %s", e)
        sys.exit(1)
    finally:
        session.close()

    logger.info("Done. Pages written to %s", args.content_dir)


if __name__ == "__main__":
    main()
