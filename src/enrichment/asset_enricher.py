"""
Asset Enricher

Downloads a logo and a preview image for each catalog product:

1. Fetch the product homepage
2. Read the declared favicon and og:image from its markup
3. Probe favicon candidates with HEAD, first 200 wins
4. Download the winner to logo.png and og:image to og-image.png

One attempt per request, no retries. Failures are logged and leave the
corresponding field unset; enrich() never raises.
"""

from __future__ import annotations

import logging
import os

import requests

from ..models import AssetResult, EnrichmentResult, ProductRecord
from .html_parser import HomepageAssetParser

logger = logging.getLogger(__name__)

LOGO_FILENAME = "logo.png"
PREVIEW_FILENAME = "og-image.png"

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


class AssetEnricher:
    """Fetches homepage assets and records their local paths on products."""

    def __init__(
        self,
        images_dir: str,
        session: requests.Session | None = None,
        timeout: float = 30,
        headers: dict | None = None,
    ):
        """
        Initialize the enricher.

        Args:
            images_dir: Root image directory; assets go to <images_dir>/product/<slug>/
            session: Shared session for TCP connection reuse (created if omitted)
            timeout: Per-request timeout in seconds
            headers: Request headers (defaults to a desktop browser profile)
        """
        self.images_dir = images_dir
        self.session = session or requests.Session()
        self.timeout = timeout
        self.headers = headers or dict(DEFAULT_HEADERS)

    def product_dir(self, product: ProductRecord) -> str:
        return os.path.join(self.images_dir, "product", product.slug)

    def enrich(self, product: ProductRecord) -> EnrichmentResult:
        """
        Attach logo and preview image paths to a product.

        Args:
            product: Parsed product (mutated in place)

        Returns:
            EnrichmentResult describing what was downloaded
        """
        app_dir = self.product_dir(product)
        try:
            os.makedirs(app_dir, exist_ok=True)
        except OSError as e:
            logger.error("Could not create %s for %s: %s", app_dir, product.name, e)
            return EnrichmentResult(product_name=product.name, ok=False, error=str(e))

        try:
            response = self.session.get(product.website, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("Failed to fetch assets for %s: %s", product.name, e)
            return EnrichmentResult(product_name=product.name, ok=False, error=str(e))

        try:
            parser = HomepageAssetParser(response.text, product.website)
            favicon_url = parser.extract_favicon_url()
            og_image_url = parser.extract_og_image_url()
            candidates = parser.favicon_candidates()
        except ValueError as e:
            logger.error("Could not parse homepage of %s: %s", product.name, e)
            return EnrichmentResult(product_name=product.name, ok=False, error=str(e))

        logger.debug("%s: favicon=%s og:image=%s", product.name, favicon_url, og_image_url)

        result = EnrichmentResult(product_name=product.name, ok=True)

        # The declared favicon is informational only; logo.png comes from the probe
        logo_url = self.find_logo_url(candidates)
        if logo_url:
            result.logo = self.download(logo_url, os.path.join(app_dir, LOGO_FILENAME))
            if result.logo.ok:
                product.logo = result.logo.path

        if og_image_url:
            result.preview = self.download(og_image_url, os.path.join(app_dir, PREVIEW_FILENAME))
            if result.preview.ok:
                product.images = [result.preview.path]

        return result

    def find_logo_url(self, candidates: list[str]) -> str | None:
        """
        Probe candidate URLs in order.

        Args:
            candidates: Absolute URLs in priority order

        Returns:
            First URL answering HEAD with 200, or None
        """
        for url in candidates:
            try:
                response = self.session.head(
                    url, headers=self.headers, timeout=self.timeout, allow_redirects=True
                )
            except requests.RequestException as e:
                logger.warning("Favicon URL not found: %s (%s)", url, e)
                continue

            if response.status_code == 200:
                return url
            logger.warning("Favicon URL not found: %s (HTTP %d)", url, response.status_code)

        return None

    def download(self, url: str, output_path: str) -> AssetResult:
        """
        Download a binary asset to disk.

        Args:
            url: Absolute asset URL
            output_path: Destination file (overwritten)

        Returns:
            AssetResult with path set on success, error on failure
        """
        name = os.path.basename(output_path)
        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
            with open(output_path, "wb") as f:
                f.write(response.content)
        except (requests.RequestException, OSError) as e:
            logger.warning("Failed to download %s from %s: %s", name, url, e)
            return AssetResult(name=name, error=str(e))

        logger.debug("Saved %s (%d bytes)", output_path, len(response.content))
        return AssetResult(name=name, path=output_path)
