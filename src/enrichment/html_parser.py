"""
Homepage Asset Parser

Finds visual assets declared in a product homepage's <head>:
- Favicon from <link rel="icon"> / <link rel="shortcut icon">
- Preview image from <meta property="og:image">
- Ordered favicon candidates for the logo probe

Every extractor returns an absolute URL or None; a missing tag is not
an error.
"""

from typing import List, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

# Conventional locations probed after the declared PNG icons
FALLBACK_FAVICON_PATHS = [
    '/favicon-32x32.png',
    '/favicon-16x16.png',
    '/apple-touch-icon.png',
    '/favicon.png',
]


class HomepageAssetParser:
    """
    Parses asset URLs from homepage HTML.

    Usage:
        parser = HomepageAssetParser(html, "https://example.com")
        favicon = parser.extract_favicon_url()
        og_image = parser.extract_og_image_url()
        candidates = parser.favicon_candidates()
    """

    def __init__(self, html: str, page_url: str):
        """
        Initialize the parser.

        Args:
            html: Raw homepage HTML
            page_url: URL the HTML was fetched from (base for relative links)
        """
        self.page_url = page_url
        self.soup = BeautifulSoup(html, "lxml")

    def _absolute(self, href: Optional[str]) -> Optional[str]:
        if not href or not href.strip():
            return None
        try:
            return urljoin(self.page_url, href.strip())
        except ValueError:
            # Malformed markup, e.g. an unbalanced "[" read as an IPv6 host
            return None

    def _attr(self, selector: str, attribute: str) -> Optional[str]:
        element = self.soup.select_one(selector)
        if element is None:
            return None
        return element.get(attribute)

    def extract_favicon_url(self) -> Optional[str]:
        """
        Extract the declared favicon URL.

        Returns:
            Absolute URL of rel="icon", else rel="shortcut icon", else None
        """
        href = (
            self._attr('link[rel="icon"]', 'href')
            or self._attr('link[rel="shortcut icon"]', 'href')
        )
        return self._absolute(href)

    def extract_og_image_url(self) -> Optional[str]:
        """
        Extract the Open Graph preview image URL.

        Returns:
            Absolute og:image URL or None
        """
        return self._absolute(self._attr('meta[property="og:image"]', 'content'))

    def favicon_candidates(self) -> List[str]:
        """
        Build the prioritized logo candidate list.

        Order: apple-touch-icon, PNG-typed icon, then the conventional
        fallback paths. Undeclared entries are dropped.

        Returns:
            Absolute candidate URLs in probe order
        """
        declared = [
            self._attr('link[rel="apple-touch-icon"]', 'href'),
            self._attr('link[rel="icon"][type="image/png"]', 'href'),
        ]

        candidates = []
        for href in declared + FALLBACK_FAVICON_PATHS:
            url = self._absolute(href)
            if url:
                candidates.append(url)
        return candidates
