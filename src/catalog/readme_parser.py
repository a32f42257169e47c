"""
README Catalog Parser

Reads the human-maintained catalog README:

    ## Category
    ### Subcategory
    | icon | [Name](https://example.com) | Description | Deal |

Headings set the category/subcategory for the rows below them. Rows that
do not have this shape are skipped without error.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..models import ProductRecord

logger = logging.getLogger(__name__)

CATEGORY_PREFIX = '## '
SUBCATEGORY_PREFIX = '### '
ROW_PREFIX = '|'

LINK_TEXT_RE = re.compile(r'\[(.*?)\]')
LINK_URL_RE = re.compile(r'\((.*?)\)')


def _parse_link(cell: str) -> Optional[Tuple[str, str]]:
    """Return (text, url) from a '[text](url)' cell, or None."""
    text_match = LINK_TEXT_RE.search(cell)
    url_match = LINK_URL_RE.search(cell)
    if not text_match or not url_match:
        return None
    return text_match.group(1), url_match.group(1)


def _parse_row(line: str, category: str, subcategory: str) -> Optional[ProductRecord]:
    # Cell 0 is the empty string before the leading pipe
    cells = [cell.strip() for cell in line.split('|')]
    if len(cells) < 5 or not cells[2].startswith('['):
        return None

    link = _parse_link(cells[2])
    if link is None:
        return None

    name, website = link
    return ProductRecord(
        name=name,
        website=website,
        description=cells[3],
        deal=cells[4],
        category=category,
        subcategory=subcategory,
    )


def parse_catalog(text: str) -> List[ProductRecord]:
    """
    Parse catalog README text into product records.

    Args:
        text: Full README content

    Returns:
        Records in document order (empty list if nothing matches)
    """
    products = []
    category = ''
    subcategory = ''

    for line in text.splitlines():
        if line.startswith(CATEGORY_PREFIX):
            category = line[len(CATEGORY_PREFIX):].strip()
        elif line.startswith(SUBCATEGORY_PREFIX):
            subcategory = line[len(SUBCATEGORY_PREFIX):].strip()
        elif line.startswith(ROW_PREFIX):
            product = _parse_row(line, category, subcategory)
            if product:
                products.append(product)

    return products


def load_catalog(path: Union[str, Path]) -> List[ProductRecord]:
    """
    Read and parse a catalog README.

    Args:
        path: Path to the README file

    Returns:
        Parsed product records

    Raises:
        FileNotFoundError: If the README does not exist
    """
    text = Path(path).read_text(encoding='utf-8')
    products = parse_catalog(text)
    logger.info("Parsed %d products from %s", len(products), path)
    return products
