"""
Catalog parsing.

Modules:
    readme_parser - Markdown README tables to ProductRecord lists
"""

from .readme_parser import load_catalog, parse_catalog

__all__ = ['load_catalog', 'parse_catalog']
