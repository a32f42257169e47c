"""
Content generation.

Modules:
    mdx_generator - ContentGenerator writing one MDX page per product
"""

from .mdx_generator import ContentGenerator

__all__ = ['ContentGenerator']
