"""
Data models for the catalog pipeline.

This module contains pure data classes with no business logic.
"""

from .product import ProductRecord
from .results import AssetResult, EnrichmentResult, GenerationResult

__all__ = ['ProductRecord', 'AssetResult', 'EnrichmentResult', 'GenerationResult']
