from .catalog_pipeline import CatalogPipeline

__all__ = ['CatalogPipeline']
