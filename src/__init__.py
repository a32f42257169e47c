"""
Deals Catalog Site Generator

Modules:
    models      - Data models (ProductRecord, step results)
    common      - Shared utilities (config loader, logging, text helpers)
    catalog     - README catalog parsing
    enrichment  - Logo and preview image scraping
    generation  - MDX content file generation
    pipeline    - End-to-end run (parse, enrich, generate)
"""
