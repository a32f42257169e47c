"""Shared test fixtures."""

from pathlib import Path

import pytest

from src.models import ProductRecord

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def catalog_text():
    """Load the catalog README fixture."""
    return (FIXTURES_DIR / "catalog.md").read_text(encoding="utf-8")


@pytest.fixture
def homepage_html():
    """Load the product homepage HTML fixture."""
    return (FIXTURES_DIR / "homepage.html").read_text(encoding="utf-8")


@pytest.fixture
def product():
    """A parsed, not yet enriched product."""
    return ProductRecord(
        name="Foo",
        website="https://foo.example",
        description="A tool",
        deal="50% off",
        category="Developer Tools",
        subcategory="Code Editors",
    )


@pytest.fixture
def sample_category_tags():
    """Small tag table for generator tests."""
    return {
        "Developer Tools": ["Developer", "Tools", "macOS"],
        "Books": ["Books", "Learning", "Programming"],
    }

