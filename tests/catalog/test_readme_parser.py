"""Tests for src/catalog/readme_parser.py"""

import pytest

from src.catalog.readme_parser import load_catalog, parse_catalog


class TestParseCatalog:
    def test_fixture_rows_in_document_order(self, catalog_text):
        products = parse_catalog(catalog_text)
        assert [p.name for p in products] == [
            "Early Bird",
            "Foo",
            "Bar's \"Editor\"",
            "Term",
            "Book One",
        ]

    def test_extracts_link_text_and_url(self, catalog_text):
        foo = parse_catalog(catalog_text)[1]
        assert foo.name == "Foo"
        assert foo.website == "https://foo.example"
        assert foo.description == "A tool"
        assert foo.deal == "50% off"

    def test_row_before_any_heading_has_empty_category(self, catalog_text):
        early = parse_catalog(catalog_text)[0]
        assert early.category == ""
        assert early.subcategory == ""

    def test_row_under_headings(self):
        text = "## X\n### Y\n| i | [A](https://a.example) | d | deal |\n"
        [product] = parse_catalog(text)
        assert product.category == "X"
        assert product.subcategory == "Y"

    def test_subcategory_carries_over_new_category(self, catalog_text):
        book = parse_catalog(catalog_text)[-1]
        assert book.category == "Books"
        assert book.subcategory == "Terminals"

    def test_extra_cells_ignored(self, catalog_text):
        book = parse_catalog(catalog_text)[-1]
        assert book.deal == "$5 off"

    def test_skips_header_and_separator_rows(self):
        text = "| Icon | Name | Description | Deal |\n|---|---|---|---|\n"
        assert parse_catalog(text) == []

    def test_skips_link_without_url(self):
        assert parse_catalog("| i | [Broken] | d | deal |") == []

    def test_skips_short_rows(self):
        assert parse_catalog("| i | [A](https://a.example) |") == []

    def test_heading_text_is_trimmed(self):
        text = "##   Spaced Out   \n| i | [A](https://a.example) | d | deal |"
        assert parse_catalog(text)[0].category == "Spaced Out"

    def test_windows_line_endings(self):
        text = "## X\r\n| i | [A](https://a.example) | d | deal |\r\n"
        [product] = parse_catalog(text)
        assert product.category == "X"
        assert product.deal == "deal"

    def test_empty_document(self):
        assert parse_catalog("") == []

    def test_new_records_are_not_enriched(self, catalog_text):
        for product in parse_catalog(catalog_text):
            assert product.logo is None
            assert product.images is None


class TestLoadCatalog:
    def test_loads_fixture(self, fixtures_dir):
        products = load_catalog(fixtures_dir / "catalog.md")
        assert len(products) == 5

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "README.md")
