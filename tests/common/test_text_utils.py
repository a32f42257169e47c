"""Tests for src/common/text_utils.py"""

from src.common.text_utils import escape_quotes, sanitize_name


class TestSanitizeName:
    def test_strips_punctuation(self):
        assert sanitize_name("My App!!") == "my-app"

    def test_collapses_hyphen_runs(self):
        assert sanitize_name("A--B") == "a-b"

    def test_spaces_and_symbols(self):
        assert sanitize_name("Foo & Bar.io") == "foo-bar-io"

    def test_non_ascii_replaced(self):
        assert sanitize_name("Caf\u00e9 Cr\u00e8me") == "caf-cr-me"

    def test_idempotent(self):
        once = sanitize_name("Some  Weird__Name (v2)")
        assert sanitize_name(once) == once

    def test_no_ascii_alphanumerics_gets_hash_slug(self):
        slug = sanitize_name("\U0001F680")
        assert slug.startswith("product-")
        assert len(slug) == len("product-") + 8

    def test_hash_slug_is_deterministic(self):
        assert sanitize_name("\u65e5\u672c") == sanitize_name("\u65e5\u672c")

    def test_distinct_names_get_distinct_hash_slugs(self):
        assert sanitize_name("\u65e5\u672c") != sanitize_name("\U0001F680")

    def test_empty_name_still_has_slug(self):
        assert sanitize_name("") != ""


class TestEscapeQuotes:
    def test_escapes_both_quote_kinds(self):
        assert escape_quotes('it\'s "quoted"') == 'it\\\'s \\"quoted\\"'

    def test_no_unescaped_quotes_left(self):
        escaped = escape_quotes('it\'s "quoted"')
        for i, char in enumerate(escaped):
            if char in "'\"":
                assert escaped[i - 1] == "\\"

    def test_plain_text_unchanged(self):
        assert escape_quotes("50% off") == "50% off"

    def test_empty_input(self):
        assert escape_quotes("") == ""
