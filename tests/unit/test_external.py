"""
Unit tests for Stringy's external collaborators.

Tests cover:
- PatternMatcher modifiers, replacement syntax and POSIX classes
- Transliterator ASCII folding, language overrides and slugs
- HtmlEntities encoding/decoding and markup clean-ups
- BleachSanitizer
- EmailValidator syntax checks and heuristics
"""

import pytest
import regex

from stringy.external import (
    BleachSanitizer,
    EmailValidator,
    HtmlEntities,
    PatternMatcher,
    QuoteStyle,
    Transliterator,
    XssSanitizer,
)
from stringy.external.html_entities import remove_breaks, strip_css_media_queries, strip_empty_tags
from stringy.external.patterns import convert_replacement, parse_modifiers
from stringy.external.transliteration import language_table
from stringy.utils.errors import InvalidArgument


class TestPatternMatcher:
    """Tests for the regular-expression adapter."""

    @pytest.fixture
    def matcher(self):
        return PatternMatcher()

    @pytest.mark.parametrize(
        "text, pattern, replacement, expected",
        [
            ("", "", "", ""),
            ("bcd", "a", "b", "bcd"),
            ("aa", "a", "b", "bb"),
            ("aa", "a(.*)", "b\\1", "ba"),
            ("fòô ", "f[òô]+\\s", "bàř", "bàř"),
            ("foo bar", "f(o)o", "\\1", "o bar"),
            ("bar", "[[:alpha:]]{3}", "foo", "foo"),
            ("fò", "(ò)", "\\1ô", "fòô"),
            ("foo bar", "f(o)o", "$1", "o bar"),
            ("foo bar", "(f)(oo)", "${2}${1}", "oof bar"),
        ],
    )
    def test_replace(self, matcher, text, pattern, replacement, expected):
        assert matcher.replace(text, pattern, replacement) == expected

    def test_replace_ignore_case(self, matcher):
        assert matcher.replace("FOO foo", "foo", "bar", "i") == "bar bar"

    def test_replace_with_function(self, matcher):
        assert matcher.replace_with("a1b22", r"\d+", lambda m: f"<{m.group(0)}>") == "a<1>b<22>"

    def test_split(self, matcher):
        assert matcher.split("a1b22c", r"\d+") == ["a", "b", "c"]
        assert matcher.split("a1b22c", r"\d+", limit=2) == ["a", "b"]
        assert matcher.split("a1b22c", r"\d+", limit=0) == ["a", "b", "c"]

    def test_full_match(self, matcher):
        assert matcher.full_match("foo", "f.o")
        assert not matcher.full_match("foo bar", "f.o")

    def test_search(self, matcher):
        match = matcher.search("fòô bàř", r"b\w+")
        assert match is not None
        assert match.group(0) == "bàř"

    def test_escape(self, matcher):
        assert matcher.full_match("a.b*c", matcher.escape("a.b*c"))
        assert not matcher.full_match("axbbc", matcher.escape("a.b*c"))

    def test_pattern_errors_propagate(self, matcher):
        with pytest.raises(regex.error):
            matcher.replace("foo", "(", "x")

    def test_parse_modifiers(self):
        assert parse_modifiers("i") & regex.IGNORECASE
        assert parse_modifiers("msr") & regex.DOTALL
        assert parse_modifiers("msr") & regex.MULTILINE

    def test_unknown_modifier(self):
        with pytest.raises(InvalidArgument) as exc_info:
            parse_modifiers("q")
        assert exc_info.value.allowed == ["i", "m", "s", "x"]

    def test_convert_replacement(self):
        assert convert_replacement("$1-${2}") == "\\g<1>-\\g<2>"
        assert convert_replacement("\\1") == "\\1"


class TestTransliterator:
    """Tests for ASCII folding and slugs."""

    @pytest.fixture
    def transliterator(self):
        return Transliterator()

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("fòô bàř", "foo bar"),
            (" ŤÉŚŢ ", " TEST "),
            ("φ = ź = 3", "f = z = 3"),
            ("перевірка", "perevirka"),
            ("лысая гора", "lysaya gora"),
            ("Щука", "Shchuka"),
            ("strasse", "strasse"),
            ("Straße", "Strasse"),
            ("Ελληνικά", "Ellinika"),
            ("ŀ", "l"),
            ("", ""),
            ("  　", "   "),
        ],
    )
    def test_to_ascii(self, transliterator, text, expected):
        assert transliterator.to_ascii(text) == expected

    def test_language_override(self, transliterator):
        assert transliterator.to_ascii("äöüÄÖÜ", "de") == "aeoeueAEOEUE"
        assert transliterator.to_ascii("äöüÄÖÜ", "de_DE") == "aeoeueAEOEUE"
        assert transliterator.to_ascii("äöüÄÖÜ", "en") == "aouAOU"
        assert transliterator.to_ascii("Ålborg", "da") == "AAlborg"

    def test_unsupported_codepoints(self, transliterator):
        """Test that unsupported codepoints are dropped unless kept on request."""
        assert transliterator.to_ascii("𐍉") == ""
        assert transliterator.to_ascii("𐍉", remove_unsupported=False) == "𐍉"

    def test_language_table(self):
        assert language_table("de-AT")["ü"] == "ue"
        assert language_table("xx") == {}
        assert language_table("") == {}

    @pytest.mark.parametrize(
        "text, separator, expected",
        [
            ("Foo bar", "-", "foo-bar"),
            ("foo_bar", "-", "foo-bar"),
            ("FOO-BAR", "-", "foo-bar"),
            ("fòô bàř", "-", "foo-bar"),
            (" Foo d'Bar ", "-", "foo-dbar"),
            ("A string-with-dashes", "-", "a-string-with-dashes"),
            ("Using strings like fòô bàř", "-", "using-strings-like-foo-bar"),
            ("numbers 1234", "-", "numbers-1234"),
            ("perevirka ryadka", "-", "perevirka-ryadka"),
            ("перевірка рядка", "-", "perevirka-ryadka"),
            ("подъехал к подъезду моего дома", "-", "podekhal-k-podezdu-moego-doma"),
            ("Foo bar", "_", "foo_bar"),
            ("--   An odd__   string-_", "_", "an_odd_string"),
            ("A string-with-dashes", "\\", "a\\string\\with\\dashes"),
            ("Foo bar", "", "foobar"),
        ],
    )
    def test_slug(self, transliterator, text, separator, expected):
        assert transliterator.slug(text, separator) == expected

    def test_slug_keep_case(self, transliterator):
        assert transliterator.slug("Fòô Bàř", lowercase=False) == "Foo-Bar"


class TestHtmlEntities:
    """Tests for entity encoding and markup clean-ups."""

    @pytest.fixture
    def entities(self):
        return HtmlEntities()

    @pytest.mark.parametrize(
        "text, quote_style, expected",
        [
            ("&", QuoteStyle.COMPAT, "&amp;"),
            ('"', QuoteStyle.COMPAT, "&quot;"),
            ("'", QuoteStyle.COMPAT, "'"),
            ("'", QuoteStyle.QUOTES, "&#039;"),
            ('"', QuoteStyle.NOQUOTES, '"'),
            ("<", QuoteStyle.COMPAT, "&lt;"),
            ("fòô", QuoteStyle.COMPAT, "f&ograve;&ocirc;"),
        ],
    )
    def test_encode(self, entities, text, quote_style, expected):
        assert entities.encode(text, quote_style) == expected

    @pytest.mark.parametrize(
        "text, quote_style, expected",
        [
            ("&amp;", QuoteStyle.COMPAT, "&"),
            ("&quot;", QuoteStyle.COMPAT, '"'),
            ("&#039;", QuoteStyle.COMPAT, "&#039;"),
            ("&#039;", QuoteStyle.QUOTES, "'"),
            ("&quot;", QuoteStyle.NOQUOTES, "&quot;"),
            ("&lt;&gt;", QuoteStyle.COMPAT, "<>"),
            ("f&ograve;&#x00F4;", QuoteStyle.COMPAT, "fòô"),
            ("&zzzz;", QuoteStyle.COMPAT, "&zzzz;"),
        ],
    )
    def test_decode(self, entities, text, quote_style, expected):
        assert entities.decode(text, quote_style) == expected

    def test_escape(self, entities):
        assert entities.escape("<a href='x'>\"&\"</a>") == (
            "&lt;a href=&#039;x&#039;&gt;&quot;&amp;&quot;&lt;/a&gt;"
        )
        assert entities.escape("fòô") == "fòô"

    @pytest.mark.parametrize(
        "text, allowed, expected",
        [
            ("", None, ""),
            ("raw", None, "raw"),
            ("<a href='#'>test</a>", None, "test"),
            ("<a href='#'>test</a><br>", "<br>", "test<br>"),
            ("<b>bold</b><i>it</i>", ["i"], "bold<i>it</i>"),
            ("x<!-- comment -->y", None, "xy"),
            ("<p>fòô <span>bàř</span></p>", None, "fòô bàř"),
        ],
    )
    def test_strip_tags(self, entities, text, allowed, expected):
        assert entities.strip_tags(text, allowed) == expected

    def test_remove_breaks(self):
        assert remove_breaks("foo\r\nbar<br/>baz<BR >qux\n", " ") == "foo bar baz qux "
        assert remove_breaks("foo\nbar") == "foobar"

    def test_remove_breaks_literal_replacement(self):
        assert remove_breaks("a\nb", "\\1") == "a\\1b"

    def test_strip_empty_tags(self):
        assert strip_empty_tags("foo<b></b>bar<i> </i>") == "foobar"
        assert strip_empty_tags("<b>x</b>") == "<b>x</b>"

    def test_strip_css_media_queries(self):
        css = "a { color: red; }\n@media screen and (max-width: 600px) { a { color: blue; } }\nb { }"
        assert strip_css_media_queries(css) == "a { color: red; }\nb { }"


class TestBleachSanitizer:
    """Tests for the bleach backed sanitizer."""

    def test_satisfies_protocol(self):
        assert isinstance(BleachSanitizer(), XssSanitizer)

    def test_empty(self):
        assert BleachSanitizer().clean("") == ""

    def test_safe_markup_kept(self):
        assert BleachSanitizer().clean("<b>bold</b> text") == "<b>bold</b> text"

    def test_script_tag_removed(self):
        cleaned = BleachSanitizer().clean("<script>alert('xss')</script>hello")
        assert "<script" not in cleaned
        assert cleaned.endswith("hello")

    def test_event_handler_removed(self):
        assert BleachSanitizer().clean('<b onclick="evil()">x</b>') == "<b>x</b>"

    def test_javascript_url_removed(self):
        cleaned = BleachSanitizer().clean('<a href="javascript:alert(1)">x</a>')
        assert "javascript" not in cleaned
        assert cleaned.endswith("x</a>")

    def test_custom_allowlist(self):
        sanitizer = BleachSanitizer(tags=["i"])
        assert sanitizer.clean("<b>bold</b><i>it</i>") == "bold<i>it</i>"


class TestEmailValidator:
    """Tests for address validation."""

    @pytest.mark.parametrize(
        "address",
        [
            "lars@moelleken.org",
            "first.last@sub.example.co.uk",
            "user+tag@gmail.com",
            "o'brien@example.ie",
            "user@[127.0.0.1]",
            "test@bücher.de",
            "  padded@example.org  ",
        ],
    )
    def test_valid(self, address):
        assert EmailValidator().is_valid(address)

    @pytest.mark.parametrize(
        "address",
        [
            "",
            "plainaddress",
            "@example.com",
            "user@",
            "user@localhost",
            "user@@example.com",
            "first..last@example.com",
            ".first@example.com",
            "user@-example.com",
            "user@example..com",
            "user@[999.0.0.1]",
            "fòô@example.com",
            "a" * 65 + "@example.com",
        ],
    )
    def test_invalid(self, address):
        assert not EmailValidator().is_valid(address)

    def test_example_domain_check(self):
        validator = EmailValidator(use_example_domain_check=True)
        assert not validator.is_valid("a@example.com")
        assert not validator.is_valid("a@site.test")
        assert validator.is_valid("a@moelleken.org")

    def test_typo_check(self):
        validator = EmailValidator(use_typo_in_domain_check=True)
        assert not validator.is_valid("a@gmial.com")
        assert not validator.is_valid("a@example.con")
        assert validator.is_valid("a@gmail.com")
        assert EmailValidator().is_valid("a@gmial.com")

    def test_temporary_domain_check(self):
        validator = EmailValidator(use_temporary_domain_check=True)
        assert not validator.is_valid("a@mailinator.com")
        assert validator.is_valid("a@gmail.com")
