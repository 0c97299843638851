"""
Transliteration collaborator.

ASCII folding via Unicode compatibility decomposition plus small
replacement tables for letters that do not decompose (ß, ø, Cyrillic,
Greek, ...) and per-language overrides such as German umlauts.
"""

from __future__ import annotations

import logging
import re
import unicodedata

from stringy.config import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

# Letters without a useful decomposition
_BASE_TABLE = {
    "ß": "ss",
    "æ": "ae",
    "Æ": "AE",
    "ø": "o",
    "Ø": "O",
    "đ": "d",
    "Đ": "D",
    "ł": "l",
    "Ł": "L",
    "œ": "oe",
    "Œ": "OE",
    "þ": "th",
    "Þ": "TH",
    "ð": "d",
    "Ð": "D",
    "ı": "i",
    "ħ": "h",
    "Ħ": "H",
    "ŀ": "l",
    "Ŀ": "L",
    "ŧ": "t",
    "Ŧ": "T",
}

_CYRILLIC_TABLE = {
    "а": "a",
    "б": "b",
    "в": "v",
    "г": "g",
    "ґ": "g",
    "д": "d",
    "е": "e",
    "ё": "yo",
    "є": "ye",
    "ж": "zh",
    "з": "z",
    "и": "y",
    "і": "i",
    "ї": "yi",
    "й": "y",
    "к": "k",
    "л": "l",
    "м": "m",
    "н": "n",
    "о": "o",
    "п": "p",
    "р": "r",
    "с": "s",
    "т": "t",
    "у": "u",
    "ф": "f",
    "х": "kh",
    "ц": "ts",
    "ч": "ch",
    "ш": "sh",
    "щ": "shch",
    "ъ": "",
    "ы": "y",
    "ь": "",
    "э": "e",
    "ю": "yu",
    "я": "ya",
}

_GREEK_TABLE = {
    "α": "a",
    "β": "v",
    "γ": "g",
    "δ": "d",
    "ε": "e",
    "ζ": "z",
    "η": "i",
    "θ": "th",
    "ι": "i",
    "κ": "k",
    "λ": "l",
    "μ": "m",
    "ν": "n",
    "ξ": "ks",
    "ο": "o",
    "π": "p",
    "ρ": "r",
    "σ": "s",
    "ς": "s",
    "τ": "t",
    "υ": "y",
    "φ": "f",
    "χ": "ch",
    "ψ": "ps",
    "ω": "o",
}

# Overrides keyed by the primary language subtag
LANGUAGE_TABLES = {
    "de": {"ä": "ae", "ö": "oe", "ü": "ue", "Ä": "AE", "Ö": "OE", "Ü": "UE"},
    "da": {"å": "aa", "Å": "AA"},
}


def _with_upper(table: dict[str, str]) -> dict[str, str]:
    merged = dict(table)
    for letter, ascii_form in table.items():
        upper = letter.upper()
        if upper != letter and len(upper) == 1:
            merged.setdefault(upper, ascii_form.capitalize())
    return merged


_LETTER_TABLE = {**_BASE_TABLE, **_with_upper(_CYRILLIC_TABLE), **_with_upper(_GREEK_TABLE)}

_APOSTROPHES_RE = re.compile(r"['\"’‘`]")


def language_table(language: str) -> dict[str, str]:
    """Return the overrides for a language tag such as "de" or "de_DE"."""
    primary = re.split(r"[-_]", language or "", maxsplit=1)[0].lower()
    return LANGUAGE_TABLES.get(primary, {})


class Transliterator:
    """
    ASCII folding and slug generation.

    Usage:
        t = Transliterator()
        t.to_ascii("fòô bàř")               # "foo bar"
        t.to_ascii("äöü", language="de")    # "aeoeue"
        t.slug("Using strings like fòô")    # "using-strings-like-foo"
    """

    def to_ascii(self, text: str, language: str = DEFAULT_LANGUAGE, remove_unsupported: bool = True) -> str:
        """
        Fold text to ASCII.

        Unicode space separators become a plain space. Codepoints with no
        ASCII form are dropped, or kept as-is when remove_unsupported is
        False.
        """
        overrides = language_table(language)
        out: list[str] = []
        for ch in text:
            if ch.isascii():
                out.append(ch)
            elif ch in overrides:
                out.append(overrides[ch])
            elif ch in _LETTER_TABLE:
                out.append(_LETTER_TABLE[ch])
            elif ch.isspace():
                out.append(" ")
            else:
                out.append(self._decompose(ch, remove_unsupported))
        return "".join(out)

    def _decompose(self, ch: str, remove_unsupported: bool) -> str:
        folded = unicodedata.normalize("NFKD", ch)
        folded = "".join(part for part in folded if not unicodedata.combining(part))
        # A decomposition may expose a tabled base letter (e.g. Greek with tonos)
        folded = "".join(_LETTER_TABLE.get(part, part) for part in folded)
        if folded and folded.isascii():
            return folded
        if remove_unsupported:
            logger.debug("Dropping unsupported codepoint U+%04X", ord(ch))
            return ""
        return ch

    def slug(
        self,
        text: str,
        separator: str = "-",
        language: str = DEFAULT_LANGUAGE,
        lowercase: bool = True,
    ) -> str:
        """
        Build a URL slug.

        Quotes and apostrophes are removed so "d'Bar" stays one word; every
        other run of non-alphanumeric ASCII becomes one separator.
        """
        folded = self.to_ascii(text, language)
        if lowercase:
            folded = folded.lower()
        folded = _APOSTROPHES_RE.sub("", folded)
        slug = re.sub(r"[^A-Za-z0-9]+", lambda _: separator, folded)
        if separator:
            slug = slug.strip(separator)
        return slug
