"""
Stringy External Collaborators.

Adapters for concerns Stringy delegates rather than implements: regular
expressions, transliteration, HTML entities, XSS sanitizing and e-mail
validation.
"""

from stringy.external.email import EmailValidator
from stringy.external.html_entities import HtmlEntities, QuoteStyle
from stringy.external.patterns import PatternMatcher
from stringy.external.sanitizer import BleachSanitizer, XssSanitizer
from stringy.external.transliteration import Transliterator

__all__ = [
    "EmailValidator",
    "HtmlEntities",
    "QuoteStyle",
    "PatternMatcher",
    "BleachSanitizer",
    "XssSanitizer",
    "Transliterator",
]
