"""
XSS sanitizer collaborator.

Stringy only needs "markup in, safe markup out". Any object with a
`clean(text) -> str` method satisfies XssSanitizer; BleachSanitizer is the
default, backed by the bleach allowlist sanitizer.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Optional, Protocol, runtime_checkable

import bleach

DEFAULT_ALLOWED_TAGS = frozenset(
    {
        "a",
        "abbr",
        "b",
        "blockquote",
        "br",
        "code",
        "em",
        "i",
        "li",
        "ol",
        "p",
        "pre",
        "span",
        "strong",
        "ul",
    }
)

DEFAULT_ALLOWED_ATTRIBUTES: Mapping[str, list[str]] = {
    "a": ["href", "title"],
    "abbr": ["title"],
}

DEFAULT_ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})


@runtime_checkable
class XssSanitizer(Protocol):
    """Anything that can turn untrusted markup into safe markup."""

    def clean(self, text: str) -> str: ...


class BleachSanitizer:
    """
    Allowlist sanitizer.

    Disallowed tags are stripped (their text content is kept), disallowed
    attributes and javascript: URLs are removed, comments are dropped.
    """

    def __init__(
        self,
        tags: Optional[Iterable[str]] = None,
        attributes: Optional[Mapping[str, list[str]]] = None,
        protocols: Optional[Iterable[str]] = None,
        strip_comments: bool = True,
    ) -> None:
        self.tags = frozenset(DEFAULT_ALLOWED_TAGS if tags is None else tags)
        self.attributes = dict(DEFAULT_ALLOWED_ATTRIBUTES if attributes is None else attributes)
        self.protocols = frozenset(DEFAULT_ALLOWED_PROTOCOLS if protocols is None else protocols)
        self.strip_comments = strip_comments

    def clean(self, text: str) -> str:
        if not text:
            return ""
        return bleach.clean(
            text,
            tags=self.tags,
            attributes=self.attributes,
            protocols=self.protocols,
            strip=True,
            strip_comments=self.strip_comments,
        )
