"""
Stringy configuration.

Library calls take explicit arguments and fall back to the module-level
defaults below. The CLI builds a Settings object from the environment.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from stringy.utils.errors import InvalidArgument

DEFAULT_ENCODING = "UTF-8"
DEFAULT_LANGUAGE = "en"

ENV_ENCODING = "STRINGY_ENCODING"
ENV_LANGUAGE = "STRINGY_LANGUAGE"
ENV_NO_COLOR = "NO_COLOR"


def normalize_encoding(encoding: str) -> str:
    """
    Return the canonical codec name for an encoding tag.

    Raises:
        InvalidArgument: If Python has no text codec for the tag
    """
    try:
        name = codecs.lookup(encoding).name
        # bytes-to-bytes codecs such as rot13 or base64 refuse str decoding
        b"".decode(name)
    except (LookupError, TypeError):
        raise InvalidArgument("Unknown encoding", encoding) from None
    return name


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Runtime settings for the command-line surface.

    Attributes:
        encoding: Encoding tag attached to values built from CLI input
        language: Default transliteration language for to-ascii/slugify
        color: Whether terminal output may use ANSI colors
    """

    encoding: str = DEFAULT_ENCODING
    language: str = DEFAULT_LANGUAGE
    color: bool = True

    def __post_init__(self) -> None:
        normalize_encoding(self.encoding)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            encoding=env.get(ENV_ENCODING) or DEFAULT_ENCODING,
            language=env.get(ENV_LANGUAGE) or DEFAULT_LANGUAGE,
            color=not env.get(ENV_NO_COLOR),
        )
