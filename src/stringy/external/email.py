"""
E-mail address validator.

Syntax validation of addr-spec style addresses with optional heuristics:
reserved example domains, common domain typos and throwaway mail
providers. No DNS look-ups are performed.
"""

from __future__ import annotations

import re
from typing import Optional

MAX_ADDRESS_LENGTH = 254
MAX_LOCAL_LENGTH = 64

_LOCAL_RE = re.compile(r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+)*$")
_DOMAIN_RE = re.compile(r"^(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z][A-Za-z0-9-]{0,62}$")
_IP_LITERAL_RE = re.compile(r"^\[(?:\d{1,3}\.){3}\d{1,3}\]$")

# RFC 2606 / RFC 6761 reserved names
EXAMPLE_DOMAINS = frozenset({"example.com", "example.net", "example.org"})
EXAMPLE_TLDS = frozenset({"example", "invalid", "localhost", "test"})

TYPO_DOMAINS = frozenset(
    {
        "gamil.com",
        "gmai.com",
        "gmial.com",
        "gmail.co",
        "gnail.com",
        "hotmai.com",
        "hotmial.com",
        "hotmail.co",
        "outlok.com",
        "yaho.com",
        "yahooo.com",
        "yhaoo.com",
    }
)
TYPO_TLDS = frozenset({"con", "cmo", "ocm", "comm", "nte", "orgg"})

TEMPORARY_DOMAINS = frozenset(
    {
        "10minutemail.com",
        "guerrillamail.com",
        "mailinator.com",
        "sharklasers.com",
        "trashmail.com",
        "yopmail.com",
    }
)


def split_address(address: str) -> Optional[tuple[str, str]]:
    """Split at the last "@", or None if there is none."""
    local, at, domain = address.rpartition("@")
    if not at:
        return None
    return local, domain


class EmailValidator:
    """
    Configurable address validator.

    Usage:
        EmailValidator().is_valid("lars@moelleken.org")                           # True
        EmailValidator(use_example_domain_check=True).is_valid("a@example.com")  # False
    """

    def __init__(
        self,
        use_example_domain_check: bool = False,
        use_typo_in_domain_check: bool = False,
        use_temporary_domain_check: bool = False,
    ) -> None:
        self.use_example_domain_check = use_example_domain_check
        self.use_typo_in_domain_check = use_typo_in_domain_check
        self.use_temporary_domain_check = use_temporary_domain_check

    def is_valid(self, address: str) -> bool:
        address = address.strip()
        if not address or len(address) > MAX_ADDRESS_LENGTH:
            return False
        parts = split_address(address)
        if parts is None:
            return False
        local, domain = parts
        if not self._valid_local(local) or not self._valid_domain(domain):
            return False

        domain = domain.lower()
        tld = domain.rsplit(".", 1)[-1]
        if self.use_example_domain_check and (domain in EXAMPLE_DOMAINS or tld in EXAMPLE_TLDS):
            return False
        if self.use_typo_in_domain_check and (domain in TYPO_DOMAINS or tld in TYPO_TLDS):
            return False
        if self.use_temporary_domain_check and domain in TEMPORARY_DOMAINS:
            return False
        return True

    @staticmethod
    def _valid_local(local: str) -> bool:
        return 0 < len(local) <= MAX_LOCAL_LENGTH and _LOCAL_RE.match(local) is not None

    @staticmethod
    def _valid_domain(domain: str) -> bool:
        if _IP_LITERAL_RE.match(domain):
            return all(int(octet) <= 255 for octet in domain[1:-1].split("."))
        try:
            ascii_domain = domain.encode("idna").decode("ascii")
        except UnicodeError:
            return False
        return _DOMAIN_RE.match(ascii_domain) is not None
