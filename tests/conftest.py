"""
Pytest configuration and shared fixtures for Stringy tests.
"""

import random

import pytest

from stringy.cli import main
from stringy.value import Stringy


@pytest.fixture
def stringy_factory():
    """Factory fixture for creating Stringy values."""

    def _create(value="", encoding: str = "UTF-8") -> Stringy:
        return Stringy(value, encoding)

    return _create


@pytest.fixture
def seeded_rng():
    """Deterministic random generator for randomised operations and property checks."""
    return random.Random(20240601)


@pytest.fixture
def run_cli(capsys):
    """Run the CLI with arguments and return (exit_code, stdout, stderr)."""

    def _run(*argv: str) -> tuple[int, str, str]:
        code = main(list(argv))
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


@pytest.fixture
def random_text(seeded_rng):
    """Factory for random text over a small mixed ASCII/non-ASCII alphabet."""

    def _random_text(max_length: int = 12, alphabet: str = "abcò ô-_AB1") -> str:
        length = seeded_rng.randint(0, max_length)
        return "".join(seeded_rng.choice(alphabet) for _ in range(length))

    return _random_text
