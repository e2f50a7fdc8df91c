"""Fixtures for rule tests: sample inputs and uniqueness lookups."""

from __future__ import annotations

from typing import Any, Callable

import pytest

# Strings exercising empty, whitespace, ASCII and non-ASCII input
_SAMPLE_STRINGS = [
    "",
    " ",
    "   padded   ",
    "a",
    "Jane Doe",
    "héllo wörld",
    "日本語テキスト",
    "line\nbreak",
    "x" * 300,
]


@pytest.fixture
def sample_strings() -> list[str]:
    return list(_SAMPLE_STRINGS)


@pytest.fixture
def lookup_returning() -> Callable[[Any], Callable[[str, str, Any], Any]]:
    """Return a factory building a lookup that always answers ``answer``."""

    def _make(answer: Any) -> Callable[[str, str, Any], Any]:
        def _lookup(table: str, column: str, value: Any) -> Any:
            return answer

        return _lookup

    return _make


@pytest.fixture
def lookup_raising() -> Callable[[BaseException], Callable[[str, str, Any], Any]]:
    """Return a factory building a lookup that always raises ``exc``."""

    def _make(exc: BaseException) -> Callable[[str, str, Any], Any]:
        def _lookup(table: str, column: str, value: Any) -> Any:
            raise exc

        return _lookup

    return _make
