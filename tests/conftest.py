"""
Shared test fixtures for the pagedlist test suite.

Fakes and factories live in tests/helpers.py so test modules can import
them directly; the fixtures below wire up the common page chains.
"""

from __future__ import annotations

import pytest

from tests.helpers import Chain, build_chain, of_ids


@pytest.fixture
def three_page_chain() -> Chain:
    """Three pages of one element each, no known total, one per page."""
    return build_chain(of_ids("1"), of_ids("2"), of_ids("3"), per_page=1)


@pytest.fixture
def known_total_chain() -> Chain:
    """A single page of two elements with total and per-page reported."""
    return build_chain(of_ids("1", "2"), total=2, per_page=2)


@pytest.fixture
def unknown_total_chain() -> Chain:
    """A single page of two elements with no metadata at all."""
    return build_chain(of_ids("1", "2"))
