"""Tests for the feature-file parameter parsing shared by both BDD runners."""

from __future__ import annotations

import pytest

from features.steps.steps_expectations import parse_numbers
from tests.steps import expectations as pytest_bdd_steps


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1, 2, 3", (1, 2, 3)),
        ("7", (7,)),
        ("-1,0", (-1, 0)),
        ("", ()),
    ],
)
def test_parse_numbers(text: str, expected: tuple[int, ...]) -> None:
    """Comma separated numbers become a tuple of integers."""
    assert parse_numbers(text) == expected


def test_runners_share_one_parser() -> None:
    """pytest-bdd steps reuse the behave steps' parser."""
    assert pytest_bdd_steps.parse_numbers is parse_numbers
