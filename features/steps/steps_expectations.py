"""Step definitions for expectation behavioural tests."""
# pyright: reportMissingImports=false, reportUnknownMemberType=false

from __future__ import annotations

import typing as t

from behave import given, then, when  # type: ignore[attr-defined]

import dobby
from dobby.errors import ArityError


class BehaveContext(t.Protocol):
    """Behave step context with attributes used in tests."""

    expectation: dobby.Expectation[t.Any]
    outcome: bool
    build_error: ArityError | None


def parse_numbers(text: str) -> tuple[int, ...]:
    """Return the integers in a comma separated feature-file argument."""
    return tuple(int(part) for part in text.split(",") if part.strip())


@given("a wildcard expectation")
def step_wildcard(context: BehaveContext) -> None:
    """Build an expectation that matches anything."""
    context.expectation = dobby.any()


@given("an expectation for the number {number:d}")
def step_number(context: BehaveContext, number: int) -> None:
    """Build an expectation for a single number."""
    context.expectation = dobby.value(number)


@given("a predicate expectation for positive numbers")
def step_positive(context: BehaveContext) -> None:
    """Build an unlabelled predicate expectation."""
    context.expectation = dobby.matches(lambda number: number > 0)


@given("a tuple expectation of the number {number:d} and a wildcard")
def step_pair(context: BehaveContext, number: int) -> None:
    """Build a pair expectation with a wildcard second position."""
    context.expectation = dobby.tuple(dobby.value(number), dobby.any())


@given('a tuple expectation of the numbers "{numbers}"')
def step_numbers(context: BehaveContext, numbers: str) -> None:
    """Build a tuple expectation from comma separated numbers."""
    context.expectation = dobby.tuple(
        *(dobby.value(n) for n in parse_numbers(numbers))
    )


@when('I match the interaction "{interaction}"')
def step_match_text(context: BehaveContext, interaction: str) -> None:
    """Match a text interaction."""
    context.outcome = context.expectation.matches(interaction)


@when("I match the number {number:d}")
def step_match_number(context: BehaveContext, number: int) -> None:
    """Match a numeric interaction."""
    context.outcome = context.expectation.matches(number)


@when('I match the number {number:d} paired with "{text}"')
def step_match_pair(context: BehaveContext, number: int, text: str) -> None:
    """Match a two-value interaction."""
    context.outcome = context.expectation.matches((number, text))


@when('I match the numbers "{numbers}"')
def step_match_numbers(context: BehaveContext, numbers: str) -> None:
    """Match a tuple of numbers."""
    context.outcome = context.expectation.matches(parse_numbers(numbers))


@when("I build a tuple expectation of {count:d} wildcards")
def step_build_wide_tuple(context: BehaveContext, count: int) -> None:
    """Attempt to build a tuple expectation with *count* positions."""
    context.build_error = None
    try:
        dobby.tuple(*(dobby.any() for _ in range(count)))
    except ArityError as exc:
        context.build_error = exc


@then("the match should succeed")
def step_match_succeeded(context: BehaveContext) -> None:
    """Assert the interaction matched."""
    assert context.outcome is True


@then("the match should fail")
def step_match_failed(context: BehaveContext) -> None:
    """Assert the interaction did not match."""
    assert context.outcome is False


@then('the description should be "{description}"')
def step_check_description(context: BehaveContext, description: str) -> None:
    """Assert the expectation renders as *description*."""
    assert context.expectation.description == description


@then("the description should be the default placeholder")
def step_check_default_description(context: BehaveContext) -> None:
    """Assert the expectation carries the unlabelled placeholder."""
    assert context.expectation.description == dobby.DEFAULT_DESCRIPTION


@then('the mismatch message for the number {number:d} should be "{message}"')
def step_check_mismatch(context: BehaveContext, number: int, message: str) -> None:
    """Assert the diagnostic message for a rejected number."""
    assert context.expectation.describe_mismatch(number) == message


@then("an arity error should be raised")
def step_arity_error(context: BehaveContext) -> None:
    """Assert construction failed with an arity error."""
    assert context.build_error is not None
    assert "between 1 and 5" in str(context.build_error)
