"""Expectations: named predicates over captured interactions."""

from __future__ import annotations

import typing as t

Interaction = t.TypeVar("Interaction")
Value = t.TypeVar("Value")

# Placeholder shown for predicate-based expectations built without a label.
DEFAULT_DESCRIPTION: t.Final[str] = "<func>"
ANY_DESCRIPTION: t.Final[str] = "_"


class Expectation(t.Generic[Interaction]):
    """An expectation that can be matched with an interaction.

    An expectation pairs a predicate with a human readable *description*.
    The predicate decides whether an interaction (a call argument, or a
    tuple of arguments) matches; the description is only used when
    reporting failures.

    Expectations are immutable once constructed and may be shared freely.
    """

    __slots__ = ("_description", "_predicate")

    def __init__(
        self,
        predicate: t.Callable[[Interaction], bool],
        description: str = DEFAULT_DESCRIPTION,
    ) -> None:
        self._predicate = predicate
        self._description = description

    @classmethod
    def anything(cls) -> Expectation[Interaction]:
        """Return an expectation that matches any interaction."""
        return cls(lambda _: True, ANY_DESCRIPTION)

    @classmethod
    def of_value(cls, value: Value) -> Expectation[Value]:
        """Return an expectation that matches interactions equal to *value*."""
        return cls(lambda interaction: interaction == value, str(value))

    @property
    def description(self) -> str:
        """Return the human readable summary of this expectation."""
        return self._description

    def matches(self, interaction: Interaction) -> bool:
        """Return ``True`` if *interaction* satisfies this expectation."""
        return bool(self._predicate(interaction))

    def expectation(self) -> Expectation[Interaction]:
        """Return ``self``; expectations convert to themselves."""
        return self

    def describe_mismatch(self, interaction: Interaction) -> str:
        """Return a message contrasting *interaction* with this expectation."""
        return f"expected {self._description} but got {interaction!r}"

    def __call__(self, interaction: Interaction) -> bool:
        """Allow the expectation to be used as a comparator callable."""
        return self.matches(interaction)

    def __str__(self) -> str:
        """Return the description."""
        return self._description

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        return f"Expectation({self._description!r})"


def matches(
    predicate: t.Callable[[Interaction], bool],
    description: str = DEFAULT_DESCRIPTION,
) -> Expectation[Interaction]:
    """Return a new expectation backed by *predicate*."""
    return Expectation(predicate, description)


def any() -> Expectation[t.Any]:  # noqa: A001 - mirrors the matcher name
    """Return a new expectation that matches anything."""
    return Expectation.anything()


def value(expected: Value) -> Expectation[Value]:
    """Return a new expectation that matches *expected* by equality."""
    return Expectation.of_value(expected)


__all__ = [
    "ANY_DESCRIPTION",
    "DEFAULT_DESCRIPTION",
    "Expectation",
    "any",
    "matches",
    "value",
]
