"""Protocol for types that can be converted to an expectation."""

from __future__ import annotations

import typing as t

from .errors import NotConvertibleError

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .expectation import Expectation

Interaction = t.TypeVar("Interaction")


@t.runtime_checkable
class ExpectationConvertible(t.Protocol[Interaction]):
    """Conforming types can be converted to an expectation.

    Any matcher type may take part in tuple composition by providing an
    ``expectation()`` method; no base class is required. Conversion must be
    idempotent: repeated calls return expectations with the same matching
    behaviour and description.
    """

    def expectation(self) -> Expectation[Interaction]:
        """Convert this object to an expectation."""
        ...


def to_expectation(
    candidate: ExpectationConvertible[Interaction],
) -> Expectation[Interaction]:
    """Return the expectation *candidate* converts to.

    Raises
    ------
    NotConvertibleError
        If *candidate* does not provide an ``expectation()`` method.
    """
    if not isinstance(candidate, ExpectationConvertible):
        msg = (
            f"{candidate!r} cannot be converted to an expectation; "
            "wrap plain values with value()"
        )
        raise NotConvertibleError(msg)
    return candidate.expectation()


__all__ = ["ExpectationConvertible", "to_expectation"]
