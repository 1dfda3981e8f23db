"""Combine positional expectations into an expectation over a tuple."""

from __future__ import annotations

import builtins
import logging
import typing as t
from collections.abc import Sequence

from .convertible import to_expectation
from .errors import ArityError
from .expectation import Expectation

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .convertible import ExpectationConvertible

logger = logging.getLogger(__name__)

MAX_TUPLE_ARITY: t.Final[int] = 5

# Text types are sequences of characters, not argument tuples.
_TEXT_TYPES: t.Final[builtins.tuple[type, ...]] = (str, bytes, bytearray)

A = t.TypeVar("A")
B = t.TypeVar("B")
C = t.TypeVar("C")
D = t.TypeVar("D")
E = t.TypeVar("E")


def _format_description(descriptions: t.Iterable[str]) -> str:
    return "(" + ", ".join(descriptions) + ")"


def _fits_arity(interaction: object, arity: int) -> bool:
    """Return ``True`` when *interaction* holds exactly *arity* positions."""
    if isinstance(interaction, _TEXT_TYPES) or not isinstance(interaction, Sequence):
        logger.debug(
            "Interaction %r is not a sequence of %d values", interaction, arity
        )
        return False
    if len(interaction) != arity:
        logger.debug(
            "Interaction %r has %d values; expected %d",
            interaction,
            len(interaction),
            arity,
        )
        return False
    return True


@t.overload
def tuple(arg1: ExpectationConvertible[A], /) -> Expectation[A]: ...


@t.overload
def tuple(
    arg1: ExpectationConvertible[A],
    arg2: ExpectationConvertible[B],
    /,
) -> Expectation[builtins.tuple[A, B]]: ...


@t.overload
def tuple(
    arg1: ExpectationConvertible[A],
    arg2: ExpectationConvertible[B],
    arg3: ExpectationConvertible[C],
    /,
) -> Expectation[builtins.tuple[A, B, C]]: ...


@t.overload
def tuple(
    arg1: ExpectationConvertible[A],
    arg2: ExpectationConvertible[B],
    arg3: ExpectationConvertible[C],
    arg4: ExpectationConvertible[D],
    /,
) -> Expectation[builtins.tuple[A, B, C, D]]: ...


@t.overload
def tuple(
    arg1: ExpectationConvertible[A],
    arg2: ExpectationConvertible[B],
    arg3: ExpectationConvertible[C],
    arg4: ExpectationConvertible[D],
    arg5: ExpectationConvertible[E],
    /,
) -> Expectation[builtins.tuple[A, B, C, D, E]]: ...


def tuple(  # noqa: A001 - mirrors the matcher name
    *args: ExpectationConvertible[t.Any],
) -> Expectation[t.Any]:
    """Return a new expectation that matches a tuple of 1 to 5 values.

    Each argument checks the interaction value at the same position. The
    checks run left to right and stop at the first position that does not
    match. The description joins each argument's description, for example
    ``tuple(value(5), any())`` is described as ``"(5, _)"``.

    A single argument describes a parenthesised value, not a one-element
    sequence: ``tuple(value(5))`` is described as ``"(5)"`` and matches the
    interaction ``5`` exactly as ``value(5)`` does.

    Raises
    ------
    ArityError
        If called with no arguments or more than ``MAX_TUPLE_ARITY``.
    NotConvertibleError
        If an argument does not provide an ``expectation()`` method.
    """
    arity = len(args)
    if not 1 <= arity <= MAX_TUPLE_ARITY:
        msg = (
            f"tuple() takes between 1 and {MAX_TUPLE_ARITY} expectations "
            f"({arity} given)"
        )
        raise ArityError(msg)

    description = _format_description(
        to_expectation(arg).description for arg in args
    )

    if arity == 1:
        (single,) = args

        def _matches_single(interaction: t.Any) -> bool:
            return single.expectation().matches(interaction)

        return Expectation(_matches_single, description)

    def _matches(interaction: builtins.tuple[t.Any, ...]) -> bool:
        if not _fits_arity(interaction, arity):
            return False
        for position, (arg, item) in enumerate(zip(args, interaction, strict=True)):
            expected = arg.expectation()
            if not expected.matches(item):
                logger.debug(
                    "Position %d of %s rejected %r", position, description, item
                )
                return False
        return True

    return Expectation(_matches, description)


__all__ = ["MAX_TUPLE_ARITY", "tuple"]
