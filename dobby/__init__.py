"""Composable expectations for describing interactions with test doubles.

Build expectations with :func:`any`, :func:`value` and :func:`matches`, then
combine positional expectations over call arguments with :func:`tuple`::

    from dobby import any, tuple, value

    exp = tuple(value(5), any())
    exp.matches((5, "anything"))  # True
    exp.description  # "(5, _)"
"""

from __future__ import annotations

from .convertible import ExpectationConvertible, to_expectation
from .errors import ArityError, DobbyError, NotConvertibleError
from .expectation import (
    ANY_DESCRIPTION,
    DEFAULT_DESCRIPTION,
    Expectation,
    any,  # noqa: A004
    matches,
    value,
)
from .tuples import MAX_TUPLE_ARITY, tuple  # noqa: A004

__all__ = [
    "ANY_DESCRIPTION",
    "DEFAULT_DESCRIPTION",
    "MAX_TUPLE_ARITY",
    "ArityError",
    "DobbyError",
    "Expectation",
    "ExpectationConvertible",
    "NotConvertibleError",
    "any",
    "matches",
    "to_expectation",
    "tuple",
    "value",
]
