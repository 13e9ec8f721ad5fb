"""Validation capability for constrained query values.

Each constrained value wraps its raw input and validates itself, so the rule
and its error message live next to the type they constrain. The builder calls
:meth:`Validator.validate` on each wrapper it holds.
"""

from __future__ import annotations

import dataclasses
import typing as typ

from connpass.errors import InvalidTokenError, OutOfRangeError

MIN_FETCH_COUNT = 1
MAX_FETCH_COUNT = 100
JSON_FORMAT = "json"
MAX_UNSIGNED = 4_294_967_295


class Validator(typ.Protocol):
    """Interface for values that confirm themselves before use."""

    def validate(self) -> typ.Self:
        """Return the confirmed value or raise a ``ValidationError``."""
        ...


@dataclasses.dataclass(frozen=True, slots=True)
class FetchCountRange:
    """Number of events to fetch, confirmed to lie in 1..=100."""

    value: int

    def validate(self) -> FetchCountRange:
        """Confirm the count lies within the fetch range.

        Raises
        ------
        OutOfRangeError
            If the count is a bool or lies outside 1 to 100.

        """
        # bool is an int subclass but must not reach the wire as "True".
        if isinstance(self.value, bool) or not (
            MIN_FETCH_COUNT <= self.value <= MAX_FETCH_COUNT
        ):
            raise OutOfRangeError.invalid_count(
                self.value, MIN_FETCH_COUNT, MAX_FETCH_COUNT
            )
        return self


@dataclasses.dataclass(frozen=True, slots=True)
class FormatJson:
    """Response format token, confirmed to be ``"json"``."""

    value: str

    def validate(self) -> FormatJson:
        """Confirm the token is the only format the API offers.

        Raises
        ------
        InvalidTokenError
            If the token is anything other than ``"json"``.

        """
        if self.value != JSON_FORMAT:
            raise InvalidTokenError.invalid_format(self.value)
        return self


@dataclasses.dataclass(frozen=True, slots=True)
class UnsignedInt:
    """Integer query parameter, confirmed to fit an unsigned 32-bit integer.

    Attributes
    ----------
    name
        Wire name of the parameter, used in the error message.
    value
        Raw value passed to the builder.

    """

    name: str
    value: int

    def validate(self) -> UnsignedInt:
        """Confirm the value is a non-negative integer within 32 bits.

        Raises
        ------
        OutOfRangeError
            If the value is a bool, negative, or larger than 4294967295.

        """
        if isinstance(self.value, bool) or not 0 <= self.value <= MAX_UNSIGNED:
            raise OutOfRangeError.invalid_unsigned(
                self.name, self.value, MAX_UNSIGNED
            )
        return self
