"""Enumerations used in connpass search queries."""

from __future__ import annotations

import enum

from connpass.errors import InvalidTokenError


class OrderOption(enum.IntEnum):
    """Sort order of search results, keyed by its wire code."""

    LAST_MODIFIED_DATE = 1
    EVENT_DATE = 2
    NEWER = 3

    @classmethod
    def from_code(cls, code: int) -> OrderOption:
        """Decode a wire code into an order option.

        Parameters
        ----------
        code
            Numeric ``order`` value used by the API.

        Returns
        -------
        OrderOption
            The matching option.

        Raises
        ------
        InvalidTokenError
            If ``code`` is not 1, 2 or 3.

        """
        try:
            return cls(code)
        except ValueError as exc:
            raise InvalidTokenError.invalid_order(code) from exc

    @property
    def code(self) -> int:
        """Return the numeric code sent on the wire."""
        return int(self.value)
