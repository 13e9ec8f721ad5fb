"""Unit tests for confirmed query values and OrderOption codes."""

from __future__ import annotations

import pytest

from connpass.errors import InvalidTokenError, OutOfRangeError, ValidationError
from connpass.query import FetchCountRange, FormatJson, OrderOption, UnsignedInt


class TestFetchCountRange:
    """Tests for the count range validator."""

    @pytest.mark.parametrize("value", [1, 50, 100])
    def test_accepts_values_in_range(self, value: int) -> None:
        """Values within 1..100 validate to themselves."""
        wrapper = FetchCountRange(value)
        assert wrapper.validate() is wrapper

    @pytest.mark.parametrize("value", [0, 101, -1, 255])
    def test_rejects_values_out_of_range(self, value: int) -> None:
        """Values outside 1..100 raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError) as exc_info:
            FetchCountRange(value).validate()
        assert str(value) in str(exc_info.value)

    @pytest.mark.parametrize("value", [True, False])
    def test_rejects_bool(self, value: bool) -> None:  # noqa: FBT001
        """Bools are not counts even though they are ints."""
        with pytest.raises(OutOfRangeError):
            FetchCountRange(value).validate()


class TestUnsignedInt:
    """Tests for the unsigned integer validator."""

    @pytest.mark.parametrize("value", [0, 202110, 4_294_967_295])
    def test_accepts_unsigned_values(self, value: int) -> None:
        """Values within 0..4294967295 validate to themselves."""
        wrapper = UnsignedInt("event_id", value)
        assert wrapper.validate() is wrapper

    @pytest.mark.parametrize("value", [-1, 4_294_967_296, True])
    def test_rejects_values_outside_u32(self, value: int) -> None:
        """Negative, oversized and bool values raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError) as exc_info:
            UnsignedInt("series_id", value).validate()
        assert "`series_id`" in exc_info.value.message
        assert repr(value) in exc_info.value.message


class TestFormatJson:
    """Tests for the format token validator."""

    def test_accepts_json(self) -> None:
        """The json token validates."""
        assert FormatJson("json").validate().value == "json"

    @pytest.mark.parametrize("value", ["yaml", "JSON", "", "json "])
    def test_rejects_other_tokens(self, value: str) -> None:
        """Anything but the exact json token raises InvalidTokenError."""
        with pytest.raises(InvalidTokenError):
            FormatJson(value).validate()

    def test_validation_errors_share_base(self) -> None:
        """Both validation kinds are ValidationError subclasses."""
        assert issubclass(OutOfRangeError, ValidationError)
        assert issubclass(InvalidTokenError, ValidationError)


class TestOrderOption:
    """Tests for OrderOption wire-code mapping."""

    @pytest.mark.parametrize(
        ("option", "code"),
        [
            (OrderOption.LAST_MODIFIED_DATE, 1),
            (OrderOption.EVENT_DATE, 2),
            (OrderOption.NEWER, 3),
        ],
    )
    def test_code_round_trip(self, option: OrderOption, code: int) -> None:
        """Encoding then decoding returns the original option."""
        assert option.code == code
        assert OrderOption.from_code(option.code) is option

    @pytest.mark.parametrize("code", [0, 4, 255])
    def test_unknown_code_rejected(self, code: int) -> None:
        """Codes outside 1..3 raise InvalidTokenError."""
        with pytest.raises(InvalidTokenError) as exc_info:
            OrderOption.from_code(code)
        assert str(code) in str(exc_info.value)
