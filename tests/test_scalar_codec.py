"""Tests for the scalar value codec."""

import pytest

from locale_ctype.codec import (
    decode_from_wide,
    encode_to_wide,
    is_fast_path,
    require_scalar,
    utf8_bytes,
    utf8_length,
)
from locale_ctype.exceptions import ScalarDecodeError, ScalarEncodeError


class TestUtf8Length:
    """Tests for utf8_length and utf8_bytes."""

    @pytest.mark.parametrize(
        ("scalar", "expected"),
        [
            ("\x00", 1),
            ("\x7f", 1),
            ("\x80", 2),
            ("\u07ff", 2),
            ("\u0800", 3),
            ("\u3000", 3),
            ("\uffff", 3),
            ("\U00010000", 4),
            ("\U0010ffff", 4),
        ],
    )
    def test_boundaries(self, scalar, expected) -> None:
        assert utf8_length(scalar) == expected
        assert len(utf8_bytes(scalar)) == expected

    def test_fast_path_is_ascii_only(self) -> None:
        assert is_fast_path("a")
        assert is_fast_path("\x7f")
        assert not is_fast_path("\x80")
        assert not is_fast_path("\u017f")


class TestRequireScalar:
    """Tests for require_scalar."""

    def test_returns_ordinal(self) -> None:
        assert require_scalar("A") == 0x41
        assert require_scalar("\U0010ffff") == 0x10FFFF

    def test_rejects_bytes(self) -> None:
        with pytest.raises(TypeError):
            require_scalar(b"a")  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["", "ab", "\ud800", "\udfff"])
    def test_rejects_non_scalar(self, value) -> None:
        with pytest.raises(ValueError):
            require_scalar(value)


class TestEncodeToWide:
    """Tests for encode_to_wide."""

    def test_passes_exact_utf8_buffer(self, fake_bridge, monkeypatch) -> None:
        seen: list[bytes] = []

        def _utf8towc(data: bytes) -> tuple[int, int]:
            seen.append(data)
            return 0, 0x3000

        monkeypatch.setattr(fake_bridge, "utf8towc", _utf8towc)
        assert encode_to_wide(fake_bridge, "\u3000") == 0x3000
        assert seen == [b"\xe3\x80\x80"]

    def test_nonzero_status_raises(self, fake_bridge) -> None:
        fake_bridge.encode_status = 2
        with pytest.raises(ScalarEncodeError) as excinfo:
            encode_to_wide(fake_bridge, "\u00e9")
        assert excinfo.value.status == 2
        assert excinfo.value.errno == 84
        assert str(excinfo.value) == "utf8towc failed. status=2, error=84"


class TestDecodeFromWide:
    """Tests for decode_from_wide."""

    def test_round_trip_through_bridge(self, fake_bridge) -> None:
        assert decode_from_wide(fake_bridge, 0x53) == "S"
        assert decode_from_wide(fake_bridge, 0x1F600) == "\U0001f600"

    @pytest.mark.parametrize("length", [0, -1, -2])
    def test_non_positive_length_raises(self, fake_bridge, length) -> None:
        fake_bridge.decode_result = (length, b"")
        with pytest.raises(ScalarDecodeError) as excinfo:
            decode_from_wide(fake_bridge, 0x41)
        assert excinfo.value.status == length

    def test_invalid_utf8_raises(self, fake_bridge) -> None:
        fake_bridge.decode_result = (2, b"\xc3\x28")
        with pytest.raises(ScalarDecodeError) as excinfo:
            decode_from_wide(fake_bridge, 0x41)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
        assert excinfo.value.data == b"\xc3\x28"

    def test_more_than_one_scalar_raises(self, fake_bridge) -> None:
        fake_bridge.decode_result = (2, b"SS")
        with pytest.raises(ScalarDecodeError):
            decode_from_wide(fake_bridge, 0xDF)

    def test_overlong_length_raises(self, fake_bridge) -> None:
        fake_bridge.decode_result = (5, b"\xf8\x88\x80\x80\x80")
        with pytest.raises(ScalarDecodeError):
            decode_from_wide(fake_bridge, 0x200000)

    def test_surrogate_wide_code_raises(self, fake_bridge) -> None:
        with pytest.raises(ScalarDecodeError):
            decode_from_wide(fake_bridge, 0xD800)

    def test_failure_is_recorded(self, fake_bridge) -> None:
        fake_bridge.decode_result = (-2, b"")
        with pytest.raises(ScalarDecodeError):
            decode_from_wide(fake_bridge, 0x41)
        assert fake_bridge.get_diagnostics()["failures"]["wctoutf8"] == 1
