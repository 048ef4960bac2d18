"""Unit tests for encoding."""

from __future__ import annotations

import struct

import pytest

from ubjcodec import (
    Array,
    Char,
    CodecOptions,
    DepthLimitError,
    EncodeError,
    Int8,
    Int16,
    Int32,
    Map,
    String,
    UInt8,
    UnrepresentableNumberError,
    encode,
    encoded_size,
)


class TestScalars:
    """Test scalar encoding."""

    def test_constants(self) -> None:
        """Test null and boolean markers."""
        assert encode(None) == b"Z"
        assert encode(True) == b"T"
        assert encode(False) == b"F"

    def test_unknown_object_encodes_null(self) -> None:
        """Test that unsupported objects encode as null."""
        assert encode(object()) == b"Z"

    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            (0, b"U\x00"),
            (1, b"U\x01"),
            (255, b"U\xff"),
            (256, b"I\x00\x01"),
            (32767, b"I\xff\x7f"),
            (-1, b"I\xff\xff"),
            (-128, b"I\x80\xff"),
            (-32768, b"I\x00\x80"),
            (32768, b"l\x00\x80\x00\x00"),
            (-32769, b"l\xff\x7f\xff\xff"),
            (2**31 - 1, b"l\xff\xff\xff\x7f"),
            (-(2**31), b"l\x00\x00\x00\x80"),
        ],
    )
    def test_integer_widths(self, number: int, expected: bytes) -> None:
        """Test smallest-fit integer markers in fixed check order."""
        assert encode(number) == expected

    def test_zero_is_uint8(self) -> None:
        """Test that zero uses UINT8."""
        assert encode(0)[:1] == b"U"

    def test_minus_one_is_int16(self) -> None:
        """Test that small negatives skip INT8."""
        assert encode(-1)[:1] == b"I"

    @pytest.mark.parametrize("number", [2**31, -(2**31) - 1, 10**20])
    def test_unrepresentable_integer(self, number: int) -> None:
        """Test integers outside the int32 range."""
        with pytest.raises(UnrepresentableNumberError):
            encode(number)

    def test_float(self) -> None:
        """Test single precision floats."""
        assert encode(1.5) == b"d\x00\x00\xc0\x3f"
        assert encode(-0.25) == b"d" + struct.pack("<f", -0.25)
        assert encode(float("inf")) == b"d" + struct.pack("<f", float("inf"))

    def test_float_overflow(self) -> None:
        """Test floats too large for single precision."""
        with pytest.raises(UnrepresentableNumberError, match="single precision"):
            encode(1e300)

    def test_explicit_int_variants(self) -> None:
        """Test that explicit variants keep their marker."""
        assert encode(Int8(value=-1)) == b"i\xff"
        assert encode(UInt8(value=7)) == b"U\x07"
        assert encode(Int16(value=1)) == b"I\x01\x00"
        assert encode(Int32(value=1)) == b"l\x01\x00\x00\x00"

    def test_explicit_int_bypassing_validation(self) -> None:
        """Test an out-of-range explicit variant."""
        value = Int8.model_construct(value=300)

        with pytest.raises(UnrepresentableNumberError, match="doesn't fit"):
            encode(value)


class TestStrings:
    """Test string encoding."""

    def test_single_char(self) -> None:
        """Test that one-byte strings use CHAR with no length."""
        data = encode("a")
        assert data == b"Ca"
        assert len(data) == 2

    def test_empty_string(self) -> None:
        """Test the empty string."""
        assert encode("") == b"SU\x00"

    def test_plain_string(self) -> None:
        """Test a regular string."""
        assert encode("abc") == b"SU\x03abc"

    def test_multibyte_char_is_string(self) -> None:
        """Test that a one-character, two-byte string is not a CHAR."""
        assert encode("é") == b"SU\x02\xc3\xa9"

    @pytest.mark.parametrize("text", ["123", "00", "3.14", "10.0"])
    def test_numeric_text_is_high_precision(self, text: str) -> None:
        """Test numeric-looking strings."""
        data = encode(text)
        assert data[:1] == b"H"
        assert data == b"HU" + bytes([len(text)]) + text.encode()

    @pytest.mark.parametrize("text", ["12.", ".5", "-12", "1e5", "1.2.3", "12a"])
    def test_non_numeric_text(self, text: str) -> None:
        """Test strings that only resemble numbers."""
        assert encode(text)[:1] == b"S"

    def test_single_digit_is_char(self) -> None:
        """Test that length wins over numeric detection."""
        assert encode("7") == b"C7"

    def test_long_string_length_widths(self) -> None:
        """Test the length prefix width."""
        medium = "x" * 300
        assert encode(medium) == b"SI" + struct.pack("<h", 300) + medium.encode()

        large = "x" * 40000
        assert encode(large) == b"Sl" + struct.pack("<i", 40000) + large.encode()

    def test_bytes_encode_raw(self) -> None:
        """Test that bytes are written unchanged."""
        assert encode(b"\x00\xff") == b"SU\x02\x00\xff"
        assert encode(b"\xff") == b"C\xff"

    def test_explicit_variants(self) -> None:
        """Test Char and String variants."""
        assert encode(Char(value=b"z")) == b"Cz"
        assert encode(String(value=b"z")) == b"Cz"
        assert encode(String(value=b"42")) == b"HU\x0242"

    def test_unencodable_text(self) -> None:
        """Test text that has no byte representation."""
        with pytest.raises(EncodeError):
            encode("\ud800")


class TestContainers:
    """Test array and object encoding."""

    def test_array(self) -> None:
        """Test array encoding."""
        assert encode([1, 2]) == b"[U\x01U\x02]"
        assert encode([]) == b"[]"
        assert encode((True, None)) == b"[TZ]"

    def test_object(self) -> None:
        """Test object encoding."""
        assert encode({"a": 1}) == b"{CaU\x01}"
        assert encode({}) == b"{}"

    def test_object_keys(self) -> None:
        """Test key encoding rules."""
        assert encode({"ab": None}) == b"{SU\x02abZ}"
        assert encode({1: "x"}) == b"{C1Cx}"
        assert encode({10: True}) == b"{HU\x0210T}"
        assert encode({"": False}) == b"{SU\x00F}"

    def test_nested(self) -> None:
        """Test nested containers."""
        data = encode({"a": [1, {"b": []}]})
        assert data == b"{Ca[U\x01{Cb[]}]}"

    def test_object_order_preserved(self) -> None:
        """Test that entry order follows insertion."""
        assert encode({"b": 1, "a": 2}) == b"{CbU\x01CaU\x02}"

    def test_value_tree(self) -> None:
        """Test encoding a tree of value variants."""
        value = Map(entries=[(b"k", Array(items=[Int8(value=5), Char(value=b"c")]))])
        assert encode(value) == b"{Ck[i\x05Cc]}"

    def test_duplicate_coerced_keys(self) -> None:
        """Test keys that collide after coercion."""
        with pytest.raises(EncodeError, match="Duplicate map key"):
            encode({1: "a", "1": "b"})


class TestOptions:
    """Test encode options."""

    def test_depth_limit_native(self) -> None:
        """Test nesting limit for native data."""
        options = CodecOptions(max_depth=2)
        assert encode([[]], options=options) == b"[[]]"

        with pytest.raises(DepthLimitError):
            encode([[[]]], options=options)

    def test_depth_limit_value_tree(self) -> None:
        """Test nesting limit for value trees."""
        value = Array(items=[Array(items=[Array()])])

        with pytest.raises(DepthLimitError, match="max_depth=2"):
            encode(value, options=CodecOptions(max_depth=2))

    def test_max_bytes_ok(self) -> None:
        """Test output within max_bytes."""
        data = encode("abc", options=CodecOptions(max_bytes=6))
        assert data == b"SU\x03abc"

    def test_max_bytes_exceeded(self) -> None:
        """Test output larger than max_bytes."""
        with pytest.raises(EncodeError, match="exceeds max_bytes=4"):
            encode("abcdef", options=CodecOptions(max_bytes=4))

    def test_encoded_size(self) -> None:
        """Test size calculation."""
        assert encoded_size({"a": 1}) == 6
        assert encoded_size("") == 3
        assert encoded_size(None) == 1
