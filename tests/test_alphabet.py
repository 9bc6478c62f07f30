"""Tests for b32u64.core.alphabet module.

Tests the alphabet constant and the encode/decode lookup tables.
"""
import pytest

from b32u64.core.alphabet import (
    ALPHABET_SIZE,
    ENCODED_LEN,
    INVALID,
    INVALID_BITS,
    STD_CODEC,
    STD_ENCODING,
    Codec,
    build_codec,
)
from b32u64.core.errors import AlphabetError


class TestAlphabet:
    """Test the standard alphabet constant."""

    def test_alphabet_exact(self):
        """Alphabet is RFC 4648 base-32, lowercase."""
        assert STD_ENCODING == "abcdefghijklmnopqrstuvwxyz234567"

    def test_alphabet_length(self):
        """Alphabet should have exactly 32 symbols."""
        assert len(STD_ENCODING) == 32
        assert ALPHABET_SIZE == 32

    def test_alphabet_unique(self):
        """No symbol repeats."""
        assert len(set(STD_ENCODING)) == len(STD_ENCODING)

    def test_alphabet_excludes_confusable_digits(self):
        """0, 1, 8 and 9 are not symbols."""
        for ch in "0189":
            assert ch not in STD_ENCODING

    def test_encoded_len(self):
        """13 symbols of 5 bits hold 64 bits with one to spare."""
        assert ENCODED_LEN == 13
        assert ENCODED_LEN * 5 == 65


class TestTables:
    """Test the lookup tables of the standard codec."""

    def test_encode_map_size(self):
        assert len(STD_CODEC.encode_map) == 32

    def test_decode_map_size(self):
        """Decode table spans every byte value."""
        assert len(STD_CODEC.decode_map) == 256

    def test_encode_map_matches_alphabet(self):
        assert STD_CODEC.encode_map == STD_ENCODING.encode("ascii")

    def test_tables_are_inverse(self):
        """decode_map[encode_map[i]] == i for every 5-bit value."""
        for i in range(32):
            assert STD_CODEC.decode_map[STD_CODEC.encode_map[i]] == i

    def test_other_bytes_invalid(self):
        """Every byte outside the alphabet maps to the invalid marker."""
        symbols = set(STD_ENCODING.encode("ascii"))
        for b in range(256):
            if b not in symbols:
                assert STD_CODEC.decode_map[b] == INVALID

    def test_invalid_marker_trips_check(self):
        """The invalid marker is distinguishable from any 5-bit value."""
        assert INVALID & INVALID_BITS
        for i in range(32):
            assert not i & INVALID_BITS

    def test_uppercase_invalid(self):
        for ch in "ABCXYZ":
            assert not STD_CODEC.is_symbol(ord(ch))

    def test_is_symbol(self):
        assert STD_CODEC.is_symbol(ord("a"))
        assert STD_CODEC.is_symbol(ord("7"))
        assert not STD_CODEC.is_symbol(ord("="))

    def test_codec_is_frozen(self):
        """Tables can't be swapped out after construction."""
        with pytest.raises(AttributeError):
            STD_CODEC.encode_map = b"x" * 32

    def test_tables_immutable(self):
        with pytest.raises(TypeError):
            STD_CODEC.decode_map[0] = 0


class TestBuildCodec:
    """Test build_codec function."""

    def test_returns_codec(self):
        codec = build_codec(STD_ENCODING)
        assert isinstance(codec, Codec)
        assert codec == STD_CODEC

    def test_custom_alphabet(self):
        """Any 32 distinct ASCII symbols make a codec."""
        zbase32 = "ybndrfg8ejkmcpqxot1uwisza345h769"
        codec = build_codec(zbase32)
        assert codec.encode_map[0] == ord("y")
        assert codec.decode_map[ord("9")] == 31
        assert codec.decode_map[ord("a")] == 24
        assert codec.decode_map[ord("v")] == INVALID

    def test_too_short_raises(self):
        with pytest.raises(AlphabetError, match="must have 32 symbols"):
            build_codec(STD_ENCODING[:-1])

    def test_too_long_raises(self):
        with pytest.raises(AlphabetError, match="must have 32 symbols"):
            build_codec(STD_ENCODING + "8")

    def test_duplicate_raises(self):
        with pytest.raises(AlphabetError, match="Duplicate symbol"):
            build_codec("a" + STD_ENCODING[:-1])

    def test_non_ascii_raises(self):
        with pytest.raises(AlphabetError, match="must be ASCII"):
            build_codec("é" + STD_ENCODING[1:])

    def test_alphabet_error_is_value_error(self):
        with pytest.raises(ValueError):
            build_codec("")
