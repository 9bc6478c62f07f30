"""Fixed-width base-32 encoding of 64-bit unsigned integers.

A value is split into thirteen 5-bit groups, most significant first:

    symbol  0..11  (value >> 59, 54, ..., 4) & 0x1F
    symbol  12     (value & 0xF) << 1

13 * 5 = 65 bits of room for 64 bits of payload, so the low bit of the last
symbol is always zero on encode and is dropped on decode. The output is
byte-for-byte the same as RFC 4648 base-32 of the big-endian 8-byte value,
lowercased, without padding.
"""

from .alphabet import ENCODED_LEN, INVALID_BITS, STD_CODEC, Codec
from .errors import ContractError, InvalidInputError


UINT64_MAX = (1 << 64) - 1

# Right-shift for each of the first twelve symbols; symbol 12 is handled apart
SHIFTS = (59, 54, 49, 44, 39, 34, 29, 24, 19, 14, 9, 4)


def _check_value(value):
    if not isinstance(value, int):
        raise ContractError(f"Value must be an int, got {type(value).__name__}")
    if not 0 <= value <= UINT64_MAX:
        raise ContractError(f"Value must be 0-{UINT64_MAX:#x}, got {value}")


def encode_uint64(value: int, dst, codec: Codec = STD_CODEC) -> None:
    """Write the 13-symbol encoding of value into dst[0:13].

    dst is any writable byte buffer (bytearray, memoryview) of at least 13
    slots; bytes past the 13th are left untouched.
    """
    _check_value(value)
    if len(dst) < ENCODED_LEN:
        raise ContractError(
            f"Destination must hold {ENCODED_LEN} symbols, got {len(dst)}"
        )
    enc = codec.encode_map
    for i, shift in enumerate(SHIFTS):
        dst[i] = enc[(value >> shift) & 0x1F]
    dst[12] = enc[(value & 0xF) << 1]


def encode_uint64_to_string(value: int, codec: Codec = STD_CODEC) -> str:
    """Return the 13-character encoding of value."""
    buf = bytearray(ENCODED_LEN)
    encode_uint64(value, buf, codec)
    return buf.decode("ascii")


def decode_uint64(src, codec: Codec = STD_CODEC) -> tuple[int, bool]:
    """Decode src[0:13] and return (value, valid).

    valid is False when any of the 13 bytes is not an alphabet symbol; the
    value returned with it is 0 and means nothing. The low bit of the last
    symbol is discarded, not checked.
    """
    if isinstance(src, str):
        raise ContractError("decode_uint64 takes bytes; use decode_uint64_from_string")
    if len(src) < ENCODED_LEN:
        raise ContractError(
            f"Encoded input must hold {ENCODED_LEN} symbols, got {len(src)}"
        )
    dec = codec.decode_map
    value = 0
    seen = 0  # OR of every raw lookup; INVALID sets bits above 0x1F
    for i, shift in enumerate(SHIFTS):
        bits = dec[src[i]]
        seen |= bits
        value |= bits << shift
    bits = dec[src[12]]
    seen |= bits
    value |= bits >> 1

    if seen & INVALID_BITS:
        return 0, False
    return value, True


def decode_uint64_from_string(s: str, codec: Codec = STD_CODEC) -> tuple[int, bool]:
    """Decode a 13-character string and return (value, valid)."""
    if len(s) != ENCODED_LEN:
        raise ContractError(
            f"Encoded string must be {ENCODED_LEN} characters, got {len(s)}"
        )
    try:
        src = s.encode("ascii")
    except UnicodeEncodeError:
        # Non-ASCII characters are never symbols
        return 0, False
    return decode_uint64(src, codec)


def parse_uint64(s: str, codec: Codec = STD_CODEC) -> int:
    """Decode a 13-character string, raising InvalidInputError on bad symbols."""
    value, valid = decode_uint64_from_string(s, codec)
    if not valid:
        raise InvalidInputError(s, first_invalid_position(s, codec))
    return value


def first_invalid_position(s: str, codec: Codec = STD_CODEC) -> int | None:
    """Return the index of the first character of s outside the alphabet."""
    for i, ch in enumerate(s):
        if ord(ch) > 0x7F or not codec.is_symbol(ord(ch)):
            return i
    return None
