"""Alphabet and lookup tables for the uint64 base-32 codec.

Alphabet: a-z, 2-7 (RFC 4648 base-32 symbols, lowercase, no padding).
Each symbol encodes a 5-bit value 0-31. A 64-bit value takes 13 symbols;
the last symbol carries 4 payload bits and a zero low bit.
"""

from dataclasses import dataclass

from .errors import AlphabetError


# RFC 4648 standard base-32 alphabet, lowercase
STD_ENCODING = "abcdefghijklmnopqrstuvwxyz234567"

SYMBOL_BITS = 5
ALPHABET_SIZE = 1 << SYMBOL_BITS  # 32
ENCODED_LEN = 13  # ceil(64 / 5)

# Decode-table marker for bytes outside the alphabet. Any value with one of
# the top three bits set (>= 32) is outside the 5-bit range.
INVALID = 0xFF
INVALID_BITS = 0xE0


@dataclass(frozen=True)
class Codec:
    """Immutable encode/decode tables for one 32-symbol alphabet.

    encode_map: 32 bytes, 5-bit value -> symbol byte
    decode_map: 256 bytes, input byte -> 5-bit value or INVALID
    """
    alphabet: str
    encode_map: bytes
    decode_map: bytes

    def is_symbol(self, byte_val: int) -> bool:
        """Return True if byte_val is one of the alphabet's symbols."""
        return self.decode_map[byte_val] != INVALID


def build_codec(alphabet: str) -> Codec:
    """Build the encode and decode tables for a 32-symbol ASCII alphabet."""
    if len(alphabet) != ALPHABET_SIZE:
        raise AlphabetError(
            f"Alphabet must have {ALPHABET_SIZE} symbols, got {len(alphabet)}"
        )
    try:
        encode_map = alphabet.encode("ascii")
    except UnicodeEncodeError as e:
        raise AlphabetError(f"Alphabet must be ASCII: {alphabet!r}") from e

    decode_map = bytearray([INVALID]) * 256
    for i, byte_val in enumerate(encode_map):
        if decode_map[byte_val] != INVALID:
            raise AlphabetError(f"Duplicate symbol in alphabet: {chr(byte_val)!r}")
        decode_map[byte_val] = i

    return Codec(alphabet=alphabet, encode_map=encode_map, decode_map=bytes(decode_map))


# Built once at import; shared read-only by every caller
STD_CODEC = build_codec(STD_ENCODING)
