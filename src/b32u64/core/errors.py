"""Exception types for the uint64 base-32 codec.

Two classes of failure are kept apart:

- ContractError: the caller broke the calling convention (short buffer,
  wrong string length, value out of range). Raised and never caught here.
- InvalidInputError: the data itself holds symbols outside the alphabet.
  Only the strict parser raises it; the tuple-returning decoders report
  it through their ``valid`` flag instead.
"""


class B32Error(Exception):
    pass


class ContractError(B32Error, ValueError):
    """Raised when a caller passes a buffer, string or value of the wrong shape."""
    pass


class AlphabetError(B32Error, ValueError):
    """Raised when an alphabet cannot be turned into lookup tables."""
    pass


class InvalidInputError(B32Error, ValueError):
    """Raised by parse_uint64 on symbols outside the alphabet."""

    def __init__(self, text, position):
        self.text = text
        self.position = position
        super().__init__(
            f"Invalid base-32 character {text[position]!r} at position {position} in {text!r}"
        )
