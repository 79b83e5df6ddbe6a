"""
Errors raised while decoding bencode. Every malformed input ends in exactly
one of these kinds; positions are byte offsets into the decoded buffer.
"""
from ..error import TorroError


class BencodeDecodeError(TorroError):
    """Base class for bencode decoding errors."""
    message = "Bencode error"


class EmptyInput(BencodeDecodeError):
    """No bencode data given."""
    message = "empty torrent file"


class UnexpectedEndOfInput(BencodeDecodeError):
    """The data ended before the current value was closed."""
    message = "torrent file ended prematurely, unexpected eof"


class MultipleTopLevelValues(BencodeDecodeError):
    """Bytes remain after the single top-level value."""
    message = "multiple values given for the top-level bencode"

    def __init__(self, position: int):
        super().__init__(f"{self.message} (trailing data at byte {position})")
        self.position = position


class _PositionedError(BencodeDecodeError):
    def __init__(self, position: int):
        super().__init__(f"{self.message} (at byte {position})")
        self.position = position


class UnexpectedByte(BencodeDecodeError):
    """A byte that cannot start or continue the current production."""
    message = "unexpected byte was given"

    def __init__(self, position: int, byte: int):
        super().__init__(f"{self.message}: {bytes([byte])!r} at byte {position}")
        self.position = position
        self.byte = byte


class NoIntegerGiven(_PositionedError):
    """An integer was prescribed but no digits were given, e.g. ``ie``."""
    message = "integer was prescribed but nothing was given"


class InvalidInteger(_PositionedError):
    """The integer does not fit the decoder's magnitude bound."""
    message = "invalid integer given in torrent file"


class LeadingZeros(_PositionedError):
    """Zeros given before any significant digit, e.g. ``i002e``."""
    message = "leading zeros given for an integer in torrent file"


class NegativeZero(_PositionedError):
    """``i-0e`` is not a canonical encoding of zero."""
    message = "negative zero was given, zeros cannot be negative"


class NestingTooDeep(_PositionedError):
    """Lists/dicts nested past the decoder's depth bound."""
    message = "lists or dictionaries nested too deeply"


class UnorderedDictionary(BencodeDecodeError):
    """Dictionary keys were not in byte-wise lexicographic order."""
    message = "dictionary keys are not sorted"

    def __init__(self, position: int, partial_map):
        super().__init__(f"{self.message} (dictionary at byte {position})")
        self.position = position
        self.partial_map = partial_map


__all__ = [
    "BencodeDecodeError",
    "EmptyInput",
    "UnexpectedEndOfInput",
    "UnexpectedByte",
    "NoIntegerGiven",
    "InvalidInteger",
    "LeadingZeros",
    "NegativeZero",
    "UnorderedDictionary",
    "MultipleTopLevelValues",
    "NestingTooDeep",
]
