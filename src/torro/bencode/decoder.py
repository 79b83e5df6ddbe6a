"""
Bencode decoder for BitTorrent metainfo files.

Follows the BEP0003 grammar strictly: canonical integers only, sorted
dictionary keys, and exactly one top-level value.
"""
import logging
from typing import Optional

from .. import config
from .errors import (
    EmptyInput,
    InvalidInteger,
    LeadingZeros,
    MultipleTopLevelValues,
    NegativeZero,
    NestingTooDeep,
    NoIntegerGiven,
    UnexpectedByte,
    UnexpectedEndOfInput,
    UnorderedDictionary,
)
from .structure import INT64_MAX, BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType

logger = logging.getLogger(__name__)

INT_START = b"i"
LIST_START = b"l"
DICT_START = b"d"
END = b"e"
STR_SEP = b":"
MINUS = b"-"


class BencodeDecoder:
    """
    Decodes Bencoded byte strings into BencodeType trees.

    ``max_integer`` bounds the magnitude of integer literals and string
    lengths; ``max_depth`` bounds list/dict nesting. With ``strict_order``
    off, dictionaries with unsorted keys are logged and accepted instead of
    raising UnorderedDictionary.
    """
    def __init__(self, data: bytes, max_integer: Optional[int] = None,
                 max_depth: Optional[int] = None, strict_order: bool = True):
        self.data = bytes(data)
        self.i = 0  # cursor index
        self.depth = 0
        self.strict_order = strict_order
        # never wider than what BencodeInt can hold
        self.max_integer = min(
            config.MAX_INTEGER_MAGNITUDE if max_integer is None else max_integer,
            INT64_MAX,
        )
        self.max_depth = config.MAX_NESTING_DEPTH if max_depth is None else max_depth

    def decode(self) -> BencodeType:
        """Main decode entry point. Decodes the entire Bencoded data."""
        if not self.data:
            raise EmptyInput()

        result = self._parse_value()

        if self.i != len(self.data):
            raise MultipleTopLevelValues(self.i)

        logger.debug("Decoded %d bytes into %s", len(self.data), type(result).__name__)
        return result

    # --------------------------
    # Low-level utilities
    # --------------------------

    def _peek(self) -> bytes:
        if self.i >= len(self.data):
            raise UnexpectedEndOfInput()
        return self.data[self.i:self.i+1]

    def _consume(self, n=1) -> bytes:
        """Moves cursor forward by n bytes and returns the consumed chunk."""
        if self.i + n > len(self.data):
            raise UnexpectedEndOfInput()
        chunk = self.data[self.i:self.i+n]
        self.i += n
        return chunk

    def _read_until(self, stop: bytes) -> bytes:
        """Returns the bytes before ``stop`` and moves the cursor past it."""
        end = self.data.find(stop, self.i)
        if end == -1:
            raise UnexpectedEndOfInput()

        chunk = self.data[self.i:end]
        self.i = end + 1
        return chunk

    def _parse_digits(self, position: int, digits_at: int, digits: bytes) -> int:
        """
        Parses an unsigned decimal magnitude. Shared by integer bodies and
        string length prefixes. ``position`` is reported for whole-number
        errors, ``digits_at`` locates individual offending bytes.
        """
        if not digits:
            raise NoIntegerGiven(position)

        for offset, byte in enumerate(digits):
            if not 0x30 <= byte <= 0x39:
                raise UnexpectedByte(digits_at + offset, byte)

        if digits[:1] == b"0" and len(digits) > 1:
            raise LeadingZeros(position)

        # too many digits to fit; also keeps int() clear of its digit limit
        if len(digits) > len(str(self.max_integer)):
            raise InvalidInteger(position)

        num = int(digits)
        if num > self.max_integer:
            raise InvalidInteger(position)
        return num

    # --------------------------
    # Parsing functions
    # --------------------------

    def _parse_value(self) -> BencodeType:
        ch = self._peek()

        if ch == INT_START:
            return self._parse_int()

        if ch.isdigit():  # Bencode strings start with length, which is a digit
            return self._parse_string()

        if ch == LIST_START:
            return self._parse_list()

        if ch == DICT_START:
            return self._parse_dict()

        raise UnexpectedByte(self.i, ch[0])

    def _parse_int(self) -> BencodeInt:
        """Parses an integer from the Bencoded data."""
        start = self.i
        self._consume(1)  # skip 'i'

        body_at = self.i
        body = self._read_until(END)

        negative = body[:1] == MINUS
        if negative:
            body = body[1:]
            body_at += 1

        if not body:
            raise NoIntegerGiven(start)
        if negative and body == b"0":
            raise NegativeZero(start)

        num = self._parse_digits(start, body_at, body)
        return BencodeInt(-num if negative else num)

    def _parse_string(self) -> BencodeString:
        """Parses a byte string from the Bencoded data."""
        start = self.i
        length = self._parse_digits(start, start, self._read_until(STR_SEP))
        return BencodeString(self._consume(length))

    def _enter(self, start: int):
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingTooDeep(start)

    def _parse_list(self) -> BencodeList:
        """Parses a list from the Bencoded data."""
        self._enter(self.i)
        self._consume(1)  # skip 'l'
        items = []

        while self._peek() != END:
            items.append(self._parse_value())

        self._consume(1)  # skip 'e'
        self.depth -= 1
        return BencodeList(items)

    def _parse_dict(self) -> BencodeDict:
        """Parses a dictionary from the Bencoded data."""
        start = self.i
        self._enter(start)
        self._consume(1)  # skip 'd'
        keys = []
        obj = {}

        while self._peek() != END:
            # keys MUST be strings
            if not self._peek().isdigit():
                raise UnexpectedByte(self.i, self.data[self.i])
            key = self._parse_string().value
            obj[key] = self._parse_value()
            keys.append(key)

        self._consume(1)  # skip 'e'
        self.depth -= 1

        result = BencodeDict(obj)
        if any(later < earlier for earlier, later in zip(keys, keys[1:])):
            if self.strict_order:
                raise UnorderedDictionary(start, result)
            logger.warning("Dictionary at byte %d has unsorted keys, accepting it", start)
        return result


def decode(data: bytes, strict_order: bool = True) -> BencodeType:
    """
    Convenience function to decode Bencoded data.
    """
    return BencodeDecoder(data, strict_order=strict_order).decode()
