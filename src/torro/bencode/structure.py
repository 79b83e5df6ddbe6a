"""
Data structures for representing Bencoded types.
"""
from types import MappingProxyType

__all__ = [
    "BencodeType",
    "BencodeInt",
    "BencodeString",
    "BencodeList",
    "BencodeDict",
]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class BencodeType:
    """Base class for all Bencode data types."""
    __slots__ = ("value",)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.value == other.value

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.value!r})"

    # Accessors return the payload for the matching variant, None otherwise.

    def int(self):
        return None

    def bytestring(self):
        return None

    def list(self):
        return None

    def dict(self):
        return None


class BencodeInt(BencodeType):
    """Represents a Bencoded integer (signed 64-bit)."""
    __slots__ = ()

    def __init__(self, value: int):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("BencodeInt requires an integer.")
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError("BencodeInt must fit a signed 64-bit integer.")
        self.value = value

    def __repr__(self):
        return f"BencodeInt({self.value})"

    def __hash__(self):
        return hash((BencodeInt, self.value))

    def int(self):
        return self.value


class BencodeString(BencodeType):
    """Represents a Bencoded byte string."""
    __slots__ = ()

    def __init__(self, value: bytes):
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError("BencodeString requires bytes.")
        self.value = bytes(value)

    def __hash__(self):
        return hash((BencodeString, self.value))

    def bytestring(self):
        return self.value


class BencodeList(BencodeType):
    """Represents a Bencoded list. Items are kept in a tuple."""
    __slots__ = ()

    def __init__(self, value):
        if not isinstance(value, (list, tuple)):
            raise TypeError("BencodeList requires a list.")
        for item in value:
            if not isinstance(item, BencodeType):
                raise TypeError("BencodeList items must be Bencode types.")
        self.value = tuple(value)

    def __len__(self):
        return len(self.value)

    def __iter__(self):
        return iter(self.value)

    def list(self):
        return self.value


class BencodeDict(BencodeType):
    """
    Represents a Bencoded dictionary.

    Whatever order the keys arrive in, they are stored (and iterated) in
    byte-wise lexicographic order, behind a read-only mapping.
    """
    __slots__ = ()

    def __init__(self, value: dict):
        if not isinstance(value, dict):
            raise TypeError("BencodeDict requires a dict.")
        # keys must be bytes (bencode requirement)
        for k, v in value.items():
            if not isinstance(k, (bytes, bytearray)):
                raise TypeError("BencodeDict keys must be bytes.")
            if not isinstance(v, BencodeType):
                raise TypeError("BencodeDict values must be Bencode types.")
        ordered = {bytes(k): value[k] for k in sorted(value, key=bytes)}
        self.value = MappingProxyType(ordered)

    def __repr__(self):
        return f"BencodeDict({dict(self.value)!r})"

    def __eq__(self, other):
        if not isinstance(other, BencodeDict):
            return NotImplemented
        return dict(self.value) == dict(other.value)

    def __len__(self):
        return len(self.value)

    def __contains__(self, key):
        return key in self.value

    def __getitem__(self, key):
        return self.value[key]

    def get(self, key, default=None):
        return self.value.get(key, default)

    def keys(self):
        return self.value.keys()

    def dict(self):
        return self.value
