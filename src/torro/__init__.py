"""
torro: a strict bencode decoder and BEP0003 torrent metainfo builder.

    >>> from torro import from_bytes
    >>> t = from_bytes(b"d8:announce0:4:infod4:name4:test12:piece lengthi0e6:pieces0:6:lengthi0eee")
    >>> t.name
    'test'
"""
from .bencode import (
    BencodeDecodeError,
    BencodeDict,
    BencodeInt,
    BencodeList,
    BencodeString,
    BencodeType,
    decode,
)
from .config import CLIENT_PREFIX
from .error import BadFileRead, TorroError
from .torrent import (
    FileEntry,
    MultiFile,
    SingleFile,
    TorrentBuildError,
    TorrentDescriptor,
    build,
    from_bytes,
    open_torrent,
)

__version__ = "0.1.0"

__all__ = [
    "decode",
    "build",
    "from_bytes",
    "open_torrent",
    "TorrentDescriptor",
    "SingleFile",
    "MultiFile",
    "FileEntry",
    "BencodeType",
    "BencodeInt",
    "BencodeString",
    "BencodeList",
    "BencodeDict",
    "TorroError",
    "BencodeDecodeError",
    "TorrentBuildError",
    "BadFileRead",
    "CLIENT_PREFIX",
]
