"""
Errors raised while turning a decoded value tree into a TorrentDescriptor.
"""
from ..error import TorroError


class TorrentBuildError(TorroError):
    """Base class for torrent schema errors."""
    message = "Torrent creation error"


class NoTopLevelDictionary(TorrentBuildError):
    message = "no top-level dictionary given"


class NoAnnounceFound(TorrentBuildError):
    message = "no `announce` key given"


class AnnounceWrongType(TorrentBuildError):
    message = "`announce` key is the wrong type, expected bytestring"


class NoInfoFound(TorrentBuildError):
    message = "no `info` key given"


class InfoWrongType(TorrentBuildError):
    message = "`info` wrong type, expected dictionary"


class NoPieceLengthFound(TorrentBuildError):
    message = "no `piece length` key given"


class PieceLengthWrongType(TorrentBuildError):
    message = "`piece length` wrong type, expected non-negative integer"


class NoPiecesFound(TorrentBuildError):
    message = "no `pieces` key given"


class PiecesWrongType(TorrentBuildError):
    message = "`pieces` wrong type, expected bytestring"


class NoNameFound(TorrentBuildError):
    message = "no `name` key given"


class NameWrongType(TorrentBuildError):
    message = "`name` key is the wrong type, expected bytestring"


class LengthWrongType(TorrentBuildError):
    message = "`length` key is the wrong type, expected non-negative integer"


class FilesWrongType(TorrentBuildError):
    message = "`files` key is the wrong type, expected list"


class BothLengthFiles(TorrentBuildError):
    message = "both `length` and `files` keys were given, only one should be"


class NoLengthFiles(TorrentBuildError):
    message = "no `files` or `length` key given, needs one"


class FileWrongType(TorrentBuildError):
    message = "file in `files` wrong type, expected dict"


class PathWrongType(TorrentBuildError):
    message = "`path` key is the wrong type, expected list"


class NoPathFound(TorrentBuildError):
    message = "no `path` given for a file inside `files` key"


class SubdirWrongType(TorrentBuildError):
    message = "a subdirectory inside `path` key for a file is the wrong type, expected bytestring"


class BadUTF8String(TorrentBuildError):
    """Keeps the raw bytes that failed to decode."""
    message = "badly formatted utf8 string given"

    def __init__(self, raw: bytes):
        super().__init__(f"{self.message}: {raw!r}")
        self.raw = raw


__all__ = [
    "TorrentBuildError",
    "NoTopLevelDictionary",
    "NoAnnounceFound",
    "AnnounceWrongType",
    "NoInfoFound",
    "InfoWrongType",
    "NoPieceLengthFound",
    "PieceLengthWrongType",
    "NoPiecesFound",
    "PiecesWrongType",
    "NoNameFound",
    "NameWrongType",
    "LengthWrongType",
    "FilesWrongType",
    "BothLengthFiles",
    "NoLengthFiles",
    "FileWrongType",
    "PathWrongType",
    "NoPathFound",
    "SubdirWrongType",
    "BadUTF8String",
]
