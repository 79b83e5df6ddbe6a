"""
Torrent metainfo: validated, immutable descriptors built from bencode.
"""
from .errors import *
from .errors import __all__ as _error_names
from .metainfo import (
    FileEntry,
    MultiFile,
    SingleFile,
    TorrentDescriptor,
    build,
    from_bytes,
    open_torrent,
)

__all__ = [
    'TorrentDescriptor',
    'SingleFile',
    'MultiFile',
    'FileEntry',
    'build',
    'from_bytes',
    'open_torrent',
] + _error_names
