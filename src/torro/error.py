"""
Root of the torro error hierarchy.

Decoding problems derive from ``torro.bencode.errors.BencodeDecodeError``,
schema problems from ``torro.torrent.errors.TorrentBuildError``; both are
``TorroError`` subclasses so callers can catch everything in one place.
"""


class TorroError(Exception):
    """Base class for every error raised by torro."""
    message = "torro error"

    def __init__(self, *args):
        super().__init__(*(args or (self.message,)))


class BadFileRead(TorroError):
    """A ``.torrent`` file could not be read from disk."""
    message = "IO error: could not read from torrent file"

    def __init__(self, path):
        super().__init__(f"{self.message}: {path}")
        self.path = path
