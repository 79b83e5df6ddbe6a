"""
Builds an immutable TorrentDescriptor from a decoded BEP0003 metainfo tree.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

from .. import config
from ..bencode import BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType, decode
from ..utils import read_file_bytes
from .errors import (
    AnnounceWrongType,
    BadUTF8String,
    BothLengthFiles,
    FilesWrongType,
    FileWrongType,
    InfoWrongType,
    LengthWrongType,
    NameWrongType,
    NoAnnounceFound,
    NoInfoFound,
    NoLengthFiles,
    NoNameFound,
    NoPathFound,
    NoPieceLengthFound,
    NoPiecesFound,
    NoTopLevelDictionary,
    PathWrongType,
    PieceLengthWrongType,
    PiecesWrongType,
    SubdirWrongType,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SingleFile:
    """One-file torrent; ``length`` is the file size in bytes."""
    length: int


@dataclass(frozen=True)
class FileEntry:
    length: int
    path: Tuple[str, ...]  # subdirectories, last element is the file name

    @property
    def joined_path(self) -> str:
        return "/".join(self.path)


@dataclass(frozen=True)
class MultiFile:
    """Multi-file torrent, entries in the order the metainfo lists them."""
    entries: Tuple[FileEntry, ...]


FileStructure = Union[SingleFile, MultiFile]


@dataclass(frozen=True)
class TorrentDescriptor:
    announce: str
    name: str
    piece_length: int
    pieces: Tuple[bytes, ...]
    file_structure: FileStructure

    @property
    def is_multi_file(self) -> bool:
        return isinstance(self.file_structure, MultiFile)

    @property
    def total_length(self) -> int:
        if self.is_multi_file:
            return sum(entry.length for entry in self.file_structure.entries)
        return self.file_structure.length

    @property
    def num_pieces(self) -> int:
        return len(self.pieces)


# ------------------------------------------------------------
#   Lookup helpers
# ------------------------------------------------------------

def _get_item(d: BencodeDict, missing_error, *keys: bytes) -> BencodeType:
    """
    Returns the value of the first of ``keys`` present in ``d``.
    Later keys are legacy aliases, only tried when earlier ones are absent.
    """
    for key in keys:
        if key in d:
            return d[key]
    raise missing_error()


def _to_text(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise BadUTF8String(raw) from exc


def _unsigned(value: BencodeType, wrong_type_error) -> int:
    if not isinstance(value, BencodeInt) or value.value < 0:
        raise wrong_type_error()
    return value.value


def _split_pieces(raw: bytes) -> Tuple[bytes, ...]:
    size = config.PIECE_HASH_LENGTH
    pieces = tuple(raw[i:i+size] for i in range(0, len(raw), size))

    if len(raw) % size:
        logger.warning(
            "pieces is %d bytes, not a multiple of %d; keeping a %d-byte final chunk",
            len(raw), size, len(raw) % size,
        )
    return pieces


def _make_file_entry(file_raw: BencodeType) -> FileEntry:
    if not isinstance(file_raw, BencodeDict):
        raise FileWrongType()

    length = _unsigned(_get_item(file_raw, NoLengthFiles, b"length"), LengthWrongType)

    path_raw = _get_item(file_raw, NoPathFound, b"path")
    if not isinstance(path_raw, BencodeList):
        raise PathWrongType()
    if len(path_raw) == 0:
        raise NoPathFound()

    path = []
    for subdir in path_raw:
        if not isinstance(subdir, BencodeString):
            raise SubdirWrongType()
        path.append(_to_text(subdir.value))

    return FileEntry(length=length, path=tuple(path))


# ------------------------------------------------------------
#   Builders
# ------------------------------------------------------------

def build(root: BencodeType) -> TorrentDescriptor:
    """
    Validates a decoded metainfo tree and projects it into a TorrentDescriptor.
    Checks run in a fixed order and the first failure is raised.
    """
    if not isinstance(root, BencodeDict):
        raise NoTopLevelDictionary()

    # ------------------ ANNOUNCE ------------------
    announce_b = _get_item(root, NoAnnounceFound, b"announce")
    if not isinstance(announce_b, BencodeString):
        raise AnnounceWrongType()
    announce = _to_text(announce_b.value)

    # ------------------ INFO ------------------
    info = _get_item(root, NoInfoFound, b"info")
    if not isinstance(info, BencodeDict):
        raise InfoWrongType()

    # ------------------ PIECE LENGTH ------------------
    piece_length = _unsigned(
        _get_item(info, NoPieceLengthFound, b"piece length", b"piece"),
        PieceLengthWrongType,
    )

    # ------------------ PIECES ------------------
    pieces_b = _get_item(info, NoPiecesFound, b"pieces")
    if not isinstance(pieces_b, BencodeString):
        raise PiecesWrongType()

    # ------------------ NAME ------------------
    name_b = _get_item(info, NoNameFound, b"name")
    if not isinstance(name_b, BencodeString):
        raise NameWrongType()
    name = _to_text(name_b.value)

    # ------------------ FILES ------------------
    length = None
    if b"length" in info:
        length = _unsigned(info[b"length"], LengthWrongType)

    files_b = info.get(b"files")
    if files_b is not None and not isinstance(files_b, BencodeList):
        raise FilesWrongType()

    if files_b is not None:
        if length is not None:
            raise BothLengthFiles()
        file_structure = MultiFile(tuple(_make_file_entry(f) for f in files_b))
    elif length is not None:
        file_structure = SingleFile(length)
    else:
        raise NoLengthFiles()

    return TorrentDescriptor(
        announce=announce,
        name=name,
        piece_length=piece_length,
        pieces=_split_pieces(pieces_b.value),
        file_structure=file_structure,
    )


def from_bytes(data: bytes, strict_order: bool = False) -> TorrentDescriptor:
    """
    Decodes raw ``.torrent`` bytes and builds the descriptor.

    Many torrents in the wild list info keys out of order, so unsorted
    dictionaries are only logged unless ``strict_order`` is set.
    """
    return build(decode(data, strict_order=strict_order))


def open_torrent(path: Union[str, Path], strict_order: bool = False) -> TorrentDescriptor:
    """
    Loads a ``.torrent`` file from ``path``.
    Raises BadFileRead, a BencodeDecodeError or a TorrentBuildError.
    """
    torrent = from_bytes(read_file_bytes(path), strict_order=strict_order)
    logger.info(
        "Loaded torrent %r: %d pieces, %d bytes, multi=%s",
        torrent.name, torrent.num_pieces, torrent.total_length, torrent.is_multi_file,
    )
    return torrent
