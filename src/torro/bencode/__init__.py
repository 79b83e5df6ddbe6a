"""
Bencode package for decoding BitTorrent data.
"""
from .decoder import BencodeDecoder, decode
from .errors import *
from .errors import __all__ as _error_names
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType

__all__ = [
    'decode',
    'BencodeDecoder',
    'BencodeType',
    'BencodeInt',
    'BencodeString',
    'BencodeList',
    'BencodeDict',
] + _error_names
