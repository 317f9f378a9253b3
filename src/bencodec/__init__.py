"""
Bencode package for encoding and decoding BitTorrent data.
"""
from .decoder import BencodeDecoder, decode, parse
from .encoder import encode
from .errors import (BencodeDecodeError, BencodeError, DuplicateKey, ExpectedValue, InvalidKeyType,
                     InvalidLength, InvalidValue, MissingKey, NestingTooDeep, TrailingData, TypeMismatch,
                     UnsortedKeys, UnterminatedContainer)
from .structure import (BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType, Kind,
                        from_python, to_python)
from .tokens import MAX_DEPTH

__all__ = [
    'parse', 'decode', 'encode', 'BencodeDecoder',
    'BencodeType', 'BencodeInt', 'BencodeString', 'BencodeList', 'BencodeDict', 'Kind',
    'to_python', 'from_python', 'MAX_DEPTH',
    'BencodeError', 'BencodeDecodeError', 'ExpectedValue', 'InvalidValue', 'InvalidLength',
    'InvalidKeyType', 'MissingKey', 'UnterminatedContainer', 'NestingTooDeep', 'UnsortedKeys',
    'DuplicateKey', 'TrailingData', 'TypeMismatch',
]
