"""
Bencode decoder for BitTorrent metainfo, tracker responses and peer messages.
"""
import logging

from .errors import (BencodeDecodeError, DuplicateKey, ExpectedValue, InvalidKeyType, InvalidLength,
                     InvalidValue, NestingTooDeep, TrailingData, UnsortedKeys, UnterminatedContainer)
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString
from .tokens import (COLON, DICT_START, END, INT64_MAX, INT64_MAX_DIGITS, INT64_MIN, INT_START,
                     LIST_START, MAX_DEPTH, MINUS, ZERO, is_digit)

logger = logging.getLogger(__name__)


class BencodeDecoder:
    """
    Decodes Bencoded byte strings into Bencode values.

    Only the first `length` bytes of `data` are ever read. `strict` rejects
    dictionaries whose keys are not in ascending byte order or repeat;
    otherwise the first occurrence of a repeated key is kept.
    """
    def __init__(self, data, length: int = None, strict: bool = False, max_depth: int = MAX_DEPTH):
        if isinstance(data, memoryview):
            data = data.cast("B")
        elif not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"Bencode input must be bytes, not {type(data)}")

        if length is None:
            length = len(data)
        elif length < 0 or length > len(data):
            raise ValueError(f"length {length} outside buffer of {len(data)} bytes")

        self.data = data
        self.end = length
        self.strict = strict
        self.max_depth = max_depth
        self.i = 0  # cursor index

    def decode(self):
        """
        Parses one value starting at the cursor and leaves the cursor just past it.

        Running out of interpreter stack before `max_depth` is reached is
        reported as NestingTooDeep as well.
        """
        try:
            return self._parse_value(0)
        except RecursionError:
            raise NestingTooDeep("Nesting exceeds the interpreter recursion limit", self.i) from None

    # --------------------------
    # Low-level utilities
    # --------------------------

    def _peek(self):
        """Byte at the cursor, or None at the end of input."""
        if self.i >= self.end:
            return None
        return self.data[self.i]

    def _scan_digits(self, pos: int) -> int:
        """Returns the index of the first non-digit at or after pos."""
        while pos < self.end and is_digit(self.data[pos]):
            pos += 1
        return pos

    # --------------------------
    # Parsing functions
    # --------------------------

    def _parse_value(self, depth: int):
        ch = self._peek()

        if ch is None:
            raise ExpectedValue("Unexpected end of input", self.i)

        if ch == INT_START:
            return self._parse_int()

        if is_digit(ch):  # Bencode strings start with length, which is a digit
            return self._parse_string()

        if ch == LIST_START:
            return self._parse_list(depth)

        if ch == DICT_START:
            return self._parse_dict(depth)

        if ch == MINUS:
            raise InvalidLength("Negative string length", self.i)

        raise InvalidValue(f"Invalid token {bytes([ch])!r}", self.i)

    def _parse_int(self):
        """Parses an integer: i, optional '-', canonical digits, e."""
        start = self.i
        pos = start + 1  # skip 'i'

        negative = pos < self.end and self.data[pos] == MINUS
        if negative:
            pos += 1

        digits_start = pos
        pos = self._scan_digits(pos)

        if pos >= self.end:
            raise ExpectedValue("Integer not terminated", pos)
        if self.data[pos] != END:
            raise InvalidValue(f"Invalid character {bytes([self.data[pos]])!r} in integer", pos)

        n_digits = pos - digits_start
        if n_digits == 0:
            raise InvalidValue("Integer has no digits", digits_start)
        if self.data[digits_start] == ZERO:
            if n_digits > 1:
                raise InvalidValue("Integer has a leading zero", digits_start)
            if negative:
                raise InvalidValue("Negative zero is not allowed", start)
        if n_digits > INT64_MAX_DIGITS:
            raise InvalidValue("Integer overflows 64 bits", digits_start)

        num = int(bytes(self.data[digits_start:pos]))
        if negative:
            num = -num
        if not INT64_MIN <= num <= INT64_MAX:
            raise InvalidValue("Integer overflows 64 bits", digits_start)

        self.i = pos + 1  # skip 'e'
        return BencodeInt(num)

    def _parse_string(self):
        """Parses a byte string: decimal length, ':', then exactly that many bytes."""
        start = self.i
        pos = self._scan_digits(start)

        if pos >= self.end or self.data[pos] != COLON:
            raise InvalidLength("Expected ':' after string length", pos)

        n_digits = pos - start
        if n_digits > 1 and self.data[start] == ZERO:
            raise InvalidLength("String length has a leading zero", start)
        if n_digits > INT64_MAX_DIGITS:
            raise InvalidLength("String length overflows 64 bits", start)

        length = int(bytes(self.data[start:pos]))
        if length > INT64_MAX:
            raise InvalidLength("String length overflows 64 bits", start)

        pos += 1  # skip ':'
        remaining = self.end - pos
        if length > remaining:
            raise InvalidLength(f"String length {length} exceeds the {remaining} bytes left", start)

        self.i = pos + length
        return BencodeString(bytes(self.data[pos:self.i]))

    def _enter(self, depth: int):
        if depth >= self.max_depth:
            raise NestingTooDeep(f"Nesting deeper than {self.max_depth} levels", self.i)

    def _parse_list(self, depth: int):
        """Parses a list from the Bencoded data."""
        start = self.i
        self._enter(depth)
        self.i += 1  # skip 'l'
        items = []

        while True:
            ch = self._peek()
            if ch is None:
                raise UnterminatedContainer("List not terminated", start)
            if ch == END:
                break
            items.append(self._parse_value(depth + 1))

        self.i += 1  # skip 'e'
        return BencodeList(items)

    def _parse_dict(self, depth: int):
        """Parses a dictionary from the Bencoded data."""
        start = self.i
        self._enter(depth)
        self.i += 1  # skip 'd'
        obj = {}
        last_key = None

        while True:
            ch = self._peek()
            if ch is None:
                raise UnterminatedContainer("Dictionary not terminated", start)
            if ch == END:
                break

            # keys MUST be strings
            key_pos = self.i
            if not is_digit(ch):
                raise InvalidKeyType(f"Dictionary key must be a byte string, found {bytes([ch])!r}", key_pos)
            key = self._parse_string().value

            ch = self._peek()
            if ch is None:
                raise UnterminatedContainer("Dictionary not terminated", start)
            if ch == END:
                raise ExpectedValue(f"Missing value for key {key!r}", self.i)

            if self.strict and last_key is not None:
                if key == last_key:
                    raise DuplicateKey(f"Duplicate key {key!r}", key_pos)
                if key < last_key:
                    raise UnsortedKeys(f"Key {key!r} sorts before {last_key!r}", key_pos)

            value = self._parse_value(depth + 1)
            obj.setdefault(key, value)
            last_key = key

        self.i += 1  # skip 'e'
        return BencodeDict(obj)


def parse(buffer, length: int = None, *, strict: bool = False, max_depth: int = MAX_DEPTH):
    """
    Parses one value from the start of buffer.

    Returns (value, bytes_consumed). Anything after the value is left alone,
    so a bencoded header can be split from a trailing payload.
    """
    decoder = BencodeDecoder(buffer, length, strict=strict, max_depth=max_depth)
    try:
        value = decoder.decode()
    except BencodeDecodeError as exc:
        logger.debug("Bencode parse failed: %s: %s", type(exc).__name__, exc)
        raise
    return value, decoder.i


def decode(data, *, strict: bool = False, max_depth: int = MAX_DEPTH):
    """
    Convenience function to decode a complete Bencoded document.
    """
    value, consumed = parse(data, strict=strict, max_depth=max_depth)
    total = data.nbytes if isinstance(data, memoryview) else len(data)
    if consumed != total:
        raise TrailingData(f"{total - consumed} bytes after the end of the value", consumed)
    return value
