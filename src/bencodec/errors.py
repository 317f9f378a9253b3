"""
Exceptions raised by the bencode decoder and the value accessors.
"""


class BencodeError(Exception):
    """Base class for every error raised by this package."""


class BencodeDecodeError(BencodeError, ValueError):
    """Malformed bencode input. `position` is the byte offset where it was detected."""

    def __init__(self, message: str, position: int):
        super().__init__(message, position)
        self.message = message
        self.position = position

    def __str__(self):
        return f"{self.message} (at byte {self.position})"


class ExpectedValue(BencodeDecodeError):
    """Input ended, or a dictionary closed, where a value was required."""


class InvalidValue(BencodeDecodeError):
    """Unknown type tag or a non-canonical / out-of-range integer."""


class UnsortedKeys(InvalidValue):
    """Strict mode: a dictionary key sorts before the key preceding it."""


class DuplicateKey(InvalidValue):
    """Strict mode: a dictionary key repeats."""


class TrailingData(InvalidValue):
    """Bytes remain after the root value of a complete document."""


class InvalidLength(BencodeDecodeError):
    """A byte-string length is malformed, overflowing or longer than the input."""


class InvalidKeyType(BencodeDecodeError):
    """A dictionary key position holds something other than a byte string."""


MissingKey = InvalidKeyType


class UnterminatedContainer(BencodeDecodeError):
    """A list or dictionary ran into the end of the input before its 'e'."""


class NestingTooDeep(BencodeDecodeError):
    """Containers are nested deeper than the decoder will follow."""


class TypeMismatch(BencodeError, TypeError):
    """A typed accessor was called on a value of a different kind."""

    def __init__(self, expected: str, actual: str):
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self):
        return f"Expected a {self.expected} value, got {self.actual}"
