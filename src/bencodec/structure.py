"""
Data structures for representing Bencoded values.

Every decoded document is a tree of the four variants below. A node owns
its children; `copy()` duplicates the whole subtree and `take()` moves the
payload out, leaving the source empty.
"""
import copy
from enum import Enum

from .errors import TypeMismatch
from .tokens import INT64_MAX, INT64_MIN

__all__ = [
    "Kind",
    "BencodeType",
    "BencodeInt",
    "BencodeString",
    "BencodeList",
    "BencodeDict",
    "to_python",
    "from_python",
]


class Kind(Enum):
    """Tag of a Bencode value."""
    BYTES = "byte string"
    INTEGER = "integer"
    LIST = "list"
    DICT = "dictionary"


class BencodeType:
    """Base class for all Bencode data types."""
    kind: Kind

    # containers are mutable
    __hash__ = None

    def __new__(cls, *args, **kwargs):
        if cls is BencodeType:
            raise TypeError("BencodeType is abstract; use one of its four variants.")
        return super().__new__(cls)

    def __eq__(self, other):
        if not isinstance(other, BencodeType):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __repr__(self):
        return f"{type(self).__name__}({self.value!r})"

    # --------------------------
    # Typed accessors
    # --------------------------

    def as_integer(self) -> int:
        raise TypeMismatch(Kind.INTEGER.value, self.kind.value)

    def as_bytes(self) -> bytes:
        raise TypeMismatch(Kind.BYTES.value, self.kind.value)

    def as_list(self) -> list:
        raise TypeMismatch(Kind.LIST.value, self.kind.value)

    def as_dict(self) -> dict:
        raise TypeMismatch(Kind.DICT.value, self.kind.value)

    # --------------------------
    # Ownership
    # --------------------------

    def copy(self):
        """Deep copy of this value and everything below it."""
        return copy.deepcopy(self)

    __copy__ = copy

    def take(self):
        """Move the payload into a new value and reset this one to empty."""
        moved = type(self)(self.value)
        self.value = type(self)().value
        return moved


class BencodeInt(BencodeType):
    """Represents a Bencoded integer (signed 64-bit)."""
    kind = Kind.INTEGER

    def __init__(self, value: int = 0):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("BencodeInt requires an integer.")
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"BencodeInt out of 64-bit range: {value}")
        self.value = value

    def as_integer(self) -> int:
        return self.value


class BencodeString(BencodeType):
    """Represents a Bencoded byte string."""
    kind = Kind.BYTES

    def __init__(self, value: bytes = b""):
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError("BencodeString requires bytes.")
        self.value = bytes(value)

    def __len__(self):
        return len(self.value)

    def as_bytes(self) -> bytes:
        return self.value


class BencodeList(BencodeType):
    """Represents a Bencoded list."""
    kind = Kind.LIST

    def __init__(self, value: list = None):
        if value is None:
            value = []
        if not isinstance(value, list):
            raise TypeError("BencodeList requires a list.")
        for item in value:
            if not isinstance(item, BencodeType):
                raise TypeError("BencodeList items must be Bencode values.")
        self.value = value

    def __len__(self):
        return len(self.value)

    def as_list(self) -> list:
        return self.value


class BencodeDict(BencodeType):
    """Represents a Bencoded dictionary."""
    kind = Kind.DICT

    def __init__(self, value: dict = None):
        if value is None:
            value = {}
        if not isinstance(value, dict):
            raise TypeError("BencodeDict requires a dict.")
        # keys must be bytes (bencode requirement)
        for k, v in value.items():
            if not isinstance(k, bytes):
                raise TypeError("BencodeDict keys must be bytes.")
            if not isinstance(v, BencodeType):
                raise TypeError("BencodeDict values must be Bencode values.")
        self.value = value

    def __len__(self):
        return len(self.value)

    def as_dict(self) -> dict:
        return self.value


# ------------------------------------------------------------
#   Conversion to and from plain Python objects
# ------------------------------------------------------------

def to_python(value: BencodeType):
    """Unwrap a value tree into nested int / bytes / list / dict."""
    if isinstance(value, (BencodeInt, BencodeString)):
        return value.value
    if isinstance(value, BencodeList):
        return [to_python(item) for item in value.value]
    if isinstance(value, BencodeDict):
        return {k: to_python(v) for k, v in value.value.items()}
    raise TypeError(f"Not a Bencode value: {type(value)}")


def from_python(obj) -> BencodeType:
    """
    Build a value tree from plain Python objects.
    str is stored as UTF-8 bytes, tuple as a list. Dict keys may be str or bytes.
    """
    if isinstance(obj, BencodeType):
        return obj.copy()

    if isinstance(obj, bool):
        raise TypeError("Cannot bencode a bool")

    if isinstance(obj, int):
        return BencodeInt(obj)

    if isinstance(obj, str):
        return BencodeString(obj.encode())

    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BencodeString(obj)

    if isinstance(obj, (list, tuple)):
        return BencodeList([from_python(x) for x in obj])

    if isinstance(obj, dict):
        out = {}
        for key, val in obj.items():
            if isinstance(key, str):
                key = key.encode()
            elif isinstance(key, (bytes, bytearray)):
                key = bytes(key)
            else:
                raise TypeError(f"Dictionary keys must be str or bytes, not {type(key)}")
            if key in out:
                raise ValueError(f"Duplicate dictionary key after encoding: {key!r}")
            out[key] = from_python(val)
        return BencodeDict(out)

    raise TypeError(f"Cannot bencode object of type {type(obj)}")
