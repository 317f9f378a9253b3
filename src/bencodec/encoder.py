"""
Bencode encoder producing canonical output.

Dictionary keys are always written in ascending byte order, so encoding a
value is stable and fit for hashing (e.g. the info dictionary digest).
"""
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString
from .tokens import INT64_MAX, INT64_MIN


def encode(obj) -> bytes:
    """Encodes a Python object or BencodeType into bencoded bytes."""

    if isinstance(obj, bool):
        raise TypeError("Cannot bencode a bool")

    if isinstance(obj, (int, BencodeInt)):
        value = obj if isinstance(obj, int) else obj.value
        return encode_int(value)

    if isinstance(obj, str):
        return encode_str(obj)

    if isinstance(obj, (bytes, bytearray, memoryview, BencodeString)):
        # BencodeString wraps bytes
        value = obj.value if isinstance(obj, BencodeString) else bytes(obj)
        return encode_bytes(value)

    if isinstance(obj, (list, tuple, BencodeList)):
        value = obj.value if isinstance(obj, BencodeList) else obj
        return encode_list(value)

    if isinstance(obj, (dict, BencodeDict)):
        value = obj if isinstance(obj, dict) else obj.value
        return encode_dict(value)

    raise TypeError(f"Cannot bencode object of type {type(obj)}")


# ------------------------------------------------------------
#   Encoding primitives
# ------------------------------------------------------------

def encode_int(n: int) -> bytes:
    """Encodes an integer to bencoded bytes (e.g., i123e)."""
    if not INT64_MIN <= n <= INT64_MAX:
        raise ValueError(f"Integer out of 64-bit range: {n}")
    return f"i{n}e".encode()


def encode_bytes(b: bytes) -> bytes:
    """Encodes bytes to bencoded bytes (e.g., 4:spam)."""
    b = bytes(b)
    return str(len(b)).encode() + b":" + b


def encode_str(s: str) -> bytes:
    """Encodes a string as UTF-8 bencoded bytes (e.g., 4:spam)."""
    return encode_bytes(s.encode())


def encode_list(lst) -> bytes:
    """Encodes a list to bencoded bytes (e.g., l4:spame)."""
    encoded_items = b"".join(encode(x) for x in lst)
    return b"l" + encoded_items + b"e"


def _key_to_bytes(k) -> bytes:
    if isinstance(k, str):
        return k.encode()
    if isinstance(k, (bytes, bytearray)):
        return bytes(k)
    raise TypeError(f"Dictionary keys must be str or bytes, not {type(k)}")


def encode_dict(d: dict) -> bytes:
    """Encodes a dictionary to bencoded bytes (e.g., d3:cow3:moo4:spam4:eggse)."""
    items = {}
    for key, val in d.items():
        key_bytes = _key_to_bytes(key)
        if key_bytes in items:
            raise ValueError(f"Duplicate dictionary key after encoding: {key_bytes!r}")
        items[key_bytes] = val

    parts = [b"d"]
    for key_bytes in sorted(items):
        parts.append(encode_bytes(key_bytes))
        parts.append(encode(items[key_bytes]))
    parts.append(b"e")

    return b"".join(parts)
