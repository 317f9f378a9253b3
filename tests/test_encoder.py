from array import array

import pytest

from bencodec.decoder import decode
from bencodec.encoder import encode, encode_bytes, encode_dict, encode_int, encode_list, encode_str
from bencodec.structure import BencodeDict, BencodeInt, BencodeList, BencodeString


def test_primitives():
    assert encode_int(0) == b"i0e"
    assert encode_int(-42) == b"i-42e"
    assert encode_bytes(b"") == b"0:"
    assert encode_str("spam") == b"4:spam"
    assert encode_list([1, b"a"]) == b"li1e1:ae"
    assert encode_dict({}) == b"de"


def test_plain_python_objects():
    assert encode(42) == b"i42e"
    assert encode("héllo") == b"6:h\xc3\xa9llo"
    assert encode(bytearray(b"ab")) == b"2:ab"
    assert encode((1, 2)) == b"li1ei2ee"
    assert encode({"cow": "moo", "spam": [b"a", 1]}) == b"d3:cow3:moo4:spaml1:ai1eee"


def test_dict_keys_sorted_regardless_of_insertion_order():
    value = BencodeDict({
        b"spam": BencodeString(b"eggs"),
        b"cow": BencodeString(b"moo"),
    })
    assert encode(value) == b"d3:cow3:moo4:spam4:eggse"


def test_dict_keys_sorted_by_raw_bytes():
    assert encode({b"b": 1, b"a": 2, b"B": 3, b"\xff": 4, b"aa": 5}) == \
        b"d1:Bi3e1:ai2e2:aai5e1:bi1e1:\xffi4ee"


def test_encoded_dict_passes_strict_decode():
    encoded = encode({"z": 1, "a": {"y": 2, "b": 3}})
    assert decode(encoded, strict=True) == decode(encoded)


@pytest.mark.parametrize("obj", [True, None, 1.5, object(), {1: 2}])
def test_unsupported_types(obj):
    with pytest.raises(TypeError):
        encode(obj)


def test_integer_out_of_range():
    with pytest.raises(ValueError):
        encode(2 ** 63)
    with pytest.raises(ValueError):
        encode([-(2 ** 63) - 1])


def test_colliding_keys():
    with pytest.raises(ValueError):
        encode({"a": 1, b"a": 2})


def test_roundtrip_values():
    values = [
        BencodeInt(0),
        BencodeInt(2 ** 63 - 1),
        BencodeString(b"\x00\x01\x02"),
        BencodeList([BencodeString(b"spam"), BencodeString(b"eggs")]),
        BencodeDict({b"cow": BencodeString(b"moo"), b"n": BencodeList([BencodeInt(-1)])}),
    ]
    for value in values:
        assert decode(encode(value)) == value


def test_encode_bytes_counts_bytes_of_wide_memoryview():
    wide = memoryview(array("H", [1, 2]))
    assert encode_bytes(wide) == b"4:" + wide.tobytes()
    assert encode(wide) == encode_bytes(wide)
