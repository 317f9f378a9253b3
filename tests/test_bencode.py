from bencodec.decoder import decode, parse
from bencodec.encoder import encode
from bencodec.structure import BencodeInt, BencodeString, BencodeList, BencodeDict


def test_int():
    print("Testing integer decoding...")
    obj = decode(b"i42e")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeInt)
    assert obj.as_integer() == 42

    print("Testing integer encoding...")
    enc = encode(obj)
    print("Re-encoded:", enc)
    assert enc == b"i42e"


def test_zero_and_negative():
    assert decode(b"i0e") == BencodeInt(0)
    assert decode(b"i-17e") == BencodeInt(-17)


def test_string():
    print("Testing string decoding...")
    obj, consumed = parse(b"4:spam")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeString)
    assert obj.as_bytes() == b"spam"
    assert consumed == 6

    print("Testing string encoding...")
    assert encode(obj) == b"4:spam"


def test_list():
    print("Testing list decoding...")
    obj = decode(b"l4:spam4:eggse")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeList)
    assert obj.as_list() == [BencodeString(b"spam"), BencodeString(b"eggs")]


def test_dict():
    print("Testing dictionary decoding & encoding...")
    obj = decode(b"d3:cow3:moo4:spam4:eggse")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeDict)
    assert obj.as_dict()[b"cow"].as_bytes() == b"moo"
    assert obj.as_dict()[b"spam"].as_bytes() == b"eggs"
    enc = encode(obj)
    print("Re-encoded:", enc)
    assert enc == b"d3:cow3:moo4:spam4:eggse"


def test_roundtrip_nested():
    value = BencodeDict({
        b"announce": BencodeString(b"http://tracker.example/announce"),
        b"info": BencodeDict({
            b"length": BencodeInt(2 ** 40),
            b"name": BencodeString(b"\xff\x00binary"),
            b"pieces": BencodeString(bytes(range(256))),
        }),
        b"list": BencodeList([BencodeInt(-(2 ** 63)), BencodeList([]), BencodeDict({})]),
    })
    decoded, consumed = parse(encode(value))
    assert decoded == value
    assert consumed == len(encode(value))


def test_roundtrip_empty_values():
    for value in (BencodeString(), BencodeInt(), BencodeList(), BencodeDict()):
        assert decode(encode(value)) == value
