"""
Wire tokens and limits for the bencode format.
"""

INT_START = ord("i")
LIST_START = ord("l")
DICT_START = ord("d")
END = ord("e")
COLON = ord(":")
MINUS = ord("-")
ZERO = ord("0")
NINE = ord("9")

# Signed 64-bit range for integers and string lengths
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
INT64_MAX_DIGITS = len(str(INT64_MAX))   # 19

# Deepest list/dict nesting the decoder will follow
MAX_DEPTH = 256


def is_digit(byte: int) -> bool:
    return ZERO <= byte <= NINE
