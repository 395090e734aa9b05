import pytest

from pjtools.bytes_tools import byte2hex, byte_swap, bytes2hex, compare, hex2bytes


def test_bytes2hex_pads_and_uppercases():
    assert bytes2hex(bytes([0x0A, 0xFF])) == "0AFF"


def test_bytes2hex_lower_case_matches_stdlib():
    data = bytes(range(0, 256, 7))
    assert bytes2hex(data, False) == data.hex()
    assert bytes2hex(data) == data.hex().upper()


def test_bytes2hex_empty():
    assert bytes2hex(b"") == ""


def test_bytes2hex_accepts_list_of_ints():
    assert bytes2hex([1, 2, 3]) == bytes2hex(b"\x01\x02\x03")


@pytest.mark.parametrize("data", [b"\x00", b"\x12\x34\x56", bytes(range(256))])
def test_hex_round_trip(data):
    assert hex2bytes(bytes2hex(data), len(data)) == data


def test_hex2bytes_lower_case():
    assert hex2bytes("abcdef", 3) == bytes.fromhex("abcdef")


def test_hex2bytes_zero_fills():
    assert hex2bytes("0102", 4) == bytes.fromhex("0102") + bytes(2)


def test_hex2bytes_truncates():
    assert hex2bytes("01020304", 2) == bytes.fromhex("0102")


@pytest.mark.parametrize("text,size", [("", 2), ("010", 2), ("0102", 0)])
def test_hex2bytes_rejects_bad_input(text, size):
    with pytest.raises(ValueError):
        hex2bytes(text, size)


@pytest.mark.parametrize(
    "byte,expected", [(0x00, 0), (0x12, 12), (0x99, 99), (0x1A, 0), (0xA1, 0)]
)
def test_byte2hex(byte, expected):
    assert byte2hex(byte) == expected


def test_byte2hex_rejects_out_of_range():
    with pytest.raises(ValueError):
        byte2hex(256)


def test_compare_equal_and_different():
    assert compare(b"abc", b"abc", 3) is True
    assert compare(b"abc", b"abd", 3) is False


def test_compare_prefix_only():
    assert compare(b"abcX", b"abcY", 3) is True


def test_compare_whole_buffers():
    assert compare(b"abc", b"abc") is True
    assert compare(b"abc", b"ab") is False


def test_compare_size_too_large():
    with pytest.raises(ValueError):
        compare(b"ab", b"abc", 3)


def test_byte_swap_value():
    assert byte_swap(0x1234) == 0x3412


@pytest.mark.parametrize("value", [0x0000, 0x00FF, 0xFF00, 0xABCD, 0xFFFF])
def test_byte_swap_involution(value):
    assert byte_swap(byte_swap(value)) == value