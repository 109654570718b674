from srp6a import SRPArithmeticError
from srp6a.utils import (
    btoi, itob, pad_bytes, string_to_bytes, int_to_hex, int_to_padded_hex, hex_to_int,
    mod_pow, constant_time_equals, generate_random_int, generate_random_string,
)

import pytest

@pytest.mark.parametrize("h", [ "aa11", "baa11", "1", "0" ])
def test_int_bytes_conversions(h: str):
    i = int(h, 16)

    assert btoi(itob(i)) == i

def test_itob():
    assert itob(0) == b"\x00"
    assert itob(1) == b"\x01"
    assert itob(0xff) == b"\xff"
    assert itob(0x100) == b"\x01\x00"

def test_pad_bytes():
    assert pad_bytes(b"\x01\x02", 4) == b"\x00\x00\x01\x02"
    assert pad_bytes(b"\x01\x02", 2) == b"\x01\x02"
    # longer buffers are left untouched
    assert pad_bytes(b"\x01\x02\x03", 2) == b"\x01\x02\x03"

def test_string_to_bytes():
    assert string_to_bytes("0123456") == bytes(range(0x30, 0x37))
    assert string_to_bytes("") == b""
    assert string_to_bytes("é") == b"\xc3\xa9"

def test_hex():
    assert int_to_hex(0xbeef) == "beef"
    assert int_to_hex(0) == "0"
    assert hex_to_int("BEEF") == 0xbeef
    assert int_to_padded_hex(0xbeef, 4) == "0000beef"

    with pytest.raises(AssertionError):
        int_to_hex(-1)

def test_mod_pow():
    assert mod_pow(2, 10, 1000) == 24
    assert mod_pow(3, 0, 7) == 1
    assert mod_pow(0, 5, 7) == 0

@pytest.mark.parametrize("base,exponent,modulus", [
    (-1, 2, 7),
    (2, -1, 7),
    (2, 3, 0),
    (2, 3, -7),
])
def test_mod_pow_errors(base: int, exponent: int, modulus: int):
    with pytest.raises(SRPArithmeticError):
        mod_pow(base, exponent, modulus)

    # still an ArithmeticError for the callers catching the builtin one
    with pytest.raises(ArithmeticError):
        mod_pow(base, exponent, modulus)

def test_generate_random_int():
    for _ in range(16):
        assert generate_random_int(4) < 2 ** 32

    assert generate_random_int() < 2 ** 128

def test_generate_random_string():
    assert len(generate_random_string()) == 10

    for length in range(32):
        s = generate_random_string(length)

        assert len(s) == length
        assert all(32 <= ord(c) < 0x7f for c in s)

def test_constant_time_equals():
    assert constant_time_equals(0x1234, 0x1234)
    assert constant_time_equals(0, 0)

    assert not constant_time_equals(0x1234, 0x1235)
    assert not constant_time_equals(0x12, 0x1200)
    assert not constant_time_equals(1, -1)
    assert not constant_time_equals(0x1234, "1234")
    assert not constant_time_equals(0x1234, None)
