import secrets

from srp6a.SRPError import SRPArithmeticError

def btoi(b: bytes) -> int:
    return int.from_bytes(b, 'big', signed = False)

def itob(i: int) -> bytes:
    # zero still takes one byte, so H(0) is well defined
    length = max(1, (i.bit_length() + 7) // 8)

    return i.to_bytes(length, 'big', signed = False)

def pad_bytes(b: bytes, length: int) -> bytes:
    """
    Left pad with zeroes up to length. Buffers already longer than length are returned as is
    """

    return b.rjust(length, b'\x00')

def string_to_bytes(s: str) -> bytes:
    return s.encode("utf-8")

def int_to_hex(i: int) -> str:
    """
    Lowercase hex representation of a non negative integer, without prefix
    """

    assert type(i) is int, f"Expected type 'int' for i, but got type '{type(i)}'"
    assert 0 <= i, f"Expected a non negative integer, but got {i}"

    return format(i, "x")

def int_to_padded_hex(i: int, length: int) -> str:
    """
    Fixed-width hex representation of i, zero padded to length bytes

    :param i: Integer to encode
    :param length: Width of the encoding (in bytes)
    """

    return int_to_hex(i).rjust(2 * length, "0")

def hex_to_int(h: str) -> int:
    assert type(h) is str, f"Expected type 'str' for h, but got type '{type(h)}'"

    return int(h, 16)

def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """
    Compute base^exponent mod modulus

    :param base: Non negative base
    :param exponent: Non negative exponent
    :param modulus: Strictly positive modulus
    """

    if base < 0:
        raise SRPArithmeticError(f"Base must not be negative: {base:x}")

    if exponent < 0:
        raise SRPArithmeticError(f"Exponent must not be negative: {exponent:x}")

    if modulus <= 0:
        raise SRPArithmeticError(f"Modulus must be strictly positive: {modulus:x}")

    return pow(base, exponent, modulus)

def constant_time_equals(expected: int, received: int) -> bool:
    """
    Compare a computed value with a received one in constant time

    :param expected: Value computed locally, non negative
    :param received: Value sent by the peer, anything that is not a non negative int never matches
    """

    if type(received) is not int or received < 0:
        return False

    return secrets.compare_digest(itob(expected), itob(received))

def random_bytes(length: int) -> bytes:
    return secrets.token_bytes(length)

def generate_random_int(num_bytes: int = 16) -> int:
    return btoi(random_bytes(num_bytes))

def generate_random_string(length: int = 10) -> str:
    """
    Generate a string of printable ASCII characters with a secure random generator

    :param length: Number of characters of the string
    """

    chars = []
    for byte in random_bytes(length):
        char = byte & 0x7f
        if char < 32:
            char |= 32
        if char == 0x7f:
            char = 0x7e

        chars.append(chr(char))

    return "".join(chars)
