from srp6a import SRPRoutines, ValidationError, create_verifier, create_verifier_and_salt, verify_credentials
from srp6a.utils import generate_random_int

import pytest

@pytest.mark.parametrize("I,s,P", [
    ("", 0x1234, "password"),
    (" ", 0x1234, "password"),
    (None, 0x1234, "password"),
    ("identifier", None, "password"),
    ("identifier", 0, "password"),
    ("identifier", 0x1234, ""),
    ("identifier", 0x1234, None),
])
async def test_create_verifier_errors(routines: SRPRoutines, I, s, P):
    with pytest.raises(ValidationError):
        await create_verifier(routines, I, s, P)

async def test_create_verifier(routines: SRPRoutines):
    s = generate_random_int()

    v = await create_verifier(routines, "alice", s, "password123")

    assert 0 < v < routines.parameters.N
    assert v == routines.compute_verifier(await routines.compute_x("alice", s, "password123"))
    # deterministic for a given salt
    assert v == await create_verifier(routines, "alice", s, "password123")

async def test_create_verifier_and_salt(routines: SRPRoutines):
    s, v = await create_verifier_and_salt(routines, "alice", "password123")

    # twice the SHA-512 output by default
    assert s.bit_length() <= 1024
    assert v == await create_verifier(routines, "alice", s, "password123")

    other = await create_verifier_and_salt(routines, "alice", "password123")
    assert other.s != s
    assert other.v != v

async def test_create_verifier_and_salt_size(routines: SRPRoutines):
    s, _ = await create_verifier_and_salt(routines, "alice", "password123", 16)

    assert s.bit_length() <= 128

async def test_verify_credentials(routines: SRPRoutines, user):
    assert await verify_credentials(routines, user["I"], user["s"], user["P"], user["v"])
    assert not await verify_credentials(routines, user["I"], user["s"], user["P"] + "x", user["v"])
