import hashlib

from srp6a import (
    SRPParameters, HashAlgorithm, PrimeGroup, KNOWN_PRIME_GROUPS,
    UnknownHashError, InvalidPrimeGroupError,
)

import pytest

def test_default_parameters():
    parameters = SRPParameters()

    assert parameters.NBits == 2048
    assert parameters.g == 2
    assert parameters.prime_group == KNOWN_PRIME_GROUPS[2048]
    assert parameters.hash_algorithm is HashAlgorithm.SHA512
    assert parameters.hash_name == "SHA-512"

# SHA-256 of the lowercase hex of N, the RFC 3526 ones match the OpenSSL modp groups
@pytest.mark.parametrize("bits,g,digest", [
    (1024, 2, "0995b627385b26f55dc1fe18de984252e0357b9f2c884d8d3f9fd9f2de32f408"),
    (1536, 2, "a7c305a29783f69679719847445687fc14dc831724f3caf9b66de2953d9150e9"),
    (2048, 2, "ef88b43c555c005c89f9c32dbd2ced49b0bb57e2cd1f2b5e9eca181afdf09c56"),
    (3072, 5, "30a45e27c3a0a6f934cd558e88e937625082b19bd435f74f04d7500e5032d88e"),
    (4096, 5, "233836aba654664fc65121b25f1760c0e72456e834bc42315fa21d38ade81cac"),
    (6144, 5, "b84b67a0c9b0d7870cedf59880bed18dff60d4e965fe0f82ee70618861cc0a07"),
    (8192, 19, "a408aa7fd5e69ae6886c3b3fd50051efc417d62cf224cebf8d8aeb49654185ed"),
])
def test_known_prime_groups(bits: int, g: int, digest: str):
    parameters = SRPParameters(KNOWN_PRIME_GROUPS[bits])

    assert parameters.NBits == bits
    assert parameters.N % 2 == 1
    assert parameters.g == g
    assert hashlib.sha256(format(parameters.N, "x").encode()).hexdigest() == digest

def test_known_prime_groups_exhaustive():
    assert sorted(KNOWN_PRIME_GROUPS) == [ 1024, 1536, 2048, 3072, 4096, 6144, 8192 ]

@pytest.mark.parametrize("name,algorithm", [
    ("SHA-1", HashAlgorithm.SHA1),
    ("SHA-256", HashAlgorithm.SHA256),
    ("sha256", HashAlgorithm.SHA256),
    ("SHA384", HashAlgorithm.SHA384),
    (HashAlgorithm.SHA512, HashAlgorithm.SHA512),
])
def test_hash_names(name, algorithm: HashAlgorithm):
    parameters = SRPParameters(H = name)

    assert parameters.hash_algorithm is algorithm
    assert parameters.hash_name == algorithm.value

@pytest.mark.parametrize("name", [ "MD5", "SHA-3", "", "SHA-512 " ])
def test_unknown_hash_name(name: str):
    with pytest.raises(UnknownHashError):
        SRPParameters(H = name)

def test_not_a_hash():
    with pytest.raises(UnknownHashError):
        SRPParameters(H = 42)

@pytest.mark.parametrize("algorithm,reference", [
    (HashAlgorithm.SHA1, hashlib.sha1),
    (HashAlgorithm.SHA256, hashlib.sha256),
    (HashAlgorithm.SHA384, hashlib.sha384),
    (HashAlgorithm.SHA512, hashlib.sha512),
])
async def test_hash(algorithm: HashAlgorithm, reference):
    parameters = SRPParameters(H = algorithm)

    assert await parameters.hash(b"abc", b"def") == reference(b"abcdef").digest()
    assert await parameters.hash_bit_count() == reference().digest_size * 8

async def test_hash_padded():
    parameters = SRPParameters(H = "SHA-256")

    digest = await parameters.hash_padded(4, b"\x01", b"\x02\x03")

    assert digest == hashlib.sha256(b"\x00\x00\x00\x01\x00\x00\x02\x03").digest()

async def test_custom_hash_function():
    parameters = SRPParameters(H = lambda data: hashlib.sha256(data).digest())

    assert parameters.hash_algorithm is None
    assert await parameters.hash(b"abc") == hashlib.sha256(b"abc").digest()
    assert await parameters.hash_bit_count() == 256

    with pytest.raises(UnknownHashError):
        parameters.hash_name

async def test_async_hash_function():
    async def H(data: bytes) -> bytes:
        return hashlib.sha384(data).digest()

    parameters = SRPParameters(H = H)

    assert await parameters.hash(b"a", b"bc") == hashlib.sha384(b"abc").digest()
    assert await parameters.hash_bit_count() == 384

def test_registered_digest_is_recognized():
    parameters = SRPParameters(H = HashAlgorithm.SHA256.digest)

    assert parameters.hash_algorithm is HashAlgorithm.SHA256
    assert SRPParameters.KNOWN_HASHES["SHA-256"] == HashAlgorithm.SHA256.digest

def test_custom_prime_group():
    parameters = SRPParameters(PrimeGroup(23, 5), "SHA-1")

    assert parameters.N == 23
    assert parameters.g == 5
    assert parameters.NBits == 5

@pytest.mark.parametrize("group", [
    (2, 1),
    (23, 1),
    (23, 23),
    (23, 42),
    ("23", 5),
    (23,),
])
def test_invalid_prime_group(group):
    with pytest.raises(InvalidPrimeGroupError):
        SRPParameters(group)

def test_equality():
    assert SRPParameters() == SRPParameters(KNOWN_PRIME_GROUPS[2048], "SHA-512")
    assert SRPParameters() != SRPParameters(H = "SHA-256")
    assert SRPParameters() != SRPParameters(KNOWN_PRIME_GROUPS[1024])
