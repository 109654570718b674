from enum import Enum
from Crypto.Hash import SHA1, SHA256, SHA384, SHA512

from srp6a.SRPError import UnknownHashError

from typing import NamedTuple, Union

class StrEnum(str, Enum):
    pass

class HashAlgorithm(StrEnum):
    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA384 = "SHA-384"
    SHA512 = "SHA-512"

    def digest(self, data: bytes) -> bytes:
        return _HASH_MODULES[self].new(data).digest()

    @property
    def digest_size(self) -> int:
        """
        Size of the digest (in bytes)
        """

        return _HASH_MODULES[self].digest_size

    @classmethod
    def from_name(cls, name: Union[str, "HashAlgorithm"]) -> "HashAlgorithm":
        """
        Look up a registered hash algorithm by name ("SHA-256", "sha256" and "SHA256" are accepted)
        """

        if isinstance(name, cls):
            return name

        assert type(name) is str, f"Expected type 'str' for name, but got type '{type(name)}'"

        normalized = name.upper().replace("-", "")
        for algorithm in cls:
            if algorithm.value.replace("-", "") == normalized:
                return algorithm

        raise UnknownHashError(f"Unknown hash function: {name}")

_HASH_MODULES = {
    HashAlgorithm.SHA1: SHA1,
    HashAlgorithm.SHA256: SHA256,
    HashAlgorithm.SHA384: SHA384,
    HashAlgorithm.SHA512: SHA512,
}

class PrimeGroup(NamedTuple):
    N: int
    g: int

class VerifierAndSalt(NamedTuple):
    s: int
    v: int

class ClientCredentials(NamedTuple):
    A: int
    M1: int

class ClientState(StrEnum):
    INIT = "INIT"
    STEP_1 = "STEP_1"
    STEP_2 = "STEP_2"
    STEP_3 = "STEP_3"
    ABORTED = "ABORTED"

class ServerState(StrEnum):
    INIT = "init"
    STEP_1 = "step1"
    STEP_2 = "step2"
    ABORTED = "aborted"
