from inspect import isawaitable

from srp6a.SRPError import InvalidPrimeGroupError, UnknownHashError
from srp6a.groups import KNOWN_PRIME_GROUPS, DEFAULT_PRIME_GROUP
from srp6a.types import HashAlgorithm, PrimeGroup
from srp6a.utils import pad_bytes

from typing import Awaitable, Callable, Dict, Optional, Union

HashFunction = Callable[[bytes], Union[bytes, Awaitable[bytes]]]

class SRPParameters:
    """
    Cryptographic domain of an SRP exchange: a prime group and a hash function
    """

    KNOWN_PRIME_GROUPS: Dict[int, PrimeGroup] = KNOWN_PRIME_GROUPS
    KNOWN_HASHES: Dict[str, HashFunction] = { algorithm.value: algorithm.digest for algorithm in HashAlgorithm }

    DEFAULT_HASH = HashAlgorithm.SHA512

    _prime_group: PrimeGroup
    _H: HashFunction
    _hash_algorithm: Optional[HashAlgorithm]

    def __init__(self, prime_group: Optional[PrimeGroup] = None,
                       H: Optional[Union[str, HashAlgorithm, HashFunction]] = None):
        """
        :param prime_group: Group (N, g) to use. Defaults to the 2048 bits group of RFC 5054
        :param H: Hash function, either a registered name ("SHA-256"), a HashAlgorithm or a
                  function taking bytes and returning the digest (or an awaitable of it)
        """

        if prime_group is None:
            prime_group = DEFAULT_PRIME_GROUP

        self._prime_group = self._check_prime_group(prime_group)

        if H is None:
            H = self.DEFAULT_HASH

        if isinstance(H, str):
            # HashAlgorithm is a str too
            self._hash_algorithm = HashAlgorithm.from_name(H)
            self._H = self._hash_algorithm.digest
        elif callable(H):
            self._hash_algorithm = self._find_algorithm(H)
            self._H = H
        else:
            raise UnknownHashError(f"Expected a hash name or a hash function, but got type '{type(H)}'")

    @staticmethod
    def _check_prime_group(prime_group: PrimeGroup) -> PrimeGroup:
        try:
            N, g = prime_group
        except (TypeError, ValueError):
            raise InvalidPrimeGroupError(f"Expected a (N, g) pair for the prime group, but got {prime_group!r}")

        if type(N) is not int or type(g) is not int:
            raise InvalidPrimeGroupError(f"Expected integers for N and g, but got types '{type(N)}' and '{type(g)}'")

        if N < 3:
            raise InvalidPrimeGroupError(f"Modulus N is too small: {N}")

        if not 1 < g < N:
            raise InvalidPrimeGroupError(f"Generator g must be in ]1, N[, but is {g}")

        return PrimeGroup(N, g)

    @staticmethod
    def _find_algorithm(H: HashFunction) -> Optional[HashAlgorithm]:
        for algorithm in HashAlgorithm:
            if H == algorithm.digest:
                return algorithm

        return None

    @property
    def prime_group(self) -> PrimeGroup:
        return self._prime_group

    @property
    def N(self) -> int:
        return self._prime_group.N

    @property
    def g(self) -> int:
        return self._prime_group.g

    @property
    def NBits(self) -> int:
        return self._prime_group.N.bit_length()

    @property
    def H(self) -> HashFunction:
        return self._H

    @property
    def hash_algorithm(self) -> Optional[HashAlgorithm]:
        """
        Registered algorithm backing H, None for a custom hash function
        """

        return self._hash_algorithm

    @property
    def hash_name(self) -> str:
        """
        Registered name of the hash function, used when serializing

        :raise UnknownHashError: if H is not a registered hash function
        """

        if self._hash_algorithm is None:
            raise UnknownHashError("Cannot serialize unknown hash function")

        return self._hash_algorithm.value

    async def hash(self, *arrays: bytes) -> bytes:
        """
        Digest of the concatenation of arrays
        """

        digest = self._H(b"".join(arrays))
        if isawaitable(digest):
            digest = await digest

        return digest

    async def hash_padded(self, target_len: int, *arrays: bytes) -> bytes:
        """
        Digest of the concatenation of arrays, each left padded with zeroes to target_len bytes
        """

        return await self.hash(*(pad_bytes(a, target_len) for a in arrays))

    async def hash_bit_count(self) -> int:
        if self._hash_algorithm is not None:
            return self._hash_algorithm.digest_size * 8

        return len(await self.hash(b"\x01")) * 8

    def __eq__(self, o: object) -> bool:
        if not isinstance(o, SRPParameters):
            return NotImplemented

        return self._prime_group == o._prime_group and self._H == o._H

    def __hash__(self) -> int:
        return hash((self._prime_group, self._H))

    def __repr__(self) -> str:
        H = self._hash_algorithm.value if self._hash_algorithm is not None else repr(self._H)

        return f"SRPParameters(NBits={self.NBits}, g={self.g}, H={H})"
