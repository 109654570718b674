# Default routines used for the SRP-6a computations
#
# Quantities are named after RFC 2945 / RFC 5054 (N, g, k, s, x, v, a, A, b, B, u, S, M1, M2).
# The identity and the salt are NOT folded into the identity hash and the
# evidence messages: x = H(s | H(P)), M1 = H(A | B | S), M2 = H(A | M1 | S).
# Subclass and override compute_identity_hash / compute_client_evidence to use
# another variant, on both sides.

from srp6a.Parameters import SRPParameters
from srp6a.utils import btoi, itob, mod_pow, generate_random_int, string_to_bytes

from typing import Callable

class SRPRoutines:
    _parameters: SRPParameters

    def __init__(self, parameters: SRPParameters):
        assert isinstance(parameters, SRPParameters), f"Expected type 'SRPParameters' for parameters, but got type '{type(parameters)}'"

        self._parameters = parameters

    @property
    def parameters(self) -> SRPParameters:
        return self._parameters

    async def hash(self, *arrays: bytes) -> bytes:
        return await self._parameters.hash(*arrays)

    async def hash_padded(self, *arrays: bytes) -> bytes:
        target_len = (self._parameters.NBits + 7) // 8

        return await self._parameters.hash_padded(target_len, *arrays)

    async def hash_as_int(self, value: int) -> int:
        return btoi(await self.hash(itob(value)))

    async def compute_k(self) -> int:
        """
        Multiplier parameter k = H(N | PAD(g))
        """

        return btoi(await self.hash_padded(itob(self._parameters.N), itob(self._parameters.g)))

    async def generate_random_salt(self, num_bytes: int = None) -> int:
        """
        Generate a random salt

        :param num_bytes: Size of the salt (in bytes). Defaults to twice the size of the hash output
        """

        if not num_bytes:
            num_bytes = 2 * (await self._parameters.hash_bit_count()) // 8

        return generate_random_int(num_bytes)

    async def compute_identity_hash(self, I: str, P: str) -> bytes:
        return await self.hash(string_to_bytes(P))

    async def compute_x(self, I: str, s: int, P: str) -> int:
        """
        Private key x = H(s | H(P)), derived from the salt and the credentials
        """

        return await self.compute_x_step2(s, await self.compute_identity_hash(I, P))

    async def compute_x_step2(self, s: int, identity_hash: bytes) -> int:
        """
        Private key x, derived from the salt and an already computed identity hash
        """

        return btoi(await self.hash(itob(s), identity_hash))

    def compute_verifier(self, x: int) -> int:
        return mod_pow(self._parameters.g, x, self._parameters.N)

    def generate_private_value(self) -> int:
        """
        Generate an ephemeral private value (a or b) in [1, N[
        """

        num_bits = max(256, self._parameters.NBits)

        pv = 0
        while pv == 0:
            pv = generate_random_int((num_bits + 7) // 8) % self._parameters.N

        return pv

    def compute_client_public_value(self, a: int) -> int:
        return mod_pow(self._parameters.g, a, self._parameters.N)

    def compute_server_public_value(self, k: int, v: int, b: int) -> int:
        N = self._parameters.N

        return (mod_pow(self._parameters.g, b, N) + v * k) % N

    def is_valid_public_value(self, value: int) -> bool:
        """
        Reject negative public values and multiples of N, the latter would force a known session key
        """

        return 0 < value and value % self._parameters.N != 0

    async def compute_u(self, A: int, B: int) -> int:
        """
        Scrambling parameter u = H(PAD(A) | PAD(B))
        """

        return btoi(await self.hash_padded(itob(A), itob(B)))

    def compute_client_session_key(self, k: int, x: int, u: int, a: int, B: int) -> int:
        """
        S = (B - k * g^x) ^ (a + u * x) mod N
        """

        N = self._parameters.N
        exp = u * x + a
        temp = (mod_pow(self._parameters.g, x, N) * k) % N

        # B + N - temp stays positive
        return mod_pow(B % N + N - temp, exp, N)

    def compute_server_session_key(self, v: int, u: int, A: int, b: int) -> int:
        """
        S = (A * v^u) ^ b mod N
        """

        N = self._parameters.N

        return mod_pow((mod_pow(v, u, N) * A) % N, b, N)

    async def compute_client_evidence(self, I: str, s: int, A: int, B: int, S: int) -> int:
        return btoi(await self.hash(itob(A), itob(B), itob(S)))

    async def compute_server_evidence(self, A: int, M1: int, S: int) -> int:
        return btoi(await self.hash(itob(A), itob(M1), itob(S)))

SRPRoutinesFactory = Callable[[SRPParameters], SRPRoutines]
