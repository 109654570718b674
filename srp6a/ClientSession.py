from dataclasses import dataclass
from logging import Logger

from srp6a.SRPError import (
    ValidationError, InvalidClientPublicValueError,
    InvalidServerPublicValueError, BadServerCredentialsError, SerializationError,
)
from srp6a.SRPSession import SRPSession, state_field
from srp6a.routines import SRPRoutines
from srp6a.types import ClientState, ClientCredentials
from srp6a.utils import int_to_hex, hex_to_int, constant_time_equals

from typing import Any, Callable, Dict, Optional, Union

# Variable names match the RFC (I, IH, s, A, B, M1, M2, S)

@dataclass(frozen = True)
class ClientStep1State:
    I: str
    IH: bytes

@dataclass(frozen = True)
class ClientStep2State:
    A: int
    M1: int
    S: int

class SRPClientSession(SRPSession):
    """
    Client side of the exchange: INIT -> STEP_1 -> STEP_2 -> STEP_3

    A failed step leaves the session ABORTED, a new session is needed for a new attempt.
    """

    _ABORTED = ClientState.ABORTED

    _state: ClientState
    _record: Optional[Union[ClientStep1State, ClientStep2State]]

    I = state_field("I", "User identity (I)")
    identity_hash = state_field("IH", "User identity hash (IH)")
    A = state_field("A", "Public client value (A)")
    M1 = state_field("M1", "Client evidence (M1)")
    S = state_field("S", "Shared key (S)")

    def __init__(self, routines: SRPRoutines, timeout: Optional[float] = None,
                       logger: Optional[Logger] = None, clock: Optional[Callable[[], float]] = None):
        super().__init__(routines, timeout, logger, clock)

        self._state = ClientState.INIT

    @property
    def state(self) -> ClientState:
        return self._state

    async def step1(self, I: str, P: str) -> None:
        """
        Start the authentication. The password is only used to compute the identity hash, it is not kept

        :param I: User identity
        :param P: User password
        """

        self._expect_state(ClientState.INIT)
        self._throw_on_timeout()

        try:
            if not I or not I.strip():
                raise ValidationError("User identity must not be null nor empty")

            if not P:
                raise ValidationError("User password must not be null")

            IH = await self._routines.compute_identity_hash(I, P)
        except Exception as e:
            self._abort(e)
            raise

        self._transition(ClientState.STEP_1, ClientStep1State(I, IH))

    async def step2(self, salt: int, B: int) -> ClientCredentials:
        """
        Answer the server challenge

        :param salt: Salt of the user, sent by the server
        :param B: Server public value

        :return: Public value A and evidence M1 to send to the server
        """

        self._expect_state(ClientState.STEP_1)
        self._throw_on_timeout()

        try:
            record = await self._compute_credentials(salt, B)
        except Exception as e:
            self._abort(e)
            raise

        self._transition(ClientState.STEP_2, record)

        return ClientCredentials(record.A, record.M1)

    async def _compute_credentials(self, salt: int, B: int) -> ClientStep2State:
        if not salt:
            raise ValidationError("Salt (s) must not be null")

        if not B:
            raise ValidationError("Public server value (B) must not be null")

        routines = self._routines

        if not routines.is_valid_public_value(B):
            raise InvalidServerPublicValueError(f"Invalid server public value (B): {B:x}")

        I, IH = self._record.I, self._record.IH

        x = await routines.compute_x_step2(salt, IH)
        a = routines.generate_private_value()
        A = routines.compute_client_public_value(a)
        # cannot happen with a in [1, N[, but A = 0 would give away S
        if not routines.is_valid_public_value(A):
            raise InvalidClientPublicValueError(f"Bad client public value (A): {A:x}")

        k = await routines.compute_k()
        u = await routines.compute_u(A, B)
        S = routines.compute_client_session_key(k, x, u, a, B)
        M1 = await routines.compute_client_evidence(I, salt, A, B, S)

        return ClientStep2State(A, M1, S)

    async def step3(self, M2: int) -> None:
        """
        Verify the server evidence, authenticating the server

        :param M2: Server evidence message
        """

        self._expect_state(ClientState.STEP_2)
        self._throw_on_timeout()

        try:
            if not M2:
                raise ValidationError("Server evidence (M2) must not be null")

            computed_M2 = await self._routines.compute_server_evidence(self._record.A, self._record.M1, self._record.S)
            if not constant_time_equals(computed_M2, M2):
                self._logger.warning("Server evidence (M2) mismatch")

                raise BadServerCredentialsError()
        except Exception as e:
            self._abort(e)
            raise

        # A, M1 and S stay readable: S is what the application derives its keys from
        self._transition(ClientState.STEP_3, self._record)

    async def hashed_shared_key(self) -> int:
        """
        H(S), usable as a session key once the exchange is done
        """

        return await self._routines.hash_as_int(self.S)

    def to_state(self) -> Dict[str, Any]:
        """
        Snapshot of the session, to resume it later with from_state

        Only STEP_1 and STEP_2 sessions can be saved.
        """

        self._throw_on_timeout()

        if self._state is ClientState.STEP_1:
            return { "I": self._record.I, "IH": list(self._record.IH) }

        if self._state is ClientState.STEP_2:
            return { "A": int_to_hex(self._record.A),
                     "M1": int_to_hex(self._record.M1),
                     "S": int_to_hex(self._record.S) }

        raise SerializationError(f"Cannot save a client session in state {self._state.value}")

    @classmethod
    def from_state(cls, routines: SRPRoutines, state: Dict[str, Any], **kwargs) -> "SRPClientSession":
        """
        Resume a session saved with to_state. kwargs are passed to the constructor
        """

        assert type(state) is dict, f"Expected type 'dict' for state, but got type '{type(state)}'"

        session = cls(routines, **kwargs)

        if "IH" in state:
            session._transition(ClientState.STEP_1, ClientStep1State(state["I"], bytes(state["IH"])))
        else:
            session._transition(ClientState.STEP_2, ClientStep2State(hex_to_int(state["A"]),
                                                                      hex_to_int(state["M1"]),
                                                                      hex_to_int(state["S"])))

        return session
