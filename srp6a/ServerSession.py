from dataclasses import dataclass
from logging import Logger

from srp6a.SRPError import (
    ValidationError, ClientPublicValueNullError, ClientEvidenceNullError,
    InvalidClientPublicValueError, BadClientCredentialsError, SerializationError,
)
from srp6a.SRPSession import SRPSession, state_field
from srp6a.routines import SRPRoutines
from srp6a.types import ServerState
from srp6a.utils import int_to_hex, hex_to_int, constant_time_equals

from typing import Any, Callable, Dict, Optional

# Variable names match the RFC (I, s, v, b, B, A, M1, M2, S)

@dataclass(frozen = True)
class ServerStep1State:
    identifier: str
    salt: int
    verifier: int
    b: int
    B: int

class SRPServerSession(SRPSession):
    """
    Server side of the exchange: init -> step1 -> step2

    Between step1 and step2 the session usually has to outlive the request that
    created it, see to_state / from_state and the serde module.
    """

    _ABORTED = ServerState.ABORTED

    _state: ServerState
    _record: Optional[ServerStep1State]

    identifier = state_field("identifier", "User identity (I)")
    salt = state_field("salt", "Salt (s)")
    verifier = state_field("verifier", "Verifier (v)")
    B = state_field("B", "Public server value (B)")

    def __init__(self, routines: SRPRoutines, timeout: Optional[float] = None,
                       logger: Optional[Logger] = None, clock: Optional[Callable[[], float]] = None):
        super().__init__(routines, timeout, logger, clock)

        self._state = ServerState.INIT

    @property
    def state(self) -> ServerState:
        return self._state

    async def step1(self, identifier: str, salt: int, verifier: int) -> int:
        """
        Create the challenge for a user

        :param identifier: User identity
        :param salt: Salt stored with the verifier
        :param verifier: Verifier of the user

        :return: Server public value B to send to the client, along with the salt
        """

        self._expect_state(ServerState.INIT, "step1 not from init")
        self._throw_on_timeout()

        try:
            if not identifier or not identifier.strip():
                raise ValidationError("User identity must not be null nor empty")

            if not salt:
                raise ValidationError("Salt (s) must not be null")

            if not verifier:
                raise ValidationError("Verifier (v) must not be null")

            b = self._routines.generate_private_value()
            k = await self._routines.compute_k()
            B = self._routines.compute_server_public_value(k, verifier, b)
        except Exception as e:
            self._abort(e)
            raise

        self._transition(ServerState.STEP_1, ServerStep1State(identifier, salt, verifier, b, B))

        return B

    def _check_client_public_value(self, A: int) -> None:
        if A is None:
            raise ClientPublicValueNullError()

        if not self._routines.is_valid_public_value(A):
            raise InvalidClientPublicValueError(f"Invalid client public value (A): {A:x}")

    def _compute_session_key(self, A: int, u: int) -> int:
        return self._routines.compute_server_session_key(self._record.verifier, u, A, self._record.b)

    async def session_key(self, A: int) -> int:
        """
        Compute the shared key S without computing or checking the client evidence

        :param A: Client public value
        """

        self._expect_state(ServerState.STEP_1, "session_key not from step1")
        self._throw_on_timeout()

        self._check_client_public_value(A)

        u = await self._routines.compute_u(A, self._record.B)

        return self._compute_session_key(A, u)

    async def step2(self, A: int, M1: int) -> int:
        """
        Verify the client evidence, authenticating the client

        :param A: Client public value
        :param M1: Client evidence message

        :return: Server evidence M2 to send to the client
        """

        self._expect_state(ServerState.STEP_1, "step2 not from step1")
        self._throw_on_timeout()

        try:
            self._check_client_public_value(A)

            if M1 is None:
                raise ClientEvidenceNullError()

            routines = self._routines
            record = self._record

            u = await routines.compute_u(A, record.B)
            S = self._compute_session_key(A, u)

            computed_M1 = await routines.compute_client_evidence(record.identifier, record.salt, A, record.B, S)
            if not constant_time_equals(computed_M1, M1):
                self._logger.warning(f"Client evidence (M1) mismatch for {record.identifier!r}")

                raise BadClientCredentialsError()

            M2 = await routines.compute_server_evidence(A, M1, S)
        except Exception as e:
            self._abort(e)
            raise

        # nothing is kept once done
        self._transition(ServerState.STEP_2, None)

        return M2

    def to_state(self) -> Dict[str, str]:
        """
        Snapshot of a step1 session, to resume it later with from_state
        """

        self._throw_on_timeout()

        if self._state is not ServerState.STEP_1:
            raise SerializationError(f"Cannot save a server session in state {self._state.value}")

        record = self._record

        return { "identifier": record.identifier,
                 "salt": int_to_hex(record.salt),
                 "verifier": int_to_hex(record.verifier),
                 "b": int_to_hex(record.b),
                 "B": int_to_hex(record.B) }

    @classmethod
    def from_state(cls, routines: SRPRoutines, state: Dict[str, Any], **kwargs) -> "SRPServerSession":
        """
        Resume a session saved with to_state. kwargs are passed to the constructor
        """

        assert type(state) is dict, f"Expected type 'dict' for state, but got type '{type(state)}'"

        session = cls(routines, **kwargs)
        session._transition(ServerState.STEP_1, ServerStep1State(state["identifier"],
                                                                  hex_to_int(state["salt"]),
                                                                  hex_to_int(state["verifier"]),
                                                                  hex_to_int(state["b"]),
                                                                  hex_to_int(state["B"])))

        return session
