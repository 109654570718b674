from time import monotonic
from logging import Logger

from srp6a.SRPError import (
    StateViolationError, SessionTimeoutError, FieldNotSetError, FieldAlreadySetError,
)
from srp6a.routines import SRPRoutines
from srp6a.types import StrEnum

from typing import Any, Callable, Optional, NoReturn

def state_field(name: str, label: str) -> property:
    """
    Read-only view on a field of the current state record

    Reading a field the current state does not hold raises FieldNotSetError,
    assigning a field that is already set raises FieldAlreadySetError.
    """

    def getter(self: "SRPSession") -> Any:
        value = getattr(self._record, name, None)
        if value is None:
            raise FieldNotSetError(label)

        return value

    def setter(self: "SRPSession", value: Any) -> NoReturn:
        if getattr(self._record, name, None) is not None:
            raise FieldAlreadySetError(label)

        raise AttributeError(f"{label} is only set by the protocol steps")

    return property(getter, setter, doc = label)

class SRPSession:
    """
    State shared by the client and server sessions: routines, logger and inactivity timeout
    """

    _routines: SRPRoutines
    _logger: Logger

    _state: StrEnum
    _record: Optional[Any]

    _timeout: Optional[float]
    _deadline: Optional[float]
    _timed_out: bool
    _clock: Callable[[], float]

    def __init__(self, routines: SRPRoutines, timeout: Optional[float] = None,
                       logger: Optional[Logger] = None, clock: Optional[Callable[[], float]] = None):
        """
        :param routines: Routines used for the computations
        :param timeout: Inactivity time (in seconds) after which the session is abandoned
        :param logger: Logger for the session events
        :param clock: Monotonic clock (in seconds), mostly useful for tests
        """

        assert isinstance(routines, SRPRoutines), f"Expected type 'SRPRoutines' for routines, but got type '{type(routines)}'"
        assert timeout is None or 0 < timeout, f"Expected None or a positive timeout, but got {timeout}"

        self._routines = routines

        if logger is None:
            self._logger = Logger("srp6a")
        else:
            self._logger = logger

        self._record = None

        self._timeout = timeout
        self._deadline = None
        self._timed_out = False
        self._clock = monotonic if clock is None else clock

    @property
    def routines(self) -> SRPRoutines:
        return self._routines

    @property
    def timeout(self) -> Optional[float]:
        """
        Inactivity time (in seconds) after which the session is abandoned
        """

        return self._timeout

    @property
    def timed_out(self) -> bool:
        if not self._timed_out and self._deadline is not None and self._deadline <= self._clock():
            self._timed_out = True
            # intermediate values are not kept around once abandoned
            self._record = None

        return self._timed_out

    def _throw_on_timeout(self) -> None:
        if self.timed_out:
            self._logger.warning(f"{type(self).__name__} timed out")

            raise SessionTimeoutError()

    def _register_activity(self) -> None:
        if self._timeout is not None and not self._timed_out:
            self._deadline = self._clock() + self._timeout

    def _expect_state(self, state: StrEnum, message: Optional[str] = None) -> None:
        if self._state != state:
            raise StateViolationError(state.value, self._state.value, message)

    def _transition(self, state: StrEnum, record: Optional[Any]) -> None:
        self._logger.debug(f"{type(self).__name__}: {self._state.value} -> {state.value}")

        self._state = state
        self._record = record
        self._register_activity()

    def _abort(self, e: Exception) -> None:
        self._logger.debug(f"{type(self).__name__}: {self._state.value} aborted ({type(e).__name__})")

        self._state = self._ABORTED
        self._record = None
