from logging import Logger

from srp6a.Parameters import SRPParameters
from srp6a.routines import SRPRoutines, SRPRoutinesFactory
from srp6a.ClientSession import SRPClientSession
from srp6a.ServerSession import SRPServerSession
from srp6a.srp import create_verifier_and_salt
from srp6a.types import VerifierAndSalt

from typing import Dict, Any, Optional

class SRPConfig:
    """
    Parameters, routines and session settings shared by every exchange of an application
    """

    _DEFAULT_SETTINGS = {
        "timeout": None,        # inactivity timeout of the sessions (in seconds)
        "salt_bytes": None,     # size of the generated salts, twice the hash size if None
    }

    _parameters: SRPParameters
    _routines: SRPRoutines
    _settings: Dict[str, Any]
    _logger: Optional[Logger]

    def __init__(self, parameters: Optional[SRPParameters] = None,
                       routines_factory: SRPRoutinesFactory = SRPRoutines,
                       logger: Optional[Logger] = None, **kwargs):
        if parameters is None:
            parameters = SRPParameters()

        assert isinstance(parameters, SRPParameters), f"Expected type 'SRPParameters' for parameters, but got type '{type(parameters)}'"

        self._parameters = parameters
        self._routines = routines_factory(parameters)
        self._logger = logger

        self._settings = {}

        for setting in self._DEFAULT_SETTINGS:
            self._settings[setting] = kwargs.pop(setting, self._DEFAULT_SETTINGS[setting])

        assert len(kwargs) == 0, f"Invalid setting name: {', '.join(kwargs)}"

    def __setitem__(self, o: str, v: Any) -> None:
        assert o in self._settings, f"Invalid setting: {o}"

        self._settings[o] = v

    def __getitem__(self, o: str) -> Any:
        assert o in self._settings, f"Invalid setting: {o}"

        return self._settings[o]

    @property
    def parameters(self) -> SRPParameters:
        return self._parameters

    @property
    def routines(self) -> SRPRoutines:
        return self._routines

    def client_session(self) -> SRPClientSession:
        return SRPClientSession(self._routines, self._settings["timeout"], self._logger)

    def server_session(self) -> SRPServerSession:
        return SRPServerSession(self._routines, self._settings["timeout"], self._logger)

    async def create_verifier_and_salt(self, I: str, P: str) -> VerifierAndSalt:
        return await create_verifier_and_salt(self._routines, I, P, self._settings["salt_bytes"])
