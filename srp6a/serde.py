# JSON (de)serialization of sessions, for servers keeping the step1 session
# between two independent requests and clients resuming an exchange
#
# Integers are hex strings, the identity hash a list of bytes and the hash
# function its registered name ("SHA-512").

from functools import partial
from json import dumps, loads, JSONDecodeError

from jsonschema import validate
from jsonschema.exceptions import ValidationError as SchemaValidationError

from srp6a.SRPError import SerializationError
from srp6a.Parameters import SRPParameters
from srp6a.routines import SRPRoutines, SRPRoutinesFactory
from srp6a.ClientSession import SRPClientSession
from srp6a.ServerSession import SRPServerSession
from srp6a.SRPSession import SRPSession
from srp6a.types import PrimeGroup
from srp6a.utils import int_to_hex, hex_to_int

from typing import Any, Dict, Type, TypeVar, Union

T = TypeVar("T", SRPClientSession, SRPServerSession)

dumps = partial(dumps, separators = (',', ':'), ensure_ascii = False)

_HEX = { "type": "string", "pattern": "^[0-9a-fA-F]+$" }

_PARAMETERS_SCHEMA = {
    "type": "object",
    "properties": {
        "N": _HEX,
        "g": _HEX,
        "H": { "type": "string" },
    },
    "required": [ "N", "g", "H" ],
    "additionalProperties": False,
}

_SERVER_STATE_SCHEMA = {
    "type": "object",
    "properties": {
        "identifier": { "type": "string", "minLength": 1 },
        "salt": _HEX,
        "verifier": _HEX,
        "b": _HEX,
        "B": _HEX,
    },
    "required": [ "identifier", "salt", "verifier", "b", "B" ],
    "additionalProperties": False,
}

_CLIENT_STATE_SCHEMA = {
    "oneOf": [
        {
            "type": "object",
            "properties": {
                "I": { "type": "string", "minLength": 1 },
                "IH": { "type": "array", "items": { "type": "integer", "minimum": 0, "maximum": 255 }, "minItems": 1 },
            },
            "required": [ "I", "IH" ],
            "additionalProperties": False,
        },
        {
            "type": "object",
            "properties": {
                "A": _HEX,
                "M1": _HEX,
                "S": _HEX,
            },
            "required": [ "A", "M1", "S" ],
            "additionalProperties": False,
        },
    ]
}

_STATE_SCHEMAS = {
    SRPServerSession: _SERVER_STATE_SCHEMA,
    SRPClientSession: _CLIENT_STATE_SCHEMA,
}

def _session_class(cls: type) -> type:
    for session_cls in _STATE_SCHEMAS:
        if issubclass(cls, session_cls):
            return session_cls

    raise SerializationError(f"Cannot (de)serialize type '{cls.__name__}'")

def _document_schema(cls: type) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "type": { "const": _session_class(cls).__name__ },
            "parameters": _PARAMETERS_SCHEMA,
            "state": _STATE_SCHEMAS[_session_class(cls)],
        },
        "required": [ "type", "parameters", "state" ],
    }

def serialize_parameters(parameters: SRPParameters) -> Dict[str, str]:
    """
    :raise UnknownHashError: if the hash function of the parameters is not a registered one
    """

    return { "N": int_to_hex(parameters.N),
             "g": int_to_hex(parameters.g),
             "H": parameters.hash_name }

def deserialize_parameters(data: Dict[str, str]) -> SRPParameters:
    """
    :raise UnknownHashError: if the hash function name is not a registered one
    """

    validate(data, _PARAMETERS_SCHEMA)

    return SRPParameters(PrimeGroup(hex_to_int(data["N"]), hex_to_int(data["g"])), data["H"])

def serialize(session: Union[SRPClientSession, SRPServerSession]) -> str:
    """
    Serialize a session (client in STEP_1 or STEP_2, server in step1) to a JSON string

    The inactivity timeout is not part of the serialization.

    :raise SessionTimeoutError: if the session expired, it cannot be resumed with a fresh timer
    """

    assert isinstance(session, SRPSession), f"Expected an SRP session, but got type '{type(session)}'"

    document = {
        "type": _session_class(type(session)).__name__,
        "parameters": serialize_parameters(session.routines.parameters),
        "state": session.to_state(),
    }

    return dumps(document)

def deserialize(data: str, cls: Type[T], routines_factory: SRPRoutinesFactory = SRPRoutines, **kwargs) -> T:
    """
    Rebuild a session serialized with serialize

    :param data: Serialized session
    :param cls: Class of the session (SRPClientSession, SRPServerSession or a subclass)
    :param routines_factory: Builds the routines from the deserialized parameters
    :param kwargs: Passed to the session constructor (timeout, logger, clock)

    :raise SerializationError: if the data is malformed
    :raise UnknownHashError: if the hash function name is not a registered one
    """

    assert type(data) is str, f"Expected type 'str' for data, but got type '{type(data)}'"

    try:
        document = loads(data)
        validate(document, _document_schema(cls))
    except JSONDecodeError as e:
        raise SerializationError(f"Malformed session data: {e}") from e
    except SchemaValidationError as e:
        raise SerializationError(f"Invalid session data: {e.message}") from e

    parameters = deserialize_parameters(document["parameters"])

    return cls.from_state(routines_factory(parameters), document["state"], **kwargs)
