from srp6a.SRPError import (
    SRPError, ConfigurationError, UnknownHashError, InvalidPrimeGroupError,
    ValidationError, ClientPublicValueNullError, ClientEvidenceNullError,
    StateViolationError, SessionTimeoutError,
    SecurityError, InvalidClientPublicValueError, InvalidServerPublicValueError,
    BadClientCredentialsError, BadServerCredentialsError,
    FieldNotSetError, FieldAlreadySetError, SRPArithmeticError, SerializationError,
)
from srp6a.types import HashAlgorithm, PrimeGroup, VerifierAndSalt, ClientCredentials, ClientState, ServerState
from srp6a.groups import KNOWN_PRIME_GROUPS
from srp6a.Parameters import SRPParameters
from srp6a.routines import SRPRoutines
from srp6a.ClientSession import SRPClientSession
from srp6a.ServerSession import SRPServerSession
from srp6a.SRPConfig import SRPConfig
from srp6a.srp import create_verifier, create_verifier_and_salt, verify_credentials
from srp6a.serde import serialize, deserialize
