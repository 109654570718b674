class SRPError(Exception):
    """
    Base of every error raised by the srp6a package
    """

    message: str

    def __init__(self, message: str):
        super().__init__(message)

        self.message = message

### Configuration
class ConfigurationError(SRPError):
    pass

class UnknownHashError(ConfigurationError):
    pass

class InvalidPrimeGroupError(ConfigurationError):
    pass

### Input validation
class ValidationError(SRPError):
    pass

class ClientPublicValueNullError(ValidationError):
    def __init__(self):
        super().__init__("Client public value (A) must not be null")

class ClientEvidenceNullError(ValidationError):
    def __init__(self):
        super().__init__("Client evidence (M1) must not be null")

### Protocol state
class StateViolationError(SRPError):
    expected: str
    actual: str

    def __init__(self, expected: str, actual: str, message: str = None):
        if message is None:
            message = f"State violation: Session must be in {expected} state but is in {actual}"

        super().__init__(message)

        self.expected = expected
        self.actual = actual

class SessionTimeoutError(SRPError):
    def __init__(self):
        super().__init__("Session timeout")

### Security rejections, surfaced to the caller as "invalid credentials"
class SecurityError(SRPError):
    pass

class InvalidClientPublicValueError(SecurityError):
    pass

class InvalidServerPublicValueError(SecurityError):
    pass

class BadClientCredentialsError(SecurityError):
    def __init__(self):
        super().__init__("Bad client credentials")

class BadServerCredentialsError(SecurityError):
    def __init__(self):
        super().__init__("Bad server credentials")

### Session fields
class FieldNotSetError(SRPError, AttributeError):
    def __init__(self, field: str):
        super().__init__(f"{field} not set")

class FieldAlreadySetError(SRPError, AttributeError):
    def __init__(self, field: str):
        super().__init__(f"{field} already set")

### Misc
class SRPArithmeticError(SRPError, ArithmeticError):
    pass

class SerializationError(SRPError):
    pass
