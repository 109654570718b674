# Signup-time helpers: verifier creation and verification
# None of these are used during a login, where the sessions are used instead

from srp6a.SRPError import ValidationError
from srp6a.routines import SRPRoutines
from srp6a.types import VerifierAndSalt
from srp6a.utils import constant_time_equals

from typing import Optional

async def create_verifier(routines: SRPRoutines, I: str, s: int, P: str) -> int:
    """
    Compute the verifier v = g^x of a user

    :param routines: Routines of the parameters the user signs up with
    :param I: User identity
    :param s: Salt of the user
    :param P: User password
    """

    if not I or not I.strip():
        raise ValidationError("Identity (I) must not be null or empty.")

    if not s:
        raise ValidationError("Salt (s) must not be null.")

    if not P:
        raise ValidationError("Password (P) must not be null")

    x = await routines.compute_x(I, s, P)

    return routines.compute_verifier(x)

async def create_verifier_and_salt(routines: SRPRoutines, I: str, P: str,
                                   s_bytes: Optional[int] = None) -> VerifierAndSalt:
    """
    Generate a new salt and compute the matching verifier

    :param s_bytes: Size of the salt (in bytes), see SRPRoutines.generate_random_salt
    """

    s = await routines.generate_random_salt(s_bytes)
    v = await create_verifier(routines, I, s, P)

    return VerifierAndSalt(s, v)

async def verify_credentials(routines: SRPRoutines, I: str, s: int, P: str, v: int) -> bool:
    """
    Check a password against a stored (salt, verifier) pair, e.g. before a password change
    """

    expected = await create_verifier(routines, I, s, P)

    return constant_time_equals(expected, v)
