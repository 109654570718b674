from sys import path
from os.path import join, abspath, dirname

path.insert(0, abspath(join(dirname(__file__), '..')))

from srp6a import SRPParameters, SRPRoutines, create_verifier_and_salt
from srp6a.utils import generate_random_string

import pytest

class Clock:
    """
    Manual monotonic clock for the timeout tests
    """

    now: float

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds

@pytest.fixture
def clock() -> Clock:
    return Clock()

@pytest.fixture(scope = "session")
def routines() -> SRPRoutines:
    return SRPRoutines(SRPParameters())

@pytest.fixture
def credentials():
    return (generate_random_string(10), generate_random_string(15))

@pytest.fixture
async def user(routines, credentials):
    I, P = credentials
    s, v = await create_verifier_and_salt(routines, I, P)

    return { "I": I, "P": P, "s": s, "v": v }
