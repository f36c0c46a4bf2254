"""
Outcome of a game intent.

Rule violations (not enough money, no seed, ...) are ordinary control flow, so
intents hand back a Result instead of raising.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    INSUFFICIENT_FUNDS = "insufficient_funds"
    NO_SEED_AVAILABLE = "no_seed_available"
    NOT_MATURE = "not_mature"
    NOT_FOUND = "not_found"
    UNKNOWN_SPECIES = "unknown_species"


@dataclass(frozen=True)
class Result:
    ok: bool
    error: Optional[ErrorKind] = None
    value: Any = None
    message: str = ""

    @classmethod
    def success(cls, value=None, message=""):
        return cls(True, None, value, message)

    @classmethod
    def failure(cls, error, message=""):
        return cls(False, error, None, message)

    def __bool__(self):
        return self.ok
