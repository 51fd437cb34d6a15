"""
Verification Errors

Every failure raised by the decision engine is a VerificationError.
The `kind` attribute lets callers decide whether to retry, alert, or
reject the batch outright.
"""

from typing import Any, Dict, Optional


class VerificationError(Exception):
    """Root of all decision-engine failures."""

    kind: str = "verification"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "error": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }


# --- Configuration ---

class ConfigurationError(VerificationError):
    """Invalid engine configuration. Not retryable."""

    kind = "configuration"


class UnknownModeError(ConfigurationError):
    """Verification mode is neither `strict` nor `evidence-rich`."""

    def __init__(self, mode: Any):
        super().__init__(
            f"Unknown verification mode: {mode!r}",
            details={"mode": mode},
        )
        self.mode = mode


# --- Data ---

class DataError(VerificationError):
    """Input or collaborator output does not have the expected shape."""

    kind = "data"


class ResultCountMismatchError(DataError):
    """Base verifier returned a different number of results than readings."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Base verifier returned {actual} results for {expected} readings",
            details={"expected": expected, "actual": actual},
        )


class InvalidReadingError(DataError):
    """A reading could not be turned into a verification result."""

    def __init__(self, position: int, reason: str):
        super().__init__(
            f"Reading at position {position} is invalid: {reason}",
            details={"position": position, "reason": reason},
        )
        self.position = position


# --- Arithmetic ---

class ArithmeticVerificationError(VerificationError):
    """A derived metric cannot be computed from the supplied numbers."""

    kind = "arithmetic"


class BaselineDivisionError(ArithmeticVerificationError, ZeroDivisionError):
    """Device baseline average is zero, so relative deviation is undefined."""

    def __init__(self, metric: str):
        super().__init__(
            f"Device baseline average for '{metric}' is zero; deviation is undefined",
            details={"metric": metric},
        )
        self.metric = metric
