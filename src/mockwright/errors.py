"""Failure taxonomy raised by the interceptor and the verification engine.

Every failure carries its kind, the active behavior and the identities of
the invocation or expectations involved, so callers can render their own
messages. ``str()`` gives a plain default rendering.
"""

from collections.abc import Iterable
from enum import Enum

from .behavior import MockBehavior

__all__ = [
    "FailureKind",
    "MockError",
    "UnexpectedInvocationError",
    "VerificationError",
]


class FailureKind(Enum):
    """Why a mock operation failed."""

    NO_EXPECTATION = "no-expectation"
    INTERFACE_NO_EXPECTATION = "interface-no-expectation"
    ABSTRACT_NO_EXPECTATION = "abstract-no-expectation"
    RETURN_VALUE_NO_EXPECTATION = "return-value-no-expectation"
    VERIFICATION_FAILED = "verification-failed"


_REASONS = {
    FailureKind.NO_EXPECTATION: (
        "All invocations on the mock must have a corresponding setup."
    ),
    FailureKind.INTERFACE_NO_EXPECTATION: (
        "Interface members have no implementation to fall back to and must "
        "have a corresponding setup."
    ),
    FailureKind.ABSTRACT_NO_EXPECTATION: (
        "Abstract members have no implementation to fall back to and must "
        "have a corresponding setup."
    ),
    FailureKind.RETURN_VALUE_NO_EXPECTATION: (
        "Invocation needs to return a value and therefore must have a "
        "corresponding setup that provides it."
    ),
}


class MockError(Exception):
    """Base error for mock failures."""

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        behavior: MockBehavior | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.behavior = behavior


class UnexpectedInvocationError(MockError):
    """An unmatched call the active behavior does not allow."""

    def __init__(
        self, kind: FailureKind, behavior: MockBehavior, invocation: str
    ) -> None:
        if kind not in _REASONS:
            raise ValueError(f"{kind} is not an invocation failure")
        super().__init__(
            kind,
            f"{invocation} invocation failed with mock behavior {behavior}.\n"
            f"{_REASONS[kind]}",
            behavior,
        )
        self.invocation = invocation


class VerificationError(MockError):
    """One or more expectations failed their verification predicate."""

    def __init__(
        self, failures: Iterable[str], behavior: MockBehavior | None = None
    ) -> None:
        self.failures = tuple(failures)
        super().__init__(
            FailureKind.VERIFICATION_FAILED,
            "The following setups were not matched:\n" + "\n".join(self.failures),
            behavior,
        )
