"""Mockwright - invocation interception and verification for mocks.

The proxy layer hands every intercepted call to an ``Interceptor`` as an
``Invocation``; the interceptor runs the first matching ``Expectation`` or
resolves the unmatched call according to the mock's ``MockBehavior``.
``verify()`` and ``verify_all()`` later check which expectations ran.
"""

__version__ = "0.1.0"

from .behavior import MockBehavior  # noqa: E402
from .dispatch import Dispatcher, Outcome, Resolution, plan_unmatched  # noqa: E402
from .errors import (  # noqa: E402
    FailureKind,
    MockError,
    UnexpectedInvocationError,
    VerificationError,
)
from .expectation import CallExpectation, Expectation  # noqa: E402
from .interceptor import Interceptor  # noqa: E402
from .invocation import (  # noqa: E402
    DeclaringCapability,
    Invocation,
    MethodInvocation,
    ReturnKind,
)
from .registry import ExpectationRegistry  # noqa: E402
from .verification import VerificationEngine  # noqa: E402

__all__ = [
    "CallExpectation",
    "DeclaringCapability",
    "Dispatcher",
    "Expectation",
    "ExpectationRegistry",
    "FailureKind",
    "Interceptor",
    "Invocation",
    "MethodInvocation",
    "MockBehavior",
    "MockError",
    "Outcome",
    "Resolution",
    "ReturnKind",
    "UnexpectedInvocationError",
    "VerificationEngine",
    "VerificationError",
    "plan_unmatched",
]
