"""Dispatch of intercepted invocations to expectations.

A matched invocation always executes its expectation. An unmatched one is
resolved by ``plan_unmatched`` in this order:

1. the behavior may reject it outright (Strict always; Normal for
   interface and abstract members);
2. identity members and concrete non-abstract members run the real code;
3. value-returning members get a default under Loose and fail otherwise;
4. void members complete as a no-op.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

import structlog

from .behavior import MockBehavior
from .errors import FailureKind, UnexpectedInvocationError
from .invocation import DeclaringCapability, Invocation, ReturnKind, VALUE_TYPES
from .registry import ExpectationRegistry

logger = structlog.get_logger(__name__)

__all__ = ["Dispatcher", "Outcome", "Resolution", "default_value", "plan_unmatched"]


class Resolution(Enum):
    """What the dispatcher does with an unmatched invocation."""

    PROCEED = "proceed"
    DEFAULT_VALUE = "default-value"
    NO_OP = "no-op"
    FAIL = "fail"


@dataclass(frozen=True)
class Outcome:
    """Resolution of an unmatched invocation, with the failure kind if any."""

    resolution: Resolution
    failure: FailureKind | None = None

    def __str__(self) -> str:
        if self.failure is not None:
            return f"{self.resolution.value}: {self.failure.value}"
        return self.resolution.value


_PROCEED = Outcome(Resolution.PROCEED)
_DEFAULT_VALUE = Outcome(Resolution.DEFAULT_VALUE)
_NO_OP = Outcome(Resolution.NO_OP)


def _fail(kind: FailureKind) -> Outcome:
    return Outcome(Resolution.FAIL, kind)


def plan_unmatched(behavior: MockBehavior, invocation: Invocation) -> Outcome:
    """Decide how an invocation with no matching expectation is handled.

    Args:
        behavior: Behavior of the mock receiving the call
        invocation: The unmatched invocation

    Returns:
        The outcome; a FAIL outcome names the failure kind to raise
    """
    if behavior is MockBehavior.STRICT:
        return _fail(FailureKind.NO_EXPECTATION)

    if behavior is MockBehavior.NORMAL:
        if invocation.declaring_capability is DeclaringCapability.INTERFACE:
            return _fail(FailureKind.INTERFACE_NO_EXPECTATION)
        if invocation.is_abstract_member:
            return _fail(FailureKind.ABSTRACT_NO_EXPECTATION)

    if invocation.is_object_identity_member:
        return _PROCEED

    if (
        invocation.declaring_capability is DeclaringCapability.CONCRETE
        and not invocation.is_abstract_member
    ):
        # Only Normal and looser behaviors get here.
        return _PROCEED

    if invocation.return_kind is not ReturnKind.VOID:
        if behavior is MockBehavior.LOOSE:
            return _DEFAULT_VALUE
        # Only Relaxed gets here.
        return _fail(FailureKind.RETURN_VALUE_NO_EXPECTATION)

    return _NO_OP


def default_value(invocation: Invocation) -> Any:
    """Zero value for value-returning members, None otherwise."""
    if invocation.return_kind is not ReturnKind.VALUE:
        return None
    return_type = invocation.return_type
    if return_type in VALUE_TYPES:
        return return_type()
    if isinstance(return_type, type):
        # Subclasses such as IntEnum need not accept zero arguments.
        for base in VALUE_TYPES:
            if issubclass(return_type, base):
                return base()
    return 0


class Dispatcher:
    """Routes each invocation to its expectation or the behavior's fallback."""

    def __init__(
        self, registry: ExpectationRegistry, behavior: MockBehavior | str
    ) -> None:
        self._registry = registry
        self._behavior = MockBehavior(behavior)

    @property
    def behavior(self) -> MockBehavior:
        return self._behavior

    def intercept(self, invocation: Invocation) -> None:
        """Handle one intercepted call.

        Raises:
            UnexpectedInvocationError: If the call is unmatched and the
                behavior does not allow it
            Exception: Whatever the matched expectation or the real
                implementation raises, unchanged
        """
        match = self._registry.find_first_match(invocation)
        if match is not None:
            logger.debug(
                "invocation.matched",
                invocation=invocation.identity,
                expectation=match.identity,
            )
            match.execute(invocation)
            return

        outcome = plan_unmatched(self._behavior, invocation)
        logger.debug(
            "invocation.unmatched",
            invocation=invocation.identity,
            behavior=self._behavior.value,
            outcome=str(outcome),
        )

        if outcome.failure is not None:
            raise UnexpectedInvocationError(
                outcome.failure, self._behavior, invocation.identity
            )
        if outcome.resolution is Resolution.PROCEED:
            invocation.proceed()
        elif outcome.resolution is Resolution.DEFAULT_VALUE:
            invocation.set_return_value(default_value(invocation))
