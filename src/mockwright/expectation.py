"""Expectations: registered rules pairing a match predicate with an effect."""

import threading
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from .invocation import Invocation, ReturnKind

__all__ = ["CallExpectation", "Expectation"]


@runtime_checkable
class Expectation(Protocol):
    """Shape the interceptor consumes from the setup-construction layer."""

    @property
    def identity(self) -> str: ...

    @property
    def invoked(self) -> bool: ...

    @property
    def verifiable(self) -> bool: ...

    def matches(self, invocation: Invocation) -> bool: ...

    def execute(self, invocation: Invocation) -> None: ...


class CallExpectation:
    """Expectation built from a predicate and an optional action.

    ``invoked`` is written only by ``execute``, after the action returned.
    An action that raises leaves the expectation uninvoked and the
    exception propagates to the caller.
    """

    def __init__(
        self,
        identity: str,
        predicate: Callable[[Invocation], bool],
        action: Callable[[Invocation], Any] | None = None,
        *,
        verifiable: bool = False,
    ) -> None:
        """Initialize the expectation.

        Args:
            identity: Canonical description of the expected call; the
                registry key
            predicate: Decides whether an invocation matches
            action: Produces the call's effect; its return value becomes
                the invocation's return value for non-void members
            verifiable: Whether ``verify()`` requires this call to happen
        """
        self._identity = identity
        self._predicate = predicate
        self._action = action
        self._verifiable = verifiable
        self._invoked = False
        self._lock = threading.Lock()

    @property
    def identity(self) -> str:
        return self._identity

    @property
    def invoked(self) -> bool:
        with self._lock:
            return self._invoked

    @property
    def verifiable(self) -> bool:
        return self._verifiable

    def mark_verifiable(self) -> "CallExpectation":
        """Flag the expectation for ``verify()``. Configuration time only."""
        self._verifiable = True
        return self

    def matches(self, invocation: Invocation) -> bool:
        return bool(self._predicate(invocation))

    def execute(self, invocation: Invocation) -> None:
        result = self._action(invocation) if self._action is not None else None
        if invocation.return_kind is not ReturnKind.VOID:
            invocation.set_return_value(result)
        with self._lock:
            self._invoked = True

    def __repr__(self) -> str:
        return (
            f"CallExpectation({self._identity!r}, "
            f"verifiable={self._verifiable}, invoked={self.invoked})"
        )
