"""Expectation registry keyed by canonical identity."""

import threading

import structlog

from .expectation import Expectation
from .invocation import Invocation

logger = structlog.get_logger(__name__)


class ExpectationRegistry:
    """Thread-safe mapping from identity to expectation.

    Lookup order is insertion order. Re-adding an identity replaces the
    earlier expectation and moves it to the end, so the replacement is
    ordered as the most recent setup.
    """

    def __init__(self) -> None:
        self._expectations: dict[str, Expectation] = {}
        self._lock = threading.Lock()

    def add(self, expectation: Expectation) -> None:
        """Insert an expectation, replacing any with the same identity."""
        identity = expectation.identity
        with self._lock:
            replaced = self._expectations.pop(identity, None) is not None
            self._expectations[identity] = expectation

        logger.debug(
            "expectation.replaced" if replaced else "expectation.added",
            identity=identity,
        )

    def find_first_match(self, invocation: Invocation) -> Expectation | None:
        """Return the first expectation matching the invocation.

        Match predicates run on a snapshot, outside the lock, since they
        may call back into user code.
        """
        for expectation in self.all():
            if expectation.matches(invocation):
                return expectation
        return None

    def all(self) -> list[Expectation]:
        """Snapshot of all expectations in lookup order."""
        with self._lock:
            return list(self._expectations.values())

    def get(self, identity: str) -> Expectation | None:
        with self._lock:
            return self._expectations.get(identity)

    def clear(self) -> None:
        with self._lock:
            self._expectations.clear()

    def __contains__(self, identity: object) -> bool:
        with self._lock:
            return identity in self._expectations

    def __len__(self) -> int:
        with self._lock:
            return len(self._expectations)
