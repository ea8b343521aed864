"""Post-hoc verification that expected calls happened."""

from collections.abc import Callable

import structlog

from .behavior import MockBehavior
from .errors import VerificationError
from .expectation import Expectation
from .registry import ExpectationRegistry

logger = structlog.get_logger(__name__)


class VerificationEngine:
    """Read-only scans of a registry for unmet expectations."""

    def __init__(
        self, registry: ExpectationRegistry, behavior: MockBehavior | None = None
    ) -> None:
        self._registry = registry
        self._behavior = behavior

    def verify(self) -> None:
        """Fail if any verifiable expectation was never invoked.

        Raises:
            VerificationError: Listing every verifiable, uninvoked expectation
        """
        self._verify_or_raise(lambda e: e.verifiable and not e.invoked)

    def verify_all(self) -> None:
        """Fail if any expectation at all was never invoked.

        Raises:
            VerificationError: Listing every uninvoked expectation
        """
        self._verify_or_raise(lambda e: not e.invoked)

    def _verify_or_raise(self, is_failure: Callable[[Expectation], bool]) -> None:
        failures = [e.identity for e in self._registry.all() if is_failure(e)]
        if failures:
            logger.warning(
                "verification.failed", count=len(failures), failures=failures
            )
            raise VerificationError(failures, self._behavior)
