"""Per-mock interceptor: the entry point the proxy layer calls into."""

from .behavior import MockBehavior
from . import config
from .config import MockSettings
from .dispatch import Dispatcher
from .expectation import Expectation
from .invocation import Invocation
from .registry import ExpectationRegistry
from .verification import VerificationEngine


class Interceptor:
    """Owns one mock's expectations and dispatches its calls.

    The behavior is fixed at construction. Without an explicit behavior,
    ``settings.default_behavior`` applies.
    """

    def __init__(
        self,
        behavior: MockBehavior | str | None = None,
        settings: MockSettings | None = None,
    ) -> None:
        """Initialize the interceptor.

        Args:
            behavior: Strictness for unmatched calls, as a MockBehavior or
                its case-insensitive name
            settings: Source of the default behavior (defaults to the
                module-level settings)
        """
        if behavior is None:
            if settings is None:
                settings = config.settings
            behavior = settings.default_behavior
        behavior = MockBehavior(behavior)
        self._behavior = behavior
        self._registry = ExpectationRegistry()
        self._dispatcher = Dispatcher(self._registry, behavior)
        self._verification = VerificationEngine(self._registry, behavior)

    @property
    def behavior(self) -> MockBehavior:
        return self._behavior

    @property
    def registry(self) -> ExpectationRegistry:
        return self._registry

    def add_call(self, expectation: Expectation) -> None:
        self._registry.add(expectation)

    def intercept(self, invocation: Invocation) -> None:
        self._dispatcher.intercept(invocation)

    def verify(self) -> None:
        self._verification.verify()

    def verify_all(self) -> None:
        self._verification.verify_all()
