"""Pytest configuration and fixtures."""

from collections.abc import Callable
from typing import Any

import pytest
import structlog

from mockwright.expectation import CallExpectation
from mockwright.invocation import DeclaringCapability, MethodInvocation, ReturnKind
from mockwright.registry import ExpectationRegistry

InvocationFactory = Callable[..., MethodInvocation]
ExpectationFactory = Callable[..., CallExpectation]


@pytest.fixture(autouse=True)
def reset_structlog() -> Any:
    """Restore default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def registry() -> ExpectationRegistry:
    """Create a fresh, empty registry."""
    return ExpectationRegistry()


@pytest.fixture
def make_invocation() -> InvocationFactory:
    """Factory for invocations with explicit capabilities.

    Defaults describe a void, non-abstract member of a concrete class whose
    real implementation returns "real".
    """

    def factory(
        member: str = "do_work",
        *args: Any,
        interface: bool = False,
        abstract: bool = False,
        returns: ReturnKind = ReturnKind.VOID,
        return_type: type | None = None,
        identity_member: bool | None = None,
        implementation: Callable[..., Any] | None = lambda *a, **kw: "real",
        **kwargs: Any,
    ) -> MethodInvocation:
        return MethodInvocation(
            member,
            args,
            kwargs,
            type_name="Service",
            declaring_capability=(
                DeclaringCapability.INTERFACE
                if interface
                else DeclaringCapability.CONCRETE
            ),
            is_abstract_member=abstract,
            return_kind=returns,
            return_type=return_type,
            is_object_identity_member=identity_member,
            implementation=None if interface or abstract else implementation,
        )

    return factory


@pytest.fixture
def make_expectation() -> ExpectationFactory:
    """Factory for expectations matching on member name."""

    def factory(
        member: str,
        identity: str | None = None,
        action: Callable[[Any], Any] | None = None,
        verifiable: bool = False,
    ) -> CallExpectation:
        return CallExpectation(
            identity or f"{member}()",
            lambda invocation: invocation.member == member,
            action,
            verifiable=verifiable,
        )

    return factory
