"""Invocation model handed to the interceptor for every intercepted call.

The interception layer resolves the capability queries (declaring type,
abstractness, return kind, identity member) once per call; the dispatcher
only reads them. ``MethodInvocation.for_member`` is the resolver for plain
Python classes.
"""

import functools
import inspect
import typing
from collections.abc import Callable, Mapping
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from types import GenericAlias
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "DeclaringCapability",
    "Invocation",
    "MethodInvocation",
    "OBJECT_IDENTITY_MEMBERS",
    "ReturnKind",
    "VALUE_TYPES",
    "classify_return",
]


class DeclaringCapability(Enum):
    """Kind of type that declares the invoked member."""

    INTERFACE = "interface"  # contract only, nothing to proceed to
    CONCRETE = "concrete"


class ReturnKind(Enum):
    """Return classification driving the default-value policy."""

    VOID = "void"
    VALUE = "value"  # defaults to the zero value
    REFERENCE = "reference"  # defaults to None


# Operations every object supports; unmatched calls always run the real code.
OBJECT_IDENTITY_MEMBERS = frozenset(
    {"__eq__", "__ne__", "__hash__", "__str__", "__repr__", "__format__"}
)

# Return types treated as value types, each constructible as its zero value.
VALUE_TYPES: tuple[type, ...] = (bool, int, float, complex, Decimal, Fraction)


@runtime_checkable
class Invocation(Protocol):
    """Read-mostly view of one intercepted call."""

    @property
    def identity(self) -> str: ...

    @property
    def declaring_capability(self) -> DeclaringCapability: ...

    @property
    def is_abstract_member(self) -> bool: ...

    @property
    def return_kind(self) -> ReturnKind: ...

    @property
    def return_type(self) -> type | None: ...

    @property
    def is_object_identity_member(self) -> bool: ...

    def proceed(self) -> Any: ...

    def set_return_value(self, value: Any) -> None: ...


def classify_return(annotation: Any) -> ReturnKind:
    """Map a return annotation to its ReturnKind.

    Args:
        annotation: Resolved return annotation, or ``inspect.Signature.empty``

    Returns:
        VOID for ``None``, VALUE for numeric and bool types, REFERENCE
        for everything else including a missing annotation
    """
    if annotation is None or annotation is type(None):
        return ReturnKind.VOID
    if (
        isinstance(annotation, type)
        and not isinstance(annotation, GenericAlias)
        and issubclass(annotation, VALUE_TYPES)
    ):
        return ReturnKind.VALUE
    return ReturnKind.REFERENCE


def _return_annotation(func: Callable[..., Any]) -> Any:
    try:
        hints = typing.get_type_hints(func)
    except (NameError, TypeError):
        # Unresolvable forward references; fall back to the raw annotation.
        hints = dict(getattr(func, "__annotations__", {}))
        if hints.get("return") == "None":
            hints["return"] = None
    return hints.get("return", inspect.Signature.empty)


def _is_contract_only(owner: type) -> bool:
    """True for Protocols and ABCs whose own callables are all abstract."""
    if owner.__dict__.get("_is_protocol", False):
        return True
    if not inspect.isabstract(owner):
        return False
    for name, value in owner.__dict__.items():
        if name.startswith("__") and name.endswith("__"):
            continue
        if callable(value) or isinstance(value, (staticmethod, classmethod, property)):
            if not getattr(value, "__isabstractmethod__", False):
                return False
    return True


class MethodInvocation:
    """A single intercepted method call on a Python object."""

    def __init__(
        self,
        member: str,
        args: tuple[Any, ...] = (),
        kwargs: Mapping[str, Any] | None = None,
        *,
        target: Any = None,
        type_name: str | None = None,
        declaring_capability: DeclaringCapability = DeclaringCapability.CONCRETE,
        is_abstract_member: bool = False,
        return_kind: ReturnKind = ReturnKind.VOID,
        return_type: type | None = None,
        is_object_identity_member: bool | None = None,
        implementation: Callable[..., Any] | None = None,
    ) -> None:
        """Initialize the invocation.

        Args:
            member: Name of the invoked member
            args: Positional call arguments
            kwargs: Keyword call arguments
            target: Object the call was made on
            type_name: Display name of the mocked type (defaults to the
                target's class name)
            declaring_capability: Whether the member is declared on an
                interface or a concrete type
            is_abstract_member: Whether the member lacks a default body
            return_kind: Return classification
            return_type: Concrete return type, when known
            is_object_identity_member: Defaults to membership in
                OBJECT_IDENTITY_MEMBERS
            implementation: Callable running the real member body
        """
        self.member = member
        self.args = tuple(args)
        self.kwargs = dict(kwargs or {})
        self.target = target
        if type_name is None and target is not None:
            type_name = type(target).__name__
        self.type_name = type_name
        self._declaring_capability = declaring_capability
        self._is_abstract_member = is_abstract_member
        self._return_kind = return_kind
        self._return_type = return_type
        if is_object_identity_member is None:
            is_object_identity_member = member in OBJECT_IDENTITY_MEMBERS
        self._is_object_identity_member = is_object_identity_member
        self._implementation = implementation
        self.return_value: Any = None
        self.proceeded = False

    @classmethod
    def for_member(
        cls, target: Any, member: str, *args: Any, **kwargs: Any
    ) -> "MethodInvocation":
        """Build an invocation by resolving ``member`` on ``target``'s type.

        The declaring class is the first class in the MRO defining the
        member. The real implementation is bound only when there is one to
        run: never for abstract members or members declared on a contract.

        Raises:
            AttributeError: If no class in the MRO defines ``member``
        """
        target_type = type(target)
        for owner in target_type.__mro__:
            if member in owner.__dict__:
                break
        else:
            raise AttributeError(
                f"{target_type.__name__!r} has no member {member!r}"
            )

        raw = owner.__dict__[member]
        if isinstance(raw, property):
            func = raw.fget
        elif isinstance(raw, (staticmethod, classmethod)):
            func = raw.__func__
        else:
            func = raw
        interface = _is_contract_only(owner)
        abstract = bool(getattr(raw, "__isabstractmethod__", False))
        return_type = (
            _return_annotation(func) if callable(func) else inspect.Signature.empty
        )
        return_kind = classify_return(return_type)

        implementation = None
        if not abstract and not interface:
            if isinstance(raw, property):
                # Bind the getter; reading the attribute here would run it.
                if raw.fget is not None:
                    implementation = functools.partial(raw.fget, target)
            elif hasattr(raw, "__get__"):
                implementation = raw.__get__(target, target_type)

        return cls(
            member,
            args,
            kwargs,
            target=target,
            declaring_capability=(
                DeclaringCapability.INTERFACE
                if interface
                else DeclaringCapability.CONCRETE
            ),
            is_abstract_member=abstract,
            return_kind=return_kind,
            return_type=return_type if return_kind is ReturnKind.VALUE else None,
            implementation=implementation,
        )

    @property
    def identity(self) -> str:
        rendered = [repr(arg) for arg in self.args]
        rendered.extend(f"{key}={value!r}" for key, value in self.kwargs.items())
        call = f"{self.member}({', '.join(rendered)})"
        return f"{self.type_name}.{call}" if self.type_name else call

    @property
    def declaring_capability(self) -> DeclaringCapability:
        return self._declaring_capability

    @property
    def is_abstract_member(self) -> bool:
        return self._is_abstract_member

    @property
    def return_kind(self) -> ReturnKind:
        return self._return_kind

    @property
    def return_type(self) -> type | None:
        return self._return_type

    @property
    def is_object_identity_member(self) -> bool:
        return self._is_object_identity_member

    def proceed(self) -> Any:
        """Run the real implementation and record its result.

        Raises:
            TypeError: If the invocation has no implementation to run
        """
        if self._implementation is None:
            raise TypeError(f"{self.identity} has no implementation to proceed to")
        self.return_value = self._implementation(*self.args, **self.kwargs)
        self.proceeded = True
        return self.return_value

    def set_return_value(self, value: Any) -> None:
        self.return_value = value

    def __repr__(self) -> str:
        return f"MethodInvocation({self.identity})"
