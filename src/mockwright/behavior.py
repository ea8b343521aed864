"""Mock behavior modes governing unmatched invocations."""

from enum import Enum


class MockBehavior(Enum):
    """Strictness policy applied when no expectation matches a call.

    Matched calls always execute their expectation; the behavior only
    decides what happens on the unmatched path.
    """

    STRICT = "strict"  # every call needs a setup
    NORMAL = "normal"  # interface and abstract members need a setup
    LOOSE = "loose"  # unmatched calls return defaults
    RELAXED = "relaxed"  # only value-returning members need a setup
    DEFAULT = "normal"

    @classmethod
    def _missing_(cls, value: object) -> "MockBehavior | None":
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    def __str__(self) -> str:
        return self.name.capitalize()
