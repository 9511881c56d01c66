"""Common data structures."""

import enum
from typing import Any, Callable, Union


class Shape(enum.Enum):
    """The two container shapes every operation understands."""

    SEQUENCE = "sequence"
    MAPPING = "mapping"


class UsageError(TypeError):
    """Raised when an operation is called with arguments it cannot accept.

    Usage errors are always raised before any callable is synthesized.
    """


class ReleasedCallableError(RuntimeError):
    """Raised when a synthesized callable is invoked after its release."""


class _NoValue:
    """Sentinel returned when there is nothing to accumulate."""

    __slots__ = ()
    _instance: "_NoValue | None" = None

    def __new__(cls) -> "_NoValue":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_NoValue":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_NoValue":
        return self

    def __reduce__(self) -> str:
        return "NO_VALUE"


NO_VALUE = _NoValue()

# Either source text for a synthesized callable or a native Python callable.
Expression = Union[str, Callable[..., Any]]
