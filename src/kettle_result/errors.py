"""Error types raised or returned by kettle-result."""

from __future__ import annotations

from typing import Any

__all__ = [
    'CloneError',
    'CollectionError',
    'MatchError',
    'SerializeError',
    'UnwrapError',
]


class UnwrapError(RuntimeError):
    """Value was unwrapped as the wrong variant.

    Raised by unwrap, expect, unwrap_err and expect_err. This is the only
    hard failure the wrapper types produce.
    """


class MatchError(TypeError):
    """Handlers passed to match() do not cover the value's variants."""


# --- Collection Errors ---


class CollectionError(Exception):
    """Base class for failures inside a Collection operation."""

    def __init__(self, message: str, key: Any = None) -> None:
        self.key = key
        super().__init__(message)


class CloneError(CollectionError):
    """A value could not be deep-copied."""

    def __init__(self, cause: BaseException, key: Any = None) -> None:
        where = '' if key is None else f' at key {key!r}'
        super().__init__(f'Cannot clone value{where}: {cause}', key)
        self.__cause__ = cause


class SerializeError(CollectionError):
    """Entries could not be encoded to or decoded from JSON."""

    def __init__(self, message: str, key: Any = None, cause: BaseException | None = None) -> None:
        super().__init__(message, key)
        self.__cause__ = cause
