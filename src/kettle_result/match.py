"""Exhaustive variant dispatch for Option and Result values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kettle_result.errors import MatchError
from kettle_result.types.option import NothingType, Some
from kettle_result.types.result import Err, Ok

__all__ = ['match']


def _require(handlers: dict[str, Callable[..., Any] | None], family: str, foreign: dict[str, Any]) -> None:
    missing = sorted(name for name, handler in handlers.items() if handler is None)
    if missing:
        msg = f'match on {family} needs handlers for {", ".join(missing)}'
        raise MatchError(msg)
    extra = sorted(name for name, handler in foreign.items() if handler is not None)
    if extra:
        msg = f'match on {family} got handlers for another type: {", ".join(extra)}'
        raise MatchError(msg)


def match[R](
    value: Any,
    *,
    some: Callable[[Any], R] | None = None,
    none: Callable[[], R] | None = None,
    ok: Callable[[Any], R] | None = None,
    err: Callable[[Any], R] | None = None,
) -> R:
    """Call the handler for the variant of value and return its result.

    Options take `some` and `none`; Results take `ok` and `err`. Both
    handlers of the pair are required even though only one is called, and
    handlers belonging to the other type are rejected.

    Raises:
        MatchError: If the handler set does not match the value's type, or
            value is neither an Option nor a Result.

    Examples:
        >>> match(Some(2), some=lambda x: x * 10, none=lambda: 0)
        20
        >>> match(Err('boom'), ok=str, err=lambda e: f'failed: {e}')
        'failed: boom'
    """
    if isinstance(value, Some | NothingType):
        _require({'some': some, 'none': none}, 'Option', {'ok': ok, 'err': err})
        return value.match(some=some, none=none)  # type: ignore[arg-type]
    if isinstance(value, Ok | Err):
        _require({'ok': ok, 'err': err}, 'Result', {'some': some, 'none': none})
        return value.match(ok=ok, err=err)  # type: ignore[arg-type]
    msg = f'match expects an Option or Result, got {type(value).__name__}'
    raise MatchError(msg)
