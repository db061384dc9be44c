"""@safe decorator and tea_call for turning exceptions into Err."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from kettle_result._logging import get_logger
from kettle_result.types.result import Err, Ok

__all__ = ['safe', 'tea_call']

P = ParamSpec('P')
T = TypeVar('T')
E = TypeVar('E', bound=BaseException)


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[E: BaseException](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


@overload
def safe[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Err.

    Wraps a function so that it returns Ok(value) on success and
    Err(exception) if an exception is raised. Exceptions outside
    `exceptions` propagate unchanged.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[Any]:
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as e:
            get_logger(__name__).debug(
                'safe.caught',
                function=getattr(wrapped, '__qualname__', repr(wrapped)),
                error=repr(e),
            )
            return Err(e)

    if func is not None:
        return wrapper(func)
    return wrapper


def tea_call[**P, T](func: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs) -> Ok[T] | Err[Exception]:
    """Call func with the given arguments, returning Ok(result) or Err(exception).

    The single bridge from exception-raising code into Result: any
    Exception raised by func is returned as Err; BaseExceptions such as
    KeyboardInterrupt propagate.

    Example:
        ```python
        tea_call(json.loads, '{"name": "Charlie", "age": 33}')
        # Ok(value={'name': 'Charlie', 'age': 33})
        tea_call(int, 'not a number')
        # Err(error=ValueError("invalid literal for int() with base 10: 'not a number'"))
        ```
    """
    return safe(func)(*args, **kwargs)
