from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Optional


def positional_capacity(func: Callable) -> Optional[int]:
    """
    Number of positional arguments `func` accepts, or None when it takes `*args`
    (or its signature cannot be inspected, e.g. some builtins).
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None

    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def call_with_arity(func: Callable, *args: Any) -> Any:
    """Call `func` with as many of the leading `args` as its signature accepts."""
    capacity = positional_capacity(func)
    if capacity is None:
        return func(*args)
    return func(*args[:capacity])


def bind_with_arity(func: Optional[Callable]) -> Optional[Callable]:
    """Wrap `func` so it tolerates any prefix of its arguments being passed, extra ones dropped."""
    if func is None:
        return None

    @functools.wraps(func)
    def wrapper(*args: Any) -> Any:
        return call_with_arity(func, *args)

    return wrapper


async def resolve_value(value: Any) -> Any:
    """Await `value` if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value
