from .call_utils import bind_with_arity, call_with_arity, resolve_value

__all__ = [
    "bind_with_arity",
    "call_with_arity",
    "resolve_value",
]
