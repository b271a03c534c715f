from __future__ import annotations

from collections.abc import Mapping
from numbers import Number
from typing import Any, Callable, Dict

from valirator.contracts.validator_rule import ValidatorRule
from valirator.exceptions.common_exceptions import SchemaDefinitionException


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, (bool, complex))


TYPE_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "string": lambda value: isinstance(value, str),
    "number": _is_number,
    "integer": lambda value: isinstance(value, int) and not isinstance(value, bool),
    "boolean": lambda value: isinstance(value, bool),
    "object": lambda value: isinstance(value, Mapping),
    "array": lambda value: isinstance(value, (list, tuple)),
    "null": lambda value: value is None,
    "any": lambda value: True,
}


class TypeValidatorRule(ValidatorRule):
    """
    Accepts a type name from `TYPE_CHECKS`, a Python class, or a list of those (any may match).
    """

    message = "must be of %{expected} type"

    def validate(self, actual: Any, expected: Any = None, **_: Any) -> bool:
        if actual is None:
            return True

        candidates = expected if isinstance(expected, (list, tuple)) else [expected]
        return any(self._matches(actual, candidate) for candidate in candidates)

    @staticmethod
    def _matches(actual: Any, candidate: Any) -> bool:
        if isinstance(candidate, type):
            if candidate is int and isinstance(actual, bool):
                return False
            return isinstance(actual, candidate)

        check = TYPE_CHECKS.get(candidate) if isinstance(candidate, str) else None
        if check is None:
            raise SchemaDefinitionException(
                f"Unknown type `{candidate}` (supported: {', '.join(TYPE_CHECKS)})",
                data={"type": candidate},
            )
        return check(actual)
