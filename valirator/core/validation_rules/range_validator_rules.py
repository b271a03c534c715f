from __future__ import annotations

import math
from numbers import Number
from typing import Any, Optional

from valirator.contracts.validator_rule import ValidatorRule
from valirator.exceptions.common_exceptions import SchemaDefinitionException


def to_number(value: Any) -> Optional[float]:
    """Numeric view of `value`; numeric strings are coerced, anything else gives None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Number) and not isinstance(value, complex):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def require_number(expected: Any, rule_name: str) -> Any:
    """`expected` unchanged when it is a real number, otherwise a schema error."""
    if isinstance(expected, bool) or not isinstance(expected, Number) or isinstance(expected, complex):
        raise SchemaDefinitionException(
            f"Rule `{rule_name}` expects a number, got {type(expected).__name__}",
            data={"rule": rule_name, "expected": expected},
        )
    return expected


class MinValidatorRule(ValidatorRule):
    message = "must be greater than or equal to %{expected}"

    def validate(self, actual: Any, expected: Any = None, **_: Any) -> bool:
        if actual is None:
            return True
        limit = require_number(expected, "min")
        number = to_number(actual)
        return number is not None and number >= limit


class MaxValidatorRule(ValidatorRule):
    message = "must be less than or equal to %{expected}"

    def validate(self, actual: Any, expected: Any = None, **_: Any) -> bool:
        if actual is None:
            return True
        limit = require_number(expected, "max")
        number = to_number(actual)
        return number is not None and number <= limit


class ExclusiveMinValidatorRule(ValidatorRule):
    message = "must be greater than %{expected}"

    def validate(self, actual: Any, expected: Any = None, **_: Any) -> bool:
        if actual is None:
            return True
        limit = require_number(expected, "exclusive_min")
        number = to_number(actual)
        return number is not None and number > limit


class ExclusiveMaxValidatorRule(ValidatorRule):
    message = "must be less than %{expected}"

    def validate(self, actual: Any, expected: Any = None, **_: Any) -> bool:
        if actual is None:
            return True
        limit = require_number(expected, "exclusive_max")
        number = to_number(actual)
        return number is not None and number < limit


class DivisibleByValidatorRule(ValidatorRule):
    message = "must be divisible by %{expected}"

    def validate(self, actual: Any, expected: Any = None, **_: Any) -> bool:
        if actual is None:
            return True
        expected = require_number(expected, "divisible_by")
        number = to_number(actual)
        if number is None or not expected:
            return False

        remainder = math.fmod(number, expected)
        return math.isclose(remainder, 0.0, abs_tol=1e-9) or math.isclose(abs(remainder), abs(expected), abs_tol=1e-9)
