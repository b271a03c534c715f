from __future__ import annotations

from collections.abc import Sized
from typing import Any

from valirator.contracts.validator_rule import ValidatorRule
from .range_validator_rules import require_number


class MinLengthValidatorRule(ValidatorRule):
    message = "is too short (minimum is %{expected} characters)"

    def validate(self, actual: Any, expected: Any = None, **_: Any) -> bool:
        if actual is None:
            return True
        limit = require_number(expected, "min_length")
        return isinstance(actual, Sized) and len(actual) >= limit


class MaxLengthValidatorRule(ValidatorRule):
    message = "is too long (maximum is %{expected} characters)"

    def validate(self, actual: Any, expected: Any = None, **_: Any) -> bool:
        if actual is None:
            return True
        limit = require_number(expected, "max_length")
        return isinstance(actual, Sized) and len(actual) <= limit
