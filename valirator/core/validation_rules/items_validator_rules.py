from __future__ import annotations

from typing import Any

from valirator.contracts.validator_rule import ValidatorRule
from .range_validator_rules import require_number


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class MinItemsValidatorRule(ValidatorRule):
    message = "must contain at least %{expected} items"

    def validate(self, actual: Any, expected: Any = None, **_: Any) -> bool:
        if actual is None:
            return True
        limit = require_number(expected, "min_items")
        return _is_sequence(actual) and len(actual) >= limit


class MaxItemsValidatorRule(ValidatorRule):
    message = "must contain at most %{expected} items"

    def validate(self, actual: Any, expected: Any = None, **_: Any) -> bool:
        if actual is None:
            return True
        limit = require_number(expected, "max_items")
        return _is_sequence(actual) and len(actual) <= limit


class UniqueItemsValidatorRule(ValidatorRule):
    message = "must hold unique items"

    def validate(self, actual: Any, expected: Any = True, **_: Any) -> bool:
        if actual is None or not expected:
            return True
        if not _is_sequence(actual):
            return False

        # Items may be unhashable (dicts, lists), so compare pairwise
        seen: list = []
        for item in actual:
            if item in seen:
                return False
            seen.append(item)
        return True
