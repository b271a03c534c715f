from __future__ import annotations

from collections.abc import Container
from typing import Any

from valirator.contracts.validator_rule import ValidatorRule
from valirator.exceptions.common_exceptions import SchemaDefinitionException


class EnumValidatorRule(ValidatorRule):
    message = "must be present in given enumerator"

    def validate(self, actual: Any, expected: Any = None, **_: Any) -> bool:
        if not isinstance(expected, Container) or isinstance(expected, str):
            raise SchemaDefinitionException(f"Enum must be a collection of allowed values, got {type(expected).__name__}")
        if actual is None:
            return True
        try:
            return actual in expected
        except TypeError:
            # unhashable value tested against a set
            return False
