from __future__ import annotations

import re
from typing import Any

from valirator.contracts.validator_rule import ValidatorRule
from valirator.exceptions.common_exceptions import SchemaDefinitionException


class PatternValidatorRule(ValidatorRule):
    """
    Regex search against the string form of the value. `expected` is a pattern string or a compiled regex.

    Empty strings pass; presence is what `required` checks.
    """

    message = "invalid input"

    def validate(self, actual: Any, expected: Any = None, **_: Any) -> bool:
        if actual is None or actual == "":
            return True

        if isinstance(expected, re.Pattern):
            pattern = expected
        elif isinstance(expected, str):
            try:
                pattern = re.compile(expected)
            except re.error as e:
                raise SchemaDefinitionException(f"Invalid pattern `{expected}`: {e}") from e
        else:
            raise SchemaDefinitionException(f"Pattern must be a string or a compiled regex, got {type(expected).__name__}")

        text = actual if isinstance(actual, str) else str(actual)
        return pattern.search(text) is not None
