from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from valirator.contracts.validator_rule import ValidatorRule


class RequiredValidatorRule(ValidatorRule):
    """
    Presence check.

    `expected` is True (value must be set and not an empty string), False (always passes)
    or a mapping like `{"allow_empty": True}` to accept empty strings.
    """

    message = "is required"

    def validate(self, actual: Any, expected: Any = True, **_: Any) -> bool:
        if isinstance(expected, Mapping):
            allow_empty = bool(expected.get("allow_empty", expected.get("allowEmpty", False)))
        elif not expected:
            return True
        else:
            allow_empty = False

        if actual is None:
            return False
        if not allow_empty and isinstance(actual, str) and actual == "":
            return False
        return True
