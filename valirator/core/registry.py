from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, Union

from valirator.core.messages import MessageSpec
from valirator.core.validation_rules import get_builtin_rules

RuleFunction = Callable[..., Union[bool, Awaitable[bool]]]


def is_rule_function(value: Any) -> bool:
    """
    Whether a rule specification is a function rather than an expected value.

    Classes are callable but count as expected values (`{"type": str}`).
    """
    return callable(value) and not isinstance(value, type)


@dataclass(frozen=True)
class RuleDefinition:
    name: str
    rule: RuleFunction
    message: MessageSpec = None


class RuleRegistry:
    """Named rule functions with their default messages."""

    def __init__(self) -> None:
        self._rules: Dict[str, RuleDefinition] = {}

    @classmethod
    def with_builtin_rules(cls) -> RuleRegistry:
        registry = cls()
        for name, rule in get_builtin_rules().items():
            registry.register_rule(name, rule, rule.message)
        return registry

    def register_rule(self, name: str, rule: RuleFunction, message: MessageSpec = None) -> None:
        """
        Register (or replace) a rule.

        Args:
            name: Rule name as used in schemas.
            rule: Rule function `(actual, expected, property_name, parent, schema, default_rule)`.
                Sync or async; fewer positional parameters are fine.
            message: Default message specification for failures of this rule.
        """
        if not isinstance(name, str) or not name:
            raise ValueError(f"Rule name must be a non-empty string, got {name!r}")
        if not is_rule_function(rule):
            raise TypeError(f"Rule `{name}` must be a callable, got {type(rule).__name__}")

        if name in self._rules:
            logging.debug(f"[REGISTRY] Overriding rule `{name}`")
        self._rules[name] = RuleDefinition(name=name, rule=rule, message=message)

    def has_rule(self, name: str) -> bool:
        return name in self._rules

    def get_rule(self, name: str) -> Optional[RuleDefinition]:
        return self._rules.get(name)

    def rule_names(self) -> Tuple[str, ...]:
        return tuple(self._rules.keys())


# Process-wide default registry
rule_registry = RuleRegistry.with_builtin_rules()


def register_rule(name: str, rule: RuleFunction, message: MessageSpec = None) -> None:
    rule_registry.register_rule(name, rule, message)


def has_rule(name: str) -> bool:
    return rule_registry.has_rule(name)


__all__ = [
    "RuleDefinition",
    "RuleRegistry",
    "RuleFunction",
    "rule_registry",
    "register_rule",
    "has_rule",
    "is_rule_function",
]
