from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from valirator.core.registry import RuleFunction, RuleRegistry, is_rule_function
from valirator.core.schema import SchemaNode
from valirator.exceptions.common_exceptions import RuleNotFoundException


@dataclass(frozen=True)
class ResolvedRule:
    rule: RuleFunction
    # next precedence level down, handed to `rule` as its last argument
    default_rule: Optional[RuleFunction] = None


def resolve_rule(
    name: str,
    expected: Any,
    root: SchemaNode,
    registry: RuleRegistry,
    *,
    property_name: Optional[str] = None,
) -> ResolvedRule:
    """
    Pick the function evaluating rule `name` at one property.

    Precedence, highest first:
      1. a function under `rules[name]` at the schema root (redefines the rule for the whole run)
      2. the property-level value itself when it is a function
      3. the registry entry

    Raises:
        RuleNotFoundException: If none of the levels provides a function.
    """
    rule: Optional[RuleFunction] = None
    default_rule: Optional[RuleFunction] = None

    definition = registry.get_rule(name)
    if definition is not None:
        rule = definition.rule

    if is_rule_function(expected):
        rule, default_rule = expected, rule

    override = root.rules.get(name)
    if is_rule_function(override):
        rule, default_rule = override, rule

    if rule is None:
        raise RuleNotFoundException(name, property_name)

    return ResolvedRule(rule=rule, default_rule=default_rule)
