from typing import Dict

from valirator.contracts.validator_rule import ValidatorRule
from .enum_validator_rule import EnumValidatorRule
from .exists_validator_rule import ExistsValidatorRule
from .format_validator_rule import FormatValidatorRule
from .items_validator_rules import MaxItemsValidatorRule, MinItemsValidatorRule, UniqueItemsValidatorRule
from .length_validator_rules import MaxLengthValidatorRule, MinLengthValidatorRule
from .pattern_validator_rule import PatternValidatorRule
from .range_validator_rules import (
    DivisibleByValidatorRule,
    ExclusiveMaxValidatorRule,
    ExclusiveMinValidatorRule,
    MaxValidatorRule,
    MinValidatorRule,
)
from .required_validator_rule import RequiredValidatorRule
from .type_validator_rule import TypeValidatorRule


# camelCase spellings accepted for the snake_case built-ins
RULE_ALIASES: Dict[str, str] = {
    "exclusiveMinimum": "exclusive_min",
    "exclusiveMaximum": "exclusive_max",
    "divisibleBy": "divisible_by",
    "minLength": "min_length",
    "maxLength": "max_length",
    "minItems": "min_items",
    "maxItems": "max_items",
    "uniqueItems": "unique_items",
}


def get_builtin_rules() -> Dict[str, ValidatorRule]:
    """Return built-in rules mapping.

    Keys are the rule names used in schemas, values are rule instances carrying
    their default `message`. Aliases from `RULE_ALIASES` share their target's instance.
    """
    rules: Dict[str, ValidatorRule] = {
        "required": RequiredValidatorRule(),
        "type": TypeValidatorRule(),
        "min": MinValidatorRule(),
        "max": MaxValidatorRule(),
        "exclusive_min": ExclusiveMinValidatorRule(),
        "exclusive_max": ExclusiveMaxValidatorRule(),
        "divisible_by": DivisibleByValidatorRule(),
        "min_length": MinLengthValidatorRule(),
        "max_length": MaxLengthValidatorRule(),
        "pattern": PatternValidatorRule(),
        "format": FormatValidatorRule(),
        "enum": EnumValidatorRule(),
        "min_items": MinItemsValidatorRule(),
        "max_items": MaxItemsValidatorRule(),
        "unique_items": UniqueItemsValidatorRule(),
    }
    for alias, name in RULE_ALIASES.items():
        rules[alias] = rules[name]
    return rules


__all__ = [
    "get_builtin_rules",
    "RULE_ALIASES",
    "RequiredValidatorRule",
    "TypeValidatorRule",
    "MinValidatorRule",
    "MaxValidatorRule",
    "ExclusiveMinValidatorRule",
    "ExclusiveMaxValidatorRule",
    "DivisibleByValidatorRule",
    "MinLengthValidatorRule",
    "MaxLengthValidatorRule",
    "PatternValidatorRule",
    "FormatValidatorRule",
    "EnumValidatorRule",
    "MinItemsValidatorRule",
    "MaxItemsValidatorRule",
    "UniqueItemsValidatorRule",
    "ExistsValidatorRule",
]
