"""Exceptions raised by valirator.

Rule failures are data (the error tree), so everything here signals a defect
in the schema, the configuration or a user supplied function.
"""

from .common_exceptions import (
    ValiratorException,
    RuleNotFoundException,
    SchemaDefinitionException,
    MessageFormatException,
    EnvInvalidException,
)


__all__ = [
    "ValiratorException",
    "RuleNotFoundException",
    "SchemaDefinitionException",
    "MessageFormatException",
    "EnvInvalidException",
]
