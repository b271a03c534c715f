from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from valirator.exceptions.common_exceptions import SchemaDefinitionException

RESERVED_KEYS = frozenset({"rules", "messages", "properties"})


class SchemaForm(str, Enum):
    CANONICAL = "canonical"
    # property names directly as keys, no `properties` wrapper
    SHORTHAND = "shorthand"


def classify_schema(value: Mapping) -> SchemaForm:
    if set(value.keys()) <= RESERVED_KEYS:
        return SchemaForm.CANONICAL
    return SchemaForm.SHORTHAND


class SchemaNode(BaseModel):
    """
    One position of a schema: its rules, message overrides and child properties.

    Accepts both the canonical `{rules, messages, properties}` form and the
    shorthand form at every level:

        SchemaNode.parse({"FirstName": {"rules": {"required": True}}})
        SchemaNode.parse({"properties": {"FirstName": {"rules": {"required": True}}}})
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    rules: Dict[str, Any] = Field(default_factory=dict)
    messages: Dict[str, Any] = Field(default_factory=dict)
    properties: Dict[str, SchemaNode] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> Any:
        if value is None or isinstance(value, SchemaNode):
            return value if value is not None else {}
        if not isinstance(value, Mapping):
            raise ValueError(f"schema node must be a mapping, got {type(value).__name__}")

        if classify_schema(value) is SchemaForm.SHORTHAND:
            return {"properties": dict(value)}
        return dict(value)

    @field_validator("rules", "messages", "properties", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @classmethod
    def parse(cls, schema: Any) -> SchemaNode:
        """Normalize a caller supplied schema once, before validation starts."""
        if isinstance(schema, SchemaNode):
            return schema
        try:
            return cls.model_validate(schema)
        except ValidationError as e:
            raise SchemaDefinitionException(str(e), data={"errors": e.errors(include_url=False)}) from e

    @property
    def is_empty(self) -> bool:
        return not (self.rules or self.messages or self.properties)


__all__ = [
    "RESERVED_KEYS",
    "SchemaForm",
    "SchemaNode",
    "classify_schema",
]
