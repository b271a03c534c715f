from __future__ import annotations

from typing import Any, Optional, Union

from valirator.core.engine import ValidationEngine
from valirator.core.error_tree import ErrorList, ErrorTree
from valirator.core.registry import RuleRegistry


class ValidationSchema:
    """
    A schema bound once and reused for many validations:

        schema = ValidationSchema({"FirstName": {"rules": {"required": True}}})
        errors = await schema.validate({"FirstName": None})
    """

    def __init__(self, schema: Any, *, registry: Optional[RuleRegistry] = None) -> None:
        self.schema = schema
        self.engine = ValidationEngine(registry)

    async def validate(self, data: Any) -> Union[ErrorTree, ErrorList]:
        return await self.engine.validate(self.schema, data)
