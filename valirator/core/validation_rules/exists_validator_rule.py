from __future__ import annotations

from typing import Any

from bson import ObjectId

from valirator.contracts.validator_rule import ValidatorRule


class ExistsValidatorRule(ValidatorRule):
    """
    Asynchronous lookup rule: the value must reference an existing record.

    `model` is anything exposing `async exists(query: dict) -> bool` (e.g. a Mongo model).
    Not registered by default; declare it directly as the property-level rule value:

        {"properties": {"owner_id": {"rules": {"exists": ExistsValidatorRule(User)}}}}
    """

    message = "does not exist"

    def __init__(
        self,
        model: type,
        *,
        db_key: str = "_id",
        allow_null: bool = True,
        is_object_id: bool = True,
        each: bool = False,
    ) -> None:
        self.model = model
        self.db_key = db_key
        self.allow_null = allow_null
        self.is_object_id = is_object_id
        self.each = each

    async def validate(self, actual: Any, expected: Any = None, **_: Any) -> bool:
        if actual is None or actual == "":
            return self.allow_null

        items = actual if (self.each and isinstance(actual, list)) else [actual]

        for item in items:
            if self.is_object_id:
                if not isinstance(item, ObjectId):
                    if not isinstance(item, str) or not ObjectId.is_valid(item):
                        return False
                    item = ObjectId(item)
            if not await self.model.exists({self.db_key: item}):
                return False

        return True
