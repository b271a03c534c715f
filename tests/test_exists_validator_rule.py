import pytest
from bson import ObjectId

from valirator import ExistsValidatorRule, validate

EXISTING_ID = "6563e5a79999999999999999"


class MockModel:
    @classmethod
    async def exists(cls, query: dict) -> bool:
        # Pretend only ObjectId("6563e5a79999999999999999") exists
        val = list(query.values())[0]
        return isinstance(val, ObjectId) and str(val) == EXISTING_ID


def schema_for(rule):
    return {"ref_id": {"rules": {"exists": rule}, "messages": {"exists": "unknown reference %{actual}"}}}


@pytest.mark.asyncio
async def test_exists_rule(registry):
    schema = schema_for(ExistsValidatorRule(MockModel))

    # Missing is allowed (allow_null)
    assert await validate(schema, {}, registry=registry) == {}
    assert await validate(schema, {"ref_id": EXISTING_ID}, registry=registry) == {}
    assert await validate(schema, {"ref_id": ObjectId(EXISTING_ID)}, registry=registry) == {}

    errors = await validate(schema, {"ref_id": "bad"}, registry=registry)
    assert errors == {"ref_id": {"exists": "unknown reference bad"}}

    errors = await validate(schema, {"ref_id": "6563e5a70000000000000000"}, registry=registry)
    assert "exists" in errors["ref_id"]


@pytest.mark.asyncio
async def test_exists_rule_each_and_not_null(registry):
    schema = {"ref_ids": {"rules": {"exists": ExistsValidatorRule(MockModel, each=True, allow_null=False)}}}

    assert await validate(schema, {"ref_ids": [EXISTING_ID, EXISTING_ID]}, registry=registry) == {}

    errors = await validate(schema, {"ref_ids": [EXISTING_ID, "6563e5a70000000000000000"]}, registry=registry)
    # unregistered class-based rule falls back to its own message
    assert errors == {"ref_ids": {"exists": "does not exist"}}

    errors = await validate(schema, {"ref_ids": None}, registry=registry)
    assert errors == {"ref_ids": {"exists": "does not exist"}}
