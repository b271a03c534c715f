import re

import pytest

from valirator import SchemaDefinitionException, SchemaForm, SchemaNode, classify_schema


def test_classify_schema():
    assert classify_schema({}) is SchemaForm.CANONICAL
    assert classify_schema({"rules": {}, "properties": {}}) is SchemaForm.CANONICAL
    assert classify_schema({"FirstName": {}}) is SchemaForm.SHORTHAND
    assert classify_schema({"rules": {}, "FirstName": {}}) is SchemaForm.SHORTHAND


def test_shorthand_and_canonical_are_equivalent():
    shorthand = SchemaNode.parse({"Person": {"FirstName": {"rules": {"required": True}}}})
    canonical = SchemaNode.parse({
        "properties": {
            "Person": {"properties": {"FirstName": {"rules": {"required": True}}}},
        }
    })

    assert shorthand == canonical
    assert shorthand.properties["Person"].properties["FirstName"].rules == {"required": True}


def test_empty_and_missing_fields():
    node = SchemaNode.parse({"rules": None, "properties": {"A": {}}})

    assert node.rules == {}
    assert node.messages == {}
    assert node.properties["A"].is_empty
    assert SchemaNode.parse(None).is_empty


def test_rule_values_are_kept_as_is():
    pattern = re.compile(r"^\d+$")

    def rule(value):
        return True

    node = SchemaNode.parse({"rules": {"custom": rule}, "properties": {"A": {"rules": {"pattern": pattern, "type": str}}}})

    assert node.rules["custom"] is rule
    assert node.properties["A"].rules["pattern"] is pattern
    assert node.properties["A"].rules["type"] is str


def test_parse_returns_existing_nodes():
    node = SchemaNode.parse({"A": {}})

    assert SchemaNode.parse(node) is node


def test_nodes_are_immutable():
    node = SchemaNode.parse({"A": {}})

    with pytest.raises(Exception):
        node.rules = {"required": True}


@pytest.mark.parametrize("schema", [
    "FirstName",
    ["FirstName"],
    {"FirstName": True},
    {"properties": {"FirstName": 1}},
    {"rules": ["required"]},
])
def test_malformed_schemas(schema):
    with pytest.raises(SchemaDefinitionException):
        SchemaNode.parse(schema)
