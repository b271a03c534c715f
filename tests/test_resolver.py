import pytest

from valirator import RuleNotFoundException, SchemaNode, resolve_rule


def test_registry_rule(registry):
    resolved = resolve_rule("required", True, SchemaNode.parse({}), registry)

    assert resolved.rule is registry.get_rule("required").rule
    assert resolved.default_rule is None


def test_property_level_function(registry):
    def custom(value):
        return True

    resolved = resolve_rule("required", custom, SchemaNode.parse({}), registry)

    assert resolved.rule is custom
    assert resolved.default_rule is registry.get_rule("required").rule


def test_property_level_function_without_registered_rule(registry):
    def custom(value):
        return True

    resolved = resolve_rule("anything", custom, SchemaNode.parse({}), registry)

    assert resolved.rule is custom
    assert resolved.default_rule is None


def test_schema_level_override_wins(registry):
    def schema_rule(value):
        return True

    def property_rule(value):
        return True

    root = SchemaNode.parse({"rules": {"required": schema_rule}})

    resolved = resolve_rule("required", property_rule, root, registry)
    assert resolved.rule is schema_rule
    assert resolved.default_rule is property_rule

    resolved = resolve_rule("required", True, root, registry)
    assert resolved.rule is schema_rule
    assert resolved.default_rule is registry.get_rule("required").rule


def test_schema_level_literal_is_not_an_override(registry):
    root = SchemaNode.parse({"rules": {"min": 3}})

    resolved = resolve_rule("min", 5, root, registry)

    assert resolved.rule is registry.get_rule("min").rule


def test_classes_are_expected_values(registry):
    resolved = resolve_rule("type", str, SchemaNode.parse({}), registry)

    assert resolved.rule is registry.get_rule("type").rule


def test_unresolvable_rule(registry):
    with pytest.raises(RuleNotFoundException) as exc_info:
        resolve_rule("nope", True, SchemaNode.parse({}), registry, property_name="FirstName")

    assert exc_info.value.rule_name == "nope"
    assert exc_info.value.property_name == "FirstName"
    assert exc_info.value.error_type == "rule_not_found"
