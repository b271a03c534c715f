from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any, Awaitable, List, Optional, Tuple, Union

from pydantic import BaseModel

from valirator import config
from valirator.core.error_tree import ErrorList, ErrorTree, merge_position
from valirator.core.messages import MessageSpec, format_message
from valirator.core.registry import RuleRegistry, is_rule_function, rule_registry
from valirator.core.resolver import resolve_rule
from valirator.core.schema import SchemaNode
from valirator.core.stopwatch import Stopwatch
from valirator.utils.call_utils import bind_with_arity, call_with_arity, resolve_value


def _as_structure(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    return value


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _read(parent: Any, key: str) -> Any:
    if isinstance(parent, Mapping):
        return parent.get(key)
    return None


async def _gather_or_cancel(*aws: Awaitable[Any]) -> List[Any]:
    """`asyncio.gather`, except that a failure cancels the siblings still running and waits for them to stop."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        raise


class _Run:
    """State shared by every position of one validate() call."""

    __slots__ = ("root", "schema", "registry")

    def __init__(self, root: SchemaNode, schema: Any, registry: RuleRegistry) -> None:
        self.root = root
        self.schema = schema
        self.registry = registry


class ValidationEngine:
    """
    Walks a schema against data and builds the error tree.

    Every rule, property and list element at one level is started before any of
    them is awaited (`asyncio.gather`), so asynchronous rules overlap. The first
    fault cancels the siblings still running before it propagates.
    """

    def __init__(self, registry: Optional[RuleRegistry] = None) -> None:
        self.registry = registry if registry is not None else rule_registry

    async def validate(self, schema: Any, data: Any) -> Union[ErrorTree, ErrorList]:
        """
        Validate `data` against `schema`.

        Returns:
            The error tree; `{}` when everything passes.

        Raises:
            SchemaDefinitionException: If the schema is malformed.
            RuleNotFoundException: If a declared rule cannot be resolved. Aborts the whole call.
            MessageFormatException: If a message function fails.
            Exception: Whatever a rule function raises, unchanged.
        """
        root = SchemaNode.parse(schema)
        run = _Run(root, schema, self.registry)

        with Stopwatch("[VALIDATION] validate()", log=config.TIME_VALIDATIONS):
            data = _as_structure(data)

            literal_rules = {}
            if not isinstance(data, Mapping) and not _is_sequence(data):
                # only a scalar root is checked against the root's literal rules
                literal_rules = {name: value for name, value in root.rules.items() if not is_rule_function(value)}

            if data is None and root.properties:
                # a missing root object still reports its missing properties
                nested_pass = self._validate_object(run, root, data)
            else:
                nested_pass = self._validate_nested(run, root, data)

            rule_errors, nested = await _gather_or_cancel(
                self._check_rules(run, literal_rules, root.messages, data, None, None),
                nested_pass,
            )
            return merge_position(rule_errors, nested)

    async def _validate_object(self, run: _Run, node: SchemaNode, obj: Any) -> ErrorTree:
        keys = list(node.properties.keys())
        results = await _gather_or_cancel(*(
            self._validate_property(run, key, node.properties[key], obj) for key in keys
        ))
        return {key: result for key, result in zip(keys, results) if result}

    async def _validate_property(self, run: _Run, key: str, node: SchemaNode, parent: Any) -> Union[ErrorTree, ErrorList]:
        value = _as_structure(_read(parent, key))

        rule_errors, nested = await _gather_or_cancel(
            self._check_rules(run, node.rules, node.messages, value, key, parent),
            self._validate_nested(run, node, value),
        )
        return merge_position(rule_errors, nested)

    async def _validate_nested(self, run: _Run, node: SchemaNode, value: Any) -> Union[ErrorTree, ErrorList, None]:
        if not node.properties:
            return None

        if _is_sequence(value):
            items = await _gather_or_cancel(*(
                self._validate_object(run, node, _as_structure(item)) for item in value
            ))
            return list(items)

        if isinstance(value, Mapping):
            return await self._validate_object(run, node, value)

        # scalar or missing value, nothing to descend into
        return None

    async def _check_rules(
        self,
        run: _Run,
        rules: Mapping[str, Any],
        messages: Mapping[str, MessageSpec],
        value: Any,
        key: Optional[str],
        parent: Any,
    ) -> ErrorTree:
        if not rules:
            return {}

        names = list(rules.keys())
        outcomes: List[Tuple[str, Optional[str]]] = await _gather_or_cancel(*(
            self._check_rule(run, name, rules[name], messages, value, key, parent) for name in names
        ))
        return {name: message for name, message in outcomes if message is not None}

    async def _check_rule(
        self,
        run: _Run,
        name: str,
        expected: Any,
        messages: Mapping[str, MessageSpec],
        value: Any,
        key: Optional[str],
        parent: Any,
    ) -> Tuple[str, Optional[str]]:
        resolved = resolve_rule(name, expected, run.root, run.registry, property_name=key)

        try:
            passed = await resolve_value(call_with_arity(
                resolved.rule,
                value,
                expected,
                key,
                parent,
                run.schema,
                bind_with_arity(resolved.default_rule),
            ))
        except Exception as e:
            logging.error(f"[VALIDATION] Rule `{name}` raised for `{key}`: {e}")
            raise

        if passed:
            return name, None

        spec = self._message_spec(run, name, messages, resolved.rule)
        message = await format_message(spec, value, expected, rule_name=name)
        return name, message

    @staticmethod
    def _message_spec(run: _Run, name: str, messages: Mapping[str, MessageSpec], rule: Any) -> MessageSpec:
        """Property-level, then root-level, then the registered default, then the rule's own default."""
        # a message declared as None counts as not declared
        spec = messages.get(name)
        if spec is None:
            spec = run.root.messages.get(name)
        if spec is None:
            definition = run.registry.get_rule(name)
            if definition is not None:
                spec = definition.message
            else:
                spec = getattr(rule, "message", None)
        return spec


async def validate(schema: Any, data: Any, *, registry: Optional[RuleRegistry] = None) -> Union[ErrorTree, ErrorList]:
    """Validate `data` against `schema` using the default (or the given) rule registry."""
    return await ValidationEngine(registry).validate(schema, data)


__all__ = [
    "ValidationEngine",
    "validate",
]
