from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Optional, Union


class ValidatorRule(ABC):
    """
    Contract for class-based rules.

    Instances are rule functions: the engine calls them with
    `(actual, expected, property_name, parent, schema, default_rule)`.
    They can be registered under a name or used directly as a property-level rule value.

    `message` is the default message specification used when the rule is registered
    without an explicit one.
    """

    message: Optional[Union[str, Callable[..., Any]]] = None

    @abstractmethod
    def validate(
        self,
        actual: Any,
        expected: Any,
        *,
        property_name: Optional[str] = None,
        parent: Any = None,
        schema: Any = None,
        default_rule: Optional[Callable[..., Any]] = None,
    ) -> Union[bool, Awaitable[bool]]:
        """
        Check a value.

        Args:
            actual: The value at the validated position (None when absent).
            expected: The value the rule was declared with in the schema.
            property_name: Name of the validated property.
            parent: The mapping holding the property, for cross-field checks.
            schema: The schema passed to `validate`.
            default_rule: The rule this one overrides, if any.

        Returns:
            Whether the value passes, either directly or as an awaitable.
        """
        raise NotImplementedError

    def __call__(
        self,
        actual: Any,
        expected: Any = None,
        property_name: Optional[str] = None,
        parent: Any = None,
        schema: Any = None,
        default_rule: Optional[Callable[..., Any]] = None,
    ) -> Union[bool, Awaitable[bool]]:
        return self.validate(
            actual,
            expected,
            property_name=property_name,
            parent=parent,
            schema=schema,
            default_rule=default_rule,
        )
