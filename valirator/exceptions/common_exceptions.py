from typing import Optional

from valirator.utils.serialisation import get_exception_error_type


class ValiratorException(Exception):
    def __init__(self,
        message: str,
        *,
        error_type: Optional[str] = None,
        data: Optional[dict] = None
    ):
        """
        Base exception for configuration and runtime faults of a validation call.

        Failed rules are never reported through exceptions; they end up in the error tree.

        Args:
            message: The error message.
            error_type: The error type (if not provided, it will be inferred from the exception class name).
            data: Extra details about the fault.
        """
        self.message = message
        self.error_type = error_type or get_exception_error_type(self)
        self.data = data
        super().__init__(message)


class RuleNotFoundException(ValiratorException):
    def __init__(self, rule_name: str, property_name: Optional[str] = None):
        message = f"[RULE NOT FOUND] No rule function resolvable for `{rule_name}`"
        if property_name is not None:
            message += f" (property: `{property_name}`)"
        super().__init__(message, data={"rule": rule_name, "property": property_name})
        self.rule_name = rule_name
        self.property_name = property_name


class SchemaDefinitionException(ValiratorException, ValueError):
    """Raised when a schema (or a rule's expected value) cannot be understood."""

    def __init__(self, message: str, *, data: Optional[dict] = None):
        super().__init__(f"[SCHEMA INVALID] {message}", data=data)


class MessageFormatException(ValiratorException):
    def __init__(self, rule_name: Optional[str] = None, reason: Optional[str] = None):
        message = "[MESSAGE FORMAT] Message function failed"
        if rule_name:
            message += f" for rule `{rule_name}`"
        if reason:
            message += f": {reason}"
        super().__init__(message, data={"rule": rule_name})
        self.rule_name = rule_name


class EnvInvalidException(ValueError):
    def __init__(self, env_name: str, value: str = None, supported_values: list[str] = None):
        message = f"[ENV INVALID] Invalid environment variable: `{env_name}`"
        if value:
            message += f" (value: `{value}`) "
        if supported_values:
            message += f" (supported values: {', '.join(supported_values)})"
        super().__init__(message)
