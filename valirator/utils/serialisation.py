import re
from datetime import date, datetime, time
from typing import Any

from bson import ObjectId


def to_display_string(val: Any) -> str:
    """
    Render a value the way it should appear inside a validation message.

    Classes are shown by name, regex patterns by their source and sequences
    as a comma separated list.
    """
    if isinstance(val, str):
        return val
    if isinstance(val, ObjectId):
        return str(val)
    if isinstance(val, (datetime, date, time)):
        return val.isoformat()
    if isinstance(val, re.Pattern):
        return val.pattern
    if isinstance(val, type):
        return val.__name__
    elif isinstance(val, (list, tuple, set, frozenset)):
        return ", ".join(to_display_string(item) for item in val)

    return str(val)


def pascal_case_to_snake_case(pascal: type | str) -> str:
    """
    Convert a class name (CamelCase or PascalCase) to snake_case.

    Args:
        pascal: The class or class name as a string.

    Returns:
        str: The snake_case version of the class name.
    """
    if not isinstance(pascal, str):
        pascal = pascal.__name__
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', pascal)
    snake = re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()
    return snake


def get_exception_error_type(exception: Exception) -> str:
    return pascal_case_to_snake_case(remove_suffix(exception.__class__.__name__, 'Exception'))


def remove_suffix(text: str, suffix: str) -> str:
    """
    Remove an exact suffix from the given text if present.

    Unlike str.rstrip, this removes only the provided suffix once,
    not any combination of its characters.
    """
    if text.endswith(suffix):
        return text[: -len(suffix)]
    return text
