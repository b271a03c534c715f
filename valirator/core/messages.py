from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Optional, Union

from valirator import config
from valirator.core.localization import translate
from valirator.exceptions.common_exceptions import MessageFormatException
from valirator.utils.call_utils import call_with_arity, resolve_value
from valirator.utils.serialisation import to_display_string

MessageFunction = Callable[[Any, Any], Union[str, Awaitable[str]]]
MessageSpec = Union[str, MessageFunction, None]

ACTUAL_PLACEHOLDER = "%{actual}"
EXPECTED_PLACEHOLDER = "%{expected}"


def render_template(template: str, actual: Any = None, expected: Any = None) -> str:
    """Substitute `%{actual}` and `%{expected}` in a message template."""
    if config.LOCALIZE_MESSAGES:
        template = translate(template, default=template)

    return (
        template
        .replace(ACTUAL_PLACEHOLDER, to_display_string(actual))
        .replace(EXPECTED_PLACEHOLDER, to_display_string(expected))
    )


async def format_message(
    spec: MessageSpec = None,
    actual: Any = None,
    expected: Any = None,
    *,
    rule_name: Optional[str] = None,
) -> str:
    """
    Resolve a message specification into the text stored in the error tree.

    Args:
        spec: A template string, a function `(actual, expected)` returning a string
            (or an awaitable of one), or None for the generic default message.
        actual: The validated value.
        expected: The value the rule was declared with.
        rule_name: Only used to describe failures of message functions.

    Raises:
        MessageFormatException: If a message function raises.
    """
    if spec is None:
        return render_template(config.DEFAULT_MESSAGE, actual, expected)

    if isinstance(spec, str):
        return render_template(spec, actual, expected)

    if not callable(spec):
        raise TypeError(f"Message specification must be a string or a callable, got {type(spec).__name__}")

    try:
        message = await resolve_value(call_with_arity(spec, actual, expected))
    except Exception as e:
        logging.error(f"[VALIDATION] Message function failed for rule `{rule_name}`: {e}")
        raise MessageFormatException(rule_name, str(e)) from e

    return message if isinstance(message, str) else to_display_string(message)
