from __future__ import annotations

import ipaddress
import re
import uuid
from datetime import date, datetime, time
from typing import Any, Callable, Dict
from urllib.parse import urlparse

from bson import ObjectId

from valirator.contracts.validator_rule import ValidatorRule
from valirator.exceptions.common_exceptions import SchemaDefinitionException

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s.]+$")


def _is_email(value: str) -> bool:
    return EMAIL_PATTERN.match(value) is not None


def _is_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme) and bool(parsed.netloc)


def _is_date_time(value: str) -> bool:
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return False
    return "T" in value or " " in value


def _is_date(value: str) -> bool:
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _is_time(value: str) -> bool:
    try:
        time.fromisoformat(value)
    except ValueError:
        return False
    return True


def _is_ip(version: int) -> Callable[[str], bool]:
    def check(value: str) -> bool:
        try:
            return ipaddress.ip_address(value).version == version
        except ValueError:
            return False

    return check


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


FORMAT_CHECKS: Dict[str, Callable[[str], bool]] = {
    "email": _is_email,
    "url": _is_url,
    "date-time": _is_date_time,
    "date": _is_date,
    "time": _is_time,
    "ipv4": _is_ip(4),
    "ipv6": _is_ip(6),
    "uuid": _is_uuid,
    "object_id": ObjectId.is_valid,
}

# Values already carrying the format as a Python type
NATIVE_TYPES: Dict[str, tuple] = {
    "date-time": (datetime,),
    "date": (date,),
    "time": (time,),
    "uuid": (uuid.UUID,),
    "object_id": (ObjectId,),
    "ipv4": (ipaddress.IPv4Address,),
    "ipv6": (ipaddress.IPv6Address,),
}


class FormatValidatorRule(ValidatorRule):
    message = "is not a valid %{expected}"

    def validate(self, actual: Any, expected: Any = None, **_: Any) -> bool:
        check = FORMAT_CHECKS.get(expected) if isinstance(expected, str) else None
        if check is None:
            raise SchemaDefinitionException(
                f"Unknown format `{expected}` (supported: {', '.join(FORMAT_CHECKS)})",
                data={"format": expected},
            )

        if actual is None or actual == "":
            return True
        if isinstance(actual, NATIVE_TYPES.get(expected, ())):
            return True
        if not isinstance(actual, str):
            return False
        return check(actual)
