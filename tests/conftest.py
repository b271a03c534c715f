"""
Pytest configuration and shared fixtures for valirator tests.
"""

import pytest
from faker import Faker

from valirator import RuleRegistry

fake = Faker()


@pytest.fixture
def registry():
    """A fresh registry with the built-in rules, so tests never touch the process-wide one."""
    return RuleRegistry.with_builtin_rules()


@pytest.fixture
def address_data():
    """A valid address record."""
    return {
        "Id": str(fake.random_int(min=1, max=99999)),
        "UserId": None,
        "FirstName": fake.first_name(),
        "LastName": fake.last_name(),
        "Line1": fake.street_address(),
        "Line2": None,
        "City": fake.city(),
        "State": fake.state_abbr(),
        "Zip": fake.zipcode(),
        "Country": "US",
        "Phone": fake.phone_number(),
        "Email": fake.email(),
        "Type": "primary",
    }


@pytest.fixture
def address_schema():
    return {
        "messages": {
            "required": "validation.required",
        },
        "properties": {
            "FirstName": {"rules": {"type": "string", "required": True, "max_length": 45}},
            "LastName": {"rules": {"type": "string", "required": True, "max_length": 45}},
            "Email": {
                "rules": {"type": "string", "required": True, "max_length": 50, "format": "email"},
                "messages": {"format": "validation.email.format"},
            },
            "Phone": {"rules": {"type": "string", "required": True}},
            "Line1": {"rules": {"type": "string", "required": True, "max_length": 100}},
            "Line2": {"rules": {"type": "string", "max_length": 100}},
            "Country": {"rules": {"type": "string", "required": True, "enum": ["US", "CA"]}},
            "State": {"rules": {"type": "string", "required": True, "max_length": 50}},
            "City": {"rules": {"type": "string", "required": True, "max_length": 50}},
            "Zip": {"rules": {"type": "string", "required": True, "max_length": 15}},
        },
    }
