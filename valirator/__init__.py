"""
Valirator - declarative, async-first object validation

Describe the constraints of a data structure with a schema, validate any
(nested, list-containing) object against it and get back an error tree shaped
like the data:

    errors = await validate({"FirstName": {"rules": {"required": True}}}, {"FirstName": None})
    # {"FirstName": {"required": "is required"}}

Rules and messages may be plain or async functions, can be registered
process-wide with `register_rule` and overridden per schema or per property.
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"

from .app_provider import boot
from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
from .utils.logging import setup_logging
