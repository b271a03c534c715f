"""Core of valirator re-exported for convenient access."""

from .engine import *  # noqa: F401,F403
from .error_tree import ErrorList, ErrorTree  # noqa: F401
from .localization import *  # noqa: F401,F403
from .messages import MessageSpec, format_message  # noqa: F401
from .registry import *  # noqa: F401,F403
from .resolver import ResolvedRule, resolve_rule  # noqa: F401
from .schema import *  # noqa: F401,F403
from .stopwatch import Stopwatch  # noqa: F401
from .validation_rules import *  # noqa: F401,F403
from .validation_schema import ValidationSchema  # noqa: F401
