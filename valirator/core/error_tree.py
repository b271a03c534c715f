from __future__ import annotations

from typing import Any, Dict, List, Union

ErrorTree = Dict[Any, Any]
# Index-aligned error trees of a list validated element by element; passing elements are `{}`.
ErrorList = List[ErrorTree]


def merge_position(rule_errors: ErrorTree, nested: Union[ErrorTree, ErrorList, None]) -> Union[ErrorTree, ErrorList]:
    """
    Combine a position's own rule failures with the result of its nested pass.

    A list whose elements fail stays a list unless the position failed its own
    rules too. Then the result is one dict holding the rule names plus the
    integer indexes of the failing elements, so it stays plain data.

    Returns an empty dict when there is nothing to report.
    """
    if isinstance(nested, list):
        if not any(nested):
            return dict(rule_errors)
        if not rule_errors:
            return nested
        return {**rule_errors, **{index: tree for index, tree in enumerate(nested) if tree}}

    if nested:
        return {**rule_errors, **nested}
    return dict(rule_errors)
