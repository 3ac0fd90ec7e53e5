"""
Type classification into visual groups.

Groups are assigned by keyword containment over the lower-cased local name of
the type. Rules are evaluated in order and the first match wins, so a type
such as "BusinessProcess" lands in Business rather than Processes.
"""

from typing import Any, Optional, Tuple

from docuarch.constants import (
    GROUP_ACTORS,
    GROUP_APPLICATION,
    GROUP_BUSINESS,
    GROUP_COMPLIANCE,
    GROUP_COMPONENTS,
    GROUP_DATA,
    GROUP_MOTIVATION,
    GROUP_OTHER,
    GROUP_PROCESSES,
    GROUP_TECHNOLOGY,
)
from docuarch.semantic.context import get_local_name


# =============================================================================
# GROUP RULES
# =============================================================================
# (keywords, group); order is precedence

GROUP_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    # ArchiMate layers
    (("business",), GROUP_BUSINESS),
    (("application",), GROUP_APPLICATION),
    (("technology", "system", "artifact", "node"), GROUP_TECHNOLOGY),
    (("data", "object"), GROUP_DATA),
    (("goal", "principle", "requirement"), GROUP_MOTIVATION),
    (("compliance", "constraint"), GROUP_COMPLIANCE),
    # Generic
    (("person", "actor", "role"), GROUP_ACTORS),
    (("process", "function", "service"), GROUP_PROCESSES),
    (("component", "module"), GROUP_COMPONENTS),
)


def primary_type(type_value: Any) -> Any:
    """
    Reduce a JSON-LD `@type` value to a single type.

    `@type` may be a list; the first string member is used.
    """
    if isinstance(type_value, list):
        for member in type_value:
            if isinstance(member, str) and member:
                return member
        return None
    return type_value


def get_node_group(type_value: Any) -> str:
    """
    Classify a type into one of the fixed visual groups.

    Args:
        type_value: Type string (compact or full IRI), list of types, or None.

    Returns:
        Group name from NODE_GROUPS; "Other" when absent or unmatched.
    """
    type_value = primary_type(type_value)
    if not type_value or not isinstance(type_value, str):
        return GROUP_OTHER

    local_type = get_local_name(type_value).lower()
    return match_group(local_type) or GROUP_OTHER


def match_group(local_type: str) -> Optional[str]:
    """Return the first group whose keywords occur in local_type."""
    for keywords, group in GROUP_RULES:
        if any(keyword in local_type for keyword in keywords):
            return group
    return None
