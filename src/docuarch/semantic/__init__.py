"""Semantic helpers: context resolution, type classification, format detection."""

from .context import ContextResolver, get_local_name
from .classify import GROUP_RULES, get_node_group, match_group, primary_type
from .formats import detect_format

__all__ = [
    "ContextResolver",
    "get_local_name",
    "GROUP_RULES",
    "get_node_group",
    "match_group",
    "primary_type",
    "detect_format",
]
