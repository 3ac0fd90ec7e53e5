"""Document and graph validation."""

from .structure import (
    is_jsonld_document,
    require_object,
    validate_graph_structure,
    validate_plain_document,
)

__all__ = [
    "is_jsonld_document",
    "require_object",
    "validate_graph_structure",
    "validate_plain_document",
]
