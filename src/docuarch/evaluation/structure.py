"""
Structural validation of graph documents.

Checks:
- Plain documents carry `nodes` and `edges` lists
- Every node has a truthy `id` and `label`
- Every edge has truthy `from` and `to`

A failed check rejects the whole document; a graph is never partially used.
"""

from typing import Any, Dict, Iterable

from docuarch.exceptions import InvalidGraphStructure, MalformedGraphDocument


def is_jsonld_document(document: Dict[str, Any]) -> bool:
    return "@context" in document or "@graph" in document


def require_object(document: Any) -> Dict[str, Any]:
    if not isinstance(document, dict):
        raise MalformedGraphDocument(
            f"Invalid JSON structure: expected an object, got {type(document).__name__}"
        )
    return document


def validate_plain_document(document: Any) -> Dict[str, Any]:
    """
    Verify a plain document has `nodes` and `edges` lists.

    Raises:
        MalformedGraphDocument: If either field is missing or not a list.
    """
    document = require_object(document)
    for key in ("nodes", "edges"):
        if not isinstance(document.get(key), list):
            raise MalformedGraphDocument(
                f"JSON must contain 'nodes' and 'edges' arrays; "
                f"'{key}' is {type(document.get(key)).__name__}"
            )
    return document


def _first_invalid(records: Iterable[Any], required: tuple):
    invalid = [
        record for record in records
        if not isinstance(record, dict) or any(not record.get(key) for key in required)
    ]
    return len(invalid), (invalid[0] if invalid else None)


def validate_graph_structure(nodes: Iterable[Any], edges: Iterable[Any]) -> None:
    """
    Verify node and edge records carry their required fields.

    Raises:
        InvalidGraphStructure: On the first class of invalid records found.
    """
    count, example = _first_invalid(nodes, ("id", "label"))
    if count:
        raise InvalidGraphStructure(
            f"Invalid node structure: {count} node(s) lack 'id' or 'label' "
            f"(first: {example!r})"
        )

    count, example = _first_invalid(edges, ("from", "to"))
    if count:
        raise InvalidGraphStructure(
            f"Invalid edge structure: {count} edge(s) lack 'from' or 'to' "
            f"(first: {example!r})"
        )
