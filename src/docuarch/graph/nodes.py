"""
Graph node construction from JSON-LD items.

Each item of the document's `@graph` (or the document itself when there is no
`@graph`) becomes at most one node:
1. Skip non-objects and items without a resolvable id (`@id` or `id`)
2. Resolve label, type local name, visual group and expanded type
3. Copy remaining item keys onto the node as pass-through attributes
4. Register the node in the id -> Node index used by edge extraction
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from docuarch.constants import LABEL_KEYS, NODE_RESERVED_KEYS, UNDEFINED_TYPE
from docuarch.semantic.classify import get_node_group, primary_type
from docuarch.semantic.context import ContextResolver

logger = logging.getLogger(__name__)


# =============================================================================
# DATA STRUCTURES
# =============================================================================

@dataclass
class Node:
    """
    A single visualization node.

    Attributes:
        id: Unique node identifier (the item's `@id` / `id`).
        label: Display label.
        type: Local name of the item type, or "undefined".
        group: Visual group from the fixed group set.
        description: Item description, or "<type> entity".
        original_type: The raw `@type` / `type` value.
        expanded_type: Type with its compact IRI prefix expanded.
        attributes: Pass-through item keys (domain-specific fields).
    """

    id: Any
    label: Any
    type: str
    group: str
    description: Any = ""
    original_type: Any = None
    expanded_type: Any = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the output record.

        Pass-through attributes are applied last and may shadow computed
        fields of the same name (e.g. an item's own `description`).
        """
        record = {
            "id": self.id,
            "label": self.label,
            "type": self.type,
            "group": self.group,
            "description": self.description,
            "originalType": self.original_type,
            "expandedType": self.expanded_type,
        }
        record.update(self.attributes)
        return record


@dataclass
class NodeBuildResult:
    """
    Result of node building.

    Attributes:
        nodes: Nodes in document order.
        index: Node id -> Node lookup.
        skipped_count: Items dropped for not being objects or lacking an id.
        duplicate_count: Items dropped because their id was already taken.
    """

    nodes: List[Node]
    index: Dict[Any, Node]
    skipped_count: int = 0
    duplicate_count: int = 0

    @property
    def total(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return (
            f"NodeBuildResult(total={self.total}, "
            f"skipped={self.skipped_count}, duplicates={self.duplicate_count})"
        )


# =============================================================================
# ITEM ACCESSORS
# =============================================================================

def graph_items(document: Dict[str, Any]) -> List[Any]:
    """Items to extract: the `@graph` list, else the document itself."""
    graph = document.get("@graph")
    if isinstance(graph, list):
        return graph
    if isinstance(graph, dict):
        return [graph]
    return [document]


def item_id(item: Any) -> Optional[Any]:
    """
    Resolvable id of an item, or None.

    Accepts non-empty strings and integers from `@id`, falling back to `id`.
    """
    if not isinstance(item, dict):
        return None
    value = item.get("@id") or item.get("id")
    if isinstance(value, bool):
        return None
    if isinstance(value, (str, int)) and value != "":
        return value
    return None


def item_type(item: Dict[str, Any]) -> Any:
    return item.get("@type") or item.get("type")


# =============================================================================
# NODE BUILDERS
# =============================================================================

def build_node(item: Dict[str, Any], node_id: Any, resolver: ContextResolver) -> Node:
    """
    Create a Node from one item.

    Args:
        item: Raw JSON-LD item.
        node_id: The item's resolved id.
        resolver: Context resolver of the current document.

    Returns:
        Node with pass-through attributes attached.
    """
    raw_type = item_type(item)
    type_value = primary_type(raw_type)
    type_name = None
    if isinstance(type_value, str):
        type_name = resolver.get_local_name(type_value)
    type_name = type_name or UNDEFINED_TYPE

    label = next((item[key] for key in LABEL_KEYS if item.get(key)), None)
    if not label:
        label = resolver.get_local_name(node_id) or node_id

    attributes = {
        key: value for key, value in item.items()
        if key not in NODE_RESERVED_KEYS
    }

    return Node(
        id=node_id,
        label=label,
        type=type_name,
        group=get_node_group(type_value),
        description=item.get("description") or f"{type_name} entity",
        original_type=raw_type,
        expanded_type=resolver.expand_iri(type_value),
        attributes=attributes,
    )


def build_nodes(items: List[Any], resolver: ContextResolver) -> NodeBuildResult:
    """
    Build nodes and the node index for all graph items.

    The first item carrying a given id wins; later items with the same id are
    dropped.

    Args:
        items: Graph items (see graph_items).
        resolver: Context resolver of the current document.

    Returns:
        NodeBuildResult with nodes in document order.
    """
    nodes: List[Node] = []
    index: Dict[Any, Node] = {}
    skipped = 0
    duplicates = 0

    for item in items:
        node_id = item_id(item)
        if node_id is None:
            skipped += 1
            continue

        if node_id in index:
            duplicates += 1
            logger.warning(f"Duplicate node id {node_id!r}; keeping first occurrence")
            continue

        node = build_node(item, node_id, resolver)
        nodes.append(node)
        index[node_id] = node

    logger.info(
        f"Built {len(nodes)} nodes: {skipped} items skipped, {duplicates} duplicates"
    )

    return NodeBuildResult(
        nodes=nodes,
        index=index,
        skipped_count=skipped,
        duplicate_count=duplicates,
    )
