"""
Graph edge construction from JSON-LD items.

Two independent strategies produce edge candidates; their outputs are
concatenated and filtered later by the assembler:
1. Property edges: any non-reserved property whose value (or nested `@id`,
   or array element) names a known node becomes an edge labelled with the
   property's local name
2. Relationship object edges: association/relationship/compliance items
   expand their `relatesTo` members into pairwise edges (a clique), or a
   single edge from the item itself when `relatesTo` is one value

Candidates may still point at unknown nodes or loop back to their source;
assemble_graph removes those.
"""

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Any, Dict, Iterator, List, Optional

from docuarch.config import PipelineConfig
from docuarch.constants import (
    EDGE_TYPE_RELATIONSHIP,
    NARRATIVE_PROPERTIES,
    RELATES_TO_KEYS,
    RELATIONSHIP_RESERVED_KEYS,
    RELATIONSHIP_TYPE_KEYWORDS,
)
from docuarch.exceptions import CliqueLimitExceeded
from docuarch.graph.nodes import Node, item_id, item_type
from docuarch.semantic.classify import primary_type
from docuarch.semantic.context import get_local_name

logger = logging.getLogger(__name__)


# =============================================================================
# DATA STRUCTURES
# =============================================================================

@dataclass
class Edge:
    """
    A single visualization edge.

    Attributes:
        from_id: Source node id.
        to_id: Target node id.
        label: Display label (property local name or relationship name).
        type: "relationship" for property edges, the relationship item's type
            local name for relationship object edges.
        relationship_id: Id of the relationship item that produced the edge.
        property: Source property name for property edges.
    """

    from_id: Any
    to_id: Any
    label: Any
    type: str
    relationship_id: Optional[Any] = None
    property: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        record = {
            "from": self.from_id,
            "to": self.to_id,
            "label": self.label,
            "type": self.type,
        }
        if self.relationship_id is not None:
            record["relationshipId"] = self.relationship_id
        if self.property is not None:
            record["property"] = self.property
        return record


@dataclass
class EdgeBuildResult:
    """
    Result of edge building (unfiltered candidates).

    Attributes:
        edges: Property edges followed by relationship object edges.
        property_edge_count: Edges inferred from item properties.
        relationship_edge_count: Edges expanded from relationship objects.
    """

    edges: List[Edge]
    property_edge_count: int = 0
    relationship_edge_count: int = 0

    @property
    def total(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        return (
            f"EdgeBuildResult(total={self.total}, "
            f"property={self.property_edge_count}, "
            f"relationship={self.relationship_edge_count})"
        )


# =============================================================================
# REFERENCE RESOLUTION
# =============================================================================

def resolve_references(value: Any) -> Iterator[str]:
    """
    Yield every string that a property value may reference.

    - str: the string itself
    - {"@id": ...}: the id
    - list: element-wise, recursively
    - anything else: nothing
    """
    if isinstance(value, list):
        for element in value:
            yield from resolve_references(element)
        return

    if isinstance(value, dict):
        value = value.get("@id")

    if isinstance(value, str):
        yield value


def resolve_member(member: Any) -> Any:
    """Relationship member id: `{"@id": x}` -> x, other values unchanged."""
    if isinstance(member, dict) and member.get("@id"):
        return member["@id"]
    return member


# =============================================================================
# PROPERTY EDGES
# =============================================================================

def is_narrative_property(prop: str) -> bool:
    local = get_local_name(prop)
    return isinstance(local, str) and local.lower() in NARRATIVE_PROPERTIES


def extract_property_edges(items: List[Any], index: Dict[Any, Node]) -> List[Edge]:
    """
    Infer edges from properties whose values name known nodes.

    Args:
        items: Graph items.
        index: Node id -> Node lookup.

    Returns:
        Edge candidates, in item and property order.
    """
    edges: List[Edge] = []

    for item in items:
        source_id = item_id(item)
        if source_id is None:
            continue

        for prop, value in item.items():
            if prop in RELATIONSHIP_RESERVED_KEYS or is_narrative_property(prop):
                continue

            label = get_local_name(prop)
            for target in resolve_references(value):
                if target in index:
                    edges.append(Edge(
                        from_id=source_id,
                        to_id=target,
                        label=label,
                        type=EDGE_TYPE_RELATIONSHIP,
                        property=prop,
                    ))

    logger.debug(f"Built {len(edges)} property edges")
    return edges


# =============================================================================
# RELATIONSHIP OBJECT EDGES
# =============================================================================

def relationship_type_name(item: Dict[str, Any]) -> Optional[str]:
    """Type local name if the item is a relationship object, else None."""
    type_value = primary_type(item_type(item))
    if not type_value or not isinstance(type_value, str):
        return None
    local = get_local_name(type_value)
    if any(keyword in local.lower() for keyword in RELATIONSHIP_TYPE_KEYWORDS):
        return local
    return None


def _has_members(value: Any) -> bool:
    # Empty containers still claim the field; aliases are not consulted.
    return isinstance(value, (list, dict)) or bool(value)


def relationship_members(item: Dict[str, Any]) -> Any:
    """Value of the first member field set on the item (relatesTo, then aliases)."""
    return next((item[key] for key in RELATES_TO_KEYS if _has_members(item.get(key))), None)


def _check_clique_size(
    relationship_id: Any,
    member_count: int,
    config: PipelineConfig,
) -> None:
    limit = config.max_clique_members
    if limit is not None and member_count > limit:
        raise CliqueLimitExceeded(relationship_id, member_count, limit)
    if member_count > config.clique_warning_threshold:
        logger.warning(
            f"Relationship {relationship_id!r} relates {member_count} members; "
            f"expanding to {member_count * (member_count - 1) // 2} edges"
        )


def extract_relationship_object_edges(
    items: List[Any],
    index: Dict[Any, Node],
    config: Optional[PipelineConfig] = None,
) -> List[Edge]:
    """
    Expand explicit relationship objects into edges.

    A `relatesTo` list connects every unordered pair of members. A single
    value yields one edge from the relationship item, but only when the item
    itself is a known node; list members carry no such condition.

    Args:
        items: Graph items.
        index: Node id -> Node lookup.
        config: Pipeline configuration (clique bounds).

    Returns:
        Edge candidates, pairs in (i, j > i) order.

    Raises:
        CliqueLimitExceeded: If a member list exceeds config.max_clique_members.
    """
    config = config or PipelineConfig()
    edges: List[Edge] = []

    for item in items:
        if not isinstance(item, dict):
            continue

        type_name = relationship_type_name(item)
        if type_name is None:
            continue

        members = relationship_members(item)
        if not members:
            continue

        rel_id = item_id(item)
        label = item.get("name") or type_name

        if isinstance(members, list):
            _check_clique_size(rel_id, len(members), config)
            for source, target in combinations(members, 2):
                edges.append(Edge(
                    from_id=resolve_member(source),
                    to_id=resolve_member(target),
                    label=label,
                    type=type_name,
                    relationship_id=rel_id,
                ))
        elif rel_id is not None and rel_id in index:
            edges.append(Edge(
                from_id=rel_id,
                to_id=resolve_member(members),
                label=label,
                type=type_name,
                relationship_id=rel_id,
            ))
        else:
            logger.debug(
                f"Skipping single-target relationship {rel_id!r}: not a known node"
            )

    logger.debug(f"Built {len(edges)} relationship object edges")
    return edges


# =============================================================================
# ORCHESTRATOR
# =============================================================================

def build_all_edges(
    items: List[Any],
    index: Dict[Any, Node],
    config: Optional[PipelineConfig] = None,
) -> EdgeBuildResult:
    """
    Run both edge strategies and concatenate their candidates.

    Args:
        items: Graph items.
        index: Node id -> Node lookup from build_nodes.
        config: Pipeline configuration.

    Returns:
        EdgeBuildResult with property edges first.
    """
    property_edges = extract_property_edges(items, index)
    relationship_edges = extract_relationship_object_edges(items, index, config)

    logger.info(
        f"Built {len(property_edges) + len(relationship_edges)} edge candidates: "
        f"{len(property_edges)} property, {len(relationship_edges)} relationship"
    )

    return EdgeBuildResult(
        edges=property_edges + relationship_edges,
        property_edge_count=len(property_edges),
        relationship_edge_count=len(relationship_edges),
    )
