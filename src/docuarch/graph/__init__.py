"""Graph construction modules for the visualization graph."""

from .nodes import (
    # Data structures
    Node,
    NodeBuildResult,
    # Item accessors
    graph_items,
    item_id,
    item_type,
    # Node builders
    build_node,
    build_nodes,
)

from .edges import (
    # Data structures
    Edge,
    EdgeBuildResult,
    # Reference resolution
    resolve_references,
    resolve_member,
    # Edge builders
    extract_property_edges,
    extract_relationship_object_edges,
    # Orchestrator
    build_all_edges,
)

from .assemble import (
    ProcessedGraph,
    assemble_graph,
    graph_from_plain_document,
)

__all__ = [
    # Node data structures
    "Node",
    "NodeBuildResult",
    # Item accessors
    "graph_items",
    "item_id",
    "item_type",
    # Node builders
    "build_node",
    "build_nodes",
    # Edge data structures
    "Edge",
    "EdgeBuildResult",
    # Reference resolution
    "resolve_references",
    "resolve_member",
    # Edge builders
    "extract_property_edges",
    "extract_relationship_object_edges",
    "build_all_edges",
    # Assembly
    "ProcessedGraph",
    "assemble_graph",
    "graph_from_plain_document",
]
