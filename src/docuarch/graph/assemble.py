"""
Final graph assembly.

Filters node and edge candidates against the node index and packages them
with run metadata into the immutable ProcessedGraph handed to the viewer.
"""

import copy
import logging
from collections.abc import Hashable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence, Tuple

import networkx as nx
import pandas as pd

from docuarch.constants import NODE_GROUPS, SOURCE_JSONLD
from docuarch.graph.edges import Edge
from docuarch.graph.nodes import Node

logger = logging.getLogger(__name__)


# =============================================================================
# DATA STRUCTURES
# =============================================================================

@dataclass(frozen=True)
class ProcessedGraph:
    """
    Visualization graph produced from one document.

    Attributes:
        nodes: Node records (id, label, type, group, ... pass-through fields).
        edges: Edge records (from, to, label, type, ...).
        metadata: Run metadata (source, format, counts, prefixes, processedAt).
    """

    nodes: Tuple[Dict[str, Any], ...]
    edges: Tuple[Dict[str, Any], ...]
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serialisable copy; mutating it never touches the graph."""
        return {
            "nodes": copy.deepcopy(list(self.nodes)),
            "edges": copy.deepcopy(list(self.edges)),
            "metadata": copy.deepcopy(self.metadata),
        }

    def node_ids(self) -> List[Any]:
        return [node.get("id") for node in self.nodes]

    def nodes_df(self) -> pd.DataFrame:
        return pd.DataFrame(list(self.nodes))

    def edges_df(self) -> pd.DataFrame:
        return pd.DataFrame(list(self.edges))

    def group_counts(self) -> Dict[str, int]:
        """Node count per visual group, in legend order."""
        nodes_df = self.nodes_df()
        if nodes_df.empty or "group" not in nodes_df.columns:
            return {group: 0 for group in NODE_GROUPS}
        counts = nodes_df["group"].value_counts()
        return {group: int(counts.get(group, 0)) for group in NODE_GROUPS}

    def to_networkx(self) -> nx.MultiDiGraph:
        """
        Directed multigraph view; parallel edges are kept.

        Nodes and edges whose ids cannot key a graph (lists, objects from a
        plain document) are left out.
        """
        graph = nx.MultiDiGraph()
        for node in self.nodes:
            if not isinstance(node.get("id"), Hashable):
                continue
            attrs = {k: v for k, v in node.items() if k != "id"}
            graph.add_node(node["id"], **attrs)
        graph.add_edges_from(
            (edge["from"], edge["to"], {k: v for k, v in edge.items() if k not in ("from", "to")})
            for edge in self.edges
            if isinstance(edge.get("from"), Hashable) and isinstance(edge.get("to"), Hashable)
        )
        return graph


# =============================================================================
# ASSEMBLY
# =============================================================================

def in_index(value: Any, index: Dict[Any, Node]) -> bool:
    """Membership test tolerant of unhashable JSON values."""
    return isinstance(value, Hashable) and value in index


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def assemble_graph(
    nodes: Sequence[Node],
    index: Dict[Any, Node],
    edges: Sequence[Edge],
    format_name: str,
    prefixes: List[Tuple[str, str]],
    source: str = SOURCE_JSONLD,
) -> ProcessedGraph:
    """
    Filter candidates and attach metadata.

    Nodes are kept when their id is in the index. Edges are kept when both
    ends are in the index and they are not self loops.

    Args:
        nodes: Node candidates in document order.
        index: Node id -> Node lookup.
        edges: Edge candidates (property edges, then relationship edges).
        format_name: Dialect from detect_format.
        prefixes: Ordered (prefix, iri) pairs from the context resolver.
        source: metadata.source value.

    Returns:
        ProcessedGraph with filtered counts in metadata.
    """
    kept_nodes = [node.to_dict() for node in nodes if in_index(node.id, index)]
    kept_edges = [
        edge.to_dict() for edge in edges
        if in_index(edge.from_id, index)
        and in_index(edge.to_id, index)
        and edge.from_id != edge.to_id
    ]

    dropped = len(edges) - len(kept_edges)
    if dropped:
        logger.debug(f"Dropped {dropped} dangling or self-referential edges")

    metadata = {
        "source": source,
        "format": format_name,
        "totalNodes": len(kept_nodes),
        "totalEdges": len(kept_edges),
        "prefixes": [[prefix, iri] for prefix, iri in prefixes],
        "processedAt": utc_timestamp(),
    }

    logger.info(f"Assembled graph: {len(kept_nodes)} nodes, {len(kept_edges)} edges")
    return ProcessedGraph(nodes=tuple(kept_nodes), edges=tuple(kept_edges), metadata=metadata)


def graph_from_plain_document(document: Dict[str, Any]) -> ProcessedGraph:
    """Wrap an already-shaped nodes/edges document without transformation."""
    metadata = document.get("metadata")
    return ProcessedGraph(
        nodes=tuple(document["nodes"]),
        edges=tuple(document["edges"]),
        metadata=dict(metadata) if isinstance(metadata, dict) else {},
    )
