"""
Document -> ProcessedGraph pipeline.

Stages (JSON-LD input):
1. Resolve @context into a prefix table
2. Build nodes and the node index
3. Build edge candidates (property inference + relationship objects)
4. Assemble the filtered graph with metadata
5. Validate graph structure

Plain nodes/edges documents skip stages 1-4. Every call builds its own
resolver and node index; nothing is shared between documents.
"""

import logging
from typing import Any, Dict, Optional

from docuarch.config import PipelineConfig
from docuarch.evaluation.structure import (
    is_jsonld_document,
    require_object,
    validate_graph_structure,
    validate_plain_document,
)
from docuarch.graph import (
    ProcessedGraph,
    assemble_graph,
    build_all_edges,
    build_nodes,
    graph_from_plain_document,
    graph_items,
)
from docuarch.semantic import ContextResolver, detect_format

logger = logging.getLogger(__name__)


def process_jsonld(
    document: Dict[str, Any],
    config: Optional[PipelineConfig] = None,
) -> ProcessedGraph:
    """
    Extract a visualization graph from a JSON-LD document.

    Args:
        document: Parsed JSON-LD object.
        config: Pipeline configuration.

    Returns:
        Validated ProcessedGraph.

    Raises:
        MalformedGraphDocument: If the document is not a JSON object.
        InvalidGraphStructure: If a produced node or edge lacks required fields.
        CliqueLimitExceeded: If a relationship object exceeds the member bound.
    """
    config = config or PipelineConfig()
    document = require_object(document)

    resolver = ContextResolver()
    resolver.process_context(document.get("@context"))

    items = graph_items(document)
    node_result = build_nodes(items, resolver)
    edge_result = build_all_edges(items, node_result.index, config)

    graph = assemble_graph(
        nodes=node_result.nodes,
        index=node_result.index,
        edges=edge_result.edges,
        format_name=detect_format(document),
        prefixes=resolver.prefix_pairs(),
        source=config.source_label,
    )
    validate_graph_structure(graph.nodes, graph.edges)
    return graph


def process_document(
    document: Any,
    config: Optional[PipelineConfig] = None,
) -> ProcessedGraph:
    """
    Produce a ProcessedGraph from either input shape.

    JSON-LD documents (with `@context` or `@graph`) go through extraction;
    plain nodes/edges documents are validated and used as-is.
    """
    document = require_object(document)

    if is_jsonld_document(document):
        return process_jsonld(document, config)

    validate_plain_document(document)
    validate_graph_structure(document["nodes"], document["edges"])
    logger.info(
        f"Loaded plain graph: {len(document['nodes'])} nodes, {len(document['edges'])} edges"
    )
    return graph_from_plain_document(document)
