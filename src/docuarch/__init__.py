"""
docuarch: semantic-graph extraction for architecture documents.

Turns JSON-LD documents (e.g. ArchiMate exports) into a deduplicated,
type-classified node/edge graph for visualization.
"""

from docuarch.config import PipelineConfig
from docuarch.exceptions import (
    CliqueLimitExceeded,
    GraphDocumentError,
    InvalidGraphStructure,
    MalformedGraphDocument,
)
from docuarch.graph.assemble import ProcessedGraph
from docuarch.pipeline import process_document, process_jsonld

__version__ = "0.1.0"

__all__ = [
    "PipelineConfig",
    "ProcessedGraph",
    "process_document",
    "process_jsonld",
    "GraphDocumentError",
    "MalformedGraphDocument",
    "InvalidGraphStructure",
    "CliqueLimitExceeded",
]
