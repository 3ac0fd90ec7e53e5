#!/usr/bin/env python3
"""
Run the docuarch extraction pipeline on a JSON / JSON-LD file.

Writes <stem>.graph.json to the output directory and, with --validate, a
graph quality report next to it.

Usage:
    python -m docuarch.run_pipeline --input FILE [--output DIR] [--validate]
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict

from docuarch.config import PipelineConfig
from docuarch.exceptions import GraphDocumentError, MalformedGraphDocument
from docuarch.graph import ProcessedGraph
from docuarch.pipeline import process_document
from docuarch.validate_graph import run_validation, write_report

logger = logging.getLogger(__name__)


# =============================================================================
# FILE I/O
# =============================================================================

def load_document(path: Path) -> Any:
    """Read and decode a JSON / JSON-LD file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise MalformedGraphDocument(f"{path}: invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise MalformedGraphDocument(f"{path}: not UTF-8 text ({e})") from e


def write_graph(graph: ProcessedGraph, output_dir: Path, stem: str) -> Path:
    """Write the processed graph as <stem>.graph.json under output_dir."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path = output_dir / f"{stem}.graph.json"
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(graph.to_dict(), f, indent=2, ensure_ascii=False)
    return out_path


# =============================================================================
# PIPELINE RUN
# =============================================================================

def run_pipeline(config: PipelineConfig) -> Dict[str, Any]:
    """Load, process, write and optionally validate one document."""
    if config.input_path is None:
        raise ValueError("PipelineConfig.input_path is required to run from a file")

    print("=" * 70)
    print(f"Processing {config.input_path}")
    print("=" * 70)

    document = load_document(config.input_path)
    graph = process_document(document, config)
    out_path = write_graph(graph, config.output_dir, config.input_path.stem)

    print(f"  Format: {graph.metadata.get('format', 'plain nodes/edges')}")
    print(f"  Nodes: {len(graph.nodes)}")
    print(f"  Edges: {len(graph.edges)}")
    print(f"  Nodes by group: {graph.group_counts()}")
    print(f"  Output: {out_path}")

    results = {
        "nodes": len(graph.nodes),
        "edges": len(graph.edges),
        "output": str(out_path),
    }

    if config.validate:
        report = run_validation(graph)
        report_path, _ = write_report(report, config.output_dir)
        print(f"  Quality report: {report_path} ({report.summary['overall_status']})")
        results["status"] = report.summary["overall_status"]

    return results


# =============================================================================
# CLI
# =============================================================================

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Extract a visualization graph from a JSON-LD document"
    )
    parser.add_argument(
        "--input",
        required=True,
        help="Path to JSON or JSON-LD file",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Output directory (default: DOCUARCH_OUTPUT_DIR or ./output)",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Write a graph quality report",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides = {"input_path": args.input, "validate": args.validate}
    if args.output:
        overrides["output_dir"] = args.output
    try:
        config = PipelineConfig.from_env(**overrides)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    try:
        results = run_pipeline(config)
    except GraphDocumentError as e:
        logger.error(f"Error loading file: {e}")
        return 1

    print(f"\nPipeline complete: {results['nodes']} nodes, {results['edges']} edges")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
