#!/usr/bin/env python3
"""
Graph Quality Report Composer

Runs integrity checks over a ProcessedGraph and renders a unified report.

Checks:
- G1: Id integrity (non-empty, unique node ids)
- G2: Edge endpoint existence
- G3: Self loops
- G4: Group coverage (fixed group set, share of "Other")
- G5: Connectivity (components, isolated nodes)

Outputs: Markdown report + JSON findings for CI integration
"""

import json
from collections import Counter
from collections.abc import Hashable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import networkx as nx

from docuarch.constants import GROUP_OTHER, NODE_GROUPS
from docuarch.graph.assemble import ProcessedGraph, utc_timestamp

# Share of nodes in "Other" above which G4 warns
OTHER_GROUP_WARN_RATIO = 0.5


# =============================================================================
# Data Classes for Report
# =============================================================================

SEVERITIES = ("error", "warning", "info")


@dataclass
class Finding:
    check_id: str  # G1..G5
    severity: str  # one of SEVERITIES
    message: str
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass
class CheckResult:
    check_id: str
    check_name: str
    passed: bool
    findings: List[Finding] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    def count(self, severity: str) -> int:
        return sum(1 for f in self.findings if f.severity == severity)

    @property
    def error_count(self) -> int:
        return self.count("error")

    @property
    def warning_count(self) -> int:
        return self.count("warning")


@dataclass
class QualityReport:
    """Outcome of G1-G5 over one graph. Only error findings fail a check."""

    timestamp: str
    source: str
    total_nodes: int
    total_edges: int
    checks: List[CheckResult] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

    def compute_summary(self):
        failed_ids = [c.check_id for c in self.checks if not c.passed]
        totals = {
            severity: sum(c.count(severity) for c in self.checks)
            for severity in SEVERITIES
        }

        self.summary = {
            "checks_passed": len(self.checks) - len(failed_ids),
            "checks_failed": len(failed_ids),
            "failed_checks": failed_ids,
            "total_errors": totals["error"],
            "total_warnings": totals["warning"],
            "total_info": totals["info"],
            "overall_status": "FAIL" if failed_ids else "PASS",
        }


def _passed(findings: List[Finding]) -> bool:
    return not any(f.severity == "error" for f in findings)


# =============================================================================
# Checks
# =============================================================================

def check_g1_id_integrity(graph: ProcessedGraph) -> CheckResult:
    """G1: Node ids are present and unique."""
    findings = []
    ids = graph.node_ids()
    missing = sum(1 for node_id in ids if not node_id)
    unhashable = [node_id for node_id in ids if node_id and not isinstance(node_id, Hashable)]
    counts = Counter(node_id for node_id in ids if node_id and isinstance(node_id, Hashable))
    duplicates = sorted(str(node_id) for node_id, n in counts.items() if n > 1)

    if missing:
        findings.append(Finding("G1", "error", f"{missing} nodes without id"))
    if unhashable:
        findings.append(Finding(
            "G1", "error", f"{len(unhashable)} node ids are not scalar values",
            details={"examples": [str(x) for x in unhashable[:10]]},
        ))
    if duplicates:
        findings.append(Finding(
            "G1", "error", f"{len(duplicates)} duplicate node ids",
            details={"examples": duplicates[:10]},
        ))

    return CheckResult(
        "G1", "Id Integrity",
        passed=_passed(findings),
        findings=findings,
        metrics={
            "nodes_count": len(ids),
            "nodes_null": missing,
            "nodes_unhashable": len(unhashable),
            "nodes_dup": len(duplicates),
        },
    )


def check_g2_edge_endpoints(graph: ProcessedGraph) -> CheckResult:
    """G2: Every edge endpoint names an existing node."""
    findings = []
    node_ids = {node_id for node_id in graph.node_ids() if isinstance(node_id, Hashable)}

    def known(value):
        return isinstance(value, Hashable) and value in node_ids

    dangling: List[Tuple[Any, Any]] = [
        (edge.get("from"), edge.get("to")) for edge in graph.edges
        if not known(edge.get("from")) or not known(edge.get("to"))
    ]

    if dangling:
        findings.append(Finding(
            "G2", "error", f"{len(dangling)} edges with missing endpoints",
            details={"examples": [list(pair) for pair in dangling[:10]]},
        ))

    return CheckResult(
        "G2", "Edge Endpoints",
        passed=_passed(findings),
        findings=findings,
        metrics={"edges_count": len(graph.edges), "edges_dangling": len(dangling)},
    )


def check_g3_self_loops(graph: ProcessedGraph) -> CheckResult:
    """G3: No edge points back at its source."""
    findings = []
    loops = [edge.get("from") for edge in graph.edges if edge.get("from") == edge.get("to")]
    if loops:
        findings.append(Finding(
            "G3", "error", f"{len(loops)} self-referential edges",
            details={"examples": [str(x) for x in loops[:10]]},
        ))

    return CheckResult(
        "G3", "Self Loops",
        passed=_passed(findings),
        findings=findings,
        metrics={"self_loops": len(loops)},
    )


def check_g4_group_coverage(graph: ProcessedGraph) -> CheckResult:
    """G4: Nodes fall into the fixed group set; flag heavy use of Other."""
    findings = []
    groups = [node.get("group") for node in graph.nodes]
    unknown = sorted({str(g) for g in groups if g not in NODE_GROUPS})
    counts = graph.group_counts()
    other_ratio = counts[GROUP_OTHER] / len(groups) if groups else 0.0

    if unknown:
        findings.append(Finding(
            "G4", "warning", f"{len(unknown)} groups outside the legend",
            details={"groups": unknown},
        ))
    if other_ratio > OTHER_GROUP_WARN_RATIO:
        findings.append(Finding(
            "G4", "warning", f"{other_ratio:.0%} of nodes classified as {GROUP_OTHER}",
        ))

    return CheckResult(
        "G4", "Group Coverage",
        passed=_passed(findings),
        findings=findings,
        metrics={"group_counts": counts, "other_ratio": round(other_ratio, 4)},
    )


def check_g5_connectivity(graph: ProcessedGraph) -> CheckResult:
    """G5: Connectivity summary (informational)."""
    nx_graph = graph.to_networkx()
    components = nx.number_weakly_connected_components(nx_graph) if len(nx_graph) else 0
    isolated = list(nx.isolates(nx_graph))

    findings = []
    if isolated:
        findings.append(Finding(
            "G5", "info", f"{len(isolated)} isolated nodes",
            details={"examples": [str(x) for x in isolated[:10]]},
        ))

    return CheckResult(
        "G5", "Connectivity",
        passed=True,
        findings=findings,
        metrics={"weak_components": components, "isolated_nodes": len(isolated)},
    )


GRAPH_CHECKS = (
    check_g1_id_integrity,
    check_g2_edge_endpoints,
    check_g3_self_loops,
    check_g4_group_coverage,
    check_g5_connectivity,
)


# =============================================================================
# Report Generation
# =============================================================================

def _jsonable(value: object) -> object:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, dict):
        return {str(key): _jsonable(val) for key, val in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_jsonable(val) for val in value]
    return str(value)


def generate_markdown_report(report: QualityReport) -> str:
    """Generate markdown report from QualityReport."""
    lines = [
        "# Graph Quality Report",
        "",
        f"**Generated:** {report.timestamp}",
        f"**Source:** {report.source}",
        f"**Nodes:** {report.total_nodes} | **Edges:** {report.total_edges}",
        "",
        "---",
        "",
        "## Summary",
        "",
        "| Metric | Value |",
        "|--------|-------|",
        f"| Overall Status | **{report.summary['overall_status']}** |",
        f"| Checks Passed | {report.summary['checks_passed']} |",
        f"| Checks Failed | {report.summary['checks_failed']} |",
        f"| Total Errors | {report.summary['total_errors']} |",
        f"| Total Warnings | {report.summary['total_warnings']} |",
        f"| Failed Checks | {', '.join(report.summary['failed_checks']) or '-'} |",
        "",
        "## Check Results",
        "",
        "| Check | Status | Errors | Warnings |",
        "|-------|--------|--------|----------|",
    ]

    for check in report.checks:
        status = "PASS" if check.passed else "FAIL"
        icon = "+" if check.passed else "x"
        lines.append(
            f"| {check.check_id}: {check.check_name} | [{icon}] {status} | "
            f"{check.error_count} | {check.warning_count} |"
        )

    lines.extend(["", "---", "", "## Findings", ""])
    for check in report.checks:
        if not check.findings:
            continue
        lines.append(f"### {check.check_id}: {check.check_name}")
        lines.append("")
        for finding in check.findings:
            lines.append(f"- **{finding.severity.upper()}**: {finding.message}")
        lines.append("")

    return "\n".join(lines)


def report_to_json(report: QualityReport) -> Dict[str, Any]:
    return {
        "summary": _jsonable(report.summary),
        "checks": [
            {
                "check_id": c.check_id,
                "check_name": c.check_name,
                "passed": c.passed,
                "errors": c.error_count,
                "warnings": c.warning_count,
                "metrics": _jsonable(c.metrics),
            }
            for c in report.checks
        ],
    }


# =============================================================================
# Main Validation Runner
# =============================================================================

def run_validation(graph: ProcessedGraph) -> QualityReport:
    """Run all checks against a processed graph."""
    report = QualityReport(
        timestamp=utc_timestamp(),
        source=str(graph.metadata.get("source", "unknown")),
        total_nodes=len(graph.nodes),
        total_edges=len(graph.edges),
    )

    report.checks = [check(graph) for check in GRAPH_CHECKS]
    report.compute_summary()
    return report


def write_report(report: QualityReport, output_dir: Path) -> Tuple[Path, Path]:
    """Write markdown and JSON reports; returns their paths."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    report_path = output_dir / "graph_quality_report.md"
    with open(report_path, "w", encoding="utf-8") as f:
        f.write(generate_markdown_report(report))

    json_path = output_dir / "graph_quality_report.json"
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(report_to_json(report), f, indent=2)

    return report_path, json_path


def validate_all(graph: ProcessedGraph, output_dir: Optional[Path] = None) -> bool:
    """
    Run all checks and return pass/fail status.

    Convenience wrapper for CI/CD integration.
    """
    report = run_validation(graph)
    if output_dir is not None:
        write_report(report, output_dir)
    return report.summary.get("overall_status") == "PASS"
