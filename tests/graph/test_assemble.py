from __future__ import annotations

import dataclasses
import json

import pytest

from docuarch.graph.assemble import ProcessedGraph, assemble_graph, graph_from_plain_document
from docuarch.graph.edges import Edge
from docuarch.graph.nodes import build_nodes
from docuarch.semantic.context import ContextResolver


@pytest.fixture
def node_result():
    items = [
        {"@id": "a", "@type": "ex:BusinessActor", "name": "A"},
        {"@id": "b", "@type": "ex:ApplicationComponent", "name": "B"},
        {"@id": "c", "name": "C"},
    ]
    return build_nodes(items, ContextResolver())


@pytest.fixture
def graph(node_result):
    edges = [
        Edge("a", "b", "uses", "relationship", property="uses"),
        Edge("a", "b", "owns", "relationship", property="owns"),
        Edge("a", "a", "self", "relationship", property="self"),
        Edge("a", "missing", "dangling", "relationship", property="dangling"),
        Edge({"not": "hashable"}, "b", "odd", "Association", relationship_id="r"),
        Edge("b", "c", "governs", "Association", relationship_id="r"),
    ]
    return assemble_graph(
        nodes=node_result.nodes,
        index=node_result.index,
        edges=edges,
        format_name="Custom JSON-LD",
        prefixes=[("ex", "http://example.org/ns")],
    )


def test_edge_filter(graph):
    assert [(e["from"], e["to"], e["label"]) for e in graph.edges] == [
        ("a", "b", "uses"),
        ("a", "b", "owns"),
        ("b", "c", "governs"),
    ]


def test_metadata(graph):
    metadata = graph.metadata
    assert metadata["source"] == "JSON-LD"
    assert metadata["format"] == "Custom JSON-LD"
    assert metadata["totalNodes"] == 3
    assert metadata["totalEdges"] == 3
    assert metadata["prefixes"] == [["ex", "http://example.org/ns"]]
    assert metadata["processedAt"].endswith("Z")


def test_nodes_outside_index_dropped(node_result):
    index = {key: node for key, node in node_result.index.items() if key != "c"}
    graph = assemble_graph(node_result.nodes, index, [], "Generic JSON-LD", [])
    assert graph.node_ids() == ["a", "b"]


def test_graph_is_immutable(graph):
    with pytest.raises(dataclasses.FrozenInstanceError):
        graph.nodes = ()

    copy = graph.to_dict()
    copy["nodes"][0]["label"] = "changed"
    copy["edges"].clear()
    assert graph.nodes[0]["label"] == "A"
    assert len(graph.edges) == 3


def test_json_round_trip(graph):
    payload = graph.to_dict()
    assert json.loads(json.dumps(payload)) == payload


def test_group_counts(graph):
    counts = graph.group_counts()
    assert counts["Business"] == 1
    assert counts["Application"] == 1
    assert counts["Other"] == 1
    assert sum(counts.values()) == 3
    assert list(counts)[0] == "Business"


def test_dataframes(graph):
    nodes_df = graph.nodes_df()
    edges_df = graph.edges_df()
    assert list(nodes_df["id"]) == ["a", "b", "c"]
    assert {"from", "to", "label", "type"} <= set(edges_df.columns)


def test_networkx_view_keeps_parallel_edges(graph):
    nx_graph = graph.to_networkx()
    assert nx_graph.number_of_nodes() == 3
    assert nx_graph.number_of_edges("a", "b") == 2
    assert nx_graph.nodes["a"]["group"] == "Business"


def test_plain_document_wrapped_as_is():
    document = {
        "nodes": [{"id": "x", "label": "X", "custom": True}],
        "edges": [],
        "metadata": {"source": "export"},
    }
    graph = graph_from_plain_document(document)
    assert graph.nodes == ({"id": "x", "label": "X", "custom": True},)
    assert graph.metadata == {"source": "export"}


def test_empty_graph_group_counts():
    graph = ProcessedGraph(nodes=(), edges=())
    assert set(graph.group_counts().values()) == {0}


def test_networkx_view_skips_list_ids():
    graph = ProcessedGraph(
        nodes=({"id": ["a"], "label": "A"}, {"id": "b", "label": "B"}),
        edges=({"from": ["a"], "to": "b"},),
    )
    nx_graph = graph.to_networkx()
    assert list(nx_graph.nodes) == ["b"]
    assert nx_graph.number_of_edges() == 0
