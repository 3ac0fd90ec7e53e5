from __future__ import annotations

import pytest

from docuarch.semantic.formats import detect_format


@pytest.mark.parametrize("document,expected", [
    ({"@graph": []}, "Generic JSON-LD"),
    ({"@context": {}, "@graph": []}, "Generic JSON-LD"),
    ({"@context": {"archimate": "http://www.opengroup.org/xsd/archimate"}}, "ArchiMate JSON-LD"),
    ({"@context": {"am": "http://www.opengroup.org/xsd/archimate/3.0/"}}, "ArchiMate JSON-LD"),
    ({"@context": {"schema": "http://schema.org/"}}, "Schema.org JSON-LD"),
    ({"@context": {"@vocab": "https://schema.org/"}}, "Schema.org JSON-LD"),
    ({"@context": {"rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#"}}, "RDF/OWL JSON-LD"),
    ({"@context": {"owl": "http://www.w3.org/2002/07/owl#"}}, "RDF/OWL JSON-LD"),
    ({"@context": "https://schema.org"}, "Schema.org JSON-LD"),
    ({"@context": "http://example.org/context.jsonld"}, "Custom JSON-LD"),
    ({"@context": {"ex": "http://example.org/ns"}}, "Custom JSON-LD"),
])
def test_detect_format(document, expected):
    assert detect_format(document) == expected


def test_archimate_checked_before_schema():
    document = {"@context": {
        "schema": "http://schema.org/",
        "archimate": "http://www.opengroup.org/xsd/archimate",
    }}
    assert detect_format(document) == "ArchiMate JSON-LD"


def test_xsd_namespace_is_not_schema_org():
    document = {"@context": {
        "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
        "xsd": "http://www.w3.org/2001/XMLSchema#",
    }}
    assert detect_format(document) == "RDF/OWL JSON-LD"


def test_list_context_uses_precedence_across_members():
    document = {"@context": [
        "https://schema.org",
        {"archimate": "http://www.opengroup.org/xsd/archimate"},
    ]}
    assert detect_format(document) == "ArchiMate JSON-LD"
