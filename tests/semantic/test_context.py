from __future__ import annotations

import pytest

from docuarch.semantic.context import ContextResolver, get_local_name


@pytest.fixture
def resolver():
    resolver = ContextResolver()
    resolver.process_context({
        "@vocab": "http://example.org/vocab/",
        "@base": "http://example.org/base/",
        "ex": "http://example.org/ns",
        "archimate": "http://www.opengroup.org/xsd/archimate",
        "owner": {"@id": "ex:owner", "@type": "@id"},
    })
    return resolver


def test_context_splits_prefixes_and_terms(resolver):
    assert resolver.prefixes == {
        "ex": "http://example.org/ns",
        "archimate": "http://www.opengroup.org/xsd/archimate",
    }
    assert resolver.terms == {"owner": {"@id": "ex:owner", "@type": "@id"}}


def test_prefix_pairs_keep_context_order(resolver):
    assert resolver.prefix_pairs() == [
        ("ex", "http://example.org/ns"),
        ("archimate", "http://www.opengroup.org/xsd/archimate"),
    ]


@pytest.mark.parametrize("context", [None, "", "http://schema.org", 42, []])
def test_missing_or_malformed_context_is_noop(context):
    resolver = ContextResolver()
    resolver.process_context(context)
    assert resolver.prefixes == {}
    assert resolver.terms == {}


def test_list_context_processes_object_members():
    resolver = ContextResolver()
    resolver.process_context([
        "http://schema.org",
        {"ex": "http://example.org/ns"},
        {"foaf": "http://xmlns.com/foaf/0.1/"},
    ])
    assert list(resolver.prefixes) == ["ex", "foaf"]


def test_expand_compact_iri(resolver):
    assert resolver.expand_iri("ex:Widget") == "http://example.org/ns/Widget"
    assert resolver.get_local_name("ex:Widget") == "Widget"


def test_expand_keeps_leading_slash(resolver):
    assert resolver.expand_iri("ex:/Widget") == "http://example.org/ns/Widget"


@pytest.mark.parametrize("term", [
    "unknown:Widget",
    "Widget",
    "ex:",
    "http://example.org/ns/Widget",
    "https://example.org/ns/Widget",
])
def test_expand_passes_through_unresolvable(resolver, term):
    assert resolver.expand_iri(term) == term


@pytest.mark.parametrize("term", [None, 42, ["ex:Widget"]])
def test_expand_ignores_non_strings(resolver, term):
    assert resolver.expand_iri(term) == term


def test_expand_keeps_remainder_after_first_colon(resolver):
    assert resolver.expand_iri("ex:a:b") == "http://example.org/ns/a:b"


@pytest.mark.parametrize("iri,expected", [
    ("archimate:BusinessRole", "BusinessRole"),
    ("urn:isbn:0451450523", "0451450523"),
    ("http://example.org/ns/Widget", "Widget"),
    ("http://example.org/ns#Widget", "Widget"),
    ("https://example.org/a/b#frag", "frag"),
    ("Widget", "Widget"),
    ("", ""),
])
def test_local_name(iri, expected):
    assert get_local_name(iri) == expected


@pytest.mark.parametrize("value", [None, 0, 7, {"@id": "x"}])
def test_local_name_returns_non_strings_unchanged(value):
    assert get_local_name(value) == value


def test_resolvers_do_not_share_state():
    first = ContextResolver()
    first.process_context({"ex": "http://example.org/ns"})
    second = ContextResolver()
    assert second.prefixes == {}
    assert second.expand_iri("ex:Widget") == "ex:Widget"
