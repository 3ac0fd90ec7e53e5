from __future__ import annotations

import pytest

from docuarch.constants import NODE_GROUPS
from docuarch.semantic.classify import GROUP_RULES, get_node_group, match_group


@pytest.mark.parametrize("type_value,group", [
    ("archimate:BusinessActor", "Business"),
    ("archimate:ApplicationComponent", "Application"),
    ("archimate:ApplicationService", "Application"),
    ("archimate:Node", "Technology"),
    ("archimate:SystemSoftware", "Technology"),
    ("archimate:Artifact", "Technology"),
    ("archimate:DataObject", "Data"),
    ("archimate:Goal", "Motivation"),
    ("archimate:Principle", "Motivation"),
    ("archimate:Requirement", "Motivation"),
    ("ex:Compliance", "Compliance"),
    ("archimate:Constraint", "Compliance"),
    ("http://schema.org/Person", "Actors"),
    ("ex:Role", "Actors"),
    ("ex:Process", "Processes"),
    ("ex:Function", "Processes"),
    ("ex:Component", "Components"),
    ("ex:Module", "Components"),
    ("ex:Widget", "Other"),
])
def test_group_by_keyword(type_value, group):
    assert get_node_group(type_value) == group


def test_business_precedes_process():
    assert get_node_group("BusinessProcess") == "Business"


def test_technology_precedes_actor():
    # "SystemActor" matches both the Technology and Actors rules
    assert get_node_group("SystemActor") == "Technology"


def test_matching_is_case_insensitive():
    assert get_node_group("http://example.org/BUSINESSOBJECT") == "Business"


@pytest.mark.parametrize("type_value", [None, "", 12, {"@id": "ex:Thing"}])
def test_absent_type_is_other(type_value):
    assert get_node_group(type_value) == "Other"


def test_list_type_uses_first_string_member():
    assert get_node_group([None, "schema:Person", "ex:Module"]) == "Actors"
    assert get_node_group([]) == "Other"


def test_rule_order_matches_legend():
    groups = [group for _, group in GROUP_RULES]
    assert groups == list(NODE_GROUPS[:-1])


def test_match_group_without_match():
    assert match_group("widget") is None
