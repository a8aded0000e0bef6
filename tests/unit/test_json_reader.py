"""Tests for parsing backend family tree responses."""

import pytest

from family_tree.core.importer.json_reader import parse_family_tree, parse_member, parse_response
from tests.unit.sample_tree import RAW_TREE, make_response, raw_member


def test_parse_member_maps_camel_case_fields() -> None:
    member = parse_member(raw_member(7, "Grace", parent_id=3, agent_id="AG-7", checked_status=True))
    assert member.id == 7
    assert member.first_name == "Grace"
    assert member.last_name == "Smith"
    assert member.title == "Mr."
    assert member.parent_id == 3
    assert member.user_id == 70
    assert member.agent_id == "AG-7"
    assert member.checked_status is True
    assert member.checked_date == "2024-01-15T00:00:00.000Z"
    assert member.children == ()


def test_parse_member_defaults_missing_optional_fields() -> None:
    member = parse_member({"id": 1, "type": "GA Type", "firstName": "Ann"})
    assert member.agent_id is None
    assert member.checked_status is None
    assert member.parent_id is None
    assert member.title == ""
    assert member.children == ()


def test_parse_family_tree_preserves_child_order() -> None:
    roots = parse_family_tree(RAW_TREE)
    assert [r.id for r in roots] == [1, 6]
    assert [c.id for c in roots[0].children] == [2, 5]
    assert roots[0].children[0].children[0].children[0].first_name == "Dave"


def test_parse_family_tree_rejects_duplicate_ids() -> None:
    tree = [raw_member(1, "A", children=[raw_member(2, "B")]), raw_member(2, "C")]
    with pytest.raises(ValueError, match="Duplicate member id: 2"):
        parse_family_tree(tree)


def test_parse_family_tree_rejects_non_list() -> None:
    with pytest.raises(ValueError, match="familyTree must be a list"):
        parse_family_tree({"id": 1})


def test_parse_member_rejects_missing_id() -> None:
    with pytest.raises(ValueError, match="Member without id"):
        parse_member({"firstName": "Nobody"})


def test_parse_response_success() -> None:
    response = parse_response(make_response(total=42))
    assert response.successful
    assert response.total_members == 42
    assert [m.id for m in response.family_tree] == [1, 6]
    assert response.http_status == 200


def test_parse_response_failure_ignores_payload() -> None:
    data = make_response(successful=False)
    data["data"] = None
    response = parse_response(data)
    assert not response.successful
    assert response.family_tree == ()
    assert response.response_code == "9999"


def test_parse_response_success_without_data_raises() -> None:
    with pytest.raises(ValueError, match="Response data must be an object"):
        parse_response({"successful": True, "data": None})


@pytest.mark.parametrize("bad_id", [None, "7", 7.0, [7], {"id": 7}, True])
def test_parse_member_rejects_non_integer_id(bad_id: object) -> None:
    raw = raw_member(7, "Grace")
    raw["id"] = bad_id
    with pytest.raises(ValueError, match="id must be an integer"):
        parse_member(raw)


@pytest.mark.parametrize("key", ["type", "title", "firstName", "lastName", "agentId"])
def test_parse_member_rejects_non_string_text_fields(key: str) -> None:
    raw = raw_member(7, "Grace")
    raw[key] = 5
    with pytest.raises(ValueError, match=f"{key} must be a string"):
        parse_member(raw)


def test_parse_member_rejects_non_boolean_status() -> None:
    raw = raw_member(7, "Grace")
    raw["checkedStatus"] = "yes"
    with pytest.raises(ValueError, match="checkedStatus must be"):
        parse_member(raw)


def test_parse_response_rejects_non_integer_total() -> None:
    data = make_response()
    data["data"]["totalMembers"] = [6]
    with pytest.raises(ValueError, match="totalMembers must be an integer"):
        parse_response(data)


@pytest.mark.parametrize("flag", ["false", "true", 1, None])
def test_parse_response_only_literal_true_is_success(flag: object) -> None:
    data = make_response()
    data["successful"] = flag
    response = parse_response(data)
    assert not response.successful
    assert response.family_tree == ()
