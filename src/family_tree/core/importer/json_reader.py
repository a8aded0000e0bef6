"""Parse backend family tree JSON into domain models."""

from typing import Any

from family_tree.models.member import FamilyTreeResponse, Member


def _int_field(raw: dict[str, Any], key: str, *, required: bool = False) -> int | None:
    value = raw.get(key)
    if value is None and not required:
        return None
    # bool is an int subclass but never a valid id
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"{key} must be an integer, got {value!r}"
        raise ValueError(msg)
    return value


def _str_field(raw: dict[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if value is not None and not isinstance(value, str):
        msg = f"{key} must be a string, got {value!r}"
        raise ValueError(msg)
    return value


def _status_field(raw: dict[str, Any]) -> bool | None:
    value = raw.get("checkedStatus")
    if value is not None and not isinstance(value, bool):
        msg = f"checkedStatus must be true, false or null, got {value!r}"
        raise ValueError(msg)
    return value


def parse_member(raw: dict[str, Any], *, seen_ids: set[int] | None = None) -> Member:
    """Parse a raw member dict (camelCase keys) and its subtree.

    Args:
        raw: Member object as sent by the backend.
        seen_ids: Ids already parsed elsewhere in the tree, used to reject duplicates.

    Returns:
        The Member with all descendants attached.

    Raises:
        ValueError: Missing or duplicate id, or a field of the wrong type.
    """
    if not isinstance(raw, dict):
        msg = f"Member must be an object, got {type(raw).__name__}"
        raise ValueError(msg)
    if "id" not in raw:
        msg = f"Member without id: {sorted(raw.keys())!r}"
        raise ValueError(msg)

    if seen_ids is None:
        seen_ids = set()
    member_id = _int_field(raw, "id", required=True)
    if member_id in seen_ids:
        msg = f"Duplicate member id: {member_id}"
        raise ValueError(msg)
    seen_ids.add(member_id)

    raw_children = raw.get("children") or []
    if not isinstance(raw_children, list):
        msg = f"Member {member_id}: children must be a list"
        raise ValueError(msg)

    return Member(
        id=member_id,
        type=_str_field(raw, "type") or "",
        title=_str_field(raw, "title") or "",
        first_name=_str_field(raw, "firstName") or "",
        last_name=_str_field(raw, "lastName") or "",
        checked_date=_str_field(raw, "checkedDate") or "",
        checked_status=_status_field(raw),
        user_id=_int_field(raw, "userId"),
        parent_id=_int_field(raw, "parentId"),
        agent_id=_str_field(raw, "agentId"),
        created_at=_str_field(raw, "createdAt") or "",
        updated_at=_str_field(raw, "updatedAt") or "",
        children=tuple(parse_member(c, seen_ids=seen_ids) for c in raw_children),
    )


def parse_family_tree(raw_tree: Any) -> tuple[Member, ...]:
    """Parse the top-level ``familyTree`` list."""
    if not isinstance(raw_tree, list):
        msg = f"familyTree must be a list, got {type(raw_tree).__name__}"
        raise ValueError(msg)
    seen_ids: set[int] = set()
    return tuple(parse_member(r, seen_ids=seen_ids) for r in raw_tree)


def parse_response(data: dict[str, Any]) -> FamilyTreeResponse:
    """Parse a full backend response.

    Only a response with ``successful`` exactly ``true`` carries a usable
    payload; for any other response the ``data`` section is ignored.
    """
    if not isinstance(data, dict):
        msg = f"Response must be an object, got {type(data).__name__}"
        raise ValueError(msg)

    successful = data.get("successful") is True
    response = FamilyTreeResponse(
        successful=successful,
        message=str(data.get("message") or ""),
        response_code=str(data.get("responseCode") or ""),
        http_status=data.get("httpStatus"),
    )
    if not successful:
        return response

    payload = data.get("data")
    if not isinstance(payload, dict):
        msg = f"Response data must be an object, got {type(payload).__name__}"
        raise ValueError(msg)

    return FamilyTreeResponse(
        successful=True,
        message=response.message,
        response_code=response.response_code,
        http_status=response.http_status,
        total_members=_int_field(payload, "totalMembers") or 0,
        family_tree=parse_family_tree(payload.get("familyTree", [])),
    )
