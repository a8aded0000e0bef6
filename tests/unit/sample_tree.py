"""Sample backend payloads and tree helpers shared by the tests."""

from collections.abc import Iterator, Sequence
from typing import Any

from family_tree.models.member import MemberView


def raw_member(
    member_id: int,
    first_name: str,
    *,
    parent_id: int | None = None,
    member_type: str = "Agent Type 1",
    agent_id: str | None = None,
    checked_status: bool | None = None,
    children: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Create a member dict shaped like the backend sends it."""
    return {
        "id": member_id,
        "type": member_type,
        "checkedDate": "2024-01-15T00:00:00.000Z",
        "checkedStatus": checked_status,
        "userId": member_id * 10,
        "parentId": parent_id,
        "title": "Mr.",
        "firstName": first_name,
        "lastName": "Smith",
        "agentId": agent_id,
        "createdAt": "2024-01-01T00:00:00.000Z",
        "updatedAt": "2024-01-02T00:00:00.000Z",
        "children": children or [],
    }


# Alice (AG-001)
# ├── Bob (AG-002)
# │   └── Carol
# │       └── Dave (GA Type)
# └── Erin (Agent Type 2)
# Frank
RAW_TREE: list[dict[str, Any]] = [
    raw_member(
        1,
        "Alice",
        agent_id="AG-001",
        checked_status=True,
        children=[
            raw_member(
                2,
                "Bob",
                parent_id=1,
                agent_id="AG-002",
                checked_status=False,
                children=[
                    raw_member(
                        3,
                        "Carol",
                        parent_id=2,
                        children=[raw_member(4, "Dave", parent_id=3, member_type="GA Type")],
                    ),
                ],
            ),
            raw_member(5, "Erin", parent_id=1, member_type="Agent Type 2"),
        ],
    ),
    raw_member(6, "Frank"),
]


def make_response(
    tree: list[dict[str, Any]] | None = None,
    *,
    successful: bool = True,
    total: int = 6,
) -> dict[str, Any]:
    """Wrap a raw tree in the backend envelope."""
    return {
        "message": "OK" if successful else "Something went wrong",
        "responseCode": "0000" if successful else "9999",
        "successful": successful,
        "data": {"totalMembers": total, "familyTree": RAW_TREE if tree is None else tree},
        "httpStatus": 200,
    }


def iter_views(nodes: Sequence[MemberView]) -> Iterator[MemberView]:
    """Yield every view node in pre-order."""
    for node in nodes:
        yield node
        yield from iter_views(node.children)


def shape(nodes: Sequence[MemberView]) -> list[tuple[int, bool, list]]:
    """Reduce a view tree to (id, collapsed, children) tuples for comparisons."""
    return [(n.id, n.collapsed, shape(n.children)) for n in nodes]
