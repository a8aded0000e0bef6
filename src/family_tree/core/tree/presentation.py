"""Display keys, labels and counts for members."""

from collections.abc import Iterable
from typing import TypeVar

from family_tree.models.member import Member
from family_tree.protocols import TreeNodeProtocol

NodeT = TypeVar("NodeT", bound=TreeNodeProtocol)

TYPE_KEYS: dict[str, str] = {
    "Agent Type 1": "type1",
    "Agent Type 2": "type2",
    "GA Type": "ga",
}
DEFAULT_TYPE_KEY = "default"

STATUS_PENDING_LABEL = "รอผล"
STATUS_PASSED_LABEL = "ผ่านแล้ว"
STATUS_NOT_PASSED_LABEL = "ยังไม่ผ่าน"


def get_type_key(member_type: str) -> str:
    return TYPE_KEYS.get(member_type, DEFAULT_TYPE_KEY)


def get_status_key(status: bool | None) -> str:
    if status is None:
        return "pending"
    return "active" if status else "inactive"


def get_status_label(status: bool | None) -> str:
    if status is None:
        return STATUS_PENDING_LABEL
    return STATUS_PASSED_LABEL if status else STATUS_NOT_PASSED_LABEL


def count_descendants(node: TreeNodeProtocol) -> int:
    """Count all nodes strictly below ``node``; a leaf has none."""
    count = 0
    stack = list(node.children)
    while stack:
        current = stack.pop()
        count += 1
        stack.extend(current.children)
    return count


def find_node(nodes: Iterable[NodeT], node_id: int) -> NodeT | None:
    """Find a node by id anywhere in the tree (pre-order)."""
    stack = list(reversed(list(nodes)))
    while stack:
        current = stack.pop()
        if current.id == node_id:
            return current
        stack.extend(reversed(list(current.children)))
    return None


def display_name(member: Member) -> str:
    """Join title, first and last name, skipping empty parts."""
    return " ".join(p for p in (member.title, member.first_name, member.last_name) if p)
