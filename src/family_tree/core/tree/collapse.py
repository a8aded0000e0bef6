"""Collapse state: default depth-based collapsing and toggling."""

from collections.abc import Sequence

from family_tree.config import DEFAULT_COLLAPSE_DEPTH
from family_tree.models.member import Member, MemberView


def init_collapsed(members: Sequence[Member], root_depth: int = 0) -> list[MemberView]:
    """Wrap members into views, collapsing every node at depth 2 or deeper.

    Args:
        members: Sibling members at ``root_depth``.
        root_depth: Depth of ``members`` (0 for the top-level call).

    Returns:
        Fresh view nodes mirroring the member tree.
    """
    return [
        MemberView(
            member=m,
            collapsed=root_depth >= DEFAULT_COLLAPSE_DEPTH,
            children=init_collapsed(m.children, root_depth + 1),
        )
        for m in members
    ]


def toggle_node(node: MemberView) -> None:
    """Flip collapse state of a single node in place."""
    node.collapsed = not node.collapsed


def set_all_collapsed(nodes: Sequence[MemberView], collapsed: bool) -> None:
    """Set ``collapsed`` on every node of the tree, leaves included."""
    stack = list(nodes)
    while stack:
        node = stack.pop()
        node.collapsed = collapsed
        stack.extend(node.children)
