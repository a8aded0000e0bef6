"""Render member view trees as indented text."""

import io
from collections.abc import Sequence
from typing import Any

from family_tree.core.tree.presentation import (
    count_descendants,
    display_name,
    get_status_key,
    get_status_label,
    get_type_key,
)
from family_tree.models.member import MemberView


def _format_line(node: MemberView, *, show_status: bool) -> str:
    member = node.member
    if not node.children:
        marker = "-"
    elif node.collapsed:
        marker = "▸"
    else:
        marker = "▾"

    line = f"{marker} {display_name(member) or '(unnamed)'} [{get_type_key(member.type)}]"
    if member.agent_id:
        line += f" {member.agent_id}"
    if show_status:
        line += f" - {get_status_label(member.checked_status)}"
    if node.children and node.collapsed:
        line += f" ({count_descendants(node)} hidden)"
    return line


def render_tree(nodes: Sequence[MemberView], *, show_status: bool = True) -> str:
    """Render the visible part of a view tree.

    Children of collapsed nodes are not rendered; the collapsed node shows
    how many descendants it hides instead.

    Args:
        nodes: Top-level view nodes.
        show_status: Whether to append the verification status label.

    Returns:
        One line per visible node, indented four spaces per level.
    """
    out = io.StringIO()
    stack: list[tuple[MemberView, int]] = [(n, 0) for n in reversed(nodes)]
    while stack:
        node, depth = stack.pop()
        out.write("    " * depth + _format_line(node, show_status=show_status) + "\n")
        if not node.collapsed:
            stack.extend((c, depth + 1) for c in reversed(node.children))
    return out.getvalue()


def tree_to_dict(nodes: Sequence[MemberView]) -> list[dict[str, Any]]:
    """Convert a view tree to JSON-ready dicts, including collapse state."""
    return [
        {
            "id": n.member.id,
            "name": display_name(n.member),
            "type": n.member.type,
            "typeKey": get_type_key(n.member.type),
            "agentId": n.member.agent_id,
            "status": get_status_key(n.member.checked_status),
            "collapsed": n.collapsed,
            "descendants": count_descendants(n),
            "children": tree_to_dict(n.children),
        }
        for n in nodes
    ]
