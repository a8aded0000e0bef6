"""Search filter over the member tree."""

from collections.abc import Sequence

from family_tree.models.member import Member, MemberView


def normalize_query(query: str) -> str:
    return query.strip().lower()


def member_matches(member: Member, query: str) -> bool:
    """Check whether a member matches an already normalized query.

    The query is matched as a substring of the full name
    (``title first last``), the agent id and the type.
    """
    full_name = f"{member.title} {member.first_name} {member.last_name}".lower()
    agent_id = (member.agent_id or "").lower()
    return query in full_name or query in agent_id or query in member.type.lower()


def _filter_nodes(nodes: Sequence[MemberView], query: str) -> list[MemberView]:
    result: list[MemberView] = []
    for node in nodes:
        filtered_children = _filter_nodes(node.children, query)
        if member_matches(node.member, query) or filtered_children:
            result.append(
                MemberView(member=node.member, collapsed=False, children=filtered_children)
            )
    return result


def filter_tree(nodes: Sequence[MemberView], query: str) -> Sequence[MemberView]:
    """Filter a view tree down to matches and their ancestors.

    Args:
        nodes: Top-level view nodes of the canonical tree.
        query: Raw search text; surrounding whitespace and case are ignored.

    Returns:
        ``nodes`` itself when the query is blank. Otherwise a new tree holding
        every node that matches or has a matching descendant, in original
        order and all expanded. The input is never modified.
    """
    q = normalize_query(query)
    if not q:
        return nodes
    return _filter_nodes(nodes, q)
