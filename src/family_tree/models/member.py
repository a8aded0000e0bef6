"""Domain models for the family tree."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Member:
    """A single member of the organization hierarchy."""

    id: int
    type: str
    title: str
    first_name: str
    last_name: str
    checked_date: str = ""
    checked_status: bool | None = None
    user_id: int | None = None
    parent_id: int | None = None
    agent_id: str | None = None
    created_at: str = ""
    updated_at: str = ""
    children: tuple["Member", ...] = ()


@dataclass(eq=False)
class MemberView:
    """A member as shown in the tree view, with its collapse state.

    Views are compared by identity: two views of the same member are distinct
    nodes, since toggling one must never affect the other.
    """

    member: Member
    collapsed: bool
    children: list["MemberView"] = field(default_factory=list)

    @property
    def id(self) -> int:
        return self.member.id


@dataclass(frozen=True)
class FamilyTreeResponse:
    """The backend envelope around a family tree payload."""

    successful: bool
    message: str = ""
    response_code: str = ""
    http_status: int | None = None
    total_members: int = 0
    family_tree: tuple[Member, ...] = ()
