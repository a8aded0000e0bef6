"""Family tree explorer: load, search and collapse a member hierarchy."""

from family_tree.api import FamilyTreeApi
from family_tree.core.state import FamilyTreeStore
from family_tree.models.member import FamilyTreeResponse, Member, MemberView
from family_tree.protocols import TreeSourceProtocol

__all__ = [
    "FamilyTreeApi",
    "FamilyTreeResponse",
    "FamilyTreeStore",
    "Member",
    "MemberView",
    "TreeSourceProtocol",
]
