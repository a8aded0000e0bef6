"""Shared test fixtures."""

import pytest

from family_tree.core.importer.json_reader import parse_family_tree
from family_tree.core.tree.collapse import init_collapsed
from family_tree.models.member import Member, MemberView
from tests.unit.sample_tree import RAW_TREE


@pytest.fixture
def members() -> tuple[Member, ...]:
    """Parsed domain members of the sample tree."""
    return parse_family_tree(RAW_TREE)


@pytest.fixture
def view_tree(members: tuple[Member, ...]) -> list[MemberView]:
    """Sample tree with default collapse state applied."""
    return init_collapsed(members, 0)
