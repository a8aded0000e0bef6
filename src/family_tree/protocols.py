"""Protocols for dependency injection in the family tree explorer."""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TreeSourceProtocol(Protocol):
    """Protocol for clients that fetch the raw family tree response."""

    def fetch_family_tree(self) -> dict[str, Any]:
        """Fetch the backend response as decoded JSON."""
        ...


class TreeNodeProtocol(Protocol):
    """Anything shaped like a tree node: members and member views."""

    @property
    def id(self) -> int: ...

    @property
    def children(self) -> Sequence["TreeNodeProtocol"]: ...
