"""Tree store: canonical tree, load lifecycle, search and collapse entry points."""

from collections.abc import Callable, Sequence

import requests
from loguru import logger

from family_tree.core.importer.json_reader import parse_response
from family_tree.core.search.filter import filter_tree
from family_tree.core.tree.collapse import init_collapsed, set_all_collapsed, toggle_node
from family_tree.core.tree.presentation import find_node
from family_tree.models.member import MemberView
from family_tree.protocols import TreeSourceProtocol

LOAD_FAILED_MESSAGE = "Failed to load family tree data."
CONNECTION_FAILED_MESSAGE = "Unable to connect to the server. Please try again."

Listener = Callable[["FamilyTreeStore"], None]


class FamilyTreeStore:
    """Holds the canonical tree and the state derived from it.

    The canonical tree is the only mutable source of truth for collapse
    state. ``filtered_tree`` is rebuilt from it on every access, so changes
    made through ``toggle_node``/``toggle_expand_all`` show up immediately.
    """

    def __init__(self, source: TreeSourceProtocol) -> None:
        self._source = source
        self._listeners: list[Listener] = []
        self._load_seq = 0

        # Nothing to show until the first load completes
        self.loading = True
        self.error: str | None = None
        self.total_members = 0
        self.tree: list[MemberView] = []
        self.expand_all = False
        self._search_query = ""

    # Observers

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback run after every state change; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # Loading

    def begin_load(self) -> int:
        """Mark a load as started and return its ticket."""
        self._load_seq += 1
        self.loading = True
        self.error = None
        self._notify()
        return self._load_seq

    def _is_stale(self, ticket: int) -> bool:
        if ticket != self._load_seq:
            logger.debug("Dropping stale load result {} (latest is {})", ticket, self._load_seq)
            return True
        return False

    def finish_load(self, ticket: int, data: dict) -> None:
        """Apply a backend response for the load identified by ``ticket``."""
        if self._is_stale(ticket):
            return

        try:
            self._apply_response(data)
        finally:
            self.loading = False
            self._notify()

    def _apply_response(self, data: dict) -> None:
        try:
            response = parse_response(data)
        except ValueError:
            logger.opt(exception=True).warning("Malformed family tree payload")
            self.error = LOAD_FAILED_MESSAGE
            return

        if not response.successful:
            logger.warning(
                "Backend reported failure: {} ({})", response.message, response.response_code
            )
            self.error = LOAD_FAILED_MESSAGE
            return

        self.total_members = response.total_members
        self.tree = init_collapsed(response.family_tree, 0)
        logger.debug(
            "Loaded family tree: {} members, {} roots", self.total_members, len(self.tree)
        )

    def fail_load(self, ticket: int, exc: BaseException) -> None:
        """Record a transport failure for the load identified by ``ticket``."""
        if self._is_stale(ticket):
            return
        logger.opt(exception=exc).error("Cannot reach family tree backend")
        self.error = CONNECTION_FAILED_MESSAGE
        self.loading = False
        self._notify()

    def load(self) -> None:
        """Fetch the tree from the source and replace the canonical tree on success."""
        ticket = self.begin_load()
        try:
            data = self._source.fetch_family_tree()
        except requests.RequestException as e:
            self.fail_load(ticket, e)
            return
        self.finish_load(ticket, data)

    # Search

    @property
    def search_query(self) -> str:
        return self._search_query

    @search_query.setter
    def search_query(self, value: str) -> None:
        self._search_query = value
        self._notify()

    @property
    def filtered_tree(self) -> Sequence[MemberView]:
        return filter_tree(self.tree, self._search_query)

    # Collapse

    def toggle_node(self, node_id: int) -> MemberView:
        """Toggle one canonical node by id.

        Raises:
            KeyError: No node with that id in the canonical tree.
        """
        node = find_node(self.tree, node_id)
        if node is None:
            raise KeyError(node_id)
        toggle_node(node)
        self._notify()
        return node

    def toggle_expand_all(self) -> bool:
        """Flip the expand-all flag and apply it to every canonical node."""
        self.expand_all = not self.expand_all
        set_all_collapsed(self.tree, not self.expand_all)
        self._notify()
        return self.expand_all
