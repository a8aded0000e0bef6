"""HTTP client for the family tree backend."""

from typing import Any

import requests
from loguru import logger

from family_tree.config import FAMILY_TREE_PATH, resolve_base_url, resolve_timeout


class FamilyTreeApi:
    """Fetch the family tree from the backend over HTTP."""

    def __init__(self, *, base_url: str | None = None, timeout: float | None = None) -> None:
        self.base_url = (base_url or resolve_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else resolve_timeout()
        self.sess = requests.Session()

        logger.debug("API ready: base_url {!r}, timeout {}s", self.base_url, self.timeout)

    def get(self, path: str) -> dict[str, Any]:
        """Issue a GET request, return the decoded JSON body.

        Raises:
            requests.RequestException: Connection failure, timeout, HTTP error
                status, or a body that is not valid JSON.
        """
        url = f"{self.base_url}{path}"
        logger.debug("Making request: GET {!r}", url)

        r = self.sess.get(url, timeout=self.timeout)
        r.raise_for_status()
        rv = r.json()
        if not isinstance(rv, dict):
            msg = f"Expected a JSON object from {url!r}, got {type(rv).__name__}"
            raise requests.RequestException(msg)
        return rv

    def fetch_family_tree(self) -> dict[str, Any]:
        """Fetch the raw family tree response."""
        return self.get(FAMILY_TREE_PATH)
