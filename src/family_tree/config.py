"""Configuration constants for the family tree explorer."""

import os

# Backend serving the family tree. FAMILY_TREE_BASE_URL overrides it.
DEFAULT_BASE_URL: str = "http://localhost:3001"

FAMILY_TREE_PATH: str = "/users/team-cal/family-tree"

# Seconds before a request is abandoned. FAMILY_TREE_TIMEOUT overrides it.
REQUEST_TIMEOUT: float = 10.0

# Nodes at this depth and below start collapsed.
DEFAULT_COLLAPSE_DEPTH: int = 2


def resolve_base_url() -> str:
    """Return the backend base URL, without trailing slash."""
    return os.environ.get("FAMILY_TREE_BASE_URL", DEFAULT_BASE_URL).rstrip("/")


def resolve_timeout() -> float:
    """Return the request timeout in seconds."""
    raw = os.environ.get("FAMILY_TREE_TIMEOUT")
    if not raw:
        return REQUEST_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        msg = f"FAMILY_TREE_TIMEOUT must be a number, got {raw!r}"
        raise ValueError(msg) from None
