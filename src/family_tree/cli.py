"""CLI for the family tree explorer (show, search, count)."""

import json
from typing import Annotated

import typer
from loguru import logger

from family_tree.api import FamilyTreeApi
from family_tree.core.state import FamilyTreeStore
from family_tree.core.tree.presentation import count_descendants, display_name
from family_tree.core.tree.render import render_tree, tree_to_dict
from family_tree.logging_config import configure_logging

app = typer.Typer(help="Family tree explorer: browse and search the member hierarchy.")

BaseUrlOption = Annotated[
    str | None,
    typer.Option("--base-url", "-u", help="Backend base URL (default: $FAMILY_TREE_BASE_URL)"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _load_store(base_url: str | None) -> FamilyTreeStore:
    """Load the tree, exiting with status 1 if the load fails."""
    store = FamilyTreeStore(FamilyTreeApi(base_url=base_url))
    store.load()
    if store.error:
        logger.error(store.error)
        raise typer.Exit(1)
    return store


@app.command()
def show(
    base_url: BaseUrlOption = None,
    expand_all: bool = typer.Option(False, "--expand-all", "-e", help="Expand every node"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show the family tree with default collapse state."""
    store = _load_store(base_url)
    if expand_all:
        store.toggle_expand_all()

    if output_json:
        data = {"totalMembers": store.total_members, "familyTree": tree_to_dict(store.tree)}
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    typer.echo(f"{store.total_members} members\n")
    typer.echo(render_tree(store.tree), nl=False)


@app.command()
def search(
    query: str = typer.Argument(..., help="Text to find in names, agent ids and types"),
    base_url: BaseUrlOption = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show only members matching a query, with their ancestors."""
    store = _load_store(base_url)
    store.search_query = query
    results = store.filtered_tree

    if output_json:
        typer.echo(json.dumps(tree_to_dict(results), indent=2, ensure_ascii=False))
        return

    if not results:
        typer.echo(f"No members match '{query}'.")
        return
    typer.echo(render_tree(results), nl=False)


@app.command()
def count(base_url: BaseUrlOption = None) -> None:
    """Show total members and the size of each top-level branch."""
    store = _load_store(base_url)
    typer.echo(f"Total members: {store.total_members}")
    for root in store.tree:
        typer.echo(f"  {display_name(root.member)}: {count_descendants(root)} below")
