"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from techstore.application.browse_catalog import BrowseCatalogHandler
from techstore.domain.model.catalog import ALL_CATEGORIES
from techstore.domain.model.product import Category
from techstore.infrastructure.bootstrap import catalog

CATEGORY_CHOICES = [ALL_CATEGORIES] + [c.value for c in Category]


@click.command("list")
@click.option(
    "--category",
    type=click.Choice(CATEGORY_CHOICES),
    default=ALL_CATEGORIES,
    show_default=True,
    help="Only show one category.",
)
@click.option("--search", "query", default="", help="Text to look for in name or description.")
@click.option("--specs", is_flag=True, default=False, help="Also print each product's specs.")
def catalog_list(category: str, query: str, specs: bool) -> None:
    """List catalog products."""
    products = BrowseCatalogHandler(catalog()).handle(category=category, query=query)

    click.echo(f"{len(products)} resultados")
    if not products:
        return

    click.echo(f"{'ID':<6} {'Name':<22} {'Category':<12} {'Rating':>6} {'Price':>14}")
    click.echo("-" * 64)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<22} {p.category:<12} {p.rating:>6} {p.price:>14}")
        if specs:
            for spec in p.specs:
                click.echo(f"{'':<8}- {spec}")
