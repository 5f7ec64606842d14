"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from pos.application.show_catalog import ShowCatalogHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure import bootstrap


@click.command("list")
@click.pass_context
def catalog_list(ctx: click.Context) -> None:
    """List all products with their promotions."""
    try:
        handler = ShowCatalogHandler(inventory=bootstrap.inventory(ctx.obj["catalog"]))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    products = handler.handle()
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<40} {'Price':>8}  Promotion")
    click.echo("-" * 72)
    for p in products:
        click.echo(f"{p.name:<40} {p.price:>8}  {p.promotion}")
