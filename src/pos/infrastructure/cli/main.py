import logging

import click

from pos.infrastructure.cli.cart_commands import cart_checkout
from pos.infrastructure.cli.catalog_commands import catalog_list


@click.group()
@click.option(
    "--catalog",
    default=None,
    type=click.Path(dir_okay=False),
    help="Catalog JSON file (defaults to $POS_CATALOG, then data/catalog.json).",
)
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, catalog: str | None, verbose: bool) -> None:
    """POS — point-of-sale pricing"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["catalog"] = catalog


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


@cli.group()
def cart() -> None:
    """Price a shopping cart."""


# Register subcommands
catalog.add_command(catalog_list)
cart.add_command(cart_checkout)
