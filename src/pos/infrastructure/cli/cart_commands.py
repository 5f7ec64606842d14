"""CLI commands for pricing a cart."""

from __future__ import annotations

import click

from pos.application.checkout import CheckoutHandler
from pos.application.dto import CartItemSpec
from pos.domain.exceptions import DomainException
from pos.infrastructure import bootstrap


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'Widget:3,Gadget:5' into CartItemSpec list.

    A bare product name means a quantity of one.
    """
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            raise click.BadParameter("Empty item in list.")
        if ":" not in pair:
            specs.append(CartItemSpec(product_name=pair, quantity=1))
            continue
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append(CartItemSpec(product_name=name.strip(), quantity=qty))
    return specs


@click.command("checkout")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.option("--coupon", default=None, help="Coupon name to apply.")
@click.pass_context
def cart_checkout(ctx: click.Context, items: str, coupon: str | None) -> None:
    """Price a cart and print its invoice."""
    specs = _parse_items(items)

    try:
        handler = CheckoutHandler(inventory=bootstrap.inventory(ctx.obj["catalog"]))
        dto = handler.handle(item_specs=specs, coupon_name=coupon)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.text, nl=False)
