"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from fox_shop.application.add_product import AddProductHandler
from fox_shop.application.delete_product import DeleteProductHandler
from fox_shop.application.dto import ProductDTO, ProductPatch
from fox_shop.application.list_products import ListProductsHandler
from fox_shop.application.show_price_history import ShowPriceHistoryHandler
from fox_shop.application.show_product import ShowProductHandler
from fox_shop.application.update_price import UpdatePriceHandler
from fox_shop.application.update_product import UpdateProductHandler
from fox_shop.domain.exceptions import DomainException
from fox_shop.infrastructure.bootstrap import price_change_repository, product_repository


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}")
    click.echo(f"Name:  {dto.name}")
    click.echo(f"Price: {dto.price}")
    click.echo(f"Count: {dto.count}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    dtos = ListProductsHandler(product_repository()).handle()

    if not dtos:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<14} {'Name':<20} {'Price':>10} {'Count':>7}")
    click.echo("-" * 54)
    for p in dtos:
        click.echo(f"{p.id:<14} {p.name:<20} {p.price:>10} {p.count:>7}")


@click.command("show")
@click.option("--id", "product_id", type=int, default=None, help="Product ID.")
@click.option("--name", default=None, help="Exact product name.")
def product_show(product_id: int | None, name: str | None) -> None:
    """Show one product, looked up by ID or by name."""
    if (product_id is None) == (name is None):
        raise click.UsageError("Give exactly one of --id or --name")

    handler = ShowProductHandler(product_repository())
    try:
        if product_id is not None:
            dto = handler.handle(product_id)
        else:
            dto = handler.handle_by_name(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--count", required=True, type=int, help="Units in stock.")
def product_add(name: str, price: str, count: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repository())

    try:
        dto = handler.handle(name=name, price=price, count=count)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added at {dto.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--count", default=None, type=int, help="New stock count.")
def product_update(
    product_id: int, name: str | None, price: str | None, count: int | None
) -> None:
    """Update any of a product's name, price and count."""
    handler = UpdateProductHandler(product_repository())

    try:
        dto = handler.handle(product_id, ProductPatch(name=name, price=price, count=count))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated")
    _display_product(dto)


@click.command("price")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_price(product_id: int, price: str) -> None:
    """Update a product's price."""
    handler = UpdatePriceHandler(product_repository())

    try:
        dto = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} price updated to {dto.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repository())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' deleted")


@click.command("history")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_history(product_id: int) -> None:
    """Show how a product's price evolved."""
    handler = ShowPriceHistoryHandler(
        product_repo=product_repository(),
        price_change_repo=price_change_repository(),
    )

    try:
        intervals = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for interval in intervals:
        for label, price in interval.items():
            click.echo(f"{label:<52} {price:>10}")
