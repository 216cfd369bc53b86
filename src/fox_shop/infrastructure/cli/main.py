import click

from fox_shop.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_history,
    product_list,
    product_price,
    product_show,
    product_update,
)
from fox_shop.infrastructure.cli.serve_command import serve


@click.group()
def cli() -> None:
    """Fox shop — products service"""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
cli.add_command(serve)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_history)
product.add_command(product_list)
product.add_command(product_price)
product.add_command(product_show)
product.add_command(product_update)
