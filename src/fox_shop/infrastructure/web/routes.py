"""HTTP routes for the Product resource.

Each view builds the matching application handler and maps its result
to a response. Domain errors propagate to the handlers registered in
``fox_shop.infrastructure.web.app``.
"""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from fox_shop.application.add_product import AddProductHandler
from fox_shop.application.delete_product import DeleteProductHandler
from fox_shop.application.dto import ProductPatch
from fox_shop.application.list_price_changes import ListPriceChangesHandler
from fox_shop.application.list_products import ListProductsHandler
from fox_shop.application.show_price_history import ShowPriceHistoryHandler
from fox_shop.application.show_product import ShowProductHandler
from fox_shop.application.update_product import UpdateProductHandler
from fox_shop.infrastructure.bootstrap import price_change_repository, product_repository

products = Blueprint("products", __name__)


def _db_path():
    return current_app.config["FOX_SHOP_DB"]


def _json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


@products.get("/products")
def list_products():
    name = request.args.get("name")
    if not name:
        dtos = ListProductsHandler(product_repository(_db_path())).handle()
        return jsonify([dto.to_json() for dto in dtos])

    dto = ShowProductHandler(product_repository(_db_path())).handle_by_name(name)
    return jsonify(dto.to_json())


@products.get("/products/<int:product_id>")
def show_product(product_id: int):
    dto = ShowProductHandler(product_repository(_db_path())).handle(product_id)
    return jsonify(dto.to_json())


@products.post("/products")
def add_product():
    body = _json_body()
    handler = AddProductHandler(product_repository(_db_path()))
    dto = handler.handle(
        name=body.get("name"), price=body.get("price"), count=body.get("count")
    )
    return jsonify(dto.to_json()), 201


@products.patch("/products/<int:product_id>")
def update_product(product_id: int):
    handler = UpdateProductHandler(product_repository(_db_path()))
    dto = handler.handle(product_id, ProductPatch.from_mapping(_json_body()))
    return jsonify(dto.to_json())


@products.delete("/products/<int:product_id>")
def delete_product(product_id: int):
    dto = DeleteProductHandler(product_repository(_db_path())).handle(product_id)
    return jsonify(dto.to_json())


@products.get("/products/<int:product_id>/price-history")
def price_history(product_id: int):
    handler = ShowPriceHistoryHandler(
        product_repo=product_repository(_db_path()),
        price_change_repo=price_change_repository(_db_path()),
    )
    return jsonify(handler.handle(product_id))


@products.get("/products/<int:product_id>/price-changes")
def price_changes(product_id: int):
    handler = ListPriceChangesHandler(price_change_repository(_db_path()))
    return jsonify([dto.to_json() for dto in handler.handle(product_id)])
