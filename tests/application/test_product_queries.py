"""Integration tests for the read-side and delete use cases."""

from datetime import datetime, timezone

import pytest

from fox_shop.application.delete_product import DeleteProductHandler
from fox_shop.application.list_price_changes import ListPriceChangesHandler
from fox_shop.application.list_products import ListProductsHandler
from fox_shop.application.show_price_history import ShowPriceHistoryHandler
from fox_shop.application.show_product import ShowProductHandler
from fox_shop.domain.exceptions import EntityNotFoundError
from fox_shop.domain.model.product import Product
from fox_shop.domain.model.value_objects import Price, StockCount
from tests.fakes import FakeProductRepository


def _repo() -> FakeProductRepository:
    return FakeProductRepository([
        Product(id=1, name="Widget", price=Price.of(100), count=StockCount(10)),
        Product(id=2, name="Gadget", price=Price.of("2.50"), count=StockCount(3)),
    ])


class TestListAndShow:

    def test_list_keeps_insertion_order(self):
        names = [dto.name for dto in ListProductsHandler(_repo()).handle()]
        assert names == ["Widget", "Gadget"]

    def test_show_by_id(self):
        assert ShowProductHandler(_repo()).handle(2).price == 2.5

    def test_show_by_name_is_exact(self):
        handler = ShowProductHandler(_repo())
        assert handler.handle_by_name("Widget").id == 1
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            handler.handle_by_name("widget")

    def test_show_unknown_id(self):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            ShowProductHandler(_repo()).handle(3)


class TestDeleteProduct:

    def test_returns_deleted_product(self):
        dto = DeleteProductHandler(_repo()).handle(1)
        assert dto.name == "Widget"

    def test_find_after_delete_not_found(self):
        repo = _repo()
        DeleteProductHandler(repo).handle(1)
        with pytest.raises(EntityNotFoundError):
            ShowProductHandler(repo).handle(1)

    def test_delete_unknown(self):
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(_repo()).handle(42)

    def test_price_changes_survive_delete(self):
        repo = _repo()
        widget = repo.get_by_id(1)
        widget.update_price(Price.of(150))
        repo.save(widget)
        DeleteProductHandler(repo).handle(1)
        assert len(ListPriceChangesHandler(repo.changes).handle(1)) == 1

    def test_deleted_id_not_reused_while_changes_exist(self):
        repo = _repo()
        gadget = repo.get_by_id(2)
        gadget.update_price(Price.of(3))
        repo.save(gadget)
        repo.delete(2)
        assert repo.next_id() == 3


class TestPriceQueries:

    def test_history_after_update(self):
        repo = _repo()
        widget = repo.get_by_id(1)
        at = datetime(2025, 2, 10, 0, 23, 5, 681000, tzinfo=timezone.utc)
        widget.update_price(Price.of(150), changed_at=at)
        repo.save(widget)

        history = ShowPriceHistoryHandler(repo, repo.changes).handle(1)
        assert history == [
            {"Initial price": 100},
            {"2025-02-10T00:23:05.681Z - Present": 150},
        ]

    def test_history_without_changes(self):
        repo = _repo()
        assert ShowPriceHistoryHandler(repo, repo.changes).handle(2) == [
            {"Actual price": 2.5}
        ]

    def test_change_log_json_shape(self):
        repo = _repo()
        widget = repo.get_by_id(1)
        at = datetime(2025, 2, 10, 0, 23, 5, 681000, tzinfo=timezone.utc)
        widget.update_price(Price.of(150), changed_at=at)
        repo.save(widget)

        [dto] = ListPriceChangesHandler(repo.changes).handle(1)
        assert dto.to_json() == {
            "productId": 1,
            "productName": "Widget",
            "previousPrice": 100,
            "newPrice": 150,
            "changedAt": "2025-02-10T00:23:05.681Z",
        }

    def test_change_log_empty_for_unknown_product(self):
        repo = _repo()
        assert ListPriceChangesHandler(repo.changes).handle(99) == []
