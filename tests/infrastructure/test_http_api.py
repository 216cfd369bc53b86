"""End-to-end tests for the HTTP surface, through Flask's test client."""

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from fox_shop.infrastructure.web.app import create_app


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture
def client(db_path):
    app = create_app(db_path)
    app.config["TESTING"] = True
    return app.test_client()


def _create(client, name="Widget", price=100, count=10):
    response = client.post("/products", json={"name": name, "price": price, "count": count})
    assert response.status_code == 201
    return response.get_json()


class TestProductLifecycle:

    def test_create_patch_delete(self, client, db_path):
        created = _create(client)
        assert isinstance(created["id"], int)
        assert created == {"id": created["id"], "name": "Widget", "price": 100, "count": 10}

        response = client.patch(f"/products/{created['id']}", json={"price": 150})
        assert response.status_code == 200
        assert response.get_json()["price"] == 150

        changes = json.loads(db_path.read_text())["changes"]
        assert len(changes) == 1
        assert changes[0]["newPrice"] == 150
        assert changes[0]["previousPrice"] == 100

        response = client.delete(f"/products/{created['id']}")
        assert response.status_code == 200
        assert response.get_json()["name"] == "Widget"

        response = client.get(f"/products/{created['id']}")
        assert response.status_code == 404
        assert response.get_data(as_text=True) == "Product not found"


class TestGetProducts:

    def test_list_all(self, client):
        _create(client, "Widget")
        _create(client, "Gadget")
        response = client.get("/products")
        assert [p["name"] for p in response.get_json()] == ["Widget", "Gadget"]

    def test_empty_list(self, client):
        assert client.get("/products").get_json() == []

    def test_filter_by_name(self, client):
        created = _create(client, "Widget")
        _create(client, "Gadget")
        response = client.get("/products", query_string={"name": "Widget"})
        assert response.status_code == 200
        assert response.get_json() == created

    def test_filter_by_unknown_name(self, client):
        response = client.get("/products", query_string={"name": "Nope"})
        assert response.status_code == 404

    def test_get_by_id(self, client):
        created = _create(client)
        assert client.get(f"/products/{created['id']}").get_json() == created

    def test_non_integer_id_is_404(self, client):
        response = client.get("/products/abc")
        assert response.status_code == 404
        assert response.mimetype == "text/plain"
        assert response.get_data(as_text=True) == "Not Found"

    def test_wrong_method_is_plain_text(self, client):
        response = client.put("/products")
        assert response.status_code == 405
        assert response.mimetype == "text/plain"


class TestCreateValidation:

    @pytest.mark.parametrize(
        "body",
        [
            {"price": 100, "count": 10},
            {"name": "Widget", "count": 10},
            {"name": "Widget", "price": 100},
            {"name": "Widget", "price": 100, "count": 0},
        ],
    )
    def test_missing_field_is_400(self, client, db_path, body):
        response = client.post("/products", json=body)
        assert response.status_code == 400
        assert response.get_data(as_text=True) == "Name, price and count are required"
        assert response.mimetype == "text/plain"
        assert json.loads(db_path.read_text())["products"] == []

    def test_no_body_is_400(self, client):
        assert client.post("/products").status_code == 400

    def test_invalid_price_is_400(self, client):
        response = client.post("/products", json={"name": "W", "price": "lots", "count": 1})
        assert response.status_code == 400


class TestPatch:

    def test_unknown_product_is_404(self, client):
        assert client.patch("/products/123", json={"price": 5}).status_code == 404

    def test_partial_fields(self, client):
        created = _create(client)
        response = client.patch(f"/products/{created['id']}", json={"count": 3})
        assert response.get_json() == {**created, "count": 3}

    def test_invalid_price_is_400(self, client):
        created = _create(client)
        response = client.patch(f"/products/{created['id']}", json={"price": -1})
        assert response.status_code == 400


class TestDelete:

    def test_unknown_product_is_404(self, client):
        assert client.delete("/products/1").status_code == 404


class TestPriceHistory:

    def test_without_changes(self, client):
        created = _create(client, price=42)
        response = client.get(f"/products/{created['id']}/price-history")
        assert response.status_code == 200
        assert response.get_json() == [{"Actual price": 42}]

    def test_with_changes(self, client):
        created = _create(client, price=15)
        client.patch(f"/products/{created['id']}", json={"price": 10})
        client.patch(f"/products/{created['id']}", json={"price": 20})

        history = client.get(f"/products/{created['id']}/price-history").get_json()
        assert len(history) == 3
        assert history[0] == {"Initial price": 15}
        (first_label, first_price), = history[1].items()
        (last_label, last_price), = history[2].items()
        assert (first_price, last_price) == (10, 20)
        assert last_label.endswith(" - Present")
        assert first_label.split(" - ")[1] == last_label.split(" - ")[0]

    def test_unknown_product_is_404(self, client):
        response = client.get("/products/999/price-history")
        assert response.status_code == 404
        assert response.get_data(as_text=True) == "The product was not found"

    def test_change_log(self, client):
        created = _create(client)
        client.patch(f"/products/{created['id']}", json={"price": 150})
        [change] = client.get(f"/products/{created['id']}/price-changes").get_json()
        assert change["productId"] == created["id"]
        assert change["newPrice"] == 150
        assert change["changedAt"].endswith("Z")


class TestConcurrentRequests:
    """Threaded requests against one app share the store and its lock."""

    @pytest.fixture
    def app(self, db_path):
        app = create_app(db_path)
        app.config["TESTING"] = True
        return app

    @staticmethod
    def _run(app, count, request):
        def call(i):
            return request(app.test_client(), i)

        with ThreadPoolExecutor(max_workers=count) as pool:
            return list(pool.map(call, range(count)))

    def test_concurrent_creates_get_distinct_ids(self, app, db_path):
        responses = self._run(
            app, 16,
            lambda c, i: c.post("/products", json={"name": f"P{i}", "price": 10, "count": 1}),
        )
        assert [r.status_code for r in responses] == [201] * 16

        ids = [r.get_json()["id"] for r in responses]
        assert sorted(ids) == list(range(1, 17))
        stored = json.loads(db_path.read_text())["products"]
        assert sorted(p["id"] for p in stored) == sorted(ids)

    def test_concurrent_price_updates_chain(self, app, db_path):
        created = _create(app.test_client(), price=100)
        responses = self._run(
            app, 8,
            lambda c, i: c.patch(f"/products/{created['id']}", json={"price": 200 + i}),
        )
        assert [r.status_code for r in responses] == [200] * 8

        changes = json.loads(db_path.read_text())["changes"]
        assert len(changes) == 8
        assert changes[0]["previousPrice"] == 100
        for earlier, later in zip(changes, changes[1:]):
            assert later["previousPrice"] == earlier["newPrice"]

        product = json.loads(db_path.read_text())["products"][0]
        assert product["price"] == changes[-1]["newPrice"]

    def test_concurrent_deletes_succeed_once(self, app):
        created = _create(app.test_client())
        responses = self._run(
            app, 6, lambda c, i: c.delete(f"/products/{created['id']}")
        )
        assert sorted(r.status_code for r in responses) == [200] + [404] * 5
