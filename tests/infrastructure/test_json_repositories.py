"""Tests for the JSON-file repositories."""

from datetime import timedelta

import pytest

from productor.domain.model.configuration import CakeOptions, ProductConfiguration, ProductType
from productor.domain.model.order import Order, OrderStatus
from productor.domain.model.session import CheckoutSession
from productor.domain.model.value_objects import DeliveryDetails
from productor.domain.service.pricing import with_recomputed_price
from productor.infrastructure.persistence.json_order_repository import JsonOrderRepository
from productor.infrastructure.persistence.json_session_repository import JsonSessionRepository


def _config() -> ProductConfiguration:
    return with_recomputed_price(
        ProductConfiguration(
            product_type=ProductType.CAKE,
            options=CakeOptions(size="12", flavor="chocolate", addons=frozenset({"filling"})),
            delivery=DeliveryDetails("Ada Obi", "12 Marina Rd", "08012345678", "Lagos"),
        )
    )


class TestJsonSessionRepository:

    def test_missing_file_gives_fresh_session(self, tmp_path):
        repo = JsonSessionRepository(tmp_path / "session.json")
        assert repo.load() == CheckoutSession()

    def test_round_trip(self, tmp_path):
        repo = JsonSessionRepository(tmp_path / "session.json")
        session = CheckoutSession(configuration=_config(), customer_email="ada@example.com")
        repo.save(session)
        assert repo.load() == session

    def test_corrupt_file_gives_fresh_session(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{not json", encoding="utf-8")
        assert JsonSessionRepository(path).load() == CheckoutSession()

    @pytest.mark.parametrize("content", ["[]", "42", "\"session\"", "null"])
    def test_non_object_file_gives_fresh_session(self, tmp_path, content):
        path = tmp_path / "session.json"
        path.write_text(content, encoding="utf-8")
        assert JsonSessionRepository(path).load() == CheckoutSession()

    def test_non_object_config_gives_blank_cake(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text('{"config": [1, 2], "customer_email": "ada@example.com"}', encoding="utf-8")
        session = JsonSessionRepository(path).load()
        assert session.configuration.product_type == ProductType.CAKE
        assert session.configuration.price == 0
        assert session.customer_email == "ada@example.com"


class TestJsonOrderRepository:

    def test_assigns_sequential_ids(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        first = Order.create("ada@example.com", _config())
        second = Order.create("ada@example.com", _config())
        repo.save(first)
        repo.save(second)
        assert (first.id, second.id) == (1, 2)
        assert repo.next_id() == 3

    def test_round_trip_keeps_status_and_reference(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order.create("ada@example.com", _config())
        order.confirm("PAY-ABC")
        repo.save(order)

        loaded = repo.get_by_id(order.id)
        assert loaded.status == OrderStatus.CONFIRMED
        assert loaded.payment_reference == "PAY-ABC"
        assert loaded.configuration == order.configuration
        assert loaded.created_at == order.created_at

    def test_update_in_place(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order.create("ada@example.com", _config())
        order.confirm("PAY-ABC")
        repo.save(order)
        order.complete()
        repo.save(order)
        assert repo.get_by_id(order.id).status == OrderStatus.COMPLETED
        assert repo.next_id() == 2

    def test_list_by_customer_newest_first(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        old = Order.create("ada@example.com", _config())
        old.created_at -= timedelta(days=2)
        new = Order.create("ada@example.com", _config())
        other = Order.create("bola@example.com", _config())
        for o in (old, new, other):
            repo.save(o)

        assert [o.id for o in repo.list_by_customer("Ada@Example.com")] == [new.id, old.id]

    def test_unknown_id(self, tmp_path):
        assert JsonOrderRepository(tmp_path / "orders.json").get_by_id(5) is None
