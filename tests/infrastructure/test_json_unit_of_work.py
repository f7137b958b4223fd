"""Tests for the JSON store: persistence, rollback and concurrent checkouts."""

import json
import threading
from decimal import Decimal

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.dto import CartLineSpec, ProductSpec
from storefront.domain.exceptions import InsufficientStockError, ResourceNotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.persistence.json_unit_of_work import STORE_FILE, JsonUnitOfWork


def _add(data_dir, name, price, stock):
    return AddProductHandler(JsonUnitOfWork(data_dir)).handle(
        ProductSpec(name=name, category="Cars", price=price, stock=stock)
    )


class TestJsonUnitOfWork:

    def test_empty_directory_reads_as_empty_store(self, tmp_path):
        with JsonUnitOfWork(tmp_path / "fresh") as uow:
            assert uow.products.list_all() == []
            assert uow.orders.list_all() == []
            assert uow.users.count() == 0

    def test_commit_is_visible_to_a_new_instance(self, tmp_path):
        _add(tmp_path, "Moura M60GD", "599.90", 25)

        with JsonUnitOfWork(tmp_path) as uow:
            product = uow.products.get_by_id(1)
        assert product.name == "Moura M60GD"
        assert product.price.amount == Decimal("599.90")

    def test_uncommitted_changes_are_discarded(self, tmp_path):
        _add(tmp_path, "Moura M60GD", "599.90", 25)

        with JsonUnitOfWork(tmp_path) as uow:
            product = uow.products.get_by_id(1)
            product.remove_stock(5)
            uow.products.save(product)

        with JsonUnitOfWork(tmp_path) as uow:
            assert uow.products.get_by_id(1).stock == 25

    def test_exception_rolls_back(self, tmp_path):
        _add(tmp_path, "Moura M60GD", "599.90", 25)

        with pytest.raises(RuntimeError):
            with JsonUnitOfWork(tmp_path) as uow:
                uow.products.delete(1)
                raise RuntimeError("boom")

        with JsonUnitOfWork(tmp_path) as uow:
            assert uow.products.count() == 1

    def test_order_round_trips_with_frozen_prices(self, tmp_path):
        _add(tmp_path, "A", "10.00", 5)
        _add(tmp_path, "B", "2.50", 5)
        dto = CheckoutHandler(JsonUnitOfWork(tmp_path)).handle(
            [CartLineSpec(1, 2), CartLineSpec(2, 3)]
        )

        with JsonUnitOfWork(tmp_path) as uow:
            order = uow.orders.get_by_id(dto.id)
        assert order.status == OrderStatus.CONFIRMED
        assert order.created_at.tzinfo is not None
        assert [line.unit_price.amount for line in order.lines] == [Decimal("10.00"), Decimal("2.50")]
        assert order.total.amount == Decimal("27.50")

        raw = json.loads((tmp_path / STORE_FILE).read_text(encoding="utf-8"))
        assert raw["orders"][0]["total"] == "27.50"

    def test_failed_checkout_leaves_file_untouched(self, tmp_path):
        _add(tmp_path, "A", "10.00", 5)
        _add(tmp_path, "B", "2.50", 1)
        before = (tmp_path / STORE_FILE).read_text(encoding="utf-8")

        with pytest.raises(InsufficientStockError):
            CheckoutHandler(JsonUnitOfWork(tmp_path)).handle(
                [CartLineSpec(1, 2), CartLineSpec(2, 3)]
            )

        assert (tmp_path / STORE_FILE).read_text(encoding="utf-8") == before
        assert not list(tmp_path.glob(".store-*"))

    def test_cancel_restores_stock_on_disk(self, tmp_path):
        _add(tmp_path, "A", "10.00", 5)
        dto = CheckoutHandler(JsonUnitOfWork(tmp_path)).handle([CartLineSpec(1, 4)])

        CancelOrderHandler(JsonUnitOfWork(tmp_path)).handle(dto.id)

        with JsonUnitOfWork(tmp_path) as uow:
            assert uow.products.get_by_id(1).stock == 5
            assert uow.orders.get_by_id(dto.id).status == OrderStatus.CANCELLED

    def test_deleted_product_id_is_never_reused(self, tmp_path):
        _add(tmp_path, "A", "10.00", 10)
        order = CheckoutHandler(JsonUnitOfWork(tmp_path)).handle([CartLineSpec(1, 3)])
        DeleteProductHandler(JsonUnitOfWork(tmp_path)).handle(1)

        newcomer = _add(tmp_path, "B", "5.00", 1)

        assert newcomer.id == 2
        with pytest.raises(ResourceNotFoundError, match="'1'"):
            CancelOrderHandler(JsonUnitOfWork(tmp_path)).handle(order.id)
        with JsonUnitOfWork(tmp_path) as uow:
            assert uow.products.get_by_id(2).stock == 1
            assert uow.orders.get_by_id(order.id).status == OrderStatus.CONFIRMED

    def test_counter_survives_deleting_every_product(self, tmp_path):
        _add(tmp_path, "A", "10.00", 1)
        _add(tmp_path, "B", "10.00", 1)
        DeleteProductHandler(JsonUnitOfWork(tmp_path)).handle(1)
        DeleteProductHandler(JsonUnitOfWork(tmp_path)).handle(2)

        raw = json.loads((tmp_path / STORE_FILE).read_text(encoding="utf-8"))
        assert raw["products"] == []
        assert raw["next_ids"] == {"products": 3}
        assert _add(tmp_path, "C", "10.00", 1).id == 3

    def test_leaving_after_commit_does_not_reread_the_store(self, tmp_path):
        _add(tmp_path, "A", "10.00", 5)

        with JsonUnitOfWork(tmp_path) as uow:
            product = uow.products.get_by_id(1)
            product.remove_stock(2)
            uow.products.save(product)
            uow.commit()
            (tmp_path / STORE_FILE).write_text("not json", encoding="utf-8")

        assert uow.products.get_by_id(1).stock == 3

    def test_rollback_does_not_mask_the_original_error(self, tmp_path):
        _add(tmp_path, "A", "10.00", 5)

        with pytest.raises(RuntimeError, match="boom"):
            with JsonUnitOfWork(tmp_path) as uow:
                uow.products.delete(1)
                (tmp_path / STORE_FILE).write_text("not json", encoding="utf-8")
                raise RuntimeError("boom")

        assert uow.products.count() == 1

    def test_explicit_rollback_returns_to_last_commit(self, tmp_path):
        _add(tmp_path, "A", "10.00", 5)

        with JsonUnitOfWork(tmp_path) as uow:
            product = uow.products.get_by_id(1)
            product.remove_stock(1)
            uow.products.save(product)
            uow.commit()

            product.remove_stock(4)
            uow.products.save(product)
            uow.rollback()

            assert uow.products.get_by_id(1).stock == 4


class TestConcurrentCheckout:

    def test_stock_is_never_oversold(self, tmp_path):
        _add(tmp_path, "Moura M60GD", "599.90", 5)
        buyers = 12
        barrier = threading.Barrier(buyers)
        outcomes: list[str] = []
        outcomes_lock = threading.Lock()

        def buy():
            barrier.wait()
            try:
                CheckoutHandler(JsonUnitOfWork(tmp_path)).handle([CartLineSpec(1, 1)])
                outcome = "ok"
            except InsufficientStockError:
                outcome = "rejected"
            with outcomes_lock:
                outcomes.append(outcome)

        threads = [threading.Thread(target=buy) for _ in range(buyers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert outcomes.count("ok") == 5
        assert outcomes.count("rejected") == buyers - 5
        with JsonUnitOfWork(tmp_path) as uow:
            assert uow.products.get_by_id(1).stock == 0
            assert len(uow.orders.list_all()) == 5
