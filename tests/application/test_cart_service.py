"""Integration tests for the CartService (cart aggregate with persistence)."""

import json
import threading

from shopease.application.cart_service import CartService
from shopease.application.dto import CartOutcome
from shopease.domain.model.product import ProductSnapshot
from tests.fakes import InMemoryCartStorage

KEY = "cart"


def _product(pid: str = "p1", price: str = "500", discount=None, name=None) -> ProductSnapshot:
    return ProductSnapshot.create(
        id=pid, name=name or f"Product {pid}", price=price, discount=discount
    )


def _setup(slots=None):
    storage = InMemoryCartStorage(slots)
    service = CartService(storage, key=KEY)
    service.restore()
    return service, storage


class TestAddItem:

    def test_add_persists_and_prices(self):
        service, storage = _setup()
        result = service.add_item(_product("p1", price="1200", discount=10), 2)

        assert result.outcome == CartOutcome.OK
        assert result.cart.subtotal == "Rs 2,160.00"
        assert result.cart.tax == "Rs 216.00"
        assert result.cart.shipping == "Rs 0.00"
        assert result.cart.total == "Rs 2,376.00"
        assert result.cart.total_item_count == 2
        assert json.loads(storage.slots[KEY])[0]["quantity"] == 2

    def test_default_quantity_is_one(self):
        service, _ = _setup()
        result = service.add_item(_product())
        assert result.cart.items[0].quantity == 1

    def test_merge_on_add(self):
        service, _ = _setup()
        service.add_item(_product("p1"), 2)
        result = service.add_item(_product("p1"), 3)
        assert len(result.cart.items) == 1
        assert result.cart.items[0].quantity == 5

    def test_zero_quantity_rejected_without_write(self):
        service, storage = _setup()
        result = service.add_item(_product(), 0)
        assert result.outcome == CartOutcome.INVALID_INPUT
        assert result.cart.items == []
        assert storage.writes == []

    def test_non_integer_quantity_rejected(self):
        service, _ = _setup()
        assert service.add_item(_product(), 1.5).outcome == CartOutcome.INVALID_INPUT

    def test_non_product_rejected(self):
        service, _ = _setup()
        result = service.add_item({"_id": "p1", "name": "x", "price": 1}, 1)
        assert result.outcome == CartOutcome.INVALID_INPUT

    def test_out_of_stock_not_checked(self):
        service, _ = _setup()
        product = ProductSnapshot.create(id="p1", name="Shawl", price="800", in_stock=False)
        assert service.add_item(product, 1000).outcome == CartOutcome.OK


class TestRemoveAndUpdate:

    def test_remove_non_member_reports_not_found(self):
        service, storage = _setup()
        service.add_item(_product("p1"), 1)
        before = service.view().cart
        writes = len(storage.writes)

        result = service.remove_item("missing")

        assert result.outcome == CartOutcome.NOT_FOUND
        assert result.cart == before
        assert len(storage.writes) == writes

    def test_remove_member(self):
        service, storage = _setup()
        service.add_item(_product("p1"), 1)
        result = service.remove_item("p1")
        assert result.outcome == CartOutcome.OK
        assert result.cart.items == []
        assert json.loads(storage.slots[KEY]) == []

    def test_update_quantity(self):
        service, _ = _setup()
        service.add_item(_product("p1"), 1)
        result = service.update_quantity("p1", 4)
        assert result.outcome == CartOutcome.OK
        assert result.cart.total_item_count == 4

    def test_update_to_zero_or_negative_rejected(self):
        service, _ = _setup()
        service.add_item(_product("p1"), 3)
        before = service.view().cart

        for bad in (0, -1):
            result = service.update_quantity("p1", bad)
            assert result.outcome == CartOutcome.INVALID_INPUT
            assert result.cart == before

    def test_update_missing_line_reports_not_found(self):
        service, _ = _setup()
        assert service.update_quantity("p9", 2).outcome == CartOutcome.NOT_FOUND


class TestClear:

    def test_clear_twice_is_idempotent(self):
        service, storage = _setup()
        service.add_item(_product("p1"), 2)

        first = service.clear()
        second = service.clear()

        assert first == second
        assert first.cart.items == []
        assert first.cart.total == "Rs 0.00"
        assert first.cart.shipping == "Rs 0.00"
        assert KEY not in storage.slots


class TestPersistenceFailure:

    def test_failed_save_is_reported_but_state_kept(self):
        service, storage = _setup()
        storage.fail_save = True

        result = service.add_item(_product("p1"), 2)

        assert result.outcome == CartOutcome.PERSISTENCE_FAILED
        assert "quota exceeded" in result.message
        assert result.cart.items[0].quantity == 2
        assert service.quantity_of("p1") == 2

    def test_failed_delete_on_clear(self):
        service, storage = _setup()
        service.add_item(_product("p1"), 1)
        storage.fail_delete = True

        result = service.clear()

        assert result.outcome == CartOutcome.PERSISTENCE_FAILED
        assert result.cart.items == []

    def test_failed_write_is_not_retried(self):
        service, storage = _setup()
        storage.fail_save = True
        service.add_item(_product("p1"), 1)
        storage.fail_save = False
        assert storage.writes == []


class TestRestore:

    def test_round_trip(self):
        service, storage = _setup()
        service.add_item(_product("a", price="100"), 2)
        service.add_item(_product("b", price="250.50", discount=5), 1)
        service.add_item(_product("a", price="100"), 1)

        restored = CartService(storage, key=KEY)
        result = restored.restore()

        assert result.outcome == CartOutcome.OK
        assert {(i.product_id, i.quantity) for i in result.cart.items} == {("a", 3), ("b", 1)}
        assert result.cart.total == service.view().cart.total

    def test_absent_snapshot_gives_empty_cart(self):
        service, storage = _setup()
        assert service.view().cart.items == []
        assert storage.writes == []

    def test_invalid_entry_dropped(self):
        snapshot = json.dumps(
            [
                {"product": {"_id": "a", "name": "Lawn suit", "price": 500}, "quantity": 1},
                {"product": {"_id": "b", "price": 300}, "quantity": 1},
            ]
        )
        service, _ = _setup({KEY: snapshot})
        items = service.view().cart.items
        assert [i.product_id for i in items] == ["a"]

    def test_structural_checks(self):
        snapshot = json.dumps(
            [
                {"product": {"_id": "ok", "name": "Good", "price": "99.5"}, "quantity": 2},
                {"product": {"_id": "p", "name": "Bad price", "price": "free"}, "quantity": 1},
                {"product": {"_id": "q", "name": "Zero qty", "price": 10}, "quantity": 0},
                {"product": {"name": "No id", "price": 10}, "quantity": 1},
                {"product": {"_id": "r", "name": "Bool price", "price": True}, "quantity": 1},
                "not-an-object",
            ]
        )
        service, _ = _setup({KEY: snapshot})
        assert [i.product_id for i in service.view().cart.items] == ["ok"]

    def test_corrupt_snapshot_reset_and_cleared(self):
        service, storage = _setup({KEY: "{not json"})
        assert service.view().cart.items == []
        assert KEY not in storage.slots

    def test_non_list_snapshot_reset(self):
        service, storage = _setup({KEY: json.dumps({"items": []})})
        assert service.view().cart.items == []
        assert KEY not in storage.slots

    def test_read_failure_gives_empty_cart(self):
        storage = InMemoryCartStorage({KEY: "[]"})
        storage.fail_load = True
        result = CartService(storage, key=KEY).restore()
        assert result.outcome == CartOutcome.OK
        assert result.cart.items == []
        assert KEY not in storage.slots

    def test_restore_never_fails_even_if_cleanup_fails(self):
        storage = InMemoryCartStorage({KEY: "garbage"})
        storage.fail_delete = True
        assert CartService(storage, key=KEY).restore().outcome == CartOutcome.OK

    def test_duplicate_entries_merged_on_restore(self):
        entry = {"product": {"_id": "a", "name": "Scarf", "price": 100}, "quantity": 1}
        service, _ = _setup({KEY: json.dumps([entry, entry])})
        items = service.view().cart.items
        assert len(items) == 1
        assert items[0].quantity == 2


class TestWriteOrdering:

    def test_writes_follow_mutation_order(self):
        service, storage = _setup()
        service.add_item(_product("a"), 1)
        service.add_item(_product("b"), 1)
        service.remove_item("a")

        snapshots = [json.loads(s) for _, s in storage.writes]
        assert [[e["product"]["_id"] for e in s] for s in snapshots] == [
            ["a"],
            ["a", "b"],
            ["b"],
        ]

    def test_concurrent_adds_serialise(self):
        service, storage = _setup()
        product = _product("a")
        threads = [
            threading.Thread(target=service.add_item, args=(product, 1)) for _ in range(20)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert service.quantity_of("a") == 20
        quantities = [json.loads(s)[0]["quantity"] for _, s in storage.writes]
        assert quantities == list(range(1, 21))
