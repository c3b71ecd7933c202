"""Integration tests for the WishlistService."""

import json
import threading

from shopease.application.dto import CartOutcome
from shopease.application.wishlist_service import WishlistService
from shopease.domain.model.product import ProductSnapshot
from tests.fakes import InMemoryCartStorage

KEY = "wishlist"


def _product(pid: str) -> ProductSnapshot:
    return ProductSnapshot.create(id=pid, name=f"Item {pid}", price="1500", discount=20)


def _setup(slots=None):
    storage = InMemoryCartStorage(slots)
    service = WishlistService(storage, key=KEY)
    service.restore()
    return service, storage


class TestWishlistService:

    def test_add_and_persist(self):
        service, storage = _setup()
        result = service.add(_product("a"))
        assert result.ok
        assert result.items[0].price == "Rs 1,200.00"
        assert json.loads(storage.slots[KEY])[0]["_id"] == "a"

    def test_duplicate_add_writes_nothing(self):
        service, storage = _setup()
        service.add(_product("a"))
        service.add(_product("a"))
        assert len(storage.writes) == 1
        assert service.view().count == 1

    def test_toggle(self):
        service, _ = _setup()
        assert service.toggle(_product("a")).count == 1
        assert service.toggle(_product("a")).count == 0

    def test_concurrent_toggles_each_take_effect(self):
        service, storage = _setup()
        product = _product("a")

        def flip():
            for _ in range(50):
                assert service.toggle(product).ok

        threads = [threading.Thread(target=flip) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(storage.writes) == 200
        assert not service.contains("a")

    def test_remove_missing(self):
        service, _ = _setup()
        assert service.remove("zzz").outcome == CartOutcome.NOT_FOUND

    def test_round_trip(self):
        service, storage = _setup()
        service.add(_product("a"))
        service.add(_product("b"))
        restored = WishlistService(storage, key=KEY)
        restored.restore()
        assert restored.contains("a") and restored.contains("b")

    def test_corrupt_snapshot_discarded(self):
        service, storage = _setup({KEY: "nonsense"})
        assert service.view().count == 0
        assert KEY not in storage.slots

    def test_save_failure_reported(self):
        service, storage = _setup()
        storage.fail_save = True
        result = service.add(_product("a"))
        assert result.outcome == CartOutcome.PERSISTENCE_FAILED
        assert result.count == 1
