"""Integration tests for the PlaceOrder use case.

Uses in-memory fake repositories — no database.
"""

import pytest

from lessonshop.application.dto import OrderItemSpec
from lessonshop.application.place_order import PlaceOrderHandler
from lessonshop.domain.exceptions import (
    InsufficientCapacity,
    InvalidPayload,
    LessonNotFound,
    StoreUnavailable,
)
from lessonshop.domain.model.lesson import LessonPatch
from lessonshop.domain.model.order import MAX_LINE_ITEMS
from lessonshop.domain.model.value_objects import MAX_INT64, LessonId, Money
from tests.fakes import FakeLessonRepository, FakeOrderRepository, make_lesson


def _setup(*lessons):
    """Build handler with fake repos, optionally pre-loaded with lessons."""
    if not lessons:
        lessons = (
            make_lesson("Maths", price="100", spaces=5),
            make_lesson("Art", price="75.50", spaces=2),
        )
    order_repo = FakeOrderRepository()
    lesson_repo = FakeLessonRepository(list(lessons))
    handler = PlaceOrderHandler(order_repo, lesson_repo)
    return handler, order_repo, lesson_repo, lessons


class TestPlaceOrderHappyPath:

    def test_commits_order_with_recomputed_total(self):
        handler, order_repo, _, (maths, art) = _setup()
        dto = handler.handle("Alice", "0123", [
            OrderItemSpec(maths.id.value, 2),
            OrderItemSpec(art.id.value, 1),
        ])

        saved = order_repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.total_price == Money.of("275.50")
        assert dto.total_price == "$275.50"
        assert dto.item_count == 2

    def test_reserves_spaces(self):
        handler, _, lesson_repo, (maths, art) = _setup()
        handler.handle("Alice", "0123", [
            OrderItemSpec(maths.id.value, 2),
            OrderItemSpec(art.id.value, 2),
        ])
        assert lesson_repo.spaces_of(maths.id) == 3
        assert lesson_repo.spaces_of(art.id) == 0

    def test_items_keep_request_order(self):
        handler, order_repo, _, (maths, art) = _setup()
        dto = handler.handle("Alice", "0123", [
            OrderItemSpec(art.id.value, 1),
            OrderItemSpec(maths.id.value, 1),
        ])
        saved = order_repo.get_by_id(dto.id)
        assert [item.lesson_id for item in saved.items] == [art.id, maths.id]

    def test_returns_distinct_ids(self):
        handler, _, _, (maths, _) = _setup()
        first = handler.handle("Alice", "0123", [OrderItemSpec(maths.id.value, 1)])
        second = handler.handle("Bob", "0456", [OrderItemSpec(maths.id.value, 1)])
        assert first.id != second.id


class TestPlaceOrderPriceLock:

    def test_price_snapshot_at_creation(self):
        handler, order_repo, lesson_repo, (maths, _) = _setup()
        dto = handler.handle("Alice", "0123", [OrderItemSpec(maths.id.value, 1)])

        lesson_repo.apply_patch(maths.id, LessonPatch.parse({"price": 999}))

        saved = order_repo.get_by_id(dto.id)
        assert saved.items[0].price == Money.of("100")
        assert saved.total_price == Money.of("100")


class TestPlaceOrderValidation:

    @pytest.mark.parametrize(
        "name, phone, items",
        [
            ("", "0123", "valid"),
            ("   ", "0123", "valid"),
            ("Alice", "", "valid"),
            ("Alice", "0123", []),
        ],
    )
    def test_invalid_payload_never_touches_store(self, name, phone, items):
        handler, _, lesson_repo, (maths, _) = _setup()
        specs = [OrderItemSpec(maths.id.value, 1)] if items == "valid" else items

        with pytest.raises(InvalidPayload):
            handler.handle(name, phone, specs)

        assert lesson_repo.calls == []

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2", True])
    def test_bad_quantity_rejected(self, quantity):
        handler, _, lesson_repo, (maths, _) = _setup()
        with pytest.raises(InvalidPayload):
            handler.handle("Alice", "0123", [OrderItemSpec(maths.id.value, quantity)])
        assert lesson_repo.calls == []

    def test_quantity_beyond_int64_rejected(self):
        handler, _, lesson_repo, (maths, _) = _setup()
        with pytest.raises(InvalidPayload, match="cannot exceed"):
            handler.handle("Alice", "0123", [OrderItemSpec(maths.id.value, MAX_INT64 + 1)])
        assert lesson_repo.calls == []

    def test_too_many_items_rejected_before_store_access(self):
        handler, _, lesson_repo, (maths, _) = _setup()
        specs = [OrderItemSpec(maths.id.value, 1)] * (MAX_LINE_ITEMS + 1)

        with pytest.raises(InvalidPayload, match="Maximum"):
            handler.handle("Alice", "0123", specs)

        assert lesson_repo.calls == []

    def test_malformed_lesson_id_rejected(self):
        handler, _, lesson_repo, _ = _setup()
        with pytest.raises(InvalidPayload, match="Invalid lesson id"):
            handler.handle("Alice", "0123", [OrderItemSpec("not-an-id", 1)])
        assert lesson_repo.calls == []

    def test_unknown_lesson_rejected(self):
        handler, order_repo, lesson_repo, (maths, _) = _setup()
        with pytest.raises(LessonNotFound):
            handler.handle("Alice", "0123", [
                OrderItemSpec(maths.id.value, 1),
                OrderItemSpec(LessonId.generate().value, 1),
            ])
        assert lesson_repo.spaces_of(maths.id) == 5
        assert "reserve_spaces" not in lesson_repo.calls
        assert order_repo.list_all() == []


class TestPlaceOrderCapacity:

    def test_insufficient_capacity_rejected(self):
        handler, order_repo, lesson_repo, (_, art) = _setup()
        with pytest.raises(InsufficientCapacity):
            handler.handle("Alice", "0123", [OrderItemSpec(art.id.value, 3)])
        assert lesson_repo.spaces_of(art.id) == 2
        assert order_repo.list_all() == []

    def test_second_item_failure_leaves_first_lesson_unchanged(self):
        handler, order_repo, lesson_repo, (maths, art) = _setup()
        with pytest.raises(InsufficientCapacity):
            handler.handle("Alice", "0123", [
                OrderItemSpec(maths.id.value, 2),
                OrderItemSpec(art.id.value, 3),
            ])
        assert lesson_repo.spaces_of(maths.id) == 5
        assert lesson_repo.spaces_of(art.id) == 2
        assert order_repo.list_all() == []

    def test_persist_failure_rolls_back_reservations(self):
        handler, order_repo, lesson_repo, (maths, art) = _setup()
        order_repo.unavailable = True

        with pytest.raises(StoreUnavailable):
            handler.handle("Alice", "0123", [
                OrderItemSpec(maths.id.value, 2),
                OrderItemSpec(art.id.value, 1),
            ])

        assert lesson_repo.spaces_of(maths.id) == 5
        assert lesson_repo.spaces_of(art.id) == 2

    def test_unexpected_persist_error_rolls_back_reservations(self):
        handler, order_repo, lesson_repo, (maths, art) = _setup()

        def broken_add(order):
            raise RuntimeError("connection reset")

        order_repo.add = broken_add

        with pytest.raises(RuntimeError):
            handler.handle("Alice", "0123", [
                OrderItemSpec(maths.id.value, 2),
                OrderItemSpec(art.id.value, 1),
            ])

        assert lesson_repo.spaces_of(maths.id) == 5
        assert lesson_repo.spaces_of(art.id) == 2

    def test_store_failure_during_reservation_rolls_back(self):
        handler, _, lesson_repo, (maths, art) = _setup()
        lesson_repo.fail_reserve_for.add(art.id.value)

        with pytest.raises(StoreUnavailable):
            handler.handle("Alice", "0123", [
                OrderItemSpec(maths.id.value, 2),
                OrderItemSpec(art.id.value, 1),
            ])

        assert lesson_repo.spaces_of(maths.id) == 5
