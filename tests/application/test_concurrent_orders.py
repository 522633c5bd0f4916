"""Concurrency tests: racing orders for the last remaining spaces."""

from concurrent.futures import ThreadPoolExecutor
from threading import Barrier

from lessonshop.application.dto import OrderItemSpec
from lessonshop.application.place_order import PlaceOrderHandler
from lessonshop.domain.exceptions import InsufficientCapacity
from tests.fakes import FakeLessonRepository, FakeOrderRepository, make_lesson


def _race(handler, specs, workers):
    barrier = Barrier(workers)

    def attempt(i):
        barrier.wait()
        try:
            return handler.handle(f"Customer {i}", "0123", specs)
        except InsufficientCapacity as exc:
            return exc

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(attempt, range(workers)))


class TestConcurrentOrders:

    def test_last_space_sold_exactly_once(self):
        lesson = make_lesson(spaces=1)
        lesson_repo = FakeLessonRepository([lesson])
        order_repo = FakeOrderRepository()
        handler = PlaceOrderHandler(order_repo, lesson_repo)

        results = _race(handler, [OrderItemSpec(lesson.id.value, 1)], workers=2)

        rejected = [r for r in results if isinstance(r, InsufficientCapacity)]
        assert len(rejected) == 1
        assert len(order_repo.list_all()) == 1
        assert lesson_repo.spaces_of(lesson.id) == 0

    def test_many_buyers_never_oversell(self):
        lesson = make_lesson(spaces=5)
        lesson_repo = FakeLessonRepository([lesson])
        order_repo = FakeOrderRepository()
        handler = PlaceOrderHandler(order_repo, lesson_repo)

        results = _race(handler, [OrderItemSpec(lesson.id.value, 2)], workers=8)

        committed = [r for r in results if not isinstance(r, InsufficientCapacity)]
        assert len(committed) == 2
        assert lesson_repo.spaces_of(lesson.id) == 1
