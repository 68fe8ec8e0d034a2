"""Tests for shared single instances."""

import threading

from compositor.infrastructure.patterns import SingletonRegistry, get_singleton


class Counter:
    created = 0

    def __init__(self, start=0):
        Counter.created += 1
        self.value = start


class TestSingletonRegistry:

    def setup_method(self):
        Counter.created = 0

    def test_same_instance_every_time(self):
        first = get_singleton(Counter, start=5)
        second = get_singleton(Counter, start=99)

        assert first is second
        assert second.value == 5
        assert Counter.created == 1

    def test_registry_is_itself_a_singleton(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_register_replaces_instance(self):
        double = Counter(42)
        SingletonRegistry.get_instance().register(Counter, double)
        assert get_singleton(Counter) is double

    def test_reset_one_or_all(self):
        registry = SingletonRegistry.get_instance()
        counter = get_singleton(Counter)
        registry.reset(Counter)
        assert not registry.has(Counter)
        assert get_singleton(Counter) is not counter

        registry.reset()
        assert not registry.has(Counter)

    def test_concurrent_first_access_creates_one_instance(self):
        seen = []
        barrier = threading.Barrier(8)

        def fetch():
            barrier.wait()
            seen.append(get_singleton(Counter))

        threads = [threading.Thread(target=fetch) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(instance) for instance in seen}) == 1
        assert Counter.created == 1
