"""Tests for the singleton registry and the shared resource accessor."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

from composition_idioms.infrastructure.patterns import (
    SharedResource,
    SingletonRegistry,
    get_shared_resource,
    get_singleton,
)


class SlowResource:
    """Resource whose construction is slow enough to expose races."""

    constructions = 0
    _count_lock = threading.Lock()

    def __init__(self, label="default"):
        time.sleep(0.01)
        with SlowResource._count_lock:
            SlowResource.constructions += 1
        self.label = label


class TestSharedResource:
    """Test the shared resource accessor."""

    def test_repeated_requests_return_same_instance(self):
        first = get_shared_resource()
        second = get_shared_resource()

        assert first is second
        assert first.handle_id == second.handle_id
        assert first.get_random_number() == second.get_random_number()

    def test_public_surface(self):
        resource = get_shared_resource()
        assert resource.public_method() == "The public can see me!"
        assert resource.public_property == "I am also public"

    def test_state_transition(self):
        registry = SingletonRegistry.get_instance()
        assert not registry.has(SharedResource)

        get_shared_resource()

        assert registry.has(SharedResource)

    def test_direct_construction_is_a_different_handle(self):
        assert SharedResource() is not get_shared_resource()

    def test_reset_creates_new_instance(self):
        first = get_shared_resource()
        SingletonRegistry.get_instance().reset()
        assert get_shared_resource() is not first


class TestSingletonRegistry:
    """Test the singleton registry."""

    def setup_method(self):
        SlowResource.constructions = 0

    def test_registry_is_itself_a_singleton(self):
        assert SingletonRegistry.get_instance() is SingletonRegistry.get_instance()

    def test_arguments_only_used_on_first_request(self):
        first = get_singleton(SlowResource, label="first")
        second = get_singleton(SlowResource, label="second")

        assert first is second
        assert second.label == "first"
        assert SlowResource.constructions == 1

    def test_concurrent_first_access_constructs_once(self):
        start = threading.Barrier(16)

        def request():
            start.wait()
            return get_singleton(SlowResource)

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda _: request(), range(16)))

        assert SlowResource.constructions == 1
        assert all(result is results[0] for result in results)
