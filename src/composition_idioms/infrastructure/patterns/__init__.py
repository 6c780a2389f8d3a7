"""Infrastructure patterns package."""

from composition_idioms.infrastructure.patterns.singleton_access import get_singleton
from composition_idioms.infrastructure.patterns.singleton_registry import SingletonRegistry
from composition_idioms.infrastructure.patterns.shared_resource import (
    SharedResource,
    get_shared_resource,
)

__all__ = ["SharedResource", "SingletonRegistry", "get_shared_resource", "get_singleton"]
