"""Registry holding one instance per class for the process lifetime."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar

from composition_idioms.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Process-wide store of singleton instances keyed by class.

    Each class moves from uninitialized to initialized on its first ``get``
    and is constructed exactly once, even when the first requests arrive
    concurrently. The registry is itself a lazily created singleton.
    """

    _instance: Optional["SingletonRegistry"] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize singleton registry."""
        self._instances: Dict[Type[Any], Any] = {}
        self._instance_lock = threading.RLock()
        self._logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get singleton instance of the registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of ``singleton_class``, constructing it on first use.

        Args:
            singleton_class: The class to get an instance of
            *args: Constructor arguments, only used on the constructing call
            **kwargs: Constructor keyword arguments, only used on the constructing call

        Returns:
            The one instance of ``singleton_class``
        """
        instance = self._instances.get(singleton_class)
        if instance is not None:
            return instance

        with self._instance_lock:
            instance = self._instances.get(singleton_class)
            if instance is None:
                instance = singleton_class(*args, **kwargs)
                self._instances[singleton_class] = instance
                self._logger.debug(
                    "Created singleton instance",
                    singleton_class=singleton_class.__name__,
                )
        return instance

    def has(self, singleton_class: Type[Any]) -> bool:
        """Check whether ``singleton_class`` has been initialized."""
        return singleton_class in self._instances

    def reset(self) -> None:
        """Drop every held instance. Intended for tests."""
        with self._instance_lock:
            self._instances.clear()
            self._logger.debug("Singleton registry reset")
