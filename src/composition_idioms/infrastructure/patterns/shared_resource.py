"""The process-wide shared resource handle."""

import random
import uuid
from datetime import datetime, timezone

from composition_idioms.infrastructure.logging.logger import get_logger
from composition_idioms.infrastructure.patterns.singleton_access import get_singleton


class SharedResource:
    """
    Opaque handle of which exactly one exists once first requested.

    Obtain it through ``get_shared_resource``; constructing it directly
    bypasses the registry and yields an unrelated handle.
    """

    public_property = "I am also public"

    def __init__(self):
        self._handle_id = uuid.uuid4().hex
        self._created_at = datetime.now(timezone.utc)
        self._random_number = random.random()
        get_logger(__name__).debug("Shared resource created", handle_id=self._handle_id)

    @property
    def handle_id(self) -> str:
        return self._handle_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def get_random_number(self) -> float:
        """Number drawn once at construction."""
        return self._random_number

    def public_method(self) -> str:
        return "The public can see me!"

    def __repr__(self) -> str:
        return f"SharedResource(handle_id={self._handle_id!r})"


def get_shared_resource() -> SharedResource:
    """Return the shared resource, creating it on the first request."""
    return get_singleton(SharedResource)
