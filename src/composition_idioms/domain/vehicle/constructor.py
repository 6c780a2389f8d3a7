"""
Constructor idiom: each call yields a new, independently owned instance.

``OwnCopyCar`` builds its presentation routine inside ``__init__`` so every
instance carries a separate copy. ``Car`` defines the same routine once on
the class, where all instances share it.
"""
from typing import Any, Mapping, Optional

from composition_idioms.domain.core.exceptions import MissingFieldError
from composition_idioms.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


def _required(type_name: str, field_name: str, value: Any) -> Any:
    if value is None or value == "":
        raise MissingFieldError(type_name, field_name)
    return value


class _CarFields:
    """Field assignment shared by both car initializers."""

    def _set_fields(self, model: Any, year: Any, miles: Optional[int]) -> None:
        type_name = type(self).__name__
        self.model = _required(type_name, "model", model)
        self.year = _required(type_name, "year", year)
        self.miles = miles or 0
        logger.debug("Car constructed", car_class=type_name, model=self.model, year=self.year)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]):
        """Build an instance from a record of named inputs."""
        return cls(
            model=options.get("model"),
            year=options.get("year"),
            miles=options.get("miles"),
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(model={self.model!r}, year={self.year!r}, "
            f"miles={self.miles!r})"
        )


class OwnCopyCar(_CarFields):
    """Car whose ``to_string`` is created anew for every instance."""

    def __init__(self, model: Any = None, year: Any = None, miles: Optional[int] = None):
        self._set_fields(model, year, miles)

        def to_string() -> str:
            return f"{self.model} has done {self.miles} miles"

        self.to_string = to_string


class Car(_CarFields):
    """Car whose ``to_string`` lives once on the class."""

    def __init__(self, model: Any = None, year: Any = None, miles: Optional[int] = None):
        self._set_fields(model, year, miles)

    def to_string(self) -> str:
        return f"{self.model} has done {self.miles} miles"

    __str__ = to_string
