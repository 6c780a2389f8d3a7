"""Vehicles produced by the vehicle factory."""
from typing import Annotated, Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from composition_idioms.config.schemas import CarDefaultsConfig, TruckDefaultsConfig
from composition_idioms.domain.core.exceptions import ValidationError


class VehicleBase(BaseModel):
    """Base class for factory products."""
    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
    )

    vehicle_type: str

    @staticmethod
    def _pick(options: Mapping[str, Any], *keys: str) -> Any:
        # First truthy value under any of the keys; falsy means "use the default"
        for key in keys:
            value = options.get(key)
            if value:
                return value
        return None


class CarVehicle(VehicleBase):
    """Car variant."""

    vehicle_type: Literal["car"] = "car"
    doors: int = 4
    state: str = "brand new"
    color: str = "silver"

    @classmethod
    def from_options(
        cls,
        options: Mapping[str, Any],
        defaults: Optional[CarDefaultsConfig] = None,
    ) -> "CarVehicle":
        defaults = defaults or CarDefaultsConfig()
        try:
            return cls(
                doors=cls._pick(options, "doors") or defaults.doors,
                state=cls._pick(options, "state") or defaults.state,
                color=cls._pick(options, "color") or defaults.color,
            )
        except PydanticValidationError as e:
            raise ValidationError("Invalid car options", e.errors()) from e


class TruckVehicle(VehicleBase):
    """Truck variant."""

    vehicle_type: Literal["truck"] = "truck"
    state: str = "used"
    wheel_size: str = Field("large", alias="wheelSize")
    color: str = "blue"

    @classmethod
    def from_options(
        cls,
        options: Mapping[str, Any],
        defaults: Optional[TruckDefaultsConfig] = None,
    ) -> "TruckVehicle":
        defaults = defaults or TruckDefaultsConfig()
        try:
            return cls(
                state=cls._pick(options, "state") or defaults.state,
                wheel_size=cls._pick(options, "wheel_size", "wheelSize") or defaults.wheel_size,
                color=cls._pick(options, "color") or defaults.color,
            )
        except PydanticValidationError as e:
            raise ValidationError("Invalid truck options", e.errors()) from e


Vehicle = Annotated[Union[CarVehicle, TruckVehicle], Field(discriminator="vehicle_type")]

_vehicle_adapter = TypeAdapter(Vehicle)


def parse_vehicle(data: Mapping[str, Any]) -> Union[CarVehicle, TruckVehicle]:
    """Rebuild a vehicle from its dumped form, selecting the variant by its tag."""
    try:
        return _vehicle_adapter.validate_python(dict(data))
    except PydanticValidationError as e:
        raise ValidationError("Invalid vehicle data", e.errors()) from e
