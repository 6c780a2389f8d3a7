"""Vehicle Factory - builds a vehicle variant chosen by a type tag.

Builders are held in a registry keyed by the tag, so new variants are added
by registration instead of another branch. A request whose tag is missing or
unknown is built by the factory's default variant rather than rejected.
"""

import threading
from typing import Any, Callable, Dict, List, Mapping, Optional

from composition_idioms.config.manager import get_config_manager
from composition_idioms.config.schemas import AppConfig
from composition_idioms.domain.core.exceptions import ConfigurationError, ValidationError
from composition_idioms.domain.vehicle.models import CarVehicle, TruckVehicle, VehicleBase
from composition_idioms.domain.vehicle.value_objects import DISCRIMINATOR_KEYS, VehicleType
from composition_idioms.infrastructure.logging.logger import get_logger

VehicleBuilder = Callable[[Mapping[str, Any]], VehicleBase]


class VehicleFactory:
    """
    Factory creating tagged vehicles from request records.

    Subclasses may set ``default_vehicle_type`` to change which variant
    handles unrecognized tags without touching the configuration.
    """

    default_vehicle_type: Optional[str] = None

    def __init__(self, default_type: Optional[str] = None, config: Optional[AppConfig] = None):
        """
        Initialize the factory with the built-in car and truck builders.

        Args:
            default_type: Variant used when a request's tag is missing or unknown.
                          Falls back to the class attribute, then to configuration.
            config: Application configuration; the process-wide one when omitted.

        Raises:
            ConfigurationError: If the default variant has no registered builder
        """
        self._config = config or get_config_manager().get_app_config()
        self._builders: Dict[str, VehicleBuilder] = {}
        self._registration_lock = threading.RLock()
        self._logger = get_logger(__name__)

        vehicle_defaults = self._config.vehicles
        self.register_vehicle(
            VehicleType.CAR.value,
            lambda options: CarVehicle.from_options(options, vehicle_defaults.car),
        )
        self.register_vehicle(
            VehicleType.TRUCK.value,
            lambda options: TruckVehicle.from_options(options, vehicle_defaults.truck),
        )

        self._default_type = (
            default_type
            or self.default_vehicle_type
            or self._config.factory.default_vehicle_type
        )
        if self._default_type not in self._builders:
            raise ConfigurationError(
                f"Default vehicle type '{self._default_type}' has no registered builder"
            )

    @property
    def default_type(self) -> str:
        return self._default_type

    def register_vehicle(self, vehicle_type: str, builder: VehicleBuilder) -> None:
        """
        Register a builder for a vehicle type tag.

        Args:
            vehicle_type: Tag matched exactly against a request's discriminator
            builder: Callable receiving the request's remaining fields

        Raises:
            ValueError: If vehicle_type is already registered
        """
        with self._registration_lock:
            if vehicle_type in self._builders:
                raise ValueError(f"Vehicle type '{vehicle_type}' is already registered")
            self._builders[vehicle_type] = builder
            self._logger.debug("Registered vehicle type", vehicle_type=vehicle_type)

    def is_registered(self, vehicle_type: str) -> bool:
        return vehicle_type in self._builders

    def get_registered_types(self) -> List[str]:
        return list(self._builders.keys())

    def create_vehicle(self, options: Mapping[str, Any]) -> VehicleBase:
        """
        Create a vehicle from a request record.

        Args:
            options: Discriminator under ``vehicle_type`` (or ``vehicleType``)
                     plus the variant's construction fields

        Returns:
            A new vehicle whose ``vehicle_type`` names the builder that made it
        """
        fields = dict(options)
        requested = None
        for key in DISCRIMINATOR_KEYS:
            if key in fields:
                value = fields.pop(key)
                if requested is None:
                    requested = value

        selected = requested if isinstance(requested, str) and requested in self._builders else None
        if selected is None:
            selected = self._default_type
            if requested is not None and self._config.factory.warn_on_fallback:
                self._logger.warning(
                    "Unknown vehicle type, using default",
                    requested_type=requested,
                    default_type=selected,
                )

        vehicle = self._builders[selected](fields)
        if getattr(vehicle, "vehicle_type", None) != selected:
            raise ValidationError(
                f"Builder for '{selected}' produced a vehicle tagged "
                f"'{getattr(vehicle, 'vehicle_type', None)}'"
            )

        self._logger.debug("Vehicle created", vehicle_type=selected)
        return vehicle


class TruckFactory(VehicleFactory):
    """Vehicle factory whose default variant is the truck."""

    default_vehicle_type = VehicleType.TRUCK.value
