"""Vehicles: the constructor idiom and the tag-driven vehicle factory."""

from .constructor import Car, OwnCopyCar
from .factory import TruckFactory, VehicleBuilder, VehicleFactory
from .models import CarVehicle, TruckVehicle, Vehicle, VehicleBase, parse_vehicle
from .value_objects import VehicleType

__all__ = [
    "Car",
    "CarVehicle",
    "OwnCopyCar",
    "TruckFactory",
    "TruckVehicle",
    "Vehicle",
    "VehicleBase",
    "VehicleBuilder",
    "VehicleFactory",
    "VehicleType",
    "parse_vehicle",
]
