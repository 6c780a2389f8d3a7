# src/composition_idioms/domain/vehicle/value_objects.py
from enum import Enum

class VehicleType(str, Enum):
    """Variants the vehicle factory builds out of the box."""
    CAR = "car"
    TRUCK = "truck"

# Request keys that carry the discriminator, in lookup order
DISCRIMINATOR_KEYS = ("vehicle_type", "vehicleType")
