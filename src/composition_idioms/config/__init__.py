"""Configuration package with clean public API."""

# Schemas first: the logging layer imports them while the manager loads
from .schemas import (
    AppConfig,
    CarDefaultsConfig,
    FactoryConfig,
    LoggingConfig,
    TruckDefaultsConfig,
    VehicleConfig,
)
from .manager import ConfigurationManager, get_config_manager

__all__ = [
    'AppConfig',
    'CarDefaultsConfig',
    'FactoryConfig',
    'LoggingConfig',
    'TruckDefaultsConfig',
    'VehicleConfig',
    'ConfigurationManager',
    'get_config_manager',
]
