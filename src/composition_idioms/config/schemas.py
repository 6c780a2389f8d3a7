"""Configuration schemas."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMATS = ("console", "json")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Root log level")
    format: str = Field("console", description="Renderer: 'console' or 'json'")
    file_path: Optional[str] = Field(None, description="Optional rotating log file")
    max_size_mb: int = Field(10, description="Rotate the log file at this size")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        v = v.upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(_LOG_LEVELS)}")
        return v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate renderer name."""
        v = v.lower()
        if v not in _LOG_FORMATS:
            raise ValueError(f"Log format must be one of {', '.join(_LOG_FORMATS)}")
        return v


class CarDefaultsConfig(BaseModel):
    """Values substituted when a car request omits a field."""

    doors: int = Field(4, description="Default number of doors")
    state: str = Field("brand new", description="Default condition")
    color: str = Field("silver", description="Default color")


class TruckDefaultsConfig(BaseModel):
    """Values substituted when a truck request omits a field."""

    state: str = Field("used", description="Default condition")
    wheel_size: str = Field("large", description="Default wheel size")
    color: str = Field("blue", description="Default color")


class VehicleConfig(BaseModel):
    """Per-variant construction defaults."""

    car: CarDefaultsConfig = Field(default_factory=lambda: CarDefaultsConfig())
    truck: TruckDefaultsConfig = Field(default_factory=lambda: TruckDefaultsConfig())


class FactoryConfig(BaseModel):
    """Vehicle factory configuration."""

    default_vehicle_type: str = Field("car", description="Variant used for unknown tags")
    warn_on_fallback: bool = Field(True, description="Log a warning on fallback")

    @field_validator("default_vehicle_type")
    @classmethod
    def validate_default_vehicle_type(cls, v: str) -> str:
        if not v:
            raise ValueError("Default vehicle type must not be empty")
        return v


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    vehicles: VehicleConfig = Field(default_factory=lambda: VehicleConfig())
    factory: FactoryConfig = Field(default_factory=lambda: FactoryConfig())

    @model_validator(mode="after")
    def ensure_logging_file_settings(self) -> "AppConfig":
        """Rotation limits only matter when a file is configured."""
        if self.logging.file_path and self.logging.max_size_mb < 1:
            raise ValueError("logging.max_size_mb must be at least 1")
        return self
