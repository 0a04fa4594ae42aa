from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ControllerType(str, Enum):
    UNKNOWN = "Unknown"
    XBOX_ONE = "Xbox One"
    XBOX_SERIES = "Xbox Series X/S"
    XBOX_ELITE = "Xbox Elite"
    DUALSHOCK4 = "DualShock 4"
    DUALSENSE = "DualSense"
    GENERIC = "Generic"

    def __str__(self) -> str:
        return self.value


class ControllerCapability(str, Enum):
    FORCE_FEEDBACK = "Force Feedback"
    ELITE_PADDLES = "Elite Paddles"

    def __str__(self) -> str:
        return self.value


class ErrorType(str, Enum):
    PERMISSION = "Permission"
    NOT_FOUND = "NotFound"
    INVALID_DEVICE = "InvalidDevice"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


class ControllerInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    name: str
    type: ControllerType = ControllerType.GENERIC
    vendor_id: int
    vendor_name: str
    product_id: int
    capabilities: tuple[ControllerCapability, ...] = ()


class DeviceError(BaseModel):
    """A single device that passed the filter but could not be classified."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    path: str
    error_type: ErrorType = ErrorType.UNKNOWN
    cause: Optional[Exception] = Field(default=None, exclude=True)

    @computed_field
    @property
    def message(self) -> str:
        return str(self.cause) if self.cause is not None else ""

    def __str__(self) -> str:
        return f"{self.error_type} error at {self.path}: {self.message}"


class DetectionResult(BaseModel):
    controllers: list[ControllerInfo] = []
    errors: list[DeviceError] = []
