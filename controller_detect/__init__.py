"""Linux game controller detection and classification."""

__version__ = "0.1.0"

from controller_detect.controllers.manager import DeviceManager
from controller_detect.factory import new_device_manager
from controller_detect.models import (
    ControllerCapability,
    ControllerInfo,
    ControllerType,
    DetectionResult,
    DeviceError,
    ErrorType,
)

__all__ = [
    "DeviceManager",
    "new_device_manager",
    "ControllerCapability",
    "ControllerInfo",
    "ControllerType",
    "DetectionResult",
    "DeviceError",
    "ErrorType",
]
