"""Open a device node and turn it into a ControllerInfo record."""

import errno
import logging
from typing import Callable, Optional

from evdev import InputDevice

from controller_detect.controllers.capabilities import capabilities_from_codes, capability_codes
from controller_detect.controllers.signatures import identify_controller
from controller_detect.errors import (
    DeviceNotFoundError,
    DeviceOpenError,
    InvalidDeviceError,
    PermissionDeniedError,
)
from controller_detect.models import ControllerInfo

logger = logging.getLogger(__name__)

_NOT_FOUND_ERRNOS = (errno.ENOENT, errno.ENODEV, errno.ENXIO)
_PERMISSION_ERRNOS = (errno.EACCES, errno.EPERM)


class Controller:
    """An opened controller handle. Call close() when done with it."""

    def __init__(self, device, vendor_name: str):
        self._device = device
        self.vendor_name = vendor_name
        self.path = device.path

    @property
    def closed(self) -> bool:
        return self._device is None

    def get_info(self) -> ControllerInfo:
        """Read identifiers and capabilities from the open handle.

        Raises InvalidDeviceError if the handle cannot be queried.
        """
        if self._device is None:
            raise InvalidDeviceError(self.path, "device handle already closed")
        device = self._device
        try:
            vendor_id = device.info.vendor
            product_id = device.info.product
            codes = capability_codes(device)
        except OSError as e:
            raise InvalidDeviceError(self.path) from e

        return ControllerInfo(
            path=device.path,
            name=device.name,
            type=identify_controller(vendor_id, product_id),
            vendor_id=vendor_id,
            vendor_name=self.vendor_name,
            product_id=product_id,
            capabilities=tuple(capabilities_from_codes(codes)),
        )

    def close(self) -> None:
        """Release the handle. Safe to call twice; close errors are only logged."""
        device, self._device = self._device, None
        if device is None:
            return
        try:
            device.close()
        except OSError as e:
            logger.warning(f"[ControllerBuilder] Error closing {self.path}: {e}")

    def __enter__(self) -> "Controller":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class ControllerBuilder:
    def __init__(self, path: str, opener: Optional[Callable] = None):
        self.path = path
        self.vendor_name = ""
        self._opener = opener or InputDevice

    def with_vendor_name(self, name: str) -> "ControllerBuilder":
        self.vendor_name = name
        return self

    def build(self) -> Controller:
        """Open the device node.

        Raises DeviceNotFoundError, PermissionDeniedError, or DeviceOpenError.
        """
        try:
            device = self._opener(self.path)
        except OSError as e:
            raise self._open_error(e) from e
        return Controller(device, self.vendor_name or "Unknown")

    def _open_error(self, e: OSError) -> Exception:
        if isinstance(e, FileNotFoundError) or e.errno in _NOT_FOUND_ERRNOS:
            return DeviceNotFoundError(self.path)
        if isinstance(e, PermissionError) or e.errno in _PERMISSION_ERRNOS:
            return PermissionDeniedError(self.path)
        return DeviceOpenError(self.path, f"failed to open device ({e})")
