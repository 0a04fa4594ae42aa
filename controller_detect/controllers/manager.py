"""Controller discovery: enumerate evdev nodes, filter, classify."""

import logging
import os
from typing import Callable, Optional

from evdev import InputDevice, list_devices

from controller_detect import config
from controller_detect.controllers.builder import ControllerBuilder
from controller_detect.controllers.device_filter import is_game_controller
from controller_detect.errors import (
    DeviceNotFoundError,
    EnumerationError,
    InvalidDeviceError,
    PermissionDeniedError,
)
from controller_detect.models import DetectionResult, DeviceError, ErrorType
from controller_detect.vendors.resolver import VendorResolver
from controller_detect.vendors.usb_ids import default_usb_id_source

logger = logging.getLogger(__name__)


def list_input_devices(input_dir: Optional[str] = None) -> list:
    """Open every evdev node under input_dir for inspection.

    Raises EnumerationError if the directory itself cannot be read. Nodes
    that cannot be opened are skipped.
    """
    input_dir = input_dir or config.INPUT_DIR
    try:
        os.listdir(input_dir)
    except OSError as e:
        raise EnumerationError(f"failed to enumerate {input_dir} devices: {e}") from e

    devices = []
    # Read-only nodes still identify the device; writability is not required
    for path in list_devices(input_dir, writable=False):
        try:
            devices.append(InputDevice(path))
        except OSError as e:
            logger.debug(f"[DeviceManager] Skipping {path}: {e}")
    return devices


def classify_error(err: BaseException) -> ErrorType:
    if isinstance(err, PermissionDeniedError):
        return ErrorType.PERMISSION
    if isinstance(err, DeviceNotFoundError):
        return ErrorType.NOT_FOUND
    if isinstance(err, InvalidDeviceError):
        return ErrorType.INVALID_DEVICE
    return ErrorType.UNKNOWN


class DeviceManager:
    """Lists connected game controllers.

    enumerator returns raw devices (evdev.InputDevice or equivalent) opened
    for inspection; opener opens a path for the final read. Both default to
    python-evdev.
    """

    def __init__(
        self,
        resolver: Optional[VendorResolver] = None,
        enumerator: Optional[Callable[[], list]] = None,
        opener: Optional[Callable] = None,
    ):
        self.resolver = resolver or VendorResolver([default_usb_id_source()])
        self._enumerator = enumerator or list_input_devices
        self._opener = opener

    def list_controllers(self) -> DetectionResult:
        """Scan every input device once.

        Per-device failures end up in result.errors. Raises EnumerationError
        only if the devices cannot be listed at all.
        """
        try:
            devices = self._enumerator()
        except EnumerationError:
            raise
        except OSError as e:
            raise EnumerationError(f"failed to enumerate input devices: {e}") from e

        result = DetectionResult()
        for device in devices:
            try:
                if is_game_controller(device):
                    self._add_controller(result, device)
            finally:
                _release(device)

        logger.info(
            f"[DeviceManager] Scanned {len(devices)} device(s): "
            f"{len(result.controllers)} controller(s), {len(result.errors)} error(s)"
        )
        return result

    def _add_controller(self, result: DetectionResult, device) -> None:
        path = device.path
        try:
            vendor_name = self.resolver.get_vendor_name(device.info.vendor)
            controller = ControllerBuilder(path, opener=self._opener).with_vendor_name(vendor_name).build()
            try:
                info = controller.get_info()
            finally:
                controller.close()
        except Exception as e:
            error = DeviceError(path=path, error_type=classify_error(e), cause=e)
            logger.warning(f"[DeviceManager] {error}")
            result.errors.append(error)
            return

        result.controllers.append(info)


def _release(device) -> None:
    close = getattr(device, "close", None)
    if close is None:
        return
    try:
        close()
    except OSError as e:
        logger.debug(f"[DeviceManager] Error closing {device.path}: {e}")
