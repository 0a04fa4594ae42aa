"""Failure types raised while enumerating and opening input devices."""


class DeviceBuildError(Exception):
    """Base class for a single device that could not be opened or read.

    The underlying OSError (if any) is chained as ``__cause__``.
    """

    default_message = "failed to build controller"

    def __init__(self, path: str, message: str = ""):
        self.path = path
        super().__init__(f"{message or self.default_message}: {path}")


class PermissionDeniedError(DeviceBuildError):
    default_message = "permission denied accessing device"


class DeviceNotFoundError(DeviceBuildError):
    default_message = "device not found or disconnected"


class InvalidDeviceError(DeviceBuildError):
    default_message = "device is not a valid controller"


class DeviceOpenError(DeviceBuildError):
    default_message = "failed to open device"


class EnumerationError(Exception):
    """The input subsystem itself could not be listed. Aborts the whole scan."""


class UnsupportedPlatformError(Exception):
    pass
