import sys

from controller_detect.controllers.manager import DeviceManager
from controller_detect.errors import UnsupportedPlatformError


def new_device_manager(platform: str = sys.platform) -> DeviceManager:
    """Return the device manager for the running platform (Linux/evdev only)."""
    if platform.startswith("linux"):
        return DeviceManager()
    raise UnsupportedPlatformError(f"unsupported platform: {platform}")
