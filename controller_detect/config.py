import os

# Directory holding the evdev character devices (event0, event1, ...)
INPUT_DIR = os.environ.get("CONTROLLER_DETECT_INPUT_DIR", "/dev/input")

# Standard locations of the USB ID registry, searched in order; first hit wins.
# CONTROLLER_DETECT_USB_IDS (one path, or several joined by os.pathsep) is tried first.
DEFAULT_USB_IDS_PATHS = [
    "/usr/share/hwdata/usb.ids",
    "/var/lib/usbutils/usb.ids",
    "/usr/share/misc/usb.ids",
]
_usb_ids_override = os.environ.get("CONTROLLER_DETECT_USB_IDS", "")
USB_IDS_PATHS = [p for p in _usb_ids_override.split(os.pathsep) if p] + DEFAULT_USB_IDS_PATHS

# Root log level for the command-line tool (-v forces DEBUG)
LOG_LEVEL = os.environ.get("CONTROLLER_DETECT_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
