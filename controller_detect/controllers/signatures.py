"""Known controller models by USB vendor/product ID."""

from typing import NamedTuple

from controller_detect.models import ControllerType


class ControllerSignature(NamedTuple):
    vendor_id: int
    product_id: int
    controller_type: ControllerType


KNOWN_CONTROLLERS: tuple[ControllerSignature, ...] = (
    # Xbox One
    ControllerSignature(0x045E, 0x02DD, ControllerType.XBOX_ONE),     # Xbox One Controller (2013, firmware 2015)
    ControllerSignature(0x045E, 0x02EA, ControllerType.XBOX_ONE),     # Xbox One S (wireless adapter)
    ControllerSignature(0x045E, 0x02FD, ControllerType.XBOX_ONE),     # Xbox One S (Bluetooth)
    # Xbox Series
    ControllerSignature(0x045E, 0x0B12, ControllerType.XBOX_SERIES),  # Xbox Series X/S (USB)
    ControllerSignature(0x045E, 0x0B13, ControllerType.XBOX_SERIES),  # Xbox Series X/S (Bluetooth)
    # Xbox Elite
    ControllerSignature(0x045E, 0x02E3, ControllerType.XBOX_ELITE),   # Elite Series 1
    ControllerSignature(0x045E, 0x0B00, ControllerType.XBOX_ELITE),   # Elite Series 2
    # PlayStation
    ControllerSignature(0x054C, 0x05C4, ControllerType.DUALSHOCK4),   # DualShock 4 gen 1
    ControllerSignature(0x054C, 0x09CC, ControllerType.DUALSHOCK4),   # DualShock 4 gen 2
    ControllerSignature(0x054C, 0x0CE6, ControllerType.DUALSENSE),    # DualSense (PS5)
)


def identify_controller(vendor_id: int, product_id: int) -> ControllerType:
    """Return the model for a vendor/product pair, or GENERIC if it is not listed."""
    for sig in KNOWN_CONTROLLERS:
        if sig.vendor_id == vendor_id and sig.product_id == product_id:
            return sig.controller_type
    return ControllerType.GENERIC
