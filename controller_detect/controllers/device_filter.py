"""Decide whether an evdev device is a game controller."""

import logging

from evdev import ecodes

from controller_detect.controllers.capabilities import capability_codes

logger = logging.getLogger(__name__)

# Gamepad and joystick button codes:
# BTN_JOYSTICK..0x12f (288-303) and BTN_SOUTH/A..0x13f (304-319)
JOYSTICK_BTN_MIN = 0x120
JOYSTICK_BTN_MAX = 0x12F
GAMEPAD_BTN_MIN = 0x130
GAMEPAD_BTN_MAX = 0x13F

# Analog stick axes
STICK_AXES = frozenset({ecodes.ABS_X, ecodes.ABS_Y, ecodes.ABS_RX, ecodes.ABS_RY})

# Multi-function peripherals (audio, RGB, keyboards with a volume knob...)
# sometimes report button and axis capabilities without being controllers.
EXCLUDED_NAME_KEYWORDS = (
    "keyboard", "mouse", "touchpad",
    "power button", "sleep button",
    "hdmi", "audio", "speaker", "headphone", "microphone",
    "line out", "line in",
    "led", "lamplight", "rgb",
    "system control", "consumer control",
)


def is_gamepad_button(code: int) -> bool:
    return GAMEPAD_BTN_MIN <= code <= GAMEPAD_BTN_MAX or JOYSTICK_BTN_MIN <= code <= JOYSTICK_BTN_MAX


def is_excluded_by_name(name: str) -> bool:
    name_lower = (name or "").lower()
    return any(keyword in name_lower for keyword in EXCLUDED_NAME_KEYWORDS)


def rejection_reason(device) -> str:
    """Return why a device is not a game controller, or "" if it is one."""
    try:
        codes = capability_codes(device)
    except OSError as e:
        return f"capabilities unreadable ({e})"

    buttons = codes.get(ecodes.EV_KEY, [])
    axes = codes.get(ecodes.EV_ABS, [])
    if not buttons or not axes:
        return "missing button or axis capabilities"

    if not any(is_gamepad_button(code) for code in buttons):
        return "no gamepad/joystick buttons"

    if not any(code in STICK_AXES for code in axes):
        return "no analog stick axes"

    if is_excluded_by_name(device.name):
        return "excluded by name"

    return ""


def is_game_controller(device) -> bool:
    reason = rejection_reason(device)
    if reason:
        logger.debug(f"[DeviceFilter] Rejected {device.path} ({device.name!r}): {reason}")
        return False
    return True
