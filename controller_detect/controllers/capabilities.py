"""Hardware capability detection from evdev capability groups."""

from typing import Iterable

from evdev import ecodes

from controller_detect.models import ControllerCapability

# BTN_TRIGGER_HAPPY1..4: the rear paddles on Elite pads
PADDLE_CODE_MIN = 0x2C0
PADDLE_CODE_MAX = 0x2C3
# All four paddles must be reported; fewer means unrelated auxiliary buttons
ELITE_PADDLE_COUNT = 4


def capability_codes(device) -> dict[int, list[int]]:
    """Return {event_type: [codes]} for a device.

    evdev reports EV_ABS entries as (code, AbsInfo) pairs; only the code is kept.
    """
    caps = device.capabilities()
    return {
        ev_type: [entry[0] if isinstance(entry, tuple) else entry for entry in entries]
        for ev_type, entries in caps.items()
    }


def has_force_feedback(codes: list[int]) -> bool:
    return len(codes) > 0


def has_elite_paddles(codes: Iterable[int]) -> bool:
    paddles = sum(1 for code in codes if PADDLE_CODE_MIN <= code <= PADDLE_CODE_MAX)
    return paddles >= ELITE_PADDLE_COUNT


def capabilities_from_codes(codes: dict[int, list[int]]) -> list[ControllerCapability]:
    """Button group checks first, then force feedback, so the order is stable."""
    found: list[ControllerCapability] = []
    if has_elite_paddles(codes.get(ecodes.EV_KEY, [])):
        found.append(ControllerCapability.ELITE_PADDLES)
    if has_force_feedback(codes.get(ecodes.EV_FF, [])):
        found.append(ControllerCapability.FORCE_FEEDBACK)
    return found


def get_capabilities(device) -> list[ControllerCapability]:
    return capabilities_from_codes(capability_codes(device))


def capabilities_to_strings(caps: Iterable[ControllerCapability]) -> list[str]:
    return [str(cap) for cap in caps]
