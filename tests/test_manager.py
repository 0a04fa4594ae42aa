import errno
import os

import pytest
from evdev import ecodes

from controller_detect.controllers import manager as manager_module
from controller_detect.controllers.manager import DeviceManager, classify_error, list_input_devices
from controller_detect.errors import (
    DeviceNotFoundError,
    DeviceOpenError,
    EnumerationError,
    InvalidDeviceError,
    PermissionDeniedError,
)
from controller_detect.models import ControllerCapability, ControllerType, ErrorType
from controller_detect.vendors.resolver import VendorResolver
from fakes import FakeDevice, FakeOpener, make_caps


def _manager(devices, opener_entries=None):
    opener = FakeOpener(opener_entries if opener_entries is not None else {d.path: d for d in devices})
    return DeviceManager(resolver=VendorResolver(), enumerator=lambda: devices, opener=opener), opener


def test_empty_enumeration():
    mgr, _ = _manager([])
    result = mgr.list_controllers()
    assert result.controllers == []
    assert result.errors == []


def test_enumeration_failure_is_hard_failure():
    def broken():
        raise EnumerationError("failed to enumerate /dev/input devices")

    mgr = DeviceManager(resolver=VendorResolver(), enumerator=broken)
    with pytest.raises(EnumerationError):
        mgr.list_controllers()


def test_enumeration_oserror_becomes_enumeration_error():
    def broken():
        raise PermissionError(errno.EACCES, "Permission denied", "/dev/input")

    mgr = DeviceManager(resolver=VendorResolver(), enumerator=broken)
    with pytest.raises(EnumerationError):
        mgr.list_controllers()


def test_lists_controllers_in_enumeration_order():
    devices = [
        FakeDevice(path="/dev/input/event3", name="Sony Interactive Entertainment Wireless Controller",
                   vendor=0x054C, product=0x09CC, caps=make_caps(ff=[ecodes.FF_RUMBLE])),
        FakeDevice(path="/dev/input/event1", name="AT Translated Set 2 keyboard",
                   caps=make_caps(buttons=[ecodes.KEY_A], axes=[])),
        FakeDevice(path="/dev/input/event5", name="Xbox Wireless Controller", vendor=0x045E, product=0x0B13),
        FakeDevice(path="/dev/input/event9", name="Mystery Pad", vendor=0x9999, product=0x0001),
    ]
    mgr, opener = _manager(devices)
    result = mgr.list_controllers()

    assert [c.path for c in result.controllers] == ["/dev/input/event3", "/dev/input/event5", "/dev/input/event9"]
    ds4, xbox, generic = result.controllers
    assert ds4.type == ControllerType.DUALSHOCK4
    assert ds4.vendor_name == "Sony"
    assert ds4.capabilities == (ControllerCapability.FORCE_FEEDBACK,)
    assert xbox.type == ControllerType.XBOX_SERIES
    assert xbox.vendor_name == "Microsoft"
    assert generic.type == ControllerType.GENERIC
    assert generic.vendor_name == "Unknown (0x9999)"
    assert result.errors == []
    # rejected devices are never reopened
    assert "/dev/input/event1" not in opener.opened


def test_rejected_devices_produce_nothing():
    devices = [
        FakeDevice(path="/dev/input/event0", name="Power Button", caps=make_caps(axes=[])),
        FakeDevice(path="/dev/input/event2", name="Corsair RGB Audio Mixer"),
    ]
    mgr, _ = _manager(devices)
    result = mgr.list_controllers()
    assert result.controllers == []
    assert result.errors == []


def test_permission_error_is_collected_and_scan_continues():
    denied = FakeDevice(path="/dev/input/event4", name="Wireless Controller", vendor=0x054C, product=0x0CE6)
    ok = FakeDevice(path="/dev/input/event6", name="Xbox Wireless Controller", vendor=0x045E, product=0x0B13)
    mgr, _ = _manager([denied, ok], {
        denied.path: PermissionError(errno.EACCES, "Permission denied", denied.path),
        ok.path: ok,
    })
    result = mgr.list_controllers()

    assert len(result.errors) == 1
    error = result.errors[0]
    assert error.path == "/dev/input/event4"
    assert error.error_type == ErrorType.PERMISSION
    assert isinstance(error.cause, PermissionDeniedError)
    assert [c.path for c in result.controllers] == ["/dev/input/event6"]


def test_unplugged_between_enumeration_and_open():
    gone = FakeDevice(path="/dev/input/event8")
    mgr, _ = _manager([gone], {})
    result = mgr.list_controllers()
    assert result.controllers == []
    assert [e.error_type for e in result.errors] == [ErrorType.NOT_FOUND]


def test_unreadable_device_is_invalid():
    inspected = FakeDevice(path="/dev/input/event8")
    reopened = FakeDevice(path="/dev/input/event8", caps_error=OSError(errno.EIO, "Input/output error"))
    mgr, _ = _manager([inspected], {inspected.path: reopened})
    result = mgr.list_controllers()
    assert [e.error_type for e in result.errors] == [ErrorType.INVALID_DEVICE]
    assert reopened.close_calls == 1


def test_close_failure_does_not_affect_result():
    inspected = FakeDevice(path="/dev/input/event2", close_error=OSError(errno.EBADF, "Bad file descriptor"))
    reopened = FakeDevice(path="/dev/input/event2", close_error=OSError(errno.EBADF, "Bad file descriptor"))
    mgr, _ = _manager([inspected], {inspected.path: reopened})
    result = mgr.list_controllers()
    assert [c.path for c in result.controllers] == ["/dev/input/event2"]
    assert result.errors == []


def test_handles_are_released():
    devices = [FakeDevice(path="/dev/input/event1"), FakeDevice(path="/dev/input/event2", name="USB Keyboard")]
    reopened = FakeDevice(path="/dev/input/event1")
    mgr, _ = _manager(devices, {"/dev/input/event1": reopened})
    mgr.list_controllers()
    assert [d.close_calls for d in devices] == [1, 1]
    assert reopened.close_calls == 1


def test_each_scan_is_independent():
    mgr, _ = _manager([FakeDevice(path="/dev/input/event1")])
    first = mgr.list_controllers()
    second = mgr.list_controllers()
    assert first is not second
    assert len(first.controllers) == len(second.controllers) == 1


@pytest.mark.parametrize("exc, expected", [
    (PermissionDeniedError("/dev/input/event0"), ErrorType.PERMISSION),
    (DeviceNotFoundError("/dev/input/event0"), ErrorType.NOT_FOUND),
    (InvalidDeviceError("/dev/input/event0"), ErrorType.INVALID_DEVICE),
    (DeviceOpenError("/dev/input/event0"), ErrorType.UNKNOWN),
    (ValueError("bad"), ErrorType.UNKNOWN),
])
def test_classify_error(exc, expected):
    assert classify_error(exc) == expected


def test_list_input_devices_missing_dir(tmp_path):
    with pytest.raises(EnumerationError):
        list_input_devices(str(tmp_path / "missing"))


def test_list_input_devices_skips_unopenable(tmp_path, monkeypatch):
    paths = [str(tmp_path / "event0"), str(tmp_path / "event1")]
    good = FakeDevice(path=paths[1])
    monkeypatch.setattr(manager_module, "list_devices", lambda input_dir, writable=True: paths)
    monkeypatch.setattr(manager_module, "InputDevice", FakeOpener({paths[1]: good}))
    assert list_input_devices(str(tmp_path)) == [good]


def test_list_input_devices_includes_read_only_nodes(tmp_path, monkeypatch):
    import evdev.util

    node = tmp_path / "event0"
    node.touch()
    real_access = os.access

    def read_only(path, mode):
        if str(path) == str(node):
            return not mode & os.W_OK
        return real_access(path, mode)

    # a plain file stands in for the character device, readable but not writable
    monkeypatch.setattr(evdev.util.stat, "S_ISCHR", lambda mode: True)
    monkeypatch.setattr(evdev.util.os, "access", read_only)
    opener = FakeOpener({str(node): FakeDevice(path=str(node))})
    monkeypatch.setattr(manager_module, "InputDevice", opener)

    devices = list_input_devices(str(tmp_path))
    assert [d.path for d in devices] == [str(node)]
    assert opener.opened == [str(node)]
