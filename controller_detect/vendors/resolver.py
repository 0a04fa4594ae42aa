"""Vendor ID -> display name, resolved through a fixed chain of sources."""

import logging
from typing import Optional, Sequence

from controller_detect.vendors.source import VendorSource

logger = logging.getLogger(__name__)

# Well-known gaming peripheral vendors. Checked before any other source.
KNOWN_VENDORS: dict[int, str] = {
    0x045E: "Microsoft",
    0x054C: "Sony",
    0x057E: "Nintendo",
    0x046D: "Logitech",
    0x0E6F: "Logic3",
    0x0F0D: "Hori",
    0x1532: "Razer",
    0x2DC8: "8BitDo",
    0x28DE: "Valve",
}


def known_vendors() -> dict[int, str]:
    return dict(KNOWN_VENDORS)


def fallback_vendor_name(vendor_id: int) -> str:
    return f"Unknown (0x{vendor_id:04x})"


class VendorResolver:
    """Resolves vendor names: hardcoded table, then each source in order, then a fallback.

    Never raises; a failing source is logged and skipped.
    """

    def __init__(self, sources: Optional[Sequence[VendorSource]] = None):
        self._hardcoded = known_vendors()
        self._sources: tuple[VendorSource, ...] = tuple(sources or ())

    @property
    def sources(self) -> tuple[VendorSource, ...]:
        return self._sources

    def get_vendor_name(self, vendor_id: int) -> str:
        name = self._hardcoded.get(vendor_id)
        if name:
            return name

        for source in self._sources:
            try:
                name = source.lookup(vendor_id)
            except Exception as e:
                logger.warning(f"[VendorResolver] {type(source).__name__} failed for 0x{vendor_id:04x}: {e}")
                continue
            if name:
                return name

        return fallback_vendor_name(vendor_id)
