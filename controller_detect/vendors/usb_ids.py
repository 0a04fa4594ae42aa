"""Vendor names from the system usb.ids registry (loaded lazily, once)."""

import logging
import string
import threading
from functools import lru_cache
from pathlib import Path
from typing import Optional

from controller_detect import config
from controller_detect.vendors.source import VendorSource

logger = logging.getLogger(__name__)


def parse_usb_ids(lines) -> dict[int, str]:
    """Parse vendor entries out of usb.ids content.

    Format:
    # Comment lines start with #
    XXXX  Vendor Name
    <tab>YYYY  Product Name

    Only column-zero vendor lines are kept; product and interface lines
    (tab-indented) are skipped.
    """
    vendors: dict[int, str] = {}
    for line in lines:
        line = line.rstrip("\r\n")
        if not line or line.startswith("#"):
            continue
        if line[0].isspace() or len(line) <= 6:
            continue

        id_part, sep, name_part = line.partition("  ")
        # Class/language sections ("C 00  ...", "L 0001  ...") fail this check
        if not sep or len(id_part) != 4 or any(c not in string.hexdigits for c in id_part):
            continue
        name = name_part.strip()
        if name:
            vendors[int(id_part, 16)] = name
    return vendors


class UsbIdSource(VendorSource):
    """VendorSource backed by usb.ids.

    The file is read on the first lookup only. If no file is found or it
    cannot be read, the source stays disabled for the rest of the process.
    """

    def __init__(self, paths: Optional[list[str]] = None):
        self._paths = paths
        self._vendors: Optional[dict[int, str]] = None
        self._loaded = False
        self._lock = threading.Lock()

    @property
    def available(self) -> bool:
        self._ensure_loaded()
        return self._vendors is not None

    def lookup(self, vendor_id: int) -> Optional[str]:
        self._ensure_loaded()
        if self._vendors is None:
            return None
        return self._vendors.get(vendor_id)

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            self._vendors = self._load()
            self._loaded = True

    def _find_file(self) -> Optional[Path]:
        paths = self._paths if self._paths is not None else config.USB_IDS_PATHS
        for candidate in paths:
            p = Path(candidate)
            if p.is_file():
                return p
        return None

    def _load(self) -> Optional[dict[int, str]]:
        path = self._find_file()
        if path is None:
            logger.warning("[UsbIdSource] USB ID database not found in standard locations")
            return None

        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                vendors = parse_usb_ids(f)
        except OSError as e:
            logger.warning(f"[UsbIdSource] Error reading {path}: {e}")
            return None

        logger.info(f"[UsbIdSource] Loaded {len(vendors)} vendors from {path}")
        return vendors


@lru_cache(maxsize=None)
def default_usb_id_source() -> UsbIdSource:
    """Process-wide UsbIdSource so the registry is parsed at most once per run."""
    return UsbIdSource()
