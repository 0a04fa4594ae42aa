"""Abstract base for vendor name lookups."""

from abc import ABC, abstractmethod
from typing import Optional


class VendorSource(ABC):
    @abstractmethod
    def lookup(self, vendor_id: int) -> Optional[str]:
        """
        Look up a vendor name.

        Args:
            vendor_id: 16-bit USB vendor ID

        Returns:
            The vendor name, or None if this source does not know it
        """
        ...
