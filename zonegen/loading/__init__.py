"""Zone record loader: JSON documents of already-parsed zone and rule records."""

from .driver import load_zoneinfo, read_target_zone_list
from .model import ZoneInfoIndex

__all__ = [
    "ZoneInfoIndex",
    "load_zoneinfo",
    "read_target_zone_list",
]
