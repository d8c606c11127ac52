"""
Identifier version codes (high nibble of byte 7)
"""
from enum import IntEnum


class GuidVersion(IntEnum):
    """UUID version field"""

    TIME_BASED = 0x01
    RESERVED = 0x02
    NAME_BASED = 0x03
    RANDOM = 0x04
