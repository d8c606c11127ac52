"""
Time-based identifier generator (UUID version 1 layout)

[Binary layout - 16 bytes, as returned by UUID.bytes_le]
- bytes 0-7:  signed little-endian count of 100ns ticks since 1582-10-15 UTC
- byte 7:     high nibble overwritten with the version (1 = time based)
- bytes 8-9:  clock sequence, top 2 bits of byte 8 overwritten with the
              variant marker (& 0x3f | 0x80 -> bits "10")
- bytes 10-15: node

Reading bytes_le back as a uuid.UUID gives a regular RFC 4122 version 1
identifier, so str(identifier) is the usual 8-4-4-4-12 lowercase form.

[Defaults]
- Clock sequence and node are random bytes picked once per GuidGenerator
- The module functions share one process-wide generator, created on first
  use under a lock (NORDIC_IDS_NODE_NAME pins its node)
"""
import hashlib
import os
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from .guid_version import GuidVersion
from ..utils.config import Config
from ..utils.constants import (
    CLOCK_SEQUENCE_SIZE, GREGORIAN_CALENDAR_START, NODE_SIZE,
    TICKS_PER_MICROSECOND, TICKS_PER_SECOND,
)
from ..utils.logger import get_logger

log = get_logger(__name__)

BYTE_ARRAY_SIZE = 16
VARIANT_BYTE = 8
VARIANT_BYTE_MASK = 0x3f
VARIANT_BYTE_SHIFT = 0x80
VERSION_BYTE = 7
VERSION_BYTE_MASK = 0x0f
VERSION_BYTE_SHIFT = 4

# indexes within the identifier for certain boundaries
TIMESTAMP_BYTE = 0
CLOCK_SEQUENCE_BYTE = 8
NODE_BYTE = 10

IdentifierLike = Union[uuid.UUID, bytes, bytearray, str]


def _check_buffer(value, size: int, name: str) -> bytes:
    if value is None:
        log.warning(f"{name} is missing")
        raise ValueError(f"The {name} must be {size} bytes, got None.")
    if not isinstance(value, (bytes, bytearray)) or len(value) != size:
        log.warning(f"{name} has the wrong size: {value!r}")
        raise ValueError(f"The {name} must be {size} bytes.")
    return bytes(value)


def node_from_name(node_name: str) -> bytes:
    """
    6 byte node derived from a name (first bytes of its SHA-256 digest)

    Different names can collide.
    """
    return hashlib.sha256(node_name.encode('utf-8')).digest()[:NODE_SIZE]


def datetime_to_ticks(timestamp: datetime) -> int:
    """100ns ticks since the gregorian epoch (negative before it)"""
    if timestamp.tzinfo is None:
        # naive values are local time
        timestamp = timestamp.astimezone()
    delta = timestamp - GREGORIAN_CALENDAR_START
    return ((delta.days * 86400 + delta.seconds) * TICKS_PER_SECOND
            + delta.microseconds * TICKS_PER_MICROSECOND)


def ticks_to_datetime(ticks: int) -> datetime:
    return GREGORIAN_CALENDAR_START + timedelta(microseconds=ticks // TICKS_PER_MICROSECOND)


def build_time_based_guid(timestamp: datetime, clock_sequence: bytes, node: bytes) -> uuid.UUID:
    """
    Lay out a time-based identifier

    Deterministic: the same inputs always give the same identifier.

    Raises:
        ValueError: clock_sequence is not 2 bytes or node is not 6 bytes
    """
    clock_sequence = _check_buffer(clock_sequence, CLOCK_SEQUENCE_SIZE, 'clock_sequence')
    node = _check_buffer(node, NODE_SIZE, 'node')

    ticks = datetime_to_ticks(timestamp)

    guid = bytearray(BYTE_ARRAY_SIZE)
    guid[NODE_BYTE:NODE_BYTE + NODE_SIZE] = node
    guid[CLOCK_SEQUENCE_BYTE:CLOCK_SEQUENCE_BYTE + CLOCK_SEQUENCE_SIZE] = clock_sequence
    guid[TIMESTAMP_BYTE:TIMESTAMP_BYTE + 8] = ticks.to_bytes(8, 'little', signed=True)

    # set the variant
    guid[VARIANT_BYTE] &= VARIANT_BYTE_MASK
    guid[VARIANT_BYTE] |= VARIANT_BYTE_SHIFT

    # set the version
    guid[VERSION_BYTE] &= VERSION_BYTE_MASK
    guid[VERSION_BYTE] |= GuidVersion.TIME_BASED << VERSION_BYTE_SHIFT

    return uuid.UUID(bytes_le=bytes(guid))


class GuidGenerator:
    """Time-based identifier generator with its own clock sequence and node"""

    def __init__(self, clock_sequence: Optional[bytes] = None, node: Optional[bytes] = None):
        self._clock_sequence = (
            os.urandom(CLOCK_SEQUENCE_SIZE) if clock_sequence is None
            else _check_buffer(clock_sequence, CLOCK_SEQUENCE_SIZE, 'clock_sequence')
        )
        self._node = (
            os.urandom(NODE_SIZE) if node is None
            else _check_buffer(node, NODE_SIZE, 'node')
        )

    @property
    def clock_sequence(self) -> bytes:
        return self._clock_sequence

    @property
    def node(self) -> bytes:
        return self._node

    def set_node(self, node_name: str):
        """Derive the node from a host/process name"""
        self._node = node_from_name(node_name)

    def generate(self, timestamp: Optional[datetime] = None,
                 clock_sequence: Optional[bytes] = None,
                 node: Optional[bytes] = None) -> uuid.UUID:
        """
        New identifier

        Args:
            timestamp: point in time (default: now, UTC)
            clock_sequence: 2 bytes overriding the generator default
            node: 6 bytes overriding the generator default
        """
        if timestamp is None:
            timestamp = datetime.now(timezone.utc)
        return build_time_based_guid(
            timestamp,
            self._clock_sequence if clock_sequence is None else clock_sequence,
            self._node if node is None else node,
        )

    def generate_for_node(self, node_name: str, timestamp: Optional[datetime] = None) -> uuid.UUID:
        return self.generate(timestamp, node=node_from_name(node_name))

    def __repr__(self):
        return (f"GuidGenerator(clock_sequence={self._clock_sequence.hex()}, "
                f"node={self._node.hex()})")


# =========================================================
# process-wide default generator
# =========================================================

_default_generator: Optional[GuidGenerator] = None
_default_lock = threading.Lock()


def _create_default_generator() -> GuidGenerator:
    generator = GuidGenerator()
    if Config.NODE_NAME:
        generator.set_node(Config.NODE_NAME)
    log.info(f"default identifier generator initialised: {generator!r}")
    return generator


def get_default_generator() -> GuidGenerator:
    global _default_generator
    with _default_lock:
        if _default_generator is None:
            _default_generator = _create_default_generator()
        return _default_generator


def set_default_generator(generator: Optional[GuidGenerator]):
    """Replace the process-wide generator (None: recreate on next use)"""
    global _default_generator
    with _default_lock:
        _default_generator = generator


def set_default_node(node_name: str):
    global _default_generator
    with _default_lock:
        current = _default_generator or _create_default_generator()
        _default_generator = GuidGenerator(current.clock_sequence, node_from_name(node_name))


def set_default_clock_sequence(clock_sequence: bytes):
    global _default_generator
    with _default_lock:
        current = _default_generator or _create_default_generator()
        _default_generator = GuidGenerator(clock_sequence, current.node)


def generate_time_based_guid(timestamp: Optional[datetime] = None,
                             clock_sequence: Optional[bytes] = None,
                             node: Optional[bytes] = None) -> uuid.UUID:
    """
    New time-based identifier from the process-wide generator

    Example:
        >>> guid = generate_time_based_guid()
        >>> get_version(guid)
        <GuidVersion.TIME_BASED: 1>
    """
    return get_default_generator().generate(timestamp, clock_sequence, node)


def generate_time_based_guid_for_node(node_name: str,
                                      timestamp: Optional[datetime] = None) -> uuid.UUID:
    return get_default_generator().generate_for_node(node_name, timestamp)


# =========================================================
# decoding
# =========================================================

def parse_identifier(value: IdentifierLike) -> uuid.UUID:
    """
    Accepts a uuid.UUID, the 16 byte layout or the text form

    Raises:
        ValueError: malformed bytes or text
        TypeError: any other type
    """
    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, (bytes, bytearray)):
        if len(value) != BYTE_ARRAY_SIZE:
            raise ValueError(f"identifier must be {BYTE_ARRAY_SIZE} bytes, got {len(value)}")
        return uuid.UUID(bytes_le=bytes(value))
    if isinstance(value, str):
        return uuid.UUID(value)
    raise TypeError(f"unsupported identifier type: {type(value).__name__}")


def to_bytes(identifier: IdentifierLike) -> bytes:
    """16 byte binary layout"""
    return parse_identifier(identifier).bytes_le


def to_text(identifier: IdentifierLike) -> str:
    """8-4-4-4-12 lowercase hex"""
    return str(parse_identifier(identifier))


def get_version(identifier: IdentifierLike) -> Union[GuidVersion, int]:
    """Version nibble (raw int when it is not a known GuidVersion)"""
    version = (to_bytes(identifier)[VERSION_BYTE] & 0xFF) >> VERSION_BYTE_SHIFT
    try:
        return GuidVersion(version)
    except ValueError:
        return version


def get_timestamp(identifier: IdentifierLike) -> datetime:
    """
    Point in time encoded in a time-based identifier (UTC aware)

    Assumes version 1; other identifiers decode to a meaningless date.
    """
    guid = bytearray(to_bytes(identifier))

    # reverse the version
    guid[VERSION_BYTE] &= VERSION_BYTE_MASK
    guid[VERSION_BYTE] |= GuidVersion.TIME_BASED >> VERSION_BYTE_SHIFT

    ticks = int.from_bytes(guid[TIMESTAMP_BYTE:TIMESTAMP_BYTE + 8], 'little', signed=True)
    return ticks_to_datetime(ticks)


def get_utc_datetime(identifier: IdentifierLike) -> datetime:
    """Naive UTC datetime"""
    return get_timestamp(identifier).replace(tzinfo=None)


def get_local_datetime(identifier: IdentifierLike) -> datetime:
    return get_timestamp(identifier).astimezone()
