"""
Shared constants
"""
from datetime import datetime, timezone

# =========================================================
# Tax / VAT identifiers
# =========================================================

# countries with a checksum validator
SUPPORTED_COUNTRIES = ('DK', 'NO', 'SE')

# sanitized lengths
DK_TAX_ID_LENGTH = 8
NO_TAX_ID_LENGTH = 9
SE_PERSONAL_ID_LENGTH = 6
SE_ORG_NUMBER_LENGTH = 10
SE_VAT_NUMBER_LENGTH = 12

# EU VAT suffix on Swedish organisation numbers (De två sista siffrorna är alltid 01)
SE_VAT_SUFFIX = '01'

# literals stripped from VAT numbers before validation
VAT_STRIP_TOKENS = (' ', '-', '_', 'DK', 'NO', 'SE', 'MVA')

# numeric guard, values must fit a signed 64-bit integer
INT64_MAX = 2 ** 63 - 1

# =========================================================
# EAN-13
# =========================================================

EAN13_PAYLOAD_LENGTH = 12
EAN13_LENGTH = EAN13_PAYLOAD_LENGTH + 1

# =========================================================
# Time-based identifiers
# =========================================================

# gregorian 0-time, start of the 100ns tick count
GREGORIAN_CALENDAR_START = datetime(1582, 10, 15, tzinfo=timezone.utc)

# ticks per second (100ns units)
TICKS_PER_SECOND = 10_000_000
TICKS_PER_MICROSECOND = 10

CLOCK_SEQUENCE_SIZE = 2
NODE_SIZE = 6
