"""
Validator base class

[Role]
- Shared input sanitizing (strip everything that is not a digit)
- Shared numeric guard (ASCII digits only, value fits a signed 64-bit int)
- Common interface: validate(value, context) -> bool, never raises
"""
import re
from abc import ABC, abstractmethod
from typing import Optional

from ..utils.constants import INT64_MAX, SUPPORTED_COUNTRIES
from ..utils.logger import get_logger

log = get_logger(__name__)

NON_DIGITS = re.compile(r'[^0-9]')
DIGITS_ONLY = re.compile(r'[0-9]+')


def sanitize_digits(value: Optional[str]) -> str:
    """Strip every character that is not 0-9 ("" for None/blank/non-str)"""
    if not isinstance(value, str) or not value.strip():
        return ""
    return NON_DIGITS.sub('', value)


def is_digits(value: Optional[str]) -> bool:
    """True when value is a non-empty run of ASCII digits"""
    return isinstance(value, str) and DIGITS_ONLY.fullmatch(value) is not None


def normalize_country(country_code: Optional[str]) -> str:
    """Upper-cased supported country code, "" for anything else"""
    if not isinstance(country_code, str):
        return ""
    country = country_code.strip().upper()
    return country if country in SUPPORTED_COUNTRIES else ""


def parse_int64(value: Optional[str]) -> Optional[int]:
    """
    Parse an ASCII digit string as a signed 64-bit value.

    Returns:
        int value, or None when the string is not all digits or overflows
    """
    if not is_digits(value):
        return None
    number = int(value)
    if number > INT64_MAX:
        return None
    return number


class BaseValidator(ABC):
    """Validator base class"""

    @staticmethod
    def sanitize(value: Optional[str]) -> str:
        return sanitize_digits(value)

    @staticmethod
    def is_numeric(value: Optional[str]) -> bool:
        """Digits only and within the signed 64-bit range"""
        return parse_int64(value) is not None

    def reject(self, value, reason: str) -> bool:
        """Log a rejected value and return False"""
        log.debug(f"{type(self).__name__}: rejected {value!r} ({reason})")
        return False

    @abstractmethod
    def validate(self, value: str, context: str = "") -> bool:
        """
        Validate a value

        Args:
            value: raw value to check
            context: extra hint (country code etc.), validator specific

        Returns:
            bool: True when the value passes, False otherwise (never raises)
        """
        pass
