"""
EAN-13 validator / generator

[Strategy]
- validate: 13 characters, the first 12 digits recomputed with their check
  digit must reproduce the input exactly
- generate: 12 random digits (or the caller's digits) + check digit
  (test data / samples, not security sensitive)
"""
import random
from typing import Optional, Sequence

from .base_validator import BaseValidator, is_digits
from .checksum import compute_ean13_check_digit
from ..utils.constants import EAN13_LENGTH, EAN13_PAYLOAD_LENGTH


class Ean13Validator(BaseValidator):
    """EAN-13 barcode validator"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def validate(self, value: str, context: str = "") -> bool:
        """EAN-13 format + check digit"""
        if not isinstance(value, str) or len(value) != EAN13_LENGTH:
            return self.reject(value, "length")

        payload = value[:EAN13_PAYLOAD_LENGTH]
        if not is_digits(payload):
            return self.reject(value, "payload not digits")

        return value == self.encode(payload)

    @staticmethod
    def encode(first_digits) -> str:
        """12 digits (str or ints) + check digit"""
        if not isinstance(first_digits, str):
            first_digits = list(first_digits)
        check_digit = compute_ean13_check_digit(first_digits)
        return "".join(str(d) for d in first_digits) + str(check_digit)

    def generate(self, first_digits: Optional[Sequence[int]] = None) -> str:
        """
        Generate an EAN-13 code

        Args:
            first_digits: 12 digits 0-9, random when omitted

        Returns:
            13 digit string with a valid check digit

        Raises:
            ValueError: first_digits is not 12 digits 0-9
        """
        if first_digits is None:
            first_digits = [self.rng.randrange(10) for _ in range(EAN13_PAYLOAD_LENGTH)]
        return self.encode(first_digits)


_validator = Ean13Validator()


def validate_ean13(code: str) -> bool:
    """
    Example:
        >>> validate_ean13("5901234123457")
        True
    """
    return _validator.validate(code)


def generate_ean13(first_digits: Optional[Sequence[int]] = None) -> str:
    return _validator.generate(first_digits)
