"""
Nordic VAT number validator

[Strategy]
- Sanitize first: upper-case, drop separators, country prefixes and "MVA"
- DK: 8 digits + modulus 11                    (DK13585628)
- NO: 9 digits + modulus 11                    (NO923609016MVA)
- SE: 12 digits, trailing "01", valid C10      (SE556074308901)

Unlike TaxIdValidator the Swedish EU suffix is mandatory here and the
personnummer fallback does not apply.
"""
from typing import Optional

from .base_validator import BaseValidator, normalize_country
from .checksum import sweden_check_digit, validate_modulus11
from ..utils.constants import (
    DK_TAX_ID_LENGTH, NO_TAX_ID_LENGTH, SE_VAT_NUMBER_LENGTH,
    SE_VAT_SUFFIX, VAT_STRIP_TOKENS,
)


def sanitize_vat_number(vat_number: Optional[str]) -> str:
    """
    Normalize a VAT number

    Example:
        >>> sanitize_vat_number("no 923 609 016 mva")
        '923609016'
    """
    if vat_number is None:
        return ""

    cleaned = vat_number.upper()
    for token in VAT_STRIP_TOKENS:
        cleaned = cleaned.replace(token, "")
    return cleaned


class VatValidator(BaseValidator):
    """DK / NO / SE VAT number validator"""

    def __init__(self):
        self._dispatch = {
            'DK': self.validate_denmark,
            'NO': self.validate_norway,
            'SE': self.validate_sweden,
        }

    def validate(self, value: str, context: str = "") -> bool:
        """
        Args:
            value: VAT number, with or without country prefix
            context: two letter country code (DK, NO, SE)
        """
        if not isinstance(value, str) or not value.strip():
            return self.reject(value, "blank or not text")

        country = normalize_country(context)
        if not country:
            return self.reject(value, f"unsupported country {context!r}")

        return self._dispatch[country](sanitize_vat_number(value))

    def validate_denmark(self, vat_number: str) -> bool:
        if len(vat_number) != DK_TAX_ID_LENGTH or not self.is_numeric(vat_number):
            return self.reject(vat_number, "DK format")
        return validate_modulus11(vat_number)

    def validate_norway(self, vat_number: str) -> bool:
        if len(vat_number) != NO_TAX_ID_LENGTH or not self.is_numeric(vat_number):
            return self.reject(vat_number, "NO format")
        return validate_modulus11(vat_number)

    def validate_sweden(self, vat_number: str) -> bool:
        if (len(vat_number) != SE_VAT_NUMBER_LENGTH
                or not vat_number.endswith(SE_VAT_SUFFIX)
                or not self.is_numeric(vat_number)):
            return self.reject(vat_number, "SE format")

        return f"{vat_number[:9]}{sweden_check_digit(vat_number)}{SE_VAT_SUFFIX}" == vat_number


_validator = VatValidator()


def check_vat(country_code: str, vat_number: str) -> bool:
    """
    Validate a VAT number for DK, NO or SE

    Example:
        >>> check_vat("SE", "SE 556074-3089 01")
        True
    """
    return _validator.validate(vat_number, country_code)
