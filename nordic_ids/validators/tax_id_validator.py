"""
Nordic tax identifier validator

[Strategy]
- Blank input fails, everything that is not a digit is stripped
- Dispatch on the upper-cased country code, unknown countries fail
- Validators never raise: malformed input is simply invalid

[Formats]
- DK (CVR): 8 digits, C8 is a modulus 11 check digit
    R = 2*C1 + 7*C2 + 6*C3 + 5*C4 + 4*C5 + 3*C6 + 2*C7 + C8
- NO (organisasjonsnummer): 9 digits, C9 is a modulus 11 check digit
    the trailing "MVA" of the VAT form is not checked here
- SE (organisationsnummer): 10 digits, C10 is the check digit
    12 digits: EU form with a trailing "01", cut back to 10
    6 digits: personnummer birth date of a sole trader (YYMMDD)

[References]
- https://ec.europa.eu/taxation_customs/vies/
- https://www.bolagsverket.se/apierochoppnadata.2531.html
"""
from typing import Optional, Tuple

from .base_validator import BaseValidator, normalize_country, sanitize_digits
from .checksum import sweden_check_digit, validate_modulus11
from .personal_id_validator import SwedishPersonalIdValidator
from ..utils.constants import (
    DK_TAX_ID_LENGTH, NO_TAX_ID_LENGTH, SE_ORG_NUMBER_LENGTH,
    SE_PERSONAL_ID_LENGTH, SE_VAT_NUMBER_LENGTH,
)


class TaxIdValidator(BaseValidator):
    """DK / NO / SE tax identifier validator"""

    INFO_TYPES = {
        'DK': "CVR-nummer",
        'NO': "Organisasjonsnummer",
        'SE': "Organisationsnummer",
    }

    def __init__(self):
        self.personal_id_validator = SwedishPersonalIdValidator()
        self._dispatch = {
            'DK': self.validate_denmark,
            'NO': self.validate_norway,
            'SE': self.validate_sweden,
        }

    def validate(self, value: str, context: str = "") -> bool:
        """
        Validate a raw tax identifier

        Args:
            value: raw tax id, separators and letters allowed ("DK-1358 5628")
            context: two letter country code (DK, NO, SE)
        """
        if not isinstance(value, str) or not value.strip():
            return self.reject(value, "blank or not text")

        country = normalize_country(context)
        if not country:
            return self.reject(value, f"unsupported country {context!r}")

        return self._dispatch[country](self.sanitize(value))

    def validate_full(self, value: str, country_code: str) -> Tuple[bool, str]:
        """
        Validate and classify

        Returns:
            (is_valid, info_type)
            - (True, "Organisationsnummer"): SE organisation number
            - (True, "Personnummer"): SE sole trader birth date
            - (False, ""): invalid
        """
        if not self.validate(value, country_code):
            return False, ""

        country = normalize_country(country_code)
        if country == 'SE' and len(self.sanitize(value)) == SE_PERSONAL_ID_LENGTH:
            return True, "Personnummer"
        return True, self.INFO_TYPES[country]

    # =========================================================
    # per country
    # =========================================================

    def validate_denmark(self, tax_id: str) -> bool:
        if len(tax_id) != DK_TAX_ID_LENGTH or not self.is_numeric(tax_id):
            return self.reject(tax_id, "DK format")
        return validate_modulus11(tax_id)

    def validate_norway(self, tax_id: str) -> bool:
        if len(tax_id) != NO_TAX_ID_LENGTH or not self.is_numeric(tax_id):
            return self.reject(tax_id, "NO format")
        return validate_modulus11(tax_id)

    def validate_sweden(self, tax_id: str) -> bool:
        if not self.is_numeric(tax_id):
            return self.reject(tax_id, "SE format")

        length = len(tax_id)

        if length == SE_PERSONAL_ID_LENGTH:
            return self.personal_id_validator.validate(tax_id)

        if length < SE_ORG_NUMBER_LENGTH:
            return self.reject(tax_id, "SE length")

        # strip EU extension "01", the suffix itself is not checked here
        expected = tax_id[:SE_ORG_NUMBER_LENGTH] if length == SE_VAT_NUMBER_LENGTH else tax_id

        # 11 or 13+ digits never match a 10 digit number
        return f"{tax_id[:9]}{sweden_check_digit(tax_id)}" == expected


_validator = TaxIdValidator()


def sanitize_tax_id(tax_id: Optional[str]) -> str:
    """Digits only; "" for None or blank input"""
    return sanitize_digits(tax_id)


def check_tax_id(country_code: str, tax_id: str) -> bool:
    """
    Validate a tax identifier for DK, NO or SE

    Example:
        >>> check_tax_id("DK", "13585628")
        True
        >>> check_tax_id("FI", "13585628")
        False
    """
    return _validator.validate(tax_id, country_code)
