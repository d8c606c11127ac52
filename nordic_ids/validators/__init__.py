"""
Validator package

[Usage]
    from nordic_ids.validators import check_tax_id, check_vat, validate_ean13

    check_tax_id("DK", "13585628")        # True
    check_vat("NO", "NO923609016MVA")     # True
    validate_ean13("5901234123457")       # True

[Class API]
    validator = TaxIdValidator()
    is_valid, info_type = validator.validate_full("556074-3089", "SE")
"""
from .base_validator import BaseValidator, sanitize_digits
from .checksum import (
    validate_modulus11,
    get_modulus11_check_digit,
    add_modulus11_check_digit,
    validate_modulus10,
    get_modulus10_check_digit,
    compute_ean13_check_digit,
    sweden_check_digit,
)
from .personal_id_validator import SwedishPersonalIdValidator
from .tax_id_validator import TaxIdValidator, check_tax_id, sanitize_tax_id
from .vat_validator import VatValidator, check_vat, sanitize_vat_number
from .ean13_validator import Ean13Validator, validate_ean13, generate_ean13

__all__ = [
    # ============================================
    # validators
    # ============================================
    'BaseValidator',
    'TaxIdValidator',
    'SwedishPersonalIdValidator',
    'VatValidator',
    'Ean13Validator',

    # ============================================
    # function API
    # ============================================
    'check_tax_id',
    'sanitize_tax_id',
    'check_vat',
    'sanitize_vat_number',
    'validate_ean13',
    'generate_ean13',
    'sanitize_digits',

    # ============================================
    # checksum primitives
    # ============================================
    'validate_modulus11',
    'get_modulus11_check_digit',
    'add_modulus11_check_digit',
    'validate_modulus10',
    'get_modulus10_check_digit',
    'compute_ean13_check_digit',
    'sweden_check_digit',
]
