"""
nordic_ids - Nordic tax/VAT number validators, EAN-13 and time-based identifiers

    from nordic_ids import check_tax_id, validate_ean13, generate_time_based_guid
"""
from .validators import (
    check_tax_id,
    sanitize_tax_id,
    check_vat,
    sanitize_vat_number,
    validate_ean13,
    generate_ean13,
    validate_modulus11,
    compute_ean13_check_digit,
)
from .core import (
    GuidVersion,
    GuidGenerator,
    generate_time_based_guid,
    get_version,
    get_timestamp,
    StringOptions,
    generate_random_string,
)

__version__ = "1.0.0"

__all__ = [
    'check_tax_id',
    'sanitize_tax_id',
    'check_vat',
    'sanitize_vat_number',
    'validate_ean13',
    'generate_ean13',
    'validate_modulus11',
    'compute_ean13_check_digit',
    'GuidVersion',
    'GuidGenerator',
    'generate_time_based_guid',
    'get_version',
    'get_timestamp',
    'StringOptions',
    'generate_random_string',
]
