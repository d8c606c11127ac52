"""
Checksum primitives

[Algorithms]
- Modulus 11 (DK CVR, NO organisasjonsnummer)
  multiplier from the rightmost digit: 1, 2, 3, 4, 5, 6, 7, 2, 3, ... 7
  valid when Σ(digit × multiplier) % 11 == 0
- Modulus 11 check digit (conventional 2..7 weighting)
- Modulus 10 / Luhn
- EAN-13: weights 1, 3, 1, 3, ... left to right
  check = (10 - Σ % 10) % 10
- Swedish organisation number 10th digit
  R = Σ(Ci // 5 + (Ci × 2) % 10) for i in 0, 2, 4, 6, 8
  C10 = (10 - (R + C1 + C3 + C5 + C7) % 10) % 10
"""
from typing import List, Sequence, Union

from ..utils.constants import EAN13_PAYLOAD_LENGTH
from .base_validator import is_digits, parse_int64


# =========================================================
# Modulus 11
# =========================================================

def validate_modulus11(number: str) -> bool:
    """
    Modulus 11 check over the whole number (check digit included)

    The multiplier starts at 1 for the rightmost digit and then
    cycles 2..7, e.g. an 8 digit DK CVR gets 2, 7, 6, 5, 4, 3, 2, 1.

    Returns:
        False for zero, non-digit input or values beyond 64 bits
    """
    value = parse_int64(number)
    if not value:
        return False

    total = 0
    multiplier = 1
    for char in reversed(number):
        total += int(char) * multiplier
        multiplier += 1
        if multiplier > 7:
            multiplier = 2

    return total % 11 == 0


def get_modulus11_check_digit(number: str) -> str:
    """
    Conventional modulus 11 check digit for number

    Weights 2..7 repeating from the right; a remainder of 0 or 1 gives "0".
    """
    if not is_digits(number):
        raise ValueError(f"number must be digits only, got {number!r}")

    total = 0
    multiplier = 2
    for char in reversed(number):
        total += int(char) * multiplier
        multiplier += 1
        if multiplier > 7:
            multiplier = 2

    remainder = total % 11
    return "0" if remainder in (0, 1) else str(11 - remainder)


def add_modulus11_check_digit(number: str) -> str:
    return number + get_modulus11_check_digit(number)


# =========================================================
# Modulus 10 (Luhn)
# =========================================================

def validate_modulus10(number: str) -> bool:
    """
    Luhn check (check digit included)

    1. Double every second digit from the right
    2. Add the digits of each product
    3. Valid when the total is a multiple of 10
    """
    value = parse_int64(number)
    if not value:
        return False

    total = 0
    for i, char in enumerate(reversed(number)):
        d = int(char)
        if i % 2 == 1:
            d *= 2
        total += d // 10 + d % 10

    return total % 10 == 0


def get_modulus10_check_digit(number: str) -> str:
    """Luhn check digit to append to number"""
    if not is_digits(number):
        raise ValueError(f"number must be digits only, got {number!r}")

    total = 0
    for i, char in enumerate(reversed(number)):
        d = int(char)
        # rightmost payload digit sits next to the check digit, so it is doubled
        if i % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d

    return "0" if total % 10 == 0 else str(10 - total % 10)


# =========================================================
# EAN-13
# =========================================================

def _ean_digits(first_digits: Union[str, Sequence[int]]) -> List[int]:
    if isinstance(first_digits, str):
        if len(first_digits) != EAN13_PAYLOAD_LENGTH or not is_digits(first_digits):
            raise ValueError(
                f"EAN-13 payload must be {EAN13_PAYLOAD_LENGTH} digits, got {first_digits!r}"
            )
        return [int(c) for c in first_digits]

    digits = list(first_digits)
    if len(digits) != EAN13_PAYLOAD_LENGTH:
        raise ValueError(
            f"EAN-13 payload must be {EAN13_PAYLOAD_LENGTH} digits, got {len(digits)}"
        )
    for d in digits:
        if isinstance(d, bool) or not isinstance(d, int) or not 0 <= d <= 9:
            raise ValueError(f"EAN-13 digits must be integers 0-9, got {d!r}")
    return digits


def compute_ean13_check_digit(first_digits: Union[str, Sequence[int]]) -> int:
    """
    EAN-13 check digit for the first 12 digits

    Args:
        first_digits: "590123412345" or [5, 9, 0, ...]

    Returns:
        int: check digit 0-9

    Raises:
        ValueError: not exactly 12 digits
    """
    digits = _ean_digits(first_digits)
    total = sum(d * (1 if idx % 2 == 0 else 3) for idx, d in enumerate(digits))
    return (10 - total % 10) % 10


# =========================================================
# Sweden
# =========================================================

def sweden_check_digit(number: str) -> int:
    """10th digit of a Swedish organisation number (reads digits 0-8)"""
    if len(number) < 9 or not is_digits(number[:9]):
        raise ValueError(f"need at least 9 leading digits, got {number!r}")

    r = sum(int(number[m]) // 5 + int(number[m]) * 2 % 10 for m in (0, 2, 4, 6, 8))
    c1 = sum(int(number[m]) for m in (1, 3, 5, 7))
    return (10 - (r + c1) % 10) % 10
