"""
Swedish personal identifier fallback

[Strategy]
- Sole traders register for VAT with their personnummer
- Only the birth date part (YYMMDD, 6 digits) is supplied, so the check is
  relaxed to date plausibility
- Leap years use yy % 4 == 0 (valid within the 21st century, 2000 was a leap year)
"""
from .base_validator import BaseValidator, parse_int64
from ..utils.constants import SE_PERSONAL_ID_LENGTH


class SwedishPersonalIdValidator(BaseValidator):
    """Swedish personnummer (YYMMDD) validator"""

    # apr, jun, sep, nov
    THIRTY_DAY_MONTHS = (4, 6, 9, 11)

    # jan, mar, may, jul, aug, oct, dec
    THIRTY_ONE_DAY_MONTHS = (1, 3, 5, 7, 8, 10, 12)

    def validate(self, value: str, context: str = "") -> bool:
        """YYMMDD plausibility check"""
        if not isinstance(value, str) or len(value) != SE_PERSONAL_ID_LENGTH:
            return self.reject(value, "length")

        if not parse_int64(value):
            return self.reject(value, "not a non-zero number")

        year = int(value[0:2])
        month = int(value[2:4])
        day = int(value[4:6])

        if day < 1 or day > 31:
            return self.reject(value, "day")

        # feb
        if month == 2:
            return day <= (29 if self.is_leap_year(year) else 28)

        if month in self.THIRTY_DAY_MONTHS:
            return day <= 30

        if month in self.THIRTY_ONE_DAY_MONTHS:
            return True

        # month does not exist
        return self.reject(value, "month")

    @staticmethod
    def is_leap_year(year: int) -> bool:
        return year % 4 == 0
