"""
Tax identifier validator tests
- DK CVR / NO organisasjonsnummer (modulus 11)
- SE organisationsnummer (10 / 12 digits) and personnummer fallback
"""
import unittest

from nordic_ids.validators import (
    SwedishPersonalIdValidator,
    TaxIdValidator,
    check_tax_id,
    sanitize_tax_id,
)
from nordic_ids.utils.constants import SUPPORTED_COUNTRIES


class TestCheckTaxIdDispatch(unittest.TestCase):
    """check_tax_id input handling"""

    def test_blank_input(self):
        self.assertFalse(check_tax_id("DK", ""))
        self.assertFalse(check_tax_id("DK", "   "))
        self.assertFalse(check_tax_id("DK", None))

    def test_unsupported_country(self):
        self.assertFalse(check_tax_id("FI", "13585628"))
        self.assertFalse(check_tax_id("", "13585628"))
        self.assertFalse(check_tax_id(None, "13585628"))

    def test_country_code_case_insensitive(self):
        self.assertTrue(check_tax_id("dk", "13585628"))
        self.assertTrue(check_tax_id("Se", "5560743089"))

    def test_sanitize(self):
        self.assertEqual(sanitize_tax_id("DK-13 58 56 28"), "13585628")
        self.assertEqual(sanitize_tax_id("   "), "")
        self.assertEqual(sanitize_tax_id(None), "")

    def test_idempotent(self):
        for country, value in [("DK", "13585628"), ("SE", "990230"), ("NO", "923609017")]:
            self.assertEqual(check_tax_id(country, value), check_tax_id(country, value))

    def test_non_text_input(self):
        self.assertFalse(check_tax_id("DK", 13585628))
        self.assertFalse(check_tax_id("NO", 923609016))
        self.assertFalse(check_tax_id("SE", [5, 5, 6]))
        self.assertFalse(check_tax_id(46, "5560743089"))

    def test_countries_match_supported_list(self):
        self.assertEqual(set(TaxIdValidator()._dispatch), set(SUPPORTED_COUNTRIES))

    def test_class_sanitize(self):
        self.assertEqual(TaxIdValidator.sanitize("DK-1358 5628"), "13585628")


class TestDenmark(unittest.TestCase):
    """DK: 8 digits + modulus 11"""

    def test_valid(self):
        self.assertTrue(check_tax_id("DK", "13585628"))

    def test_separators_and_prefix_are_stripped(self):
        self.assertTrue(check_tax_id("DK", "DK-13 58 56 28"))

    def test_check_digit_mismatch(self):
        self.assertFalse(check_tax_id("DK", "13585629"))

    def test_wrong_length(self):
        self.assertFalse(check_tax_id("DK", "1358562"))
        self.assertFalse(check_tax_id("DK", "135856280"))

    def test_all_zero(self):
        self.assertFalse(check_tax_id("DK", "00000000"))


class TestNorway(unittest.TestCase):
    """NO: 9 digits + modulus 11, MVA suffix ignored"""

    def test_valid(self):
        self.assertTrue(check_tax_id("NO", "923609016"))
        self.assertTrue(check_tax_id("NO", "974 760 673"))

    def test_mva_suffix_is_stripped(self):
        self.assertTrue(check_tax_id("NO", "NO923609016MVA"))

    def test_invalid(self):
        self.assertFalse(check_tax_id("NO", "923609017"))
        self.assertFalse(check_tax_id("NO", "92360901"))
        self.assertFalse(check_tax_id("NO", "000000000"))


class TestSwedenOrganisation(unittest.TestCase):
    """SE: 10 digits, or 12 with the EU suffix"""

    def test_ten_digits(self):
        self.assertTrue(check_tax_id("SE", "556074-3089"))
        self.assertTrue(check_tax_id("SE", "5560360140"))

    def test_ten_digits_wrong_check_digit(self):
        self.assertFalse(check_tax_id("SE", "5560743088"))

    def test_twelve_digits_eu_form(self):
        self.assertTrue(check_tax_id("SE", "SE556074308901"))

    def test_twelve_digits_suffix_not_checked(self):
        """only the first 10 digits count for the tax id"""
        self.assertTrue(check_tax_id("SE", "556074308999"))

    def test_twelve_digits_wrong_check_digit(self):
        self.assertFalse(check_tax_id("SE", "556074308801"))

    def test_other_lengths(self):
        self.assertFalse(check_tax_id("SE", "5560743"))
        self.assertFalse(check_tax_id("SE", "556074308"))
        self.assertFalse(check_tax_id("SE", "55607430890"))
        self.assertFalse(check_tax_id("SE", "5560743089011"))

    def test_overlong_input(self):
        self.assertFalse(check_tax_id("SE", "5" * 25))


class TestSwedenPersonalId(unittest.TestCase):
    """SE: 6 digit YYMMDD fallback"""

    def test_december_always_accepted(self):
        self.assertTrue(check_tax_id("SE", "991231"))

    def test_february_thirtieth(self):
        self.assertFalse(check_tax_id("SE", "990230"))
        self.assertFalse(check_tax_id("SE", "000230"))

    def test_leap_day(self):
        self.assertTrue(check_tax_id("SE", "000229"))
        self.assertTrue(check_tax_id("SE", "240229"))
        self.assertFalse(check_tax_id("SE", "010229"))
        self.assertTrue(check_tax_id("SE", "010228"))

    def test_thirty_day_months(self):
        self.assertTrue(check_tax_id("SE", "990430"))
        self.assertFalse(check_tax_id("SE", "990431"))
        self.assertFalse(check_tax_id("SE", "991131"))

    def test_bad_day_or_month(self):
        self.assertFalse(check_tax_id("SE", "990100"))
        self.assertFalse(check_tax_id("SE", "990132"))
        self.assertFalse(check_tax_id("SE", "991331"))
        self.assertFalse(check_tax_id("SE", "990015"))

    def test_zero(self):
        self.assertFalse(check_tax_id("SE", "000000"))

    def test_separators(self):
        self.assertTrue(check_tax_id("SE", "99-12-31"))

    def test_validator_requires_six_digits(self):
        validator = SwedishPersonalIdValidator()
        self.assertFalse(validator.validate("9912310000"))
        self.assertFalse(validator.validate("99123"))
        self.assertFalse(validator.validate(""))
        self.assertFalse(validator.validate(991231))
        self.assertTrue(validator.validate("991231"))


class TestValidateFull(unittest.TestCase):
    """TaxIdValidator.validate_full classification"""

    def setUp(self):
        self.validator = TaxIdValidator()

    def test_info_types(self):
        self.assertEqual(self.validator.validate_full("13585628", "DK"), (True, "CVR-nummer"))
        self.assertEqual(self.validator.validate_full("923609016", "no"), (True, "Organisasjonsnummer"))
        self.assertEqual(self.validator.validate_full("556074-3089", "SE"), (True, "Organisationsnummer"))
        self.assertEqual(self.validator.validate_full("991231", "SE"), (True, "Personnummer"))

    def test_invalid(self):
        self.assertEqual(self.validator.validate_full("13585629", "DK"), (False, ""))
        self.assertEqual(self.validator.validate_full("13585628", "FI"), (False, ""))


if __name__ == '__main__':
    unittest.main()
