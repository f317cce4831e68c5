import unittest
from unittest import mock

from polish_numeral.encoder import encode
from polish_numeral.exceptions import CaseDoesNotExist


class TestEncode(unittest.TestCase):
    def test_exact_entries_take_single_token(self):
        cases = {
            0: ["zero"],
            16: ["szesnaście"],
            1000: ["tysiąc"],
            1_000_000_000: ["miliard"],
        }
        for value, expected in cases.items():
            with self.subTest(value=value):
                self.assertEqual(encode(value), expected)

    def test_tokens_are_least_significant_first(self):
        self.assertEqual(encode(123), ["trzy", "dwadzieścia", "sto"])
        self.assertEqual(encode(2000), ["tysiące", "dwa"])

    def test_case_word_leads_each_group(self):
        self.assertEqual(
            encode(3_045_007),
            ["siedem", "tysięcy", "pięć", "czterdzieści", "miliony", "trzy"],
        )

    def test_empty_groups_contribute_nothing(self):
        self.assertEqual(encode(5_000_008), ["osiem", "milionów", "pięć"])

    def test_teen_replaces_units_contribution(self):
        self.assertEqual(encode(12), ["dwanaście"])
        self.assertEqual(encode(13_000), ["tysięcy", "trzynaście"])
        self.assertEqual(encode(10_000), ["tysięcy", "dziesięć"])

    def test_defect_errors_are_logged_and_raised(self):
        failure = CaseDoesNotExist(1, 1)
        with mock.patch("polish_numeral.encoder.case_word", side_effect=failure):
            with self.assertLogs("polish_numeral.encoder", level="ERROR") as logs:
                with self.assertRaises(CaseDoesNotExist):
                    encode(2001)
        self.assertIn("2001", logs.output[0])


if __name__ == "__main__":
    unittest.main()
