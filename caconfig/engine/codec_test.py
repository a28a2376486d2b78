"""
codec_test provides tests for kind-specific decode, encode, and equality.
"""
from __future__ import annotations

import unittest

from caconfig.config.defaults import LIST_DELIMITER, default_schema
from caconfig.engine.codec import decode, encode, equal, normalize
from caconfig.errors import InvalidFlagValue, UnknownFlagName


SCHEMA = default_schema()
AUDIT = SCHEMA.descriptor("AuditFilter")
URLS = SCHEMA.descriptor("CRLPublicationURLs")
UNITS = SCHEMA.descriptor("CRLPeriodUnits")
PERIOD = SCHEMA.descriptor("CRLPeriod")


class TestFlagSet(unittest.TestCase):
    """Tests for FLAG_SET decoding and encoding."""

    def test_encode_then_decode_68(self) -> None:
        """Two flags encode to their bit sum and decode back."""
        names = frozenset({"IssueAndManageCertificateRequests", "ChangeCAConfiguration"})
        encoded = encode(AUDIT, names, LIST_DELIMITER)
        self.assertEqual(encoded, "68")
        self.assertEqual(decode(AUDIT, 68, LIST_DELIMITER), names)

    def test_decode_zero_is_empty(self) -> None:
        self.assertEqual(decode(AUDIT, 0, LIST_DELIMITER), frozenset())

    def test_decode_absent_is_empty(self) -> None:
        self.assertEqual(decode(AUDIT, None, LIST_DELIMITER), frozenset())

    def test_decode_all_bits(self) -> None:
        self.assertEqual(len(decode(AUDIT, 127, LIST_DELIMITER)), 7)

    def test_decode_rejects_undefined_bit(self) -> None:
        """128 is outside the seven defined bits."""
        with self.assertRaises(InvalidFlagValue) as ctx:
            decode(AUDIT, 128, LIST_DELIMITER)
        self.assertEqual(ctx.exception.name, "AuditFilter")

    def test_decode_rejects_negative(self) -> None:
        with self.assertRaises(InvalidFlagValue):
            decode(AUDIT, -1, LIST_DELIMITER)

    def test_decode_accepts_written_string(self) -> None:
        """Values written back by the applier are decimal strings."""
        self.assertEqual(
            decode(AUDIT, "5", LIST_DELIMITER),
            frozenset({"StartAndStopADCS", "IssueAndManageCertificateRequests"}),
        )

    def test_decode_accepts_hex_string(self) -> None:
        self.assertEqual(decode(AUDIT, "0x40", LIST_DELIMITER), frozenset({"ChangeCAConfiguration"}))

    def test_decode_rejects_text(self) -> None:
        with self.assertRaises(InvalidFlagValue):
            decode(AUDIT, "lots", LIST_DELIMITER)

    def test_encode_empty_set_is_zero(self) -> None:
        self.assertEqual(encode(AUDIT, frozenset(), LIST_DELIMITER), "0")

    def test_encode_rejects_unknown_name(self) -> None:
        with self.assertRaises(UnknownFlagName) as ctx:
            encode(AUDIT, frozenset({"StartAndStopADCS", "Nope"}), LIST_DELIMITER)
        self.assertEqual(ctx.exception.flags, ["Nope"])

    def test_equal_ignores_order(self) -> None:
        self.assertTrue(
            equal(AUDIT, frozenset({"StartAndStopADCS", "ChangeCAConfiguration"}),
                  frozenset({"ChangeCAConfiguration", "StartAndStopADCS"}))
        )


class TestStringList(unittest.TestCase):
    """Tests for STRING_LIST decoding and encoding."""

    def test_delimiter_is_literal_backslash_n(self) -> None:
        self.assertEqual(LIST_DELIMITER, "\\n")
        self.assertEqual(len(LIST_DELIMITER), 2)

    def test_decode_splits_on_literal_token(self) -> None:
        raw = "1:C:\\Windows\\crl\\%3.crl\\n2:http://pki/%3.crl"
        self.assertEqual(
            decode(URLS, raw, LIST_DELIMITER),
            ["1:C:\\Windows\\crl\\%3.crl", "2:http://pki/%3.crl"],
        )

    def test_decode_does_not_split_on_newline(self) -> None:
        self.assertEqual(decode(URLS, "a\nb", LIST_DELIMITER), ["a\nb"])

    def test_decode_empty_and_absent(self) -> None:
        self.assertEqual(decode(URLS, "", LIST_DELIMITER), [])
        self.assertEqual(decode(URLS, None, LIST_DELIMITER), [])

    def test_decode_drops_empty_entries(self) -> None:
        self.assertEqual(decode(URLS, "a\\n\\nb\\n", LIST_DELIMITER), ["a", "b"])
        self.assertEqual(decode(URLS, ["", "a"], LIST_DELIMITER), ["a"])

    def test_decode_multi_string(self) -> None:
        self.assertEqual(decode(URLS, ["a", "b"], LIST_DELIMITER), ["a", "b"])

    def test_encode_joins(self) -> None:
        self.assertEqual(encode(URLS, ["a", "b"], LIST_DELIMITER), "a\\nb")

    def test_equal_is_set_equality(self) -> None:
        self.assertTrue(equal(URLS, ["a", "b"], ["b", "a"]))
        self.assertTrue(equal(URLS, ["a", "a", "b"], ["b", "a"]))
        self.assertFalse(equal(URLS, ["a"], ["a", "b"]))
        self.assertTrue(equal(URLS, [], []))


class TestScalar(unittest.TestCase):
    """Tests for SCALAR handling."""

    def test_decode_passes_through(self) -> None:
        self.assertEqual(decode(UNITS, 7, LIST_DELIMITER), 7)
        self.assertIsNone(decode(UNITS, None, LIST_DELIMITER))

    def test_encode_stringifies(self) -> None:
        self.assertEqual(encode(UNITS, 7, LIST_DELIMITER), "7")

    def test_encode_rejects_none(self) -> None:
        with self.assertRaises(ValueError):
            encode(UNITS, None, LIST_DELIMITER)

    def test_equal_compares_stored_form(self) -> None:
        self.assertTrue(equal(UNITS, "5", 5))
        self.assertFalse(equal(UNITS, 5, 6))
        self.assertFalse(equal(UNITS, None, 0))


class TestNormalize(unittest.TestCase):
    """Tests for desired value coercion."""

    def test_bare_string_list(self) -> None:
        self.assertEqual(normalize(URLS, "a"), ["a"])

    def test_empty_string_clears_list(self) -> None:
        self.assertEqual(normalize(URLS, ""), [])
        self.assertEqual(normalize(URLS, [""]), [])
        self.assertEqual(normalize(URLS, ["a", ""]), ["a"])

    def test_cleared_list_equals_empty_store(self) -> None:
        written = encode(URLS, normalize(URLS, ""), LIST_DELIMITER)
        self.assertEqual(written, "")
        self.assertTrue(equal(URLS, decode(URLS, written, LIST_DELIMITER), [""]))

    def test_bare_string_flag(self) -> None:
        self.assertEqual(normalize(AUDIT, "ChangeCAConfiguration"), frozenset({"ChangeCAConfiguration"}))

    def test_integer_flag_is_bitmask(self) -> None:
        self.assertEqual(normalize(AUDIT, 64), frozenset({"ChangeCAConfiguration"}))

    def test_unknown_flag_names_pass(self) -> None:
        """Unknown flags are reported at encode time, not here."""
        self.assertEqual(normalize(AUDIT, ["Nope"]), frozenset({"Nope"}))

    def test_none_rejected(self) -> None:
        with self.assertRaises(ValueError):
            normalize(UNITS, None)

    def test_choices_enforced(self) -> None:
        self.assertEqual(normalize(PERIOD, "Weeks"), "Weeks")
        with self.assertRaises(ValueError):
            normalize(PERIOD, "Fortnights")

    def test_scalar_rejects_list(self) -> None:
        with self.assertRaises(ValueError):
            normalize(UNITS, [1])

    def test_list_rejects_non_strings(self) -> None:
        with self.assertRaises(ValueError):
            normalize(URLS, ["a", 1])


if __name__ == "__main__":
    unittest.main()
