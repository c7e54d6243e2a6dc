"""Tests for Avro name and namespace validation."""

import os
import sys
import unittest

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from dbmlavro.validators import NameValidator, NamespaceValidator


class TestNameValidator(unittest.TestCase):

    def test_valid_names(self):
        validator = NameValidator()
        for name in ["_", "a", "a9", "a_", "a_b", "User", "_private", "Z9_x"]:
            with self.subTest(name=name):
                self.assertTrue(validator.is_valid(name))

    def test_invalid_names(self):
        validator = NameValidator()
        for name in ["", ".", "9", "a.", "9a", "Üser", "a-b", "a b", "a\n", "ä"]:
            with self.subTest(name=name):
                self.assertFalse(validator.is_valid(name))

    def test_non_string_is_invalid(self):
        validator = NameValidator()
        self.assertFalse(validator.is_valid(None))
        self.assertFalse(validator.is_valid(42))


class TestNamespaceValidator(unittest.TestCase):

    def test_namespaces(self):
        validator = NamespaceValidator(NameValidator())
        cases = [
            ("", True),
            (".", False),
            (".a", False),
            ("a.", False),
            ("a..b", False),
            ("a.b", True),
            ("com.example", True),
            ("com.exämple", False),
            ("com.9example", False),
        ]
        for namespace, expected in cases:
            with self.subTest(namespace=namespace):
                self.assertEqual(expected, validator.is_valid(namespace))

    def test_uses_name_validator(self):
        class RejectAll(NameValidator):
            def is_valid(self, name):
                return False

        validator = NamespaceValidator(RejectAll())
        self.assertTrue(validator.is_valid(""))
        self.assertFalse(validator.is_valid("a"))


if __name__ == '__main__':
    unittest.main()
