"""
Test cases for security limits and validation.

Tests focus on preventing resource exhaustion and validating input constraints.
"""

import unittest

import relaxjson
from relaxjson.core.tokenizer import Position
from relaxjson.security.exceptions import ErrorReporter, ParseError, SecurityError
from relaxjson.security.limits import LimitValidator
from relaxjson.utils.config import ParseConfig, ParseLimits


class TestLimitValidator(unittest.TestCase):
    """Test LimitValidator functionality for security constraints."""

    def setUp(self):
        self.limits = ParseLimits(
            max_input_size=1000,
            max_string_length=50,
            max_number_length=20,
            max_nesting_depth=5,
            max_array_items=10,
            max_object_keys=10,
            max_total_items=30,
        )
        self.validator = LimitValidator(self.limits)

    def test_input_size_validation(self):
        self.validator.validate_input_size("x" * 1000)

        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_input_size("x" * 1001)
        self.assertEqual(cm.exception.message, "Input size 1001 exceeds limit 1000")

    def test_string_length_validation(self):
        self.validator.validate_string_length("x" * 50)

        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_string_length("x" * 51, Position(5, 2))

        error = cm.exception
        self.assertEqual(error.message, "String length 51 exceeds limit 50")
        self.assertIn("at line 5, column 2", str(error))

    def test_number_length_validation(self):
        self.validator.validate_number_length("1" * 20)
        with self.assertRaises(SecurityError):
            self.validator.validate_number_length("1" * 21)

    def test_nesting_depth_tracking(self):
        for _ in range(5):
            self.validator.enter_structure()
        self.assertEqual(self.validator.nesting_depth, 5)

        with self.assertRaises(SecurityError) as cm:
            self.validator.enter_structure()
        self.assertIn("Nesting depth 6 exceeds limit 5", str(cm.exception))

    def test_exit_structure_never_goes_negative(self):
        self.validator.exit_structure()
        self.assertEqual(self.validator.nesting_depth, 0)

        self.validator.enter_structure()
        self.validator.exit_structure()
        self.assertEqual(self.validator.nesting_depth, 0)

    def test_object_keys_and_array_items(self):
        self.validator.validate_object_keys(10)
        self.validator.validate_array_items(10)

        with self.assertRaises(SecurityError):
            self.validator.validate_object_keys(11)
        with self.assertRaises(SecurityError):
            self.validator.validate_array_items(11)

    def test_total_item_count(self):
        for _ in range(30):
            self.validator.count_item()
        with self.assertRaises(SecurityError):
            self.validator.count_item()

    def test_reporter_attaches_context(self):
        text = '["abc", "defgh"]'
        validator = LimitValidator(ParseLimits(max_string_length=3), ErrorReporter(text))

        with self.assertRaises(SecurityError) as cm:
            validator.validate_string_length("defgh", Position(1, 9))

        error = cm.exception
        self.assertEqual(error.message, "String length 5 exceeds limit 3")
        self.assertIsNotNone(error.context)
        self.assertEqual(error.context.error_char, '"')
        self.assertIn("Context:", str(error))

    def test_reporter_unused_without_position(self):
        validator = LimitValidator(ParseLimits(max_input_size=1), ErrorReporter("ab"))
        with self.assertRaises(SecurityError) as cm:
            validator.validate_input_size("ab")
        self.assertIsNone(cm.exception.context)


class TestLimitsDuringParsing(unittest.TestCase):
    """Limits are enforced by parse() through the configuration."""

    def _config(self, **limits):
        return ParseConfig(limits=ParseLimits(**limits))

    def test_security_error_is_parse_error(self):
        with self.assertRaises(ParseError):
            relaxjson.parse("[[[1]]]", self._config(max_nesting_depth=2))

    def test_nesting_depth(self):
        relaxjson.parse("[[1]]", self._config(max_nesting_depth=2))
        with self.assertRaises(SecurityError) as cm:
            relaxjson.parse('{"a": [[1]]}', self._config(max_nesting_depth=2))
        self.assertEqual(cm.exception.position.column, 8)
        self.assertEqual(cm.exception.context.error_char, "[")

    def test_container_size_error_points_at_opening_bracket(self):
        with self.assertRaises(SecurityError) as cm:
            relaxjson.parse("{'a': [1, 2, 3]}", self._config(max_array_items=2))
        self.assertEqual(cm.exception.position.column, 7)
        self.assertEqual(cm.exception.context.error_char, "[")

    def test_limit_errors_without_positions(self):
        config = self._config(max_nesting_depth=1)
        config.include_position = False
        with self.assertRaises(SecurityError) as cm:
            relaxjson.parse("[[1]]", config)
        self.assertIsNone(cm.exception.position)
        self.assertEqual(str(cm.exception), "Nesting depth 2 exceeds limit 1")

    def test_input_size(self):
        with self.assertRaises(SecurityError):
            relaxjson.parse("[" + "1," * 50 + "1]", self._config(max_input_size=100))

    def test_string_and_key_length(self):
        config = self._config(max_string_length=3)
        relaxjson.parse("{'abc': 'def'}", config)
        with self.assertRaises(SecurityError):
            relaxjson.parse("['abcd']", config)
        with self.assertRaises(SecurityError):
            relaxjson.parse("{'abcd': 1}", config)

    def test_number_length(self):
        with self.assertRaises(SecurityError):
            relaxjson.parse("123456", self._config(max_number_length=5))

    def test_container_sizes(self):
        with self.assertRaises(SecurityError):
            relaxjson.parse("[1, 2, 3]", self._config(max_array_items=2))
        with self.assertRaises(SecurityError):
            relaxjson.parse("{'a': 1, 'b': 2, 'c': 3}", self._config(max_object_keys=2))

    def test_total_items(self):
        # The root array counts as an item too
        relaxjson.parse("[1, 2]", self._config(max_total_items=3))
        with self.assertRaises(SecurityError):
            relaxjson.parse("[1, 2, 3]", self._config(max_total_items=3))

    def test_limits_are_per_parse(self):
        config = self._config(max_total_items=2)
        for _ in range(5):
            relaxjson.parse("[1]", config)

    def test_default_limits_stop_runaway_nesting(self):
        with self.assertRaises(SecurityError):
            relaxjson.parse("[" * 500 + "]" * 500)


if __name__ == '__main__':
    unittest.main()
