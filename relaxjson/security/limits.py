"""
Resource limits enforced while a document is parsed.

A LimitValidator belongs to a single parse call and counts what that parse
has consumed. Passing a limit raises SecurityError, positioned at the
offending token when one is known and carrying a source excerpt when an
ErrorReporter is available.
"""

from typing import TYPE_CHECKING, Optional

from ..utils.config import ParseLimits
from .exceptions import ErrorReporter, SecurityError

if TYPE_CHECKING:
    from ..core.tokenizer import Position


class LimitValidator:
    """Counters and checks for one parse against a ParseLimits."""

    def __init__(
        self, limits: ParseLimits, error_reporter: Optional[ErrorReporter] = None
    ):
        self.limits = limits
        self.error_reporter = error_reporter
        self.nesting_depth = 0
        self.total_items = 0

    def _check(
        self,
        what: str,
        amount: int,
        limit: int,
        position: Optional["Position"] = None,
    ) -> None:
        if amount <= limit:
            return
        message = f"{what} {amount} exceeds limit {limit}"
        if self.error_reporter and position is not None:
            raise self.error_reporter.create_security_error(message, position)
        raise SecurityError(message, position=position)

    def validate_input_size(self, text: str) -> None:
        """Checked once, before lexing starts."""
        self._check("Input size", len(text), self.limits.max_input_size)

    def validate_string_length(
        self, string: str, position: Optional["Position"] = None
    ) -> None:
        """Decoded length of a string literal, key or value."""
        self._check("String length", len(string), self.limits.max_string_length, position)

    def validate_number_length(
        self, lexeme: str, position: Optional["Position"] = None
    ) -> None:
        self._check("Number length", len(lexeme), self.limits.max_number_length, position)

    def enter_structure(self, position: Optional["Position"] = None) -> None:
        """Count one more open object or array."""
        self.nesting_depth += 1
        self._check(
            "Nesting depth", self.nesting_depth, self.limits.max_nesting_depth, position
        )

    def exit_structure(self) -> None:
        if self.nesting_depth > 0:
            self.nesting_depth -= 1

    def validate_object_keys(
        self, key_count: int, position: Optional["Position"] = None
    ) -> None:
        self._check("Object key count", key_count, self.limits.max_object_keys, position)

    def validate_array_items(
        self, item_count: int, position: Optional["Position"] = None
    ) -> None:
        self._check("Array item count", item_count, self.limits.max_array_items, position)

    def count_item(self, position: Optional["Position"] = None) -> None:
        """Count one value toward the document-wide total."""
        self.total_items += 1
        self._check(
            "Total item count", self.total_items, self.limits.max_total_items, position
        )
