"""
Base parser functionality: token-to-value conversion and structure bookkeeping.
"""

from typing import NoReturn, Optional

from ..security.exceptions import ErrorReporter, ParseError
from ..security.limits import LimitValidator
from ..utils.config import DuplicateKeyPolicy
from .tokenizer import Position, Token
from .values import Array, Boolean, Null, Number, Object, String, Value


class BaseParserMixin:
    """Common parsing functionality for the tree builder."""

    error_reporter: Optional[ErrorReporter] = None
    include_position: bool = True

    def parse_string_token(self, token: Token) -> String:
        """Strings arrive already unescaped from the lexer."""
        return String(token.value)

    def parse_number_token(self, token: Token) -> Number:
        """Parse a number token; every number is a float."""
        try:
            return Number(float(token.value))
        except ValueError:
            self._raise_parse_error(f"Invalid number '{token.value}'", token.position)

    def parse_boolean_token(self, token: Token) -> Boolean:
        if token.value == "true":
            return Boolean(True)
        if token.value == "false":
            return Boolean(False)
        self._raise_parse_error(
            f"Invalid boolean literal '{token.value}'", token.position
        )

    def parse_null_token(self, token: Token) -> Null:  # pylint: disable=unused-argument
        return Null()

    def handle_duplicate_key(
        self,
        members: dict[str, Value],
        key_token: Token,
        value: Value,
        policy: DuplicateKeyPolicy,
    ) -> None:
        """Insert a member, applying the duplicate key policy."""
        key = key_token.value
        if key in members and policy is DuplicateKeyPolicy.REJECT:
            self._raise_parse_error(
                f"Duplicate key '{key}' in object", key_token.position
            )
        members[key] = value

    def validate_and_enter_structure(
        self, validator: Optional[LimitValidator], position: Optional[Position] = None
    ) -> None:
        """Validate and enter a structure if validator exists."""
        if validator:
            validator.enter_structure(position)

    def validate_and_exit_structure(self, validator: Optional[LimitValidator]) -> None:
        """Validate and exit a structure if validator exists."""
        if validator:
            validator.exit_structure()

    def init_empty_array(self) -> Array:
        return Array([])

    def init_empty_object(self) -> Object:
        return Object({})

    def _raise_parse_error(
        self,
        message: str,
        position: Optional[Position],
        suggestions: Optional[list[str]] = None,
    ) -> NoReturn:
        if not self.include_position:
            raise ParseError(message, suggestions=suggestions)
        if self.error_reporter and position is not None:
            raise self.error_reporter.create_parse_error(message, position, suggestions)
        raise ParseError(message, position, suggestions=suggestions)
