"""
Exception types and error reporting for relaxjson.

All failures raised while lexing or parsing are ParseError instances, so a
caller only ever has to catch one type. The extra fields (position, context,
suggestions) are there for display; the message itself is meant to be shown
to a user as-is.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.tokenizer import Position


@dataclass
class ErrorContext:
    """Source excerpt surrounding an error position."""

    text: str
    position: "Position"
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


class RelaxJSONError(Exception):
    """Base exception for relaxjson errors."""

    def __init__(
        self,
        message: str,
        position: Optional["Position"] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]

        if self.position:
            # Lexical messages already name the line
            line_suffix = f" at line {self.position.line}"
            if not parts[0].endswith(line_suffix):
                parts[0] += line_suffix
            parts[0] += f", column {self.position.column}"

        if self.context:
            parts.append("Context:")
            parts.append(f"  {self.context.line_text}")
            parts.append(f"  {self.context.column_indicator}")

        if self.suggestions:
            parts.append("Suggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(parts)


class ParseError(RelaxJSONError):
    """Raised when input cannot be tokenized or parsed."""


class SecurityError(ParseError):
    """Raised when a configured resource limit is exceeded."""


class JSONDecodeError(ParseError, ValueError):
    """ParseError raised by loads()/load(), compatible with json.JSONDecodeError."""

    @property
    def msg(self) -> str:
        return self.message

    @property
    def lineno(self) -> int:
        return self.position.line if self.position else 0

    @property
    def colno(self) -> int:
        return self.position.column if self.position else 0


class ErrorReporter:
    """Builds errors carrying a source excerpt around the failing position."""

    def __init__(self, text: str, max_context: int = 50):
        self.text = text
        self.lines = text.split("\n")
        self.max_context = max_context

    def get_context(self, position: "Position") -> ErrorContext:
        """Build an ErrorContext for a 1-based line/column position."""
        line_index = min(max(position.line - 1, 0), len(self.lines) - 1)
        line_text = self.lines[line_index]
        column_index = min(max(position.column - 1, 0), len(line_text))

        half = self.max_context // 2
        window_start = max(0, column_index - half)
        window_end = min(len(line_text), column_index + half)

        line_excerpt = line_text[window_start:window_end]
        indicator = " " * (column_index - window_start) + "^"

        return ErrorContext(
            text=self.text,
            position=position,
            context_before=line_text[window_start:column_index],
            context_after=line_text[column_index:window_end],
            error_char=line_text[column_index] if column_index < len(line_text) else "",
            line_text=line_excerpt,
            column_indicator=indicator,
        )

    def create_parse_error(
        self,
        message: str,
        position: "Position",
        suggestions: Optional[list[str]] = None,
    ) -> ParseError:
        """Create a ParseError with source context attached."""
        return ParseError(
            message,
            position=position,
            context=self.get_context(position),
            suggestions=suggestions,
        )

    def create_security_error(
        self, message: str, position: Optional["Position"] = None
    ) -> SecurityError:
        """Create a SecurityError, with context when a position is known."""
        context = self.get_context(position) if position else None
        return SecurityError(message, position=position, context=context)


class ErrorSuggestionEngine:
    """Short hints attached to common syntax errors."""

    INVALID_WORDS = {
        "True": "Use lowercase 'true' for booleans",
        "False": "Use lowercase 'false' for booleans",
        "None": "Use 'null' instead of 'None'",
        "NULL": "Use lowercase 'null'",
        "undefined": "Use 'null' instead of 'undefined'",
        "NaN": "NaN is not supported; use null or a string",
        "Infinity": "Infinity is not supported; use null or a string",
    }

    @staticmethod
    def suggest_for_unexpected_token(value: str) -> list[str]:
        """Suggest fixes for a token or character that is not allowed here."""
        if value in ('"', "'"):
            return [
                "Check for a missing closing quote",
                "Strings must start and end with the same quote character",
            ]
        if value in ErrorSuggestionEngine.INVALID_WORDS:
            return ErrorSuggestionEngine.suggest_for_invalid_value(value)
        if value and value[0].isalpha():
            return [
                "Bare words are not values; quote the text as a string",
                "Only true, false and null are allowed unquoted",
            ]
        if value == "-":
            return ["A minus sign must be followed by a digit"]
        return []

    @staticmethod
    def suggest_for_unclosed_structure(structure_type: str) -> list[str]:
        """Suggest fixes for an object or array that was not closed."""
        if structure_type == "object":
            return [
                "Add a closing '}' to finish the object",
                "Separate members with ',' and remove any trailing comma",
            ]
        if structure_type == "array":
            return [
                "Add a closing ']' to finish the array",
                "Separate elements with ',' and remove any trailing comma",
            ]
        return []

    @staticmethod
    def suggest_for_invalid_value(value: str) -> list[str]:
        """Suggest replacements for common non-JSON literals."""
        suggestion = ErrorSuggestionEngine.INVALID_WORDS.get(value)
        return [suggestion] if suggestion else []
