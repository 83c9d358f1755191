"""
Lexer for relaxjson - tokenizes input strings for parsing.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, NoReturn, Optional

from ..security.exceptions import ErrorReporter, ErrorSuggestionEngine, ParseError
from .constants import (
    ASCII_LETTERS,
    DIGITS,
    ESCAPE_MAP,
    QUOTE_CHARS,
    WHITESPACE_CHARS,
    get_keyword_token_map,
    get_structural_token_map,
)


class TokenType(Enum):
    """Token types for JSON parsing."""

    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"
    COLON = "COLON"
    COMMA = "COMMA"

    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    IDENTIFIER = "IDENTIFIER"

    EOF = "EOF"


@dataclass
class Position:
    """Position in source text (line and column)."""

    line: int
    column: int


class Span(NamedTuple):
    """Half-open range of character offsets a token was read from."""

    start: int
    end: int


class Token(NamedTuple):
    """Token with type, value and position information."""

    type: TokenType
    value: str
    position: Position
    span: Span = Span(0, 0)

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column


class Lexer:
    """Lexical analyzer for relaxed JSON input.

    The whole source is scanned left to right exactly once. Strings may be
    quoted with either ``"`` or ``'``; numbers are plain decimals without
    exponents; bare words other than ``true``/``false``/``null`` become
    IDENTIFIER tokens and are rejected later by the parser.
    """

    def __init__(
        self,
        text: str,
        error_reporter: Optional[ErrorReporter] = None,
        include_position: bool = True,
    ) -> None:
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.error_reporter = error_reporter
        self.include_position = include_position

    def current_position(self) -> Position:
        """Get current position in the text."""
        return Position(self.line, self.column)

    def peek(self, offset: int = 0) -> str:
        """Peek at character at given offset without consuming it."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    def advance(self) -> str:
        """Advance position and return the current character."""
        if self.pos >= len(self.text):
            return ""

        char = self.text[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def is_at_end(self) -> bool:
        return self.pos >= len(self.text)

    def skip_whitespace(self) -> None:
        """Skip whitespace characters, newlines included."""
        while not self.is_at_end() and self.text[self.pos] in WHITESPACE_CHARS + "\n":
            self.advance()

    def read_string(self, quote_char: str) -> str:
        """Read a string closed by the same quote character that opened it."""
        chars = []
        self.advance()

        while not self.is_at_end():
            char = self.advance()

            if char == quote_char:
                return "".join(chars)
            if char == "\\":
                if self.is_at_end():
                    break
                escaped = self.advance()
                chars.append(ESCAPE_MAP.get(escaped, escaped))
            else:
                chars.append(char)

        self._raise_lex_error("Unterminated string", self.current_position())

    def read_number(self) -> str:
        """Read a decimal literal: optional '-', digits, optional fraction."""
        start = self.pos

        if self.peek() == "-":
            self.advance()

        while self.peek() and self.peek() in DIGITS:
            self.advance()

        # A dot only belongs to the number when a digit follows it
        if self.peek() == "." and self.peek(1) and self.peek(1) in DIGITS:
            self.advance()
            while self.peek() and self.peek() in DIGITS:
                self.advance()

        return self.text[start:self.pos]

    def read_identifier(self) -> str:
        """Read a run of ASCII letters and digits."""
        start = self.pos
        while self.peek() and self.peek() in ASCII_LETTERS + DIGITS:
            self.advance()
        return self.text[start:self.pos]

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the input text into a sequence of tokens."""
        while True:
            self.skip_whitespace()

            if self.is_at_end():
                break

            char = self.peek()
            pos = self.current_position()
            start = self.pos

            # Try different token types in order
            token = self._try_structural_token(char, pos, start)
            if token:
                yield token
                continue

            token = self._try_string_token(char, pos, start)
            if token:
                yield token
                continue

            token = self._try_number_token(char, pos, start)
            if token:
                yield token
                continue

            token = self._try_identifier_token(char, pos, start)
            if token:
                yield token
                continue

            self._raise_lex_error(
                f"Invalid character '{char}'",
                pos,
                ErrorSuggestionEngine.suggest_for_unexpected_token(char),
            )

        end = len(self.text)
        yield Token(TokenType.EOF, "", self.current_position(), Span(end, end))

    def _try_structural_token(self, char: str, pos: Position, start: int) -> Optional[Token]:
        """Try to create structural tokens (braces, brackets, etc.)."""
        token_map = get_structural_token_map()

        if char in token_map:
            self.advance()
            return Token(token_map[char], char, pos, Span(start, self.pos))
        return None

    def _try_string_token(self, char: str, pos: Position, start: int) -> Optional[Token]:
        """Try to create a string token."""
        if char in QUOTE_CHARS:
            string_value = self.read_string(char)
            return Token(TokenType.STRING, string_value, pos, Span(start, self.pos))
        return None

    def _try_number_token(self, char: str, pos: Position, start: int) -> Optional[Token]:
        """Try to create a number token; a lone '-' is an error."""
        if char == "-":
            next_char = self.peek(1)
            if not next_char or next_char not in DIGITS:
                self._raise_lex_error(f"Invalid character '{char}'", pos)
        elif char not in DIGITS:
            return None

        number_value = self.read_number()
        try:
            float(number_value)
        except ValueError:
            self._raise_lex_error(f"Invalid number '{number_value}'", pos)
        return Token(TokenType.NUMBER, number_value, pos, Span(start, self.pos))

    def _try_identifier_token(self, char: str, pos: Position, start: int) -> Optional[Token]:
        """Try to create an identifier or keyword token."""
        if char in ASCII_LETTERS:
            identifier = self.read_identifier()
            token_type = get_keyword_token_map().get(identifier, TokenType.IDENTIFIER)
            return Token(token_type, identifier, pos, Span(start, self.pos))
        return None

    def _raise_lex_error(
        self, message: str, position: Position, suggestions: Optional[list[str]] = None
    ) -> NoReturn:
        """Raise a ParseError whose message names the offending line."""
        message = f"{message} at line {position.line}"
        if not self.include_position:
            raise ParseError(message, suggestions=suggestions)
        if self.error_reporter:
            raise self.error_reporter.create_parse_error(message, position, suggestions)
        raise ParseError(message, position, suggestions=suggestions)

    def get_all_tokens(self) -> list[Token]:
        """Get all tokens as a list."""
        return list(self.tokenize())
