"""
Parser for relaxjson - converts tokens into a value tree.
"""

import json
import logging
from collections.abc import Sequence
from typing import Any, Callable, Optional, TextIO, Union

from ..security.exceptions import (
    ErrorReporter,
    ErrorSuggestionEngine,
    JSONDecodeError,
    ParseError,
    SecurityError,
)
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .parser_base import BaseParserMixin
from .token_stream import TokenStream
from .tokenizer import Lexer, Position, Token, TokenType
from .values import Array, JsonValue, Object, Value

logger = logging.getLogger(__name__)


class Parser(BaseParserMixin):
    """Recursive-descent parser that turns a token stream into a value tree.

    Grammar::

        value  := STRING | NUMBER | BOOLEAN | NULL | object | array
        object := '{' (STRING ':' value (',' STRING ':' value)*)? '}'
        array  := '[' (value (',' value)*)? ']'

    A comma always requires another member or element, so trailing commas
    are rejected. The first error aborts the whole parse.
    """

    def __init__(
        self,
        tokens: Union[TokenStream, Sequence[Token]],
        config: Optional[ParseConfig] = None,
        error_reporter: Optional[ErrorReporter] = None,
    ):
        self.tokens = tokens if isinstance(tokens, TokenStream) else TokenStream(tokens)
        self.config = config or ParseConfig()
        self.validator = LimitValidator(self.config.limits, error_reporter)
        self.error_reporter = error_reporter
        self.include_position = self.config.include_position

    def current_token(self) -> Token:
        return self.tokens.current()

    def advance(self) -> Token:
        """Consume the current token and return it."""
        return self.tokens.advance()

    def _where(self, token: Token) -> Optional[Position]:
        """Position handed to limit checks; None when positions are disabled."""
        return token.position if self.include_position else None

    def _parse_simple_value(self, token: Token) -> Optional[Value]:
        """Parse string, number, boolean and null tokens; None for anything else."""
        if token.type == TokenType.STRING:
            self.validator.validate_string_length(token.value, self._where(token))
            self.advance()
            return self.parse_string_token(token)

        if token.type == TokenType.NUMBER:
            self.validator.validate_number_length(token.value, self._where(token))
            self.advance()
            return self.parse_number_token(token)

        if token.type == TokenType.BOOLEAN:
            self.advance()
            return self.parse_boolean_token(token)

        if token.type == TokenType.NULL:
            self.advance()
            return self.parse_null_token(token)

        return None

    def parse_value(self) -> Value:
        """Parse any value, dispatching on the current token's type."""
        token = self.current_token()
        self.validator.count_item(self._where(token))

        result = self._parse_simple_value(token)
        if result is not None:
            return result

        if token.type == TokenType.LBRACE:
            return self.parse_object()

        if token.type == TokenType.LBRACKET:
            return self.parse_array()

        if token.type == TokenType.EOF:
            self._raise_parse_error(
                f"Unexpected token: {token.type.value}",
                token.position,
                ["The document ended where a value was expected"],
            )

        self._raise_parse_error(
            f"Unexpected token: {token.type.value}",
            token.position,
            ErrorSuggestionEngine.suggest_for_unexpected_token(token.value),
        )

    def _parse_object_key(self) -> Token:
        """Consume and return the key token of an object member."""
        key_token = self.current_token()
        if key_token.type != TokenType.STRING:
            self._raise_parse_error(
                f"Expected string key in object, found {key_token.type.value}",
                key_token.position,
                ["Object keys must be quoted strings"],
            )
        self.validator.validate_string_length(key_token.value, self._where(key_token))
        return self.advance()

    def _expect_colon(self) -> None:
        """Expect and consume a colon token."""
        if self.current_token().type != TokenType.COLON:
            self._raise_parse_error(
                "Expected ':' after object key",
                self.current_token().position,
                ["Object keys must be followed by a colon"],
            )
        self.advance()

    def _expect_separator(self, closing: TokenType, structure: str) -> bool:
        """Consume ',' or the closing token after a member or element.

        Returns True when another entry must follow, False when the
        structure has been closed.
        """
        token = self.current_token()

        if token.type == TokenType.COMMA:
            self.advance()
            return True

        if token.type == closing:
            self.advance()
            return False

        close_char = "}" if closing == TokenType.RBRACE else "]"
        self._raise_parse_error(
            f"Expected ',' or '{close_char}' in {structure}, found {token.type.value}",
            token.position,
            ErrorSuggestionEngine.suggest_for_unclosed_structure(structure),
        )

    def parse_object(self) -> Object:
        """Parse an object into an Object value."""
        start = self.current_token()
        if start.type != TokenType.LBRACE:
            self._raise_parse_error("Expected '{' at start of object", start.position)

        self.validate_and_enter_structure(self.validator, self._where(start))
        self.advance()

        obj = self.init_empty_object()

        if self.current_token().type == TokenType.RBRACE:
            self.advance()
            self.validate_and_exit_structure(self.validator)
            return obj

        while True:
            key_token = self._parse_object_key()
            self._expect_colon()
            value = self.parse_value()

            self.handle_duplicate_key(
                obj.members, key_token, value, self.config.duplicate_keys
            )
            self.validator.validate_object_keys(len(obj), self._where(start))

            if not self._expect_separator(TokenType.RBRACE, "object"):
                break

        self.validate_and_exit_structure(self.validator)
        return obj

    def parse_array(self) -> Array:
        """Parse an array into an Array value."""
        start = self.current_token()
        if start.type != TokenType.LBRACKET:
            self._raise_parse_error("Expected '[' at start of array", start.position)

        self.validate_and_enter_structure(self.validator, self._where(start))
        self.advance()

        arr = self.init_empty_array()

        if self.current_token().type == TokenType.RBRACKET:
            self.advance()
            self.validate_and_exit_structure(self.validator)
            return arr

        while True:
            arr.items.append(self.parse_value())
            self.validator.validate_array_items(len(arr), self._where(start))

            if not self._expect_separator(TokenType.RBRACKET, "array"):
                break

        self.validate_and_exit_structure(self.validator)
        return arr

    def parse(self) -> Value:
        """Parse one root value.

        Tokens after the root value are ignored unless ``require_eof`` is set.
        """
        value = self.parse_value()

        if self.config.require_eof and not self.tokens.is_at_end():
            token = self.current_token()
            self._raise_parse_error(
                f"Unexpected trailing token: {token.type.value}",
                token.position,
                ["Only one root value is allowed per document"],
            )
        return value


def parse(
    text: Union[str, bytes, bytearray, TextIO],
    config: Optional[ParseConfig] = None,
) -> Value:
    """
    Parse a relaxed JSON document into a value tree.

    Args:
        text: Document text. Bytes are decoded as UTF-8; file-like objects
            are read completely before parsing starts.
        config: Optional ParseConfig for limits, duplicate key policy and
            error reporting.

    Returns:
        The root Value of the document.

    Raises:
        ParseError: On the first lexical or syntactic error.
        SecurityError: If a configured limit is exceeded.
    """
    if config is None:
        config = ParseConfig()

    return _parse_internal(text, config)


def _parse_internal(
    text: Union[str, bytes, bytearray, TextIO], config: ParseConfig
) -> Value:
    """Internal parsing function used by both parse() and loads()."""
    if hasattr(text, "read"):
        return _parse_from_string(_decode(text.read()), config)  # type: ignore[union-attr]

    if isinstance(text, (str, bytes, bytearray)):
        return _parse_from_string(_decode(text), config)

    raise TypeError(
        f"Input must be str, bytes or a file-like object, not {type(text).__name__}"
    )


def _decode(text: Union[str, bytes, bytearray]) -> str:
    if isinstance(text, str):
        return text
    try:
        return bytes(text).decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"Input is not valid UTF-8: {e.reason}") from e


def _parse_from_string(text: str, config: ParseConfig) -> Value:
    """Tokenize the whole input, then build the tree from the tokens."""
    LimitValidator(config.limits).validate_input_size(text)

    error_reporter = (
        ErrorReporter(text, config.max_error_context)
        if config.include_position and config.include_context
        else None
    )

    try:
        lexer = Lexer(text, error_reporter, include_position=config.include_position)
        tokens = lexer.get_all_tokens()
        logger.debug("Tokenized %d characters into %d tokens", len(text), len(tokens))

        parser = Parser(TokenStream(tokens), config, error_reporter)
        result = parser.parse()
    except RecursionError as e:
        raise SecurityError(
            "Document is nested too deeply to parse; lower max_nesting_depth"
        ) from e
    except ParseError as e:
        logger.debug("Parse failed: %s", e.message)
        raise

    logger.debug("Parsed root %s value", result.kind.value)
    return result


def _apply_object_hook_recursively(
    obj: Any, hook: Callable[[dict[str, Any]], Any]
) -> Any:
    """Apply object_hook to every dict, innermost first."""
    if isinstance(obj, dict):
        return hook({k: _apply_object_hook_recursively(v, hook) for k, v in obj.items()})
    if isinstance(obj, list):
        return [_apply_object_hook_recursively(item, hook) for item in obj]
    return obj


def loads(
    s: Union[str, bytes, bytearray],
    *,
    object_hook: Optional[Callable[[dict[str, Any]], Any]] = None,
    config: Optional[ParseConfig] = None,
) -> Any:
    """
    Deserialize a relaxed JSON document to plain Python data.

    Mirrors json.loads: objects become dicts, arrays lists, numbers floats.

    Args:
        s: Document to parse (str, bytes, or bytearray)
        object_hook: Function called for each decoded object (dict)
        config: ParseConfig object for advanced control

    Returns:
        Parsed Python data structure

    Raises:
        JSONDecodeError: If parsing fails (also a ValueError, like json's)
        SecurityError: If security limits are exceeded
    """
    try:
        result = parse(s, config).to_python()
    except SecurityError:
        # SecurityError should pass through unchanged for proper error handling
        raise
    except ParseError as e:
        raise JSONDecodeError(
            e.message, e.position, context=e.context, suggestions=e.suggestions
        ) from e

    if object_hook:
        result = _apply_object_hook_recursively(result, object_hook)
    return result


def load(
    fp: TextIO,
    *,
    object_hook: Optional[Callable[[dict[str, Any]], Any]] = None,
    config: Optional[ParseConfig] = None,
) -> Any:
    """Same as loads() but reads the whole document from a file-like object."""
    return loads(fp.read(), object_hook=object_hook, config=config)


def dumps(obj: Union[JsonValue, Any], **kw: Any) -> str:
    """
    Serialize a value tree (or plain Python data) to strict JSON text.

    Keyword arguments are passed through to json.dumps.
    """
    if isinstance(obj, JsonValue):
        obj = obj.to_python()
    return json.dumps(obj, **kw)
