"""
Configuration and limits for relaxjson parsing.

This module defines security limits and configuration options for safe parsing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


@dataclass
class SizeLimits:
    """Input and content size limits."""
    max_input_size: int = 10 * 1024 * 1024
    max_string_length: int = 1024 * 1024
    max_number_length: int = 100


@dataclass
class StructureLimits:
    """Structure complexity limits."""
    max_nesting_depth: int = 100
    max_object_keys: int = 10000
    max_array_items: int = 100000
    max_total_items: int = 1000000


_SIZE_FIELDS = ("max_input_size", "max_string_length", "max_number_length")
_STRUCTURE_FIELDS = (
    "max_nesting_depth", "max_object_keys", "max_array_items", "max_total_items"
)


@dataclass
class ParseLimits:
    """Security limits for parsing to prevent abuse.

    Limits can be given as grouped dataclasses or as flat keyword arguments::

        ParseLimits(max_input_size=1000, max_nesting_depth=5)
    """

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    def __init__(
        self,
        *,
        size_limits: Optional[SizeLimits] = None,
        structure_limits: Optional[StructureLimits] = None,
        **flat_limits: int,
    ):
        unknown = set(flat_limits) - set(_SIZE_FIELDS) - set(_STRUCTURE_FIELDS)
        if unknown:
            raise TypeError(f"Unknown limit(s): {', '.join(sorted(unknown))}")

        if size_limits is not None:
            self.size_limits = size_limits
        else:
            self.size_limits = SizeLimits(
                **{k: v for k, v in flat_limits.items() if k in _SIZE_FIELDS}
            )

        if structure_limits is not None:
            self.structure_limits = structure_limits
        else:
            self.structure_limits = StructureLimits(
                **{k: v for k, v in flat_limits.items() if k in _STRUCTURE_FIELDS}
            )

        if self.size_limits.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.structure_limits.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.size_limits is not None
        return self.size_limits.max_input_size

    @property
    def max_string_length(self) -> int:
        """Maximum length for individual strings."""
        assert self.size_limits is not None
        return self.size_limits.max_string_length

    @property
    def max_number_length(self) -> int:
        """Maximum length for number lexemes."""
        assert self.size_limits is not None
        return self.size_limits.max_number_length

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth for objects and arrays."""
        assert self.structure_limits is not None
        return self.structure_limits.max_nesting_depth

    @property
    def max_object_keys(self) -> int:
        """Maximum number of keys in an object."""
        assert self.structure_limits is not None
        return self.structure_limits.max_object_keys

    @property
    def max_array_items(self) -> int:
        """Maximum number of items in an array."""
        assert self.structure_limits is not None
        return self.structure_limits.max_array_items

    @property
    def max_total_items(self) -> int:
        """Maximum total values across the whole document."""
        assert self.structure_limits is not None
        return self.structure_limits.max_total_items


class DuplicateKeyPolicy(Enum):
    """What to do when an object literal repeats a key."""

    LAST_WINS = "last_wins"
    REJECT = "reject"


@dataclass
class ParsingBehavior:
    """Core parsing behavior settings."""
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS
    require_eof: bool = False


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""
    include_position: bool = True
    include_context: bool = True
    max_error_context: int = 50


@dataclass
class ParseConfig:
    """Configuration options for relaxjson parsing."""

    limits: Optional[ParseLimits] = None
    behavior: Optional[ParsingBehavior] = None
    error_reporting: Optional[ErrorReporting] = None

    def __init__(
        self,
        *,
        limits: Optional[ParseLimits] = None,
        behavior: Optional[ParsingBehavior] = None,
        error_reporting: Optional[ErrorReporting] = None,
        **config_options: Any,
    ):
        self.limits = limits or ParseLimits()

        if behavior is not None:
            self.behavior = behavior
        else:
            self.behavior = ParsingBehavior(
                duplicate_keys=DuplicateKeyPolicy(
                    config_options.get("duplicate_keys", DuplicateKeyPolicy.LAST_WINS)
                ),
                require_eof=config_options.get("require_eof", False),
            )

        if error_reporting is not None:
            self.error_reporting = error_reporting
        else:
            self.error_reporting = ErrorReporting(
                include_position=config_options.get("include_position", True),
                include_context=config_options.get("include_context", True),
                max_error_context=config_options.get("max_error_context", 50),
            )

    @property
    def duplicate_keys(self) -> DuplicateKeyPolicy:
        """Policy applied to repeated object keys."""
        assert self.behavior is not None
        return self.behavior.duplicate_keys

    @duplicate_keys.setter
    def duplicate_keys(self, value: DuplicateKeyPolicy) -> None:
        """Set the duplicate key policy."""
        assert self.behavior is not None
        self.behavior.duplicate_keys = DuplicateKeyPolicy(value)

    @property
    def require_eof(self) -> bool:
        """Whether input after the root value is an error."""
        assert self.behavior is not None
        return self.behavior.require_eof

    @require_eof.setter
    def require_eof(self, value: bool) -> None:
        """Set trailing input handling."""
        assert self.behavior is not None
        self.behavior.require_eof = value

    @property
    def include_position(self) -> bool:
        """Whether to include position information in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.include_position

    @include_position.setter
    def include_position(self, value: bool) -> None:
        """Set position information inclusion."""
        assert self.error_reporting is not None
        self.error_reporting.include_position = value

    @property
    def include_context(self) -> bool:
        """Whether to include a source excerpt in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.include_context

    @include_context.setter
    def include_context(self, value: bool) -> None:
        """Set context information inclusion."""
        assert self.error_reporting is not None
        self.error_reporting.include_context = value

    @property
    def max_error_context(self) -> int:
        """Maximum characters of context to include in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.max_error_context

    @max_error_context.setter
    def max_error_context(self, value: int) -> None:
        """Set maximum error context length."""
        assert self.error_reporting is not None
        self.error_reporting.max_error_context = value
