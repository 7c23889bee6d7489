"""Diagnostic codes and data structures.

Defines error codes, source positions, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "FrozenErrorContext",
]


class ErrorCategory(StrEnum):
    """Error categorization for FrozenLocaleError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        IDENTIFIER: Malformed or empty locale/region identifier
        ARGUMENT: Caller contract violation (neutral locale for a region fact)
        RULE_SYNTAX: Plural rule source could not be parsed
        LOAD: Dataset source could not be read or decoded
    """

    IDENTIFIER = "identifier"
    ARGUMENT = "argument"
    RULE_SYNTAX = "rule_syntax"
    LOAD = "load"


@dataclass(frozen=True, slots=True)
class FrozenErrorContext:
    """Immutable context for resolution errors.

    Attributes:
        identifier: Locale or region identifier that was being resolved
        collection: Dataset collection name (empty if not applicable)
        source: Rule source or dataset path (empty if not applicable)
    """

    identifier: str = ""
    collection: str = ""
    source: str = ""


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Identifier errors
        2000-2999: Argument (contract) errors
        3000-3999: Plural rule syntax errors
        4000-4999: Dataset load errors
    """

    # Identifier errors (1000-1999)
    IDENTIFIER_EMPTY = 1001
    IDENTIFIER_MALFORMED = 1002
    IDENTIFIER_TOO_LONG = 1003

    # Argument errors (2000-2999)
    REGION_REQUIRED = 2001
    UNSUPPORTED_RULE_KIND = 2002
    UNSUPPORTED_OPERAND_VALUE = 2003
    UNSUPPORTED_COLLECTION = 2004
    INVALID_TIME_OF_DAY = 2005
    DEFAULT_DATASET_LOADED = 2006

    # Rule syntax errors (3000-3999)
    RULE_UNEXPECTED_TOKEN = 3001
    RULE_UNEXPECTED_END = 3002
    RULE_UNKNOWN_OPERAND = 3003
    RULE_INVALID_RANGE = 3004
    RULE_TOO_LONG = 3005

    # Load errors (4000-4999)
    LOAD_SOURCE_UNREADABLE = 4001
    LOAD_INVALID_JSON = 4002
    LOAD_INVALID_ENTRY = 4003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        position: Character offset in a rule source (rule syntax errors only)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    position: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[REGION_REQUIRED]: Locale 'en' has no region subtag
              = help: Pass a specific locale such as 'en-US', or a region id
              = note: see https://cldr.unicode.org/translation/displaynames/countryregion-territory-names

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
