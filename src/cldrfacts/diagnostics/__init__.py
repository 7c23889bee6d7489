"""Diagnostic system for cldrfacts errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, FrozenErrorContext
from .errors import (
    DatasetLoadError,
    FrozenLocaleError,
    InvalidArgumentError,
    InvalidIdentifierError,
    LocaleDataError,
    PluralRuleSyntaxError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DatasetLoadError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FrozenErrorContext",
    "FrozenLocaleError",
    "InvalidArgumentError",
    "InvalidIdentifierError",
    "LocaleDataError",
    "OutputFormat",
    "PluralRuleSyntaxError",
]
