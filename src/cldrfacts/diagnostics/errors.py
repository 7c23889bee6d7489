"""cldrfacts exception hierarchy with structured diagnostics.

Two kinds of failure exist:

- Data conditions (a malformed identifier supplied at runtime) are returned
  to the caller as FrozenLocaleError values inside a ``(result, errors)``
  tuple, the same way an absent fact is returned as ``None``.
- Contract violations (a neutral locale passed where a region is required,
  an unknown rule kind) raise InvalidArgumentError immediately.

DatasetLoadError is raised by the loaders and propagates unmodified.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory, FrozenErrorContext

__all__ = [
    "DatasetLoadError",
    "FrozenLocaleError",
    "InvalidArgumentError",
    "InvalidIdentifierError",
    "LocaleDataError",
    "PluralRuleSyntaxError",
]


class LocaleDataError(Exception):
    """Base exception for all cldrfacts errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleDataError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidIdentifierError(LocaleDataError, ValueError):
    """Malformed or empty locale/region identifier.

    Raised by LocaleKey.parse(). The resolve_* functions catch it and
    return it as a FrozenLocaleError instead.
    """


class InvalidArgumentError(LocaleDataError, ValueError):
    """Caller contract violation.

    Examples:
    - Region-scoped fact requested with a neutral (language-only) locale
    - Plural rule kind that is neither cardinal nor ordinal

    Never returned in an errors tuple; always raised.
    """


class PluralRuleSyntaxError(LocaleDataError, ValueError):
    """Plural rule source does not follow the CLDR rule grammar.

    Attributes:
        source: The rule text that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, source: str = "") -> None:
        super().__init__(message)
        self.source = source


class DatasetLoadError(LocaleDataError):
    """Dataset source could not be read, decoded, or validated.

    Attributes:
        source: Path or description of the source that failed
    """

    def __init__(self, message: str | Diagnostic, *, source: str = "") -> None:
        super().__init__(message)
        self.source = source


class FrozenLocaleError(LocaleDataError):
    """Immutable error value returned from resolution functions.

    Attributes cannot be reassigned after construction, so errors can be
    shared between threads and stored alongside cached results.

    Attributes:
        category: Error category for programmatic handling
        context: Identifier and collection being resolved
    """

    __slots__ = ("_frozen", "category", "context")

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        *,
        diagnostic: Diagnostic | None = None,
        context: FrozenErrorContext | None = None,
    ) -> None:
        super().__init__(diagnostic if diagnostic is not None else message)
        self.category = category
        self.context = context if context is not None else FrozenErrorContext()
        self._frozen = True

    def __setattr__(self, name: str, value: object) -> None:
        if getattr(self, "_frozen", False):
            msg = f"FrozenLocaleError is immutable; cannot set '{name}'"
            raise AttributeError(msg)
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrozenLocaleError):
            return NotImplemented
        return (
            self.category == other.category
            and self.context == other.context
            and str(self) == str(other)
        )

    def __hash__(self) -> int:
        return hash((self.category, self.context, str(self)))

    def __repr__(self) -> str:
        return f"FrozenLocaleError({str(self)!r}, category={self.category!s})"

    @classmethod
    def from_exception(
        cls,
        error: LocaleDataError,
        category: ErrorCategory,
        context: FrozenErrorContext | None = None,
    ) -> "FrozenLocaleError":
        """Freeze a raised LocaleDataError into a returnable value."""
        return cls(str(error), category, diagnostic=error.diagnostic, context=context)
