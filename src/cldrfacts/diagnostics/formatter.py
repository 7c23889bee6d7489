"""Rendering of diagnostics and returned resolution errors.

Three renderings:

    rust    Multi-line, compiler style. Used by Diagnostic.format_error()
            and therefore by str() of every raised LocaleDataError.
    simple  One line, for log records (the dataset loader logs skipped
            records this way).
    json    One object per error, for tooling that collects the errors
            tuples returned by the resolvers.

FrozenLocaleError values are rendered together with their
FrozenErrorContext, so a report names the identifier and collection that
failed, not just the message.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .codes import FrozenErrorContext
    from .errors import FrozenLocaleError

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


def _context_fields(context: FrozenErrorContext) -> dict[str, str]:
    fields = {
        "identifier": context.identifier,
        "collection": context.collection,
        "source": context.source,
    }
    # identifier is kept even when empty: an empty identifier is the error
    return {
        name: value for name, value in fields.items() if value or name == "identifier"
    }


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Renders Diagnostic and FrozenLocaleError values.

    Attributes:
        output_format: rust, simple or json
        max_content_length: Messages and hints longer than this are cut and
            end in "..."; None keeps them whole. Rule sources and dataset
            values quoted in messages can be arbitrarily long.

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> formatter.format(ErrorTemplate.identifier_empty())
        'IDENTIFIER_EMPTY: Locale identifier is empty'
    """

    output_format: OutputFormat = OutputFormat.RUST
    max_content_length: int | None = None

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def format(self, diagnostic: Diagnostic) -> str:
        """Render a single diagnostic."""
        match self.output_format:
            case OutputFormat.RUST:
                return "\n".join(self._rust_lines(diagnostic))
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._cut(diagnostic.message)}"
            case OutputFormat.JSON:
                return json.dumps(self._diagnostic_data(diagnostic), ensure_ascii=False)

    # ------------------------------------------------------------------
    # Returned errors
    # ------------------------------------------------------------------

    def format_error(self, error: FrozenLocaleError) -> str:
        """Render a returned error with its identifier and collection.

        Errors built without a Diagnostic are labelled by their category.

        Example:
            >>> _, errors = resolve_region_fact(dataset, "", RegionCollection.PAPER_SIZES)
            >>> print(DiagnosticFormatter(OutputFormat.SIMPLE).format_error(errors[0]))
            IDENTIFIER_EMPTY: Locale identifier is empty [identifier='', collection=paper_sizes]
        """
        diagnostic = error.diagnostic
        context = _context_fields(error.context)
        match self.output_format:
            case OutputFormat.RUST:
                if diagnostic is not None:
                    lines = self._rust_lines(diagnostic)
                else:
                    lines = [f"error[{error.category}]: {self._cut(str(error))}"]
                described = ", ".join(f"{name} {value!r}" for name, value in context.items())
                lines.append(f"  = context: {described}")
                return "\n".join(lines)
            case OutputFormat.SIMPLE:
                label = diagnostic.code.name if diagnostic is not None else str(error.category)
                message = diagnostic.message if diagnostic is not None else str(error)
                described = ", ".join(
                    f"{name}={value!r}" if name == "identifier" else f"{name}={value}"
                    for name, value in context.items()
                )
                return f"{label}: {self._cut(message)} [{described}]"
            case OutputFormat.JSON:
                data: dict[str, str | int | None] = {"category": str(error.category)}
                if diagnostic is not None:
                    data |= self._diagnostic_data(diagnostic)
                else:
                    data["message"] = self._cut(str(error))
                data |= context
                return json.dumps(data, ensure_ascii=False)

    def format_errors(self, errors: Iterable[FrozenLocaleError]) -> str:
        """Render an errors tuple; JSON and simple output give one line each."""
        separator = "\n\n" if self.output_format is OutputFormat.RUST else "\n"
        return separator.join(self.format_error(error) for error in errors)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _rust_lines(self, diagnostic: Diagnostic) -> list[str]:
        lines = [f"{diagnostic.severity}[{diagnostic.code.name}]: {self._cut(diagnostic.message)}"]
        if diagnostic.position is not None:
            lines.append(f"  --> position {diagnostic.position}")
        if diagnostic.hint:
            lines.append(f"  = help: {self._cut(diagnostic.hint)}")
        if diagnostic.help_url:
            lines.append(f"  = note: see {diagnostic.help_url}")
        return lines

    def _diagnostic_data(self, diagnostic: Diagnostic) -> dict[str, str | int | None]:
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._cut(diagnostic.message),
            "severity": diagnostic.severity,
        }
        if diagnostic.position is not None:
            data["position"] = diagnostic.position
        if diagnostic.hint:
            data["hint"] = self._cut(diagnostic.hint)
        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url
        return data

    def _cut(self, text: str) -> str:
        if self.max_content_length is not None and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
