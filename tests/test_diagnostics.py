"""Tests for diagnostics: templates, formatting and the error hierarchy."""

from __future__ import annotations

import json

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from cldrfacts.data import Dataset
from cldrfacts.diagnostics import (
    DatasetLoadError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorCategory,
    ErrorTemplate,
    FrozenErrorContext,
    FrozenLocaleError,
    InvalidArgumentError,
    InvalidIdentifierError,
    LocaleDataError,
    OutputFormat,
    PluralRuleSyntaxError,
)
from cldrfacts.enums import LocaleCollection, RegionCollection
from cldrfacts.runtime import resolve_locale_fact, resolve_region_fact


@st.composite
def frozen_errors(draw: st.DrawFn) -> FrozenLocaleError:
    """Generate FrozenLocaleError values with and without diagnostics."""
    category = draw(st.sampled_from(list(ErrorCategory)))
    event(f"category={category}")
    diagnostic = None
    if draw(st.booleans()):
        diagnostic = Diagnostic(
            code=draw(st.sampled_from(list(DiagnosticCode))),
            message=draw(st.text(min_size=1, max_size=60)),
        )
    context = FrozenErrorContext(
        identifier=draw(st.text(max_size=20)),
        collection=draw(st.sampled_from(["", "paper_sizes", "plural_rules"])),
    )
    return FrozenLocaleError(
        draw(st.text(min_size=1, max_size=60)), category, diagnostic=diagnostic, context=context
    )


# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Each template produces its own code."""

    @pytest.mark.parametrize(
        ("diagnostic", "code"),
        [
            (ErrorTemplate.identifier_empty(), DiagnosticCode.IDENTIFIER_EMPTY),
            (ErrorTemplate.identifier_malformed("e-", "x"), DiagnosticCode.IDENTIFIER_MALFORMED),
            (ErrorTemplate.identifier_too_long(300, 255), DiagnosticCode.IDENTIFIER_TOO_LONG),
            (ErrorTemplate.region_required("en", "paper size"), DiagnosticCode.REGION_REQUIRED),
            (ErrorTemplate.unsupported_rule_kind("range"), DiagnosticCode.UNSUPPORTED_RULE_KIND),
            (ErrorTemplate.invalid_time_of_day(-1), DiagnosticCode.INVALID_TIME_OF_DAY),
            (ErrorTemplate.default_dataset_loaded(), DiagnosticCode.DEFAULT_DATASET_LOADED),
            (ErrorTemplate.rule_unexpected_end("a value", 5), DiagnosticCode.RULE_UNEXPECTED_END),
            (ErrorTemplate.load_invalid_json("x.json", "bad"), DiagnosticCode.LOAD_INVALID_JSON),
            (ErrorTemplate.load_invalid_entry("c", 2, "x"), DiagnosticCode.LOAD_INVALID_ENTRY),
        ],
    )
    def test_codes(self, diagnostic: Diagnostic, code: DiagnosticCode) -> None:
        """Templates map to the matching DiagnosticCode."""
        assert diagnostic.code is code
        assert diagnostic.severity == "error"

    def test_region_required_hint(self) -> None:
        """The hint suggests a specific locale built from the neutral one."""
        diagnostic = ErrorTemplate.region_required("fr", "postcode pattern")
        assert "'fr'" in diagnostic.message
        assert diagnostic.hint is not None
        assert "fr-US" in diagnostic.hint

    def test_rule_errors_carry_position(self) -> None:
        """Rule syntax diagnostics know where they went wrong."""
        assert ErrorTemplate.rule_unexpected_token("q", "an operand", 9).position == 9

    def test_codes_grouped_by_range(self) -> None:
        """Code values fall in their category's thousand."""
        ranges = {"IDENTIFIER": 1, "REGION": 2, "UNSUPPORTED": 2, "INVALID": 2, "DEFAULT": 2}
        ranges |= {"RULE": 3, "LOAD": 4}
        for code in DiagnosticCode:
            assert code.value // 1000 == ranges[code.name.split("_")[0]]


# ============================================================================
# FORMATTER
# ============================================================================


class TestDiagnosticFormatter:
    """Rust, simple and JSON output."""

    def test_rust_format(self) -> None:
        """Header, help and note lines."""
        output = DiagnosticFormatter().format(ErrorTemplate.identifier_empty())
        lines = output.splitlines()
        assert lines[0] == "error[IDENTIFIER_EMPTY]: Locale identifier is empty"
        assert lines[1].startswith("  = help: ")
        assert lines[2].startswith("  = note: see https://")

    def test_rust_format_with_position(self) -> None:
        """Positions appear as an arrow line."""
        output = DiagnosticFormatter().format(ErrorTemplate.rule_unexpected_end("a value", 4))
        assert "  --> position 4" in output.splitlines()

    def test_simple_format(self) -> None:
        """One line: code name and message."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert (
            formatter.format(ErrorTemplate.identifier_empty())
            == "IDENTIFIER_EMPTY: Locale identifier is empty"
        )

    def test_json_format(self) -> None:
        """JSON carries name, value and optional fields."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.rule_unexpected_token("q", "x", 3)))
        assert data["code"] == "RULE_UNEXPECTED_TOKEN"
        assert data["code_value"] == 3001
        assert data["position"] == 3
        assert "hint" not in data

    def test_truncation(self) -> None:
        """Long messages are cut when a maximum length is set."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, max_content_length=10)
        diagnostic = Diagnostic(code=DiagnosticCode.LOAD_INVALID_ENTRY, message="x" * 50)
        assert formatter.format(diagnostic) == "LOAD_INVALID_ENTRY: " + "x" * 10 + "..."


class TestFormatReturnedErrors:
    """FrozenLocaleError values render with their resolution context."""

    @pytest.fixture
    def empty_region_error(self) -> FrozenLocaleError:
        """The error returned for an empty region id."""
        _, errors = resolve_region_fact(Dataset(), "", RegionCollection.PAPER_SIZES)
        return errors[0]

    def test_simple(self, empty_region_error: FrozenLocaleError) -> None:
        """One line naming the identifier and collection."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format_error(empty_region_error) == (
            "IDENTIFIER_EMPTY: Locale identifier is empty "
            "[identifier='', collection=paper_sizes]"
        )

    def test_rust(self, empty_region_error: FrozenLocaleError) -> None:
        """The diagnostic lines are followed by a context line."""
        lines = DiagnosticFormatter().format_error(empty_region_error).splitlines()
        assert lines[0] == "error[IDENTIFIER_EMPTY]: Locale identifier is empty"
        assert lines[-1] == "  = context: identifier '', collection 'paper_sizes'"

    def test_json(self) -> None:
        """JSON merges category, diagnostic fields and context."""
        _, errors = resolve_locale_fact(Dataset(), "1x", LocaleCollection.PLURAL_RULES)
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format_error(errors[0]))
        assert data["category"] == "identifier"
        assert data["code"] == "IDENTIFIER_MALFORMED"
        assert data["identifier"] == "1x"
        assert data["collection"] == "plural_rule_sets"
        assert "source" not in data

    def test_without_diagnostic(self) -> None:
        """Errors built from a plain message are labelled by category."""
        error = FrozenLocaleError(
            "no such file", ErrorCategory.LOAD, context=FrozenErrorContext(source="x.json")
        )
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format_error(error) == "load: no such file [identifier='', source=x.json]"
        data = json.loads(
            DiagnosticFormatter(output_format=OutputFormat.JSON).format_error(error)
        )
        assert data == {
            "category": "load",
            "message": "no such file",
            "identifier": "",
            "source": "x.json",
        }

    def test_format_errors(self) -> None:
        """JSON output puts one error per line."""
        _, first = resolve_region_fact(Dataset(), "", RegionCollection.PAPER_SIZES)
        _, second = resolve_region_fact(Dataset(), "U S", RegionCollection.PAPER_SIZES)
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        lines = formatter.format_errors(first + second).splitlines()
        assert [json.loads(line)["identifier"] for line in lines] == ["", "U S"]


# ============================================================================
# ERRORS
# ============================================================================


class TestErrorHierarchy:
    """Exception classes and their diagnostics."""

    @pytest.mark.parametrize(
        "error_type", [InvalidIdentifierError, InvalidArgumentError, PluralRuleSyntaxError]
    )
    def test_value_errors(self, error_type: type[LocaleDataError]) -> None:
        """Argument-shaped errors are also ValueErrors."""
        assert issubclass(error_type, ValueError)
        assert issubclass(error_type, LocaleDataError)

    def test_dataset_load_error_is_not_value_error(self) -> None:
        """Load failures are their own kind."""
        assert not issubclass(DatasetLoadError, ValueError)

    def test_message_from_diagnostic(self) -> None:
        """str() of an error built from a Diagnostic is the formatted diagnostic."""
        error = InvalidArgumentError(ErrorTemplate.default_dataset_loaded())
        assert str(error).startswith("error[DEFAULT_DATASET_LOADED]: ")
        assert error.diagnostic is not None

    def test_plain_message(self) -> None:
        """Plain strings carry no diagnostic."""
        error = DatasetLoadError("gone", source="facts.json")
        assert str(error) == "gone"
        assert error.diagnostic is None
        assert error.source == "facts.json"


class TestFrozenLocaleError:
    """Immutable, hashable error values."""

    def test_immutable(self) -> None:
        """Attributes cannot be reassigned."""
        error = FrozenLocaleError("bad", ErrorCategory.IDENTIFIER)
        with pytest.raises(AttributeError):
            error.category = ErrorCategory.LOAD  # type: ignore[misc]

    def test_from_exception(self) -> None:
        """Raised errors freeze with their diagnostic."""
        raised = InvalidIdentifierError(ErrorTemplate.identifier_empty())
        context = FrozenErrorContext(identifier="", collection="paper_sizes")
        frozen = FrozenLocaleError.from_exception(raised, ErrorCategory.IDENTIFIER, context)
        assert str(frozen) == str(raised)
        assert frozen.diagnostic is raised.diagnostic
        assert frozen.context.collection == "paper_sizes"

    def test_default_context(self) -> None:
        """A missing context becomes an empty one."""
        assert FrozenLocaleError("x", ErrorCategory.LOAD).context == FrozenErrorContext()

    def test_repr(self) -> None:
        """repr names the category."""
        error = FrozenLocaleError("bad", ErrorCategory.ARGUMENT)
        assert repr(error) == "FrozenLocaleError('bad', category=argument)"

    @given(error=frozen_errors())
    def test_equal_copies_hash_equal(self, error: FrozenLocaleError) -> None:
        """Equality and hash depend on content only."""
        copy = FrozenLocaleError(
            str(error), error.category, diagnostic=None, context=error.context
        )
        assert copy == error
        assert hash(copy) == hash(error)
        assert len({error, copy}) == 1

    def test_not_equal_to_other_types(self) -> None:
        """Comparison with unrelated objects is not supported."""
        assert FrozenLocaleError("x", ErrorCategory.LOAD) != "x"
