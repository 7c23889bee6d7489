"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    _BCP47_URL = "https://www.rfc-editor.org/rfc/bcp/bcp47.txt"
    _PLURAL_URL = "https://unicode.org/reports/tr35/tr35-numbers.html#Language_Plural_Rules"
    _SUPPLEMENTAL_URL = "https://unicode.org/reports/tr35/tr35-info.html"

    # ------------------------------------------------------------------
    # Identifier errors
    # ------------------------------------------------------------------

    @staticmethod
    def identifier_empty() -> Diagnostic:
        """Locale or region identifier is empty or whitespace.

        Returns:
            Diagnostic for IDENTIFIER_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.IDENTIFIER_EMPTY,
            message="Locale identifier is empty",
            hint="Pass a language subtag such as 'en' or a locale such as 'en-US'",
            help_url=ErrorTemplate._BCP47_URL,
        )

    @staticmethod
    def identifier_malformed(identifier: str, reason: str) -> Diagnostic:
        """Identifier could not be decomposed into subtags.

        Args:
            identifier: The offending identifier
            reason: Which part was malformed

        Returns:
            Diagnostic for IDENTIFIER_MALFORMED
        """
        msg = f"Malformed locale identifier '{identifier}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.IDENTIFIER_MALFORMED,
            message=msg,
            hint="Subtags are separated by '-' or '_' and may not be empty",
            help_url=ErrorTemplate._BCP47_URL,
        )

    @staticmethod
    def identifier_too_long(length: int, limit: int) -> Diagnostic:
        """Identifier exceeds MAX_IDENTIFIER_LENGTH.

        Returns:
            Diagnostic for IDENTIFIER_TOO_LONG
        """
        msg = f"Locale identifier is {length} characters long (limit {limit})"
        return Diagnostic(code=DiagnosticCode.IDENTIFIER_TOO_LONG, message=msg)

    # ------------------------------------------------------------------
    # Argument errors
    # ------------------------------------------------------------------

    @staticmethod
    def region_required(locale_id: str, fact: str) -> Diagnostic:
        """A region-scoped fact was requested with a neutral locale.

        Args:
            locale_id: The neutral locale identifier
            fact: Name of the requested fact

        Returns:
            Diagnostic for REGION_REQUIRED
        """
        msg = f"Locale '{locale_id}' has no region subtag; {fact} is region-scoped"
        return Diagnostic(
            code=DiagnosticCode.REGION_REQUIRED,
            message=msg,
            hint=f"Pass a specific locale such as '{locale_id}-US', or a region id",
            help_url=ErrorTemplate._SUPPLEMENTAL_URL,
        )

    @staticmethod
    def unsupported_rule_kind(kind: object) -> Diagnostic:
        """Plural rule kind is neither cardinal nor ordinal.

        Returns:
            Diagnostic for UNSUPPORTED_RULE_KIND
        """
        msg = f"Unsupported plural rule kind: {kind!r}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_RULE_KIND,
            message=msg,
            hint="Use PluralRuleKind.CARDINAL or PluralRuleKind.ORDINAL",
            help_url=ErrorTemplate._PLURAL_URL,
        )

    @staticmethod
    def unsupported_operand_value(value: object) -> Diagnostic:
        """Value cannot be turned into plural operands.

        Returns:
            Diagnostic for UNSUPPORTED_OPERAND_VALUE
        """
        msg = f"Cannot derive plural operands from {type(value).__name__} value {value!r}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_OPERAND_VALUE,
            message=msg,
            hint="Pass an int, Decimal, finite float, or numeric string",
            help_url=ErrorTemplate._PLURAL_URL,
        )

    @staticmethod
    def unsupported_collection(collection: object, kind: str) -> Diagnostic:
        """Collection name is not a Dataset collection of the expected kind.

        Args:
            collection: The offending collection name
            kind: "region", "locale" or "temporal"

        Returns:
            Diagnostic for UNSUPPORTED_COLLECTION
        """
        msg = f"{collection!r} is not a {kind}-keyed dataset collection"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_COLLECTION,
            message=msg,
            hint=f"Use a member of the {kind.title()}Collection enum",
        )

    @staticmethod
    def invalid_time_of_day(value: object) -> Diagnostic:
        """Value is not a time of day.

        Returns:
            Diagnostic for INVALID_TIME_OF_DAY
        """
        msg = f"Cannot use {type(value).__name__} value {value!r} as a time of day"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TIME_OF_DAY,
            message=msg,
            hint="Pass a datetime.time, a datetime, or seconds past midnight (0..86399)",
        )

    @staticmethod
    def default_dataset_loaded() -> Diagnostic:
        """A loader was configured after the default dataset was loaded.

        Returns:
            Diagnostic for DEFAULT_DATASET_LOADED
        """
        return Diagnostic(
            code=DiagnosticCode.DEFAULT_DATASET_LOADED,
            message="The default dataset is already loaded; its loader can no longer change",
            hint="Call configure_default_dataset() before the first lookup, "
            "or reset_default_dataset() first (tests only)",
        )

    # ------------------------------------------------------------------
    # Rule syntax errors
    # ------------------------------------------------------------------

    @staticmethod
    def rule_unexpected_token(token: str, expected: str, position: int) -> Diagnostic:
        """Parser found a token it cannot use here.

        Returns:
            Diagnostic for RULE_UNEXPECTED_TOKEN
        """
        msg = f"Unexpected '{token}' in plural rule, expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.RULE_UNEXPECTED_TOKEN,
            message=msg,
            position=position,
            help_url=ErrorTemplate._PLURAL_URL,
        )

    @staticmethod
    def rule_unexpected_end(expected: str, position: int) -> Diagnostic:
        """Rule source ended in the middle of a relation.

        Returns:
            Diagnostic for RULE_UNEXPECTED_END
        """
        msg = f"Plural rule ended unexpectedly, expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.RULE_UNEXPECTED_END,
            message=msg,
            position=position,
            help_url=ErrorTemplate._PLURAL_URL,
        )

    @staticmethod
    def rule_unknown_operand(name: str, position: int) -> Diagnostic:
        """Operand letter is not one of n, i, v, w, f, t, c, e.

        Returns:
            Diagnostic for RULE_UNKNOWN_OPERAND
        """
        msg = f"Unknown plural operand '{name}'"
        return Diagnostic(
            code=DiagnosticCode.RULE_UNKNOWN_OPERAND,
            message=msg,
            hint="Valid operands are n, i, v, w, f, t, c, e",
            position=position,
            help_url=ErrorTemplate._PLURAL_URL,
        )

    @staticmethod
    def rule_invalid_range(low: int, high: int, position: int) -> Diagnostic:
        """Range lower bound exceeds upper bound.

        Returns:
            Diagnostic for RULE_INVALID_RANGE
        """
        msg = f"Invalid range {low}..{high}: lower bound exceeds upper bound"
        return Diagnostic(
            code=DiagnosticCode.RULE_INVALID_RANGE,
            message=msg,
            position=position,
            help_url=ErrorTemplate._PLURAL_URL,
        )

    @staticmethod
    def rule_too_long(length: int, limit: int) -> Diagnostic:
        """Rule source exceeds MAX_RULE_SOURCE_LENGTH.

        Returns:
            Diagnostic for RULE_TOO_LONG
        """
        msg = f"Plural rule source is {length} characters long (limit {limit})"
        return Diagnostic(code=DiagnosticCode.RULE_TOO_LONG, message=msg)

    # ------------------------------------------------------------------
    # Load errors
    # ------------------------------------------------------------------

    @staticmethod
    def load_source_unreadable(source: str, reason: str) -> Diagnostic:
        """Dataset file could not be read.

        Returns:
            Diagnostic for LOAD_SOURCE_UNREADABLE
        """
        msg = f"Cannot read dataset source '{source}': {reason}"
        return Diagnostic(code=DiagnosticCode.LOAD_SOURCE_UNREADABLE, message=msg)

    @staticmethod
    def load_invalid_json(source: str, reason: str) -> Diagnostic:
        """Dataset file is not valid JSON.

        Returns:
            Diagnostic for LOAD_INVALID_JSON
        """
        msg = f"Dataset source '{source}' is not valid JSON: {reason}"
        return Diagnostic(code=DiagnosticCode.LOAD_INVALID_JSON, message=msg)

    @staticmethod
    def load_invalid_entry(collection: str, index: int, reason: str) -> Diagnostic:
        """A record inside a dataset collection is malformed.

        Args:
            collection: Collection name (e.g. "postcode_regexes")
            index: Position of the record in the collection
            reason: What is wrong with it

        Returns:
            Diagnostic for LOAD_INVALID_ENTRY
        """
        msg = f"Invalid entry {index} in '{collection}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOAD_INVALID_ENTRY,
            message=msg,
            hint="Check the dataset against the collection layout in cldrfacts.data.loading",
        )
