"""Locale identifier decomposition.

LocaleKey splits a locale identifier into language, script, region and
variant subtags. It is not a BCP-47 validator: it recognizes
subtags by position and shape only.

Accepts both BCP-47 ("en-US") and POSIX/Babel ("en_US") separators.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from cldrfacts.constants import CANONICAL_SEPARATOR, MAX_IDENTIFIER_LENGTH
from cldrfacts.diagnostics import ErrorTemplate, InvalidIdentifierError

__all__ = ["LocaleKey", "language_of", "split_subtags"]

_SEPARATOR_PATTERN = re.compile(r"[-_]")


def split_subtags(identifier: str) -> list[str]:
    """Split an identifier on "-" and "_".

    Example:
        >>> split_subtags("zh_Hans-CN")
        ['zh', 'Hans', 'CN']
    """
    return _SEPARATOR_PATTERN.split(identifier)


def _is_script(subtag: str) -> bool:
    return len(subtag) == 4 and subtag.isascii() and subtag.isalpha()


def _is_region(subtag: str) -> bool:
    if len(subtag) == 2:
        return subtag.isascii() and subtag.isalpha()
    return len(subtag) == 3 and subtag.isascii() and subtag.isdigit()


@dataclass(frozen=True, slots=True)
class LocaleKey:
    """Locale identifier decomposed into subtags.

    Immutable, hashable. Use LocaleKey.parse() to construct from a string.

    Attributes:
        language: Lowercased language subtag (e.g. "en", "kok")
        script: Title-cased script subtag (e.g. "Hans") or None
        region: Uppercased region subtag (e.g. "US", "419") or None
        variant: Remaining subtags joined with "-" or None

    Examples:
        >>> LocaleKey.parse("az-Cyrl-AZ")
        LocaleKey(language='az', script='Cyrl', region='AZ', variant=None)
        >>> LocaleKey.parse("de-DE_phoneb").variant
        'phoneb'
        >>> LocaleKey.parse("en").is_neutral
        True
    """

    language: str
    script: str | None = None
    region: str | None = None
    variant: str | None = None

    @property
    def is_neutral(self) -> bool:
        """True when the identifier names no region."""
        return self.region is None

    @property
    def tag(self) -> str:
        """Canonical BCP-47 style tag rebuilt from the subtags."""
        parts = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        if self.variant:
            parts.append(self.variant)
        return CANONICAL_SEPARATOR.join(parts)

    def __str__(self) -> str:
        return self.tag

    @classmethod
    def parse(cls, identifier: str, *, neutral: bool | None = None) -> LocaleKey:
        """Decompose a locale identifier.

        Args:
            identifier: Locale identifier such as "en", "en-US", "zh_Hans_CN"
            neutral: Caller's knowledge of whether the locale is neutral.
                None derives region presence from subtag shape (2 letters
                or 3 digits). True never recognizes a region. False takes the
                first subtag after language/script as the region whatever
                its shape.

        Returns:
            LocaleKey for the identifier

        Raises:
            InvalidIdentifierError: If identifier is empty, too long, has an
                empty subtag, or its language subtag is not alphabetic
        """
        stripped = identifier.strip() if isinstance(identifier, str) else ""
        if not stripped:
            raise InvalidIdentifierError(ErrorTemplate.identifier_empty())
        if len(stripped) > MAX_IDENTIFIER_LENGTH:
            raise InvalidIdentifierError(
                ErrorTemplate.identifier_too_long(len(stripped), MAX_IDENTIFIER_LENGTH)
            )

        subtags = split_subtags(stripped)
        if any(not subtag for subtag in subtags):
            raise InvalidIdentifierError(
                ErrorTemplate.identifier_malformed(identifier, "empty subtag")
            )

        language = subtags[0]
        if not (language.isascii() and language.isalpha()):
            raise InvalidIdentifierError(
                ErrorTemplate.identifier_malformed(identifier, "language subtag must be letters")
            )

        rest = subtags[1:]
        script: str | None = None
        region: str | None = None

        if rest and _is_script(rest[0]):
            script = rest.pop(0).title()

        if rest and neutral is not True and (neutral is False or _is_region(rest[0])):
            region = rest.pop(0).upper()

        variant = CANONICAL_SEPARATOR.join(rest).lower() if rest else None
        return cls(language=language.lower(), script=script, region=region, variant=variant)


def language_of(identifier: str) -> str:
    """Lowercased language subtag of a locale identifier.

    Shorthand for ``LocaleKey.parse(identifier).language``.

    Raises:
        InvalidIdentifierError: If LocaleKey.parse() rejects identifier

    Example:
        >>> language_of("EN_us")
        'en'
        >>> language_of("kok")
        'kok'
    """
    return LocaleKey.parse(identifier).language
