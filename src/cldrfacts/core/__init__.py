"""Core value types shared across the data and runtime layers.

Exports:
    LocaleKey: Locale identifier decomposed into subtags
    language_of: Language subtag of an identifier
    split_subtags: Split an identifier on "-" and "_"

Python 3.13+.
"""

from .locale_key import LocaleKey, language_of, split_subtags

__all__ = ["LocaleKey", "language_of", "split_subtags"]
