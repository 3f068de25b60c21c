"""Custom exceptions for the i18n system.

Provides the error taxonomy surfaced by message formatting, locale
negotiation and catalog loading.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            localized = negotiate(header, table)
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class FormatError(I18nError):
    """Raised when a message pattern cannot be formatted with its arguments."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"{reason}: {pattern!r}")


class UnmatchedCurlyBracketError(FormatError):
    """Raised when a pattern contains a stray or missing curly bracket.

    Example:
        >>> try_format("{0", ["x"])
        Traceback (most recent call last):
        ...
        UnmatchedCurlyBracketError: Unmatched curly bracket: '{0'
    """

    def __init__(self, pattern: str):
        super().__init__(pattern, "Unmatched curly bracket")


class InvalidPositionalArgumentError(FormatError):
    """Raised when a placeholder index is malformed or out of range.

    Example:
        >>> try_format("{5}", ["only-one"])
        Traceback (most recent call last):
        ...
        InvalidPositionalArgumentError: Invalid positional argument {5}: '{5}'
    """

    def __init__(self, pattern: str, specifier: str):
        self.specifier = specifier
        super().__init__(pattern, f"Invalid positional argument {{{specifier}}}")


class MissingTranslationError(I18nError):
    """Raised when neither a preferred locale nor the default one is loaded.

    This is a deployment problem (incomplete catalog set), not a client error.
    """

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Could not find translations for {locale}")


class CatalogLoadError(I18nError):
    """Raised when a compiled or embedded catalog cannot be loaded."""

    def __init__(self, locale: str, path: str, reason: str):
        self.locale = locale
        self.path = path
        super().__init__(
            f"Error while loading catalog ({locale}) from {path}: {reason}"
        )
