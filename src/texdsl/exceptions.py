"""Custom exceptions for texdsl."""


class TexDslError(Exception):
    """Base exception for texdsl operations."""


class InvalidMarginPrefixError(TexDslError, ValueError):
    """Margin prefix used for text trimming is blank."""
