"""Exceptions raised by the kernel."""

from coderunner.codes import ErrorCode


class ResolverError(ValueError):
    """Base class for kernel errors; ``code`` identifies the failure kind."""
    code: ErrorCode = ErrorCode.INVALID_INPUT


class InvalidInputError(ResolverError):
    """A source file set violates its construction invariants (e.g. it is empty)."""
    code = ErrorCode.INVALID_INPUT


class UnknownLanguageError(ResolverError):
    """A language name does not match any supported language."""
    code = ErrorCode.UNKNOWN_LANGUAGE
