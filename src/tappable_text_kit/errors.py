from __future__ import annotations


class TtkError(Exception):
    """
    Base error class for tappable-text-kit.

    Callers can catch TtkError for SDK-level issues while still matching built-in exception
    types via multiple inheritance.
    """


class InvalidConfigError(ValueError, TtkError):
    """
    Raised when a user-provided config/argument is invalid.

    Subclasses ValueError for backward compatibility.
    """


class InvalidInputError(TypeError, TtkError):
    """
    Raised when the pipeline is handed something other than a string.
    """


class CollaboratorError(RuntimeError, TtkError):
    """
    Raised when an injected link tester or entity extractor fails its startup probe.
    """


class OptionalDependencyError(ImportError, TtkError):
    """
    Raised when an optional dependency is required but not installed.
    """
