"""
Decostore Errors
================

Exception taxonomy shared by the decoration store and the document model.

Nothing here is retried: every operation in the store is a synchronous
computation or a plain registry/cache mutation, so an error either reaches the
caller unmodified or is a programming mistake on the caller's side.
"""


class DecorationError(Exception):
    """Base class for errors raised by decostore."""

    pass


class ConfigurationError(DecorationError):
    """Raised when the public API is used without a properly bound store."""

    pass


class NotFoundError(DecorationError, LookupError):
    """Raised when a node or path cannot be resolved in the current document."""

    pass
