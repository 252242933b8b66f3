"""Storage-level exceptions."""


class NotFoundError(ValueError):
    """Raised when a referenced row does not exist."""


class SourceLimitError(ValueError):
    """Raised when registering a source would exceed the configured maximum."""
