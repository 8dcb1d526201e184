"""fpstd exception classes."""


class FpStdError(Exception):
    """Base exception for fpstd errors."""
    pass


class UnwrapError(FpStdError):
    """Attempted to unwrap an empty Option.

    Raised only by the ``unsafe_*`` helpers. ``str(error)`` is exactly the
    message the caller supplied.
    """
    pass
