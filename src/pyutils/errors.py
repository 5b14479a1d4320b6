"""Error definitions for pyutils.

Most helpers in this package report failure by returning ``None`` (or an
empty result). The errors below cover the few cases where a precondition is
violated and no sensible value exists.
"""

# ============================================================================
#                           General errors
# ============================================================================


class PyUtilsError(Exception):
    """Base class for pyutils errors."""


# ============================================================================
#                           Sequence errors
# ============================================================================


class EmptyContainerError(PyUtilsError, ValueError):
    """Raised when an extremum is requested from an empty sequence.

    Subclasses :class:`ValueError` so callers written against the builtin
    ``max()``/``min()`` keep catching it.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}() arg is an empty container")
        self.operation = operation
