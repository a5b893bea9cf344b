"""nlsengine exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Runtime lookups prefer returning diagnostic strings; these exceptions cover
the few cases where no sensible string exists.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "BuildCaptureError",
    "ConfigurationError",
    "MessageIndexError",
    "MissingModuleError",
    "NLSError",
    "ResourceFormatError",
]


class NLSError(Exception):
    """Base exception for all nlsengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NLSError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MessageIndexError(NLSError, IndexError):
    """Scoped localizer called with an index outside its bundle slice.

    Also an IndexError so callers treating bundles as sequences can catch
    the builtin type.
    """


class ResourceFormatError(NLSError, TypeError):
    """Loader delivered a payload that is neither a list nor a mapping."""


class MissingModuleError(NLSError, LookupError):
    """Nested bundle has no messages for the requested module."""


class BuildCaptureError(NLSError):
    """Captured messages and keys for a module disagree in length."""


class ConfigurationError(NLSError, ValueError):
    """Plugin configuration holds an invalid value."""
