"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (keys and indexes into loaded bundles)
        2000-2999: Resource errors (payloads delivered by the loader)
        3000-3999: Build errors (capture and artifact emission)
        4000-4999: Configuration errors
    """

    # Lookup errors (1000-1999)
    UNKNOWN_KEY = 1001
    UNKNOWN_INDEX = 1002
    INDEX_OUT_OF_RANGE = 1003
    INVALID_INDEX_TYPE = 1004

    # Resource errors (2000-2999)
    RESOURCE_INVALID_SHAPE = 2001
    RESOURCE_MODULE_MISSING = 2002
    RESOURCE_NOT_FLAT = 2003

    # Build errors (3000-3999)
    CAPTURE_LENGTH_MISMATCH = 3001
    CAPTURE_CONFLICT = 3002
    ENTRY_POINT_MISSING = 3003
    DEPENDENT_NOT_CAPTURED = 3004

    # Configuration errors (4000-4999)
    CONFIG_INVALID_TYPE = 4001
    CONFIG_UNKNOWN_LANGUAGE = 4002
    CONFIG_EMPTY_LANGUAGE = 4003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides rich error information for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        module_id: Module whose resources triggered the diagnostic
        resource_name: Resource name involved (e.g. 'vs/editor.nls.de')
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    module_id: str | None = None
    resource_name: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[INDEX_OUT_OF_RANGE]: Message index 7 out of range for 3 messages
              --> module vs/editor
              = help: Regenerate the bundle or check the call site index

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
