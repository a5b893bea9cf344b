"""Diagnostic system for nlsengine errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    BuildCaptureError,
    ConfigurationError,
    MessageIndexError,
    MissingModuleError,
    NLSError,
    ResourceFormatError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "BuildCaptureError",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "MessageIndexError",
    "MissingModuleError",
    "NLSError",
    "OutputFormat",
    "ResourceFormatError",
]
