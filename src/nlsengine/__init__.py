"""nlsengine - Localized message resolution and build-time bundling.

Resolves the localized messages of modules loaded by an asynchronous module
loader, formats them with positional arguments, and aggregates them at build
time into per-entry-point bundles plus a metadata manifest.

Public API:
    NLSPlugin - Loader plugin (runtime resolution and build serialization)
    NLSConfig - Plugin configuration
    BuildSession - Messages and entry points captured during one build
    format_message - Positional placeholder substitution
    set_pseudo_translation - Toggle pseudo-localization
    resolve_language - Language lookup for a module
    create_scoped_localizer - Localizer bound to a bundle slice

Exceptions:
    NLSError - Base exception class
    MessageIndexError - Scoped localizer index out of range
    ResourceFormatError - Loader payload with unexpected shape
    BuildCaptureError - Messages and keys disagree in length
    ConfigurationError - Invalid configuration

Submodules:
    nlsengine.types - Data model (bundles, keys, delivered objects)
    nlsengine.loading - Loader, host and writer protocols with implementations
    nlsengine.diagnostics - Diagnostic codes, templates and formatting
"""

from .build import BuildSession
from .config import NLSConfig
from .diagnostics import (
    BuildCaptureError,
    ConfigurationError,
    MessageIndexError,
    MissingModuleError,
    NLSError,
    ResourceFormatError,
)
from .enums import ResolutionMode
from .formatting import format_message, is_pseudo_translation, set_pseudo_translation
from .languages import resolve_language, resource_suffix
from .localizer import create_scoped_localizer, localize
from .orchestrator import NLSPlugin

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("nlsengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BuildCaptureError",
    "BuildSession",
    "ConfigurationError",
    "MessageIndexError",
    "MissingModuleError",
    "NLSConfig",
    "NLSError",
    "NLSPlugin",
    "ResolutionMode",
    "ResourceFormatError",
    "__version__",
    "create_scoped_localizer",
    "format_message",
    "is_pseudo_translation",
    "localize",
    "resolve_language",
    "resource_suffix",
    "set_pseudo_translation",
]
