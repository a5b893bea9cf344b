"""Enumerations for nlsengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ResolutionMode(StrEnum):
    """Strategy used by NLSPlugin to satisfy a load request.

    StrEnum provides automatic string conversion: str(ResolutionMode.RUNTIME) == "runtime"
    """

    HOST_RESOURCE = "host_resource"
    """Host string service available: strings are looked up by symbolic key."""

    BUILD_CAPTURE = "build_capture"
    """Build in progress: messages and keys are captured into the build session."""

    RUNTIME = "runtime"
    """Default: language-specific bundle is fetched and wrapped in a localizer."""


class BundleShape(StrEnum):
    """Shape of a fetched message bundle.

    StrEnum provides automatic string conversion: str(BundleShape.FLAT) == "flat"
    """

    FLAT = "flat"
    """Ordered list of message templates for a single module."""

    NESTED = "nested"
    """Mapping of module id to message templates (one resource, many modules)."""


__all__ = [
    "BundleShape",
    "ResolutionMode",
]
