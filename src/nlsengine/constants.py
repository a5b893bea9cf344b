"""Shared constants for nlsengine.

Constants are grouped by domain:
- Language tags: reserved tag values in language maps
- Resource naming: suffixes used to derive resource names from module ids
- Pseudo-localization: glyphs and character set of the pseudo transform
- Build artifacts: names and headers of emitted build files
- Diagnostics: literal strings returned instead of raising

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Language tags
    "DEFAULT_TAG",
    "WILDCARD_KEY",
    # Configuration
    "CONFIG_NAMESPACE",
    # Resource naming
    "NLS_SUFFIX",
    "KEYS_SUFFIX",
    # Pseudo-localization
    "PSEUDO_OPEN",
    "PSEUDO_CLOSE",
    "PSEUDO_VOWELS",
    # Build artifacts
    "BUNDLE_FILE_SUFFIX",
    "METADATA_FILE_NAME",
    "BUNDLE_FILE_HEADER",
    "BUILD_LINE_SEPARATOR",
    # Diagnostics
    "UNKNOWN_KEY_MESSAGE",
    "UNKNOWN_INDEX_MESSAGE",
]

# ============================================================================
# LANGUAGE TAGS
# ============================================================================

# Language tag meaning "the untranslated resource": resolves to no suffix.
DEFAULT_TAG: str = "i-default"

# Language map key that applies to every module without an exact entry.
WILDCARD_KEY: str = "*"

# ============================================================================
# CONFIGURATION
# ============================================================================

# Reserved key of the loader configuration holding this plugin's settings.
CONFIG_NAMESPACE: str = "vs/nls"

# ============================================================================
# RESOURCE NAMING
# ============================================================================

# <module>.nls          untranslated messages
# <module>.nls.<tag>    translated messages
# <module>.nls.keys     companion key list
NLS_SUFFIX: str = ".nls"
KEYS_SUFFIX: str = ".nls.keys"

# ============================================================================
# PSEUDO-LOCALIZATION
# ============================================================================

# U+FF3B and U+FF3D are the fullwidth representation of [ and ]
PSEUDO_OPEN: str = "［"
PSEUDO_CLOSE: str = "］"

# Lowercase only; uppercase vowels are left alone.
PSEUDO_VOWELS: str = "aouei"

# ============================================================================
# BUILD ARTIFACTS
# ============================================================================

BUNDLE_FILE_SUFFIX: str = ".nls.js"
METADATA_FILE_NAME: str = "nls.metadata.json"

BUNDLE_FILE_HEADER: tuple[str, ...] = (
    "/*---------------------------------------------------------",
    " * Copyright (c) Microsoft Corporation. All rights reserved.",
    " *--------------------------------------------------------*/",
)

BUILD_LINE_SEPARATOR: str = "\r\n"

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Returned as the "translated" string by the host-resource localizer.
# Format strings - use .format(key=...) / .format(index=...)
UNKNOWN_KEY_MESSAGE: str = "NLS error: unknown key {key}"
UNKNOWN_INDEX_MESSAGE: str = "NLS error unknown index {index}"
