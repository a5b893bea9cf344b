"""Language resolution and resource naming.

A language map assigns a language tag to a module id, with '*' as the
fallback for modules without their own entry. The resolved tag selects the
resource suffix: '<module>.nls' for untranslated messages, '<module>.nls.<tag>'
for translated ones.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from nlsengine.constants import DEFAULT_TAG, KEYS_SUFFIX, NLS_SUFFIX, WILDCARD_KEY
from nlsengine.types import LanguageMap, LanguageTag, ModuleId

__all__ = [
    "keys_resource_name",
    "resolve_language",
    "resource_name",
    "resource_suffix",
]


def resolve_language(language_map: LanguageMap | None, module_id: ModuleId) -> LanguageTag | None:
    """Pick the effective language for a module.

    Lookup order: exact module id, then the wildcard entry. Empty tags count
    as absent. An empty module id has no language. Never raises.

    Example:
        >>> resolve_language({"a": "fr", "*": "de"}, "a")
        'fr'
        >>> resolve_language({"a": "fr", "*": "de"}, "b")
        'de'
        >>> resolve_language({}, "a") is None
        True
    """
    if not language_map or not module_id:
        return None
    language = language_map.get(module_id)
    if language:
        return language
    language = language_map.get(WILDCARD_KEY)
    if language:
        return language
    return None


def resource_suffix(language: LanguageTag | None) -> str:
    """Return the resource suffix for a resolved language.

    Example:
        >>> resource_suffix("de")
        '.nls.de'
        >>> resource_suffix("i-default")
        '.nls'
    """
    if language is None or language == DEFAULT_TAG:
        return NLS_SUFFIX
    return f"{NLS_SUFFIX}.{language}"


def resource_name(module_id: ModuleId, language: LanguageTag | None = None) -> str:
    """Return the message resource name for a module and language."""
    return module_id + resource_suffix(language)


def keys_resource_name(module_id: ModuleId) -> str:
    """Return the companion key resource name for a module."""
    return module_id + KEYS_SUFFIX
