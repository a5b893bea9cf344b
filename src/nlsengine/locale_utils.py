"""Locale utilities for language tags.

Language tags in resource names use lowercase BCP-47 style ('de', 'pt-br',
'zh-tw'); Babel expects POSIX identifiers ('pt_BR'). This module converts
between the two and checks tags against CLDR via Babel.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "is_known_language",
    "normalize_locale",
    "to_language_tag",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-br")
        'pt_br'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def to_language_tag(locale_code: str) -> str:
    """Convert a POSIX or BCP-47 locale code to a resource language tag.

    Example:
        >>> to_language_tag("pt_BR")
        'pt-br'
        >>> to_language_tag("de")
        'de'
    """
    return locale_code.replace("_", "-").lower()


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def is_known_language(language: str) -> bool:
    """Check whether a language tag names a CLDR locale.

    Example:
        >>> is_known_language("zh-tw")
        True
        >>> is_known_language("xx")
        False
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        get_babel_locale(language)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return True


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale.split(".")[0])
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            # Strip encoding suffix (e.g., ".UTF-8")
            return normalize_locale(value.split(".")[0])

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en_US"
