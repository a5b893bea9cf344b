"""Positional placeholder substitution and pseudo-localization.

Templates address arguments by position: ``"Hello {0}, you have {1} items"``.
Placeholders whose index has no (or a None) argument are left as literal
text, so a missing argument never raises.

Pseudo-localization is a process-wide switch. When on, every formatted
string has its lowercase vowels doubled and is wrapped in fullwidth
brackets, which makes strings that bypass localization easy to spot.

Thread Safety:
    The pseudo flag is guarded by a lock. Toggling it affects every
    subsequent format_message() call and never strings already produced.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
import threading
from collections.abc import Sequence

from nlsengine.constants import PSEUDO_CLOSE, PSEUDO_OPEN, PSEUDO_VOWELS

__all__ = [
    "format_message",
    "is_pseudo_translation",
    "pseudo_localize",
    "set_pseudo_translation",
]

_PLACEHOLDER_PATTERN = re.compile(r"\{([0-9]+)\}")
_VOWEL_PATTERN = re.compile(f"[{PSEUDO_VOWELS}]")

_pseudo_lock = threading.Lock()
_pseudo_enabled = False


def set_pseudo_translation(value: bool) -> None:
    """Enable or disable pseudo-localization for all later format calls."""
    global _pseudo_enabled  # noqa: PLW0603 - single process-wide switch
    with _pseudo_lock:
        _pseudo_enabled = bool(value)


def is_pseudo_translation() -> bool:
    """Return whether pseudo-localization is currently enabled."""
    with _pseudo_lock:
        return _pseudo_enabled


def pseudo_localize(text: str) -> str:
    """Apply the pseudo-localization transform to text.

    Example:
        >>> pseudo_localize("Save file")
        '［Saavee fiilee］'
    """
    return PSEUDO_OPEN + _VOWEL_PATTERN.sub(r"\g<0>\g<0>", text) + PSEUDO_CLOSE


def format_message(template: str, args: Sequence[object] = ()) -> str:
    """Substitute positional placeholders in a message template.

    Args:
        template: Message template with ``{N}`` placeholders
        args: Positional arguments; ``args[N]`` replaces ``{N}``

    Returns:
        Formatted message, pseudo-localized when the switch is on

    Example:
        >>> format_message("Hello {0}, you have {1} items", ["Ana", "3"])
        'Hello Ana, you have 3 items'
        >>> format_message("Missing {2}", ["a"])
        'Missing {2}'
    """
    if len(args) == 0:
        result = template
    else:

        # Longer digit strings cannot index args; skip int() on them.
        max_digits = len(str(len(args)))

        def _replace(match: re.Match[str]) -> str:
            digits = match.group(1).lstrip("0") or "0"
            if len(digits) > max_digits:
                return match.group(0)
            index = int(digits)
            if index < len(args) and args[index] is not None:
                return str(args[index])
            return match.group(0)

        result = _PLACEHOLDER_PATTERN.sub(_replace, template)

    if is_pseudo_translation():
        result = pseudo_localize(result)

    return result
