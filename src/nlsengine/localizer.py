"""Localize functions handed to consumers.

Two kinds exist:
- localize(): unscoped; formats the message passed at the call site.
- create_scoped_localizer(): bound to one bundle slice; the call site passes
  a position and its own default message, and the bundle's template at that
  position is formatted instead.

Index Policy:
    A scoped localizer raises MessageIndexError (an IndexError) for indexes
    outside its slice, including negative indexes, and for non-int indexes.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from nlsengine.diagnostics import ErrorTemplate, MessageIndexError
from nlsengine.formatting import format_message

if TYPE_CHECKING:
    from nlsengine.types import LocalizeKey, ScopedLocalizer

__all__ = [
    "create_scoped_localizer",
    "localize",
]


def localize(key: LocalizeKey, message: str, /, *args: object) -> str:
    """Format message with positional args; key documents the call site only.

    Example:
        >>> localize("greeting", "Hello {0}", "Ana")
        'Hello Ana'
    """
    return format_message(message, args)


def create_scoped_localizer(scope: Sequence[str]) -> ScopedLocalizer:
    """Create a localizer bound to a bundle slice.

    Args:
        scope: Message templates of one module

    Returns:
        Callable ``(index, default_value, *args) -> str``

    Example:
        >>> scoped = create_scoped_localizer(["Open {0}", "Close"])
        >>> scoped(0, "Open {0}", "file.txt")
        'Open file.txt'
    """
    messages = tuple(scope)

    def scoped_localize(index: int, default_value: str | None, /, *args: object) -> str:
        # bool is an int subclass but never a meaningful position
        if not isinstance(index, int) or isinstance(index, bool):
            raise MessageIndexError(ErrorTemplate.invalid_index_type(index))
        if not 0 <= index < len(messages):
            raise MessageIndexError(ErrorTemplate.index_out_of_range(index, len(messages)))
        return format_message(messages[index], args)

    return scoped_localize
