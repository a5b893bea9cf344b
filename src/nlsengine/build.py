"""Build-time aggregation of module messages.

A BuildSession lives for exactly one build. While modules are loaded in
build mode, NLSPlugin captures each module's messages and keys into the
session. During serialization every module is registered against the entry
point it is bundled into. Finally the session is drained into one bundle
file per entry point and a single metadata file.

Session invariants:
    - messages and keys of a captured module have equal length
    - a module's capture never changes after the first capture
    - entry point lists keep insertion order and may contain duplicates

Concurrency:
    Sessions are mutated from a single event loop only; captures of
    different modules may complete in any order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from nlsengine.constants import BUILD_LINE_SEPARATOR, BUNDLE_FILE_HEADER, NLS_SUFFIX
from nlsengine.diagnostics import BuildCaptureError, ErrorTemplate
from nlsengine.types import (
    BuildKeyMap,
    BuildMessageMap,
    EntryPointMap,
    KeyEntry,
    Messages,
    ModuleId,
)

__all__ = [
    "BuildSession",
    "render_bundle_file",
    "render_metadata",
    "render_module_stub",
]

logger = logging.getLogger(__name__)


def _freeze_key(entry: KeyEntry) -> KeyEntry:
    """Copy a key entry into a JSON-serializable value."""
    if isinstance(entry, Mapping):
        return {name: list(value) if name == "comment" else value for name, value in entry.items()}
    return str(entry)


class BuildSession:
    """Messages, keys and entry point membership captured during one build.

    Example:
        >>> session = BuildSession()
        >>> session.capture("vs/editor/find", ["Find", "Replace"], ["find", "replace"])
        >>> session.record_entry_point_dependency("vs/editor/main", "vs/editor/find")
        >>> session.emit_bundle("vs/editor/main")
        {'vs/editor/find': ['Find', 'Replace']}
        >>> session.emit_bundle("vs/other") is None
        True
    """

    __slots__ = ("_entry_points", "_keys", "_messages")

    def __init__(self) -> None:
        """Create an empty session."""
        self._messages: BuildMessageMap = {}
        self._keys: BuildKeyMap = {}
        self._entry_points: EntryPointMap = {}

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"BuildSession(modules={len(self._messages)}, "
            f"entry_points={len(self._entry_points)})"
        )

    def capture(
        self,
        module_id: ModuleId,
        messages: Sequence[str],
        keys: Sequence[KeyEntry],
    ) -> None:
        """Record a module's messages and keys.

        Capturing the same module again with identical data is a no-op.
        Capturing it with different data keeps the first capture and logs
        a warning.

        Args:
            module_id: Captured module
            messages: Message templates in key-list order
            keys: Companion key list

        Raises:
            BuildCaptureError: If messages and keys differ in length
        """
        frozen_messages: Messages = tuple(messages)
        frozen_keys = tuple(_freeze_key(entry) for entry in keys)
        if len(frozen_messages) != len(frozen_keys):
            raise BuildCaptureError(
                ErrorTemplate.capture_length_mismatch(
                    module_id, len(frozen_messages), len(frozen_keys)
                )
            )

        existing = self._messages.get(module_id)
        if existing is not None:
            if existing != frozen_messages or self._keys[module_id] != frozen_keys:
                logger.warning("%s", ErrorTemplate.capture_conflict(module_id).message)
            return

        self._messages[module_id] = frozen_messages
        self._keys[module_id] = frozen_keys
        logger.debug("Captured %d messages for %s", len(frozen_messages), module_id)

    def record_entry_point_dependency(self, entry_point: ModuleId, module_id: ModuleId) -> None:
        """Append module_id to the modules bundled into entry_point."""
        self._entry_points.setdefault(entry_point, []).append(module_id)

    def is_entry_point(self, module_id: ModuleId) -> bool:
        """Check whether any module was recorded against module_id."""
        return module_id in self._entry_points

    def dependents(self, entry_point: ModuleId) -> tuple[ModuleId, ...]:
        """Modules recorded against entry_point, in recording order."""
        return tuple(self._entry_points.get(entry_point, ()))

    def messages_for(self, module_id: ModuleId) -> Messages | None:
        """Captured messages of module_id, or None."""
        return self._messages.get(module_id)

    def keys_for(self, module_id: ModuleId) -> tuple[KeyEntry, ...] | None:
        """Captured keys of module_id, or None."""
        return self._keys.get(module_id)

    @property
    def captured_modules(self) -> tuple[ModuleId, ...]:
        """Captured module ids, in capture order."""
        return tuple(self._messages)

    @property
    def entry_points(self) -> tuple[ModuleId, ...]:
        """Entry points with at least one recorded module."""
        return tuple(self._entry_points)

    def emit_bundle(self, entry_point: ModuleId) -> dict[ModuleId, list[str] | None] | None:
        """Collect the messages of every module bundled into entry_point.

        Args:
            entry_point: Entry point module id

        Returns:
            Module id to message list, or None when entry_point has no
            recorded modules. Modules never captured map to None.
        """
        if entry_point not in self._entry_points:
            logger.debug("%s", ErrorTemplate.entry_point_missing(entry_point).message)
            return None

        data: dict[ModuleId, list[str] | None] = {}
        for module_id in self._entry_points[entry_point]:
            messages = self._messages.get(module_id)
            if messages is None:
                logger.warning(
                    "%s", ErrorTemplate.dependent_not_captured(module_id, entry_point).message
                )
                data[module_id] = None
            else:
                data[module_id] = list(messages)
        return data

    def finalize(self) -> dict[str, Any]:
        """Return the build manifest: all keys, messages and entry points."""
        return {
            "keys": {module_id: list(keys) for module_id, keys in self._keys.items()},
            "messages": {
                module_id: list(messages) for module_id, messages in self._messages.items()
            },
            "bundles": {
                entry_point: list(modules) for entry_point, modules in self._entry_points.items()
            },
        }


def render_module_stub(plugin_name: str, module_name: str, entry_point: ModuleId) -> str:
    """Render the module definition of a module bundled into entry_point.

    At runtime the stub pulls the entry point's bundle and derives this
    module's localizer from it with create().

    Example:
        >>> print(render_module_stub("vs/nls", "vs/a", "vs/main"))
        define(["vs/nls", "vs/nls!vs/main"], function(nls, data) { return nls.create("vs/a", data); });
    """
    dependencies = json.dumps([plugin_name, f"{plugin_name}!{entry_point}"])
    return (
        f"define({dependencies}, function(nls, data) "
        f"{{ return nls.create({json.dumps(module_name)}, data); }});"
    )


def render_bundle_file(module_name: ModuleId, data: Mapping[ModuleId, Any]) -> str:
    """Render the '<entry>.nls.js' bundle file of an entry point.

    Lines are CRLF-separated; the payload is tab-indented JSON.
    """
    payload = json.dumps(data, indent="\t", ensure_ascii=False)
    define = f"define({json.dumps(module_name + NLS_SUFFIX)}, {payload});"
    return BUILD_LINE_SEPARATOR.join((*BUNDLE_FILE_HEADER, define))


def render_metadata(metadata: Mapping[str, Any]) -> str:
    """Render the build manifest as tab-indented JSON."""
    return json.dumps(metadata, indent="\t", ensure_ascii=False)
