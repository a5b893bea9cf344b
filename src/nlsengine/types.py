"""Data model for message resolution and build aggregation.

Provides PEP 695 type aliases for identifiers and maps, the Flat/Nested
tagged variant for fetched message bundles, and the objects delivered to
consumers by NLSPlugin.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Protocol, TypeAlias

from nlsengine.diagnostics import ErrorTemplate, ResourceFormatError
from nlsengine.enums import BundleShape

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Identifiers and maps
    "ModuleId",
    "LanguageTag",
    "LanguageMap",
    "Messages",
    "KeyEntry",
    "BuildMessageMap",
    "BuildKeyMap",
    "EntryPointMap",
    # Localize keys
    "LocalizeInfo",
    "LocalizeKey",
    "key_name",
    # Callables
    "LocalizeFunc",
    "ScopedLocalizer",
    "LanguageConfigurationGetter",
    # Bundles
    "FlatBundle",
    "NestedBundle",
    "MessageBundle",
    "bundle_from_data",
    # Delivered objects
    "ConsumerAPI",
    "LocalizedBundle",
]

ModuleId: TypeAlias = str
"""Identifier of a loadable module (e.g., 'vs/editor/common/model')."""

LanguageTag: TypeAlias = str
"""Language tag used as resource suffix (e.g., 'de', 'zh-tw', 'i-default')."""

LanguageMap: TypeAlias = Mapping[ModuleId, LanguageTag]
"""Module id (or '*') to language tag."""

Messages: TypeAlias = tuple[str, ...]
"""Ordered message templates of one module."""

KeyEntry: TypeAlias = str | Mapping[str, Any]
"""Companion key: a bare key or a {'key': ..., 'comment': [...]} object."""

BuildMessageMap: TypeAlias = dict[ModuleId, Messages]
BuildKeyMap: TypeAlias = dict[ModuleId, tuple[KeyEntry, ...]]
EntryPointMap: TypeAlias = dict[ModuleId, list[ModuleId]]


@dataclass(frozen=True, slots=True)
class LocalizeInfo:
    """Symbolic localize key with translator comments.

    Attributes:
        key: Symbolic message key
        comment: Notes for translators
    """

    key: str
    comment: tuple[str, ...] = ()

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> LocalizeInfo:
        """Build from a decoded key-list entry ({'key': ..., 'comment': [...]})."""
        return cls(key=str(data["key"]), comment=tuple(data.get("comment") or ()))


LocalizeKey: TypeAlias = LocalizeInfo | str | int
"""Any accepted way of addressing a message at a call site."""


def key_name(entry: KeyEntry | LocalizeInfo) -> str:
    """Return the symbolic key of a key-list entry.

    Example:
        >>> key_name("title")
        'title'
        >>> key_name({"key": "title", "comment": ["Window title"]})
        'title'
    """
    match entry:
        case LocalizeInfo(key=key):
            return key
        case str():
            return entry
        case _:
            return str(entry["key"])


class LocalizeFunc(Protocol):
    """Unscoped localize: formats the message passed at the call site."""

    def __call__(self, key: Any, message: str, /, *args: object) -> str: ...


class ScopedLocalizer(Protocol):
    """Localize bound to one bundle slice, addressed by position."""

    def __call__(self, index: int, default_value: str | None, /, *args: object) -> str: ...


LanguageConfigurationGetter: TypeAlias = Callable[[], Mapping[str, str] | None]


@dataclass(frozen=True, slots=True)
class FlatBundle:
    """Message templates of a single module, in key-list order."""

    messages: Messages

    @property
    def shape(self) -> BundleShape:
        """Variant tag."""
        return BundleShape.FLAT


@dataclass(frozen=True, slots=True)
class NestedBundle:
    """Message templates of several modules served by one resource."""

    modules: Mapping[ModuleId, Messages]

    @property
    def shape(self) -> BundleShape:
        """Variant tag."""
        return BundleShape.NESTED


MessageBundle: TypeAlias = FlatBundle | NestedBundle


def bundle_from_data(data: object, resource_name: str = "<unknown>") -> MessageBundle:
    """Convert a decoded loader payload into a MessageBundle.

    Lists become FlatBundle, mappings become NestedBundle, existing bundles
    pass through unchanged.

    Args:
        data: Payload returned by the resource loader
        resource_name: Resource the payload came from (for diagnostics)

    Returns:
        FlatBundle or NestedBundle

    Raises:
        ResourceFormatError: If data is neither a sequence nor a mapping
    """
    match data:
        case FlatBundle() | NestedBundle():
            return data
        case str() | bytes():
            raise ResourceFormatError(ErrorTemplate.invalid_resource_shape(resource_name, data))
        case Mapping():
            modules = {str(module_id): tuple(messages) for module_id, messages in data.items()}
            return NestedBundle(MappingProxyType(modules))
        case Sequence():
            return FlatBundle(tuple(data))
        case _:
            raise ResourceFormatError(ErrorTemplate.invalid_resource_shape(resource_name, data))


@dataclass(frozen=True, slots=True)
class ConsumerAPI:
    """Object delivered for root requests and by NLSPlugin.create().

    Attributes:
        localize: Localize function (scoped or generic)
        get_language_configuration: Returns configured available languages
    """

    localize: Callable[..., str]
    get_language_configuration: LanguageConfigurationGetter


@dataclass(frozen=True, slots=True)
class LocalizedBundle:
    """Runtime-mode delivery: fetched bundle plus a localizer bound to it.

    Attributes:
        module_id: Module the bundle was requested for
        bundle: Fetched bundle (flat or nested)
        localize: Scoped localizer over this module's messages
        get_language_configuration: Returns configured available languages
    """

    module_id: ModuleId
    bundle: MessageBundle
    localize: ScopedLocalizer
    get_language_configuration: LanguageConfigurationGetter

    @property
    def messages(self) -> Messages:
        """Messages the localizer is bound to."""
        match self.bundle:
            case FlatBundle(messages=messages):
                return messages
            case NestedBundle(modules=modules):
                return modules[self.module_id]
