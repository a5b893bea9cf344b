"""NLSPlugin: message resolution for the module loader.

Implements the loader plugin that turns a module id into the localized
messages of that module. Each plugin works in one of three modes, chosen
once at construction:

- HOST_RESOURCE: a HostResources service was injected. Only the companion
  key resource is fetched; strings are looked up through the host by
  '<moduleKey>_<symbolicKey>'.
- BUILD_CAPTURE: the configuration says a build is running. Messages and
  keys are fetched and captured into the BuildSession; the raw messages
  are delivered.
- RUNTIME: the module's language is resolved, the matching bundle fetched
  and wrapped with a scoped localizer.

A request with an empty name bypasses all modes and delivers the generic
localizer.

The plugin also implements the build serialization contract (write,
write_file, finish_build), draining its BuildSession into artifacts.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeAlias

from nlsengine.build import BuildSession, render_bundle_file, render_metadata, render_module_stub
from nlsengine.config import NLSConfig
from nlsengine.constants import (
    BUNDLE_FILE_SUFFIX,
    METADATA_FILE_NAME,
    UNKNOWN_INDEX_MESSAGE,
    UNKNOWN_KEY_MESSAGE,
)
from nlsengine.diagnostics import ErrorTemplate, MissingModuleError, ResourceFormatError
from nlsengine.enums import ResolutionMode
from nlsengine.formatting import set_pseudo_translation
from nlsengine.languages import keys_resource_name, resolve_language, resource_name
from nlsengine.loading import ArtifactWriter, HostResources, ModuleWriter, ResourceLoader
from nlsengine.localizer import create_scoped_localizer, localize
from nlsengine.types import (
    ConsumerAPI,
    FlatBundle,
    LocalizedBundle,
    ModuleId,
    NestedBundle,
    bundle_from_data,
    key_name,
)

__all__ = ["NLSPlugin"]

logger = logging.getLogger(__name__)

LoadResult: TypeAlias = ConsumerAPI | LocalizedBundle | Sequence[str]


def _select_mode(host: HostResources | None, config: NLSConfig) -> ResolutionMode:
    if host is not None:
        return ResolutionMode.HOST_RESOURCE
    if config.is_build:
        return ResolutionMode.BUILD_CAPTURE
    return ResolutionMode.RUNTIME


def _require_sequence(payload: object, resource: str) -> Sequence[Any]:
    if isinstance(payload, (str, bytes, Mapping)) or not isinstance(payload, Sequence):
        raise ResourceFormatError(ErrorTemplate.resource_not_flat(resource, payload))
    return payload


def _create_host_localizer(host: HostResources, key_map: object) -> Callable[..., str]:
    """Create a localizer resolving (moduleKey, index) through the host service.

    key_map has the shape {moduleKey: {"keys": [symbolicKey, ...]}}. Unknown
    module keys and indexes produce diagnostic strings instead of raising.
    """
    modules: Mapping[str, Any] = key_map if isinstance(key_map, Mapping) else {}

    def host_localize(module_key: str, index: int, /, *args: object) -> str:
        entry = modules.get(module_key)
        if not entry or not isinstance(entry, Mapping):
            logger.warning("%s", ErrorTemplate.unknown_key(module_key).message)
            return UNKNOWN_KEY_MESSAGE.format(key=module_key)
        keys = entry.get("keys") or ()
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(keys):
            logger.warning("%s", ErrorTemplate.unknown_index(module_key, index, len(keys)).message)
            return UNKNOWN_INDEX_MESSAGE.format(index=index)
        sub_key = key_name(keys[index])
        return host.get_string(f"{module_key}_{sub_key}", *args)

    return host_localize


class NLSPlugin:
    """Module loader plugin resolving localized messages.

    Example - Runtime:
        >>> loader = DictResourceLoader({"vs/a.nls.de": ["Datei {0} öffnen"]})
        >>> plugin = NLSPlugin(NLSConfig(available_languages={"*": "de"}))
        >>> result = asyncio.run(plugin.load("vs/a", loader))
        >>> result.localize(0, "Open file {0}", "x.txt")
        'Datei x.txt öffnen'

    Example - Build:
        >>> session = BuildSession()
        >>> plugin = NLSPlugin(NLSConfig(is_build=True), session=session)
        >>> asyncio.run(plugin.load("vs/a", loader))  # captures into session
        >>> plugin.write("vs/nls", "vs/a", "vs/main", module_writer)
        >>> plugin.write_file("vs/nls", "vs/main", artifact_writer)
        >>> plugin.finish_build(artifact_writer)

    Attributes:
        config: Plugin configuration
        mode: Resolution mode chosen at construction
        session: Build session receiving captures and entry point records
    """

    __slots__ = ("_config", "_host", "_mode", "_session")

    def __init__(
        self,
        config: NLSConfig | None = None,
        *,
        host: HostResources | None = None,
        session: BuildSession | None = None,
    ) -> None:
        """Initialize the plugin.

        Args:
            config: Plugin configuration (default: runtime, no languages)
            host: Host string-lookup service; selects HOST_RESOURCE mode
            session: Build session to capture into (default: a new session)
        """
        self._config = config if config is not None else NLSConfig()
        self._host = host
        self._mode = _select_mode(host, self._config)
        self._session = session if session is not None else BuildSession()

        if self._config.pseudo:
            set_pseudo_translation(True)

        logger.info(
            "NLSPlugin initialized (mode=%s, languages=%s, pseudo=%s)",
            self._mode,
            "configured" if self._config.available_languages else "none",
            self._config.pseudo,
        )

    @classmethod
    def from_loader_config(
        cls,
        config: Mapping[str, Any] | None,
        *,
        host: HostResources | None = None,
        session: BuildSession | None = None,
        strict: bool = False,
    ) -> NLSPlugin:
        """Create a plugin from a module loader configuration object."""
        return cls(NLSConfig.from_loader_config(config, strict=strict), host=host, session=session)

    @property
    def config(self) -> NLSConfig:
        """Plugin configuration (read-only)."""
        return self._config

    @property
    def mode(self) -> ResolutionMode:
        """Resolution mode chosen at construction (read-only)."""
        return self._mode

    @property
    def session(self) -> BuildSession:
        """Build session (read-only)."""
        return self._session

    def get_language_configuration(self) -> Mapping[str, str] | None:
        """Return the configured available languages, or None."""
        return self._config.available_languages

    @staticmethod
    def set_pseudo_translation(value: bool) -> None:
        """Enable or disable pseudo-localization process-wide."""
        set_pseudo_translation(value)

    def create(self, key: ModuleId, bundles: Mapping[ModuleId, Sequence[str]]) -> ConsumerAPI:
        """Derive a module's localizer from an already loaded entry point bundle.

        Args:
            key: Module id whose messages to bind
            bundles: Entry point bundle (module id to messages)

        Returns:
            ConsumerAPI with a localizer scoped to bundles[key]

        Raises:
            MissingModuleError: If bundles has no entry for key
        """
        if key not in bundles:
            raise MissingModuleError(ErrorTemplate.module_missing(key, "<bundle>"))
        return ConsumerAPI(
            localize=create_scoped_localizer(bundles[key]),
            get_language_configuration=self.get_language_configuration,
        )

    async def load(self, name: ModuleId, loader: ResourceLoader) -> LoadResult:
        """Resolve the messages of a module.

        Args:
            name: Module id; empty for the generic localizer
            loader: Loader fetching resources by name

        Returns:
            ConsumerAPI for empty names and HOST_RESOURCE mode, the raw
            captured messages in BUILD_CAPTURE mode, LocalizedBundle in
            RUNTIME mode

        Raises:
            ResourceFormatError: If a fetched payload has the wrong shape
            MissingModuleError: If a nested bundle lacks the module
            BuildCaptureError: If captured messages and keys differ in length
            Exception: Anything raised by loader.load() propagates unchanged
        """
        if not name:
            return ConsumerAPI(
                localize=localize,
                get_language_configuration=self.get_language_configuration,
            )

        match self._mode:
            case ResolutionMode.HOST_RESOURCE:
                return await self._load_host_resource(name, loader)
            case ResolutionMode.BUILD_CAPTURE:
                return await self._load_build_capture(name, loader)
            case ResolutionMode.RUNTIME:
                return await self._load_runtime(name, loader)

    async def load_all(
        self, names: Iterable[ModuleId], loader: ResourceLoader
    ) -> list[LoadResult]:
        """Resolve several modules concurrently; results follow names order."""
        return list(await asyncio.gather(*(self.load(name, loader) for name in names)))

    async def _load_host_resource(self, name: ModuleId, loader: ResourceLoader) -> ConsumerAPI:
        assert self._host is not None  # HOST_RESOURCE mode implies a host
        resource = keys_resource_name(name)
        logger.debug("Loading %s for host lookup", resource)
        key_map = await loader.load(resource)
        return ConsumerAPI(
            localize=_create_host_localizer(self._host, key_map),
            get_language_configuration=self.get_language_configuration,
        )

    async def _load_build_capture(self, name: ModuleId, loader: ResourceLoader) -> Sequence[str]:
        messages_resource = resource_name(name)
        keys_resource = keys_resource_name(name)
        logger.debug("Capturing %s and %s", messages_resource, keys_resource)
        messages, keys = await asyncio.gather(
            loader.load(messages_resource), loader.load(keys_resource)
        )
        messages = _require_sequence(messages, messages_resource)
        keys = _require_sequence(keys, keys_resource)
        self._session.capture(name, messages, keys)
        return messages

    async def _load_runtime(self, name: ModuleId, loader: ResourceLoader) -> LocalizedBundle:
        language = resolve_language(self._config.available_languages, name)
        resource = resource_name(name, language)
        logger.debug("Loading %s (language=%s)", resource, language)
        bundle = bundle_from_data(await loader.load(resource), resource)

        match bundle:
            case FlatBundle(messages=messages):
                scope = messages
            case NestedBundle(modules=modules):
                if name not in modules:
                    raise MissingModuleError(ErrorTemplate.module_missing(name, resource))
                scope = modules[name]

        return LocalizedBundle(
            module_id=name,
            bundle=bundle,
            localize=create_scoped_localizer(scope),
            get_language_configuration=self.get_language_configuration,
        )

    def write(
        self,
        plugin_name: str,
        module_name: ModuleId,
        entry_point: ModuleId,
        writer: ModuleWriter,
    ) -> None:
        """Serialize a module during the build.

        Records module_name as bundled into entry_point. Modules other than
        the entry point itself get a stub definition that derives their
        localizer from the entry point's bundle at runtime.
        """
        self._session.record_entry_point_dependency(entry_point, module_name)
        if module_name != entry_point:
            writer.as_module(
                f"{plugin_name}!{module_name}",
                render_module_stub(plugin_name, module_name, entry_point),
            )

    def write_file(
        self,
        plugin_name: str,
        module_name: ModuleId,
        writer: ArtifactWriter,
        *,
        to_url: Callable[[str], str] | None = None,
    ) -> None:
        """Write the '<module>.nls.js' bundle file when module_name is an entry point.

        Args:
            plugin_name: Plugin name the module was requested through
            module_name: Module being written
            writer: Receives the bundle file
            to_url: Maps the bundle file name to the output path (default: identity)
        """
        data = self._session.emit_bundle(module_name)
        if data is None:
            return
        file_name = module_name + BUNDLE_FILE_SUFFIX
        if to_url is not None:
            file_name = to_url(file_name)
        writer(file_name, render_bundle_file(module_name, data))
        logger.debug("Wrote %s bundle %s (%d modules)", plugin_name, file_name, len(data))

    def finish_build(self, writer: ArtifactWriter) -> None:
        """Write the 'nls.metadata.json' build manifest."""
        writer(METADATA_FILE_NAME, render_metadata(self._session.finalize()))
        logger.info(
            "Build finished: %d modules, %d entry points",
            len(self._session.captured_modules),
            len(self._session.entry_points),
        )
