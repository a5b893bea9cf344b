"""Resource loading and artifact writing interfaces.

NLSPlugin never touches the file system or the network itself. It requests
resources by name from a ResourceLoader and hands build output to writers.
This module defines those protocols and the implementations used by tooling
and tests.

Components:
    ResourceLoader - Protocol for fetching decoded resources by name
    DictResourceLoader - In-memory loader
    PathResourceLoader - JSON files under a root directory, read off the event loop
    HostResources - Protocol for a host's native string-lookup service
    ModuleWriter - Protocol receiving synthetic module definitions
    ArtifactWriter - Protocol receiving build files
    MemoryModuleWriter, MemoryArtifactWriter, DirectoryArtifactWriter - writers

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Loading
    "ResourceLoader",
    "DictResourceLoader",
    "PathResourceLoader",
    # Host services
    "HostResources",
    # Writing
    "ModuleWriter",
    "ArtifactWriter",
    "MemoryModuleWriter",
    "MemoryArtifactWriter",
    "DirectoryArtifactWriter",
]

logger = logging.getLogger(__name__)


class ResourceLoader(Protocol):
    """Protocol for fetching resources by name.

    Resource names follow the '<module>.nls', '<module>.nls.<tag>' and
    '<module>.nls.keys' conventions. load() returns the decoded payload:
    a list of strings, a mapping of module id to list of strings, or (for
    key resources) the key structure.

    Failures (missing resources, I/O errors) are raised by the loader and
    propagate to the caller of NLSPlugin.load() unchanged.

    Example:
        >>> class HttpLoader:
        ...     async def load(self, resource_name: str) -> object:
        ...         response = await client.get(f"/nls/{resource_name}.json")
        ...         return response.json()
        ...     def describe_path(self, resource_name: str) -> str:
        ...         return f"/nls/{resource_name}.json"
    """

    async def load(self, resource_name: str) -> object:
        """Fetch and decode a resource.

        Args:
            resource_name: Resource name (e.g., 'vs/editor/model.nls.de')

        Returns:
            Decoded payload

        Raises:
            FileNotFoundError: If the resource does not exist
            OSError: If the resource cannot be read
        """

    def describe_path(self, resource_name: str) -> str:
        """Return human-readable location for diagnostics."""
        return resource_name


@dataclass(frozen=True, slots=True)
class DictResourceLoader:
    """In-memory ResourceLoader backed by a mapping of name to payload.

    Example:
        >>> loader = DictResourceLoader({"a.nls": ["Hello"]})
        >>> asyncio.run(loader.load("a.nls"))
        ['Hello']
    """

    resources: Mapping[str, object]

    async def load(self, resource_name: str) -> object:
        """Return the payload stored under resource_name.

        Raises:
            FileNotFoundError: If no payload is stored under resource_name
        """
        try:
            return self.resources[resource_name]
        except KeyError:
            msg = f"Resource not found: '{resource_name}'"
            raise FileNotFoundError(msg) from None

    def describe_path(self, resource_name: str) -> str:
        """Return the resource name with a 'memory:' prefix."""
        return f"memory:{resource_name}"


@dataclass(frozen=True, slots=True)
class PathResourceLoader:
    """ResourceLoader reading JSON files below a root directory.

    Resource 'vs/editor/model.nls.de' is read from
    '<root_dir>/vs/editor/model.nls.de.json'. Reads run in a worker thread
    so the event loop is never blocked.

    Security:
        Resource names containing '..', absolute paths or leading separators
        are rejected, and every resolved path is checked against root_dir.

    Attributes:
        root_dir: Directory containing the resources
        extension: File extension appended to resource names
    """

    root_dir: str
    extension: str = ".json"
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory."""
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    @staticmethod
    def _validate_resource_name(resource_name: str) -> None:
        """Validate resource_name for path traversal attacks and whitespace.

        Raises:
            ValueError: If resource_name is empty, padded with whitespace,
                absolute, or contains '..'
        """
        if not resource_name:
            msg = "Resource name cannot be empty"
            raise ValueError(msg)
        if resource_name.strip() != resource_name:
            msg = f"Resource name contains leading/trailing whitespace: {resource_name!r}"
            raise ValueError(msg)
        if Path(resource_name).is_absolute() or resource_name.startswith(("/", "\\")):
            msg = f"Absolute paths not allowed in resource name: '{resource_name}'"
            raise ValueError(msg)
        if ".." in Path(resource_name).parts:
            msg = f"Path traversal sequences not allowed in resource name: '{resource_name}'"
            raise ValueError(msg)

    def _path_for(self, resource_name: str) -> Path:
        self._validate_resource_name(resource_name)
        full_path = (self._resolved_root / (resource_name + self.extension)).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path traversal detected: '{resource_name}' escapes root directory"
            raise ValueError(msg) from None
        return full_path

    def describe_path(self, resource_name: str) -> str:
        """Return the file path the resource is read from."""
        return f"{self.root_dir}/{resource_name}{self.extension}"

    async def load(self, resource_name: str) -> object:
        """Read and decode the JSON file for resource_name.

        Raises:
            ValueError: If resource_name is unsafe or the file is not valid JSON
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """
        path = self._path_for(resource_name)
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        logger.debug("Loaded resource %s from %s", resource_name, path)
        return json.loads(text)


class HostResources(Protocol):
    """Host environment's native string-lookup service.

    When injected into NLSPlugin, messages are looked up by
    '<moduleKey>_<symbolicKey>' through this service instead of bundles.
    """

    def get_string(self, key: str, /, *args: object) -> str:
        """Return the formatted string for key."""
        ...


class ModuleWriter(Protocol):
    """Receives synthetic module definitions during build serialization."""

    def as_module(self, module_name: str, contents: str) -> None:
        """Emit contents as the definition of module_name."""
        ...


class ArtifactWriter(Protocol):
    """Receives build files."""

    def __call__(self, file_name: str, contents: str) -> None:
        """Write contents to file_name."""
        ...


@dataclass(slots=True)
class MemoryModuleWriter:
    """ModuleWriter collecting definitions in a dict."""

    modules: dict[str, str] = field(default_factory=dict)

    def as_module(self, module_name: str, contents: str) -> None:
        """Store contents under module_name."""
        self.modules[module_name] = contents


@dataclass(slots=True)
class MemoryArtifactWriter:
    """ArtifactWriter collecting files in a dict."""

    files: dict[str, str] = field(default_factory=dict)

    def __call__(self, file_name: str, contents: str) -> None:
        """Store contents under file_name."""
        self.files[file_name] = contents


@dataclass(frozen=True, slots=True)
class DirectoryArtifactWriter:
    """ArtifactWriter writing files below a root directory.

    Parent directories are created as needed. File names must stay inside
    root_dir.
    """

    root_dir: str

    def __call__(self, file_name: str, contents: str) -> None:
        """Write contents to root_dir/file_name as UTF-8.

        Raises:
            ValueError: If file_name resolves outside root_dir
            OSError: If the file cannot be written
        """
        root = Path(self.root_dir).resolve()
        path = (root / file_name).resolve()
        try:
            path.relative_to(root)
        except ValueError:
            msg = f"Path traversal detected: '{file_name}' escapes root directory"
            raise ValueError(msg) from None
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the CRLF separators of bundle files intact
        path.write_text(contents, encoding="utf-8", newline="")
        logger.debug("Wrote artifact %s", path)
