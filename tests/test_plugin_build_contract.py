"""End-to-end tests of the build serialization contract.

A build loads every module in build mode, serializes each module against
its entry point, writes one bundle file per entry point and finishes with
the metadata file. These tests drive that sequence through NLSPlugin and
check the produced artifacts, then load a written bundle back at runtime.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

from nlsengine import NLSConfig, NLSPlugin
from nlsengine.constants import BUNDLE_FILE_HEADER
from nlsengine.loading import (
    DictResourceLoader,
    DirectoryArtifactWriter,
    MemoryArtifactWriter,
    MemoryModuleWriter,
)

_RESOURCES: dict[str, object] = {
    "vs/editor/main.nls": ["Editor"],
    "vs/editor/main.nls.keys": ["editor"],
    "vs/editor/find.nls": ["Find", "Replace {0}"],
    "vs/editor/find.nls.keys": ["find", {"key": "replace", "comment": ["{0} is a count"]}],
    "vs/editor/hover.nls": ["Hover"],
    "vs/editor/hover.nls.keys": ["hover"],
}

_ENTRY = "vs/editor/main"
_MODULES = ("vs/editor/main", "vs/editor/find", "vs/editor/hover")


def _payload(bundle_file: str) -> object:
    """Extract the JSON payload of a rendered bundle file."""
    body = bundle_file.split("\r\n", len(BUNDLE_FILE_HEADER))[-1]
    prefix = 'define("vs/editor/main.nls", '
    assert body.startswith(prefix)
    return json.loads(body[len(prefix):-2])


def _run_build(
    plugin: NLSPlugin, module_writer: MemoryModuleWriter, artifact_writer: object
) -> None:
    asyncio.run(plugin.load_all(_MODULES, DictResourceLoader(_RESOURCES)))
    for module_name in _MODULES:
        plugin.write("vs/nls", module_name, _ENTRY, module_writer)
    for module_name in _MODULES:
        plugin.write_file("vs/nls", module_name, artifact_writer)  # type: ignore[arg-type]
    plugin.finish_build(artifact_writer)  # type: ignore[arg-type]


class TestBuildContract:
    """Full build through in-memory writers."""

    def test_module_stubs_for_non_entry_modules(self) -> None:
        """Only dependents of the entry point get stub definitions."""
        plugin = NLSPlugin(NLSConfig(is_build=True))
        modules = MemoryModuleWriter()
        _run_build(plugin, modules, MemoryArtifactWriter())
        assert sorted(modules.modules) == ["vs/nls!vs/editor/find", "vs/nls!vs/editor/hover"]
        assert 'nls.create("vs/editor/find", data)' in modules.modules["vs/nls!vs/editor/find"]
        assert '"vs/nls!vs/editor/main"' in modules.modules["vs/nls!vs/editor/hover"]

    def test_one_bundle_file_per_entry_point(self) -> None:
        """Only the entry point produces a bundle file; metadata is written last."""
        plugin = NLSPlugin(NLSConfig(is_build=True))
        artifacts = MemoryArtifactWriter()
        _run_build(plugin, MemoryModuleWriter(), artifacts)
        assert list(artifacts.files) == ["vs/editor/main.nls.js", "nls.metadata.json"]

    def test_bundle_file_contents(self) -> None:
        """The bundle holds every module's untranslated messages."""
        plugin = NLSPlugin(NLSConfig(is_build=True))
        artifacts = MemoryArtifactWriter()
        _run_build(plugin, MemoryModuleWriter(), artifacts)
        bundle_file = artifacts.files["vs/editor/main.nls.js"]
        assert bundle_file.startswith(BUNDLE_FILE_HEADER[0] + "\r\n")
        assert _payload(bundle_file) == {
            "vs/editor/main": ["Editor"],
            "vs/editor/find": ["Find", "Replace {0}"],
            "vs/editor/hover": ["Hover"],
        }

    def test_metadata_contents(self) -> None:
        """Metadata lists keys, messages and entry point membership."""
        plugin = NLSPlugin(NLSConfig(is_build=True))
        artifacts = MemoryArtifactWriter()
        _run_build(plugin, MemoryModuleWriter(), artifacts)
        metadata = json.loads(artifacts.files["nls.metadata.json"])
        assert metadata["bundles"] == {_ENTRY: list(_MODULES)}
        assert metadata["messages"]["vs/editor/find"] == ["Find", "Replace {0}"]
        assert metadata["keys"]["vs/editor/find"] == [
            "find",
            {"key": "replace", "comment": ["{0} is a count"]},
        ]
        assert set(metadata["keys"]) == set(metadata["messages"]) == set(_MODULES)

    def test_to_url_maps_bundle_path(self) -> None:
        """to_url rewrites the bundle file name."""
        plugin = NLSPlugin(NLSConfig(is_build=True))
        asyncio.run(plugin.load(_ENTRY, DictResourceLoader(_RESOURCES)))
        plugin.write("vs/nls", _ENTRY, _ENTRY, MemoryModuleWriter())
        artifacts = MemoryArtifactWriter()
        plugin.write_file("vs/nls", _ENTRY, artifacts, to_url=lambda name: f"out/{name}")
        assert list(artifacts.files) == ["out/vs/editor/main.nls.js"]

    def test_write_file_for_non_entry_point_writes_nothing(self) -> None:
        """Modules that are not entry points produce no bundle file."""
        plugin = NLSPlugin(NLSConfig(is_build=True))
        artifacts = MemoryArtifactWriter()
        plugin.write_file("vs/nls", "vs/editor/find", artifacts)
        assert artifacts.files == {}

    def test_shared_session_across_plugins(self) -> None:
        """Two plugins sharing a session contribute to one manifest."""
        first = NLSPlugin(NLSConfig(is_build=True))
        second = NLSPlugin(NLSConfig(is_build=True), session=first.session)
        loader = DictResourceLoader(_RESOURCES)
        asyncio.run(first.load("vs/editor/find", loader))
        asyncio.run(second.load("vs/editor/hover", loader))
        assert set(first.session.captured_modules) == {"vs/editor/find", "vs/editor/hover"}


class TestBuildToRuntime:
    """A written bundle can be loaded back as a nested bundle."""

    def test_roundtrip_through_directory(self, tmp_path: Path) -> None:
        """Bundle files on disk feed create() for dependent modules."""
        plugin = NLSPlugin(NLSConfig(is_build=True))
        _run_build(plugin, MemoryModuleWriter(), DirectoryArtifactWriter(str(tmp_path)))

        bundle_file = (tmp_path / "vs/editor/main.nls.js").read_bytes().decode("utf-8")
        assert "\r\n" in bundle_file
        bundle = _payload(bundle_file)
        assert isinstance(bundle, dict)

        api = NLSPlugin().create("vs/editor/find", bundle)
        assert api.localize(1, "Replace {0}", 3) == "Replace 3"

        metadata = json.loads((tmp_path / "nls.metadata.json").read_text(encoding="utf-8"))
        assert metadata["bundles"][_ENTRY] == list(_MODULES)

    def test_runtime_load_of_nested_bundle(self) -> None:
        """RUNTIME mode reads a module's slice from an entry point bundle."""
        plugin = NLSPlugin(NLSConfig(is_build=True))
        artifacts = MemoryArtifactWriter()
        _run_build(plugin, MemoryModuleWriter(), artifacts)
        bundle = _payload(artifacts.files["vs/editor/main.nls.js"])

        runtime = NLSPlugin()
        loader = DictResourceLoader({"vs/editor/main.nls": bundle})
        result = asyncio.run(runtime.load(_ENTRY, loader))
        assert result.localize(0, "Editor") == "Editor"  # type: ignore[union-attr]
