"""nlsengine Build Example - Bundling Messages per Entry Point.

Runs the build sequence a bundler performs:
1. Load every module in build mode (captures messages and keys)
2. Serialize each module against its entry point
3. Write one '<entry>.nls.js' bundle per entry point
4. Write 'nls.metadata.json'

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
import tempfile
from pathlib import Path

from nlsengine import NLSPlugin
from nlsengine.loading import DictResourceLoader, DirectoryArtifactWriter, MemoryModuleWriter

RESOURCES = {
    "vs/editor/main.nls": ["Editor"],
    "vs/editor/main.nls.keys": ["editor"],
    "vs/editor/find.nls": ["Find", "Replace {0}"],
    "vs/editor/find.nls.keys": ["find", {"key": "replace", "comment": ["{0} is a count"]}],
}

ENTRY_POINT = "vs/editor/main"
MODULES = ["vs/editor/main", "vs/editor/find"]


def build(out_dir: Path) -> None:
    """Build bundles for MODULES into out_dir."""
    plugin = NLSPlugin.from_loader_config({"isBuild": True})
    asyncio.run(plugin.load_all(MODULES, DictResourceLoader(RESOURCES)))

    modules = MemoryModuleWriter()
    artifacts = DirectoryArtifactWriter(str(out_dir))
    for module_name in MODULES:
        plugin.write("vs/nls", module_name, ENTRY_POINT, modules)
    for module_name in MODULES:
        plugin.write_file("vs/nls", module_name, artifacts)
    plugin.finish_build(artifacts)

    print("Module stubs:")
    for name, definition in modules.modules.items():
        print(f"  {name}: {definition}")

    print("\nArtifacts:")
    for path in sorted(out_dir.rglob("*")):
        if path.is_file():
            print(f"\n--- {path.relative_to(out_dir)} ---")
            print(path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    with tempfile.TemporaryDirectory() as tmp_dir:
        build(Path(tmp_dir))
