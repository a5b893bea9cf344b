"""nlsengine Quickstart - Resolving Localized Messages.

Demonstrates runtime resolution of module messages:
1. Generic localizer (no module name)
2. Language selection per module with a wildcard fallback
3. Nested bundles produced by a build
4. Pseudo-localization
5. Resources on disk

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import json
import tempfile
from pathlib import Path

from nlsengine import NLSConfig, NLSPlugin
from nlsengine.loading import DictResourceLoader, PathResourceLoader

RESOURCES = {
    "vs/editor/find.nls": ["Find", "Replace {0} occurrences"],
    "vs/editor/find.nls.de": ["Suchen", "{0} Vorkommen ersetzen"],
    "vs/editor/find.nls.fr": ["Rechercher", "Remplacer {0} occurrences"],
    "vs/editor/hover.nls.de": ["Hinweis"],
}


def example_1_generic_localizer() -> None:
    """Example 1: Formatting call-site messages."""
    print("=" * 60)
    print("Example 1: Generic Localizer")
    print("=" * 60)

    api = asyncio.run(NLSPlugin().load("", DictResourceLoader({})))
    print(api.localize("greeting", "Hello {0}, you have {1} new messages", "Ana", 3))
    print(api.localize("missing", "Only {0} of {2} given", "one"))


def example_2_language_selection() -> None:
    """Example 2: Exact entries win over the wildcard."""
    print("\n" + "=" * 60)
    print("Example 2: Language Selection")
    print("=" * 60)

    config = NLSConfig(available_languages={"vs/editor/find": "fr", "*": "de"})
    plugin = NLSPlugin(config)
    find, hover = asyncio.run(
        plugin.load_all(["vs/editor/find", "vs/editor/hover"], DictResourceLoader(RESOURCES))
    )
    print(f"find  (fr): {find.localize(1, 'Replace {0} occurrences', 12)}")
    print(f"hover (de): {hover.localize(0, 'Hint')}")


def example_3_nested_bundle() -> None:
    """Example 3: Several modules served from one entry point bundle."""
    print("\n" + "=" * 60)
    print("Example 3: Nested Bundles")
    print("=" * 60)

    bundle = {"vs/editor/main": ["Editor"], "vs/editor/find": ["Find", "Replace {0}"]}
    plugin = NLSPlugin()
    main = asyncio.run(
        plugin.load("vs/editor/main", DictResourceLoader({"vs/editor/main.nls": bundle}))
    )
    find = plugin.create("vs/editor/find", bundle)
    print(f"main: {main.localize(0, 'Editor')}")
    print(f"find: {find.localize(1, 'Replace {0}', 'all')}")


def example_4_pseudo_localization() -> None:
    """Example 4: Spotting unlocalized strings."""
    print("\n" + "=" * 60)
    print("Example 4: Pseudo-Localization")
    print("=" * 60)

    plugin = NLSPlugin(NLSConfig(pseudo=True))
    api = plugin.create("vs/editor/find", {"vs/editor/find": ["Find", "Replace {0}"]})
    print(api.localize(1, "Replace {0}", "one"))
    NLSPlugin.set_pseudo_translation(False)


def example_5_resources_on_disk(root: Path) -> None:
    """Example 5: JSON resources read by PathResourceLoader."""
    print("\n" + "=" * 60)
    print("Example 5: Resources on Disk")
    print("=" * 60)

    for name, messages in RESOURCES.items():
        path = root / f"{name}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(messages, ensure_ascii=False), encoding="utf-8")

    plugin = NLSPlugin(NLSConfig(available_languages={"*": "de"}))
    find = asyncio.run(plugin.load("vs/editor/find", PathResourceLoader(str(root))))
    print(find.localize(0, "Find"))


if __name__ == "__main__":
    example_1_generic_localizer()
    example_2_language_selection()
    example_3_nested_bundle()
    example_4_pseudo_localization()

    with tempfile.TemporaryDirectory() as tmp_dir:
        example_5_resources_on_disk(Path(tmp_dir))

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
