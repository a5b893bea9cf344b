"""Hypothesis strategies for nlsengine property-based testing.

Strategies are organized by domain:

- nls: module ids, language maps, message templates, bundles and loaders

Usage:
    from tests.strategies.nls import module_ids, templates, language_maps

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - templates, language_maps, format_args
"""

from .nls import (
    FailingResourceLoader,
    format_args,
    key_lists,
    language_maps,
    language_tags,
    message_lists,
    module_ids,
    templates,
)

__all__ = [
    "FailingResourceLoader",
    "format_args",
    "key_lists",
    "language_maps",
    "language_tags",
    "message_lists",
    "module_ids",
    "templates",
]
