"""Configuration for NLSPlugin.

Provides a frozen dataclass holding the plugin settings read from the module
loader's configuration object. The loader keeps plugin settings under the
reserved 'vs/nls' namespace:

    {
        "isBuild": false,
        "vs/nls": {
            "availableLanguages": {"*": "de", "vs/editor/editor.main": "fr"},
            "pseudo": false
        }
    }

Python 3.13+. External dependency: Babel (language tag validation).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from nlsengine.constants import CONFIG_NAMESPACE, DEFAULT_TAG, WILDCARD_KEY
from nlsengine.diagnostics import ConfigurationError, ErrorTemplate
from nlsengine.locale_utils import get_system_locale, is_known_language, to_language_tag

__all__ = ["NLSConfig"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NLSConfig:
    """Immutable plugin configuration.

    All fields have defaults; ``NLSConfig()`` is a runtime configuration with
    no language map, which loads untranslated resources for every module.

    Attributes:
        available_languages: Module id (or '*') to language tag. None when the
            loader configured no languages.
        is_build: Capture messages into a BuildSession instead of wrapping them
            in localizers.
        pseudo: Enable pseudo-localization when the plugin is constructed.
        strict: Raise ConfigurationError for language tags unknown to CLDR
            instead of logging a warning.

    Example:
        >>> config = NLSConfig(available_languages={"*": "de"})
        >>> config.available_languages["*"]
        'de'
        >>> NLSConfig.from_loader_config({"isBuild": True}).is_build
        True
    """

    available_languages: Mapping[str, str] | None = None
    is_build: bool = False
    pseudo: bool = False
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate and freeze the language map.

        Raises:
            ConfigurationError: If the language map is not a mapping of strings,
                has an empty tag, or (strict only) names an unknown language.
        """
        languages = self.available_languages
        if languages is None:
            return
        if not isinstance(languages, Mapping):
            raise ConfigurationError(
                ErrorTemplate.config_invalid_type("availableLanguages", "a mapping", languages)
            )
        for module_id, language in languages.items():
            if not isinstance(module_id, str) or not isinstance(language, str):
                raise ConfigurationError(
                    ErrorTemplate.config_invalid_type(
                        "availableLanguages entries", "str to str", language
                    )
                )
            if not language:
                raise ConfigurationError(ErrorTemplate.config_empty_language(module_id))
            if language == DEFAULT_TAG or is_known_language(language):
                continue
            diagnostic = ErrorTemplate.config_unknown_language(module_id, language)
            if self.strict:
                raise ConfigurationError(diagnostic)
            logger.warning("%s", diagnostic.message)
        object.__setattr__(self, "available_languages", MappingProxyType(dict(languages)))

    @classmethod
    def from_loader_config(
        cls, config: Mapping[str, Any] | None, *, strict: bool = False
    ) -> NLSConfig:
        """Read plugin settings from a module loader configuration object.

        ``isBuild`` is accepted both at the top level (where module loaders
        put it) and inside the plugin namespace.

        Args:
            config: Loader configuration (None treated as empty)
            strict: Passed through to the resulting config

        Returns:
            NLSConfig built from the configuration

        Raises:
            ConfigurationError: If the plugin namespace is not a mapping
        """
        config = config or {}
        namespace = config.get(CONFIG_NAMESPACE) or {}
        if not isinstance(namespace, Mapping):
            raise ConfigurationError(
                ErrorTemplate.config_invalid_type(CONFIG_NAMESPACE, "a mapping", namespace)
            )
        is_build = bool(namespace.get("isBuild", config.get("isBuild", False)))
        return cls(
            available_languages=namespace.get("availableLanguages"),
            is_build=is_build,
            pseudo=bool(namespace.get("pseudo", False)),
            strict=strict,
        )

    @classmethod
    def for_system_locale(cls, **kwargs: Any) -> NLSConfig:
        """Build a config mapping every module to the detected system language.

        Falls back to the untranslated resources when the system locale is
        English (the language untranslated resources are written in).
        """
        language = to_language_tag(get_system_locale())
        if language == "en" or language.startswith("en-"):
            language = DEFAULT_TAG
        return cls(available_languages={WILDCARD_KEY: language}, **kwargs)
