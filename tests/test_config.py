"""Tests for NLSConfig and locale utilities.

Python 3.13+.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from nlsengine.config import NLSConfig
from nlsengine.constants import DEFAULT_TAG
from nlsengine.diagnostics import ConfigurationError, DiagnosticCode
from nlsengine.locale_utils import (
    get_system_locale,
    is_known_language,
    normalize_locale,
    to_language_tag,
)


class TestNLSConfigDefaults:
    """Default configuration."""

    def test_defaults(self) -> None:
        """No languages, runtime, no pseudo, lenient."""
        config = NLSConfig()
        assert config.available_languages is None
        assert config.is_build is False
        assert config.pseudo is False
        assert config.strict is False

    def test_frozen(self) -> None:
        """Configs are immutable."""
        config = NLSConfig()
        with pytest.raises(AttributeError):
            config.is_build = True  # type: ignore[misc]

    def test_language_map_copied_and_read_only(self) -> None:
        """The language map is snapshotted at construction."""
        source = {"*": "de"}
        config = NLSConfig(available_languages=source)
        source["*"] = "fr"
        assert config.available_languages is not None
        assert config.available_languages["*"] == "de"
        with pytest.raises(TypeError):
            config.available_languages["*"] = "fr"  # type: ignore[index]


class TestNLSConfigValidation:
    """__post_init__ validation."""

    def test_non_mapping_rejected(self) -> None:
        """availableLanguages must be a mapping."""
        with pytest.raises(ConfigurationError) as exc_info:
            NLSConfig(available_languages=["de"])  # type: ignore[arg-type]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CONFIG_INVALID_TYPE

    def test_non_string_tag_rejected(self) -> None:
        """Tags must be strings."""
        with pytest.raises(ConfigurationError):
            NLSConfig(available_languages={"*": 1})  # type: ignore[dict-item]

    def test_empty_tag_rejected(self) -> None:
        """Empty tags are configuration errors."""
        with pytest.raises(ConfigurationError) as exc_info:
            NLSConfig(available_languages={"vs/a": ""})
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CONFIG_EMPTY_LANGUAGE

    def test_configuration_error_is_value_error(self) -> None:
        """ConfigurationError is also a ValueError."""
        with pytest.raises(ValueError, match="empty"):
            NLSConfig(available_languages={"vs/a": ""})

    def test_default_tag_accepted_in_strict_mode(self) -> None:
        """The DEFAULT tag is always valid."""
        config = NLSConfig(available_languages={"*": DEFAULT_TAG}, strict=True)
        assert config.available_languages == {"*": DEFAULT_TAG}

    def test_known_languages_accepted_in_strict_mode(self) -> None:
        """CLDR languages pass strict validation."""
        config = NLSConfig(available_languages={"*": "de", "vs/a": "pt-br"}, strict=True)
        assert config.available_languages is not None

    def test_unknown_language_rejected_in_strict_mode(self) -> None:
        """Strict configs raise for unknown languages."""
        with pytest.raises(ConfigurationError) as exc_info:
            NLSConfig(available_languages={"*": "xx"}, strict=True)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CONFIG_UNKNOWN_LANGUAGE

    def test_unknown_language_logged_in_lenient_mode(self, caplog: pytest.LogCaptureFixture) -> None:
        """Lenient configs keep the tag and log a warning."""
        with caplog.at_level(logging.WARNING, logger="nlsengine.config"):
            config = NLSConfig(available_languages={"*": "xx"})
        assert config.available_languages == {"*": "xx"}
        assert "Unknown language 'xx'" in caplog.text


class TestFromLoaderConfig:
    """Reading the module loader configuration object."""

    def test_none_config(self) -> None:
        """None behaves like an empty config."""
        assert NLSConfig.from_loader_config(None) == NLSConfig()

    def test_reads_namespace(self) -> None:
        """availableLanguages and pseudo come from the 'vs/nls' namespace."""
        config = NLSConfig.from_loader_config(
            {"vs/nls": {"availableLanguages": {"*": "fr"}, "pseudo": True}}
        )
        assert config.available_languages == {"*": "fr"}
        assert config.pseudo is True

    def test_is_build_top_level(self) -> None:
        """isBuild is read from the top level."""
        assert NLSConfig.from_loader_config({"isBuild": True}).is_build is True

    def test_is_build_in_namespace(self) -> None:
        """isBuild in the namespace overrides the top level."""
        config = NLSConfig.from_loader_config({"isBuild": True, "vs/nls": {"isBuild": False}})
        assert config.is_build is False

    def test_invalid_namespace(self) -> None:
        """A non-mapping namespace is rejected."""
        with pytest.raises(ConfigurationError):
            NLSConfig.from_loader_config({"vs/nls": "de"})

    def test_strict_passed_through(self) -> None:
        """strict applies to the built config."""
        with pytest.raises(ConfigurationError):
            NLSConfig.from_loader_config(
                {"vs/nls": {"availableLanguages": {"*": "xx"}}}, strict=True
            )


class TestForSystemLocale:
    """NLSConfig.for_system_locale."""

    def test_maps_wildcard_to_system_language(self) -> None:
        """The detected locale becomes the wildcard tag."""
        with patch("nlsengine.config.get_system_locale", return_value="de_DE"):
            config = NLSConfig.for_system_locale()
        assert config.available_languages == {"*": "de-de"}

    @pytest.mark.parametrize("system_locale", ["en", "en_US", "en_GB"])
    def test_english_maps_to_default_tag(self, system_locale: str) -> None:
        """English systems load untranslated resources."""
        with patch("nlsengine.config.get_system_locale", return_value=system_locale):
            config = NLSConfig.for_system_locale()
        assert config.available_languages == {"*": DEFAULT_TAG}

    def test_kwargs_forwarded(self) -> None:
        """Extra fields are passed to the constructor."""
        with patch("nlsengine.config.get_system_locale", return_value="fr_FR"):
            config = NLSConfig.for_system_locale(is_build=True)
        assert config.is_build is True


class TestLocaleUtils:
    """Language tag conversions and checks."""

    def test_normalize_locale(self) -> None:
        """Hyphens become underscores."""
        assert normalize_locale("pt-br") == "pt_br"

    def test_to_language_tag(self) -> None:
        """POSIX codes become lowercase hyphenated tags."""
        assert to_language_tag("pt_BR") == "pt-br"
        assert to_language_tag("de") == "de"

    @pytest.mark.parametrize("tag", ["de", "fr", "pt-br", "ja"])
    def test_known_languages(self, tag: str) -> None:
        """CLDR locales are known."""
        assert is_known_language(tag) is True

    @pytest.mark.parametrize("tag", ["xx", "not-a-locale-at-all", ""])
    def test_unknown_languages(self, tag: str) -> None:
        """Unknown and malformed tags are not known."""
        assert is_known_language(tag) is False

    def test_system_locale_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables are used when the OS locale is unset."""
        monkeypatch.setenv("LC_ALL", "lv_LV.UTF-8")
        with patch("locale.getlocale", return_value=(None, None)):
            assert get_system_locale() == "lv_LV"

    def test_system_locale_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without any locale information the fallback is en_US."""
        for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
            monkeypatch.delenv(var, raising=False)
        with patch("locale.getlocale", return_value=(None, None)):
            assert get_system_locale() == "en_US"
            with pytest.raises(RuntimeError):
                get_system_locale(raise_on_failure=True)
