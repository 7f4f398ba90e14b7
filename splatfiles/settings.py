"""Persistent application settings: working directories and interface language."""

from __future__ import annotations

import configparser
import enum
import locale
import os
from pathlib import Path

__all__ = ["Language", "Settings"]

_SECTION = "General"
_DEFAULT_DIR = "DEFAULT_DIR"
_SDF_DIR = "SDF_DIR"
_GRAPH_DIR = "GRAPH_DIR"
_LANGUAGE = "LANGUAGE"


class Language(enum.Enum):
    """Interface languages, valued by the locale code that is stored."""

    RUSSIAN = "ru_RU"
    ENGLISH = "en_EN"

    @property
    def translation(self) -> str:
        """Name of the translation file for this language."""
        return "language_ru.qm" if self is Language.RUSSIAN else "language_en.qm"

    @classmethod
    def for_locale(cls, code: str) -> "Language":
        return cls.RUSSIAN if code == cls.RUSSIAN.value else cls.ENGLISH


def _system_locale() -> str:
    name = locale.getlocale()[0]
    return name or "C"


class Settings:
    """Settings kept in an INI file; missing directories get home-based defaults."""

    def __init__(self, config_path: str | os.PathLike = "config.conf", home: str | os.PathLike | None = None):
        self.config_path = Path(config_path)
        self.home = os.fspath(home) if home is not None else str(Path.home())
        self._parser = configparser.ConfigParser(interpolation=None)
        self._parser.optionxform = str
        if self.config_path.exists():
            self._parser.read(self.config_path, encoding="utf-8")
        if not self._parser.has_section(_SECTION):
            self._parser.add_section(_SECTION)

        defaults = self._defaults()
        changed = False
        for key, value in defaults.items():
            if self._get(key) == "":
                self._parser.set(_SECTION, key, value)
                changed = True
        if changed:
            self.save()

    def _defaults(self) -> dict[str, str]:
        return {
            _DEFAULT_DIR: self.home + "/",
            _SDF_DIR: self.home + "/sdf",
            _GRAPH_DIR: self.home + "/",
        }

    def _get(self, key: str) -> str:
        return self._parser.get(_SECTION, key, fallback="")

    def _set(self, key: str, value: str) -> None:
        self._parser.set(_SECTION, key, value)
        self.save()

    @property
    def dir_path(self) -> str:
        """Directory holding site (.qth) files."""
        return self._get(_DEFAULT_DIR)

    @property
    def sdf_dir(self) -> str:
        """Directory holding terrain (.sdf) files."""
        return self._get(_SDF_DIR)

    @property
    def graph_dir(self) -> str:
        """Directory for generated graphics."""
        return self._get(_GRAPH_DIR)

    @property
    def language(self) -> str:
        """Stored language code, or '' when none is set."""
        return self._get(_LANGUAGE)

    def set_dir_path(self, directory: str | os.PathLike) -> None:
        self._set(_DEFAULT_DIR, os.fspath(directory) + "/")

    def set_sdf_dir(self, directory: str | os.PathLike) -> None:
        self._set(_SDF_DIR, os.fspath(directory) + "/")

    def set_graph_dir(self, directory: str | os.PathLike) -> None:
        self._set(_GRAPH_DIR, os.fspath(directory) + "/")

    def reset(self, system_locale: str | None = None) -> Language:
        """Restore default directories and the system language; return that language."""
        code = system_locale if system_locale is not None else _system_locale()
        for key, value in self._defaults().items():
            self._parser.set(_SECTION, key, value)
        self._parser.set(_SECTION, _LANGUAGE, code)
        self.save()
        return Language.for_locale(code)

    def select_language(self, index: int) -> Language:
        """Choose a language by list position: 0 is Russian, anything else English."""
        chosen = Language.RUSSIAN if index == 0 else Language.ENGLISH
        self._set(_LANGUAGE, chosen.value)
        return chosen

    def resolve_language(self, system_locale: str | None = None) -> Language:
        """Language to use at start-up, storing the system locale if none is set."""
        stored = self.language
        if stored == "":
            code = system_locale if system_locale is not None else _system_locale()
            self._set(_LANGUAGE, code)
            return Language.for_locale(code)
        return Language.for_locale(stored)

    def save(self) -> None:
        """Write the settings to the configuration file."""
        if self.config_path.parent != Path(""):
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w", encoding="utf-8") as handle:
            self._parser.write(handle)