"""Translation of user-facing messages, chosen from the configured locale."""

from __future__ import annotations

import json
import os
import posixpath
import re
from typing import Any, Mapping

from .resources import asset, asset_names

DEFAULT_LOCALE = "en_US"
RESOURCES_SUFFIX = ".all.json"

_PLACEHOLDER = re.compile(r"\{\{\s*\.(\w+)\s*\}\}")
_LANGUAGE_TAG = re.compile(r"[A-Za-z]{2,3}(?:[_-][A-Za-z0-9]+)*")
_ALIASES = {
    "zh-cn": "zh-hans",
    "zh-sg": "zh-hans",
    "zh-hk": "zh-hant",
    "zh-tw": "zh-hant",
}


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Translator:
    """Translates message ids for one locale, optionally falling back to another."""

    def __init__(
        self,
        locale: str,
        translations: Mapping[str, str],
        fallback: "Translator | None" = None,
    ) -> None:
        self.locale = locale
        self.translations = dict(translations)
        self.fallback = fallback

    def _render(self, translation_id: str, args: Mapping[str, Any] | None) -> str:
        template = self.translations.get(translation_id)
        if template is None:
            return translation_id
        values = args or {}

        def substitute(match: re.Match) -> str:
            key = match.group(1)
            return _format_value(values[key]) if key in values else "<no value>"

        return _PLACEHOLDER.sub(substitute, template)

    def __call__(self, translation_id: str, args: Mapping[str, Any] | None = None) -> str:
        translated = self._render(translation_id, args)
        if translated != translation_id or self.fallback is None:
            return translated
        return self.fallback(translation_id, args)


def normalize_locale(locale: str) -> str:
    """Lower-case a locale and use '-' as separator."""
    return locale.replace("_", "-").lower()


def supported_locales() -> dict[str, str]:
    """Map each bundled normalized locale to its asset name."""
    locales = {}
    for name in asset_names():
        base = posixpath.basename(name)
        if base.endswith(RESOURCES_SUFFIX):
            base = base[: -len(RESOURCES_SUFFIX)]
        locales[normalize_locale(base)] = name
    return locales


def _load(asset_name: str) -> dict[str, str]:
    entries = json.loads(asset(asset_name).decode("utf-8"))
    return {entry["id"]: entry["translation"] for entry in entries}


def _parse_languages(source: str) -> list[str]:
    tags: list[str] = []
    for piece in re.split(r"[,;.]", source):
        piece = piece.strip()
        if _LANGUAGE_TAG.fullmatch(piece):
            tag = normalize_locale(piece)
            if tag not in tags:
                tags.append(tag)
    return tags


def _matching_tags(tag: str) -> list[str]:
    parts = tag.split("-")
    return ["-".join(parts[: i + 1]) for i in range(len(parts))]


def _match(tag: str, supported: Mapping[str, str]) -> str:
    matched = ""
    for prefix in reversed(sorted(_matching_tags(tag))):
        for locale in sorted(supported):
            if locale.startswith(prefix):
                matched = locale
    return matched


def init(locale: str = "", environ: Mapping[str, str] | None = None) -> Translator:
    """Build a translator from the locale, then LC_ALL, then LANG."""
    env = os.environ if environ is None else environ
    default = Translator(DEFAULT_LOCALE, _load(f"i18n/resources/{DEFAULT_LOCALE}{RESOURCES_SUFFIX}"))
    supported = supported_locales()

    for source in (locale, env.get("LC_ALL", ""), env.get("LANG", "")):
        if not source:
            continue
        for tag in _parse_languages(source):
            matched = _match(_ALIASES.get(tag, tag), supported)
            if matched:
                return Translator(matched, _load(supported[matched]), fallback=default)
    return default


_active: dict[str, Translator | None] = {"translator": None}


def set_translator(translator: Translator | None) -> Translator | None:
    """Install the translator used by translate() and return the one it replaces."""
    previous = _active["translator"]
    _active["translator"] = translator
    return previous


def translate(translation_id: str, args: Mapping[str, Any] | None = None) -> str:
    """Translate with the installed translator (English when none is installed)."""
    current = _active["translator"]
    if current is None:
        current = init("", {})
        _active["translator"] = current
    return current(translation_id, args)