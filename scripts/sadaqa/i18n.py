from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from sadaqa.validate import parse_date

log = logging.getLogger(__name__)

LOCALES = ("ar", "fr")
DEFAULT_LOCALE = "ar"

DIRECTIONS = {"ar": "rtl", "fr": "ltr"}

LOCALES_DIR = Path(__file__).parent / "locales"

_ARABIC_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")


def _check_locale(locale: str) -> None:
    if locale not in LOCALES:
        raise ValueError(f"unsupported locale {locale!r}, expected one of {LOCALES}")


def field_name(field: str, locale: str) -> str:
    _check_locale(locale)
    return f"{field}{locale.capitalize()}"


def pick(record, field: str, locale: str) -> str:
    """Language-specific value of a bilingual field, e.g. ``title`` -> ``titleAr``.

    No fallback to the other language: an absent value renders as "".
    """
    key = field_name(field, locale)
    if not record:
        return ""
    value = record.get(key)
    if value is None:
        log.debug("No %s on %s", key, record.get("id", "record"))
        return ""
    return value


def direction_of(locale: str) -> str:
    _check_locale(locale)
    return DIRECTIONS[locale]


def other_locale(locale: str) -> str:
    _check_locale(locale)
    return "fr" if locale == "ar" else "ar"


def format_date(value, locale: str) -> str:
    _check_locale(locale)
    d = parse_date(value)
    if d is None:
        return value or ""
    if locale == "fr":
        return d.strftime("%d/%m/%Y")
    return f"{d.day}/{d.month}/{d.year}".translate(_ARABIC_DIGITS)


class I18N:
    _messages: Dict[str, Dict[str, Any]] = {}

    @classmethod
    def load_locales(cls) -> None:
        for lang in LOCALES:
            path = LOCALES_DIR / f"{lang}.json"
            try:
                with open(path, encoding="utf-8") as fh:
                    cls._messages[lang] = json.load(fh)
            except (OSError, ValueError) as e:
                log.warning("Failed to load locale %s: %s", lang, e)

    @classmethod
    def messages(cls, lang: str) -> Dict[str, Any]:
        if not cls._messages:
            cls.load_locales()
        return cls._messages.get(lang, {})


def t(lang: str, key: str) -> str:
    """UI string by dotted key (``nav.home``); unknown keys render as the key."""
    _check_locale(lang)
    node: Any = I18N.messages(lang)
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return key
        node = node[part]
    return node if isinstance(node, str) else key


class LocaleContext:
    """Everything a template needs to render in one language."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        _check_locale(locale)
        self.locale = locale
        self.direction = direction_of(locale)
        self.other = other_locale(locale)

    @property
    def is_rtl(self) -> bool:
        return self.direction == "rtl"

    @property
    def align(self) -> str:
        return "right" if self.is_rtl else "left"

    def pick(self, record, field: str) -> str:
        return pick(record, field, self.locale)

    def t(self, key: str) -> str:
        return t(self.locale, key)

    def format_date(self, value) -> str:
        return format_date(value, self.locale)

    def __repr__(self):
        return f"LocaleContext({self.locale!r})"


class LocaleSession:
    """Current language: starts at the default, changed only by ``toggle``."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        _check_locale(locale)
        self._locale = locale

    @property
    def locale(self) -> str:
        return self._locale

    def toggle(self) -> str:
        self._locale = other_locale(self._locale)
        return self._locale

    def context(self) -> LocaleContext:
        return LocaleContext(self._locale)
