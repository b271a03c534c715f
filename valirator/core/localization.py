"""
Translation catalogue for validation messages.

Message templates can be written as catalogue keys (`'validation.required'`)
and resolved against `<LOCALE_PATH>/<locale>.json`:

    {"validation": {"required": "is required", "min": "must be at least %{expected}"}}

Keys use dot notation for nesting. A key that is not found anywhere is used
verbatim, so plain templates keep working without any catalogue.

Usage:
    from valirator.core.localization import translate, set_locale

    translate('validation.required')
    set_locale('de')
"""

import json
import logging
import os
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional

_translations: Dict[str, Dict[str, Any]] = {}
_LOCALE_DEFAULT = os.getenv('LOCALE_DEFAULT', 'en')
_LOCALE_FALLBACK = os.getenv('LOCALE_FALLBACK', 'en')
_LOCALE_PATH = os.getenv('LOCALE_PATH', os.path.join(os.getcwd(), 'lang'))
_current_locale: ContextVar[str] = ContextVar('valirator_locale', default=_LOCALE_DEFAULT)


def _get_nested(data: Dict[str, Any], key: str) -> Optional[str]:
    current: Any = data
    for part in key.split('.'):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return None
    return current if isinstance(current, str) else None


def _load_locale(locale: str) -> Dict[str, Any]:
    """Load and cache translations for a locale. Idempotent."""
    if locale in _translations:
        return _translations[locale]

    locale_file = Path(_LOCALE_PATH) / f"{locale}.json"
    translations: Dict[str, Any] = {}

    if locale_file.exists():
        try:
            with locale_file.open(encoding='utf-8') as f:
                translations = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logging.warning(f"[LOCALIZATION] Could not load {locale_file}: {e}")

    _translations[locale] = translations
    return translations


def translate(key: str, default: Optional[str] = None, locale: Optional[str] = None) -> str:
    """
    Look `key` up in the current (or given) locale, then in the fallback locale.

    Returns `default` when nothing matches, or the key itself when no default is given.
    """
    current_locale = locale or _current_locale.get()

    translation = _get_nested(_load_locale(current_locale), key)

    if translation is None and current_locale != _LOCALE_FALLBACK:
        translation = _get_nested(_load_locale(_LOCALE_FALLBACK), key)

    if translation is None:
        translation = default if default is not None else key

    return translation


def set_locale(locale: str) -> None:
    _current_locale.set(locale)


def get_locale() -> str:
    return _current_locale.get()


def clear_cache() -> None:
    _translations.clear()


def set_locale_path(path: str) -> None:
    """Point the catalogue at another directory. Cached locales are dropped."""
    global _LOCALE_PATH
    _LOCALE_PATH = path
    clear_cache()


__all__ = [
    "translate",
    "set_locale",
    "get_locale",
    "clear_cache",
    "set_locale_path",
]
