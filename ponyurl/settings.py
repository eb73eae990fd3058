"""
MIT License

Copyright (c) 2021 blanketsucks

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""
from typing import Any, Dict, Union, TypedDict
import codecs
import importlib
import logging
import os
import pathlib

from .errors import InvalidSetting
from .types import Collation
from .utils import SETTING_ENV_PREFIX

log = logging.getLogger(__name__)

__all__ = (
    'Settings',
    'DEFAULT_SETTINGS',
    'VALID_SETTINGS',
    'VALID_COLLATIONS',
    'settings_from_file',
    'settings_from_env',
    'validate_settings',
    'get_settings',
    'update_settings',
)

VALID_SETTINGS = (
    'encoding',
    'errors',
    'sort_collation',
)

VALID_COLLATIONS = (
    'codepoint',
    'locale',
)

DEFAULT_SETTINGS = {
    'encoding': 'utf-8',
    'errors': 'replace',
    'sort_collation': 'codepoint',
}

class Settings(TypedDict):
    """
    A :class:`typing.TypedDict` representing the settings used when encoding, decoding and sorting query strings.
    """
    encoding: str
    errors: str
    sort_collation: Collation

def validate_settings(settings: Dict[str, Any]) -> None:
    """
    Validates a settings mapping.

    Parameters
    ----------
    settings: :class:`dict`
        The settings to validate.

    Raises
    ------
    InvalidSetting
        If a key is unknown or a value is not usable.
    """
    for key in settings:
        if key not in VALID_SETTINGS:
            raise InvalidSetting(f'Invalid setting: {key!r}')

    encoding = settings.get('encoding')
    if encoding is not None:
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise InvalidSetting(f'Invalid encoding: {encoding!r}') from None

    errors = settings.get('errors')
    if errors is not None:
        try:
            codecs.lookup_error(errors)
        except LookupError:
            raise InvalidSetting(f'Invalid errors handler: {errors!r}') from None

    collation = settings.get('sort_collation')
    if collation is not None and collation not in VALID_COLLATIONS:
        raise InvalidSetting(f'Invalid sort_collation: {collation!r}')

def settings_from_file(path: Union[str, pathlib.Path]) -> Settings:
    """
    Loads settings from a module.

    Parameters
    ----------
    path: Union[:class:`str`, :class:`pathlib.Path`]
        The import path of the module to load settings from.
    """
    if isinstance(path, pathlib.Path):
        path = str(path)

    module = importlib.import_module(path)

    kwargs: Dict[str, Any] = {}

    for key, default in DEFAULT_SETTINGS.items():
        value = getattr(module, key.casefold(), default)
        kwargs[key] = value

    validate_settings(kwargs)
    return Settings(**kwargs)

def settings_from_env() -> Settings:
    """
    Loads settings from environment variables prefixed with ``PONYURL_``.
    """
    env = os.environ
    kwargs: Dict[str, Any] = {}

    for key, default in DEFAULT_SETTINGS.items():
        item = SETTING_ENV_PREFIX + key.upper()
        kwargs[key] = env.get(item, default)

    validate_settings(kwargs)
    return Settings(**kwargs)

_current: Settings = Settings(**DEFAULT_SETTINGS)  # type: ignore
_loaded = False

def get_settings() -> Settings:
    """
    Returns the settings currently in use.
    The environment is read the first time this is called.
    """
    global _current, _loaded

    if not _loaded:
        _current = settings_from_env()
        _loaded = True

        log.debug(f'[Settings] Loaded settings: {_current!r}.')

    return _current

def update_settings(**kwargs: Any) -> Settings:
    """
    Updates the settings currently in use.

    Parameters
    ----------
    **kwargs:
        The settings to change.

    Returns
    -------
    :class:`Settings`
        The new settings.
    """
    global _current

    validate_settings(kwargs)

    settings = get_settings().copy()
    settings.update(kwargs)  # type: ignore

    _current = settings
    log.debug(f'[Settings] Updated settings: {kwargs!r}.')

    return _current
