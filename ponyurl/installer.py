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
from __future__ import annotations

from typing import Any, Dict, NamedTuple, Optional, Union
from types import ModuleType
import builtins
import logging

from .multidict import URLSearchParams
from .url import URL

log = logging.getLogger(__name__)

__all__ = (
    'Success',
    'Skipped',
    'InstallationFailure',
    'Result',
    'try_define',
    'install_url',
    'install_search_params',
    'install',
)

class Success(NamedTuple):
    """
    Returned when at least one name was defined.

    Attributes
    ----------
    data: :class:`dict`
        The names that were defined, mapped to their values.
    """
    data: Dict[str, Any]
    type: str = 'success'

class Skipped(NamedTuple):
    """
    Returned when every name was already defined.
    """
    info: str = ''
    type: str = 'skipped'

class InstallationFailure(NamedTuple):
    """
    Returned when defining a name raised an exception.

    Attributes
    ----------
    error: :class:`Exception`
        The exception that was raised.
    """
    error: Exception
    type: str = 'failure'

Result = Union[Success, Skipped, InstallationFailure]

def try_define(namespace: Any, name: str, value: Any) -> Result:
    """
    Defines ``name`` on ``namespace`` unless it already exists.
    Errors are returned as an :class:`InstallationFailure` instead of being raised.

    Parameters
    ----------
    namespace: Any
        The object to define the name on, usually a module.
    name: :class:`str`
        The name to define.
    value: Any
        The value to define.
    """
    if hasattr(namespace, name):
        log.debug(f'[Installer] {name!r} is already defined, skipping.')
        return Skipped(f'{name} is already installed.')

    try:
        setattr(namespace, name, value)
    except Exception as error:
        log.warning(f'[Installer] Failed to define {name!r}: {error!r}.')
        return InstallationFailure(error)

    log.info(f'[Installer] Defined {name!r}.')
    return Success({name: value})

def install_url(namespace: Optional[Union[ModuleType, Any]] = None) -> Result:
    """
    Installs :class:`~ponyurl.URL` into ``namespace``, :mod:`builtins` by default.
    """
    if namespace is None:
        namespace = builtins

    return try_define(namespace, 'URL', URL)

def install_search_params(namespace: Optional[Union[ModuleType, Any]] = None) -> Result:
    """
    Installs :class:`~ponyurl.URLSearchParams` into ``namespace``, :mod:`builtins` by default.
    """
    if namespace is None:
        namespace = builtins

    return try_define(namespace, 'URLSearchParams', URLSearchParams)

def install(namespace: Optional[Union[ModuleType, Any]] = None) -> Result:
    """
    Installs both :class:`~ponyurl.URL` and :class:`~ponyurl.URLSearchParams`.

    The first failure is returned as-is. If both names already exist a
    :class:`Skipped` is returned, otherwise a :class:`Success` holding the
    names that were actually defined.

    Parameters
    ----------
    namespace: Optional[Any]
        The object to install into. Defaults to :mod:`builtins`.
    """
    url = install_url(namespace)
    if isinstance(url, InstallationFailure):
        return url

    params = install_search_params(namespace)
    if isinstance(params, InstallationFailure):
        return params

    if isinstance(url, Skipped) and isinstance(params, Skipped):
        return Skipped('URL and URLSearchParams are both already installed.')

    data: Dict[str, Any] = {}
    for result in (url, params):
        if isinstance(result, Success):
            data.update(result.data)

    return Success(data)
