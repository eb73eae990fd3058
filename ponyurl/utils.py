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

from typing import Any, Callable
from urllib.parse import quote_plus, unquote_plus

__all__ = (
    'copy_docstring',
    'quote_component',
    'unquote_component',
    'SETTING_ENV_PREFIX',
    'SAFE_CHARACTERS',
)

SETTING_ENV_PREFIX = 'PONYURL_'

# Characters left as-is besides ASCII letters, digits and ``_.-~``.
SAFE_CHARACTERS = "!'()*"

def copy_docstring(other: Callable[..., Any]) -> Callable[..., Callable[..., Any]]:
    """
    A decorator that copies the docstring of another function.

    Parameters
    ----------
    other: Callable[..., Any]
        The function to copy the docstring from.
    """
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        func.__doc__ = other.__doc__
        return func
    return decorator

def quote_component(value: str, *, encoding: str = 'utf-8', errors: str = 'replace') -> str:
    """
    Percent-encodes a query string key or value.
    Spaces are encoded as ``+`` and a literal ``+`` as ``%2B``.

    Parameters
    ----------
    value: :class:`str`
        The string to encode.
    encoding: :class:`str`
        The charset used for non-ASCII characters.
    errors: :class:`str`
        The codec error handler.
    """
    return quote_plus(value, safe=SAFE_CHARACTERS, encoding=encoding, errors=errors)

def unquote_component(value: str, *, encoding: str = 'utf-8', errors: str = 'replace') -> str:
    """
    Decodes a percent-encoded query string key or value, treating ``+`` as a space.

    Parameters
    ----------
    value: :class:`str`
        The string to decode.
    encoding: :class:`str`
        The charset of the encoded bytes.
    errors: :class:`str`
        The codec error handler.
    """
    return unquote_plus(value, encoding=encoding, errors=errors)
