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
from typing import Dict, NamedTuple, Optional, Tuple
import enum
import re

from .errors import InvalidURL

__all__ = (
    'Components',
    'Grammar',
    'ABSOLUTE',
    'PROTOCOL_RELATIVE',
    'RELATIVE',
    'match',
    'parse',
)

_AUTHORITY = (
    r'(?:(?P<username>[^:@/?#]+)(?::(?P<password>[^:@/?#]*))?@)?'
    r'(?P<host>[^:/?#]+)'
    r'(?::(?P<port>\d+))?'
)
_TAIL = r'(?P<path>/[^?#]*)?(?P<query>\?[^#]*)?(?P<fragment>#.*)?'

ABSOLUTE = re.compile(r'(?P<scheme>[a-zA-Z][a-zA-Z0-9+.-]*:)(?://' + _AUTHORITY + r')?' + _TAIL)
PROTOCOL_RELATIVE = re.compile(r'//' + _AUTHORITY + _TAIL)
RELATIVE = re.compile(r'(?P<path>[^?#]*)(?P<query>\?[^#]*)?(?P<fragment>#.*)?')

class Grammar(enum.Enum):
    """
    The grammar a URL string was matched with.
    """
    ABSOLUTE = 'absolute'
    PROTOCOL_RELATIVE = 'protocol-relative'
    RELATIVE = 'relative'

_GRAMMARS = (
    (Grammar.ABSOLUTE, ABSOLUTE),
    (Grammar.PROTOCOL_RELATIVE, PROTOCOL_RELATIVE),
    (Grammar.RELATIVE, RELATIVE),
)

class Components(NamedTuple):
    """
    The decomposed form of a URL.

    Attributes
    ----------
    scheme: :class:`str`
        The scheme, including its trailing ``:``. Empty for relative references.
    username: :class:`str`
        The username, or an empty string.
    password: :class:`str`
        The password, or an empty string.
    host: :class:`str`
        The host, or an empty string if there is no authority.
    port: :class:`str`
        The port digits, or an empty string.
    path: :class:`str`
        The path.
    query: :class:`str`
        The query, including its leading ``?``, or an empty string.
    fragment: :class:`str`
        The fragment, including its leading ``#``, or an empty string.
    """
    scheme: str = ''
    username: str = ''
    password: str = ''
    host: str = ''
    port: str = ''
    path: str = ''
    query: str = ''
    fragment: str = ''

    def is_absolute(self) -> bool:
        return self.scheme != ''

    def has_authority(self) -> bool:
        return self.host != ''

def match(url: str) -> Tuple[Grammar, Dict[str, Optional[str]]]:
    """
    Matches a string against each grammar in order.

    Parameters
    ----------
    url: :class:`str`
        The string to match.

    Returns
    -------
    Tuple[:class:`Grammar`, :class:`dict`]
        The grammar that matched and its named groups.

    Raises
    ------
    InvalidURL
        If no grammar matches.
    """
    for grammar, pattern in _GRAMMARS:
        result = pattern.fullmatch(url)
        if result is not None:
            return grammar, result.groupdict()

    raise InvalidURL(f'Invalid URL: {url!r}')

def parse(url: str) -> Components:
    """
    Parses a string into its components without resolving it.

    Parameters
    ----------
    url: :class:`str`
        The string to parse.

    Raises
    ------
    InvalidURL
        If the string matches none of the grammars.
    """
    grammar, groups = match(url)

    if grammar is Grammar.RELATIVE:
        return Components(
            path=groups['path'] or '',
            query=groups['query'] or '',
            fragment=groups['fragment'] or '',
        )

    return Components(
        scheme=groups.get('scheme') or '',
        username=groups['username'] or '',
        password=groups['password'] or '',
        host=groups['host'] or '',
        port=groups['port'] or '',
        path=groups['path'] or '/',
        query=groups['query'] or '',
        fragment=groups['fragment'] or '',
    )
