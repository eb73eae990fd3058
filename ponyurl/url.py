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

from typing import Any, Dict, Optional, Union
import functools
import uuid

from .errors import InvalidURL, TypeMismatch, URLException
from .multidict import URLSearchParams
from .parser import Components, parse
from .resolver import resolve
from .types import StrURL
from .utils import copy_docstring

__all__ = (
    'URL',
)

SETTABLE_FIELDS = (
    'href',
    'protocol',
    'username',
    'password',
    'host',
    'hostname',
    'port',
    'pathname',
    'search',
    'hash',
)

def _ensure_url_like(value: Any, name: str) -> str:
    if not isinstance(value, (str, URL)):
        raise TypeMismatch(f'{name} must be a str or URL, not {type(value).__name__!r}')

    return str(value)

@functools.total_ordering
class URL:
    """
    A mutable URL.

    The query string is mirrored by :attr:`search_params`, changes to either
    side are visible through the other one immediately.

    Example
    -------

    .. code-block:: python

        base = URL('https://example.com/dir/page')
        url = URL('../newpage?x=1', base)

        print(url.href) # 'https://example.com/newpage?x=1'

        url.search_params.append('y', '2')
        print(url.search) # '?x=1&y=2'

    Parameters
    ----------
    url: Union[:class:`str`, :class:`URL`]
        The URL to parse. May be relative if ``base`` is given.
    base: Optional[Union[:class:`str`, :class:`URL`]]
        The absolute URL to resolve ``url`` against.

    Raises
    ------
    InvalidURL
        If ``url`` cannot be parsed, is relative without a base, or ``base`` is not absolute.
    """

    def __init__(self, url: StrURL, base: Optional[StrURL] = None) -> None:
        components = parse(_ensure_url_like(url, 'url'))

        if base:
            if isinstance(base, URL):
                base_components = base.components
            else:
                base_components = parse(_ensure_url_like(base, 'base'))
                if not base_components.scheme:
                    raise InvalidURL(f'Invalid base URL: {base!r}')

            if not components.scheme and not components.host:
                components = resolve(base_components, components)
            elif not components.scheme:
                components = components._replace(scheme=base_components.scheme)

        elif not components.scheme:
            raise InvalidURL(f'Invalid URL: relative URL without a base: {url!r}')

        self._setup(components)

    def _setup(self, components: Components) -> None:
        self._search_params = URLSearchParams()
        self._load(components)

        self._search_params._set_update_callback(self._update)

    def _load(self, components: Components) -> None:
        self._protocol = components.scheme
        self._username = components.username
        self._password = components.password
        self._hostname = components.host
        self._port = components.port
        self._pathname = components.path or '/'
        self._search = components.query
        self._hash = components.fragment

        if self._search and not self._search.startswith('?'):
            self._search = '?' + self._search

        self._search_params._replace(self._search)
        self._href = self._serialize()

    def _update(self, search: str) -> None:
        self._search = '?' + search if search else ''
        self._href = self._serialize()

    def _serialize(self) -> str:
        protocol = self._protocol
        if protocol and not protocol.endswith(':'):
            protocol += ':'

        authority = ''
        if self._hostname:
            authority = '//'

            if self._username or self._password:
                authority += self._username
                if self._password:
                    authority += ':' + self._password

                authority += '@'

            authority += self._hostname
            if self._port:
                authority += ':' + self._port

        pathname = self._pathname
        if pathname.startswith('//'):
            pathname = pathname[2:]
        if pathname and not pathname.startswith('/'):
            pathname = '/' + pathname

        search, fragment = self._search, self._hash
        if search and not search.startswith('?'):
            search = '?' + search
        if fragment and not fragment.startswith('#'):
            fragment = '#' + fragment

        return protocol + authority + pathname + search + fragment

    def __str__(self) -> str:
        return self._href

    def __repr__(self) -> str:
        return f'<URL href={self._href!r}>'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, URL):
            return self._href == other._href
        if isinstance(other, str):
            return self._href == other

        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, URL):
            return NotImplemented

        return self._href < other._href

    def __truediv__(self, other: object) -> URL:
        if not isinstance(other, (URL, str)):
            return NotImplemented

        return self.join(other)

    @classmethod
    def from_components(cls, components: Components) -> URL:
        """
        Creates a URL from already parsed components.

        Parameters
        ----------
        components: :class:`~ponyurl.parser.Components`
            The components. Must have a scheme.

        Raises
        ------
        InvalidURL
            If the components have no scheme.
        """
        if not components.scheme:
            raise InvalidURL(f'Components without a scheme: {components!r}')

        self = cls.__new__(cls)
        self._setup(components)

        return self

    @classmethod
    def can_parse(cls, url: StrURL, base: Optional[StrURL] = None) -> bool:
        """
        Checks whether ``URL(url, base)`` would succeed.

        Parameters
        ----------
        url: Union[:class:`str`, :class:`URL`]
            The URL to check.
        base: Optional[Union[:class:`str`, :class:`URL`]]
            The base to resolve ``url`` against.
        """
        try:
            cls(url, base)
        except URLException:
            return False

        return True

    @classmethod
    def parse(cls, url: StrURL, base: Optional[StrURL] = None) -> Optional[URL]:
        """
        Like the constructor, but returns ``None`` instead of raising.

        Parameters
        ----------
        url: Union[:class:`str`, :class:`URL`]
            The URL to parse.
        base: Optional[Union[:class:`str`, :class:`URL`]]
            The base to resolve ``url`` against.
        """
        try:
            return cls(url, base)
        except URLException:
            return None

    @staticmethod
    def create_object_url(blob: Any) -> str:
        """
        Returns a ``blob:`` URL with a random identifier.
        Nothing is registered and ``blob`` is not retained.

        Parameters
        ----------
        blob: Any
            The object the URL would refer to.
        """
        return f'blob:{uuid.uuid4()}'

    @staticmethod
    def revoke_object_url(url: StrURL) -> None:
        """
        Does nothing, object URLs are never registered.

        Parameters
        ----------
        url: Union[:class:`str`, :class:`URL`]
            The object URL to revoke.
        """
        return None

    @property
    def components(self) -> Components:
        """
        The current fields as a :class:`~ponyurl.parser.Components`.
        """
        return Components(
            scheme=self._protocol,
            username=self._username,
            password=self._password,
            host=self._hostname,
            port=self._port,
            path=self._pathname,
            query=self._search,
            fragment=self._hash,
        )

    @property
    def href(self) -> str:
        """
        The serialized URL. Setting it parses the new value against the current origin and replaces every field.
        """
        return self._href

    @href.setter
    def href(self, value: str) -> None:
        origin = self.origin
        url = URL(value, origin if origin != 'null' else None)

        self._load(url.components)

    @property
    def origin(self) -> str:
        """
        The scheme and host, or ``'null'`` if either is missing.
        """
        if not self._protocol or not self._hostname:
            return 'null'

        return self._protocol + '//' + self.host

    @property
    def protocol(self) -> str:
        """
        The scheme, including its trailing ``:``.
        """
        return self._protocol

    @protocol.setter
    def protocol(self, value: str) -> None:
        self._protocol = value if value.endswith(':') else value + ':'
        self._href = self._serialize()

    @property
    def username(self) -> str:
        return self._username

    @username.setter
    def username(self, value: str) -> None:
        self._username = value
        self._href = self._serialize()

    @property
    def password(self) -> str:
        return self._password

    @password.setter
    def password(self, value: str) -> None:
        self._password = value
        self._href = self._serialize()

    @property
    def host(self) -> str:
        """
        The hostname followed by ``:port`` when a port is set.
        """
        return self._hostname + (':' + self._port if self._port else '')

    @host.setter
    def host(self, value: str) -> None:
        hostname, sep, port = value.partition(':')

        self._hostname = hostname
        self._port = port if sep else ''
        self._href = self._serialize()

    @property
    def hostname(self) -> str:
        return self._hostname

    @hostname.setter
    def hostname(self, value: str) -> None:
        self._hostname = value
        self._href = self._serialize()

    @property
    def port(self) -> str:
        return self._port

    @port.setter
    def port(self, value: Union[str, int]) -> None:
        self._port = str(value)
        self._href = self._serialize()

    @property
    def pathname(self) -> str:
        return self._pathname

    @pathname.setter
    def pathname(self, value: str) -> None:
        self._pathname = value if value.startswith('/') else '/' + value
        self._href = self._serialize()

    @property
    def search(self) -> str:
        """
        The query string including its leading ``?``, or an empty string.
        Setting it reloads :attr:`search_params`.
        """
        return self._search

    @search.setter
    def search(self, value: str) -> None:
        search = value if value.startswith('?') else '?' + value

        self._search_params._replace(search)
        self._update(self._search_params.to_string())

    @property
    def search_params(self) -> URLSearchParams:
        """
        The :class:`~ponyurl.URLSearchParams` linked to this URL.
        """
        return self._search_params

    @property
    def hash(self) -> str:
        """
        The fragment including its leading ``#``, or an empty string.
        """
        return self._hash

    @hash.setter
    def hash(self, value: str) -> None:
        self._hash = value if value.startswith('#') else '#' + value
        self._href = self._serialize()

    def to_string(self) -> str:
        """
        Returns the serialized URL.
        """
        return self._href

    @copy_docstring(to_string)
    def to_json(self) -> str:
        return self._href

    def join(self, url: StrURL) -> URL:
        """
        Resolves another URL against this one.

        Parameters
        ----------
        url: Union[:class:`str`, :class:`URL`]
            The URL to resolve.
        """
        return URL(url, self)

    def replace(self, **fields: Any) -> URL:
        """
        Returns a copy of this URL with some fields set.
        The values go through the same normalization as the property setters.

        Parameters
        ----------
        **fields:
            The fields to set, e.g. ``pathname='/other'``.

        Raises
        ------
        TypeError
            If a field is not settable.
        """
        for name in fields:
            if name not in SETTABLE_FIELDS:
                raise TypeError(f'Invalid URL field: {name!r}')

        url = self.copy()
        for name, value in fields.items():
            setattr(url, name, value)

        return url

    def copy(self) -> URL:
        """
        Returns an independent copy of this URL, with its own :attr:`search_params`.
        """
        return self.from_components(self.components)

    def as_dict(self) -> Dict[str, str]:
        return self.components._asdict()

    def encode(self, *, encoding: Optional[str] = None, errors: Optional[str] = None) -> bytes:
        """
        Encodes the URL as bytes.

        Parameters
        ----------
        encoding: Optional[:class:`str`]
            The encoding to use. Defaults to ``utf-8``.
        errors: Optional[:class:`str`]
            The codec error handler. Defaults to ``strict``.
        """
        if not encoding:
            encoding = 'utf-8'

        if not errors:
            errors = 'strict'

        return self._href.encode(encoding, errors)
