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

from collections.abc import Mapping
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Iterator,
    List,
    Optional,
    Tuple,
)
import inspect
import locale
import weakref

from .errors import ArityError, TypeMismatch
from .settings import get_settings
from .utils import copy_docstring, quote_component, unquote_component

if TYPE_CHECKING:
    from .types import ForEachCallback, SearchParamsInit, UpdateCallback

__all__ = (
    'URLSearchParams',
)

class URLSearchParams:
    """
    An ordered multi-dict of query string parameters.
    The same key may appear multiple times, and insertion order is kept.

    Example
    -------

    .. code-block:: python

        params = URLSearchParams('b=2&a=1&a=3')

        print(params.get('a')) # '1'
        print(params.getall('a')) # ['1', '3']

        params.sort()
        print(str(params)) # 'a=1&a=3&b=2'

    Parameters
    ----------
    init: Optional[Union[:class:`str`, :class:`URLSearchParams`, :class:`dict`, Iterable[Tuple[:class:`str`, :class:`str`]]]]
        The initial parameters. A string may start with ``?``.

    Raises
    ------
    ArityError
        If an item of an iterable initializer is not a pair.
    TypeMismatch
        If the initializer is of an unsupported type.
    """

    def __init__(self, init: SearchParamsInit = None) -> None:
        self._list: List[Tuple[str, str]] = []
        self._update_callback: Optional[Callable[[], Optional[UpdateCallback]]] = None

        if init is None:
            return

        if isinstance(init, str):
            self._parse(init)
        elif isinstance(init, URLSearchParams):
            self._list = init._list.copy()
        elif isinstance(init, Mapping):
            self._list = [(str(key), str(value)) for key, value in init.items()]
        elif isinstance(init, (bytes, bytearray)):
            raise TypeMismatch(f'Invalid URLSearchParams initializer: {init!r}')
        else:
            try:
                iterator = iter(init)
            except TypeError:
                raise TypeMismatch(f'Invalid URLSearchParams initializer: {init!r}') from None

            for index, pair in enumerate(iterator):
                try:
                    length = len(pair)
                except TypeError:
                    length = None

                if length != 2:
                    raise ArityError(f'Item {index} in the parameter list does not have length 2 exactly')

                key, value = pair
                self._list.append((str(key), str(value)))

    def __repr__(self) -> str:
        return f'<URLSearchParams {self._list!r}>'

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return self.entries()

    def __contains__(self, key: object) -> bool:
        key = str(key)
        return any(k == key for k, _ in self._list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URLSearchParams):
            return NotImplemented

        return self._list == other._list

    @property
    def size(self) -> int:
        """
        The number of pairs, counting repeated keys.
        """
        return len(self._list)

    def _parse(self, query: str) -> None:
        if query.startswith('?'):
            query = query[1:]

        if not query:
            return

        settings = get_settings()
        encoding, errors = settings['encoding'], settings['errors']

        for pair in query.split('&'):
            key, _, value = pair.partition('=')
            self._list.append((
                unquote_component(key, encoding=encoding, errors=errors),
                unquote_component(value, encoding=encoding, errors=errors),
            ))

    def _replace(self, query: str) -> None:
        self._list = []
        self._parse(query)

    def _set_update_callback(self, callback: Optional[UpdateCallback]) -> None:
        if callback is None:
            self._update_callback = None
        elif inspect.ismethod(callback):
            self._update_callback = weakref.WeakMethod(callback)
        else:
            self._update_callback = weakref.ref(callback)

    def _notify(self) -> None:
        if self._update_callback is None:
            return

        callback = self._update_callback()
        if callback is not None:
            callback(self.to_string())

    def append(self, key: str, value: str) -> None:
        """
        Appends a new pair, keeping any existing pairs for the same key.

        Parameters
        ----------
        key: :class:`str`
            The key of the pair.
        value: :class:`str`
            The value of the pair.
        """
        self._list.append((str(key), str(value)))
        self._notify()

    def delete(self, key: str, value: Optional[str] = None) -> None:
        """
        Removes every pair with the given key.
        If a value is given, only pairs matching both the key and the value are removed.

        Parameters
        ----------
        key: :class:`str`
            The key to remove.
        value: Optional[:class:`str`]
            The value to match.
        """
        key = str(key)

        if value is None:
            self._list = [(k, v) for k, v in self._list if k != key]
        else:
            value = str(value)
            self._list = [(k, v) for k, v in self._list if k != key or v != value]

        self._notify()

    def get(self, key: str) -> Optional[str]:
        """
        Gets the first value belonging to a key, or ``None`` if the key is absent.

        Parameters
        ----------
        key: :class:`str`
            The key to look up.
        """
        key = str(key)

        for k, v in self._list:
            if k == key:
                return v

        return None

    def getall(self, key: str) -> List[str]:
        """
        Gets all the values belonging to a key, in insertion order.

        Parameters
        ----------
        key: :class:`str`
            The key to look up.
        """
        key = str(key)
        return [v for k, v in self._list if k == key]

    def has(self, key: str, value: Optional[str] = None) -> bool:
        """
        Checks whether a key, or a key and value pair, is present.

        Parameters
        ----------
        key: :class:`str`
            The key to look for.
        value: Optional[:class:`str`]
            The value to match.
        """
        key = str(key)

        if value is None:
            return any(k == key for k, _ in self._list)

        value = str(value)
        return any(k == key and v == value for k, v in self._list)

    def set(self, key: str, value: str) -> None:
        """
        Sets the value of the first pair with the given key and removes the others.
        If the key is absent, a new pair is appended.

        Parameters
        ----------
        key: :class:`str`
            The key to set.
        value: :class:`str`
            The new value.
        """
        key, value = str(key), str(value)
        found = False

        index = 0
        while index < len(self._list):
            if self._list[index][0] == key:
                if not found:
                    self._list[index] = (key, value)
                    found = True
                else:
                    del self._list[index]
                    continue

            index += 1

        if not found:
            self._list.append((key, value))

        self._notify()

    def sort(self) -> None:
        """
        Sorts the pairs by key. Pairs with equal keys keep their relative order.
        """
        if get_settings()['sort_collation'] == 'locale':
            self._list.sort(key=lambda pair: locale.strxfrm(pair[0]))
        else:
            self._list.sort(key=lambda pair: pair[0])

        self._notify()

    def entries(self) -> Iterator[Tuple[str, str]]:
        """
        Returns an iterator over the pairs as they are at call time.
        """
        return (pair for pair in self._list.copy())

    def keys(self) -> Iterator[str]:
        """
        Returns an iterator over the keys as they are at call time.
        """
        return (key for key, _ in self._list.copy())

    def values(self) -> Iterator[str]:
        """
        Returns an iterator over the values as they are at call time.
        """
        return (value for _, value in self._list.copy())

    def for_each(self, callback: ForEachCallback, this_arg: Any = None) -> None:
        """
        Calls ``callback(value, key, params)`` for every pair.

        The pairs are read as the iteration goes, so pairs appended by the
        callback are visited as well.

        Parameters
        ----------
        callback: Callable[..., Any]
            The function to call.
        this_arg: Any
            Accepted for signature compatibility and ignored. Bind the receiver
            on ``callback`` itself instead, e.g. with a bound method.
        """
        for key, value in self._list:
            callback(value, key, self)

    def copy(self) -> URLSearchParams:
        """
        Returns an unowned copy of this object.
        """
        return URLSearchParams(self)

    def to_string(self) -> str:
        """
        Serializes the pairs into a query string without a leading ``?``.
        """
        settings = get_settings()
        encoding, errors = settings['encoding'], settings['errors']

        return '&'.join(
            quote_component(key, encoding=encoding, errors=errors)
            + '='
            + quote_component(value, encoding=encoding, errors=errors)
            for key, value in self._list
        )

    @copy_docstring(to_string)
    def to_json(self) -> str:
        return self.to_string()
