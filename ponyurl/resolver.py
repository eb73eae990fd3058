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
from typing import List
import re

from .parser import Components

__all__ = (
    'normalize',
    'resolve',
)

_SEPARATORS = re.compile(r'[\\/]+')

def normalize(path: str) -> str:
    """
    Removes ``.`` and ``..`` segments from a path.

    ``..`` never climbs above the root, and leading and trailing slashes are kept.
    A path that normalizes to nothing becomes an empty string.

    Parameters
    ----------
    path: :class:`str`
        The path to normalize.
    """
    output: List[str] = []

    for segment in _SEPARATORS.split(path):
        if segment == '..':
            if len(output) > 1 or (len(output) == 1 and output[0] != ''):
                output.pop()
        elif segment not in ('.', ''):
            output.append(segment)
        elif segment == '' and not output:
            output.append('')

    if path.endswith('/'):
        output.append('')

    if path.startswith('/') and (not output or output[0] != ''):
        output.insert(0, '')

    if not output:
        output.append('')

    return '/'.join(output)

def resolve(base: Components, relative: Components) -> Components:
    """
    Resolves a reference against an absolute base.

    Parameters
    ----------
    base: :class:`~ponyurl.parser.Components`
        The absolute base.
    relative: :class:`~ponyurl.parser.Components`
        The reference to resolve.

    Returns
    -------
    :class:`~ponyurl.parser.Components`
        The resolved components.
    """
    if relative.scheme:
        return relative._replace(path=normalize(relative.path or '/'))

    result = Components(
        scheme=base.scheme,
        username=base.username,
        password=base.password,
        host=base.host,
        port=base.port,
        path='/',
        query=relative.query,
        fragment=relative.fragment,
    )

    if relative.host:
        return result._replace(
            username=relative.username,
            password=relative.password,
            host=relative.host,
            port=relative.port,
            path=normalize(relative.path or '/'),
        )

    if not relative.path:
        result = result._replace(path=base.path or '/')
        if not relative.query:
            result = result._replace(query=base.query)

    elif relative.path.startswith('/'):
        result = result._replace(path=normalize(relative.path))

    else:
        index = base.path.rfind('/')
        prefix = base.path[:index + 1] if index != -1 else '/'

        result = result._replace(path=normalize(prefix + relative.path))

    return result
