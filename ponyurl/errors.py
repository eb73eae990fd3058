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

__all__ = (
    'URLException',
    'InvalidURL',
    'ArityError',
    'TypeMismatch',
    'InvalidSetting',
)

class URLException(Exception):
    """Base inheritance class for every error raised by this library."""
    pass

class InvalidURL(URLException, ValueError):
    """
    Raised when a string matches none of the URL grammars, or when a relative
    reference is given without a usable base.
    """
    pass

class ArityError(URLException, ValueError):
    """Raised when a pair in a :class:`~ponyurl.URLSearchParams` initializer does not have exactly 2 items."""
    pass

class TypeMismatch(URLException, TypeError):
    """Raised when a :class:`~ponyurl.URLSearchParams` initializer is of an unsupported type."""
    pass

class InvalidSetting(URLException, ValueError):
    pass
