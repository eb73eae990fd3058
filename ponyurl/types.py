from typing import (
    Any,
    Callable,
    Iterable,
    Literal,
    Mapping,
    Sequence,
    Union,
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from .url import URL
    from .multidict import URLSearchParams

StrURL = Union[str, 'URL']
UpdateCallback = Callable[[str], Any]
ForEachCallback = Callable[..., Any]
SearchParamsInit = Union[
    str,
    'URLSearchParams',
    Mapping[Any, Any],
    Iterable[Sequence[Any]],
    None,
]
Collation = Literal['codepoint', 'locale']
ResultType = Literal['success', 'skipped', 'failure']
