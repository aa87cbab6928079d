from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any, Callable, Dict, TypeVar

_K = TypeVar("_K", bound=Any)
_V = TypeVar("_V", bound=Any)
_T = TypeVar("_T")


def dicttree_merge(dict1: Mapping[_K, _V], dict2: Mapping[_K, _V]) -> Dict[_K, _V]:
    """Merge `dict2` over `dict1`, recursing into mappings present in both."""
    new = {
        **dict1,
        **dict2,
    }

    for k, v2 in dict2.items():
        v1 = dict1.get(k)
        if isinstance(v1, Mapping) and isinstance(v2, Mapping):
            new[k] = dicttree_merge(v1, v2)  # type: ignore

    return new


def unique(
    iterable: Iterable[_T],
    *,
    key: Callable[[_T], Hashable] = lambda x: x,  # type: ignore
) -> Iterator[_T]:
    """Yield items of `iterable` once each, keeping the first occurrence."""
    seen: set[Hashable] = set()
    for item in iterable:
        k = key(item)
        if k in seen:
            continue
        seen.add(k)
        yield item


def upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]
