"""Keyed, ordered collection over a single backing dict.

``Collection`` is a friendlier façade over the nested container shape that
``keyroute.paths`` works on: plain key access through the MutableMapping
interface, list-like appends, value searches, and dot-path helpers.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, Optional
from collections.abc import Mapping, MutableMapping

from keyroute.paths import (
    DEFAULT_SEPARATOR,
    get_by_path,
    has_paths,
    remove_paths,
    set_by_path,
)
from keyroute.util import dump_container, to_default


def _items_of(values) -> Iterable:
    if isinstance(values, Mapping):
        return values.values()
    return values


class Collection(MutableMapping):
    """Insertion-ordered mutable mapping with collection helpers.

    Examples:
        >>> c = Collection({'a': 1})
        >>> c.set('b', 2).add(3)
        Collection({'a': 1, 'b': 2, 0: 3})
        >>> c.get('x', default=lambda: 'lazy')
        'lazy'
        >>> c.first(), c.last()
        (1, 3)
        >>> c.set_path('user.name', 'Alice').get_path('user.name')
        'Alice'
    """

    def __init__(self, items: Optional[Mapping] = None, separator: str = DEFAULT_SEPARATOR):
        """Initialize a Collection.

        Args:
            items: Initial entries (copied into a new dict)
            separator: Separator used by the dot-path helpers
        """
        self._items = dict(items or {})
        self._separator = separator

    def _new(self, items: Mapping) -> 'Collection':
        return type(self)(items, separator=self._separator)

    # MutableMapping interface

    def __getitem__(self, key: Any) -> Any:
        return self._items[key]

    def __setitem__(self, key: Any, value: Any):
        self._items[key] = value

    def __delitem__(self, key: Any):
        del self._items[key]

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def __str__(self) -> str:
        return dump_container(self._items)

    # Adding

    def _next_index(self) -> int:
        indices = [k for k in self._items if isinstance(k, int) and not isinstance(k, bool)]
        return max(indices) + 1 if indices else 0

    def add(self, value: Any) -> 'Collection':
        """Append a value at the next integer key."""
        self._items[self._next_index()] = value
        return self

    def add_all(self, values: Iterable) -> 'Collection':
        for value in _items_of(values):
            self.add(value)
        return self

    def set(self, key: Any, value: Any) -> 'Collection':
        self._items[key] = value
        return self

    def set_all(self, items: Mapping) -> 'Collection':
        for key, value in items.items():
            self.set(key, value)
        return self

    # Reading

    def get(self, key: Any, default: Any = None) -> Any:
        """Get an item by literal key; ``default`` may be a factory."""
        if key in self._items:
            return self._items[key]
        return to_default(default)

    def contains(self, key: Any) -> bool:
        return key in self._items

    def contains_all(self, keys: Iterable) -> bool:
        return all(self.contains(key) for key in _items_of(keys))

    def has_value(self, value: Any) -> bool:
        return any(item == value for item in self._items.values())

    def has_values(self, values: Iterable) -> bool:
        return all(self.has_value(value) for value in _items_of(values))

    def all(self) -> Dict:
        return self._items

    def is_empty(self) -> bool:
        return not self._items

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def first(self, default: Any = None) -> Any:
        for value in self._items.values():
            return value
        return to_default(default)

    def last(self, default: Any = None) -> Any:
        if not self._items:
            return to_default(default)
        return next(reversed(self._items.values()))

    def key_list(self) -> 'Collection':
        return self._new(dict(enumerate(self._items)))

    def value_list(self) -> 'Collection':
        return self._new(dict(enumerate(self._items.values())))

    # Removing

    def remove(self, key: Any) -> bool:
        """Remove an item by key, returning whether it was there."""
        if key not in self._items:
            return False
        del self._items[key]
        return True

    def remove_all(self, keys: Iterable) -> bool:
        """Remove items by key; True if any of them was removed."""
        removed = [self.remove(key) for key in _items_of(keys)]
        return any(removed)

    def remove_item(self, value: Any) -> bool:
        """Remove every entry holding ``value``."""
        return self.remove_items([value])

    def remove_items(self, values: Iterable) -> bool:
        values = list(_items_of(values))
        doomed = [key for key, item in self._items.items() if item in values]
        for key in doomed:
            del self._items[key]
        return bool(doomed)

    def clear(self) -> 'Collection':
        self._items.clear()
        return self

    def pop_first(self, default: Any = None) -> Any:
        """Remove and return the first value."""
        if not self._items:
            return to_default(default)
        key = next(iter(self._items))
        return self._items.pop(key)

    def pop_last(self, default: Any = None) -> Any:
        """Remove and return the last value."""
        if not self._items:
            return to_default(default)
        return self._items.popitem()[1]

    # Deriving

    def filter(self, callback: Callable[[Any, Any], bool]) -> 'Collection':
        """New collection of the entries for which ``callback(value, key)`` is true."""
        return self._new({k: v for k, v in self._items.items() if callback(v, k)})

    def map(self, callback: Callable[[Any, Any], Any]) -> 'Collection':
        """New collection with ``callback(value, key)`` applied to each entry."""
        return self._new({k: callback(v, k) for k, v in self._items.items()})

    def merge(self, items: Mapping) -> 'Collection':
        """New collection with ``items`` layered over this one."""
        return self._new({**self._items, **items})

    def slice(self, offset: int, length: Optional[int] = None) -> 'Collection':
        """New collection of ``length`` entries starting at position ``offset``.

        Negative ``offset`` counts from the end, negative ``length`` stops
        that many entries before the end.
        """
        entries = list(self._items.items())
        start = offset
        if length is None:
            selected = entries[start:]
        elif length >= 0:
            start = max(len(entries) + offset, 0) if offset < 0 else offset
            selected = entries[start:start + length]
        else:
            selected = entries[start:length]
        return self._new(dict(selected))

    # Dot-path access

    def get_path(self, key: Any, default: Any = None) -> Any:
        return get_by_path(self._items, key, default, separator=self._separator)

    def set_path(self, key: Any, value: Any) -> 'Collection':
        if key is None:
            self._items = dict(value)
            return self
        set_by_path(self._items, key, value, separator=self._separator)
        return self

    def has_path(self, keys: Any) -> bool:
        return has_paths(self._items, keys, separator=self._separator)

    def forget(self, keys: Any) -> 'Collection':
        remove_paths(self._items, keys, separator=self._separator)
        return self
