"""Dot-path addressing for nested keyed containers.

This module reads, writes, checks and removes values inside arbitrarily
nested mappings using dot-delimited key paths such as ``'user.address.city'``.

Lookups follow one precedence rule everywhere:
1. A key that exists literally at the top level wins (``'a.b'`` stored as
   one key is returned before ``'a'`` -> ``'b'`` is considered).
2. Otherwise the key is split on the separator and walked segment by
   segment.

Missing keys never raise (except in ``require_path``); they resolve to a
default through ``keyroute.util.to_default``. Writes mutate the container
passed in, including the nested sub-containers reached on the way down.
"""

import logging
import re
from typing import Any, List
from collections.abc import Iterable, Mapping, MutableMapping

from keyroute.util import to_default

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = '.'

_MISSING = object()
_INTEGER_SEGMENT = re.compile(r'-?\d+')


class PathNotFoundError(KeyError):
    """Raised when a key path doesn't resolve to a value."""
    pass


def contains_key(container: Mapping, key: Any) -> bool:
    """Check whether ``key`` exists literally in ``container``.

    No dot-splitting happens here. A float key is compared by its string
    form so that ``1.5`` and ``'1.5'`` address the same entry.

    Examples:
        >>> contains_key({'a.b': 1}, 'a.b')
        True
        >>> contains_key({'1.5': 'x'}, 1.5)
        True
        >>> contains_key({'a': {'b': 1}}, 'a.b')
        False
    """
    if isinstance(key, float):
        key = str(key)
    try:
        return key in container
    except TypeError:
        # unhashable keys can't be present
        return False


def _lookup_key(container: Mapping, segment: str) -> Any:
    """Return the key under which ``segment`` is stored, or ``_MISSING``."""
    if contains_key(container, segment):
        return str(segment) if isinstance(segment, float) else segment
    if isinstance(segment, str) and _INTEGER_SEGMENT.fullmatch(segment):
        if int(segment) in container:
            return int(segment)
    return _MISSING


def _as_key_list(keys: Any) -> List:
    """A string (or other non-iterable) is one key; any other iterable is a key set."""
    if keys is None:
        return []
    if isinstance(keys, Iterable) and not isinstance(keys, (str, bytes)):
        return list(keys)
    return [keys]


def _walk(container: Mapping, key: Any, separator: str) -> Any:
    """Resolve ``key`` with literal-key precedence, or return ``_MISSING``."""
    found = _lookup_key(container, key)
    if found is not _MISSING:
        return container[found]
    if not isinstance(key, str) or separator not in key:
        return _MISSING

    current = container
    for segment in key.split(separator):
        if not isinstance(current, Mapping):
            return _MISSING
        found = _lookup_key(current, segment)
        if found is _MISSING:
            return _MISSING
        current = current[found]
    return current


def get_by_path(
    container: Mapping,
    key: Any,
    default: Any = None,
    separator: str = DEFAULT_SEPARATOR
) -> Any:
    """Get a value from a nested container using a dot-path.

    Args:
        container: Nested mapping to read from
        key: Literal key or dot-path; ``None`` means "no address"
        default: Value (or factory) returned when the key doesn't resolve
        separator: Path separator

    Returns:
        The addressed value, or the resolved default

    Examples:
        >>> d = {'a': {'b': {'c': 42}}}
        >>> get_by_path(d, 'a.b.c')
        42
        >>> get_by_path(d, 'a.x', default='not found')
        'not found'
        >>> get_by_path({'a.b': 1, 'a': {'b': 2}}, 'a.b')
        1
        >>> get_by_path({}, 'x', default=lambda: 5)
        5
    """
    if key is None:
        return to_default(default)

    value = _walk(container, key, separator)
    if value is _MISSING:
        return to_default(default)
    return value


def require_path(
    container: Mapping,
    key: Any,
    separator: str = DEFAULT_SEPARATOR
) -> Any:
    """Get a value by dot-path, raising if it doesn't resolve.

    Unlike ``get_by_path`` this tells "absent" apart from "present and
    equal to the default".

    Raises:
        PathNotFoundError: If ``key`` is None or doesn't resolve

    Examples:
        >>> require_path({'a': {'b': None}}, 'a.b') is None
        True
    """
    value = _MISSING if key is None else _walk(container, key, separator)
    if value is _MISSING:
        raise PathNotFoundError(f"Path not found: {key!r}")
    return value


def set_by_path(
    container: MutableMapping,
    key: Any,
    value: Any,
    separator: str = DEFAULT_SEPARATOR
) -> Any:
    """Set a value in a nested container by dot-path (modifies in place).

    A key already stored literally at the top level is overwritten there,
    matching the lookup precedence of ``get_by_path``.
    Intermediate segments that are missing, or that hold something other
    than a mapping, are replaced with fresh empty dicts. Sub-containers
    are never copied, so the change is visible through every reference to
    ``container``.

    With ``key=None`` the whole container is replaced: a mapping ``value``
    is copied into ``container`` in place, anything else is returned as is.

    Args:
        container: Nested mapping to modify
        key: Literal key or dot-path
        value: Value to set
        separator: Path separator

    Returns:
        The same top-level container, for chaining

    Examples:
        >>> d = {}
        >>> set_by_path(d, 'a.b.c', 42)
        {'a': {'b': {'c': 42}}}
        >>> set_by_path({'a': 1}, 'a.b', 2)
        {'a': {'b': 2}}
    """
    if key is None:
        if isinstance(value, Mapping) and isinstance(container, MutableMapping):
            replacement = dict(value)
            container.clear()
            container.update(replacement)
            return container
        logger.debug("replacing container with non-mapping %s", type(value).__name__)
        return value

    found = _lookup_key(container, key)
    if found is not _MISSING:
        container[found] = value
        return container
    if not isinstance(key, str) or separator not in key:
        container[str(key) if isinstance(key, float) else key] = value
        return container

    segments = key.split(separator)
    current = container
    for segment in segments[:-1]:
        found = _lookup_key(current, segment)
        if found is _MISSING:
            found = segment
        if not isinstance(current.get(found), MutableMapping):
            if found in current:
                logger.debug("overwriting non-container at segment %r of %r", segment, key)
            current[found] = {}
        current = current[found]

    final = _lookup_key(current, segments[-1])
    current[segments[-1] if final is _MISSING else final] = value
    return container


def has_paths(
    container: Mapping,
    keys: Any,
    separator: str = DEFAULT_SEPARATOR
) -> bool:
    """Check that every key (literal or dot-path) exists in the container.

    Args:
        container: Nested mapping to check
        keys: A single key, or an iterable of keys (tuples and
            ``dict.keys()`` views are key sets, not composite keys)
        separator: Path separator

    Returns:
        True only if all keys resolve; False for an empty container or
        an empty key set

    Examples:
        >>> has_paths({'a': {'b': 1}}, 'a.b')
        True
        >>> has_paths({'a': {}}, 'a.b')
        False
        >>> has_paths({'a': 1, 'b': {'c': 2}}, ['a', 'b.c'])
        True
    """
    keys = _as_key_list(keys)
    if not container or not keys:
        return False
    return all(_walk(container, key, separator) is not _MISSING for key in keys)


def remove_paths(
    container: MutableMapping,
    keys: Any,
    separator: str = DEFAULT_SEPARATOR
) -> None:
    """Remove one or many keys (literal or dot-path) from the container.

    A key present literally at the top level is deleted directly.
    Otherwise the path is walked; if an intermediate segment is missing
    or isn't a mapping the key is skipped.

    Args:
        container: Nested mapping to modify in place
        keys: A single key, or an iterable of keys (tuples and
            ``dict.keys()`` views are key sets, not composite keys)
        separator: Path separator

    Examples:
        >>> d = {'a': {'b': 1, 'c': 2}}
        >>> remove_paths(d, 'a.b')
        >>> d
        {'a': {'c': 2}}
    """
    for key in _as_key_list(keys):
        found = _lookup_key(container, key)
        if found is not _MISSING:
            del container[found]
            continue
        if not isinstance(key, str):
            continue

        segments = key.split(separator)
        current = container
        for segment in segments[:-1]:
            found = _lookup_key(current, segment)
            if found is _MISSING or not isinstance(current[found], MutableMapping):
                logger.debug("skipping removal of %r: %r is not a container", key, segment)
                current = None
                break
            current = current[found]

        if current is None:
            continue
        found = _lookup_key(current, segments[-1])
        if found is not _MISSING:
            del current[found]


def first(container: Mapping, default: Any = None) -> Any:
    """Get the first value in iteration order, or the resolved default.

    Examples:
        >>> first({'a': 1, 'b': 2})
        1
        >>> first({}, default=lambda: 'empty')
        'empty'
    """
    for key in container:
        return container[key]
    return to_default(default)


def last(container: Mapping, default: Any = None) -> Any:
    """Get the last value in iteration order, or the resolved default.

    Examples:
        >>> last({'a': 1, 'b': 2})
        2
        >>> last({}, default=0)
        0
    """
    values = list(container.values())
    if not values:
        return to_default(default)
    return values[-1]

