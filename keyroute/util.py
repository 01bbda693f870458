"""Utility functions for keyroute: lazy defaults and container dumps.

This module provides the small helpers shared by the resolver and the
collection façade:
- Default-value resolution (plain values or zero-argument factories)
- Deterministic, human-readable dumps of nested containers
"""

from typing import Any, Set
from collections.abc import Mapping


def to_default(value: Any, *args, **kwargs) -> Any:
    """Resolve a default value, calling it if it is callable.

    Every "or return a default" operation in keyroute goes through this
    function, so an expensive fallback can be passed as a factory and is
    only built when it is actually needed.

    Args:
        value: The default value, or a callable producing it
        *args: Positional arguments passed to a callable default
        **kwargs: Keyword arguments passed to a callable default

    Returns:
        ``value(*args, **kwargs)`` if value is callable, else value

    Examples:
        >>> to_default(5)
        5
        >>> to_default(lambda: 5)
        5
        >>> to_default(lambda x: x * 2, 21)
        42
        >>> to_default(dict)
        {}
    """
    if callable(value):
        return value(*args, **kwargs)
    return value


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _entries(container):
    if isinstance(container, Mapping):
        return list(container.items())
    return list(enumerate(container))


def to_string(value: Any, beautify: bool = False) -> str:
    """Render any value the way ``dump_container`` renders entries.

    Args:
        value: Value to render
        beautify: If True, nested containers are laid out one entry per line

    Returns:
        String form of the value

    Examples:
        >>> to_string('a')
        "'a'"
        >>> to_string(None)
        'None'
        >>> to_string({'a': 1})
        "['a'=>1]"
    """
    if _is_container(value):
        return dump_container(value, beautify)
    if value is None or isinstance(value, (str, bytes, int, float, complex)):
        return repr(value)
    return f"{type(value).__qualname__}::class"


def dump_container(
    container,
    beautify: bool = False,
    depth: int = 0,
    active: Set[int] = None
) -> str:
    """Dump a possibly nested container into a deterministic string.

    An empty container renders as ``[]``. Each entry renders as
    ``key=>value``, entries are separated by ``,`` and the last entry of a
    level carries no separator. With ``beautify`` each entry gets its own
    line, indented with one tab per nesting level, and the arrow is
    spaced out as `` => ``.

    Args:
        container: Mapping, list or tuple to dump
        beautify: If True, produce the multi-line layout
        depth: Current nesting level (used in recursion)
        active: IDs of the containers being dumped on the current path;
            a container met again on that path renders as ``[...]``

    Returns:
        The rendered string

    Examples:
        >>> dump_container({})
        '[]'
        >>> dump_container({'a': 1, 'b': {'c': True}})
        "['a'=>1,'b'=>['c'=>True]]"
        >>> print(dump_container({'a': 1}, beautify=True))
        [
        	'a' => 1
        ]
        >>> d = {'a': 1}
        >>> d['self'] = d
        >>> dump_container(d)
        "['a'=>1,'self'=>[...]]"
    """
    if active is None:
        active = set()
    if id(container) in active:
        return "[...]"

    entries = _entries(container)
    if not entries:
        return "[]"

    tab = "\t" * depth if beautify else ""
    result = "[\n" if beautify else "["
    remaining = len(entries)
    active.add(id(container))
    try:
        for key, value in entries:
            remaining -= 1
            if beautify:
                result += tab + "\t"
            result += to_string(key, beautify)
            result += " => " if beautify else "=>"
            if _is_container(value):
                result += dump_container(value, beautify, depth + 1, active)
            else:
                result += to_string(value, beautify)
            if remaining > 0:
                result += ","
            if beautify:
                result += "\n"
    finally:
        # diamonds (shared, non-cyclic) still render in full
        active.discard(id(container))

    return result + tab + "]" if beautify else result + "]"
