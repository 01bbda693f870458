"""Symbolic addressing for nested containers and route-style path templates.

This package provides two small tools:
- Dot-path access to nested mappings (get, set, check, remove), where a
  literal key such as ``'a.b'`` takes precedence over the path a -> b
- Path templates with ``{name}`` placeholders: compile to a regex, extract
  parameter names and values, inject values back

Basic usage:
    >>> from keyroute import get_by_path, set_by_path
    >>> config = {}
    >>> set_by_path(config, 'db.host', 'localhost')
    {'db': {'host': 'localhost'}}
    >>> get_by_path(config, 'db.port', default=5432)
    5432

Path templates:
    >>> from keyroute import PathTemplate
    >>> route = PathTemplate('/users/{id}', {'id': r'\\d+'})
    >>> route.match('/users/42')
    {'id': '42'}
    >>> route.inject(id=7)
    '/users/7'
"""

from keyroute.util import (
    to_default,
    to_string,
    dump_container,
)

from keyroute.paths import (
    get_by_path,
    set_by_path,
    has_paths,
    remove_paths,
    contains_key,
    first,
    last,
    require_path,
    PathNotFoundError,
)

from keyroute.templates import (
    normalize,
    join,
    compile_template,
    extract_parameter_names,
    extract_parameter_values,
    inject_parameters,
    PathTemplate,
    TemplateMismatchError,
    DEFAULT_PARAMETER_PATTERN,
)

from keyroute.mappings import Collection

from keyroute.callables import (
    Invocable,
    as_callable,
    InvocableTargetError,
)

__version__ = "0.1.0"  # Keep in sync with package version

__all__ = [
    # Defaults and dumps
    "to_default",
    "to_string",
    "dump_container",
    # Key paths
    "get_by_path",
    "set_by_path",
    "has_paths",
    "remove_paths",
    "contains_key",
    "first",
    "last",
    "require_path",
    # Path templates
    "normalize",
    "join",
    "compile_template",
    "extract_parameter_names",
    "extract_parameter_values",
    "inject_parameters",
    "PathTemplate",
    "DEFAULT_PARAMETER_PATTERN",
    # Collections and callables
    "Collection",
    "Invocable",
    "as_callable",
    # Exceptions
    "PathNotFoundError",
    "TemplateMismatchError",
    "InvocableTargetError",
]
