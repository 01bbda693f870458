"""Path templates: compile route-style templates and move parameters in and out.

A path template is a ``/``-delimited string where a segment written as
``{name}`` is a dynamic segment bound to parameter ``name``:

    >>> pattern = compile_template('/users/{id}/posts/{postId}')
    >>> extract_parameter_values('/users/42/posts/7', pattern)
    ['42', '7']
    >>> inject_parameters('/users/{id}', {'id': 42})
    '/users/42'

Dynamic segments match ``[A-Za-z0-9-]+`` unless a condition map supplies a
different regular expression for that parameter.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Pattern, Tuple, Union
from collections.abc import Mapping

logger = logging.getLogger(__name__)

SEPARATOR = '/'
DEFAULT_PARAMETER_PATTERN = r'[A-Za-z0-9-]+'

# Characters dropped from the end of a path (and from both ends of joined parts)
TRIM_CHARS = '\n\r\t\v\0/\\ '

DYNAMIC_SEGMENT = re.compile(r'\{(\w+)\}')


class TemplateMismatchError(ValueError):
    """Raised when a concrete path doesn't match a template."""
    pass


def normalize(path: str) -> str:
    """Strip trailing whitespace, control characters and separators.

    Leading characters are kept, so an absolute path stays absolute.

    Examples:
        >>> normalize('/users/42/ ')
        '/users/42'
        >>> normalize('/')
        ''
    """
    return path.rstrip(TRIM_CHARS)


def join(base: str, *parts: str) -> str:
    """Join path parts onto a base with exactly one separator between them.

    Parts that are empty, a bare separator, or empty once trimmed are
    dropped.

    Examples:
        >>> join('/a/', 'b', '', '/', '/c/')
        '/a/b/c'
        >>> join('api', 'v1')
        'api/v1'
    """
    result = normalize(base)
    for part in parts:
        if not part or part == SEPARATOR:
            continue
        part = part.strip(TRIM_CHARS)
        if part:
            result += SEPARATOR + part
    return result


def _group_count(piece: str) -> int:
    try:
        return re.compile(piece).groups
    except re.error:
        # raw literal fragments may only be valid as part of the whole pattern
        return 0


def _template_source(
    template: str,
    conditions: Optional[Mapping],
    default_pattern: str,
    escape_literals: bool
) -> Tuple[str, List[Tuple[str, int]]]:
    """Build the regex source and the group number each dynamic segment opens."""
    conditions = conditions or {}
    pieces = []
    bindings = []
    groups = 0
    for segment in normalize(template).split(SEPARATOR):
        match = DYNAMIC_SEGMENT.fullmatch(segment)
        if match:
            name = match.group(1)
            piece = '(' + (conditions.get(name) or default_pattern) + ')'
            bindings.append((name, groups + 1))
        elif escape_literals:
            piece = re.escape(segment)
        else:
            piece = segment
        pieces.append(piece)
        groups += _group_count(piece)

    return '^' + re.escape(SEPARATOR).join(pieces) + '$', bindings


def compile_template(
    template: str,
    conditions: Optional[Mapping] = None,
    *,
    default_pattern: str = DEFAULT_PARAMETER_PATTERN,
    escape_literals: bool = True
) -> Pattern:
    """Compile a path template into an anchored regular expression.

    Each dynamic segment becomes one capturing group, in template order.

    Args:
        template: Path template such as ``'/items/{sku}'``
        conditions: Per-parameter regex overriding ``default_pattern``;
            the override is used verbatim inside the group
        default_pattern: Pattern for dynamic segments without a condition
        escape_literals: If False, literal segments are used as raw regex
            (so a ``.`` in a literal segment matches any character)

    Returns:
        Compiled regex matching the whole path

    Raises:
        re.error: If a condition isn't a valid regular expression

    Examples:
        >>> compile_template('/items/{sku}', {'sku': r'\\d+'}).pattern
        '^/items/(\\\\d+)$'
        >>> bool(compile_template('/items/{sku}').match('/items/ab-1'))
        True
    """
    source, _ = _template_source(template, conditions, default_pattern, escape_literals)
    logger.debug("compiled template %r to %r", template, source)
    return re.compile(source)


def extract_parameter_names(template: str) -> List[str]:
    """Extract placeholder names from a template, in order.

    Duplicates are kept.

    Examples:
        >>> extract_parameter_names('/users/{id}/posts/{postId}')
        ['id', 'postId']
        >>> extract_parameter_names('/a/{x}/b/{x}')
        ['x', 'x']
        >>> extract_parameter_names('/static')
        []
    """
    return DYNAMIC_SEGMENT.findall(normalize(template))


def extract_parameter_values(path: str, pattern: Union[str, Pattern]) -> List[str]:
    """Extract parameter values from a concrete path.

    The pattern is searched for anywhere in the path; compiled templates are
    anchored, so for them this is a whole-path match.

    Args:
        path: Concrete path such as ``'/users/42'``
        pattern: Compiled template pattern (or its source string)

    Returns:
        Captured values in group order, or an empty list on no match

    Examples:
        >>> extract_parameter_values('/users/42/', compile_template('/users/{id}'))
        ['42']
        >>> extract_parameter_values('/posts/1', compile_template('/users/{id}'))
        []
        >>> extract_parameter_values('/api/users/5', r'users/(\\d+)')
        ['5']
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    match = pattern.search(normalize(path))
    if match is None:
        return []
    return [value if value is not None else '' for value in match.groups()]


def inject_parameters(template: str, parameters: Optional[Mapping] = None) -> str:
    """Replace ``{name}`` placeholders with parameter values.

    Placeholders without a parameter are left in place.

    Examples:
        >>> inject_parameters('/users/{id}', {'id': 42})
        '/users/42'
        >>> inject_parameters('/users/{id}/{tab}', {'id': 7})
        '/users/7/{tab}'
        >>> inject_parameters('/users/')
        '/users'
    """
    result = normalize(template)
    if not parameters:
        return result
    for name, value in parameters.items():
        result = result.replace('{' + str(name) + '}', str(value))
    return result


class PathTemplate:
    """A path template bundled with its condition map.

    The pattern is compiled on first use and reused afterwards.

    Examples:
        >>> tpl = PathTemplate('/users/{id}/posts/{postId}', {'id': r'\\d+'})
        >>> tpl.names
        ['id', 'postId']
        >>> tpl.match('/users/42/posts/hello')
        {'id': '42', 'postId': 'hello'}
        >>> tpl.match('/users/abc/posts/hello') is None
        True
        >>> tpl.inject(id=1, postId='x')
        '/users/1/posts/x'
    """

    def __init__(
        self,
        template: str,
        conditions: Optional[Mapping] = None,
        *,
        default_pattern: str = DEFAULT_PARAMETER_PATTERN,
        escape_literals: bool = True
    ):
        """Initialize a PathTemplate.

        Args:
            template: Path template
            conditions: Per-parameter regex overrides
            default_pattern: Pattern for dynamic segments without a condition
            escape_literals: If False, literal segments are raw regex
        """
        self.template = normalize(template)
        self.conditions = dict(conditions or {})
        self.default_pattern = default_pattern
        self.escape_literals = escape_literals
        self._pattern = None
        self._bindings = []

    @property
    def pattern(self) -> Pattern:
        if self._pattern is None:
            source, self._bindings = _template_source(
                self.template,
                self.conditions,
                self.default_pattern,
                self.escape_literals,
            )
            self._pattern = re.compile(source)
        return self._pattern

    @property
    def names(self) -> List[str]:
        return extract_parameter_names(self.template)

    def matches(self, path: str) -> bool:
        return self.pattern.match(normalize(path)) is not None

    def _bound(self, path: str) -> Optional[List[Tuple[str, str]]]:
        match = self.pattern.match(normalize(path))
        if match is None:
            return None
        return [(name, match.group(index) or '') for name, index in self._bindings]

    def values(self, path: str) -> List[str]:
        """One value per dynamic segment, in order (empty on no match).

        Groups opened inside a condition are not included.
        """
        return [value for _, value in self._bound(path) or []]

    def match(self, path: str) -> Optional[Dict[str, str]]:
        """Map parameter names to values, or None if ``path`` doesn't match.

        With repeated names the last value wins.
        """
        bound = self._bound(path)
        if bound is None:
            return None
        return dict(bound)

    def parse(self, path: str) -> Dict[str, str]:
        """Like ``match`` but raises ``TemplateMismatchError`` on no match."""
        params = self.match(path)
        if params is None:
            raise TemplateMismatchError(
                f"Path {path!r} does not match template {self.template!r}"
            )
        return params

    def inject(self, parameters: Optional[Mapping] = None, **kwargs: Any) -> str:
        """Build a concrete path from parameters given as a mapping or kwargs."""
        return inject_parameters(self.template, {**(parameters or {}), **kwargs})

    def __repr__(self) -> str:
        return f"PathTemplate({self.template!r}, {self.conditions!r})"
