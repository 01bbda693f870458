"""Turn arbitrary values into callables.

``Invocable`` resolves its target once, at construction:
- a callable target is used as is
- an ``(owner, method_name)`` pair becomes the named method; static and
  class methods are taken from the class, anything else is bound to a new
  instance built from the constructor arguments
- any other value becomes a function returning that value

This is what lets a default passed to ``Collection.get`` or
``keyroute.util.to_default`` be a factory given by reference.
"""

import importlib
import inspect
import logging
import types
from typing import Any, Callable

logger = logging.getLogger(__name__)


class InvocableTargetError(TypeError):
    """Raised when an (owner, method_name) pair names something that can't be called."""
    pass


def _import_owner(owner: Any) -> Any:
    """Resolve ``'pkg.mod:Class'`` or ``'pkg.mod.Class'`` to the class."""
    if not isinstance(owner, str):
        return owner
    if ':' in owner:
        module_name, _, attr = owner.partition(':')
    else:
        module_name, _, attr = owner.rpartition('.')
    if not module_name or not attr:
        return None
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        logger.debug("could not import %r", module_name)
        return None
    obj = module
    for name in attr.split('.'):
        obj = getattr(obj, name, None)
        if obj is None:
            return None
    return obj


def _constant(value: Any) -> Callable:
    def constant(*args, **kwargs):
        return value
    return constant


class Invocable:
    """Callable wrapper around a function, a method reference, or a plain value.

    Examples:
        >>> Invocable(len)([1, 2])
        2
        >>> Invocable(42)()
        42
        >>> Invocable((dict, 'fromkeys'))(['a'])
        {'a': None}
        >>> Invocable(('collections:Counter', 'most_common'), 'aab')(1)
        [('a', 2)]
    """

    def __init__(self, target: Any, *args, **kwargs):
        """Initialize an Invocable.

        Args:
            target: Callable, ``(owner, method_name)`` pair, or any value
            *args: Constructor arguments when an instance method is bound
            **kwargs: Constructor keyword arguments, likewise

        Raises:
            InvocableTargetError: If the pair names a non-callable attribute
        """
        self.target = target
        self.func = self._resolve(target, args, kwargs)

    @staticmethod
    def _resolve(target: Any, args: tuple, kwargs: dict) -> Callable:
        if callable(target):
            return target
        if not (isinstance(target, (tuple, list)) and len(target) == 2):
            return _constant(target)

        owner, method_name = _import_owner(target[0]), target[1]
        if not inspect.isclass(owner) or not isinstance(method_name, str):
            return _constant(target)
        try:
            attr = inspect.getattr_static(owner, method_name)
        except AttributeError:
            logger.debug("%s has no attribute %r", owner.__qualname__, method_name)
            return _constant(target)

        if isinstance(attr, (staticmethod, classmethod, types.ClassMethodDescriptorType)):
            func = getattr(owner, method_name)
        else:
            func = getattr(owner(*args, **kwargs), method_name)
        if not callable(func):
            raise InvocableTargetError(
                f"{owner.__qualname__}.{method_name} is not callable"
            )
        return func

    def __call__(self, *args, **kwargs) -> Any:
        return self.func(*args, **kwargs)

    def __repr__(self) -> str:
        return f"Invocable({self.target!r})"


def as_callable(target: Any, *args, **kwargs) -> Callable:
    """Resolve ``target`` to a plain callable.

    Examples:
        >>> as_callable('fallback')()
        'fallback'
    """
    return Invocable(target, *args, **kwargs).func
