"""Tests for turning values into callables."""

import pytest
from keyroute.callables import Invocable, as_callable, InvocableTargetError
from keyroute.util import to_default


class Greeter:
    greeting = 'hello'

    def __init__(self, name='world'):
        self.name = name

    def greet(self, punctuation='!'):
        return f'{self.greeting} {self.name}{punctuation}'

    @staticmethod
    def shout(text):
        return text.upper()

    @classmethod
    def make(cls, name):
        return cls(name)


def test_callable_target_is_used_directly():
    """Test that a callable target is returned unchanged."""
    func = len
    assert as_callable(func) is func
    assert Invocable(lambda a, b: a + b)(1, 2) == 3


def test_plain_value_becomes_constant():
    """Test that any other value is wrapped in a constant function."""
    assert Invocable(42)() == 42
    assert Invocable({'a': 1})('ignored', key='too') == {'a': 1}


def test_instance_method_pair():
    """Test binding a method on a freshly built instance."""
    assert Invocable((Greeter, 'greet'))() == 'hello world!'
    assert Invocable((Greeter, 'greet'), 'Ada')('?') == 'hello Ada?'
    assert Invocable([Greeter, 'greet'], name='Bob')() == 'hello Bob!'


def test_static_and_class_method_pairs():
    """Test that static and class methods are taken from the class."""
    assert Invocable((Greeter, 'shout'))('hi') == 'HI'
    made = Invocable((Greeter, 'make'))('Cy')
    assert isinstance(made, Greeter) and made.name == 'Cy'


def test_import_string_owner():
    """Test owners given as import strings."""
    assert Invocable(('collections:OrderedDict', 'fromkeys'))('ab') == {'a': None, 'b': None}
    assert Invocable(('collections.Counter', 'most_common'), 'aab')(1) == [('a', 2)]


def test_unresolvable_pairs_become_constants():
    """Test that pairs naming nothing degrade to constant functions."""
    missing_method = (Greeter, 'nope')
    assert Invocable(missing_method)() == missing_method
    unknown_module = ('no_such_module_xyz:Thing', 'run')
    assert Invocable(unknown_module)() == unknown_module
    assert Invocable(('not-a-class', 'run'))() == ('not-a-class', 'run')
    assert Invocable((1, 2, 3))() == (1, 2, 3)


def test_non_callable_attribute_raises():
    """Test that a pair naming a data attribute is rejected."""
    with pytest.raises(InvocableTargetError):
        Invocable((Greeter, 'greeting'))


def test_to_default_with_invocable():
    """Test that lazy defaults accept resolved callables."""
    assert to_default(Invocable((Greeter, 'shout')), 'x') == 'X'
