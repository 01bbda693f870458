"""Basic tests for keyroute functionality."""

import pytest
from keyroute import (
    get_by_path,
    set_by_path,
    has_paths,
    remove_paths,
    dump_container,
    join,
    compile_template,
    extract_parameter_names,
    extract_parameter_values,
    inject_parameters,
)


@pytest.mark.parametrize('container', [{}, {'a': 1}, {'a': {'b': 'x'}}, {'a.b.c': 0}])
def test_set_then_get(container):
    """Test that a value set by path reads back by the same path."""
    assert get_by_path(set_by_path(container, 'a.b.c', 'v'), 'a.b.c') == 'v'


def test_default_and_lazy_default():
    """Test plain and lazy defaults for missing keys."""
    assert get_by_path({}, 'x', default=5) == 5
    assert get_by_path({}, 'x', default=lambda: 5) == 5


def test_literal_key_precedence():
    """Test that a literal dotted key wins over the nested path."""
    assert get_by_path({'a.b': 1, 'a': {'b': 2}}, 'a.b') == 1


def test_contains():
    """Test dot-path existence checks."""
    assert has_paths({'a': {'b': 1}}, 'a.b') is True
    assert has_paths({'a': {}}, 'a.b') is False


def test_remove_nested():
    """Test removing a nested key leaves its siblings."""
    data = {'a': {'b': 1, 'c': 2}}
    remove_paths(data, 'a.b')
    assert data == {'a': {'c': 2}}


def test_template_round_trip():
    """Test extracting names and values from a two-parameter template."""
    template = '/users/{id}/posts/{postId}'
    assert extract_parameter_names(template) == ['id', 'postId']
    pattern = compile_template(template)
    assert extract_parameter_values('/users/42/posts/7', pattern) == ['42', '7']


def test_inject_then_extract():
    """Test that injected values extract back out."""
    path = inject_parameters('/users/{id}', {'id': 42})
    assert path == '/users/42'
    assert extract_parameter_values(path, compile_template('/users/{id}')) == ['42']


def test_join():
    """Test joining drops empty parts and doubled separators."""
    assert join('/a/', 'b', '', '/', '/c/') == '/a/b/c'


def test_condition_override():
    """Test that a condition replaces the default parameter pattern."""
    pattern = compile_template('/items/{sku}', {'sku': r'\d+'})
    assert pattern.match('/items/abc') is None
    assert pattern.match('/items/123') is not None


def test_dump_container():
    """Test the compact dump of empty and flat containers."""
    assert dump_container({}) == '[]'
    assert dump_container({'a': 1}) == "['a'=>1]"


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
