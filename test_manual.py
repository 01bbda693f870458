"""Manual walk-through to verify the keyroute implementation."""

from keyroute import (
    get_by_path, set_by_path, has_paths, remove_paths, dump_container,
    join, PathTemplate, Collection,
)

print("=" * 60)
print("Testing keyroute implementation")
print("=" * 60)

# Test 1: Set and get by path
print("\nTest 1: Set and get by path")
config = {}
set_by_path(config, 'db.host', 'localhost')
set_by_path(config, 'db.port', 5432)
print(f"Result: {config}")
assert get_by_path(config, 'db.port') == 5432
print("✓ Passed")

# Test 2: Literal key precedence
print("\nTest 2: Literal key precedence")
data = {'a.b': 'literal', 'a': {'b': 'nested'}}
result = get_by_path(data, 'a.b')
print(f"Result: {result}")
assert result == 'literal'
print("✓ Passed")

# Test 3: Lazy defaults
print("\nTest 3: Lazy defaults")
result = get_by_path(config, 'db.user', default=lambda: 'root')
print(f"Result: {result}")
assert result == 'root'
print("✓ Passed")

# Test 4: Contains and remove
print("\nTest 4: Contains and remove")
remove_paths(config, 'db.port')
print(f"Result: {config}")
assert has_paths(config, 'db.host') and not has_paths(config, 'db.port')
print("✓ Passed")

# Test 5: Dump
print("\nTest 5: Dump")
print(dump_container({'db': {'host': 'localhost'}, 'debug': True}, beautify=True))
assert dump_container({'a': 1}) == "['a'=>1]"
print("✓ Passed")

# Test 6: Path templates
print("\nTest 6: Path templates")
route = PathTemplate(join('/api/', 'users', '{id}/'), {'id': r'\d+'})
print(f"Pattern: {route.pattern.pattern}")
print(f"Match: {route.match('/api/users/42')}")
assert route.match('/api/users/42') == {'id': '42'}
assert route.match('/api/users/abc') is None
assert route.inject(id=7) == '/api/users/7'
print("✓ Passed")

# Test 7: Collection
print("\nTest 7: Collection")
items = Collection().add('x').add('y').set_path('meta.count', 2)
print(f"Result: {items}")
assert items.first() == 'x' and items.get_path('meta.count') == 2
print("✓ Passed")

print("\n" + "=" * 60)
print("All tests passed! ✅")
print("=" * 60)
