"""Unit tests for the TreeMap public API."""

import pytest

from ordered_map import (
    RED,
    Entry,
    InvalidArgumentError,
    InvariantViolationError,
    TreeMap,
    TreeMapConfig,
)
from ordered_map.interfaces.sorted_map import SortedMap


@pytest.fixture
def m():
    """Create empty tree map for tests."""
    return TreeMap()


@pytest.fixture(scope="module")
def ascending_99999():
    """Map holding 1..99999 inserted in ascending order."""
    tree = TreeMap()
    for i in range(1, 100000):
        tree.put(i, str(i))
    return tree


def test_new_map_is_empty(m):
    """Test that a new map has no mappings."""
    assert m.is_empty()
    assert m.size() == 0
    assert len(m) == 0
    assert not m


def test_map_with_mapping_is_not_empty(m):
    """Test is_empty after a put."""
    m.put(1, "a")

    assert not m.is_empty()
    assert m


def test_new_map_contains_no_key(m):
    """Test contains_key on an empty map."""
    assert m.contains_key(1) is False


def test_put_and_contains_key(m):
    """Test that put keys are found."""
    m.put(3, "a")
    m.put(5, "b")
    m.put(23423, "c")

    assert m.contains_key(3)
    assert m.contains_key(5)
    assert m.contains_key(23423)
    assert not m.contains_key(4)


def test_put_returns_previous_value(m):
    """Test that re-putting a key returns the value it replaced."""
    first = m.put(7, "aaa")
    second = m.put(7, "bbb")

    assert first is None
    assert second == "aaa"
    assert m.get(7) == "bbb"
    assert m.size() == 1


def test_put_same_key_keeps_shape(m):
    """Test that an update changes only the value."""
    for key in [5, 3, 8, 1, 4]:
        m.put(key, str(key))
    before = m.pretty_print()

    m.put(3, "x")

    assert m.pretty_print() == before
    assert m.size() == 5
    assert m.get(3) == "x"


def test_put_replaces_value_in_value_scan(m):
    """Test that the old value is gone after an update."""
    m.put(1, "old")
    m.put(1, "new")

    assert not m.contains_value("old")
    assert m.contains_value("new")


def test_put_null_value(m):
    """Test that None values are stored."""
    m.put(1, None)

    assert m.contains_key(1)
    assert m.get(1) is None
    assert m.find(1) == Entry(1, None)
    assert m.put(1, "a") is None


def test_get(m):
    """Test lookup by key."""
    m.put(1, "one")
    m.put(2, "two")
    m.put(3, "three")

    assert m.get(2) == "two"
    assert m.get(4) is None
    assert m.get(4, "default") == "default"


def test_find_distinguishes_absent_from_none(m):
    """Test that find tells a stored None apart from a missing key."""
    m.put(1, None)

    assert m.find(1) == Entry(1, None)
    assert m.find(2) is None


@pytest.mark.parametrize(
    "call",
    [
        lambda m: m.put(None, "v"),
        lambda m: m.get(None),
        lambda m: m.find(None),
        lambda m: m.contains_key(None),
        lambda m: m.remove(None),
        lambda m: m.put_all(None),
        lambda m: m[None],
    ],
)
def test_none_arguments_rejected(m, call):
    """Test that None keys and a None source raise InvalidArgumentError."""
    m.put(1, "a")

    with pytest.raises(InvalidArgumentError):
        call(m)

    assert m.size() == 1


def test_invalid_argument_is_value_error(m):
    """Test that callers can catch the standard ValueError."""
    with pytest.raises(ValueError):
        m.put(None, "v")


def test_incomparable_key_raises_type_error(m):
    """Test that a key of the wrong type propagates TypeError."""
    m.put(1, "")

    with pytest.raises(TypeError):
        m.contains_key("")


def test_contains_value(m):
    """Test value scans."""
    m.put(1, "aaaa")

    assert m.contains_value("aaaa")
    assert not m.contains_value("bbbb")
    assert not m.contains_value(222)


def test_contains_value_none_query(m):
    """Test that a None query matches only stored None values."""
    m.put(1, "aaaa")
    assert not m.contains_value(None)

    m.put(2, None)
    assert m.contains_value(None)


def test_contains_value_scans_whole_tree(m):
    """Test that values below the root are found, even when the root holds None."""
    for key in range(1, 16):
        m.put(key, f"v{key}")
    m.put(8, None)  # root of the perfect tree

    assert m.contains_value("v1")
    assert m.contains_value("v15")
    assert m.contains_value(None)
    assert not m.contains_value("v8")


def test_contains_value_on_empty_map(m):
    """Test value scans on an empty map."""
    assert not m.contains_value(None)
    assert not m.contains_value("a")


def test_size_counts_distinct_keys(m):
    """Test size after inserts and an update."""
    m.put(6, "abc")
    m.put(8, "ferf")
    m.put(9, "wef")
    m.put(8, "again")

    assert m.size() == 3


def test_common_height_is_single_path_height(m):
    """Test the diagnostics on {6, 8, 9}."""
    m.put(6, "abc")
    m.put(8, "ferf")
    m.put(9, "wef")

    assert m.left_path_height() == 2
    assert m.right_path_height() == 2
    assert m.common_height() == 2
    assert m.is_balanced()


def test_diagnostics_on_empty_map(m):
    """Test diagnostics with no root."""
    assert m.common_height() == 0
    assert m.height() == 0
    assert m.is_balanced()


def test_remove(m):
    """Test removal of leaf, inner and root keys."""
    for key in [2, 6, 12, 3, 9]:
        m.put(key, str(key))

    m.remove(12)
    m.remove(6)

    assert not m.contains_key(12)
    assert not m.contains_key(6)
    assert m.contains_key(2)
    assert m.size() == 3
    m.check_invariants()


def test_remove_returns_none(m):
    """Test that remove reports nothing about the removed value."""
    m.put(9, "nine")

    assert m.remove(9) is None
    assert m.remove(9) is None


def test_remove_from_empty_map(m):
    """Test that removing from an empty map is a no-op."""
    m.remove(9)

    assert m.is_empty()


def test_remove_absent_key_keeps_size(m):
    """Test that removing a missing key changes nothing."""
    m.put(1, "a")
    m.put(2, "b")

    m.remove(9)

    assert m.size() == 2


def test_remove_all_leaves_empty_map(m):
    """Test the insert-all, remove-all round trip."""
    keys = [50, 20, 80, 10, 30, 70, 90, 25, 35, 85]
    for key in keys:
        m.put(key, key)
    for key in keys:
        m.remove(key)

    assert m.is_empty()
    assert m.size() == 0
    m.check_invariants(check_colors=True)


def test_clear(m):
    """Test that clear drops every mapping."""
    for key in range(10):
        m.put(key, key)

    m.clear()

    assert m.size() == 0
    assert m.is_empty()
    assert not m.contains_key(1)


def test_put_all_from_dict(m):
    """Test copying another mapping."""
    m.put_all({232: "a", 100: "b"})

    assert m.contains_key(232)
    assert m.contains_key(100)
    assert m.size() == 2


def test_put_all_from_pairs(m):
    """Test copying an iterable of pairs."""
    m.put_all([(3, "c"), (1, "a"), (3, "C")])

    assert m.size() == 2
    assert m.get(3) == "C"


def test_put_all_none_key_keeps_earlier_mappings(m):
    """Test that a None key aborts the copy but keeps what was put before it."""
    source = {1: "a", None: "b", 3: "c"}

    with pytest.raises(InvalidArgumentError):
        m.put_all(source)

    assert m.contains_key(1)
    assert not m.contains_key(3)


def test_constructor_copies_source():
    """Test the source argument of the constructor."""
    tree = TreeMap({2: "b", 1: "a"})

    assert list(tree) == [1, 2]


def test_keys_snapshot(m):
    """Test that keys() is a set snapshot."""
    for key in [5, 1, 3]:
        m.put(key, str(key))

    keys = m.keys()
    m.put(7, "7")

    assert keys == {1, 3, 5}
    assert len(keys) == 3


def test_values_in_key_order(m):
    """Test that values() follows ascending key order and keeps duplicates."""
    m.put(3, "x")
    m.put(1, "y")
    m.put(2, "x")

    values = m.values()
    m.remove(1)

    assert values == ["y", "x", "x"]


def test_entries(m):
    """Test that entries() is a set of key/value pairs."""
    m.put(2, "b")
    m.put(1, "a")

    entries = m.entries()

    assert entries == {Entry(1, "a"), Entry(2, "b")}
    assert Entry(1, "a") in entries
    assert sorted(entries) == [(1, "a"), (2, "b")]


def test_entries_accept_unhashable_values(m):
    """Test that list and dict values still export as an entry set."""
    m.put(1, ["list"])
    m.put(2, {"a": 1})

    entries = m.entries()

    assert len(entries) == 2
    assert Entry(1, ["list"]) in entries
    assert Entry(2, {"a": 1}) in entries
    assert any(entry == (1, ["list"]) for entry in entries)


def test_entries_compare_values(m):
    """Test that set membership still checks the value, not just the key."""
    m.put(1, ["list"])

    assert Entry(1, ["other"]) not in m.entries()


def test_entry_hashes_by_key():
    """Test that an Entry hashes like its key, whatever the value."""
    assert hash(Entry(1, ["list"])) == hash(1)
    assert hash(Entry("a", {"b": 2})) == hash("a")
    assert Entry(1, "a") == (1, "a")


def test_keys_need_hashable_keys(m):
    """Test that keys() needs hashable keys even though put() does not."""
    m.put([1], "a")
    m.put([2], "b")

    assert m.get([1]) == "a"
    with pytest.raises(TypeError):
        m.keys()


def test_items_iterate_in_order(m):
    """Test ordered lazy iteration."""
    for key in [4, 2, 5, 1, 3]:
        m.put(key, key * 10)

    assert list(m.items()) == [(1, 10), (2, 20), (3, 30), (4, 40), (5, 50)]
    assert list(m) == [1, 2, 3, 4, 5]


def test_inorder_visits_entries(m):
    """Test the traversal callback."""
    for key in [2, 3, 1]:
        m.put(key, str(key))
    seen = []

    m.inorder(seen.append)

    assert seen == [Entry(1, "1"), Entry(2, "2"), Entry(3, "3")]


def test_min_and_max_key(m):
    """Test extreme keys."""
    assert m.min_key() is None
    assert m.max_key() is None

    for key in [5, 2, 9]:
        m.put(key, key)

    assert m.min_key() == 2
    assert m.max_key() == 9


def test_mapping_protocol(m):
    """Test the dict-style dunders."""
    m[1] = "a"
    m[2] = "b"

    assert m[1] == "a"
    assert 1 in m
    assert 3 not in m
    assert None not in m

    del m[1]
    assert 1 not in m

    with pytest.raises(KeyError):
        m[1]
    with pytest.raises(KeyError):
        del m[1]


def test_repr(m):
    """Test repr lists mappings in key order."""
    m.put(2, "b")
    m.put(1, "a")

    assert repr(m) == "TreeMap({1: 'a', 2: 'b'})"
    assert repr(TreeMap()) == "TreeMap({})"


def test_string_keys(m):
    """Test any totally ordered key type works."""
    for word in ["pear", "apple", "fig", "banana"]:
        m.put(word, len(word))

    assert list(m) == ["apple", "banana", "fig", "pear"]
    assert m.get("fig") == 3


def test_check_invariants_on_every_mutation():
    """Test that the config flag runs the checker after each operation."""
    tree = TreeMap(config=TreeMapConfig(check_invariants=True))
    for key in range(50):
        tree.put(key, key)
    for key in range(0, 50, 3):
        tree.remove(key)

    # corrupt the minimum node, which the insert of 100 below never touches
    node = tree._root
    while node.left is not None:
        node = node.left
    node.size += 1
    with pytest.raises(InvariantViolationError):
        tree.put(100, 100)


def test_colors_checked_until_first_removal(m):
    """Test that color checks are skipped once a removal has happened."""
    for key in range(1, 8):
        m.put(key, key)
    m.check_invariants()

    m.remove(4)
    m._root.color = RED  # a red root fails any color check

    m.check_invariants()
    with pytest.raises(InvariantViolationError):
        m.check_invariants(check_colors=True)


def test_colors_checked_again_after_clear(m):
    """Test that emptying the tree makes colors meaningful again."""
    m.put(1, 1)
    m.remove(1)
    m.put(2, 2)

    m._root.color = RED
    with pytest.raises(InvariantViolationError):
        m.check_invariants()


def test_balance_tolerance():
    """Test that the tolerance widens the balance heuristic."""
    strict = TreeMap({1: "a", 2: "b"}, config=TreeMapConfig(balance_tolerance=0))
    loose = TreeMap({1: "a", 2: "b"})

    # root 2 with a single left child: paths of 2 and 1
    assert not strict.is_balanced()
    assert loose.is_balanced()


def test_negative_balance_tolerance_rejected():
    """Test config validation."""
    with pytest.raises(InvalidArgumentError):
        TreeMapConfig(balance_tolerance=-1)


def test_ascending_99999_contains_every_key(ascending_99999):
    """Test bulk ascending insertion."""
    assert ascending_99999.size() == 99999
    for i in range(1, 100000):
        assert ascending_99999.contains_key(i)


def test_ascending_99999_heights(ascending_99999):
    """Test the single-path heights after ascending insertion."""
    assert ascending_99999.common_height() == 17
    assert ascending_99999.left_path_height() == 17
    assert ascending_99999.right_path_height() == 16
    assert ascending_99999.is_balanced()
    assert ascending_99999.height() >= ascending_99999.common_height()


def test_removals_unbalance_the_path_heights():
    """Test that heavy removal degrades the single-path balance heuristic."""
    tree = TreeMap()
    for i in range(1, 100000):
        tree.put(i, str(i))
    assert tree.is_balanced()

    for i in range(200, 15000):
        tree.remove(i)

    assert not tree.is_balanced()
    assert tree.size() == 99999 - (15000 - 200)
    tree.check_invariants()


def test_tree_map_satisfies_sorted_map_protocol(m):
    """Test that TreeMap provides every method of the SortedMap protocol."""
    assert isinstance(m, SortedMap)
