import pytest

from crstructs.hashmap import HashMap


def _fruit_map():
    hm = HashMap(10)
    hm.insert("apple", 1)
    hm.insert("orange", 2)
    hm.insert("banana", 3)
    return hm


def _is_power_of_two(n):
    return n > 0 and n & (n - 1) == 0


def test_default_map_is_empty_with_one_bucket():
    hm = HashMap()
    assert len(hm) == 0
    assert not hm
    assert hm.bucket_count() == 1
    assert hm.load_factor() == 0.0
    assert hm.max_load_factor == 1.0


def test_requested_count_rounds_up_to_power_of_two():
    assert HashMap(10).bucket_count() == 16
    assert HashMap(8).bucket_count() == 8


def test_insert_and_lookup():
    hm = _fruit_map()
    assert len(hm) == 3
    assert hm.bucket_count() == 16
    assert hm.find("apple") == ("apple", 1)
    assert hm.contains("banana")
    assert "orange" in hm
    assert "pear" not in hm
    assert hm.find("pear") is None
    assert hm.count("apple") == 1
    assert sorted(hm) == [("apple", 1), ("banana", 3), ("orange", 2)]


def test_duplicate_keys_are_kept():
    hm = HashMap()
    hm.insert("a", 1)
    hm.insert("a", 2)
    hm.insert("b", 3)
    assert hm.count("a") == 2
    assert hm.erase("a") == 2
    assert hm.count("a") == 0
    assert len(hm) == 1


def test_growth_keeps_load_factor_bounded():
    hm = HashMap()
    for i in range(100):
        hm.insert(i, str(i))
        assert hm.load_factor() <= hm.max_load_factor
        assert _is_power_of_two(hm.bucket_count())
    assert len(hm) == 100
    assert all(hm.find(i) == (i, str(i)) for i in range(100))


def test_bucket_of_key_holds_it():
    hm = _fruit_map()
    for key in ("apple", "orange", "banana"):
        index = hm.bucket(key)
        assert 0 <= index < hm.bucket_count()
        assert hm.bucket_size(index) >= 1
    assert sum(hm.bucket_size(i) for i in range(hm.bucket_count())) == len(hm)


def test_bucket_size_out_of_range():
    hm = HashMap(4)
    with pytest.raises(IndexError, match="index out of range"):
        hm.bucket_size(4)


def test_erase_from_empty_raises():
    with pytest.raises(IndexError, match="cannot remove element from empty object"):
        HashMap().erase("apple")


def test_erase_missing_key_returns_zero():
    hm = _fruit_map()
    assert hm.erase("pear") == 0
    assert len(hm) == 3


def test_copy_is_independent():
    original = _fruit_map()
    duplicate = original.copy()
    assert sorted(duplicate) == sorted(original)
    assert duplicate.bucket_count() == original.bucket_count()
    for key in ("apple", "orange", "banana"):
        assert duplicate.erase(key) == 1
    assert not duplicate
    assert len(original) == 3


def test_rehash_shrinks_with_larger_load_factor():
    hm = _fruit_map()
    hm.max_load_factor = 2.0
    hm.rehash(4)
    assert hm.bucket_count() == 4
    assert sorted(hm) == [("apple", 1), ("banana", 3), ("orange", 2)]


def test_rehash_grows_to_requested_count():
    hm = _fruit_map()
    hm.rehash(64)
    assert hm.bucket_count() == 64
    assert hm.find("orange") == ("orange", 2)


def test_invalid_max_load_factor():
    hm = HashMap()
    with pytest.raises(ValueError):
        hm.max_load_factor = 0
    assert hm.max_load_factor == 1.0


def test_clear_keeps_buckets():
    hm = _fruit_map()
    hm.clear()
    assert len(hm) == 0
    assert hm.bucket_count() == 16
    assert not hm.contains("apple")


def test_custom_hash_puts_everything_in_one_bucket():
    hm = HashMap(8, hash_function=lambda key: 0)
    for key in ("x", "y", "z"):
        hm.insert(key, key)
    assert hm.bucket_size(0) == 3
    assert hm.hash_function()("anything") == 0


def test_custom_key_equality():
    hm = HashMap(hash_function=lambda k: hash(k.lower()),
                 key_eq=lambda a, b: a.lower() == b.lower())
    hm.insert("Apple", 1)
    assert hm.contains("APPLE")
    assert hm.key_eq()("a", "A")
    assert hm.erase("apple") == 1


def test_str_and_print(capsys):
    hm = HashMap()
    hm.insert("apple", 1)
    assert str(hm) == "{Key: apple, Value: 1}, "
    hm.print()
    HashMap().print()
    assert capsys.readouterr().out == (
        "{Key: apple, Value: 1}, \nNothing to print, map is empty\n"
    )