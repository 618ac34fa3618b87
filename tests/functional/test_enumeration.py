import types

import pytest
from mapiter.functional.enumeration import entries, keys, values


@pytest.fixture
def sample_obj():
    return {"a": 1, "b": 2, "c": {}}


def test_entries_is_lazy_iterator(sample_obj):
    result = entries(sample_obj)
    assert isinstance(result, types.GeneratorType)
    assert next(result) == ("a", 1)


def test_entries_preserves_insertion_order(sample_obj):
    assert list(entries(sample_obj)) == [("a", 1), ("b", 2), ("c", sample_obj["c"])]
    assert list(entries(sample_obj))[2][1] is sample_obj["c"]


def test_entries_is_single_pass_but_fresh_per_call(sample_obj):
    result = entries(sample_obj)
    assert len(list(result)) == 3
    assert list(result) == []
    assert len(list(entries(sample_obj))) == 3


def test_keys_and_values(sample_obj):
    assert list(keys(sample_obj)) == ["a", "b", "c"]
    assert list(values(sample_obj)) == [1, 2, sample_obj["c"]]


def test_enumeration_of_empty_mapping():
    assert list(entries({})) == []
    assert list(keys({})) == []
    assert list(values({})) == []


def test_entries_does_not_visit_ahead():
    class CountingDict(dict):
        reads = 0

        def __getitem__(self, key):
            CountingDict.reads += 1
            return super().__getitem__(key)

    obj = CountingDict(a=1, b=2, c=3)
    iterator = entries(obj)
    next(iterator)
    assert CountingDict.reads == 1
