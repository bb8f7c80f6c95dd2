import suite
import numpy as np
import pandas as pd
from collections import namedtuple
from filterable import F, from_range, empty

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

Person = namedtuple('Person', ['name', 'age', 'city'])

sample_people = [
    Person('alice', 25, 'nyc'),
    Person('bob', 30, 'la'),
    Person('charlie', 25, 'nyc'),
    Person('diana', 35, 'chicago'),
    Person('eve', 28, 'la')
]

sample_numbers = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


# --- positional lookup ---

@test("first and last return the ends")
def test_first_last():
    view = F(sample_numbers)
    assert_that(view.first() == 1, "first should be 1")
    assert_that(view.last() == 10, "last should be 10")


@test("first and last on empty return None")
def test_first_last_empty():
    assert_that(empty().first() is None, "first of empty is None")
    assert_that(empty().last() is None, "last of empty is None")
    assert_that(empty().first(default=-1) == -1, "default should be honoured")


@test("first_where finds the earliest match")
def test_first_where():
    person = F(sample_people).first_where(lambda p: p.city == 'la')
    assert_that(person.name == 'bob', f"bob is the first in la: {person}")
    assert_that(F(sample_people).first_where(lambda p: p.age > 99) is None, "no match gives None")


@test("last_where finds the latest match")
def test_last_where():
    person = F(sample_people).last_where(lambda p: p.age == 25)
    assert_that(person.name == 'charlie', f"charlie is the last aged 25: {person}")
    assert_that(empty().last_where(lambda _: True) is None, "empty gives None")


@test("last_where scans from the end")
def test_last_where_order():
    visited = []

    def record(x):
        visited.append(x)
        return x < 3

    result = F([1, 2, 3, 4, 5]).last_where(record)
    assert_that(result == 2, f"2 is the last element below 3: {result}")
    assert_that(visited == [5, 4, 3, 2], f"should stop at the first hit from the end: {visited}")


@test("first_where stops at the first hit")
def test_first_where_short_circuit():
    visited = []
    F([1, 2, 3, 4]).first_where(lambda x: visited.append(x) or x == 2)
    assert_that(visited == [1, 2], f"should not look past the hit: {visited}")


@test("lookups return stored None elements")
def test_lookup_none_element():
    view = F([None, 1])
    assert_that(view.first() is None, "a stored None is returned as is")
    assert_that(view.first_where(lambda x: x is not None) == 1, "predicate lookup still works")


@test("a private default separates a stored None from an empty view")
def test_lookup_missing_marker():
    missing = object()
    assert_that(F([None]).first(default=missing) is None, "the stored None is found")
    assert_that(empty().first(default=missing) is missing, "nothing found returns the marker")
    assert_that(F([None]).last(default=missing) is None, "last finds the stored None too")
    assert_that(F([1]).last_where(lambda x: x > 5, default=missing) is missing, "no match returns the marker")


# --- quantifiers ---

@test("any checks for a satisfying element")
def test_any():
    assert_that(F(sample_numbers).any(lambda x: x > 9), "10 satisfies x > 9")
    assert_that(not F(sample_numbers).any(lambda x: x > 10), "nothing exceeds 10")
    assert_that(not empty().any(lambda _: True), "empty is never any")


@test("any short-circuits")
def test_any_short_circuit():
    visited = []
    F([1, 2, 3]).any(lambda x: visited.append(x) or x == 1)
    assert_that(visited == [1], f"should stop at the first hit: {visited}")


@test("all checks every element")
def test_all():
    assert_that(F(sample_numbers).all(lambda x: x > 0), "all are positive")
    assert_that(not F(sample_numbers).all(lambda x: x < 10), "10 is not below 10")
    assert_that(empty().all(lambda _: False), "empty is always all")


@test("all agrees with negated any")
def test_all_any_law():
    view = F(sample_numbers)
    for pivot in range(0, 12):
        predicate = lambda x: x > pivot
        assert_that(view.all(predicate) == (not view.any(lambda x: not predicate(x))), f"law broken at {pivot}")


# --- counting ---

@test("count returns the length")
def test_count():
    assert_that(F(sample_numbers).count() == 10, "should count 10")
    assert_that(empty().count() == 0, "empty counts 0")
    assert_that(from_range(0, 50).count() == len(from_range(0, 50)), "count equals len")


@test("count_where counts matches as an int")
def test_count_where():
    view = F([1, 2, 3, 4, 5, 6, 7])
    assert_that(view.count_where(lambda x: x % 2 == 0) == 3, "three evens")
    assert_that(view.count_where(lambda _: True) == 7, "truthy predicate counts all")
    assert_that(view.count_where(lambda _: False) == 0, "falsy predicate counts none")
    assert_that(type(view.count_where(lambda _: True)) is int, "count should be an int")


# --- extractors ---

@test("list conversion returns proper list")
def test_to_list():
    result = F(sample_numbers).to.list()
    assert_that(result == sample_numbers, f"list conversion failed: {result}")
    assert_that(isinstance(result, list), f"should return list type: {type(result)}")


@test("tuple conversion returns a tuple")
def test_to_tuple():
    assert_that(F([1, 2]).to.tuple() == (1, 2), "tuple conversion failed")


@test("array conversion creates numpy array")
def test_to_array():
    result = F(sample_numbers).to.array()
    assert_that(np.array_equal(result, np.array(sample_numbers)), f"array conversion failed: {result}")
    assert_that(isinstance(result, np.ndarray), f"should return ndarray: {type(result)}")


@test("set conversion removes duplicates")
def test_to_set():
    result = F([1, 2, 2, 3, 3, 3, 4]).to.set()
    assert_that(result == {1, 2, 3, 4}, f"set conversion failed: {result}")


@test("dict conversion with key and value selectors")
def test_to_dict():
    by_name = F(sample_people).to.dict(lambda p: p.name)
    assert_that(by_name['alice'] == sample_people[0], "alice mapping incorrect")
    ages = F(sample_people).to.dict(lambda p: p.name, lambda p: p.age)
    assert_that(ages == {'alice': 25, 'bob': 30, 'charlie': 25, 'diana': 35, 'eve': 28}, f"ages incorrect: {ages}")


@test("pandas conversion creates a series")
def test_to_pandas():
    series = F(sample_numbers).where(lambda x: x > 8).to.pandas()
    assert_that(isinstance(series, pd.Series), "should return a series")
    assert_that(series.tolist() == [9, 10], f"series values incorrect: {series.tolist()}")


@test("dataframe conversion uses record fields as columns")
def test_to_df():
    frame = F(sample_people).to.df()
    assert_that(isinstance(frame, pd.DataFrame), "should return a dataframe")
    assert_that(list(frame.columns) == ['name', 'age', 'city'], f"columns incorrect: {list(frame.columns)}")
    assert_that(len(frame) == 5, "one row per person")


@test("extracted lists are independent of the view")
def test_to_list_independent():
    view = F([1, 2, 3])
    extracted = view.to.list()
    extracted.clear()
    assert_that(view.to.list() == [1, 2, 3], "view must not change")


if __name__ == "__main__":
    suite.main("filterable terminal operations test suite")
