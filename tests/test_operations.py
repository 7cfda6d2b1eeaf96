import pytest

from vennsets.operations import (
    DIFFERENCE,
    INTERSECTION,
    OPERATIONS,
    SYMMETRIC_DIFFERENCE,
    UNION,
    evaluate,
)
from vennsets.sets import parse_sets


@pytest.mark.parametrize(
    "operation, expected",
    [
        (UNION, {"1", "2", "3", "4"}),
        (INTERSECTION, {"2", "3"}),
        (DIFFERENCE, {"1"}),
        (SYMMETRIC_DIFFERENCE, {"1", "4"}),
    ],
)
def test_two_set_examples(operation, expected):
    sets = parse_sets(["1,2,3", "2,3,4"], 2)
    assert evaluate(sets, 2, operation) == frozenset(expected)


def test_operation_names():
    assert OPERATIONS == ("Union", "Intersection", "Difference", "Symmetric Difference")


def test_union_and_intersection_span_three_sets():
    sets = parse_sets(["a,b,c", "b,c,d", "c,e"], 3)
    assert evaluate(sets, 3, UNION) == frozenset("abcde")
    assert evaluate(sets, 3, INTERSECTION) == frozenset({"c"})


@pytest.mark.parametrize("operation", [DIFFERENCE, SYMMETRIC_DIFFERENCE])
def test_binary_operations_ignore_third_set(operation):
    base = evaluate(parse_sets(["1,2,3", "2,3,4", ""], 3), 3, operation)
    for c_text in ["1", "1,2,3,4,5", "zzz", "   "]:
        sets = parse_sets(["1,2,3", "2,3,4", c_text], 3)
        assert evaluate(sets, 3, operation) == base


def test_third_set_grows_union_and_shrinks_intersection():
    two = parse_sets(["1,2,3", "2,3,4"], 2)
    for c_text in ["", "3", "3,9", "1,2,3,4"]:
        three = parse_sets(["1,2,3", "2,3,4", c_text], 3)
        assert evaluate(three, 3, UNION) >= evaluate(two, 2, UNION)
        assert evaluate(three, 3, INTERSECTION) <= evaluate(two, 2, INTERSECTION)


@pytest.mark.parametrize("operation", [DIFFERENCE, SYMMETRIC_DIFFERENCE])
def test_binary_operations_fall_back_to_first_set(operation):
    sets = parse_sets(["x,y", None], 2)
    assert evaluate(sets, 2, operation) == frozenset({"x", "y"})


@pytest.mark.parametrize("operation", OPERATIONS)
def test_no_sets_gives_empty_result(operation):
    assert evaluate([None, None], 2, operation) == frozenset()


def test_intersection_over_present_sets_only():
    sets = parse_sets(["a,b", "b,c", None], 3)
    assert evaluate(sets, 3, INTERSECTION) == frozenset({"b"})


def test_unknown_operation():
    with pytest.raises(ValueError, match="Cartesian"):
        evaluate(parse_sets(["a", "b"], 2), 2, "Cartesian")


def test_binary_operations_with_missing_b_slot():
    sets = parse_sets(["p,q"], 2)
    assert sets[1] is None
    assert evaluate(sets, 2, DIFFERENCE) == frozenset({"p", "q"})
    assert evaluate([None, sets[0]], 2, DIFFERENCE) == frozenset()
