import pytest

from vennsets.sets import NamedSet, parse_elements, parse_sets, set_input_labels, set_name


def test_parse_trims_drops_empty_and_dedupes():
    assert parse_elements("  a, b ,,a, ") == frozenset({"a", "b"})


def test_parse_is_case_sensitive():
    assert parse_elements("A,a") == frozenset({"A", "a"})


def test_whitespace_only_text_is_empty_set():
    assert parse_elements("   ") == frozenset()
    assert parse_elements(None) == frozenset()


def test_inner_whitespace_is_kept():
    assert parse_elements("new york , paris") == frozenset({"new york", "paris"})


def test_parse_sets_names_and_absent_slots():
    sets = parse_sets(["1, 2", None], 3)
    assert sets == [NamedSet("A", frozenset({"1", "2"})), None, None]


def test_parse_sets_ignores_extra_text():
    sets = parse_sets(["x", "y", "z"], 2)
    assert [s.name for s in sets] == ["A", "B"]


@pytest.mark.parametrize("n", [0, 1, 4])
def test_parse_sets_rejects_unsupported_n(n):
    with pytest.raises(ValueError):
        parse_sets(["a"], n)


def test_set_names():
    assert [set_name(i) for i in range(3)] == ["A", "B", "C"]
    with pytest.raises(ValueError):
        set_name(3)


def test_input_labels():
    assert set_input_labels(3) == [
        "Set A (comma separated):",
        "Set B (comma separated):",
        "Set C (comma separated):",
    ]
