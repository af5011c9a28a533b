"""Tests for the Person record and its surname ordering."""

import pytest

from roster.domain import Person


def test_id_generated_and_unique() -> None:
    a = Person("Arnold", "Rimmer")
    b = Person("Arnold", "Rimmer")
    assert a.id
    assert a.id != b.id


def test_less_than_uses_last_name_only() -> None:
    kochanski = Person("Zed", "Kochanski")
    rimmer = Person("Aaron", "Rimmer")
    assert kochanski < rimmer
    assert not rimmer < kochanski


def test_equal_surnames_are_mutually_not_less() -> None:
    a = Person("Arnold", "Rimmer")
    b = Person("Ace", "Rimmer")
    assert not a < b
    assert not b < a


def test_equality_is_identity_not_names() -> None:
    a = Person("David", "Lister")
    b = Person("David", "Lister", id=a.id)
    assert a == a
    assert a != b


def test_lexicographic_is_code_point_order() -> None:
    assert Person("x", "Zulu") < Person("x", "alpha")
    assert Person("x", "Li") < Person("x", "Lister")
    assert Person("x", "") < Person("x", "A")


def test_compare_with_other_type_raises() -> None:
    with pytest.raises(TypeError):
        Person("David", "Lister") < "Lister"


def test_names_are_mutable_and_display_name_follows() -> None:
    p = Person("David", "Lister")
    original_id = p.id
    p.first_name = "Dave"
    p.last_name = "Listy"
    assert p.display_name == "Listy, Dave"
    assert p.id == original_id


def test_id_is_read_only() -> None:
    p = Person("David", "Lister")
    original_id = p.id
    with pytest.raises(AttributeError):
        p.id = "forged"
    assert p.id == original_id


def test_builtin_sorted_uses_ordering() -> None:
    crew = [Person("Arnold", "Rimmer"), Person("Kristine", "Kochanski")]
    assert [p.last_name for p in sorted(crew)] == ["Kochanski", "Rimmer"]
