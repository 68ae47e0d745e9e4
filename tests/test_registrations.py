"""Tests for NameRegistrations."""

import pytest

from byname.exceptions import (
    ByNameDuplicateNameError,
    ByNameInvalidRegistrationError,
    ByNameRegistrationsFrozenError,
)
from byname.registrations import NameRegistrations
from tests.shapes import Circle, Shape, Square


class TestAdd:
    def test_added_names_map_to_their_types(self) -> None:
        registrations = NameRegistrations()
        registrations.add("circle", Circle)
        registrations.add("square", Square)

        assert registrations["circle"] is Circle
        assert registrations["square"] is Square
        assert len(registrations) == 2

    def test_duplicate_name_is_rejected_and_keeps_existing_mapping(self) -> None:
        registrations = NameRegistrations(service_type=Shape)
        registrations.add("circle", Circle)

        with pytest.raises(ByNameDuplicateNameError) as exc_info:
            registrations.add("circle", Square)

        assert exc_info.value.name == "circle"
        assert exc_info.value.existing_type is Circle
        assert exc_info.value.service_type is Shape
        assert registrations["circle"] is Circle
        assert len(registrations) == 1

    @pytest.mark.parametrize("name", ["", None, 42, b"circle"])
    def test_rejects_names_that_are_not_non_empty_strings(self, name: object) -> None:
        registrations = NameRegistrations()

        with pytest.raises(ByNameInvalidRegistrationError, match="non-empty string"):
            registrations.add(name, Circle)  # type: ignore[arg-type]

        assert len(registrations) == 0


class TestComparisonPolicy:
    def test_case_sensitive_by_default(self) -> None:
        registrations = NameRegistrations()
        registrations.add("Foo", Circle)
        registrations.add("foo", Square)

        assert registrations["Foo"] is Circle
        assert registrations["foo"] is Square
        assert "FOO" not in registrations
        assert registrations.get("FOO") is None

    def test_case_insensitive_lookup(self) -> None:
        registrations = NameRegistrations(case_insensitive=True)
        registrations.add("Foo", Circle)

        assert registrations["foo"] is Circle
        assert registrations["FOO"] is Circle
        assert "fOo" in registrations

    def test_case_insensitive_duplicates_collide(self) -> None:
        registrations = NameRegistrations(case_insensitive=True)
        registrations.add("Foo", Circle)

        with pytest.raises(ByNameDuplicateNameError):
            registrations.add("FOO", Square)

    def test_case_insensitive_names_differ_beyond_case(self) -> None:
        registrations = NameRegistrations(case_insensitive=True)
        registrations.add("stra\N{LATIN SMALL LETTER SHARP S}e", Circle)
        registrations.add("STRASSE", Square)

        assert registrations["strasse"] is Square
        assert registrations["STRA\N{LATIN SMALL LETTER SHARP S}E"] is Circle
        assert len(registrations) == 2

    def test_iteration_keeps_original_spelling(self) -> None:
        registrations = NameRegistrations(case_insensitive=True)
        registrations.add("Circle", Circle)
        registrations.add("SQUARE", Square)

        assert sorted(registrations) == ["Circle", "SQUARE"]

    def test_non_string_lookup_is_a_missing_key(self) -> None:
        registrations = NameRegistrations()
        registrations.add("circle", Circle)

        assert 1 not in registrations
        with pytest.raises(KeyError):
            registrations[1]  # type: ignore[index]


class TestFreeze:
    def test_frozen_copy_does_not_see_later_additions(self) -> None:
        registrations = NameRegistrations()
        registrations.add("circle", Circle)

        frozen = registrations.freeze()
        registrations.add("square", Square)

        assert frozen.frozen
        assert not registrations.frozen
        assert list(frozen) == ["circle"]
        assert "square" in registrations

    def test_frozen_copy_rejects_additions(self) -> None:
        frozen = NameRegistrations().freeze()

        with pytest.raises(ByNameRegistrationsFrozenError, match="frozen"):
            frozen.add("circle", Circle)

    def test_frozen_copy_keeps_comparison_policy(self) -> None:
        registrations = NameRegistrations(case_insensitive=True)
        registrations.add("Circle", Circle)

        frozen = registrations.freeze()

        assert frozen.case_insensitive
        assert frozen["CIRCLE"] is Circle


def test_repr_lists_names_and_policy() -> None:
    registrations = NameRegistrations()
    registrations.add("circle", Circle)

    assert repr(registrations) == "NameRegistrations({'circle': Circle}, case_insensitive=False)"
