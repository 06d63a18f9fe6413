"""
Tests for value object models.

These tests verify construction (positional and keyword), validation,
immutability and the container behavior of collections and dynamic
composites.
"""

import math

import pytest
from pydantic import ValidationError

from vohydrator.core.values import (
    CollectionValueObject,
    CompositeValueObject,
    DynamicCompositeValueObject,
    IntValueObject,
    NumberValueObject,
    Page,
    PerPage,
    Positive,
    SearchTerm,
    StringValueObject,
)


class Ratio(NumberValueObject):
    minimum_value = 0
    maximum_value = 1
    multiple_of = 0.25


class Point(CompositeValueObject):
    x: int
    y: int


class Pages(CollectionValueObject):
    item_type = Page
    minimum_size = 1
    maximum_size = 2


class Code(StringValueObject):
    minimum_length = 2
    maximum_length = 4


class TestConstruction:
    """Tests for positional construction."""

    def test_positional_matches_keyword(self):
        assert Point(1, 2) == Point(x=1, y=2)

    def test_mixed_positional_and_keyword(self):
        assert Point(1, y=2) == Point(x=1, y=2)

    def test_too_many_positional_arguments(self):
        with pytest.raises(TypeError) as exc_info:
            Point(1, 2, 3)
        assert "takes 2 positional" in str(exc_info.value)

    def test_duplicate_argument(self):
        with pytest.raises(TypeError) as exc_info:
            Point(1, x=2)
        assert "multiple values for argument 'x'" in str(exc_info.value)

    def test_immutable(self):
        point = Point(1, 2)
        with pytest.raises(ValidationError):
            point.x = 3  # type: ignore[misc]

    def test_strict_types(self):
        """Values are not coerced by the model itself."""
        with pytest.raises(ValidationError):
            Point("1", 2)


class TestNumbers:
    """Tests for numeric value objects."""

    def test_number_value(self):
        assert Ratio(0.75).value == 0.75

    def test_int_accepted_for_number(self):
        assert Ratio(1).value == 1

    def test_minimum(self):
        with pytest.raises(ValidationError) as exc_info:
            Ratio(-0.25)
        assert "must be >= 0" in str(exc_info.value)

    def test_maximum(self):
        with pytest.raises(ValidationError) as exc_info:
            Ratio(1.25)
        assert "must be <= 1" in str(exc_info.value)

    def test_multiple_of(self):
        with pytest.raises(ValidationError) as exc_info:
            Ratio(0.3)
        assert "multiple of 0.25" in str(exc_info.value)

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            NumberValueObject(math.nan)

    def test_int_value_object_rejects_float(self):
        with pytest.raises(ValidationError):
            Page(1.5)

    def test_int_value_object_rejects_bool(self):
        with pytest.raises(ValidationError):
            Page(True)

    def test_unbounded_int(self):
        assert IntValueObject(-5).value == -5

    @pytest.mark.parametrize("cls", [Positive, Page, PerPage])
    def test_concrete_minimum(self, cls):
        assert cls(1).value == 1
        with pytest.raises(ValidationError):
            cls(0)

    def test_per_page_maximum(self):
        assert PerPage(100).value == 100
        with pytest.raises(ValidationError):
            PerPage(101)

    def test_str(self):
        assert str(Page(3)) == "3"


class TestStrings:
    """Tests for string value objects."""

    def test_length_bounds(self):
        assert Code("ab").value == "ab"
        with pytest.raises(ValidationError):
            Code("a")
        with pytest.raises(ValidationError):
            Code("abcde")

    def test_search_term(self):
        assert str(SearchTerm("foo")) == "foo"

    @pytest.mark.parametrize("value", ["", "  ", "x" * 256])
    def test_search_term_rejected(self, value):
        with pytest.raises(ValidationError):
            SearchTerm(value)

    def test_equality(self):
        assert SearchTerm("foo") == SearchTerm("foo")
        assert SearchTerm("foo") != SearchTerm("bar")


class TestCollections:
    """Tests for collection value objects."""

    def test_list_stored_as_tuple(self):
        pages = Pages([Page(1), Page(2)])
        assert pages.items == (Page(1), Page(2))

    def test_sequence_protocol(self):
        pages = Pages([Page(1), Page(2)])
        assert len(pages) == 2
        assert pages[1] == Page(2)
        assert [p.value for p in pages] == [1, 2]

    def test_size_bounds(self):
        with pytest.raises(ValidationError) as exc_info:
            Pages([])
        assert "at least 1" in str(exc_info.value)
        with pytest.raises(ValidationError) as exc_info:
            Pages([Page(1), Page(2), Page(3)])
        assert "at most 2" in str(exc_info.value)

    def test_item_type_enforced(self):
        with pytest.raises(ValidationError) as exc_info:
            Pages([1])
        assert "Item 0 must be Page" in str(exc_info.value)


class TestEnums:
    """Tests for enum value objects."""

    def test_lookup(self, flavor):
        assert flavor("fiz") is flavor.FIZ
        assert str(flavor.BIZ) == "biz"

    def test_unknown_value(self, flavor):
        with pytest.raises(ValueError):
            flavor("nope")


class TestDynamicComposite:
    """Tests for the pass-through container."""

    def test_item_access(self):
        dynamic = DynamicCompositeValueObject({"a": 1})
        assert dynamic["a"] == 1
        assert "a" in dynamic
        assert dynamic.get("b", 2) == 2

    def test_accepts_any_mapping(self):
        from types import MappingProxyType

        dynamic = DynamicCompositeValueObject(MappingProxyType({"a": 1}))
        assert dynamic.data == {"a": 1}

    def test_rejects_non_mapping(self):
        with pytest.raises(ValidationError):
            DynamicCompositeValueObject([("a", 1)])
