"""
Tests for type classification and parameter metadata.
"""

from datetime import datetime
from typing import Any

import pytest

from vohydrator.core.values import (
    CollectionValueObject,
    CompositeValueObject,
    DynamicCompositeValueObject,
    IntValueObject,
    NumberValueObject,
    Page,
    PerPage,
    SearchTerm,
    StringValueObject,
    TypeCategory,
    classify,
    describe,
)


class Order(CompositeValueObject):
    reference: str
    quantity: int | None
    page: Page = Page(1)
    per_page: PerPage | None = None
    tags: list[str] = []
    notes: Any = None
    placed: datetime | None = None
    code: int | str = 0


class Pages(CollectionValueObject):
    item_type = Page


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize(
        "target,category",
        [
            (Order, TypeCategory.COMPOSITE),
            (DynamicCompositeValueObject, TypeCategory.DYNAMIC_COMPOSITE),
            (Pages, TypeCategory.COLLECTION),
            (Page, TypeCategory.INT),
            (IntValueObject, TypeCategory.INT),
            (NumberValueObject, TypeCategory.NUMBER),
            (SearchTerm, TypeCategory.SCALAR),
            (StringValueObject, TypeCategory.SCALAR),
            (object, TypeCategory.UNSUPPORTED),
            (dict, TypeCategory.UNSUPPORTED),
            (datetime, TypeCategory.UNSUPPORTED),
            ("Order", TypeCategory.UNSUPPORTED),
            (None, TypeCategory.UNSUPPORTED),
        ],
    )
    def test_categories(self, target, category):
        assert classify(target) is category

    def test_enum(self, flavor):
        assert classify(flavor) is TypeCategory.ENUM


class TestDescribe:
    """Tests for describe()."""

    def test_parameters_in_declaration_order(self):
        descriptor = describe(Order)
        assert [p.name for p in descriptor.parameters] == [
            "reference",
            "quantity",
            "page",
            "per_page",
            "tags",
            "notes",
            "placed",
            "code",
        ]
        assert [p.position for p in descriptor.parameters] == list(range(8))

    def test_required_primitive(self):
        reference = describe(Order).parameters[0]
        assert reference.declared_type is str
        assert reference.is_primitive is True
        assert reference.nullable is False
        assert reference.has_default is False

    def test_optional_without_default(self):
        quantity = describe(Order).parameters[1]
        assert quantity.declared_type is int
        assert quantity.nullable is True
        assert quantity.has_default is False

    def test_value_object_default(self):
        page = describe(Order).parameters[2]
        assert page.declared_type is Page
        assert page.is_primitive is False
        assert page.has_default is True
        assert page.default == Page(1)

    def test_pep604_optional(self):
        per_page = describe(Order).parameters[3]
        assert per_page.declared_type is PerPage
        assert per_page.nullable is True
        assert per_page.default is None

    def test_generic_alias_is_primitive(self):
        tags = describe(Order).parameters[4]
        assert tags.is_primitive is True
        assert tags.default == []

    def test_any_is_nullable_primitive(self):
        notes = describe(Order).parameters[5]
        assert notes.declared_type is Any
        assert notes.is_primitive is True
        assert notes.nullable is True

    def test_non_value_object_class_is_not_primitive(self):
        placed = describe(Order).parameters[6]
        assert placed.declared_type is datetime
        assert placed.is_primitive is False

    def test_multi_type_union_is_opaque(self):
        code = describe(Order).parameters[7]
        assert code.is_primitive is True
        assert code.nullable is False

    def test_collection_item_type(self):
        descriptor = describe(Pages)
        assert descriptor.item_type is Page
        assert [p.name for p in descriptor.parameters] == ["items"]

    def test_number_parameters(self):
        assert [p.name for p in describe(Page).parameters] == ["value"]
        assert describe(Page).parameters[0].declared_type is int

    def test_enum_has_no_parameters(self, flavor):
        descriptor = describe(flavor)
        assert descriptor.category is TypeCategory.ENUM
        assert descriptor.parameters == ()

    def test_unsupported(self):
        descriptor = describe(object)
        assert descriptor.category is TypeCategory.UNSUPPORTED
        assert descriptor.parameters == ()
        assert descriptor.name == "object"

    def test_descriptor_is_fresh_each_call(self):
        assert describe(Order) == describe(Order)
        assert describe(Order) is not describe(Order)
