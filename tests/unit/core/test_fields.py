"""Unit tests for field declarations and the strict decorator."""

from __future__ import annotations

from typing import Annotated

import pytest
from pydantic import Field

from tinyorm import TinyModel, field, strict
from tinyorm.core.fields import Column, FieldSpec
from tinyorm.exceptions import FieldValidationError

# --------------------------------------------------------------------------- #
# Models                                                                      #
# --------------------------------------------------------------------------- #


class Plain(TinyModel, strict=False):
    """Non-strict model with typed and untyped fields."""

    someProp = field(str)  # noqa: N815
    numberPretendingToBeString = field(int)  # noqa: N815
    free = field()


@strict
class Checked(TinyModel):
    """Strict model declared through the decorator."""

    numberPretendingToBeString = field(int)  # noqa: N815
    numberBetweenOneAndTen = field(Annotated[int, Field(ge=1, le=10)])  # noqa: N815


class CheckedChild(Checked):
    """Inherits strictness and fields from Checked."""

    extra = field(str)


class LenientChild(Checked, strict=False):
    """Opts out of the parent's strictness."""


# --------------------------------------------------------------------------- #
# Field table                                                                 #
# --------------------------------------------------------------------------- #


def test_class_access_returns_the_spec() -> None:
    """On the class, a field attribute is its FieldSpec."""
    spec = Plain.someProp
    assert isinstance(spec, FieldSpec)
    assert spec.name == "someProp"
    assert spec.schema is str


def test_field_table_collects_inherited_fields() -> None:
    """Subclasses see their own fields after the inherited ones."""
    assert list(CheckedChild._field_specs) == [
        "numberPretendingToBeString",
        "numberBetweenOneAndTen",
        "extra",
    ]
    assert "extra" not in Checked._field_specs


def test_adapter_is_built_once() -> None:
    """The TypeAdapter of a spec is cached, and absent without schema."""
    assert Plain.someProp.adapter is Plain.someProp.adapter
    assert Plain.free.adapter is None


# --------------------------------------------------------------------------- #
# Internal columns                                                            #
# --------------------------------------------------------------------------- #


def test_sets_correct_internal_columns() -> None:
    """Assignment records value and schema in the column map."""
    instance = Plain()
    assert dict(instance.columns) == {}

    instance.someProp = "value"

    assert instance.columns["someProp"] == Column(value="value", schema=str)
    assert instance.someProp == "value"


def test_schema_is_kept_across_reassignments() -> None:
    """Reassigning a field changes the value but not the schema."""
    instance = Plain()
    instance.someProp = "one"
    first = instance.columns["someProp"]
    instance.someProp = "two"

    assert instance.columns["someProp"] is first
    assert first.value == "two"
    assert first.schema is str


def test_unassigned_field_raises_attribute_error() -> None:
    """Reading a field before it is assigned fails like a missing attribute."""
    instance = Plain()
    with pytest.raises(AttributeError, match=r"Plain\.someProp has not been assigned"):
        _ = instance.someProp
    assert not hasattr(instance, "free")


def test_set_field_rejects_unknown_names() -> None:
    """Only declared fields go through set_field."""
    with pytest.raises(AttributeError, match="has no field named 'missing'"):
        Plain().set_field("missing", 1)


# --------------------------------------------------------------------------- #
# Strictness                                                                  #
# --------------------------------------------------------------------------- #


def test_does_nothing_if_strict_validation_is_disabled() -> None:
    """A non-strict model accepts values that violate the schema."""
    instance = Plain()
    instance.numberPretendingToBeString = "abc"
    assert instance.numberPretendingToBeString == "abc"


def test_validates_correctly_if_strict_is_enabled() -> None:
    """A strict model rejects bad values and accepts good ones."""
    instance = Checked()

    with pytest.raises(FieldValidationError, match=r"^Checked\.numberPretendingToBeString "):
        instance.numberPretendingToBeString = "abc"

    instance.numberBetweenOneAndTen = 10
    assert instance.numberBetweenOneAndTen == 10


def test_failed_assignment_keeps_previous_value() -> None:
    """Strict assignments are atomic."""
    instance = Checked()
    instance.numberBetweenOneAndTen = 1

    with pytest.raises(FieldValidationError):
        instance.numberBetweenOneAndTen = 11

    assert instance.numberBetweenOneAndTen == 1


def test_failed_first_assignment_creates_no_column() -> None:
    """A rejected first value leaves the field unassigned."""
    instance = Checked()
    with pytest.raises(FieldValidationError):
        instance.numberBetweenOneAndTen = 0
    assert "numberBetweenOneAndTen" not in instance.columns


def test_strict_flag_resolution() -> None:
    """Decorator, inheritance and explicit opt-out all resolve at definition."""
    assert Checked._strict is True
    assert CheckedChild._strict is True
    assert LenientChild._strict is False
    assert Plain._strict is False


def test_subclass_inherits_strictness() -> None:
    """Fields declared on a strict subclass are validated too."""
    instance = CheckedChild()
    with pytest.raises(FieldValidationError, match=r"^CheckedChild\.extra "):
        instance.extra = 3


def test_strict_decorator_returns_the_class() -> None:
    """strict() can be used as a plain function on a model type."""

    class Later(TinyModel, strict=False):
        value = field(int)

    assert strict(Later) is Later
    with pytest.raises(FieldValidationError):
        Later(value="x")
