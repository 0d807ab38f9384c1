"""Unit tests for method metadata models."""

from dataclasses import FrozenInstanceError

import pytest
from pydantic import ValidationError

from mockrender.core.models import (
    Attribute,
    Context,
    InitializationStyle,
    Method,
    MethodKind,
    MockableTypeInput,
    MockableTypeKind,
    Parameter,
    RenderedArtifact,
)


class TestEnums:
    """Tests for enum values."""

    def test_attribute_values(self) -> None:
        assert Attribute.THROWS.value == "throws"
        assert Attribute.CLASS_SCOPE.value == "class"
        assert Attribute.UNWRAPPED_FAILABLE.value == "unwrappedFailable"
        assert len(Attribute) == 13

    def test_method_kind_values(self) -> None:
        assert MethodKind.INSTANCE.value == "instance"
        assert MethodKind.STATIC.value == "static"
        assert MethodKind.CLASS.value == "class"
        assert MethodKind.INITIALIZER.value == "initializer"

    def test_initialization_style_values(self) -> None:
        assert [s.value for s in InitializationStyle] == [
            "implicit",
            "explicit",
            "dummy",
            "unavailable",
        ]


class TestParameter:
    """Tests for Parameter model."""

    def test_create_parameter(self) -> None:
        parameter = Parameter(name="destination", argument_label="to", type_name="String")
        assert parameter.name == "destination"
        assert parameter.argument_label == "to"
        assert parameter.attributes == frozenset()
        assert not parameter.has(Attribute.VARIADIC)

    def test_attributes_from_list(self) -> None:
        parameter = Parameter(name="values", type_name="Int...", attributes=["variadic"])
        assert parameter.has(Attribute.VARIADIC)

    def test_parameter_is_immutable(self) -> None:
        parameter = Parameter(name="x", type_name="Int")
        with pytest.raises(ValidationError):
            parameter.name = "y"  # type: ignore[misc]

    def test_unknown_attribute_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Parameter(name="x", type_name="Int", attributes=["lazy"])


class TestMethod:
    """Tests for Method model."""

    def test_defaults(self) -> None:
        method = Method(short_name="fly")
        assert method.parameters == ()
        assert method.return_type_name == "Void"
        assert method.kind == MethodKind.INSTANCE
        assert not method.is_overridable
        assert not method.is_initializer
        assert not method.is_type_scoped
        assert not method.is_variadic

    def test_type_scoped_kinds(self) -> None:
        assert Method(short_name="a", kind=MethodKind.STATIC).is_type_scoped
        assert Method(short_name="a", kind=MethodKind.CLASS).is_type_scoped
        assert not Method(kind=MethodKind.INITIALIZER).is_type_scoped

    def test_is_variadic(self) -> None:
        method = Method(
            short_name="add",
            parameters=[
                Parameter(name="values", type_name="Int...", attributes=[Attribute.VARIADIC])
            ],
        )
        assert method.is_variadic

    def test_throws_and_rethrows_exclusive(self) -> None:
        with pytest.raises(ValidationError, match="throwing and rethrowing"):
            Method(short_name="run", attributes=[Attribute.THROWS, Attribute.RETHROWS])

    def test_failable_kinds_exclusive(self) -> None:
        with pytest.raises(ValidationError, match="failable"):
            Method(
                kind=MethodKind.INITIALIZER,
                attributes=[Attribute.FAILABLE, Attribute.UNWRAPPED_FAILABLE],
            )

    def test_attributes_serialize_sorted(self) -> None:
        method = Method(short_name="run", attributes=[Attribute.THROWS, Attribute.REQUIRED])
        assert method.model_dump(mode="json")["attributes"] == ["required", "throws"]


class TestContext:
    """Tests for Context model."""

    def test_specialize_without_bindings(self) -> None:
        context = Context(mockable_type_name="Bird", scoped_mock_type_name="BirdMock")
        assert context.specialize_type_name("[T]") == "[T]"

    def test_specialize_whole_identifiers(self) -> None:
        context = Context(
            mockable_type_name="Box",
            scoped_mock_type_name="BoxMock<Element>",
            generic_specializations={"Element": "String", "T": "Int"},
        )
        assert context.specialize_type_name("[Element]") == "[String]"
        assert context.specialize_type_name("Elements") == "Elements"
        assert context.specialize_type_name("Tree<T>") == "Tree<Int>"
        assert context.specialize_type_name("(T, Element?) -> T") == "(Int, String?) -> Int"

    def test_member_types_not_specialized(self) -> None:
        context = Context(
            mockable_type_name="Box",
            scoped_mock_type_name="BoxMock",
            generic_specializations={"Element": "String"},
        )
        assert context.specialize_type_name("S.Element == Int") == "S.Element == Int"

    def test_is_class(self) -> None:
        context = Context(
            mockable_type_name="Flyable",
            mockable_type_kind=MockableTypeKind.PROTOCOL,
            scoped_mock_type_name="FlyableMock",
        )
        assert not context.is_class

    def test_hashable(self) -> None:
        first = Context(
            mockable_type_name="Box",
            scoped_mock_type_name="BoxMock",
            generic_specializations={"T": "Int", "Element": "String"},
        )
        second = Context(
            mockable_type_name="Box",
            scoped_mock_type_name="BoxMock",
            generic_specializations={"Element": "String", "T": "Int"},
        )
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_specializations_dump_as_mapping(self) -> None:
        context = Context(
            mockable_type_name="Box",
            scoped_mock_type_name="BoxMock",
            generic_specializations={"Element": "String"},
        )
        data = context.model_dump(mode="json")
        assert data["generic_specializations"] == {"Element": "String"}
        assert Context.model_validate(data) == context


class TestRenderedArtifact:
    """Tests for RenderedArtifact equality."""

    def test_equality_by_signature(self) -> None:
        first = RenderedArtifact("initialize() -> BirdMock", "body one")
        second = RenderedArtifact("initialize() -> BirdMock", "body two")
        assert first == second
        assert len({first, second}) == 1

    def test_distinct_signatures(self) -> None:
        first = RenderedArtifact("a()", "body", InitializationStyle.IMPLICIT)
        second = RenderedArtifact("b()", "body", InitializationStyle.IMPLICIT)
        assert first != second

    def test_immutable(self) -> None:
        artifact = RenderedArtifact("a()", "body")
        with pytest.raises(FrozenInstanceError):
            artifact.body = "other"


class TestMockableTypeInput:
    """Tests for MockableTypeInput model."""

    def test_missing_context(self) -> None:
        with pytest.raises(ValidationError):
            MockableTypeInput.model_validate({"methods": []})
