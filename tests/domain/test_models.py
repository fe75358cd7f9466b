"""Tests for domain models."""

from dataclasses import FrozenInstanceError

import pytest

from exprguard.domain.exceptions import MissingParameterError
from exprguard.domain.models import (
    DEFAULT_REJECTION_POLICY,
    ORIGINAL_RESULT,
    UNDEFINED,
    Operation,
    RejectionPolicy,
    Resource,
    TaggedValue,
    TransformedOperation,
    ValueKind,
)


class TestValueKind:
    """Tests for ValueKind enum."""

    def test_structural_kinds(self):
        """Verify the kinds the detector walks exist."""
        assert ValueKind.UNDEFINED.value == "undefined"
        assert ValueKind.STRING.value == "string"
        assert ValueKind.EXPRESSION.value == "expression"
        assert ValueKind.LIST.value == "list"
        assert ValueKind.OBJECT.value == "object"
        assert ValueKind.PROPERTY.value == "property"

    def test_all_kinds_accounted(self):
        """Six structural kinds plus three scalar literals."""
        assert len(ValueKind) == 9


class TestTaggedValue:
    """Tests for TaggedValue constructors and accessors."""

    def test_undefined_singleton(self):
        assert TaggedValue.undefined() is UNDEFINED
        assert UNDEFINED.is_defined is False

    def test_string(self):
        value = TaggedValue.string("abc")
        assert value.kind is ValueKind.STRING
        assert value.is_defined is True
        assert value.as_string() == "abc"

    def test_expression_reads_as_string(self):
        value = TaggedValue.expression("${x}")
        assert value.kind is ValueKind.EXPRESSION
        assert value.as_string() == "${x}"

    def test_list_of(self):
        a, b = TaggedValue.string("a"), TaggedValue.string("b")
        value = TaggedValue.list_of(a, b)
        assert value.as_list() == (a, b)

    def test_object_keeps_member_order(self):
        members = [
            ("z", TaggedValue.string("1")),
            ("a", TaggedValue.string("2")),
        ]
        value = TaggedValue.object_of(members)
        assert [name for name, _ in value.as_property_list()] == ["z", "a"]

    def test_object_from_mapping(self):
        value = TaggedValue.object_of({"k": TaggedValue.integer(1)})
        assert value.as_property_list() == (("k", TaggedValue.integer(1)),)

    def test_property(self):
        inner = TaggedValue.string("v")
        value = TaggedValue.property_of("k", inner)
        assert value.as_property() == ("k", inner)

    @pytest.mark.parametrize(
        "value, text",
        [
            (TaggedValue.string("host"), "host"),
            (TaggedValue.expression("${x}"), "${x}"),
            (TaggedValue.boolean(False), "false"),
            (TaggedValue.integer(8080), "8080"),
            (TaggedValue.double(1.5), "1.5"),
        ],
    )
    def test_as_text_renders_scalars(self, value, text):
        assert value.as_text() == text

    @pytest.mark.parametrize(
        "value", [UNDEFINED, TaggedValue.list_of(), TaggedValue.object_of({})]
    )
    def test_as_text_rejects_structured(self, value):
        with pytest.raises(TypeError):
            value.as_text()

    @pytest.mark.parametrize(
        "value, accessor",
        [
            (TaggedValue.integer(1), "as_string"),
            (TaggedValue.string("x"), "as_list"),
            (TaggedValue.list_of(), "as_property_list"),
            (TaggedValue.string("x"), "as_property"),
        ],
    )
    def test_wrong_kind_access_raises(self, value, accessor):
        with pytest.raises(TypeError):
            getattr(value, accessor)()

    def test_immutable(self):
        value = TaggedValue.string("x")
        with pytest.raises(FrozenInstanceError):
            value.payload = "y"  # type: ignore[misc]

    def test_equality_and_hash(self):
        a = TaggedValue.list_of(TaggedValue.string("x"))
        b = TaggedValue.list_of(TaggedValue.string("x"))
        assert a == b
        assert hash(a) == hash(b)


class TestOperation:
    """Tests for Operation parameter access."""

    @pytest.fixture
    def operation(self) -> Operation:
        return Operation(
            name="write-attribute",
            address=[("subsystem", "web")],
            parameters={
                "name": TaggedValue.string("host"),
                "value": UNDEFINED,
            },
        )

    def test_address_is_tuple(self, operation):
        assert operation.address == (("subsystem", "web"),)

    def test_get_present(self, operation):
        assert operation.get("name") == TaggedValue.string("host")

    def test_get_absent_is_undefined(self, operation):
        assert operation.get("missing") is UNDEFINED

    def test_has_defined(self, operation):
        assert operation.has_defined("name") is True
        assert operation.has_defined("value") is False
        assert operation.has_defined("missing") is False

    def test_require_absent_raises(self, operation):
        with pytest.raises(MissingParameterError, match="missing"):
            operation.require("missing")

    def test_require_undefined_is_returned(self, operation):
        """Present-but-undefined satisfies require."""
        assert operation.require("value") is UNDEFINED

    def test_parameters_read_only(self, operation):
        with pytest.raises(TypeError):
            operation.parameters["x"] = TaggedValue.string("y")  # type: ignore[index]

    def test_parameters_decoupled_from_caller(self):
        params = {"a": TaggedValue.string("1")}
        operation = Operation(name="add", parameters=params)
        params["b"] = TaggedValue.string("2")
        assert "b" not in operation.parameters


class TestResource:
    """Tests for Resource snapshots."""

    def test_model_read_only(self):
        resource = Resource({"a": TaggedValue.string("1")})
        with pytest.raises(TypeError):
            resource.model["a"] = TaggedValue.string("2")  # type: ignore[index]

    def test_empty_default(self):
        assert len(Resource().model) == 0


class TestRejectionPolicy:
    """Tests for RejectionPolicy."""

    def test_default_accepts(self):
        assert DEFAULT_REJECTION_POLICY.rejects is False
        assert DEFAULT_REJECTION_POLICY.reject_operation({"outcome": "ok"}) is False
        assert DEFAULT_REJECTION_POLICY.failure_description is None

    def test_rejecting_policy(self):
        policy = RejectionPolicy(frozenset({"b", "a"}))
        assert policy.rejects is True
        assert policy.reject_operation({"outcome": "success"}) is True

    def test_description_lists_sorted_names(self):
        policy = RejectionPolicy(frozenset({"b", "a"}))
        assert policy.failure_description == (
            "Expressions are not allowed for attribute(s): a, b"
        )

    def test_description_rendered_on_demand(self):
        """The same policy renders the same text each time."""
        policy = RejectionPolicy(frozenset({"a"}))
        assert policy.failure_description == policy.failure_description


class TestTransformedOperation:
    """Tests for TransformedOperation defaults."""

    def test_defaults(self):
        operation = Operation(name="add")
        transformed = TransformedOperation(operation)
        assert transformed.rejection_policy is DEFAULT_REJECTION_POLICY
        assert transformed.result_transformer is ORIGINAL_RESULT
        assert transformed.reject_operation() is False

    def test_custom_result_transformer(self):
        transformed = TransformedOperation(
            Operation(name="add"), result_transformer=lambda r: {"wrapped": r}
        )
        assert transformed.transform_result(1) == {"wrapped": 1}
