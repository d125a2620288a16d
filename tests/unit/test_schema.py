"""Unit tests for declarations and the schema registry."""

import pytest

from params_deserializer import (
    AttributeSpec,
    ConfigurationError,
    KeyFormat,
    ParamsDeserializer,
    RootConfig,
    SchemaRegistry,
    attribute,
    attributes,
    format_keys,
    has_many,
    root,
)


class Item(ParamsDeserializer):
    declarations = ("sku",)


@pytest.mark.unit
class TestDeclarations:
    def test_attribute_defaults(self):
        spec = attribute("id")
        assert spec == AttributeSpec(name="id")
        assert spec.output_key == "id"
        assert not spec.is_collection

    def test_rename_changes_output_key_only(self):
        spec = attribute("foo", rename_to="foo_bar")
        assert spec.name == "foo"
        assert spec.output_key == "foo_bar"

    def test_attributes_declares_one_spec_per_name(self):
        assert [spec.name for spec in attributes("a", "b", "c")] == ["a", "b", "c"]

    def test_has_many(self):
        spec = has_many("items", rename_to="items_attributes", each_deserializer=Item)
        assert spec.is_collection
        assert spec.each_deserializer is Item
        assert spec.output_key == "items_attributes"

    def test_root(self):
        assert root("user") == RootConfig(key="user", discard=False)
        assert root("user", discard=True).discard

    def test_format_keys_accepts_enum_and_string(self):
        assert format_keys(KeyFormat.SNAKE_CASE).option is KeyFormat.SNAKE_CASE
        assert format_keys("camel_case").option is KeyFormat.PASCAL_CASE

    @pytest.mark.parametrize(
        "factory, field",
        [
            (lambda: attribute(""), "name"),
            (lambda: attribute(5), "name"),
            (lambda: attribute("a", rename_to=""), "rename_to"),
            (lambda: attribute("a", present_if=True), "present_if"),
            (lambda: has_many("items", each_deserializer=dict), "each_deserializer"),
            (lambda: has_many("items", each_deserializer=Item({})), "each_deserializer"),
            (lambda: root(""), "root"),
            (lambda: root("user", discard="yes"), "discard"),
            (lambda: format_keys("kebab"), "format_keys"),
        ],
    )
    def test_invalid_declarations_raise(self, factory, field):
        with pytest.raises(ConfigurationError) as exc_info:
            factory()
        assert exc_info.value.field == field


@pytest.mark.unit
class TestSchemaRegistry:
    def test_from_declarations_flattens_and_accepts_strings(self):
        registry = SchemaRegistry.from_declarations(
            ["id", attributes("name", "email"), [attribute("age")]]
        )
        assert [spec.name for spec in registry.specs] == ["id", "name", "email", "age"]

    def test_last_root_and_format_win(self):
        registry = SchemaRegistry.from_declarations(
            (root("a"), root("b", discard=True), format_keys("snake_case"), format_keys("lower_camel"))
        )
        assert registry.root_config == RootConfig("b", discard=True)
        assert registry.key_format is KeyFormat.LOWER_CAMEL

    def test_defaults(self):
        registry = SchemaRegistry()
        assert registry.specs == ()
        assert registry.root_config is None
        assert registry.key_format is KeyFormat.NONE

    def test_inherits_parent_specs_and_options(self):
        parent = SchemaRegistry.from_declarations(("id", root("item"), format_keys("snake_case")))
        child = SchemaRegistry.from_declarations(("name",), parent=parent)
        assert [spec.name for spec in child.specs] == ["id", "name"]
        assert child.root_config == RootConfig("item")
        assert child.key_format is KeyFormat.SNAKE_CASE
        assert child.own_specs == (attribute("name"),)
        assert child.parent is parent

    def test_redeclared_name_keeps_position(self):
        registry = SchemaRegistry.from_declarations(
            ("a", "b", attribute("a", rename_to="z"))
        )
        assert [spec.output_key for spec in registry.specs] == ["z", "b"]

    def test_colliding_output_key_last_wins(self):
        registry = SchemaRegistry.from_declarations(
            (attribute("a", rename_to="x"), "b", "x")
        )
        assert [spec.name for spec in registry.specs] == ["x", "b"]

    def test_specs_are_cached(self):
        registry = SchemaRegistry.from_declarations(("id",))
        assert registry.specs is registry.specs

    @pytest.mark.parametrize("declarations", ["id", {"id": 1}, None])
    def test_declarations_must_be_a_sequence(self, declarations):
        with pytest.raises(ConfigurationError):
            SchemaRegistry.from_declarations(declarations)

    def test_unknown_declaration_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            SchemaRegistry.from_declarations(("id", 42))
        assert exc_info.value.value == 42


@pytest.mark.unit
class TestClassDefinition:
    def test_invalid_declarations_fail_at_class_definition(self):
        with pytest.raises(ConfigurationError):

            class Broken(ParamsDeserializer):
                declarations = ("id", object())

    def test_default_accessor_installed_for_plain_attributes_only(self):
        class Accessors(ParamsDeserializer):
            declarations = (attribute("foo", rename_to="bar"), has_many("items"))

        assert callable(Accessors.foo)
        assert not hasattr(Accessors, "bar")
        assert not hasattr(Accessors, "items")

    def test_introspection(self):
        class Introspected(ParamsDeserializer):
            declarations = ("id", root("thing"), format_keys("snake_case"))

        assert Introspected.attribute_specs() == (attribute("id"),)
        assert Introspected.root_config() == RootConfig("thing")
        assert Introspected.key_format() is KeyFormat.SNAKE_CASE
