"""Unit tests for the neo_class and neo_child_class filters."""

from types import MappingProxyType

import pytest
from fakes import FakeLink, FakeUrl

from neo_jinja.config import FiltersConfig
from neo_jinja.template import RenderFilters


class TestAddClass:
    """Tests for RenderFilters.add_class."""

    @pytest.mark.parametrize("node", [None, {}, [], "", 0])
    def test_empty_node_returned_unchanged(self, filters, node):
        """Test empty input comes back as-is."""
        assert filters.add_class(node, "foo") is node

    def test_creates_attributes(self, filters):
        """Test missing #attributes is created with the class."""
        node = {"#markup": "Hi"}
        result = filters.add_class(node, "x")
        assert result["#attributes"]["class"] == ["x"]
        assert result is node

    def test_scalar_and_list_are_equivalent(self, filters):
        """Test a single class name behaves like a one-element list."""
        assert filters.add_class({"#markup": "a"}, "foo") == filters.add_class(
            {"#markup": "a"}, ["foo"]
        )

    def test_appends_to_existing_classes(self, filters):
        """Test classes are appended, duplicates kept."""
        node = {"#attributes": {"class": ["a", "b"], "id": "main"}}
        filters.add_class(node, ["b", "c"])
        assert node["#attributes"] == {"class": ["a", "b", "b", "c"], "id": "main"}

    def test_existing_string_class_is_kept(self, filters):
        """Test a string class value is treated as one class."""
        node = {"#attributes": {"class": "a"}}
        filters.add_class(node, "b")
        assert node["#attributes"]["class"] == ["a", "b"]

    def test_key_without_hash_is_prefixed(self, filters):
        """Test a custom property name gets the # prefix."""
        node = {"#markup": "a"}
        filters.add_class(node, "x", "wrapper_attributes")
        assert node["#wrapper_attributes"]["class"] == ["x"]
        assert "wrapper_attributes" not in node

    def test_key_with_hash_is_not_prefixed_twice(self, filters):
        """Test an already prefixed property name is used as given."""
        node = {"#markup": "a"}
        filters.add_class(node, "x", "#title_attributes")
        assert node["#title_attributes"]["class"] == ["x"]

    def test_nested_path(self, filters):
        """Test a path list targets the nested node, not the root."""
        node = {"a": {"b": {"#markup": "deep"}}}
        filters.add_class(node, "x", ["a", "b", "foo"])
        assert node["a"]["b"]["#foo"]["class"] == ["x"]
        assert "#foo" not in node

    def test_unresolved_path_is_noop(self, filters):
        """Test a path that does not resolve leaves the tree alone."""
        node = {"a": {"#markup": "x"}}
        result = filters.add_class(node, "x", ["a", "missing", "attributes"])
        assert result == {"a": {"#markup": "x"}}

    def test_path_through_scalar_is_noop(self, filters):
        """Test a path crossing a scalar leaves the tree alone."""
        node = {"a": "text"}
        assert filters.add_class(node, "x", ["a", "attributes"]) == {"a": "text"}

    def test_link_element_mirrors_options(self, filters):
        """Test link render elements also get #options.attributes.class."""
        node = {
            "#type": "link",
            "#title": "Home",
            "#attributes": {"class": ["nav"]},
            "#options": {"attributes": {"class": ["old"]}},
        }
        filters.add_class(node, "active")
        assert node["#attributes"]["class"] == ["nav", "active"]
        assert node["#options"]["attributes"]["class"] == ["old", "nav", "active"]

    def test_link_element_without_options(self, filters):
        """Test #options is created for link elements."""
        node = {"#type": "link", "#title": "Home"}
        filters.add_class(node, "active")
        assert node["#options"] == {"attributes": {"class": ["active"]}}

    def test_link_object(self, filters):
        """Test Link objects get classes in their URL options."""
        link = FakeLink("Home", FakeUrl({"attributes": {"class": ["nav"]}, "query": {"a": 1}}))
        result = filters.add_class(link, ["active", "first"])
        assert result is link
        assert link.url.options == {
            "attributes": {"class": ["nav", "active", "first"]},
            "query": {"a": 1},
        }

    def test_link_object_without_options(self, filters):
        """Test Link objects with empty options."""
        link = FakeLink("Home")
        filters.add_class(link, "active")
        assert link.url.options == {"attributes": {"class": ["active"]}}

    def test_non_mapping_property_left_alone(self, filters):
        """Test a property holding a non-mapping value is not replaced."""
        node = {"#attributes": "raw"}
        assert filters.add_class(node, "x") == {"#attributes": "raw"}

    def test_configured_default_key(self):
        """Test the default property name comes from config."""
        filters = RenderFilters(FiltersConfig(default_attribute_key="item_attributes"))
        node = {"#markup": "a"}
        filters.add_class(node, "x")
        assert node["#item_attributes"]["class"] == ["x"]


class TestAddChildClass:
    """Tests for RenderFilters.add_child_class."""

    @pytest.mark.parametrize("node", [None, {}])
    def test_empty_node_returned_unchanged(self, filters, node):
        """Test empty input comes back as-is."""
        assert filters.add_child_class(node, "foo") is node

    def test_each_child_gets_class(self, filters):
        """Test every child is updated and properties are untouched."""
        node = {
            "#attributes": {"class": ["list"]},
            "first": {"#markup": "1"},
            "second": {"#markup": "2", "#attributes": {"class": ["b"]}},
            "third": {"#markup": "3"},
        }
        filters.add_child_class(node, "item")
        assert node["#attributes"] == {"class": ["list"]}
        assert node["first"]["#attributes"]["class"] == ["item"]
        assert node["second"]["#attributes"]["class"] == ["b", "item"]
        assert node["third"]["#attributes"]["class"] == ["item"]

    def test_child_path(self, filters):
        """Test the path is resolved relative to each child."""
        node = {
            0: {"content": {"#markup": "a"}},
            1: {"content": {"#markup": "b"}},
        }
        filters.add_child_class(node, "x", ["content", "attributes"])
        assert node[0]["content"]["#attributes"]["class"] == ["x"]
        assert node[1]["content"]["#attributes"]["class"] == ["x"]

    def test_scalar_children_skipped(self, filters):
        """Test non-mapping values under child keys are ignored."""
        node = {"a": "text", "b": None, "c": {"#markup": "c"}}
        filters.add_child_class(node, "x")
        assert node["a"] == "text"
        assert node["b"] is None
        assert node["c"]["#attributes"]["class"] == ["x"]


class TestAddClassReadOnlyPath:
    """add_class through a read-only mapping on the path."""

    def test_sibling_keys_kept(self, filters):
        """Test the mutated target is not replaced along with its siblings."""
        content = MappingProxyType({"image": {"#theme": "image"}, "caption": {"#markup": "c"}})
        node = {"content": content}
        filters.add_class(node, "x", ["content", "image", "attributes"])
        assert node["content"] is content
        assert content["image"]["#attributes"]["class"] == ["x"]
        assert content["caption"] == {"#markup": "c"}
