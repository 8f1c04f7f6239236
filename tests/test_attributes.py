"""
Tests for attribute declarations and their ownership rules.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from regkit.object import (
    Aggregate,
    Attribute,
    Component,
    Object,
    ReadOnlyAggregate,
    ReadOnlyAttribute,
    ReadOnlyComponent,
    Switch,
    owned_components,
    release,
    replace_component,
)


class Resource:
    """Stand-in for an object holding external resources."""

    def __init__(self, name=""):
        self.name = name
        self.closed = 0

    def close(self):
        self.closed += 1


class Locator(Object):
    """Object with all kinds of attributes."""

    size = Attribute(10)
    points = Attribute(factory=list)
    spacing = ReadOnlyAttribute(1.0)
    verbose = Switch()
    input = Aggregate()
    output = ReadOnlyAggregate()
    tree = Component()
    cache = ReadOnlyComponent()

    def update(self, spacing, output, cache):
        self._spacing = spacing
        self._output = output
        replace_component(self, "cache", cache)


class CachedLocator(Locator):
    """Subclass adding another component."""

    index = Component()


class TestValueAttribute:
    """Test value attributes."""

    def test_default(self):
        assert Locator().size == 10

    def test_set_and_get(self):
        locator = Locator()
        locator.size = 20

        assert locator.size == 20
        assert locator._size == 20

    def test_factory_default_per_instance(self):
        a, b = Locator(), Locator()
        a.points.append(1)

        assert a.points == [1]
        assert b.points == []

    def test_get_returns_stored_object(self):
        """Mutable values are returned by reference and can be modified in place."""
        locator = Locator()
        locator.points.append(3)

        assert locator.points == [3]

    def test_class_access_returns_descriptor(self):
        assert isinstance(Locator.size, Attribute)
        assert Locator.size.name == "size"
        assert Locator.size.storage == "_size"

    def test_default_and_factory_exclusive(self):
        with pytest.raises(TypeError):
            Attribute(1, factory=list)


class TestReadOnlyAttribute:
    """Test read-only attributes."""

    def test_public_assignment_fails(self):
        locator = Locator()
        with pytest.raises(AttributeError):
            locator.spacing = 2.0
        assert locator.spacing == 1.0

    def test_owner_can_modify(self):
        locator = Locator()
        locator.update(2.0, None, None)

        assert locator.spacing == 2.0


class TestSwitch:
    """Test boolean switches with on/off methods."""

    def test_on_off(self):
        locator = Locator()
        assert locator.verbose is False

        locator.verbose_on()
        assert locator.verbose is True

        locator.verbose_off()
        assert locator.verbose is False

    def test_assignment_is_converted_to_bool(self):
        locator = Locator()
        locator.verbose = 1

        assert locator.verbose is True

    def test_existing_methods_are_kept(self):
        class Custom(Object):
            debug = Switch(True)

            def debug_on(self):
                self._debug = "custom"

        custom = Custom()
        assert custom.debug is True
        custom.debug_on()
        assert custom.debug == "custom"
        custom.debug_off()
        assert custom.debug is False


class TestAggregate:
    """Test non-owning references."""

    def test_replace_does_not_release(self):
        first, second = Resource("first"), Resource("second")
        locator = Locator()
        locator.input = first
        locator.input = second

        assert locator.input is second
        assert first.closed == 0

    def test_close_does_not_release(self):
        resource = Resource()
        locator = Locator()
        locator.input = resource
        locator.close()

        assert resource.closed == 0
        assert locator.input is resource

    def test_read_only_aggregate(self):
        locator = Locator()
        with pytest.raises(AttributeError):
            locator.output = Resource()

        resource = Resource()
        locator.update(1.0, resource, None)
        assert locator.output is resource


class TestComponent:
    """Test exclusively owned components."""

    def test_default_is_none(self):
        assert Locator().tree is None

    def test_replace_releases_previous(self):
        first, second = Resource("first"), Resource("second")
        locator = Locator()
        locator.tree = first
        locator.tree = second

        assert locator.tree is second
        assert first.closed == 1
        assert second.closed == 0

    def test_assign_same_component_is_noop(self):
        resource = Resource()
        locator = Locator()
        locator.tree = resource
        locator.tree = resource

        assert resource.closed == 0
        assert locator.tree is resource

    def test_assign_none_releases(self):
        resource = Resource()
        locator = Locator()
        locator.tree = resource
        locator.tree = None

        assert resource.closed == 1
        assert locator.tree is None

    def test_close_releases_all_components(self):
        tree, cache, index = Resource(), Resource(), Resource()
        locator = CachedLocator()
        locator.tree = tree
        locator.index = index
        locator.update(1.0, None, cache)
        locator.close()

        assert (tree.closed, cache.closed, index.closed) == (1, 1, 1)
        assert locator.tree is None
        assert locator.cache is None
        assert locator.index is None

    def test_close_twice_releases_once(self):
        resource = Resource()
        locator = Locator()
        locator.tree = resource
        locator.close()
        locator.close()

        assert resource.closed == 1

    def test_context_manager_releases(self):
        resource = Resource()
        with Locator() as locator:
            locator.tree = resource
            assert resource.closed == 0

        assert resource.closed == 1

    def test_nested_objects_are_released(self):
        inner_resource = Resource()
        inner = Locator()
        inner.tree = inner_resource

        outer = Locator()
        outer.tree = inner
        outer.close()

        assert inner_resource.closed == 1

    def test_components_without_close(self):
        """Objects without close() are simply dropped."""
        locator = Locator()
        locator.tree = [1, 2, 3]
        locator.tree = {"a": 1}

        assert locator.tree == {"a": 1}

    def test_read_only_component(self):
        first, second = Resource(), Resource()
        locator = Locator()
        with pytest.raises(AttributeError):
            locator.cache = first

        locator.update(1.0, None, first)
        locator.update(1.0, None, second)
        assert locator.cache is second
        assert first.closed == 1

    def test_replace_unknown_component(self):
        with pytest.raises(AttributeError):
            replace_component(Locator(), "size", Resource())

    def test_owned_components(self):
        names = [c.name for c in owned_components(CachedLocator)]

        assert sorted(names) == ["cache", "index", "tree"]
        assert names[0] == "index"


class TestRelease:
    """Test the release function."""

    def test_release_none(self):
        release(None)

    def test_release_calls_close(self):
        resource = Resource()
        release(resource)

        assert resource.closed == 1
