"""Configurable object interface, attribute declarations and parameter lists."""

from regkit.object.base import Object
from regkit.object.attributes import (
    Attribute,
    ReadOnlyAttribute,
    Switch,
    Aggregate,
    ReadOnlyAggregate,
    Component,
    ReadOnlyComponent,
    owned_components,
    release,
    replace_component,
)
from regkit.object.parameters import (
    find,
    contains,
    get,
    insert,
    merge,
    remove,
)

__all__ = [
    # Object interface
    "Object",
    # Attributes
    "Attribute",
    "ReadOnlyAttribute",
    "Switch",
    "Aggregate",
    "ReadOnlyAggregate",
    "Component",
    "ReadOnlyComponent",
    "owned_components",
    "release",
    "replace_component",
    # Parameter lists
    "find",
    "contains",
    "get",
    "insert",
    "merge",
    "remove",
]
