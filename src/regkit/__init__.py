"""
regkit - Configuration and naming infrastructure for image registration.

This package provides:
- A configurable object interface, to set and list the parameters of any
  algorithm object through ordered name/value string pairs
- Attribute declarations with value, aggregate and component ownership
- Functions for building and merging parameter lists
- The energy measure enumeration with canonical names and aliases
- A registry for selecting energy terms by name
"""

from regkit.types import ParameterEntry, ParameterList
from regkit.constants import UNKNOWN_NAME
from regkit.object import (
    Object,
    Attribute,
    ReadOnlyAttribute,
    Switch,
    Aggregate,
    ReadOnlyAggregate,
    Component,
    ReadOnlyComponent,
    find,
    contains,
    get,
    insert,
    merge,
    remove,
)
from regkit.energy import (
    EnergyCategory,
    EnergyMeasure,
    energy_measure_to_string,
    energy_measure_from_string,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "ParameterEntry",
    "ParameterList",
    # Constants
    "UNKNOWN_NAME",
    # Objects
    "Object",
    "Attribute",
    "ReadOnlyAttribute",
    "Switch",
    "Aggregate",
    "ReadOnlyAggregate",
    "Component",
    "ReadOnlyComponent",
    # Parameter lists
    "find",
    "contains",
    "get",
    "insert",
    "merge",
    "remove",
    # Energy measures
    "EnergyCategory",
    "EnergyMeasure",
    "energy_measure_to_string",
    "energy_measure_from_string",
]
