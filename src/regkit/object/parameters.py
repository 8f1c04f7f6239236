"""
Auxiliary functions for working with parameter lists.

A parameter list is an ordered list of (name, value) string tuples. These
functions give it insert-or-update semantics without wrapping it in a class,
so subclasses of :class:`regkit.object.Object` can build their
``parameter()`` result with plain list operations.

None of the functions raise for missing names: absence is reported as the end
position, ``False``, the empty string, or an unchanged list.
"""

from typing import Any, Optional

from regkit.constants import PARAMETER_PREFIX_SEPARATOR
from regkit.strings import to_string
from regkit.types import ParameterList


def find(params: ParameterList, name: str) -> int:
    """
    Find a parameter in a parameter list.

    Args:
        params: Parameter list to search.
        name: Parameter name (case-sensitive).

    Returns:
        Index of the first entry with the given name, or ``len(params)``
        if there is no such entry.
    """
    pos = 0
    while pos < len(params) and params[pos][0] != name:
        pos += 1
    return pos


def contains(params: ParameterList, name: str) -> bool:
    """Whether the parameter list has an entry with the given name."""
    return find(params, name) != len(params)


def get(params: ParameterList, name: str) -> str:
    """
    Get the value of a parameter.

    Args:
        params: Parameter list to search.
        name: Parameter name.

    Returns:
        Value of the first matching entry, or the empty string if absent.
        Use :func:`contains` to tell an absent entry from an empty value.
    """
    pos = find(params, name)
    if pos == len(params):
        return ""
    return params[pos][1]


def insert(params: ParameterList, name: str, value: Any) -> ParameterList:
    """
    Insert or replace a parameter value.

    An existing entry keeps its position and only its value is replaced.
    A new entry is appended at the end.

    Args:
        params: Parameter list to modify in place.
        name: Parameter name.
        value: Parameter value. Non-string values are formatted with
               :func:`regkit.strings.to_string`.

    Returns:
        The modified parameter list.

    Example:
        >>> params = [("Radius", "1")]
        >>> insert(params, "Radius", 3)
        [('Radius', '3')]
    """
    text = value if isinstance(value, str) else to_string(value)
    pos = find(params, name)
    if pos == len(params):
        params.append((name, text))
    else:
        params[pos] = (name, text)
    return params


def merge(
    params: ParameterList,
    other: ParameterList,
    prefix: Optional[str] = None,
) -> ParameterList:
    """
    Insert or replace all parameters of another list.

    This is how a composite object exposes the parameters of one of its parts
    under a qualified name: with a prefix, each name becomes
    ``"<prefix> <name with lower-case first letter>"``.

    Args:
        params: Parameter list to modify in place.
        other: Parameters to insert, in order.
        prefix: Optional qualifier for the inserted names.

    Returns:
        The modified parameter list.

    Example:
        >>> merge([], [("Radius", "3")], prefix="Inner")
        [('Inner radius', '3')]
    """
    # Copy first so that merging a list into itself terminates
    for name, value in list(other):
        if prefix is not None:
            name = prefix + PARAMETER_PREFIX_SEPARATOR + name[:1].lower() + name[1:]
        insert(params, name, value)
    return params


def remove(params: ParameterList, name: str) -> ParameterList:
    """
    Remove a parameter from a parameter list.

    Only the first matching entry is removed. Nothing happens if the name is
    not in the list.

    Returns:
        The modified parameter list.
    """
    pos = find(params, name)
    if pos != len(params):
        del params[pos]
    return params
