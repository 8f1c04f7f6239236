"""
Core type definitions for the regkit package.

Parameter lists are plain Python lists of (name, value) string tuples so that
they can be built, compared and printed without any helper classes. The free
functions in :mod:`regkit.object.parameters` give them insert-or-update
semantics.
"""

from typing import List, Tuple

# A single (name, value) pair. Names are case-sensitive.
ParameterEntry = Tuple[str, str]

# Ordered sequence of parameter entries. Order is significant: lookups return
# the first match and updates keep the position of the existing entry.
ParameterList = List[ParameterEntry]
