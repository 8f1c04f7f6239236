"""
Constants used throughout the regkit package.

String spellings defined here are part of the persisted parameter format and
should not be modified without migrating existing parameter files.
"""

from typing import FrozenSet

# Name reported for values without a canonical string
UNKNOWN_NAME: str = "Unknown"

# Separator between a qualifying prefix and a nested parameter name,
# e.g. "Inner" + " " + "radius"
PARAMETER_PREFIX_SEPARATOR: str = " "

# Boolean values are formatted as Yes/No
BOOL_TRUE_NAME: str = "Yes"
BOOL_FALSE_NAME: str = "No"

# Accepted boolean spellings (compared case-insensitively)
TRUE_STRINGS: FrozenSet[str] = frozenset({"yes", "y", "true", "on", "1"})
FALSE_STRINGS: FrozenSet[str] = frozenset({"no", "n", "false", "off", "0"})

# Logger namespace of the package and format of its log records
LOGGER_NAME: str = "regkit"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: str = "%H:%M:%S"
