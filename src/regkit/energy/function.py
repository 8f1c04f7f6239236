"""
Composite of energy terms.

An :class:`EnergyFunction` owns an ordered list of energy terms and exposes
all of their parameters as its own, each qualified by the prefix of its term
(see :attr:`regkit.energy.EnergyTerm.prefix`). For a function of an unnamed
SSD term and an unnamed BE term::

    [("SSD name", ""), ("SSD weight", "1"), ("BE name", ""), ("BE weight", "1")]
"""

from typing import Iterable, Iterator, List, Optional, Tuple
import logging
import warnings

from regkit.constants import PARAMETER_PREFIX_SEPARATOR
from regkit.energy.base import EnergyTerm
from regkit.object import Object, merge, release
from regkit.types import ParameterList

logger = logging.getLogger(__name__)


class EnergyFunction(Object):
    """
    Sum of weighted energy terms.

    The function takes ownership of the terms added to it: removing a term
    or closing the function releases it.

    Which terms a function has is not a parameter. Parameters only configure
    the terms already added, so a parameter list applies completely to a
    function with terms of the same prefixes, and not at all to an empty
    one.
    """

    def __init__(self, terms: Iterable[EnergyTerm] = ()) -> None:
        self._terms: List[EnergyTerm] = []
        for term in terms:
            self.add(term)

    @property
    def terms(self) -> Tuple[EnergyTerm, ...]:
        """Energy terms in the order they were added."""
        return tuple(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[EnergyTerm]:
        return iter(self.terms)

    def add(self, term: EnergyTerm) -> EnergyTerm:
        """
        Add an energy term and take ownership of it.

        Args:
            term: Energy term to add.

        Returns:
            The added term.

        Note:
            Adding a term with the same prefix as an existing one issues a
            warning, because their parameters can then no longer be set
            separately.
        """
        if self.find(term.prefix) is not None:
            warnings.warn(
                f"Energy function already has a term with prefix '{term.prefix}'. "
                f"Set a distinct name to configure the terms separately.",
                UserWarning,
            )
        self._terms.append(term)
        return term

    def find(self, prefix: str) -> Optional[EnergyTerm]:
        """Get the first term with the given prefix, or None."""
        for term in self._terms:
            if term.prefix == prefix:
                return term
        return None

    def remove(self, prefix: str) -> bool:
        """
        Remove and release the first term with the given prefix.

        Returns:
            Whether a term was removed.
        """
        term = self.find(prefix)
        if term is None:
            return False
        self._terms.remove(term)
        release(term)
        return True

    def close(self) -> None:
        """Release all energy terms."""
        terms, self._terms = self._terms, []
        for term in terms:
            release(term)
        super().close()

    def set(self, name: str, value: str) -> bool:
        return self._route(self._prefixes(), name, value)

    def apply_parameters(self, params: ParameterList) -> None:
        """
        Set parameters from name/value pairs.

        Entries are routed by the prefixes the terms have before the first
        entry is applied. A list written by :meth:`parameter` therefore still
        applies completely when one of its entries renames a term.
        """
        prefixes = self._prefixes()
        for name, value in params:
            if not self._route(prefixes, name, value):
                logger.debug("%s: ignoring parameter '%s' = '%s'", self.name_of_class(), name, value)

    def parameter(self) -> ParameterList:
        params = super().parameter()
        for term in self._terms:
            merge(params, term.parameter(), prefix=term.prefix)
        return params

    def _prefixes(self) -> List[Tuple[str, EnergyTerm]]:
        return [(term.prefix, term) for term in self._terms]

    def _route(self, prefixes: List[Tuple[str, EnergyTerm]], name: str, value: str) -> bool:
        for prefix, term in prefixes:
            head = prefix + PARAMETER_PREFIX_SEPARATOR
            if name.startswith(head):
                rest = name[len(head):]
                # Prefixed names have a lower-case first letter
                if term.set(rest, value) or term.set(rest[:1].upper() + rest[1:], value):
                    return True
        return super().set(name, value)
