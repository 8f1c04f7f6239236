"""
Base classes of configurable energy terms.

An energy term is one weighted summand of a registration energy, e.g. an
image similarity measure or a transformation constraint. The numerical
evaluation is left to the subclasses; these base classes define the
parameters every term shares and tie each class to its
:class:`EnergyMeasure`.
"""

from typing import ClassVar, Optional

from regkit.energy.measure import EnergyCategory, EnergyMeasure
from regkit.object import Attribute, Object, insert
from regkit.strings import parse_float
from regkit.types import ParameterList


class EnergyTerm(Object, abstract=True):
    """
    Abstract base class of all energy terms.

    Subclasses set the class attribute ``measure`` to the energy measure they
    implement and are usually registered with
    :func:`regkit.energy.register_energy_term`.

    Parameters:
        Name: Name of the term, used to qualify its parameters when it is
              part of an :class:`regkit.energy.EnergyFunction`.
        Weight: Weight of the term in the total energy.

    Attributes:
        measure: Energy measure implemented by the class.
        category: Category of energy terms the class belongs to, or None.
        name: Name of this term instance.
        weight: Weight of this term instance.
    """

    measure: ClassVar[EnergyMeasure] = EnergyMeasure.UNKNOWN
    category: ClassVar[Optional[EnergyCategory]] = None

    name = Attribute("")
    weight = Attribute(1.0)

    def __init__(self, name: str = "", weight: float = 1.0) -> None:
        self.name = name
        self.weight = weight

    @property
    def prefix(self) -> str:
        """Qualifier of this term's parameters, the name or the canonical measure name."""
        return self.name or str(self.measure)

    def set(self, name: str, value: str) -> bool:
        if name == "Name":
            self.name = value
            return True
        if name == "Weight":
            weight, ok = parse_float(value)
            if ok:
                self.weight = weight
            return ok
        return super().set(name, value)

    def parameter(self) -> ParameterList:
        params = super().parameter()
        insert(params, "Name", self.name)
        insert(params, "Weight", self.weight)
        return params


class ImageSimilarity(EnergyTerm, abstract=True):
    """Base class of image (dis-)similarity measures."""

    category = EnergyCategory.SIMILARITY


class PointSetDistance(EnergyTerm, abstract=True):
    """Base class of point set distance measures."""

    category = EnergyCategory.POINT_SET_DISTANCE


class ExternalForce(EnergyTerm, abstract=True):
    """Base class of external point set forces."""

    category = EnergyCategory.EXTERNAL_FORCE


class InternalForce(EnergyTerm, abstract=True):
    """Base class of internal point set forces."""

    category = EnergyCategory.INTERNAL_FORCE


class TransformationConstraint(EnergyTerm, abstract=True):
    """Base class of transformation regularization terms."""

    category = EnergyCategory.TRANSFORMATION_CONSTRAINT
