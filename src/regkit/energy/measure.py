"""
Enumeration of all available energy terms.

The values are partitioned into categories by pairs of ``*_BEGIN``/``*_END``
sentinels. Sentinels, ``UNKNOWN`` and ``LAST`` are markers only and can never
be selected. New values must be added inside the range of their category;
the order of values matters for name resolution (see
:func:`regkit.energy.names.energy_measure_from_string`).
"""

from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Optional, Tuple


class EnergyCategory(Enum):
    """
    Category of an energy term.

    Members are declared in the order in which their alias tables are
    consulted by name resolution.
    """

    SIMILARITY = "similarity"                                # cf. ImageSimilarity
    POINT_SET_DISTANCE = "point set distance"                # cf. PointSetDistance
    EXTERNAL_FORCE = "external force"                        # cf. ExternalForce
    INTERNAL_FORCE = "internal force"                        # cf. InternalForce
    TRANSFORMATION_CONSTRAINT = "transformation constraint"  # cf. TransformationConstraint

    @property
    def begin(self) -> "EnergyMeasure":
        """Sentinel preceding the first measure of this category."""
        return _CATEGORY_RANGES[self][0]

    @property
    def end(self) -> "EnergyMeasure":
        """Sentinel following the last measure of this category."""
        return _CATEGORY_RANGES[self][1]

    @property
    def measures(self) -> Tuple["EnergyMeasure", ...]:
        """Selectable measures of this category in declaration order."""
        return tuple(EnergyMeasure(v) for v in range(self.begin + 1, self.end))

    def __str__(self) -> str:
        return self.value


class EnergyMeasure(IntEnum):
    """Enumeration of all available energy terms."""

    UNKNOWN = 0  # Unknown/invalid energy term

    # Image (dis-)similarity measures
    SIM_BEGIN = 1
    JE = 2                              # Joint entropy
    CC = 3                              # Cross-correlation
    MI = 4                              # Mutual information
    NMI = 5                             # Normalized mutual information
    SSD = 6                             # Sum of squared differences
    CR_XY = 7                           # Correlation ratio
    CR_YX = 8                           # Correlation ratio
    LC = 9
    K = 10
    ML = 11
    NGF_COS = 12                        # Cosine of normalized gradient field
    LNCC = 13                           # Normalized/local cross-correlation
    SIM_END = 14

    # Point set distance measures
    PDM_BEGIN = 15
    FRE = 16                            # Fiducial registration error
    CORRESPONDENCE_DISTANCE = 17        # Point correspondence distance
    CURRENTS_DISTANCE = 18              # Distance of currents representations
    VARIFOLD_DISTANCE = 19              # Distance of varifold representations
    PDM_END = 20

    # External point set forces
    EFT_BEGIN = 21
    BALLOON_FORCE = 22                  # Balloon/inflation force
    IMAGE_EDGE_FORCE = 23               # Image edge force
    IMPLICIT_SURFACE_DISTANCE = 24      # Implicit surface distance force
    IMPLICIT_SURFACE_SPRING_FORCE = 25  # Implicit surface spring force
    EFT_END = 26

    # Internal point set forces
    IFT_BEGIN = 27
    METRIC_DISTORTION = 28              # Minimize metric distortion
    STRETCHING = 29                     # Stretching force (rest edge length)
    CURVATURE = 30                      # Minimize surface curvature
    QUADRATIC_CURVATURE = 31            # Quadratic fit of neighbor to tangent plane distance
    NON_SELF_INTERSECTION = 32          # Repels too close non-neighboring triangles
    REPULSIVE_FORCE = 33                # Repels too close non-neighboring nodes
    INFLATION_FORCE = 34                # Inflate point set surface
    SPRING_FORCE = 35                   # Spring force
    IFT_END = 36

    # Transformation regularization terms
    CM_BEGIN = 37
    VOLUME_PRESERVATION = 38            # Volume preservation constraint
    TOPOLOGY_PRESERVATION = 39          # Topology preservation constraint
    SPARSITY = 40                       # Default sparsity constraint
    BENDING_ENERGY = 41                 # Thin-plate spline bending energy
    L0_NORM = 42                        # Sparsity constraint based on l0-norm
    L1_NORM = 43                        # Sparsity constraint based on l1-norm
    L2_NORM = 44                        # Sparsity constraint based on l2-norm
    SQ_LOG_DET_JAC = 45                 # Squared logarithm of the Jacobian determinant
    MIN_DET_JAC = 46                    # Constrain minimum Jacobian determinant
    CM_END = 47

    LAST = 48  # Number of enumeration values + 1

    @property
    def category(self) -> Optional[EnergyCategory]:
        """Category of this measure, or None for markers."""
        for category, (begin, end) in _CATEGORY_RANGES.items():
            if begin < self < end:
                return category
        return None

    @property
    def is_selectable(self) -> bool:
        """Whether this value names an energy term rather than a marker."""
        return self.category is not None

    @classmethod
    def selectable(cls) -> Tuple["EnergyMeasure", ...]:
        """All selectable measures in declaration order."""
        return tuple(m for category in EnergyCategory for m in category.measures)

    @classmethod
    def from_string(cls, text: str) -> Tuple["EnergyMeasure", bool]:
        """Convert a name to an enumeration value, see :func:`energy_measure_from_string`."""
        from regkit.energy.names import energy_measure_from_string

        return energy_measure_from_string(text)

    def __str__(self) -> str:
        from regkit.energy.names import energy_measure_to_string

        return energy_measure_to_string(self)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __hash__(self) -> int:
        return hash(int(self))


_CATEGORY_RANGES = MappingProxyType({
    EnergyCategory.SIMILARITY: (EnergyMeasure.SIM_BEGIN, EnergyMeasure.SIM_END),
    EnergyCategory.POINT_SET_DISTANCE: (EnergyMeasure.PDM_BEGIN, EnergyMeasure.PDM_END),
    EnergyCategory.EXTERNAL_FORCE: (EnergyMeasure.EFT_BEGIN, EnergyMeasure.EFT_END),
    EnergyCategory.INTERNAL_FORCE: (EnergyMeasure.IFT_BEGIN, EnergyMeasure.IFT_END),
    EnergyCategory.TRANSFORMATION_CONSTRAINT: (EnergyMeasure.CM_BEGIN, EnergyMeasure.CM_END),
})
