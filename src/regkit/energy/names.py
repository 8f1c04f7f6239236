"""
Conversion between energy measures and their names.

Every selectable :class:`EnergyMeasure` has one canonical name, used for
display and when parameters are written. Historical and alternative
spellings are kept in one alias table per category so that old parameter
files and user input still resolve.

All tables are read-only and built at import time.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from regkit.constants import UNKNOWN_NAME
from regkit.energy.measure import EnergyCategory, EnergyMeasure
from regkit.strings import pad

# Canonical names of selectable measures. Any value not listed is "Unknown".
CANONICAL_NAMES: Mapping[EnergyMeasure, str] = MappingProxyType({
    # Image (dis-)similarity measures
    EnergyMeasure.JE: "JE",
    EnergyMeasure.CC: "CC",
    EnergyMeasure.MI: "MI",
    EnergyMeasure.NMI: "NMI",
    EnergyMeasure.SSD: "SSD",
    EnergyMeasure.CR_XY: "CR_XY",
    EnergyMeasure.CR_YX: "CR_YX",
    EnergyMeasure.LC: "LC",
    EnergyMeasure.K: "K",
    EnergyMeasure.ML: "ML",
    EnergyMeasure.NGF_COS: "NGF_COS",
    EnergyMeasure.LNCC: "LNCC",
    # Point set distance measures
    EnergyMeasure.FRE: "FRE",
    EnergyMeasure.CORRESPONDENCE_DISTANCE: "PCD",
    EnergyMeasure.CURRENTS_DISTANCE: "CurrentsDistance",
    EnergyMeasure.VARIFOLD_DISTANCE: "VarifoldDistance",
    # External point set forces
    EnergyMeasure.BALLOON_FORCE: "BalloonForce",
    EnergyMeasure.IMAGE_EDGE_FORCE: "ImageEdgeForce",
    EnergyMeasure.IMPLICIT_SURFACE_DISTANCE: "ImplicitSurfaceDistance",
    EnergyMeasure.IMPLICIT_SURFACE_SPRING_FORCE: "ImplicitSurfaceSpringForce",
    # Internal point set forces
    EnergyMeasure.METRIC_DISTORTION: "MetricDistortion",
    EnergyMeasure.STRETCHING: "Stretching",
    EnergyMeasure.CURVATURE: "Curvature",
    EnergyMeasure.QUADRATIC_CURVATURE: "QuadraticCurvature",
    EnergyMeasure.NON_SELF_INTERSECTION: "NSI",
    EnergyMeasure.REPULSIVE_FORCE: "Repulsion",
    EnergyMeasure.INFLATION_FORCE: "Inflation",
    EnergyMeasure.SPRING_FORCE: "Spring",
    # Transformation constraints
    EnergyMeasure.BENDING_ENERGY: "BE",
    EnergyMeasure.VOLUME_PRESERVATION: "VP",
    EnergyMeasure.TOPOLOGY_PRESERVATION: "TP",
    EnergyMeasure.SPARSITY: "Sparsity",
    EnergyMeasure.L0_NORM: "L0",
    EnergyMeasure.L1_NORM: "L1",
    EnergyMeasure.L2_NORM: "L2",
    EnergyMeasure.SQ_LOG_DET_JAC: "SqLogDetJac",
    EnergyMeasure.MIN_DET_JAC: "MinDetJac",
})

# Alternative names, matched exactly (case-sensitive)
SIMILARITY_ALIASES: Mapping[str, EnergyMeasure] = MappingProxyType({
    "NCC": EnergyMeasure.LNCC,
    "LCC": EnergyMeasure.LNCC,
})

POINT_SET_DISTANCE_ALIASES: Mapping[str, EnergyMeasure] = MappingProxyType({
    "Fiducial Registration Error": EnergyMeasure.FRE,
    "Fiducial registration error": EnergyMeasure.FRE,
    "Fiducial Error": EnergyMeasure.FRE,
    "Fiducial error": EnergyMeasure.FRE,
    "Landmark Registration Error": EnergyMeasure.FRE,
    "Landmark registration error": EnergyMeasure.FRE,
    "Landmark Error": EnergyMeasure.FRE,
    "Landmark error": EnergyMeasure.FRE,
    "Point Correspondence Distance": EnergyMeasure.CORRESPONDENCE_DISTANCE,
    "Point correspondence distance": EnergyMeasure.CORRESPONDENCE_DISTANCE,
    "Correspondence Distance": EnergyMeasure.CORRESPONDENCE_DISTANCE,
    "Correspondence distance": EnergyMeasure.CORRESPONDENCE_DISTANCE,
    "Currents distance": EnergyMeasure.CURRENTS_DISTANCE,
    "Currents Distance": EnergyMeasure.CURRENTS_DISTANCE,
    "Varifold distance": EnergyMeasure.VARIFOLD_DISTANCE,
    "Varifold Distance": EnergyMeasure.VARIFOLD_DISTANCE,
})

EXTERNAL_FORCE_ALIASES: Mapping[str, EnergyMeasure] = MappingProxyType({
    "EdgeForce": EnergyMeasure.IMAGE_EDGE_FORCE,
})

INTERNAL_FORCE_ALIASES: Mapping[str, EnergyMeasure] = MappingProxyType({
    "EdgeLength": EnergyMeasure.STRETCHING,
    "MetricDistortion": EnergyMeasure.METRIC_DISTORTION,
    "Bending": EnergyMeasure.CURVATURE,
    "SurfaceBending": EnergyMeasure.CURVATURE,
    "SurfaceCurvature": EnergyMeasure.CURVATURE,
    "RepulsiveForce": EnergyMeasure.REPULSIVE_FORCE,
    "NonSelfIntersection": EnergyMeasure.NON_SELF_INTERSECTION,
    "InflationForce": EnergyMeasure.INFLATION_FORCE,
    "SurfaceInflation": EnergyMeasure.INFLATION_FORCE,
})

TRANSFORMATION_CONSTRAINT_ALIASES: Mapping[str, EnergyMeasure] = MappingProxyType({
    "JAC": EnergyMeasure.SQ_LOG_DET_JAC,
    "MinJac": EnergyMeasure.MIN_DET_JAC,
})

# Alias tables in the order in which they are consulted
ALIASES: Tuple[Tuple[EnergyCategory, Mapping[str, EnergyMeasure]], ...] = (
    (EnergyCategory.SIMILARITY, SIMILARITY_ALIASES),
    (EnergyCategory.POINT_SET_DISTANCE, POINT_SET_DISTANCE_ALIASES),
    (EnergyCategory.EXTERNAL_FORCE, EXTERNAL_FORCE_ALIASES),
    (EnergyCategory.INTERNAL_FORCE, INTERNAL_FORCE_ALIASES),
    (EnergyCategory.TRANSFORMATION_CONSTRAINT, TRANSFORMATION_CONSTRAINT_ALIASES),
)


def energy_measure_to_string(
    value: EnergyMeasure,
    width: int = 0,
    fill: str = " ",
    left: bool = False,
) -> str:
    """
    Convert an energy measure to its canonical name.

    Args:
        value: Enumeration value (or its integer value).
        width: Optional minimum width of the result.
        fill: Fill character used for padding.
        left: Pad on the right instead of the left.

    Returns:
        Canonical name, or "Unknown" for markers and unknown values.
    """
    return pad(CANONICAL_NAMES.get(value, UNKNOWN_NAME), width, fill, left)


def energy_measure_from_string(text: str) -> Tuple[EnergyMeasure, bool]:
    """
    Convert a name to an energy measure.

    The alias tables are consulted first, in category order. Otherwise the
    canonical names are compared from the last selectable value down to the
    first, so that if two values ever shared a name, the one added later
    would win.

    Args:
        text: Canonical name or alias (case-sensitive).

    Returns:
        Tuple of (value, ok). If the name is not recognized, the value is
        ``EnergyMeasure.UNKNOWN`` and ok is False.

    Example:
        >>> energy_measure_from_string("NCC")
        (<EnergyMeasure.LNCC: 13>, True)
    """
    for _, aliases in ALIASES:
        value = aliases.get(text)
        if value is not None:
            return value, True

    # Markers are skipped, so "Unknown" never resolves to a sentinel
    value = EnergyMeasure(EnergyMeasure.LAST - 1)
    while value != EnergyMeasure.UNKNOWN:
        if value.is_selectable and energy_measure_to_string(value) == text:
            return value, True
        value = EnergyMeasure(value - 1)

    return EnergyMeasure.UNKNOWN, False


def aliases_of(value: EnergyMeasure) -> Tuple[str, ...]:
    """Get the alternative names of an energy measure, in table order."""
    canonical = CANONICAL_NAMES.get(value)
    return tuple(
        alias
        for _, aliases in ALIASES
        for alias, target in aliases.items()
        if target == value and alias != canonical
    )
