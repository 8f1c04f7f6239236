"""Energy measure enumeration, naming and energy term selection."""

from regkit.energy.measure import EnergyCategory, EnergyMeasure
from regkit.energy.names import (
    CANONICAL_NAMES,
    ALIASES,
    energy_measure_to_string,
    energy_measure_from_string,
    aliases_of,
)
from regkit.energy.base import (
    EnergyTerm,
    ImageSimilarity,
    PointSetDistance,
    ExternalForce,
    InternalForce,
    TransformationConstraint,
)
from regkit.energy.registry import (
    register_energy_term,
    unregister_energy_term,
    get_energy_term_class,
    new_energy_term,
    list_energy_terms,
    get_energy_term_info,
    list_energy_terms_with_info,
)
from regkit.energy.function import EnergyFunction

__all__ = [
    # Enumeration
    "EnergyCategory",
    "EnergyMeasure",
    # Names
    "CANONICAL_NAMES",
    "ALIASES",
    "energy_measure_to_string",
    "energy_measure_from_string",
    "aliases_of",
    # Energy terms
    "EnergyTerm",
    "ImageSimilarity",
    "PointSetDistance",
    "ExternalForce",
    "InternalForce",
    "TransformationConstraint",
    "EnergyFunction",
    # Registry
    "register_energy_term",
    "unregister_energy_term",
    "get_energy_term_class",
    "new_energy_term",
    "list_energy_terms",
    "get_energy_term_info",
    "list_energy_terms_with_info",
]
