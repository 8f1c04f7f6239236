"""
Energy term registry for selecting energy terms by name.

The registry provides a centralized way to:
- Register the class implementing an energy measure
- Look up and instantiate energy terms by measure or by any name
  :func:`energy_measure_from_string` accepts, including aliases
- List all available energy terms

Energy terms are registered when their modules are imported.
"""

from typing import Dict, List, Optional, Type, Union
import logging

from regkit.energy.base import EnergyTerm
from regkit.energy.measure import EnergyMeasure
from regkit.energy.names import aliases_of, energy_measure_from_string
from regkit.types import ParameterList

logger = logging.getLogger(__name__)

# Global registry mapping energy measures to classes
_ENERGY_TERM_REGISTRY: Dict[EnergyMeasure, Type[EnergyTerm]] = {}

EnergyTermKey = Union[EnergyMeasure, str]


def _available() -> str:
    return ", ".join(list_energy_terms())


def _to_measure(key: EnergyTermKey) -> EnergyMeasure:
    """
    Resolve a registry key to an energy measure.

    Raises:
        KeyError: If the key is a name that does not resolve.
    """
    if isinstance(key, EnergyMeasure):
        return key
    measure, ok = energy_measure_from_string(key)
    if not ok:
        raise KeyError(f"Unknown energy term: '{key}'. Available: {_available()}")
    return measure


def register_energy_term(measure: Optional[EnergyMeasure] = None):
    """
    Decorator to register an energy term class in the registry.

    Args:
        measure: Optional measure override. If not provided, uses the class's
                 ``measure`` attribute.

    Returns:
        Decorator function.

    Raises:
        ValueError: If the measure is not selectable, does not belong to the
                    category of the class, or is already registered by
                    another class, or if the class is already registered
                    for a different measure.

    Example:
        >>> @register_energy_term()
        ... class SumOfSquaredDifferences(ImageSimilarity):
        ...     measure = EnergyMeasure.SSD
    """
    def decorator(cls: Type[EnergyTerm]) -> Type[EnergyTerm]:
        em = measure if measure is not None else cls.measure

        if not em.is_selectable:
            raise ValueError(
                f"Cannot register {cls.__name__} for {em.name}: "
                f"not a selectable energy measure"
            )
        if cls.category is not None and em.category is not cls.category:
            raise ValueError(
                f"Cannot register {cls.__name__} for {em.name}: measure is a "
                f"{em.category} term, but {cls.__name__} is a {cls.category} term"
            )

        for registered, existing in _ENERGY_TERM_REGISTRY.items():
            if existing is cls and registered is not em:
                raise ValueError(
                    f"Cannot register {cls.__name__} for {em.name}: already "
                    f"registered as energy term '{registered}'"
                )

        if em in _ENERGY_TERM_REGISTRY:
            existing = _ENERGY_TERM_REGISTRY[em]
            if existing is not cls:
                raise ValueError(
                    f"Energy term '{em}' is already registered by "
                    f"{existing.__module__}.{existing.__name__}"
                )
            # Same class registered twice (e.g., module reload), ignore
            return cls

        if cls.measure is not em:
            cls.measure = em
        _ENERGY_TERM_REGISTRY[em] = cls
        logger.debug("Registered energy term '%s': %s.%s", em, cls.__module__, cls.__name__)
        return cls

    return decorator


def unregister_energy_term(key: EnergyTermKey) -> Type[EnergyTerm]:
    """
    Remove an energy term class from the registry.

    Args:
        key: Energy measure or name.

    Returns:
        The class that was registered.

    Raises:
        KeyError: If no class is registered for the key.
    """
    em = _to_measure(key)
    try:
        cls = _ENERGY_TERM_REGISTRY.pop(em)
    except KeyError:
        raise KeyError(f"No energy term registered for '{em}'") from None
    logger.debug("Unregistered energy term '%s'", em)
    return cls


def get_energy_term_class(key: EnergyTermKey) -> Type[EnergyTerm]:
    """
    Get an energy term class without instantiating.

    Args:
        key: Energy measure, canonical name or alias.

    Returns:
        Energy term class.

    Raises:
        KeyError: If the name is unknown or no class is registered.
    """
    em = _to_measure(key)
    if em not in _ENERGY_TERM_REGISTRY:
        raise KeyError(
            f"No energy term registered for '{em}'. Available: {_available()}"
        )
    return _ENERGY_TERM_REGISTRY[em]


def new_energy_term(
    key: EnergyTermKey,
    params: Optional[ParameterList] = None,
) -> EnergyTerm:
    """
    Get an energy term instance by measure or name.

    Args:
        key: Energy measure, canonical name or alias.
        params: Optional parameters applied to the new instance. Unknown
                parameters are ignored.

    Returns:
        Instantiated energy term with default constructor arguments.

    Raises:
        KeyError: If the name is unknown or no class is registered.

    Example:
        >>> term = new_energy_term("NCC", [("Weight", "0.5")])
    """
    cls = get_energy_term_class(key)
    term = cls()
    if params:
        term.apply_parameters(params)
    return term


def list_energy_terms() -> List[str]:
    """
    List the canonical names of all registered energy terms.

    Returns:
        Sorted list of names.
    """
    return sorted(str(em) for em in _ENERGY_TERM_REGISTRY)


def get_energy_term_info(key: EnergyTermKey) -> Dict[str, str]:
    """
    Get information about a registered energy term.

    Args:
        key: Energy measure, canonical name or alias.

    Returns:
        Dictionary with energy term metadata.
    """
    cls = get_energy_term_class(key)
    return {
        "name": str(cls.measure),
        "category": str(cls.measure.category),
        "aliases": ", ".join(aliases_of(cls.measure)),
        "description": (cls.__doc__ or "No description available.").strip().splitlines()[0],
        "module": f"{cls.__module__}.{cls.__name__}",
    }


def list_energy_terms_with_info() -> List[Dict[str, str]]:
    """
    List all registered energy terms with their metadata.

    Returns:
        List of dictionaries with energy term information.
    """
    return [get_energy_term_info(name) for name in list_energy_terms()]
