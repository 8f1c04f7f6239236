"""
Base class of all configurable regkit objects.

:class:`Object` is a pure interface: it has no instance state of its own, so
deriving from it never changes the layout of a subclass. Intermediate abstract
base classes add the state shared by a more specific family of objects.

Subclasses choose how their class name is reported with keywords of the class
statement:

- ``class Foo(Object)``: concrete class, ``name_of_class()`` returns
  ``name_of_type()``, i.e. ``"Foo"``;
- ``class Foo(Object, abstract=True)``: ``name_of_class()`` is abstract and
  the class cannot be instantiated;
- ``class Foo(Object, mutable=True)``: the class implements its own
  ``name_of_class()``, which may depend on the state of the instance.

``type_name=`` overrides the declared type name.
"""

from abc import ABC, abstractmethod
import logging
from typing import Any, ClassVar, Optional

from regkit.object.attributes import owned_components
from regkit.types import ParameterList

logger = logging.getLogger(__name__)


class Object(ABC):
    """
    Interface for identification and string-based configuration.

    Subclasses override :meth:`set` to parse and apply the parameters they
    know and :meth:`parameter` to list their current values. Parameter lists
    can then be copied between objects without either side knowing the
    concrete type of the other::

        target.apply_parameters(source.parameter())

    Example:
        >>> class Smoother(Object):
        ...     sigma = Attribute(1.0)
        ...
        ...     def set(self, name, value):
        ...         if name == "Sigma":
        ...             self.sigma, ok = parse_float(value)
        ...             return ok
        ...         return super().set(name, value)
        ...
        ...     def parameter(self):
        ...         params = super().parameter()
        ...         insert(params, "Sigma", self.sigma)
        ...         return params
    """

    __slots__ = ()

    _type_name: ClassVar[str] = "Object"

    def __init_subclass__(
        cls,
        abstract: bool = False,
        mutable: bool = False,
        type_name: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if abstract and mutable:
            raise TypeError(f"{cls.__name__}: a class cannot be both abstract and mutable")
        cls._type_name = type_name if type_name is not None else cls.__name__
        if abstract:
            cls.name_of_class = _abstract_name_of_class
        elif mutable:
            if "name_of_class" not in cls.__dict__:
                raise TypeError(
                    f"{cls.__name__}: mutable object classes must implement name_of_class()"
                )
        elif "name_of_class" not in cls.__dict__:
            cls.name_of_class = _name_of_class

    @classmethod
    def name_of_type(cls) -> str:
        """Get name of this class type."""
        return cls._type_name

    @abstractmethod
    def name_of_class(self) -> str:
        """Get name of the class which this object is an instance of."""

    def set(self, name: str, value: str) -> bool:
        """
        Set parameter value from string.

        Args:
            name: Parameter name.
            value: Parameter value. Its format is defined by the subclass.

        Returns:
            Whether the parameter is known and the value was valid. The base
            class has no parameters and always returns False.
        """
        return False

    def parameter(self) -> ParameterList:
        """
        Get parameter name/value pairs.

        Returns:
            A new list on every call. The base class returns an empty list.
        """
        return []

    def apply_parameters(self, params: ParameterList) -> None:
        """
        Set parameters from name/value pairs.

        Calls :meth:`set` for each entry in order. Unknown names and invalid
        values are skipped, so that parameter lists written by other versions
        of a class can still be applied.
        """
        for name, value in params:
            if not self.set(name, value):
                logger.debug("%s: ignoring parameter '%s' = '%s'", self.name_of_class(), name, value)

    def close(self) -> None:
        """Release all components owned by this object."""
        for component in owned_components(type(self)):
            component.release_from(self)

    def __enter__(self) -> "Object":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _name_of_class(self: Object) -> str:
    """Get name of the class which this object is an instance of."""
    return type(self)._type_name


@abstractmethod
def _abstract_name_of_class(self: Object) -> str:
    """Get name of the class which this object is an instance of."""
