"""
Attribute declarations for configurable objects.

Subclasses of :class:`regkit.object.Object` declare their attributes as class
level descriptors. Each descriptor stores its value on the instance under the
protected name ``_<name>`` and exposes it as ``obj.<name>``. Three ownership
shapes are supported:

- value attributes (:class:`Attribute`, :class:`ReadOnlyAttribute`,
  :class:`Switch`) hold a plain value;
- aggregates (:class:`Aggregate`, :class:`ReadOnlyAggregate`) hold a reference
  to an object owned by someone else and never release it;
- components (:class:`Component`, :class:`ReadOnlyComponent`) hold an object
  owned exclusively by the instance. Replacing a component releases the
  previous one, and :meth:`regkit.object.Object.close` releases all of them.

Read-only variants reject public assignment. The owning class writes the
protected ``_<name>`` storage directly, or uses :func:`replace_component` for
read-only components so that the previous component is still released.

Example:
    >>> class Mesher(Object):
    ...     radius = Attribute(1.0)
    ...     surface = Aggregate()
    ...     locator = Component()
"""

import logging
from typing import Any, Callable, List, Optional, Type

logger = logging.getLogger(__name__)


def release(resource: Any) -> None:
    """
    Release an owned resource.

    Calls ``resource.close()`` if the resource has such a method. Other
    objects are left to the garbage collector.
    """
    if resource is None:
        return
    close = getattr(resource, "close", None)
    if callable(close):
        close()


class Attribute:
    """
    Value attribute with read and write access.

    Attributes:
        default: Value returned before the attribute is first assigned.
        factory: Optional callable creating a fresh default per instance.
                 Use it for mutable defaults such as lists or arrays.
        name: Public attribute name, set when the owner class is created.
        storage: Name of the protected instance attribute, ``_<name>``.
    """

    def __init__(
        self,
        default: Any = None,
        *,
        factory: Optional[Callable[[], Any]] = None,
        doc: Optional[str] = None,
    ) -> None:
        if default is not None and factory is not None:
            raise TypeError("Specify either a default value or a factory, not both")
        self.default = default
        self.factory = factory
        self.name = ""
        self.storage = ""
        if doc is not None:
            self.__doc__ = doc

    def __set_name__(self, owner: Type[Any], name: str) -> None:
        self.name = name
        self.storage = "_" + name

    def __get__(self, obj: Any, objtype: Optional[Type[Any]] = None) -> Any:
        if obj is None:
            return self
        try:
            return getattr(obj, self.storage)
        except AttributeError:
            value = self.factory() if self.factory is not None else self.default
            setattr(obj, self.storage, value)
            return value

    def __set__(self, obj: Any, value: Any) -> None:
        setattr(obj, self.storage, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class ReadOnlyAttribute(Attribute):
    """Value attribute that only the owning class can modify."""

    def __set__(self, obj: Any, value: Any) -> None:
        raise AttributeError(
            f"attribute '{self.name}' of '{type(obj).__name__}' object is read-only"
        )


class Switch(Attribute):
    """
    Boolean attribute with ``<name>_on()`` and ``<name>_off()`` methods.

    The methods are added to the owner class unless it already defines them.
    """

    def __init__(self, default: bool = False, *, doc: Optional[str] = None) -> None:
        super().__init__(bool(default), doc=doc)

    def __set_name__(self, owner: Type[Any], name: str) -> None:
        super().__set_name__(owner, name)

        def on(obj: Any) -> None:
            setattr(obj, name, True)

        def off(obj: Any) -> None:
            setattr(obj, name, False)

        for suffix, method in (("_on", on), ("_off", off)):
            method.__name__ = name + suffix
            method.__qualname__ = f"{owner.__qualname__}.{name}{suffix}"
            if method.__name__ not in owner.__dict__:
                setattr(owner, method.__name__, method)

    def __set__(self, obj: Any, value: Any) -> None:
        setattr(obj, self.storage, bool(value))


class Aggregate(Attribute):
    """
    Non-owning reference to an object managed elsewhere.

    Replacing the reference never releases the previous referent.
    """

    def __init__(self, *, doc: Optional[str] = None) -> None:
        super().__init__(None, doc=doc)


class ReadOnlyAggregate(Aggregate):
    """Non-owning reference that only the owning class can replace."""

    def __set__(self, obj: Any, value: Any) -> None:
        raise AttributeError(
            f"attribute '{self.name}' of '{type(obj).__name__}' object is read-only"
        )


class Component(Attribute):
    """
    Exclusively owned object.

    Assigning a new object releases the previously owned one first (see
    :func:`release`). Assigning the object that is already owned does
    nothing.
    """

    def __init__(self, *, doc: Optional[str] = None) -> None:
        super().__init__(None, doc=doc)

    def __set__(self, obj: Any, value: Any) -> None:
        self.install(obj, value)

    def install(self, obj: Any, value: Any) -> None:
        """Release the current component of ``obj`` and take ownership of ``value``."""
        current = getattr(obj, self.storage, None)
        if current is value:
            return
        if current is not None:
            logger.debug(
                "%s: releasing component '%s' (%s)",
                type(obj).__name__, self.name, type(current).__name__,
            )
            # A released object is never left installed, also if close() raises
            setattr(obj, self.storage, None)
            release(current)
        setattr(obj, self.storage, value)

    def release_from(self, obj: Any) -> None:
        """Release the component of ``obj``, leaving the attribute set to None."""
        self.install(obj, None)


class ReadOnlyComponent(Component):
    """Exclusively owned object that only the owning class can replace."""

    def __set__(self, obj: Any, value: Any) -> None:
        raise AttributeError(
            f"attribute '{self.name}' of '{type(obj).__name__}' object is read-only"
        )


def owned_components(cls: Type[Any]) -> List[Component]:
    """
    Get the component attributes declared by a class and its bases.

    Attributes redefined in a subclass are only listed once, subclass first.
    """
    seen = set()
    components: List[Component] = []
    for klass in cls.__mro__:
        for name, attr in vars(klass).items():
            if name in seen:
                continue
            seen.add(name)
            if isinstance(attr, Component):
                components.append(attr)
    return components


def replace_component(obj: Any, name: str, value: Any) -> None:
    """
    Replace a component of ``obj``, also if it is declared read-only.

    Intended for use by the owning class itself.

    Raises:
        AttributeError: If ``name`` is not a component of ``type(obj)``.
    """
    for component in owned_components(type(obj)):
        if component.name == name:
            component.install(obj, value)
            return
    raise AttributeError(f"'{type(obj).__name__}' object has no component '{name}'")
