"""Per-invocation dependency container keyed by :class:`Capability`.

Contents:
    * :class:`Container` - explicit registry with ordered binding and freeze.
    * :func:`capability_for` - derive a capability from a value's type.
    * :func:`build_container` - bind token, logger and options in order.

System Role:
    The driver builds one container after parsing; dispatch reads the
    capabilities a runner declares. Lookups go through a static type table,
    never through reflection on runner signatures.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType
from typing import Any

from ..domain.cancellation import CancellationToken
from ..domain.enums import Capability
from ..domain.errors import ConfigurationError, MissingCapabilityError
from ..domain.options import Options

#: Types whose capability can be derived without an explicit ``as_``.
_DERIVABLE: tuple[tuple[type[Any], Capability], ...] = (
    (CancellationToken, Capability.CANCELLATION),
    (logging.Logger, Capability.LOGGER),
    (logging.LoggerAdapter, Capability.LOGGER),
    (Options, Capability.OPTIONS),
)

#: Capabilities every runner may rely on.
CORE_CAPABILITIES: frozenset[Capability] = frozenset(Capability)


def capability_for(value: object) -> Capability:
    """Return the capability a value provides based on its type.

    Raises:
        ConfigurationError: If the type is not in the derivation table.

    Example:
        >>> capability_for(Options())
        <Capability.OPTIONS: 'options'>
        >>> capability_for(logging.getLogger("x"))
        <Capability.LOGGER: 'logger'>
    """
    for kind, capability in _DERIVABLE:
        if isinstance(value, kind):
            return capability
    raise ConfigurationError(f"Cannot derive a capability for {type(value).__name__}; bind it with as_=")


class Container:
    """Registry mapping capabilities to values for one invocation.

    Bindings are either *derived* from the value's type or *explicit*,
    naming the capability the value satisfies. Resolution prefers the
    explicit binding. Capabilities must be bound in :class:`Capability`
    order so later values may be built from earlier ones.

    Example:
        >>> container = Container()
        >>> token = CancellationToken()
        >>> container.bind(token)
        <Capability.CANCELLATION: 'token'>
        >>> container.resolve(Capability.CANCELLATION) is token
        True
        >>> container.bind(Options())
        Traceback (most recent call last):
        ...
        progshell.domain.errors.ConfigurationError: Cannot bind options before logger
    """

    __slots__ = ("_derived", "_explicit", "_frozen")

    def __init__(self) -> None:
        self._derived: dict[Capability, object] = {}
        self._explicit: dict[Capability, object] = {}
        self._frozen = False

    def bind(self, value: object, *, as_: Capability | None = None) -> Capability:
        """Bind ``value`` and return the capability it was bound under.

        Args:
            value: Dependency to register.
            as_: Capability the value satisfies. ``None`` derives it from the
                value's type.

        Raises:
            ConfigurationError: If the container is frozen, the capability
                cannot be derived, its predecessors are unbound, or the
                same kind of binding already exists.
        """
        if self._frozen:
            raise ConfigurationError("Container is frozen; bindings are read-only after construction")
        capability = as_ if as_ is not None else capability_for(value)
        missing = [cap for cap in Capability if cap.order < capability.order and cap not in self]
        if missing:
            raise ConfigurationError(f"Cannot bind {capability.value} before {missing[0].value}")
        target = self._explicit if as_ is not None else self._derived
        if capability in target:
            raise ConfigurationError(f"Capability {capability.value} is already bound")
        target[capability] = value
        return capability

    def resolve(self, capability: Capability) -> Any:
        """Return the most specific binding for ``capability``.

        Raises:
            MissingCapabilityError: If nothing is bound.
        """
        if capability in self._explicit:
            return self._explicit[capability]
        if capability in self._derived:
            return self._derived[capability]
        raise MissingCapabilityError([capability])

    def require(self, capabilities: Iterable[Capability]) -> None:
        """Fail fast unless every capability in ``capabilities`` resolves."""
        missing = [cap for cap in capabilities if cap not in self]
        if missing:
            raise MissingCapabilityError(missing)

    def freeze(self) -> Container:
        """Make the container read-only and return it."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def snapshot(self) -> MappingProxyType[Capability, object]:
        """Read-only view of the resolved bindings."""
        return MappingProxyType({cap: self.resolve(cap) for cap in self})

    def __contains__(self, capability: object) -> bool:
        return capability in self._explicit or capability in self._derived

    def __iter__(self) -> Iterator[Capability]:
        return (cap for cap in Capability if cap in self)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        bound = ", ".join(cap.value for cap in self)
        return f"Container([{bound}], frozen={self._frozen})"


def build_container(
    *,
    token: CancellationToken,
    logger: logging.Logger | logging.LoggerAdapter[Any],
    options: Options,
) -> Container:
    """Bind the core capabilities in order and freeze the container.

    Example:
        >>> container = build_container(
        ...     token=CancellationToken(), logger=logging.getLogger("doc"), options=Options()
        ... )
        >>> list(container) == list(Capability), container.frozen
        (True, True)
    """
    container = Container()
    container.bind(token, as_=Capability.CANCELLATION)
    container.bind(logger, as_=Capability.LOGGER)
    container.bind(options)
    container.require(CORE_CAPABILITIES)
    return container.freeze()


__all__ = [
    "CORE_CAPABILITIES",
    "Container",
    "build_container",
    "capability_for",
]
