"""
Site-type handler catalog
=========================

This module centralises the registration of the handlers that give a site tag its
meaning. Extension modules register callables with the global ``SITE_CATALOG``
under a ``(kind, tag, name)`` key; the resolution engines (``op``, ``state``,
``has_fermion_string``, ``siteind``/``siteinds``) only *query* it.

A handler may be bound to a single name (e.g. the ``"Sz"`` operator of the
``"S=1/2"`` tag) or to a whole tag (``name=None``). Tag-wide handlers answer for
every name and return ``None`` for names they do not know.

The catalog is append-only: a key can be bound once and is never removed. Writes
are serialised with a lock; lookups are plain dictionary reads, so resolution can
run concurrently once registration is done.

Typical usage
-------------

>>> from QSites.Algebra.SiteType.catalog import register_op, register_space
>>> register_space("MyTag", 2)
>>> @register_op("MyTag", "Flip")
... def _flip(tag, opname, index, **kwargs):
...     return operator_from_matrix(index, [[0, 1], [1, 0]])

----------------------------------------------------
File        : QSites/Algebra/SiteType/catalog.py
Description : Handler catalog keyed by (kind, tag, name)
Author      : Maksymilian Kliczkowski
Date        : 2025-11-12
----------------------------------------------------
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Union

from .errors import DuplicateRegistration
from .tags import OperatorName, SiteTag

# ---------------------------------------------------------------------------
#! Data containers
# ---------------------------------------------------------------------------


class HandlerKind(Enum):
    """
    Operations a site tag can provide a handler for.
    """

    OP              = "op"              # (tag, opname, index, **kw)            -> artifact | None
    OP_POPULATE     = "op!"             # (buffer, tag, opname, index, **kw)    -> artifact | None
    OP_LEGACY       = "op-legacy"       # (tag, index, name, **kw)              -> artifact | None
    STATE           = "state"           # (tag, name)                           -> position | None
    FERMION_STRING  = "has_fermion_string"  # (tag, index, name, **kw)          -> bool
    SPACE           = "space"           # (tag, **kw)                           -> dimension
    SITEINDS        = "siteinds"        # (tag, count, **kw)                    -> sequence | None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HandlerSpec:
    """
    Declarative description of a registered handler.

    Attributes
    ----------
    kind:
        Operation the handler implements.
    tag:
        Site tag the handler belongs to.
    name:
        Operator/state name the handler answers for, or ``None`` for a tag-wide handler.
    handler:
        The callable itself.
    description:
        Optional short human readable explanation.
    """

    kind: HandlerKind
    tag: SiteTag
    name: Optional[OperatorName]
    handler: Callable[..., Any]
    description: str = ""

    @property
    def key(self) -> Tuple[HandlerKind, SiteTag, Optional[OperatorName]]:
        return (self.kind, self.tag, self.name)

    def summary(self) -> str:
        name = "*" if self.name is None else str(self.name)
        desc = f" - {self.description}" if self.description else ""
        return f"{self.kind}[{self.tag}:{name}]{desc}"


# ---------------------------------------------------------------------------
#! Catalog implementation
# ---------------------------------------------------------------------------


class SiteTypeCatalog:
    """
    Registry of the handlers attached to site tags.

    Handlers are grouped by :class:`HandlerKind` and then keyed by ``(tag, name)``.
    ``name=None`` stands for a tag-wide handler. Registration order is preserved.
    """

    def __init__(self, logger: Any = None) -> None:
        self._registry: Dict[HandlerKind, Dict[Tuple[SiteTag, Optional[OperatorName]], HandlerSpec]] = {
            kind: {} for kind in HandlerKind
        }
        self._lock      = threading.Lock()
        self._logger    = logger

    # -----------------------------
    #! Utilities
    # -----------------------------

    @staticmethod
    def _normalise_key(tag: Any, name: Any) -> Tuple[SiteTag, Optional[OperatorName]]:
        """
        Convert a tag and an optional name into the interned registry key.
        """
        tag = SiteTag(str(tag).strip())
        if name is None:
            return tag, None
        return tag, OperatorName(str(name).strip())

    def _log_debug(self, msg: str) -> None:
        logger = self._logger
        if logger is None:
            from QSites.qsites_globals import get_logger
            logger = get_logger()
        logger.debug(msg)

    # -----------------------------
    #! Registration API
    # -----------------------------

    def register(self,
                kind        : HandlerKind,
                tag         : Union[str, SiteTag],
                handler     : Callable[..., Any],
                *,
                name        : Optional[str] = None,
                description : str           = "") -> HandlerSpec:
        """
        Register a handler.

        Parameters
        ----------
        kind:
            Operation implemented by ``handler``.
        tag:
            Site tag the handler belongs to.
        handler:
            The callable; its signature depends on ``kind`` (see :class:`HandlerKind`).
        name:
            Operator/state name the handler answers for. ``None`` registers a tag-wide handler.
        description:
            Optional short explanation, used by :meth:`describe`.

        Raises
        ------
        DuplicateRegistration
            If ``(kind, tag, name)`` is already bound.
        """
        if not isinstance(kind, HandlerKind):
            kind = HandlerKind(kind)
        if not callable(handler):
            raise TypeError(f"Handler for {kind} on tag {tag!r} must be callable, got {type(handler)!r}.")

        key     = self._normalise_key(tag, name)
        spec    = HandlerSpec(kind=kind, tag=key[0], name=key[1], handler=handler, description=description)
        with self._lock:
            bucket = self._registry[kind]
            if key in bucket:
                raise DuplicateRegistration(spec.key)
            bucket[key] = spec
        self._log_debug(f"Registered {spec.summary()}")
        return spec

    # -----------------------------
    #! Query helpers
    # -----------------------------

    def lookup_spec(self, kind: HandlerKind, tag: Any, name: Optional[str] = None) -> Optional[HandlerSpec]:
        """
        Find the spec answering ``(kind, tag, name)``: the exact name first, then the
        tag-wide handler. Does not invoke anything.
        """
        bucket  = self._registry[kind]
        key     = self._normalise_key(tag, name)
        spec    = bucket.get(key)
        if spec is None and key[1] is not None:
            spec = bucket.get((key[0], None))
        return spec

    def lookup(self, kind: HandlerKind, tag: Any, name: Optional[str] = None) -> Optional[Callable[..., Any]]:
        """
        Return the handler answering ``(kind, tag, name)`` or ``None``.
        """
        spec = self.lookup_spec(kind, tag, name)
        return None if spec is None else spec.handler

    def candidates(self, kind: HandlerKind, tag: Any, name: Optional[str] = None) -> Tuple[Callable[..., Any], ...]:
        """
        Handlers that may answer ``(kind, tag, name)``, in the order they should be
        tried: the exact name, then the tag-wide handler.
        """
        bucket  = self._registry[kind]
        key     = self._normalise_key(tag, name)
        keys    = (key,) if key[1] is None else (key, (key[0], None))
        return tuple(bucket[k].handler for k in keys if k in bucket)

    def has_handler(self, kind: HandlerKind, tag: Any, name: Optional[str] = None) -> bool:
        return self.lookup_spec(kind, tag, name) is not None

    def matching(self, kind: HandlerKind, tags: Iterable[Any], name: Optional[str] = None) -> Tuple[Tuple[SiteTag, Callable[..., Any]], ...]:
        """
        Scan ``tags`` once, in order, and return ``(tag, handler)`` for every tag that
        has a handler for ``(kind, name)``. Used where several matches must be detected.
        """
        out = []
        for tag in tags:
            handler = self.lookup(kind, tag, name)
            if handler is not None:
                out.append((SiteTag(tag), handler))
        return tuple(out)

    def specs(self, kind: Optional[HandlerKind] = None) -> Tuple[HandlerSpec, ...]:
        """
        All registered specs, optionally restricted to one kind, in registration order.
        """
        if kind is not None:
            return tuple(self._registry[kind].values())
        return tuple(spec for k in HandlerKind for spec in self._registry[k].values())

    def tags_for(self, kind: HandlerKind) -> Tuple[SiteTag, ...]:
        """
        Tags having at least one handler of ``kind``, in first-registration order.
        """
        return tuple(dict.fromkeys(tag for tag, _ in self._registry[kind].keys()))

    def names_for(self, kind: HandlerKind, tag: Any) -> Tuple[OperatorName, ...]:
        """
        Names explicitly registered for ``(kind, tag)``. Tag-wide handlers are not listed.
        """
        tag = SiteTag(str(tag).strip())
        return tuple(n for t, n in self._registry[kind].keys() if t == tag and n is not None)

    def describe(self, kind: HandlerKind, tag: Any, name: Optional[str] = None) -> str:
        spec = self.lookup_spec(kind, tag, name)
        if spec is None:
            raise KeyError(f"No {kind} handler registered for tag {str(tag)!r} and name {name!r}.")
        return spec.summary()

    def __len__(self) -> int:
        return sum(len(b) for b in self._registry.values())

    def __contains__(self, key: Tuple[Any, ...]) -> bool:
        kind, tag, *rest = key
        return self.has_handler(kind, tag, rest[0] if rest else None)

    def __repr__(self) -> str:
        counts = ", ".join(f"{k}={len(b)}" for k, b in self._registry.items() if b)
        return f"SiteTypeCatalog({counts})"


# ---------------------------------------------------------------------------
#! Global catalog instance
# ---------------------------------------------------------------------------

SITE_CATALOG = SiteTypeCatalog()

# ---------------------------------------------------------------------------
#! Registration helpers
# ---------------------------------------------------------------------------


def _catalog(catalog: Optional[SiteTypeCatalog]) -> SiteTypeCatalog:
    return SITE_CATALOG if catalog is None else catalog


def _constant(value: Any) -> Callable[..., Any]:
    def _handler(*args, **kwargs):
        return value
    return _handler


def register_op(tag: str, *names: str, description: str = "", catalog: Optional[SiteTypeCatalog] = None):
    """
    Decorator registering a pure operator handler for one or more names.

    The decorated callable has the shape ``(tag, opname, index, **kwargs)`` and returns
    the operator or ``None``. Without ``names`` the handler is tag-wide.

    >>> @register_op("S=1/2", "S+", "Sp")
    ... def _splus(tag, opname, index, **kwargs): ...
    """
    def _decorator(fn):
        cat = _catalog(catalog)
        for name in (names or (None,)):
            cat.register(HandlerKind.OP, tag, fn, name=name, description=description)
        return fn
    return _decorator


def register_op_populate(tag: str, *names: str, description: str = "", catalog: Optional[SiteTypeCatalog] = None):
    """
    Decorator registering a populate handler ``(buffer, tag, opname, index, **kwargs)``.

    The handler receives an empty operator allocated for ``index``; it fills it and
    returns it, or returns ``None`` when it does not provide ``opname``.
    """
    def _decorator(fn):
        cat = _catalog(catalog)
        for name in (names or (None,)):
            cat.register(HandlerKind.OP_POPULATE, tag, fn, name=name, description=description)
        return fn
    return _decorator


def register_op_legacy(tag: str, handler: Optional[Callable[..., Any]] = None, *,
                    description: str = "", catalog: Optional[SiteTypeCatalog] = None):
    """
    Register an older-style tag-wide handler ``(tag, index, name, **kwargs)`` that
    dispatches on the raw operator name itself. Usable as a decorator.
    """
    def _decorator(fn):
        _catalog(catalog).register(HandlerKind.OP_LEGACY, tag, fn, description=description)
        return fn
    if handler is None:
        return _decorator
    return _decorator(handler)


def register_state(tag: str, name: Optional[str], position: Union[int, Callable[..., Any]], *,
                description: str = "", catalog: Optional[SiteTypeCatalog] = None) -> HandlerSpec:
    """
    Register a basis-state handler.

    Parameters
    ----------
    tag:
        Site tag.
    name:
        State name (``"Up"``). ``None`` registers a tag-wide handler, in which case
        ``position`` must be a callable ``(tag, name) -> position | None``.
    position:
        1-based position of the state within the index, or a callable returning it.
    """
    if callable(position):
        handler = position
    elif name is None:
        raise TypeError("A tag-wide state handler must be callable.")
    else:
        handler = _constant(int(position))
    return _catalog(catalog).register(HandlerKind.STATE, tag, handler, name=name, description=description)


def register_fermion_string(tag: str, name: Optional[str] = None, value: Union[bool, Callable[..., Any]] = True, *,
                            description: str = "", catalog: Optional[SiteTypeCatalog] = None) -> HandlerSpec:
    """
    Register whether an operator carries a Jordan-Wigner (fermion) string.

    ``value`` is either a constant boolean or a callable ``(tag, index, name, **kwargs) -> bool``.
    """
    handler = value if callable(value) else _constant(bool(value))
    return _catalog(catalog).register(HandlerKind.FERMION_STRING, tag, handler, name=name, description=description)


def register_space(tag: str, dim: Union[int, Callable[..., int]], *,
                description: str = "", catalog: Optional[SiteTypeCatalog] = None) -> HandlerSpec:
    """
    Register the dimension provider of a tag: a constant or a callable ``(tag, **kwargs) -> int``.
    """
    handler = dim if callable(dim) else _constant(int(dim))
    return _catalog(catalog).register(HandlerKind.SPACE, tag, handler, description=description)


def register_siteinds(tag: str, handler: Optional[Callable[..., Any]] = None, *,
                    description: str = "", catalog: Optional[SiteTypeCatalog] = None):
    """
    Register a bulk generator ``(tag, count, **kwargs) -> sequence | None`` that builds
    all site indices of a system at once. Usable as a decorator.
    """
    def _decorator(fn):
        _catalog(catalog).register(HandlerKind.SITEINDS, tag, fn, description=description)
        return fn
    if handler is None:
        return _decorator
    return _decorator(handler)


# ---------------------------------------------------------------------------

__all__ = [
    "HandlerKind",
    "HandlerSpec",
    "SiteTypeCatalog",
    "SITE_CATALOG",
    "register_op",
    "register_op_populate",
    "register_op_legacy",
    "register_state",
    "register_fermion_string",
    "register_space",
    "register_siteinds",
]

# ---------------------------------------------------------------------------
#! End of file
# ---------------------------------------------------------------------------
