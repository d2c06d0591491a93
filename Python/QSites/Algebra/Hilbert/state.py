"""
Named basis states (``state``).

``state(s, "Up")`` returns the basis state called ``"Up"`` of the site index ``s`` as
an :class:`~QSites.Algebra.Hilbert.site_index.IndexVal`. The name is resolved by the
``state`` handler of exactly one tag of ``s``: if no tag defines it the lookup fails,
and if several do it is reported as ambiguous instead of silently picking one.

------------------------------------------------------------------
File        : QSites/Algebra/Hilbert/state.py
Author      : Maksymilian Kliczkowski
Date        : 2025-11-13
------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from QSites.Algebra.Hilbert.site_index import IndexVal, SiteIndex
from QSites.Algebra.SiteType.catalog import HandlerKind, SiteTypeCatalog
from QSites.Algebra.SiteType.errors import AmbiguousResolution, ResolutionNotFound

####################################################################################################


def _state_by_name(s: SiteIndex, name: str, catalog: SiteTypeCatalog) -> IndexVal:
    found = catalog.matching(HandlerKind.STATE, s.tags, name)
    if len(found) == 0:
        raise ResolutionNotFound.for_state(name, s.tags)
    if len(found) > 1:
        raise AmbiguousResolution(name, s.tags, [tag for tag, _ in found], surface="state")

    tag, handler    = found[0]
    position        = handler(tag, name)
    if position is None:
        raise ResolutionNotFound.for_state(name, s.tags, tag=tag)
    # tag-wide handlers (e.g. occupation numbers) do not know the dimension
    if not 1 <= position <= s.dim:
        raise ResolutionNotFound.for_state(name, s.tags, tag=tag, position=position, dim=s.dim)

    from QSites.qsites_globals import get_logger
    get_logger().debug(f"state: '{name}' resolved by tag '{tag}' -> {position}")
    return s[position]


def state(s         : Union[SiteIndex, Sequence[SiteIndex]],
        name        : Union[str, int],
        j           : Any                           = None,
        *,
        catalog     : Optional[SiteTypeCatalog]     = None) -> IndexVal:
    """
    Return a basis state of a site index.

    Call forms
    ----------
    ``state(s, "Up")``
        Resolve the named state through the tags of ``s``.
    ``state(s, 2)``
        The second basis state of ``s`` (positions are 1-based); no resolution.
    ``state(sites, j, "Up")`` / ``state(sites, j, 2)``
        The same for the ``j``-th index (1-based) of a sequence of indices.

    Raises
    ------
    ResolutionNotFound
        No tag of the index has a ``state`` handler for ``name``, or the single
        matching handler returned no position or one outside the index.
    AmbiguousResolution
        More than one tag has a ``state`` handler for ``name``.
    """
    if not isinstance(s, SiteIndex):
        if isinstance(s, (str, bytes)) or not isinstance(s, Sequence):
            raise TypeError(f"Expected a SiteIndex or a sequence of SiteIndex, got {type(s)!r}.")
        position, name = name, j
        if isinstance(position, bool) or not isinstance(position, int):
            raise TypeError(f"Site position must be an integer, got {type(position)!r}.")
        if not 1 <= position <= len(s):
            raise IndexError(f"Site position {position} out of range 1..{len(s)}.")
        s = s[position - 1]
    elif j is not None:
        raise TypeError("state(s, name) takes no third argument for a single index.")

    if name is None:
        raise TypeError("A state name or position is required.")
    if isinstance(name, str):
        if catalog is None:
            from QSites.qsites_globals import get_site_catalog
            catalog = get_site_catalog()
        return _state_by_name(s, name, catalog)
    return s[name]


####################################################################################################

__all__ = ["state"]

####################################################################################################
#! EOF
####################################################################################################
