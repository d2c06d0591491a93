"""
Site index factories (``siteind`` / ``siteinds``).

A site index is built from a tag whose ``space`` handler provides the dimension, or
directly from an integer dimension for generic, untagged sites:

>>> s  = siteind("S=1/2")               # dim 2, tags "Site,S=1/2"
>>> s3 = siteind("S=1/2", 3)            # dim 2, tags "Site,S=1/2,n=3"
>>> g  = siteind(4, 2)                  # dim 4, tags "Site,n=2"
>>> sites = siteinds("S=1", 10)         # ten spin-1 sites, n=1..10
>>> mixed = siteinds(lambda n: "S=1/2" if n % 2 else "S=1", 4)

A tag may also register a *bulk* generator (``siteinds`` handler) producing all
indices of a system at once, for example to couple neighbouring sites. It takes
precedence over the per-site construction.

------------------------------------------------------------------
File        : QSites/Algebra/Hilbert/siteinds.py
Author      : Maksymilian Kliczkowski
Date        : 2025-11-13
------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Union

import numpy as np

from QSites.Algebra.Hilbert.site_index import SiteIndex
from QSites.Algebra.SiteType.catalog import HandlerKind, SiteTypeCatalog
from QSites.Algebra.SiteType.errors import ResolutionNotFound
from QSites.Algebra.SiteType.tags import SiteTag, TagsLike, parse_tags

SITE_TAG = SiteTag("Site")

####################################################################################################
#! Helpers
####################################################################################################


def _get_catalog(catalog: Optional[SiteTypeCatalog]) -> SiteTypeCatalog:
    if catalog is None:
        from QSites.qsites_globals import get_site_catalog
        return get_site_catalog()
    return catalog


def _is_dim(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)


def position_tag(n: int) -> SiteTag:
    """Tag marking the position of a site within a system, ``"n=<n>"``."""
    return SiteTag(f"n={n}")


def space(tag: Union[str, SiteTag], *, catalog: Optional[SiteTypeCatalog] = None, **kwargs) -> int:
    """
    Dimension of the local space described by ``tag``.

    Raises
    ------
    ResolutionNotFound
        If ``tag`` has no ``space`` handler.
    """
    catalog = _get_catalog(catalog)
    tag     = SiteTag(str(tag).strip())
    handler = catalog.lookup(HandlerKind.SPACE, tag)
    if handler is None:
        raise ResolutionNotFound.for_space(tag)
    return int(handler(tag, **kwargs))


####################################################################################################
#! siteind
####################################################################################################


def siteind(tag_or_dim  : Union[str, SiteTag, int],
            n           : Optional[int]             = None,
            *,
            addtags     : TagsLike                  = "",
            catalog     : Optional[SiteTypeCatalog] = None,
            **kwargs) -> SiteIndex:
    """
    Create a single site index.

    Parameters
    ----------
    tag_or_dim : str or int
        Site tag whose ``space`` handler gives the dimension, or the dimension itself.
        An integer dimension bypasses the catalog entirely.
    n : int, optional
        Site position; adds the tag ``"n=<n>"``.
    addtags : str or iterable of str, optional
        Extra tags appended after ``"Site"`` and the site tag.
    catalog : SiteTypeCatalog, optional
        Handler catalog to query; defaults to the global one.
    **kwargs
        Forwarded to the ``space`` handler.

    Returns
    -------
    SiteIndex
        Tags ``("Site", tag, *addtags[, "n=<n>"])``, or ``("Site", *addtags[, "n=<n>"])``
        for an integer dimension.
    """
    if _is_dim(tag_or_dim):
        if tag_or_dim < 1:
            raise ValueError(f"Site dimension must be positive, got {tag_or_dim}.")
        dim     = int(tag_or_dim)
        tags    = (SITE_TAG,) + parse_tags(addtags)
    elif isinstance(tag_or_dim, str):
        tag     = SiteTag(tag_or_dim.strip())
        dim     = space(tag, catalog=catalog, **kwargs)
        tags    = (SITE_TAG, tag) + parse_tags(addtags)
    else:
        raise TypeError(f"siteind expects a tag or an integer dimension, got {type(tag_or_dim)!r}.")

    if n is not None:
        tags = tags + (position_tag(n),)
    return SiteIndex.create(dim, tags)


####################################################################################################
#! siteinds
####################################################################################################


def siteinds(spec       : Union[str, SiteTag, int, Callable[[int], Any]],
            count       : int,
            *,
            catalog     : Optional[SiteTypeCatalog] = None,
            **kwargs) -> List[SiteIndex]:
    """
    Create the site indices of a system of ``count`` sites.

    Parameters
    ----------
    spec : str, int or callable
        - tag: use the tag's bulk ``siteinds`` generator if it provides one, otherwise
          ``siteind(tag, n)`` for ``n = 1..count``;
        - int: ``count`` generic indices of that dimension;
        - callable ``f(n)``: ``siteind(f(n), n)`` for each position, allowing a
          different tag (or dimension) per site.
    count : int
        Number of sites.
    catalog : SiteTypeCatalog, optional
        Handler catalog to query; defaults to the global one.
    **kwargs
        Forwarded to the bulk generator or to ``siteind``.
    """
    if not _is_dim(count):
        raise TypeError(f"Number of sites must be an integer, got {type(count)!r}.")
    count = int(count)
    if count < 0:
        raise ValueError(f"Number of sites must be non-negative, got {count}.")

    if _is_dim(spec):
        return [siteind(spec, n, **kwargs) for n in range(1, count + 1)]

    if isinstance(spec, str):
        catalog = _get_catalog(catalog)
        tag     = SiteTag(spec.strip())
        bulk    = catalog.lookup(HandlerKind.SITEINDS, tag)
        if bulk is not None:
            sites = bulk(tag, count, **kwargs)
            if sites is not None:
                from QSites.qsites_globals import get_logger
                get_logger().debug(f"siteinds: '{tag}' x {count} built by bulk generator")
                return list(sites)
        return [siteind(tag, n, catalog=catalog, **kwargs) for n in range(1, count + 1)]

    if callable(spec):
        return [siteind(spec(n), n, catalog=catalog, **kwargs) for n in range(1, count + 1)]

    raise TypeError(f"siteinds expects a tag, an integer dimension or a callable, got {type(spec)!r}.")


####################################################################################################

__all__ = ["siteind", "siteinds", "space", "position_tag", "SITE_TAG"]

####################################################################################################
#! EOF
####################################################################################################
