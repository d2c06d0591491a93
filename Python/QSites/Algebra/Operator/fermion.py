"""
Fermion-string classifier.

``has_fermion_string(s, opname)`` tells whether the operator ``opname`` on the site
index ``s`` anticommutes with operators on other sites, i.e. whether a Jordan-Wigner
string must accompany it when it is placed in a many-site product.

Most operators are bosonic, so an operator that no tag classifies is reported as
``False``. Two tags classifying the same operator is an error.

------------------------------------------------------------------
File        : QSites/Algebra/Operator/fermion.py
Author      : Maksymilian Kliczkowski
Date        : 2025-11-13
------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Optional

from QSites.Algebra.Hilbert.site_index import SiteIndex
from QSites.Algebra.SiteType.catalog import HandlerKind, SiteTypeCatalog
from QSites.Algebra.SiteType.errors import AmbiguousResolution

####################################################################################################


def has_fermion_string(s         : SiteIndex,
                    opname      : str,
                    *,
                    catalog     : Optional[SiteTypeCatalog] = None,
                    **kwargs) -> bool:
    """
    Whether the operator ``opname`` acting on ``s`` carries a fermion string.

    Parameters
    ----------
    s : SiteIndex
        Site index whose tags are scanned.
    opname : str
        Operator name (surrounding whitespace is ignored).
    catalog : SiteTypeCatalog, optional
        Handler catalog to query; defaults to the global one.
    **kwargs
        Forwarded to the handler.

    Raises
    ------
    AmbiguousResolution
        If more than one tag of ``s`` classifies ``opname``.
    """
    if catalog is None:
        from QSites.qsites_globals import get_site_catalog
        catalog = get_site_catalog()

    opname  = opname.strip()
    found   = catalog.matching(HandlerKind.FERMION_STRING, s.tags, opname)
    if len(found) == 0:
        return False
    if len(found) > 1:
        raise AmbiguousResolution(opname, s.tags, [tag for tag, _ in found], surface="has_fermion_string")

    tag, handler = found[0]
    return bool(handler(tag, s, opname, **kwargs))


####################################################################################################

__all__ = ["has_fermion_string"]

####################################################################################################
#! EOF
####################################################################################################
