"""
Operator resolution (``op``).

``op(name, s)`` returns the operator called ``name`` for the site index ``s``. The
operator is not stored anywhere: it is produced by a handler registered in the
site-type catalog for one of the tags of ``s``.

Operator names can be combined with ``*``, e.g. ``"S+*S-"`` or ``"Sz*Sz*Sz"``. The
result is the ordered product of the parts (usual operator product / matrix
multiplication), folded from the left.

Resolution of an atomic name
----------------------------
The tags of ``s`` are scanned in order (an untagged index is treated as carrying the
single generic tag ``""``, so tag-independent operators such as ``"Id"`` still
resolve). For each tag three handler conventions are tried:

1. pure handler     ``(tag, opname, s, **kwargs)``          -> operator | None
2. populate handler ``(buffer, tag, opname, s, **kwargs)``  -> operator | None
   (``buffer`` is a fresh empty operator for ``s``)
3. legacy handler   ``(tag, s, name, **kwargs)``            -> operator | None

The first non-``None`` result is returned. Unlike ``state``, several tags defining
the same operator is not an error: the leftmost wins.

Example
-------
>>> s  = siteind("S=1/2")
>>> Sz = op("Sz", s)
>>> SpSm = op("S+*S-", s)

------------------------------------------------------------------
File        : QSites/Algebra/Operator/op.py
Author      : Maksymilian Kliczkowski
Date        : 2025-11-13
------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from QSites.Algebra.Hilbert.site_index import SiteIndex
from QSites.Algebra.Operator.tensor import DEFAULT_ALGEBRA, OperatorAlgebra
from QSites.Algebra.SiteType.catalog import HandlerKind, SiteTypeCatalog
from QSites.Algebra.SiteType.errors import MalformedOperatorExpression, ResolutionNotFound
from QSites.Algebra.SiteType.tags import GENERIC_TAG, OperatorName, SiteTag

####################################################################################################
#! Expression parsing
####################################################################################################

PRODUCT_SEPARATOR = "*"


def split_expression(expression: str) -> List[str]:
    """
    Split a composite operator expression into its atomic names.

    The expression is cut repeatedly at its first ``*``; every part is stripped.

    >>> split_expression(" S+ * S- ")
    ['S+', 'S-']

    Raises
    ------
    MalformedOperatorExpression
        If the expression or any operand is empty (``"*Sz"``, ``"Sz*"``, ``"Sz**Id"``).
    """
    rest    = expression.strip()
    if not rest:
        raise MalformedOperatorExpression(expression)

    names   = []
    while True:
        head, sep, tail = rest.partition(PRODUCT_SEPARATOR)
        head            = head.strip()
        if not head:
            raise MalformedOperatorExpression(expression)
        names.append(head)
        if not sep:
            return names
        rest            = tail


####################################################################################################
#! Resolution
####################################################################################################


def _resolution_tags(s: SiteIndex) -> Tuple[SiteTag, ...]:
    # fall back to the generic tag so tag-independent operators still resolve
    return tuple(s.tags) if len(s.tags) > 0 else (GENERIC_TAG,)


def _resolve_atomic(name      : str,
                    s         : SiteIndex,
                    catalog   : SiteTypeCatalog,
                    algebra   : OperatorAlgebra,
                    logger    : Any,
                    kwargs    : dict) -> Any:
    """
    Resolve a single operator name against the tags of ``s``.
    """
    opname  = OperatorName(name)
    stags   = _resolution_tags(s)

    # within one convention an exact-name handler is tried before the tag-wide one
    for tag in stags:
        # 1. pure handler
        for handler in catalog.candidates(HandlerKind.OP, tag, opname):
            res = handler(tag, opname, s, **kwargs)
            if res is not None:
                logger.debug(f"op: '{opname}' resolved by pure handler of tag '{tag}'")
                return res

        # 2. populate handler, fresh buffer per attempt
        for handler in catalog.candidates(HandlerKind.OP_POPULATE, tag, opname):
            buffer  = algebra.empty(s)
            res     = handler(buffer, tag, opname, s, **kwargs)
            if res is not None and not algebra.is_empty(res):
                logger.debug(f"op: '{opname}' resolved by populate handler of tag '{tag}'")
                return res

        # 3. legacy handler taking the raw name
        for handler in catalog.candidates(HandlerKind.OP_LEGACY, tag, opname):
            res = handler(tag, s, str(opname), **kwargs)
            if res is not None:
                logger.debug(f"op: '{opname}' resolved by legacy handler of tag '{tag}'")
                return res

    raise ResolutionNotFound.for_op(str(opname), s.tags)


def op(opname   : Any,
        s       : Any,
        n       : Optional[int]                 = None,
        *,
        catalog : Optional[SiteTypeCatalog]     = None,
        algebra : Optional[OperatorAlgebra]     = None,
        **kwargs) -> Any:
    """
    Return the operator named ``opname`` for the site index ``s``.

    Parameters
    ----------
    opname : str
        Operator name, or a product of names joined by ``*``.
    s : SiteIndex or sequence of SiteIndex
        The site index. For backwards compatibility ``op(s, opname)`` is accepted too.
        If a sequence is given, ``n`` selects its ``n``-th entry (1-based).
    n : int, optional
        Site position within ``s`` when ``s`` is a sequence.
    catalog : SiteTypeCatalog, optional
        Handler catalog to query; defaults to the global one.
    algebra : OperatorAlgebra, optional
        Provides empty operators and the ordered product.
    **kwargs
        Forwarded to every handler.

    Returns
    -------
    The artifact returned by the matching handler (or the product of several).

    Raises
    ------
    ResolutionNotFound
        If no tag of ``s`` provides the operator through any convention.
    MalformedOperatorExpression
        If ``opname`` is empty or has an empty operand around ``*``.
    """
    if isinstance(opname, SiteIndex) and isinstance(s, str):
        opname, s = s, opname
    elif isinstance(s, str) and _is_index_sequence(opname):
        opname, s = s, opname

    if not isinstance(s, SiteIndex):
        s = _pick_site(s, n)
    elif n is not None:
        raise TypeError("Site position 'n' is only meaningful with a sequence of indices.")

    if not isinstance(opname, str):
        raise TypeError(f"Operator name must be a string, got {type(opname)!r}.")

    if catalog is None:
        from QSites.qsites_globals import get_site_catalog
        catalog = get_site_catalog()
    if algebra is None:
        algebra = DEFAULT_ALGEBRA

    from QSites.qsites_globals import get_logger
    logger  = get_logger()

    names   = split_expression(opname)
    if len(names) > 1:
        logger.debug(f"op: product expression '{opname.strip()}' -> {names}")

    result  = _resolve_atomic(names[0], s, catalog, algebra, logger, kwargs)
    for name in names[1:]:
        result = algebra.product(result, _resolve_atomic(name, s, catalog, algebra, logger, kwargs))
    return result


def _is_index_sequence(obj: Any) -> bool:
    return isinstance(obj, (list, tuple)) and all(isinstance(x, SiteIndex) for x in obj)


def _pick_site(sites: Sequence[SiteIndex], n: Optional[int]) -> SiteIndex:
    if not _is_index_sequence(sites):
        raise TypeError(f"Expected a SiteIndex or a sequence of SiteIndex, got {type(sites)!r}.")
    if n is None:
        raise TypeError("A site position 'n' is required when passing a sequence of indices.")
    if not 1 <= n <= len(sites):
        raise IndexError(f"Site position {n} out of range 1..{len(sites)}.")
    return sites[n - 1]


####################################################################################################

__all__ = ["op", "split_expression", "PRODUCT_SEPARATOR"]

####################################################################################################
#! EOF
####################################################################################################
