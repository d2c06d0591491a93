r"""
file        : Algebra/Operator/operators_bosons.py

Bosonic site types ``"Boson"`` and ``"Qudit"``: a mode truncated to ``dim`` levels
(occupations :math:`0, \ldots, d-1`, basis state :math:`k+1` is occupation :math:`k`).

.. math::

    a |k\rangle = \sqrt{k}\,|k-1\rangle, \qquad
    a^\dagger |k\rangle = \sqrt{k+1}\,|k+1\rangle, \qquad
    n = a^\dagger a.

The operators are registered with a single tag-wide (legacy-style) handler that
dispatches on the operator name and builds banded ``scipy.sparse`` matrices, so
large cutoffs stay cheap. The dimension is taken from the ``dim`` keyword of
``siteind``/``siteinds`` (default 2).

Author      : Maksymilian Kliczkowski, WUST, Poland
Date        : November 2025
"""

from typing import Callable, Dict, Optional

import numpy as np
import scipy.sparse as sp

from QSites.Algebra.Operator.tensor import operator_from_matrix
from QSites.Algebra.SiteType.catalog import register_op_legacy, register_space, register_state

BOSON_TAGS      = ("Boson", "Qudit")
DEFAULT_DIM     = 2

# -----------------------------------------------------------------------------
#! Sparse ladder matrices
# -----------------------------------------------------------------------------


def annihilation(dim: int) -> sp.csr_matrix:
    return sp.diags(np.sqrt(np.arange(1, dim, dtype=float)), offsets=1, shape=(dim, dim), format="csr")


def creation(dim: int) -> sp.csr_matrix:
    return sp.diags(np.sqrt(np.arange(1, dim, dtype=float)), offsets=-1, shape=(dim, dim), format="csr")


def number(dim: int) -> sp.csr_matrix:
    return sp.diags(np.arange(dim, dtype=float), offsets=0, shape=(dim, dim), format="csr")


def identity(dim: int) -> sp.csr_matrix:
    return sp.identity(dim, format="csr")


_BUILDERS: Dict[str, Callable[[int], sp.csr_matrix]] = {
    "Id"    : identity,
    "N"     : number,
    "n"     : number,
    "A"     : annihilation,
    "a"     : annihilation,
    "Adag"  : creation,
    "adag"  : creation,
}

# -----------------------------------------------------------------------------
#! Handlers
# -----------------------------------------------------------------------------


def _boson_space(tag, dim: int = DEFAULT_DIM, **kwargs) -> int:
    if dim < 1:
        raise ValueError(f"Boson dimension must be positive, got {dim}.")
    return dim


def _boson_op(tag, s, name: str, dtype=None, **kwargs):
    builder = _BUILDERS.get(name)
    if builder is None:
        return None
    if dtype is None:
        from QSites.qsites_globals import get_config
        dtype = get_config().dtype
    return operator_from_matrix(s, builder(s.dim), dtype=dtype)


def _boson_state(tag, name: str) -> Optional[int]:
    # occupation number written in decimal
    name = name.strip()
    if not name.isdecimal():
        return None
    return int(name) + 1


def _register_catalog_entries():
    for tag in BOSON_TAGS:
        register_space(tag, _boson_space, description="Truncated bosonic mode (dim keyword)")
        register_op_legacy(tag, _boson_op, description="Bosonic ladder and number operators")
        register_state(tag, None, _boson_state, description="Occupation number basis state")


# -----------------------------------------------------------------------------
#! Register the catalog entries upon module import
# -----------------------------------------------------------------------------

_register_catalog_entries()

# -----------------------------------------------------------------------------
#! EOF
# -----------------------------------------------------------------------------
