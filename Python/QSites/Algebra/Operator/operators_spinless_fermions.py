r"""
Spinless Fermion Site Type
==========================

This module registers the ``"Fermion"`` site type: a single spinless fermionic mode
with occupation :math:`n \in \{0, 1\}`.

Basis
-----
State 1 is the empty mode ``|Emp>`` (alias ``"0"``), state 2 the occupied mode
``|Occ>`` (alias ``"1"``).

Operators
---------
- ``N``             : occupation number :math:`n = c^\dagger c`
- ``C``, ``Cdag``   : annihilation / creation :math:`c`, :math:`c^\dagger`
- ``A``, ``Adag``   : the same matrices without the fermionic character
                      (hard-core bosons)
- ``F``             : local Jordan-Wigner factor :math:`(-1)^n`
- ``Id``            : identity

Jordan-Wigner String
--------------------
Because fermions anticommute, :math:`c_i` and :math:`c_i^\dagger` must be
accompanied by the string :math:`\prod_{j<i} F_j` when placed in a many-site
product. The classifier ``has_fermion_string`` reports ``True`` for ``C`` and
``Cdag`` and ``False`` for every other operator of this site type.

--------------------------------------------------------------
File        : QSites/Algebra/Operator/operators_spinless_fermions.py
Author      : Maksymilian Kliczkowski
Date        : November 2025
--------------------------------------------------------------
"""

from typing import Dict

import numpy as np

from QSites.Algebra.Operator.tensor import operator_from_matrix
from QSites.Algebra.SiteType.catalog import (
    register_fermion_string,
    register_op,
    register_space,
    register_state,
)

FERMION_TAG = "Fermion"

# -----------------------------------------------------------------------------
#! Matrices
# -----------------------------------------------------------------------------

_C      = np.array([[0.0, 1.0],
                    [0.0, 0.0]])
_CDAG   = _C.T.copy()

_MATRICES: Dict[str, np.ndarray] = {
    "Id"    : np.eye(2),
    "N"     : np.diag([0.0, 1.0]),
    "C"     : _C,
    "Cdag"  : _CDAG,
    "A"     : _C,
    "Adag"  : _CDAG,
    "F"     : np.diag([1.0, -1.0]),
}

_FERMIONIC = frozenset({"C", "Cdag"})

_STATES: Dict[str, int] = {
    "Emp"   : 1,
    "0"     : 1,
    "Occ"   : 2,
    "1"     : 2,
}

# -----------------------------------------------------------------------------
#! Handlers
# -----------------------------------------------------------------------------


def _fermion_op(tag, opname, s, dtype=None, **kwargs):
    mat = _MATRICES.get(str(opname))
    if mat is None or s.dim != 2:
        return None
    if dtype is None:
        from QSites.qsites_globals import get_config
        dtype = get_config().dtype
    return operator_from_matrix(s, mat, dtype=dtype)


def _fermion_string(tag, s, opname, **kwargs) -> bool:
    return opname in _FERMIONIC


def _register_catalog_entries():
    register_space(FERMION_TAG, 2, description="Spinless fermionic mode")
    register_op(FERMION_TAG, *_MATRICES, description="Spinless fermion operator")(_fermion_op)
    register_fermion_string(FERMION_TAG, None, _fermion_string,
                            description="C and Cdag carry a Jordan-Wigner string")
    for name, position in _STATES.items():
        register_state(FERMION_TAG, name, position, description="Occupation basis state")


# -----------------------------------------------------------------------------
#! Register the catalog entries upon module import
# -----------------------------------------------------------------------------

_register_catalog_entries()

# -----------------------------------------------------------------------------
#! EOF
# -----------------------------------------------------------------------------
