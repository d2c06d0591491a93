r"""
file        : Algebra/Operator/operators_spin_1.py

Spin-1 site type ``"S=1"``.

The local space is three dimensional with basis ordered by the magnetisation
:math:`m = +1, 0, -1` (states ``"Up"``, ``"Z0"``, ``"Dn"``). The operators are
registered as *populate* handlers: each receives an empty operator allocated for
the index and fills it.

.. math::

    S^z = \mathrm{diag}(1, 0, -1), \qquad
    S^+ |m\rangle = \sqrt{2}\,|m+1\rangle, \qquad
    S^x = \tfrac{1}{2}(S^+ + S^-), \qquad
    S^y = \tfrac{1}{2i}(S^+ - S^-).

Author      : Maksymilian Kliczkowski, WUST, Poland
Date        : November 2025
"""

from typing import Dict

import numpy as np

from QSites.Algebra.SiteType.catalog import register_op_populate, register_space, register_state

SPIN_ONE_TAG = "S=1"

# -----------------------------------------------------------------------------
#! Operator matrices
# -----------------------------------------------------------------------------

_SQ2    = np.sqrt(2.0)
_SZ     = np.diag([1.0, 0.0, -1.0])
_SP     = np.array([[0.0, _SQ2, 0.0],
                    [0.0, 0.0, _SQ2],
                    [0.0, 0.0, 0.0]])
_SM     = _SP.T.copy()
_SX     = 0.5 * (_SP + _SM)
_ISY    = 0.5 * (_SP - _SM)
_SY     = -1j * _ISY

_MATRICES: Dict[str, np.ndarray] = {
    "Id"    : np.eye(3),
    "Sz"    : _SZ,
    "S+"    : _SP,
    "S-"    : _SM,
    "Sx"    : _SX,
    "iSy"   : _ISY,
    "Sy"    : _SY,
    "Sz2"   : _SZ @ _SZ,
    "Sx2"   : _SX @ _SX,
    # (S^y)^2 is real
    "Sy2"   : np.real(_SY @ _SY),
}

_ALIASES: Dict[str, str] = {
    "Sp"    : "S+",
    "Sm"    : "S-",
}

_STATES: Dict[str, int] = {
    "Up"    : 1,
    "Z+"    : 1,
    "0"     : 2,
    "Z0"    : 2,
    "Dn"    : 3,
    "Z-"    : 3,
}

# -----------------------------------------------------------------------------
#! Populate handler
# -----------------------------------------------------------------------------


def _populate(buffer, tag, opname, s, dtype=None, **kwargs):
    """
    Fill ``buffer`` with the spin-1 operator ``opname``; ``None`` if unknown.
    """
    key = _ALIASES.get(str(opname), str(opname))
    mat = _MATRICES.get(key)
    if mat is None or s.dim != 3:
        return None
    if dtype is None:
        from QSites.qsites_globals import get_config
        cfg     = get_config()
        dtype   = cfg.complex_dtype if np.iscomplexobj(mat) else cfg.dtype
    elif np.iscomplexobj(mat):
        dtype   = np.result_type(dtype, np.complex64)
    return buffer.fill(np.asarray(mat, dtype=dtype))


def _register_catalog_entries():
    register_space(SPIN_ONE_TAG, 3, description="Spin-1 local space")
    register_op_populate(SPIN_ONE_TAG, *_MATRICES, *_ALIASES, description="Spin-1 operator")(_populate)
    for name, position in _STATES.items():
        register_state(SPIN_ONE_TAG, name, position, description="Spin-1 basis state")


# -----------------------------------------------------------------------------
#! Register the catalog entries upon module import
# -----------------------------------------------------------------------------

_register_catalog_entries()

# -----------------------------------------------------------------------------
#! EOF
# -----------------------------------------------------------------------------
