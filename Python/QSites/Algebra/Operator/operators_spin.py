"""
file        : Algebra/Operator/operators_spin.py

This module registers the spin-1/2 site type ``"S=1/2"``: its local dimension, its
named basis states and its on-site operators (spin components, ladder operators,
Pauli matrices and projectors) as pure handlers of the site-type catalog.

Basis ordering: ``|Up>`` is state 1, ``|Dn>`` is state 2 (eigenbasis of Sz).

Author      : Maksymilian Kliczkowski, WUST, Poland
Date        : November 2025
Version     : 1.0
"""

from typing import Callable, Dict

import numpy as np

try:
    from QSites.Algebra.Operator.tensor import operator_from_matrix
    from QSites.Algebra.SiteType.catalog import register_op, register_space, register_state
except ImportError as e:
    raise ImportError("Failed to import required modules. Ensure that the QSites package is correctly installed.") from e

SPIN_HALF_TAG = "S=1/2"

#! Standard Pauli matrices
################################################################################

# Define the Pauli matrices for reference
_SIG_0 = np.array([[1, 0],
                [0, 1]], dtype=float)
_SIG_X = np.array([[0, 1],
                [1, 0]], dtype=float)
_SIG_Y = np.array([[0, -1j],
                [1j, 0]], dtype=complex)
_SIG_Z = np.array([[1,  0],
                [0, -1]], dtype=float)
_SIG_P = np.array([[0, 1],
                [0, 0]], dtype=float)
_SIG_M = np.array([[0, 0],
                [1, 0]], dtype=float)

# -----------------------------------------------------------------------------
#! Spin-1/2 operator matrices (S = sigma / 2)
# -----------------------------------------------------------------------------

_MATRICES: Dict[str, np.ndarray] = {
    "Id"        : _SIG_0,
    "Sz"        : 0.5 * _SIG_Z,
    "S+"        : _SIG_P,
    "S-"        : _SIG_M,
    "Sx"        : 0.5 * _SIG_X,
    # i S_y is real
    "iSy"       : 0.5 * np.array([[0, 1], [-1, 0]], dtype=float),
    "Sy"        : 0.5 * _SIG_Y,
    "X"         : _SIG_X,
    "Y"         : _SIG_Y,
    "Z"         : _SIG_Z,
    "ProjUp"    : np.array([[1, 0], [0, 0]], dtype=float),
    "ProjDn"    : np.array([[0, 0], [0, 1]], dtype=float),
}

_ALIASES: Dict[str, str] = {
    "Sp"        : "S+",
    "Sm"        : "S-",
    "projUp"    : "ProjUp",
    "projDn"    : "ProjDn",
}

_STATES: Dict[str, int] = {
    "Up"        : 1,
    "Z+"        : 1,
    "Dn"        : 2,
    "Z-"        : 2,
}

# -----------------------------------------------------------------------------
#! Handlers
# -----------------------------------------------------------------------------


def spin_half_matrix(name: str) -> np.ndarray:
    """
    Matrix of the spin-1/2 operator ``name`` in the (Up, Dn) basis.
    """
    key = _ALIASES.get(name, name)
    try:
        return _MATRICES[key]
    except KeyError as exc:
        raise KeyError(f"Unknown spin-1/2 operator '{name}'.") from exc


def _make_handler(name: str) -> Callable:
    mat = spin_half_matrix(name)

    def _handler(tag, opname, s, dtype=None, **kwargs):
        if s.dim != 2:
            return None
        if dtype is None:
            from QSites.qsites_globals import get_config
            cfg     = get_config()
            dtype   = cfg.complex_dtype if np.iscomplexobj(mat) else cfg.dtype
        elif np.iscomplexobj(mat):
            # a real dtype would drop the imaginary part, promote instead
            dtype   = np.result_type(dtype, np.complex64)
        return operator_from_matrix(s, mat, dtype=dtype)

    _handler.__name__ = f"spin_half_{name}"
    return _handler


# -----------------------------------------------------------------------------
#! Register the catalog entries upon module import
# -----------------------------------------------------------------------------


def _register_catalog_entries():
    register_space(SPIN_HALF_TAG, 2, description="Spin-1/2 local space")
    for name in (*_MATRICES, *_ALIASES):
        register_op(SPIN_HALF_TAG, name, description="Spin-1/2 operator")(_make_handler(name))
    for name, position in _STATES.items():
        register_state(SPIN_HALF_TAG, name, position, description="Spin-1/2 basis state")


_register_catalog_entries()

# -----------------------------------------------------------------------------
#! EOF
# -----------------------------------------------------------------------------
