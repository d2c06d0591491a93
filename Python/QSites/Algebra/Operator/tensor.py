"""
On-site operator tensors.

An :class:`OperatorTensor` is the artifact returned by ``op``: a square matrix
acting on one site index ``s`` and carrying the index pair ``(s', dag(s))``. The
matrix may be a dense NumPy array or a SciPy sparse matrix. An operator without
storage is *empty*; populate-style handlers receive such an empty operator and
fill it.

The resolution engine never looks inside an operator. Everything it needs (an
empty operator for an index, the emptiness predicate, and the ordered product) is
provided by an :class:`OperatorAlgebra`, which callers may replace.

----------------------------------------
File        : QSites/Algebra/Operator/tensor.py
Author      : Maksymilian Kliczkowski
Email       : maxgrom97@gmail.com
Date        : 2025-11-12
----------------------------------------
"""

from __future__ import annotations

from typing import Any, Optional, Tuple, Union

import numpy as np
import scipy.sparse as sp

from QSites.Algebra.Hilbert.site_index import SiteIndex

MatrixLike = Union[np.ndarray, sp.spmatrix, sp.sparray, list]

# ----------------------------------------------------------------------------------------
#! Operator tensor
# ----------------------------------------------------------------------------------------


class OperatorTensor:
    r"""
    Matrix representation of an on-site operator :math:`O_{s' s}`.

    Parameters
    ----------
    index : SiteIndex
        The (unprimed) site index the operator acts on.
    data : array-like or sparse matrix, optional
        ``dim x dim`` matrix. ``None`` creates an empty operator.
    """

    __slots__ = ("_index", "_data")

    def __init__(self, index: SiteIndex, data: Optional[MatrixLike] = None):
        self._index = index
        self._data  = None
        if data is not None:
            self.fill(data)

    # ------------------------------------------------------------------

    @property
    def index(self) -> SiteIndex:
        return self._index

    @property
    def inds(self) -> Tuple[SiteIndex, SiteIndex]:
        """The index pair ``(s', dag(s))``."""
        return (self._index.prime(), self._index.dag())

    @property
    def data(self):
        return self._data

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._index.dim, self._index.dim)

    @property
    def dtype(self):
        return None if self._data is None else self._data.dtype

    def isempty(self) -> bool:
        return self._data is None

    def issparse(self) -> bool:
        return self._data is not None and sp.issparse(self._data)

    def fill(self, data: MatrixLike) -> "OperatorTensor":
        """
        Set the storage of the operator in place and return it.
        """
        if not sp.issparse(data):
            data = np.asarray(data)
        if data.shape != self.shape:
            raise ValueError(f"Operator matrix of shape {data.shape} does not match index {self._index} (expected {self.shape}).")
        self._data = data
        return self

    def matrix(self) -> np.ndarray:
        """
        Dense copy of the operator matrix.
        """
        if self._data is None:
            raise ValueError("Empty operator has no matrix.")
        if sp.issparse(self._data):
            return self._data.toarray()
        return np.array(self._data)

    # ------------------------------------------------------------------

    def __matmul__(self, other: "OperatorTensor") -> "OperatorTensor":
        return product(self, other)

    def __array__(self, dtype=None, copy=None):
        out = self.matrix()
        return out if dtype is None else out.astype(dtype)

    def __repr__(self) -> str:
        if self._data is None:
            return f"OperatorTensor({self._index!r}, empty)"
        kind = "sparse" if sp.issparse(self._data) else "dense"
        return f"OperatorTensor({self._index!r}, {kind}, dtype={self._data.dtype})"


def operator_from_matrix(index: SiteIndex, data: MatrixLike, dtype: Any = None) -> OperatorTensor:
    """
    Build an operator on ``index`` from a matrix, optionally casting to ``dtype``.
    """
    if dtype is not None:
        data = data.astype(dtype) if sp.issparse(data) else np.asarray(data, dtype=dtype)
    return OperatorTensor(index, data)


def product(a: OperatorTensor, b: OperatorTensor) -> OperatorTensor:
    r"""
    Ordered operator product :math:`A B` (matrix multiplication order: ``b`` acts first).
    """
    if a.isempty() or b.isempty():
        raise ValueError("Cannot multiply empty operators.")
    if a.index.dim != b.index.dim:
        raise ValueError(f"Operators act on different spaces: {a.index} and {b.index}.")
    out = a.data @ b.data
    return OperatorTensor(a.index, out)


# ----------------------------------------------------------------------------------------
#! Operator algebra (collaborator used by the resolution engine)
# ----------------------------------------------------------------------------------------


class OperatorAlgebra:
    """
    The three artifact operations ``op`` relies on.

    Subclass to plug in a different artifact type or product; the default works
    on :class:`OperatorTensor`.
    """

    def empty(self, index: SiteIndex) -> Any:
        """An operator of the right shape for ``index`` with no storage."""
        return OperatorTensor(index)

    def is_empty(self, artifact: Any) -> bool:
        if artifact is None:
            return True
        isempty = getattr(artifact, "isempty", None)
        return bool(isempty()) if callable(isempty) else False

    def product(self, left: Any, right: Any) -> Any:
        """Ordered product: ``left`` applied after ``right``."""
        return product(left, right)


DEFAULT_ALGEBRA = OperatorAlgebra()

# ----------------------------------------------------------------------------------------

__all__ = [
    "OperatorTensor",
    "OperatorAlgebra",
    "DEFAULT_ALGEBRA",
    "operator_from_matrix",
    "product",
]

# ----------------------------------------------------------------------------------------
#! End of file
# ----------------------------------------------------------------------------------------
