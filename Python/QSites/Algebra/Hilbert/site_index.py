"""
Site indices.

This module defines the light-weight containers describing a single local Hilbert
space of a many-body system: :class:`SiteIndex` (dimension, ordered tags, prime
level, arrow direction and a random identity) and :class:`IndexVal` (one basis
state of an index).

The tags of an index drive the whole site-type system: ``op``, ``state`` and
``has_fermion_string`` scan them left-to-right to find the registered handlers.
Their order is therefore kept exactly as the caller gave it.

------------------------------------------------------------------
File        : QSites/Algebra/Hilbert/site_index.py
Author      : Maksymilian Kliczkowski
Date        : 2025-11-12
Description : Site index and basis-state handle containers.
------------------------------------------------------------------
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

import numpy as np

from QSites.Algebra.SiteType.tags import SiteTag, TagsLike, parse_tags, tags_to_str

####################################################################################################


def _new_id() -> int:
    from QSites.qsites_globals import get_numpy_rng
    return int(get_numpy_rng().integers(0, 2**63 - 1, dtype=np.int64))


# ------------------------------------------------------------------
#! SiteIndex container
# ------------------------------------------------------------------


@dataclass(frozen=True)
class SiteIndex:
    """
    A local Hilbert space labelled by an ordered set of tags.

    Two indices are equal only if they share the identity ``id`` together with the
    dimension, tags, prime level and arrow; freshly created indices always differ.
    Use :meth:`same_signature` to compare the space description alone.
    """

    dim: int
    tags: Tuple[SiteTag, ...] = ()
    plev: int = 0
    arrow: int = +1
    id: int = field(default_factory=_new_id)

    def __post_init__(self):
        if isinstance(self.dim, bool) or int(self.dim) != self.dim or self.dim < 1:
            raise ValueError(f"Index dimension must be a positive integer, got {self.dim!r}.")
        if self.arrow not in (+1, -1):
            raise ValueError(f"Index arrow must be +1 or -1, got {self.arrow!r}.")
        # accept any tag spec at construction, store interned tuple
        object.__setattr__(self, "dim", int(self.dim))
        object.__setattr__(self, "tags", parse_tags(self.tags))

    @classmethod
    def create(cls, dim: int, tags: TagsLike = None, plev: int = 0) -> "SiteIndex":
        return cls(dim=dim, tags=parse_tags(tags), plev=plev)

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    def hastags(self, tags: TagsLike) -> bool:
        return all(t in self.tags for t in parse_tags(tags))

    def addtags(self, tags: TagsLike) -> "SiteIndex":
        """Return a copy with ``tags`` appended (existing tags keep their place)."""
        return replace(self, tags=parse_tags(self.tags + parse_tags(tags)))

    def removetags(self, tags: TagsLike) -> "SiteIndex":
        drop = set(parse_tags(tags))
        return replace(self, tags=tuple(t for t in self.tags if t not in drop))

    def settags(self, tags: TagsLike) -> "SiteIndex":
        return replace(self, tags=parse_tags(tags))

    # ------------------------------------------------------------------
    # Prime / dagger
    # ------------------------------------------------------------------

    def prime(self, n: int = 1) -> "SiteIndex":
        if self.plev + n < 0:
            raise ValueError(f"Prime level cannot become negative (plev={self.plev}, n={n}).")
        return replace(self, plev=self.plev + n)

    def noprime(self) -> "SiteIndex":
        return replace(self, plev=0)

    def dag(self) -> "SiteIndex":
        return replace(self, arrow=-self.arrow)

    def same_signature(self, other: "SiteIndex") -> bool:
        """
        Compare dimension, tags and prime level, ignoring identity and arrow.
        """
        return self.dim == other.dim and self.tags == other.tags and self.plev == other.plev

    # ------------------------------------------------------------------
    # Basis states
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.dim

    def __getitem__(self, n: int) -> "IndexVal":
        return IndexVal(self, n)

    def __str__(self) -> str:
        primes = "'" * self.plev
        return f'(dim={self.dim}|id={self.id % 1000}|"{tags_to_str(self.tags)}"){primes}'

    def __repr__(self) -> str:
        return f"SiteIndex(dim={self.dim}, tags={tags_to_str(self.tags)!r}, plev={self.plev})"


# ------------------------------------------------------------------
#! IndexVal
# ------------------------------------------------------------------


@dataclass(frozen=True)
class IndexVal:
    """
    A basis state of a :class:`SiteIndex`, addressed by its 1-based position.
    """

    index: SiteIndex
    val: int

    def __post_init__(self):
        if isinstance(self.val, bool) or not isinstance(self.val, (int, np.integer)):
            raise TypeError(f"Basis state position must be an integer, got {type(self.val)!r}.")
        if not 1 <= self.val <= self.index.dim:
            raise IndexError(f"Basis state {self.val} out of range 1..{self.index.dim} for {self.index}.")
        object.__setattr__(self, "val", int(self.val))

    def vector(self, dtype: Optional[np.dtype] = None) -> np.ndarray:
        """
        One-hot column of the state in the index basis.
        """
        if dtype is None:
            from QSites.qsites_globals import get_config
            dtype = get_config().dtype
        out = np.zeros(self.index.dim, dtype=dtype)
        out[self.val - 1] = 1
        return out

    def __int__(self) -> int:
        return self.val

    def __str__(self) -> str:
        return f"{self.index}=>{self.val}"


#####################################################################################################

__all__ = ["SiteIndex", "IndexVal"]

#####################################################################################################
#! EOF
#####################################################################################################
