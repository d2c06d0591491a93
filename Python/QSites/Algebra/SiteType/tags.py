"""
Tag identity
============

Interned, immutable labels used as dispatch keys by the site-type system.

- :class:`SiteTag`      : a label attached to a site index (e.g. ``"S=1/2"``, ``"Site"``).
- :class:`OperatorName` : the name of a single atomic operator (e.g. ``"Sz"``, ``"S+"``).

Both are ``str`` subclasses. Constructing one from equal strings always yields the
*same* object, so they can be compared by value or by identity and used directly
as dictionary keys. A composite operator expression such as ``"S+*S-"`` is a plain
``str`` and is only turned into :class:`OperatorName` objects after it has been
split into its atomic parts.

----------------------------------------------------
File        : QSites/Algebra/SiteType/tags.py
Description : Interned tag and operator-name identifiers
Author      : Maksymilian Kliczkowski
Date        : 2025-11-12
----------------------------------------------------
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, Tuple, Union

# ---------------------------------------------------------------------------
#! Interned labels
# ---------------------------------------------------------------------------

_INTERN_LOCK = threading.Lock()


class _InternedLabel(str):
    """
    Base class for interned string labels. Each subclass keeps its own table.
    """

    __slots__ = ()
    _interned: Dict[str, "_InternedLabel"]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls._interned = {}

    def __new__(cls, value: Union[str, "_InternedLabel"] = ""):
        if type(value) is cls:
            return value
        key = str(value)
        try:
            return cls._interned[key]
        except KeyError:
            pass
        with _INTERN_LOCK:
            label = cls._interned.get(key)
            if label is None:
                label = super().__new__(cls, key)
                cls._interned[key] = label
        return label

    # interned labels are never copied
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (self.__class__, (str(self),))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str.__repr__(self)})"


class SiteTag(_InternedLabel):
    """
    Label attached to a site index and used as the dispatch key of the handler catalog.

    >>> SiteTag("S=1/2") is SiteTag("S=1/2")
    True
    >>> SiteTag("S=1/2") == "S=1/2"
    True
    """

    __slots__ = ()

    @property
    def tag(self) -> "SiteTag":
        return self


class OperatorName(_InternedLabel):
    """
    Name of a single atomic operator (no ``*`` products).
    """

    __slots__ = ()

    @property
    def name(self) -> str:
        return str(self)


# Type-level name of a tag when it is used as a dispatch key
SiteType = SiteTag
# Kept for older registrations
TagType = SiteTag

#: placeholder tag used when an index carries no tags at all
GENERIC_TAG = SiteTag("")

# ---------------------------------------------------------------------------
#! Tag sets
# ---------------------------------------------------------------------------

TagsLike = Union[str, SiteTag, Iterable[Union[str, SiteTag]], None]


def parse_tags(tags: TagsLike) -> Tuple[SiteTag, ...]:
    """
    Normalise a tag specification into an ordered tuple of unique :class:`SiteTag`.

    Parameters
    ----------
    tags:
        Either a comma separated string (``"Site,S=1/2,n=1"``), a single tag, an
        iterable of tags/strings, or ``None``. Whitespace around each entry is
        stripped, empty entries are dropped and duplicates keep their first position.

    Returns
    -------
    tuple of SiteTag
        Tags in the order they were given.
    """
    if tags is None:
        return ()
    if isinstance(tags, str):
        parts = tags.split(",")
    else:
        parts = []
        for t in tags:
            parts.extend(str(t).split(","))

    out     = []
    seen    = set()
    for part in parts:
        part = part.strip()
        if not part or part in seen:
            continue
        seen.add(part)
        out.append(SiteTag(part))
    return tuple(out)


def tags_to_str(tags: Iterable[str]) -> str:
    """Render tags the way they are written: comma separated, in order."""
    return ",".join(str(t) for t in tags)


# ---------------------------------------------------------------------------

__all__ = [
    "SiteTag",
    "OperatorName",
    "SiteType",
    "TagType",
    "GENERIC_TAG",
    "TagsLike",
    "parse_tags",
    "tags_to_str",
]

# ---------------------------------------------------------------------------
#! End of file
# ---------------------------------------------------------------------------
