"""
Errors raised by the site-type resolution system.

All of them derive from :class:`SiteTypeError`. They describe authoring or
configuration mistakes (a missing or doubly defined handler, a malformed operator
expression) and are never retried.

----------------------------------------------------
File        : QSites/Algebra/SiteType/errors.py
Author      : Maksymilian Kliczkowski
Date        : 2025-11-12
----------------------------------------------------
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple

#########################################################################
#! Errors
#########################################################################


class SiteTypeError(Exception):
    """
    Base class for the errors of the site-type system.
    """


def _fmt_tags(tags: Iterable[Any]) -> str:
    return '"' + ",".join(str(t) for t in tags) + '"'


class ResolutionNotFound(SiteTypeError, LookupError):
    """
    No registered handler matched the request across all tags of the index
    (and, for operators, across all handler conventions).
    """

    OP_NOT_FOUND        = 'No "op" handler (pure, populate or legacy) found for operator name "{name}" and Index tags {tags}'
    STATE_NOT_FOUND     = 'No "state" handler found for state name "{name}" and Index tags {tags}'
    STATE_NO_POSITION   = 'The "state" handler of tag "{tag}" returned no position for state name "{name}"'
    STATE_OUT_OF_RANGE  = 'The "state" handler of tag "{tag}" returned position {position} for state name "{name}", outside 1..{dim}'
    SPACE_NOT_FOUND     = 'No "space", "siteind" or "siteinds" handler found for Index tag "{name}"'

    def __init__(self, message: str, *, name: str = "", tags: Iterable[Any] = (), surface: str = ""):
        super().__init__(message)
        self.name       = name
        self.tags       = tuple(tags)
        self.surface    = surface

    @classmethod
    def for_op(cls, name: str, tags: Iterable[Any]) -> "ResolutionNotFound":
        tags = tuple(tags)
        return cls(cls.OP_NOT_FOUND.format(name=name, tags=_fmt_tags(tags)), name=name, tags=tags, surface="op")

    @classmethod
    def for_state(cls, name: str, tags: Iterable[Any], tag: Optional[str] = None,
                position: Optional[int] = None, dim: Optional[int] = None) -> "ResolutionNotFound":
        tags = tuple(tags)
        if tag is None:
            msg = cls.STATE_NOT_FOUND.format(name=name, tags=_fmt_tags(tags))
        elif position is not None:
            msg = cls.STATE_OUT_OF_RANGE.format(name=name, tag=tag, position=position, dim=dim)
        else:
            msg = cls.STATE_NO_POSITION.format(name=name, tag=tag)
        return cls(msg, name=name, tags=tags, surface="state")

    @classmethod
    def for_space(cls, tag: str) -> "ResolutionNotFound":
        return cls(cls.SPACE_NOT_FOUND.format(name=tag), name=str(tag), tags=(tag,), surface="space")


class AmbiguousResolution(SiteTypeError, LookupError):
    """
    More than one tag of an index claims the same request. Raised by ``state``
    and ``has_fermion_string``; ``op`` always takes the first matching tag.
    """

    MULTIPLE_TAGS = 'Multiple tags from {tags} overload the function "{surface}" (matching tags: {matching})'

    def __init__(self, name: str, tags: Iterable[Any], matching: Iterable[Any], surface: str):
        self.name       = name
        self.tags       = tuple(tags)
        self.matching   = tuple(matching)
        self.surface    = surface
        super().__init__(
            self.MULTIPLE_TAGS.format(tags=_fmt_tags(self.tags), surface=surface, matching=_fmt_tags(self.matching))
        )


class MalformedOperatorExpression(SiteTypeError, ValueError):
    """
    A composite operator expression has an empty operand (``"*Sz"``, ``"Sz*"``,
    ``"Sz**Id"``) or is empty altogether.
    """

    EMPTY_OPERAND       = 'Operator expression "{expression}" has an empty operand around "*"'
    EMPTY_EXPRESSION    = "Operator expression is empty"

    def __init__(self, expression: str):
        self.expression = expression
        if expression.strip():
            msg = self.EMPTY_OPERAND.format(expression=expression)
        else:
            msg = self.EMPTY_EXPRESSION
        super().__init__(msg)


class DuplicateRegistration(SiteTypeError, ValueError):
    """
    The handler catalog is append-only: a ``(kind, tag, name)`` key can be bound once.
    """

    ALREADY_REGISTERED = "Handler {kind} already registered for tag {tag!r} and name {name!r}."

    def __init__(self, key: Tuple[Any, ...]):
        self.key        = key
        kind, tag, name = key
        super().__init__(self.ALREADY_REGISTERED.format(kind=kind, tag=str(tag), name=name))


# ---------------------------------------------------------------------------

__all__ = [
    "SiteTypeError",
    "ResolutionNotFound",
    "AmbiguousResolution",
    "MalformedOperatorExpression",
    "DuplicateRegistration",
]

# ---------------------------------------------------------------------------
#! End of file
# ---------------------------------------------------------------------------
