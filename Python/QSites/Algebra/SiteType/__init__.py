"""
QSites SiteType Module
======================

Tag identity, the process-wide handler catalog and the errors of the resolution
engines.

File    : QSites/Algebra/SiteType/__init__.py
Author  : Maksymilian Kliczkowski
Email   : maksymilian.kliczkowski@pwr.edu.pl
"""

MODULE_DESCRIPTION = "Interned site tags and operator names, handler catalog, resolution errors."

from .tags import GENERIC_TAG, OperatorName, SiteTag, SiteType, TagType, parse_tags
from .errors import (
    AmbiguousResolution,
    DuplicateRegistration,
    MalformedOperatorExpression,
    ResolutionNotFound,
    SiteTypeError,
)
from .catalog import (
    SITE_CATALOG,
    HandlerKind,
    HandlerSpec,
    SiteTypeCatalog,
    register_fermion_string,
    register_op,
    register_op_legacy,
    register_op_populate,
    register_siteinds,
    register_space,
    register_state,
)

__all__ = [
    'SiteTag',
    'OperatorName',
    'SiteType',
    'TagType',
    'GENERIC_TAG',
    'parse_tags',
    'SiteTypeError',
    'ResolutionNotFound',
    'AmbiguousResolution',
    'MalformedOperatorExpression',
    'DuplicateRegistration',
    'SITE_CATALOG',
    'HandlerKind',
    'HandlerSpec',
    'SiteTypeCatalog',
    'register_op',
    'register_op_populate',
    'register_op_legacy',
    'register_state',
    'register_fermion_string',
    'register_space',
    'register_siteinds',
]

# ----------------------------------------------------------------------------
#! EOF
# ----------------------------------------------------------------------------
