"""
QSites package initialization
=============================

QSites: tag-based site types for quantum many-body systems.

A site index carries an ordered set of string tags (``"Site,S=1/2,n=3"``). The tags
decide which registered handlers build its operators (``op``), name its basis states
(``state``), classify fermionic operators (``has_fermion_string``) and construct
indices of that kind (``siteind``/``siteinds``).

Usage
-----
    import QSites

    sites   = QSites.siteinds("S=1/2", 4)
    Sz      = QSites.op("Sz", sites[0])
    SpSm    = QSites.op("S+*S-", sites, 2)
    up      = QSites.state(sites[0], "Up")

    log     = QSites.get_logger()

----------------------------------------------------------
Author          : Maks Kliczkowski
Email           : maxgrom97@gmail.com
Date            : 12.11.2025
Description     : Tag-based capability resolution for site indices.
----------------------------------------------------------
"""

__version__         = "0.1.0"
__author__          = "Maksymilian Kliczkowski"
__email__           = "maksymilian.kliczkowski@pwr.edu.pl"
__license__         = "CC-BY-4.0"
__description__     = "QSites: tag-based site types, operators and basis states for quantum many-body systems"

__all__ = [
    # Resolution surfaces
    "op",
    "state",
    "has_fermion_string",
    "siteind",
    "siteinds",
    "space",
    # Types
    "SiteIndex",
    "IndexVal",
    "SiteTag",
    "OperatorName",
    "SiteType",
    "OperatorTensor",
    "OperatorAlgebra",
    # Catalog
    "SITE_CATALOG",
    "SiteTypeCatalog",
    "HandlerKind",
    "register_op",
    "register_op_populate",
    "register_op_legacy",
    "register_state",
    "register_fermion_string",
    "register_space",
    "register_siteinds",
    # Errors
    "SiteTypeError",
    "ResolutionNotFound",
    "AmbiguousResolution",
    "MalformedOperatorExpression",
    "DuplicateRegistration",
    # Session / config
    "QSitesConfig",
    "QSitesSession",
    "run",
    # Global accessor re-exports
    "get_logger",
    "get_config",
    "set_config",
    "get_site_catalog",
    "get_numpy_rng",
    "reseed_all",
    # Meta
    "__version__",
    "__author__",
    "__email__",
    "__license__",
    "__description__",
]

####################################################################################################

import importlib
from typing import Any, Dict

# Centralized globals (lazy singletons)
from .qsites_globals import (
    get_logger,
    get_config,
    set_config,
    get_site_catalog,
    get_numpy_rng,
    reseed_all,
)
from .qsites_config import QSitesConfig
from .session import QSitesSession, run

# ----------------------------------------------------------------------------
# Lazy access to subpackages and common objects (keeps `import QSites` light)
# ----------------------------------------------------------------------------

_SUBMODULES: Dict[str, str] = {
    'Algebra'                       : 'QSites.Algebra',
}

_API_EXPORTS: Dict[str, str] = {
    # Resolution surfaces
    'op'                            : 'QSites.Algebra.Operator.op',
    'has_fermion_string'            : 'QSites.Algebra.Operator.fermion',
    'state'                         : 'QSites.Algebra.Hilbert.state',
    'siteind'                       : 'QSites.Algebra.Hilbert.siteinds',
    'siteinds'                      : 'QSites.Algebra.Hilbert.siteinds',
    'space'                         : 'QSites.Algebra.Hilbert.siteinds',
    # Types
    'SiteIndex'                     : 'QSites.Algebra.Hilbert.site_index',
    'IndexVal'                      : 'QSites.Algebra.Hilbert.site_index',
    'SiteTag'                       : 'QSites.Algebra.SiteType.tags',
    'OperatorName'                  : 'QSites.Algebra.SiteType.tags',
    'SiteType'                      : 'QSites.Algebra.SiteType.tags',
    'OperatorTensor'                : 'QSites.Algebra.Operator.tensor',
    'OperatorAlgebra'               : 'QSites.Algebra.Operator.tensor',
    # Catalog
    'SITE_CATALOG'                  : 'QSites.Algebra.SiteType.catalog',
    'SiteTypeCatalog'               : 'QSites.Algebra.SiteType.catalog',
    'HandlerKind'                   : 'QSites.Algebra.SiteType.catalog',
    'register_op'                   : 'QSites.Algebra.SiteType.catalog',
    'register_op_populate'          : 'QSites.Algebra.SiteType.catalog',
    'register_op_legacy'            : 'QSites.Algebra.SiteType.catalog',
    'register_state'                : 'QSites.Algebra.SiteType.catalog',
    'register_fermion_string'       : 'QSites.Algebra.SiteType.catalog',
    'register_space'                : 'QSites.Algebra.SiteType.catalog',
    'register_siteinds'             : 'QSites.Algebra.SiteType.catalog',
    # Errors
    'SiteTypeError'                 : 'QSites.Algebra.SiteType.errors',
    'ResolutionNotFound'            : 'QSites.Algebra.SiteType.errors',
    'AmbiguousResolution'           : 'QSites.Algebra.SiteType.errors',
    'MalformedOperatorExpression'   : 'QSites.Algebra.SiteType.errors',
    'DuplicateRegistration'         : 'QSites.Algebra.SiteType.errors',
}

def __getattr__(name: str) -> Any:  # PEP 562
    if name in _SUBMODULES:
        return importlib.import_module(_SUBMODULES[name])
    if name in _API_EXPORTS:
        mod = importlib.import_module(_API_EXPORTS[name])
        return getattr(mod, name)
    raise AttributeError(f"module 'QSites' has no attribute {name!r}")

def __dir__():
    return sorted(list(globals().keys()) + list(_SUBMODULES.keys()) + list(_API_EXPORTS.keys()))

# -------------------------------------------------------------------------------------------------
#! End of QSites package initialization
# -------------------------------------------------------------------------------------------------
