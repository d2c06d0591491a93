"""
QSites Algebra Module
=====================

Site types and the objects they act on.

Modules:
--------
- SiteType  : tag identity, the handler catalog and the resolution errors
- Hilbert   : site indices, named basis states, site index factories
- Operator  : on-site operator tensors, operator resolution, fermion-string
              classifier and the built-in site types

File    : QSites/Algebra/__init__.py
Author  : Maksymilian Kliczkowski
Email   : maksymilian.kliczkowski@pwr.edu.pl
"""

# A short, user-facing description of the subpackage
MODULE_DESCRIPTION = "Site types: tags, handler catalog, site indices, operators and basis states."

from . import SiteType                                          # noqa: E402
from . import Hilbert                                           # noqa: E402
from . import Operator                                          # noqa: E402

__all__ = ["SiteType", "Hilbert", "Operator"]

# ----------------------------------------------------------------------------
#! EOF
# ----------------------------------------------------------------------------
