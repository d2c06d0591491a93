"""
QSites Hilbert Module
=====================

Site indices and what is built from their tags.

Modules:
--------
- site_index    : ``SiteIndex`` and ``IndexVal``
- state         : named basis states, ``state(s, "Up")``
- siteinds      : the ``siteind`` / ``siteinds`` / ``space`` factories

The functions ``state``, ``siteind``, ``siteinds`` and ``space`` share their names
with the modules above and are exported from the top-level ``QSites`` package only.

File    : QSites/Algebra/Hilbert/__init__.py
Author  : Maksymilian Kliczkowski
Email   : maksymilian.kliczkowski@pwr.edu.pl
"""

MODULE_DESCRIPTION = "Site indices, named basis states and site index factories."

from .site_index import IndexVal, SiteIndex

__all__ = [
    'SiteIndex',
    'IndexVal',
]

# ----------------------------------------------------------------------------
#! EOF
# ----------------------------------------------------------------------------
