"""
QSites Operator Module
======================

On-site operators resolved from the tags of a site index.

Modules:
--------
- tensor                        : operator tensors and the operator algebra used by ``op``
- op                            : operator resolution, including ``*`` products
- fermion                       : fermion-string classifier
- operators_generic             : tag-independent ``Id``
- operators_spin                : ``S=1/2`` site type
- operators_spin_1              : ``S=1`` site type
- operators_spinless_fermions   : ``Fermion`` site type
- operators_bosons              : ``Boson`` / ``Qudit`` site types

The built-in site-type modules register themselves on import; they are loaded on
first use of the global catalog (see ``QSites.qsites_globals.get_site_catalog``).
The ``op`` function shares its name with the ``op`` module and is exported from
the top-level ``QSites`` package only.

File    : QSites/Algebra/Operator/__init__.py
Author  : Maksymilian Kliczkowski
Email   : maksymilian.kliczkowski@pwr.edu.pl
"""

MODULE_DESCRIPTION = "Operator tensors, operator resolution (op) and the fermion-string classifier."

from .tensor import DEFAULT_ALGEBRA, OperatorAlgebra, OperatorTensor, operator_from_matrix, product
from .fermion import has_fermion_string

__all__ = [
    'OperatorTensor',
    'OperatorAlgebra',
    'DEFAULT_ALGEBRA',
    'operator_from_matrix',
    'product',
    'has_fermion_string',
]

# ----------------------------------------------------------------------------
#! EOF
# ----------------------------------------------------------------------------
