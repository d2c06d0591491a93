"""
file        : Algebra/Operator/operators_generic.py

Tag-independent operators. The identity ``"Id"`` is registered for the generic
placeholder tag (used when an index has no tags) and for the ``"Site"`` tag carried
by every index made with ``siteind``, so it resolves for any site.

Author      : Maksymilian Kliczkowski, WUST, Poland
Date        : November 2025
"""

import numpy as np

from QSites.Algebra.Operator.tensor import operator_from_matrix
from QSites.Algebra.SiteType.catalog import register_op
from QSites.Algebra.SiteType.tags import GENERIC_TAG

################################################################################


def _identity(tag, opname, s, **kwargs):
    from QSites.qsites_globals import get_config
    return operator_from_matrix(s, np.eye(s.dim, dtype=get_config().dtype))


def _register_catalog_entries():
    for tag in (GENERIC_TAG, "Site"):
        register_op(tag, "Id", description="Identity on any site")(_identity)


# -----------------------------------------------------------------------------
#! Register the catalog entries upon module import
# -----------------------------------------------------------------------------

_register_catalog_entries()

# -----------------------------------------------------------------------------
#! EOF
# -----------------------------------------------------------------------------
