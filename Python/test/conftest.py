"""
Shared fixtures for the QSites test suite.

Most tests register handlers; they do so on a private catalog so the global one
(with the built-in site types) is never touched.
"""

import pytest

from QSites.Algebra.SiteType.catalog import SiteTypeCatalog


@pytest.fixture
def catalog():
    """A fresh, empty handler catalog."""
    return SiteTypeCatalog()
