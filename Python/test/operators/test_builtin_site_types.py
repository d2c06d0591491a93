"""
Built-in site types test suite
==============================

Tests cover the site types registered on first use of the global catalog:
- ``S=1/2`` (pure handlers), ``S=1`` (populate handlers),
- ``Fermion`` (pure handlers, fermion string),
- ``Boson`` / ``Qudit`` (legacy handler, sparse matrices),
- the generic identity.

----------------------------------------------------------------------------
File        : Python/test/operators/test_builtin_site_types.py
Author      : Maksymilian Kliczkowski
Date        : 14.11.2025
----------------------------------------------------------------------------
run: pytest Python/test/operators/test_builtin_site_types.py
"""

import numpy as np
import pytest

import QSites
from QSites.Algebra.Operator.operators_spin import spin_half_matrix
from QSites.Algebra.SiteType.catalog import HandlerKind
from QSites.Algebra.SiteType.errors import ResolutionNotFound

# ----------------------------------------------------------------------------
#! Helpers
# ----------------------------------------------------------------------------


def _commutator(a, b):
    return a @ b - b @ a


# ----------------------------------------------------------------------------
#! Spin-1/2
# ----------------------------------------------------------------------------


class TestSpinHalf:
    """The S=1/2 site type."""

    def test_space_and_states(self):
        s = QSites.siteind("S=1/2")
        assert s.dim == 2
        assert s.tags == ("Site", "S=1/2")
        assert QSites.state(s, "Up").val == 1
        assert QSites.state(s, "Dn").val == 2
        assert QSites.state(s, "Z-").val == 2

    def test_pauli_algebra(self):
        s       = QSites.siteind("S=1/2")
        Sx      = QSites.op("Sx", s).matrix()
        Sy      = QSites.op("Sy", s).matrix()
        Sz      = QSites.op("Sz", s).matrix()

        np.testing.assert_allclose(_commutator(Sx, Sy), 1j * Sz, atol=1e-12)
        np.testing.assert_allclose(_commutator(Sy, Sz), 1j * Sx, atol=1e-12)
        np.testing.assert_allclose(Sx @ Sx + Sy @ Sy + Sz @ Sz, 0.75 * np.eye(2), atol=1e-12)
        print("(ok) spin-1/2 commutation relations")

    def test_ladder_operators_act_on_states(self):
        s       = QSites.siteind("S=1/2")
        up      = QSites.state(s, "Up").vector()
        dn      = QSites.state(s, "Dn").vector()
        Sp      = QSites.op("S+", s).matrix()
        Sm      = QSites.op("S-", s).matrix()

        np.testing.assert_allclose(Sp @ dn, up)
        np.testing.assert_allclose(Sm @ up, dn)
        np.testing.assert_allclose(Sp @ up, np.zeros(2))

    def test_aliases_and_products(self):
        s = QSites.siteind("S=1/2")
        np.testing.assert_array_equal(QSites.op("Sp", s).matrix(), QSites.op("S+", s).matrix())
        np.testing.assert_allclose(QSites.op("S+*S-", s).matrix(), QSites.op("ProjUp", s).matrix())
        np.testing.assert_allclose(QSites.op("S-*S+", s).matrix(), QSites.op("projDn", s).matrix())
        np.testing.assert_allclose(QSites.op("iSy", s).matrix(), 1j * spin_half_matrix("Sy"))

    def test_dtypes(self):
        s = QSites.siteind("S=1/2")
        assert QSites.op("Sz", s).dtype == np.float64
        assert QSites.op("Sy", s).dtype == np.complex128
        assert QSites.op("Sz", s, dtype=np.complex128).dtype == np.complex128

    @pytest.mark.parametrize("name", ["Sy", "Y"])
    @pytest.mark.parametrize("dtype, expected", [(np.float64, np.complex128), (np.float32, np.complex64)])
    def test_real_dtype_keeps_imaginary_part(self, name, dtype, expected):
        s   = QSites.siteind("S=1/2")
        res = QSites.op(name, s, dtype=dtype)
        assert res.dtype == expected
        np.testing.assert_allclose(res.matrix(), spin_half_matrix(name), atol=1e-7)

    def test_identity_from_site_tag(self):
        s = QSites.siteind("S=1/2")
        # "Site" precedes "S=1/2", so the generic identity answers
        np.testing.assert_array_equal(QSites.op("Id", s).matrix(), np.eye(2))

    def test_unknown_operator(self):
        s = QSites.siteind("S=1/2")
        with pytest.raises(ResolutionNotFound):
            QSites.op("Sz2", s)

    def test_spin_half_matrix_unknown(self):
        with pytest.raises(KeyError):
            spin_half_matrix("Nope")


# ----------------------------------------------------------------------------
#! Spin-1
# ----------------------------------------------------------------------------


class TestSpinOne:
    """The S=1 site type, built with populate handlers."""

    def test_space_and_states(self):
        s = QSites.siteind("S=1")
        assert s.dim == 3
        assert [QSites.state(s, n).val for n in ("Up", "Z0", "0", "Dn")] == [1, 2, 2, 3]

    def test_casimir(self):
        s       = QSites.siteind("S=1")
        total   = sum(QSites.op(n, s).matrix() for n in ("Sx2", "Sy2", "Sz2"))
        np.testing.assert_allclose(total, 2.0 * np.eye(3), atol=1e-12)
        print("(ok) spin-1 Casimir S(S+1) = 2")

    def test_commutation(self):
        s   = QSites.siteind("S=1")
        Sp  = QSites.op("S+", s).matrix()
        Sm  = QSites.op("S-", s).matrix()
        Sz  = QSites.op("Sz", s).matrix()
        np.testing.assert_allclose(_commutator(Sp, Sm), 2 * Sz, atol=1e-12)
        np.testing.assert_allclose(_commutator(Sz, Sp), Sp, atol=1e-12)

    def test_product_matches_square(self):
        s = QSites.siteind("S=1")
        np.testing.assert_allclose(QSites.op("Sz*Sz", s).matrix(), QSites.op("Sz2", s).matrix())

    def test_real_dtype_keeps_imaginary_part(self):
        s   = QSites.siteind("S=1")
        Sy  = QSites.op("Sy", s, dtype=np.float64)
        assert Sy.dtype == np.complex128
        np.testing.assert_allclose(Sy.matrix(), -1j * QSites.op("iSy", s).matrix())
        assert QSites.op("Sz", s, dtype=np.float32).dtype == np.float32

    def test_registered_as_populate(self):
        cat = QSites.get_site_catalog()
        assert cat.has_handler(HandlerKind.OP_POPULATE, "S=1", "Sz")
        assert not cat.has_handler(HandlerKind.OP, "S=1", "Sz")


# ----------------------------------------------------------------------------
#! Fermions
# ----------------------------------------------------------------------------


class TestFermion:
    """The spinless Fermion site type."""

    def test_operators(self):
        s       = QSites.siteind("Fermion")
        C       = QSites.op("C", s).matrix()
        Cdag    = QSites.op("Cdag", s).matrix()
        N       = QSites.op("N", s).matrix()
        F       = QSites.op("F", s).matrix()

        np.testing.assert_allclose(Cdag @ C, N)
        np.testing.assert_allclose(C @ Cdag + Cdag @ C, np.eye(2))
        np.testing.assert_allclose(F, np.eye(2) - 2 * N)
        np.testing.assert_allclose(QSites.op("Cdag*C", s).matrix(), N)

    def test_states(self):
        s   = QSites.siteind("Fermion")
        emp = QSites.state(s, "Emp")
        occ = QSites.state(s, "Occ")
        assert (emp.val, occ.val) == (1, 2)
        assert QSites.state(s, "1") == occ
        np.testing.assert_allclose(QSites.op("Cdag", s).matrix() @ emp.vector(), occ.vector())

    @pytest.mark.parametrize("name, expected", [
        ("C", True), ("Cdag", True), ("N", False), ("F", False), ("A", False), ("Id", False),
    ])
    def test_fermion_string(self, name, expected):
        s = QSites.siteind("Fermion")
        assert QSites.has_fermion_string(s, name) is expected

    def test_spin_operators_have_no_string(self):
        s = QSites.siteind("S=1/2")
        assert QSites.has_fermion_string(s, "S+") is False


# ----------------------------------------------------------------------------
#! Bosons
# ----------------------------------------------------------------------------


class TestBoson:
    """Boson / Qudit site types: dimension from the 'dim' keyword, sparse operators."""

    def test_default_dimension(self):
        assert QSites.siteind("Boson").dim == 2
        assert QSites.space("Qudit") == 2

    def test_dim_keyword(self):
        sites = QSites.siteinds("Boson", 3, dim=5)
        assert [s.dim for s in sites] == [5, 5, 5]
        assert sites[2].tags == ("Site", "Boson", "n=3")

    def test_invalid_dim(self):
        with pytest.raises(ValueError):
            QSites.siteind("Boson", dim=0)

    def test_ladder_operators(self):
        s       = QSites.siteind("Boson", dim=4)
        a       = QSites.op("A", s)
        adag    = QSites.op("Adag", s)
        n       = QSites.op("N", s)

        assert a.issparse() and adag.issparse()
        np.testing.assert_allclose((adag @ a).matrix(), n.matrix())
        np.testing.assert_allclose(np.diag(n.matrix()), [0, 1, 2, 3])
        # [a, a^dag] = 1 except at the cutoff
        comm = _commutator(a.matrix(), adag.matrix())
        np.testing.assert_allclose(np.diag(comm)[:-1], np.ones(3))

    def test_product_expression(self):
        s = QSites.siteind("Qudit", dim=3)
        np.testing.assert_allclose(QSites.op("Adag*A", s).matrix(), QSites.op("n", s).matrix())

    def test_occupation_states(self):
        s = QSites.siteind("Boson", dim=4)
        assert QSites.state(s, "0").val == 1
        assert QSites.state(s, "3").val == 4
        # occupation at the cutoff is not a state of this index
        with pytest.raises(ResolutionNotFound):
            QSites.state(s, "4")
        with pytest.raises(ResolutionNotFound):
            QSites.state(QSites.siteind("Boson"), "5")
        with pytest.raises(ResolutionNotFound):
            QSites.state(s, "Up")

    def test_unknown_name(self):
        s = QSites.siteind("Boson")
        with pytest.raises(ResolutionNotFound):
            QSites.op("Sz", s)


# ----------------------------------------------------------------------------
#! Generic identity
# ----------------------------------------------------------------------------


def test_identity_on_untagged_index():
    s   = QSites.SiteIndex.create(5)
    Id  = QSites.op("Id", s)
    np.testing.assert_array_equal(Id.matrix(), np.eye(5))


def test_identity_on_integer_site():
    s = QSites.siteind(3, 1)
    assert s.tags == ("Site", "n=1")
    np.testing.assert_array_equal(QSites.op("Id", s).matrix(), np.eye(3))
