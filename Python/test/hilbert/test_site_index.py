"""
SiteIndex / IndexVal container tests.
"""

import numpy as np
import pytest

from QSites.Algebra.Hilbert.site_index import IndexVal, SiteIndex
from QSites.Algebra.Operator.tensor import OperatorTensor


def test_create_parses_tags():
    s = SiteIndex.create(3, "Site, S=1 ,n=2")
    assert s.dim == 3
    assert s.tags == ("Site", "S=1", "n=2")
    assert s.plev == 0 and s.arrow == 1
    assert len(s) == 3


@pytest.mark.parametrize("dim", [0, -2, 1.5, True])
def test_invalid_dimension(dim):
    with pytest.raises(ValueError):
        SiteIndex.create(dim)


def test_identity_and_signature():
    a = SiteIndex.create(2, "T")
    b = SiteIndex.create(2, "T")
    assert a != b
    assert a.same_signature(b)
    assert a == a
    assert not a.same_signature(SiteIndex.create(3, "T"))


def test_tag_manipulation_keeps_order_and_identity():
    s = SiteIndex.create(2, "Site,T")
    t = s.addtags("n=1,T")
    assert t.tags == ("Site", "T", "n=1")
    assert t.id == s.id
    assert t.removetags("T").tags == ("Site", "n=1")
    assert t.settags("X").tags == ("X",)
    assert t.hastags("T,n=1") and not t.hastags("Y")


def test_prime_and_dag():
    s = SiteIndex.create(2, "T")
    assert s.prime().plev == 1
    assert s.prime(2).noprime().plev == 0
    assert s.dag().arrow == -1
    assert s.dag().dag() == s
    with pytest.raises(ValueError):
        s.prime(-1)
    assert str(s.prime()).endswith("'")


def test_index_val():
    s   = SiteIndex.create(3, "T")
    v   = s[2]
    assert isinstance(v, IndexVal)
    assert int(v) == 2
    np.testing.assert_array_equal(v.vector(), [0.0, 1.0, 0.0])
    assert v.vector(dtype=np.complex128).dtype == np.complex128
    with pytest.raises(IndexError):
        s[0]
    with pytest.raises(IndexError):
        s[4]
    with pytest.raises(TypeError):
        s["1"]


def test_operator_tensor_shape_and_inds():
    s       = SiteIndex.create(2, "T")
    empty   = OperatorTensor(s)
    assert empty.isempty() and empty.dtype is None
    with pytest.raises(ValueError):
        empty.matrix()

    o       = empty.fill(np.eye(2))
    assert o is empty and not o.isempty()
    prime, dual = o.inds
    assert prime.plev == 1 and prime.id == s.id
    assert dual.arrow == -1
    np.testing.assert_array_equal(np.asarray(o), np.eye(2))
    with pytest.raises(ValueError):
        OperatorTensor(s, np.eye(3))
