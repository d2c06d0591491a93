"""
Fermion-string classifier tests.

----------------------------------------------------------------------------
File        : Python/test/operators/test_fermion_string.py
Author      : Maksymilian Kliczkowski
Date        : 13.11.2025
----------------------------------------------------------------------------
run: pytest Python/test/operators/test_fermion_string.py
"""

import pytest

from QSites.Algebra.Hilbert.site_index import SiteIndex
from QSites.Algebra.Operator.fermion import has_fermion_string
from QSites.Algebra.SiteType.catalog import register_fermion_string
from QSites.Algebra.SiteType.errors import AmbiguousResolution


def test_unclassified_operator_is_bosonic(catalog):
    s = SiteIndex.create(2, ["Site", "S=1/2"])
    assert has_fermion_string(s, "Sz", catalog=catalog) is False


def test_untagged_index_is_bosonic(catalog):
    register_fermion_string("", "C", True, catalog=catalog)
    # only the tags actually carried by the index are consulted
    assert has_fermion_string(SiteIndex.create(2), "C", catalog=catalog) is False


def test_single_tag_answers(catalog):
    s = SiteIndex.create(2, ["Site", "Fermion"])
    register_fermion_string("Fermion", "C", True, catalog=catalog)
    register_fermion_string("Fermion", "N", False, catalog=catalog)

    assert has_fermion_string(s, "C", catalog=catalog) is True
    assert has_fermion_string(s, " C ", catalog=catalog) is True
    assert has_fermion_string(s, "N", catalog=catalog) is False
    assert has_fermion_string(s, "Cdag", catalog=catalog) is False


def test_callable_classifier_receives_index_and_kwargs(catalog):
    s       = SiteIndex.create(2, "F")
    calls   = []

    def _classify(tag, index, opname, **kwargs):
        calls.append((tag, index, opname, kwargs))
        return opname.startswith("C")

    register_fermion_string("F", None, _classify, catalog=catalog)
    assert has_fermion_string(s, "Cup", catalog=catalog, spin="up") is True
    assert calls == [("F", s, "Cup", {"spin": "up"})]


def test_result_is_coerced_to_bool(catalog):
    s = SiteIndex.create(2, "F")
    register_fermion_string("F", None, lambda tag, index, opname, **kw: 1, catalog=catalog)
    assert has_fermion_string(s, "C", catalog=catalog) is True


def test_two_tags_classifying_is_ambiguous(catalog):
    s = SiteIndex.create(2, ["A", "B"])
    register_fermion_string("A", "C", True, catalog=catalog)
    register_fermion_string("B", "C", True, catalog=catalog)

    with pytest.raises(AmbiguousResolution) as exc:
        has_fermion_string(s, "C", catalog=catalog)
    assert exc.value.matching == ("A", "B")
    assert exc.value.surface == "has_fermion_string"
    assert '"has_fermion_string"' in str(exc.value)
