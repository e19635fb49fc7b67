"""
Feature: Re-rank menu siblings from slug lists
  As a site maintainer
  I want to set sibling order from an explicit list of slugs
  So that the menu order can be restored without editing rows by hand

Scenario: Missing slug in the list
  Given children "a" and "c" under "product" and no "b"
  When the list ["a", "b", "c"] is applied to "product"
  Then "a" gets order 1 and "c" gets order 3
  And "b" is reported as not found

Scenario: One update fails
  Given the update for "b" raises a database error
  When the list is applied
  Then "a" and "c" are still updated and the failure is reported
"""

import logging

import pytest
from django.db import DatabaseError

from navigation import ordering
from navigation.models import MenuItem
from navigation.ordering import reorder_siblings


@pytest.fixture
def product(make_menu):
    parent = make_menu("product", order=2)
    make_menu("a", parent=parent, order=9)
    make_menu("c", parent=parent, order=8)
    make_menu("d", parent=parent, order=7)
    return parent


def orders():
    return dict(MenuItem.objects.values_list("slug", "order"))


@pytest.mark.django_db
def test_missing_slug_is_reported_and_others_updated(product, caplog):
    with caplog.at_level(logging.WARNING, logger="navigation.ordering"):
        report = reorder_siblings(children_by_parent={"product": ["a", "b", "c"]})

    assert orders()["a"] == 1
    assert orders()["c"] == 3
    assert report.missing == [("product", "b")]
    assert report.ok
    assert "Menu b not found under product" in caplog.text


@pytest.mark.django_db
def test_unlisted_siblings_are_untouched(product):
    reorder_siblings(children_by_parent={"product": ["c", "a"]})

    assert orders()["d"] == 7
    assert orders()["c"] == 1
    assert orders()["a"] == 2


@pytest.mark.django_db
def test_running_twice_gives_same_orders(product, make_menu):
    make_menu("home", order=5)
    lists = (["home", "product"], {"product": ["c", "a"]})

    first = reorder_siblings(*lists)
    after_first = orders()
    second = reorder_siblings(*lists)

    assert orders() == after_first
    assert first.updated == second.updated


@pytest.mark.django_db
def test_top_level_only_matches_root_menus(product, make_menu):
    make_menu("home", order=4)

    report = reorder_siblings(top_level=["home", "a"])

    assert orders()["home"] == 1
    assert orders()["a"] == 9
    assert report.missing == [(None, "a")]


@pytest.mark.django_db
def test_failed_update_does_not_stop_the_batch(product, monkeypatch):
    real_set_order = ordering._set_order

    def flaky(slug, parent, order):
        if slug == "a":
            raise DatabaseError("row locked")
        return real_set_order(slug, parent, order)

    monkeypatch.setattr(ordering, "_set_order", flaky)

    report = reorder_siblings(children_by_parent={"product": ["a", "d", "c"]})

    assert not report.ok
    assert report.failed == [("product", "a", "row locked")]
    assert orders()["a"] == 9
    assert orders()["d"] == 2
    assert orders()["c"] == 3


@pytest.mark.django_db
def test_unknown_parent_is_reported():
    report = reorder_siblings(children_by_parent={"ghost": ["x"]})

    assert report.missing_parents == ["ghost"]
    assert report.updated == []
