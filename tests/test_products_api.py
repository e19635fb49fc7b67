"""
Feature: Product endpoints
  As the website frontend
  I want a paged product list and one product with its related products
  So that catalog pages can be rendered per locale

Scenario: Filtered, paged list
  Given published products in two series and a draft
  When the list is requested for one series, two per page
  Then only that series' published products come back with page totals

Scenario: Product detail
  Given a published product with only an English content translation
  When it is requested in Chinese
  Then the English content is returned with up to four related products
"""

from datetime import datetime, timedelta, timezone

import pytest

from catalog.models import Product, ProductContentTranslation, ProductSeries
from content.models import PublishStatus
from media_library.models import Media

LIST_URL = "/api/products"


@pytest.fixture
def hinge_series(db):
    return ProductSeries.objects.create(
        slug="glass-hinge",
        name={"en": "Glass Hinge", "zh": "浴室夹"},
        description={"en": "Hinges for glass doors"},
        status=PublishStatus.PUBLISHED,
    )


@pytest.fixture
def make_product(db):
    def make(sku, order=1, status=PublishStatus.PUBLISHED, **kwargs):
        kwargs.setdefault("slug", sku.lower())
        kwargs.setdefault("name", {"en": f"Product {sku}"})
        return Product.objects.create(sku=sku, order=order, status=status, **kwargs)

    return make


@pytest.fixture
def catalog(hinge_series, make_product):
    handle = ProductSeries.objects.create(slug="door-handle", status=PublishStatus.PUBLISHED)
    make_product("H-1", order=3, series=hinge_series, is_featured=True)
    make_product("H-2", order=1, series=hinge_series)
    make_product("H-3", order=2, series=hinge_series, is_featured=True)
    make_product("H-DRAFT", order=0, series=hinge_series, status=PublishStatus.DRAFT)
    make_product("D-1", order=1, series=handle)
    return hinge_series


def skus(resp):
    return [p["sku"] for p in resp.json()["products"]]


def test_list_defaults_to_published_by_order(api_client, catalog):
    resp = api_client.get(LIST_URL)

    data = resp.json()
    assert resp.status_code == 200
    assert skus(resp) == ["H-2", "D-1", "H-3", "H-1"]
    assert data["total"] == 4
    assert data["page"] == 1
    assert data["pageSize"] == 12
    assert data["totalPages"] == 1


def test_list_filters_by_series_and_paginates(api_client, catalog):
    first = api_client.get(LIST_URL, {"series": "glass-hinge", "pageSize": 2})
    second = api_client.get(LIST_URL, {"series": "glass-hinge", "pageSize": 2, "page": 2})

    assert skus(first) == ["H-2", "H-3"]
    assert skus(second) == ["H-1"]
    assert second.json()["total"] == 3
    assert second.json()["totalPages"] == 2


def test_list_filters_featured(api_client, catalog):
    resp = api_client.get(LIST_URL, {"isFeatured": "true"})

    assert skus(resp) == ["H-3", "H-1"]


def test_list_sorts_by_created_at_descending(api_client, catalog):
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    for days, sku in enumerate(["H-1", "D-1", "H-3", "H-2"]):
        Product.objects.filter(sku=sku).update(created_at=base + timedelta(days=days))

    resp = api_client.get(LIST_URL, {"sortBy": "createdAt", "sortDir": "desc"})

    assert skus(resp) == ["H-2", "H-3", "D-1", "H-1"]


def test_list_item_shape(api_client, catalog):
    media = Media.objects.create(file="media/h2.jpg", filename="h2.jpg")
    Product.objects.filter(sku="H-2").update(show_image=media, name={})

    item = api_client.get(LIST_URL, {"locale": "zh"}).json()["products"][0]

    assert item["localizedName"] == "H-2"
    assert item["showImage"]["filename"] == "h2.jpg"
    assert item["series"]["slug"] == "glass-hinge"
    assert item["series"]["localizedName"] == "浴室夹"
    assert item["isFeatured"] is False


@pytest.mark.parametrize(
    "params",
    [{"pageSize": 0}, {"pageSize": 101}, {"page": 0}, {"sortBy": "price"}, {"sortDir": "up"}],
)
def test_list_rejects_invalid_query(api_client, catalog, params):
    resp = api_client.get(LIST_URL, params)

    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid query parameters"


def test_detail_falls_back_to_english_content(api_client, catalog):
    product = Product.objects.get(sku="H-2")
    ProductContentTranslation.objects.create(product=product, locale="en", content={"document": ["specs"]})

    resp = api_client.get(f"{LIST_URL}/h-2", {"locale": "zh"})

    data = resp.json()
    assert resp.status_code == 200
    assert data["contentTranslation"] == {"locale": "en", "content": {"document": ["specs"]}}
    assert data["localizedName"] == "Product H-2"
    assert data["localizedShortDescription"] is None
    assert data["series"]["localizedDescription"] == "Hinges for glass doors"
    assert [p["sku"] for p in data["relatedProducts"]] == ["H-3", "H-1"]


def test_detail_without_translation_or_series(api_client, make_product):
    make_product("LONE")

    data = api_client.get(f"{LIST_URL}/lone").json()

    assert data["contentTranslation"] is None
    assert data["series"] is None
    assert data["relatedProducts"] == []


def test_detail_caps_related_products(api_client, hinge_series, make_product):
    for i in range(7):
        make_product(f"R-{i}", order=i, series=hinge_series)

    data = api_client.get(f"{LIST_URL}/r-3").json()

    assert [p["sku"] for p in data["relatedProducts"]] == ["R-0", "R-1", "R-2", "R-4"]


def test_detail_unknown_or_draft_product(api_client, catalog):
    for slug in ("nope", "h-draft"):
        resp = api_client.get(f"{LIST_URL}/{slug}")

        assert resp.status_code == 404
        assert resp.json() == {"error": "Product not found"}
