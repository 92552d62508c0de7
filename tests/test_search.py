"""Tests for the public search endpoint and query builder."""

import pytest
from sqlalchemy.exc import OperationalError

from pgfinder.models.listing import Listing, ListingStatus
from pgfinder.services import listings
from tests.helpers import add_pg, bearer


@pytest.fixture()
def catalogue(client, owner_token, admin_token):
    """Four approved PGs, one pending and one rejected."""
    ids = {
        "near": add_pg(client, owner_token, pgName="Near", pgRent=9000, pgDistance=0.5, facilities=["wifi", "ac"]),
        "mid": add_pg(client, owner_token, pgName="Mid", pgRent=7000, pgDistance=2, facilities=["wifi"]),
        "far": add_pg(client, owner_token, pgName="Far", pgRent=5000, pgDistance=6, facilities=["ac", "wifi", "food"]),
        "bare": add_pg(client, owner_token, pgName="Bare", pgRent=12000, pgDistance=3, facilities=[]),
        "pending": add_pg(client, owner_token, pgName="Pending", pgDistance=0.1),
        "rejected": add_pg(client, owner_token, pgName="Rejected", pgDistance=0.2),
    }
    for key in ("near", "mid", "far", "bare"):
        client.patch(f"/api/admin/pgs/{ids[key]}/approve", headers=bearer(admin_token))
    client.patch(f"/api/admin/pgs/{ids['rejected']}/reject", headers=bearer(admin_token))
    return ids


def _search(client, **params):
    response = client.get("/api/pgs", params=params)
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["total"] == len(body["listings"])
    return [pg["name"] for pg in body["listings"]]


def test_no_filters_returns_approved_by_distance(client, catalogue):
    assert _search(client) == ["Near", "Mid", "Bare", "Far"]


def test_price_window(client, catalogue):
    assert _search(client, minPrice=6000, maxPrice=9000) == ["Near", "Mid"]


def test_max_distance(client, catalogue):
    assert _search(client, maxDistance=2) == ["Near", "Mid"]


def test_facilities_require_every_tag(client, catalogue):
    assert _search(client, facilities="wifi,ac") == ["Near", "Far"]
    assert _search(client, facilities="wifi") == ["Near", "Mid", "Far"]
    assert _search(client, facilities="parking") == []


def test_facility_match_is_exact(client, catalogue):
    assert _search(client, facilities="wi") == []
    assert _search(client, facilities="%") == []
    assert _search(client, facilities="WIFI") == []
    assert _search(client, facilities="wifi,AC") == []


def test_filters_compose(client, catalogue):
    assert _search(client, facilities="ac", maxPrice=6000, maxDistance=10) == ["Far"]


def test_blank_parameters_are_ignored(client, catalogue):
    assert _search(client, minPrice="", maxPrice="", facilities="") == ["Near", "Mid", "Bare", "Far"]


def test_non_numeric_filter(client, catalogue):
    response = client.get("/api/pgs", params={"maxPrice": "lots"})
    assert response.status_code == 400


@pytest.mark.parametrize("value", ["nan", "inf", "-Infinity"])
def test_non_finite_filter(client, catalogue, value):
    response = client.get("/api/pgs", params={"minPrice": value})
    assert response.status_code == 400
    assert "minPrice" in response.json()["message"]


def test_store_failure_is_reported_as_server_error(client, monkeypatch):
    def broken_search(db, **filters):
        raise OperationalError("SELECT ...", {}, Exception("database is locked"))

    monkeypatch.setattr(listings, "search", broken_search)
    response = client.get("/api/pgs")
    assert response.status_code == 500
    message = response.json()["message"]
    assert message.startswith("Fetching approved PGs failed")
    assert "database is locked" in message


def test_public_fields_only(client, catalogue):
    listing = client.get("/api/pgs").json()["listings"][0]
    assert listing["facilities"] == ["wifi", "ac"]
    assert "owner_id" not in listing
    assert "status" not in listing


def test_legacy_comma_rows_decode_on_read(client, catalogue, db):
    row = db.get(Listing, catalogue["mid"])
    row.facilities = "wifi, laundry"
    db.commit()
    mid = [pg for pg in client.get("/api/pgs").json()["listings"] if pg["name"] == "Mid"][0]
    assert mid["facilities"] == ["wifi", "laundry"]


def test_sunrise_scenario(client, owner_token, admin_token):
    pg_id = add_pg(client, owner_token)
    assert _search(client) == []

    approved = client.patch(f"/api/admin/pgs/{pg_id}/approve", headers=bearer(admin_token))
    assert approved.json()["status"] == "approved"

    assert _search(client, maxPrice=10000, facilities="wifi") == ["Sunrise PG"]
    assert _search(client, facilities="parking") == []


def test_query_builder_status_gate(db, client, catalogue):
    results = listings.search(db)
    assert {pg.status for pg in results} == {ListingStatus.APPROVED.value}
    distances = [pg.distance for pg in results]
    assert distances == sorted(distances)
