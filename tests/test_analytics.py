from app.models import PageVisit, LeadToulouse, LeadMarrakech, TournamentRegistration
from app.routes.analytics import compute_page_stats
from app.utils import geolocation


def _visit(db, page, visitor_id=None, city=None):
    db.add(PageVisit(page=page, visitor_id=visitor_id, city=city))


def _no_lookup(*args, **kwargs):
    raise AssertionError("geolocation lookup must not be called")


# ─── Tracking ────────────────────────────────────────────────────────────────

def test_track_visit_from_private_ip_skips_lookup(client, db, monkeypatch):
    monkeypatch.setattr(geolocation, "fetch_location", _no_lookup)

    resp = client.post(
        "/api/analytics/visit",
        json={"page": "toulouse", "visitorId": "abc123"},
        headers={"X-Forwarded-For": "192.168.1.20, 10.0.0.1"},
    )

    assert resp.status_code == 201
    assert resp.json() == {"success": True}
    visit = db.query(PageVisit).one()
    assert visit.page == "toulouse"
    assert visit.visitor_id == "abc123"
    assert visit.city is None
    assert visit.country is None


def test_track_visit_resolves_public_ip(client, db, monkeypatch):
    seen = []

    async def fake_fetch(ip, client=None):
        seen.append(ip)
        return {"city": "Marrakech", "country": "Morocco"}

    monkeypatch.setattr(geolocation, "fetch_location", fake_fetch)

    resp = client.post(
        "/api/analytics/visit",
        json={"page": "marrakech"},
        headers={"X-Forwarded-For": "::ffff:41.250.10.3"},
    )

    assert resp.status_code == 201
    assert seen == ["41.250.10.3"]
    visit = db.query(PageVisit).one()
    assert visit.city == "Marrakech"
    assert visit.visitor_id is None


def test_track_visit_survives_lookup_failure(client, db, monkeypatch):
    import httpx

    async def failing_fetch(ip, client=None):
        raise httpx.ConnectError("boom")

    monkeypatch.setattr(geolocation, "fetch_location", failing_fetch)

    resp = client.post(
        "/api/analytics/visit",
        json={"page": "ramadan", "visitorId": "v1"},
        headers={"X-Forwarded-For": "8.8.8.8"},
    )

    assert resp.status_code == 201
    assert db.query(PageVisit).one().city is None


def test_track_visit_rejects_unknown_page(client, db):
    resp = client.post("/api/analytics/visit", json={"page": "paris"})

    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid page"
    assert db.query(PageVisit).count() == 0


def test_track_visit_requires_page(client):
    resp = client.post("/api/analytics/visit", json={"visitorId": "abc"})

    assert resp.status_code == 400
    assert resp.json()["field"] == "page"


# ─── Stats ───────────────────────────────────────────────────────────────────

def test_stats_without_visits(client):
    resp = client.get("/api/stats/toulouse")

    assert resp.status_code == 200
    assert resp.json() == {
        "totalVisits": 0,
        "uniqueVisitors": 0,
        "leadsCount": 0,
        "conversionRate": 0,
        "cityCounts": {},
    }


def test_stats_aggregation(db):
    _visit(db, "toulouse", "v1", "Toulouse")
    _visit(db, "toulouse", "v1", "Toulouse")
    _visit(db, "toulouse", "v2", None)
    _visit(db, "toulouse", None, "Paris")
    _visit(db, "marrakech", "v3", "Marrakech")
    db.add(LeadToulouse(name="Yanis", phone="0612345678"))
    db.add(LeadMarrakech(name="Zak", phone="0612345678", email=""))
    db.commit()

    stats = compute_page_stats(db, "toulouse")

    assert stats["total_visits"] == 4
    assert stats["unique_visitors"] == 2
    assert stats["leads_count"] == 1
    assert stats["conversion_rate"] == 25.0
    assert stats["city_counts"] == {"Toulouse": 2, "Unknown": 1, "Paris": 1}


def test_stats_conversion_rate_rounded(client, db):
    for i in range(3):
        _visit(db, "ramadan", f"v{i}")
    db.add(TournamentRegistration(name="Team", phone="0611223344", team_size="5"))
    db.commit()

    resp = client.get("/api/stats/ramadan")

    assert resp.json()["conversionRate"] == 33.33
    assert resp.json()["leadsCount"] == 1
    assert resp.json()["uniqueVisitors"] == 3


def test_stats_unknown_page(client):
    resp = client.get("/api/stats/paris")

    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid page"


def test_track_visit_survives_unexpected_lookup_body(client, db, monkeypatch):
    import httpx

    real_async_client = httpx.AsyncClient

    def mock_client(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(lambda request: httpx.Response(200, text="null"))
        return real_async_client(*args, **kwargs)

    monkeypatch.setattr(geolocation.httpx, "AsyncClient", mock_client)

    resp = client.post(
        "/api/analytics/visit",
        json={"page": "toulouse", "visitorId": "v9"},
        headers={"X-Forwarded-For": "8.8.8.8"},
    )

    assert resp.status_code == 201
    visit = db.query(PageVisit).one()
    assert visit.city is None
    assert visit.country is None


def test_track_visit_accepts_numeric_visitor_id(client, db):
    resp = client.post("/api/analytics/visit", json={"page": "ramadan", "visitorId": 12345})

    assert resp.status_code == 201
    assert db.query(PageVisit).one().visitor_id == "12345"
