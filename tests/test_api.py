"""
Estimate API tests — shape catalog, two-phase batch flow, session totals, errors.

Tests:
1-2.  test_health / test_shape_catalog
3.    test_sections_reports_required_codes — phase 1 union
4-5.  test_price_reference_scenario / test_price_accumulates_session
6.    test_price_missing_rate_is_skipped
7-9.  Errors — unknown shape 404, bad dimensions 422, negative rate 422
10-12. Final summary — configured math, empty session, rate bounds
13-15. Non-finite and overflowing numbers — 422, never a server error
16.   test_settings_surface
"""


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "app": "aluframe"}


def test_shape_catalog(client):
    resp = client.get("/api/shapes/")
    assert resp.status_code == 200
    shapes = resp.json()
    assert [s["selector"] for s in shapes] == list(range(1, 15))

    panel = shapes[0]
    assert panel["collar_range"] == [1, 14]
    assert {"collar_type", "height", "width"} <= set(panel["fields"])

    random_fixed = next(s for s in shapes if s["selector"] == 6)
    assert random_fixed["collar_range"] is None
    assert "length" in random_fixed["fields"]


def test_sections_reports_required_codes(client, panel_fields):
    resp = client.post("/api/estimate/sections", json={
        "shape": 1,
        "items": [panel_fields, {"collar_type": 2, "height": 60, "width": 40}],
    })
    assert resp.status_code == 200
    data = resp.json()

    assert data["shape"] == 1
    assert len(data["components"]) == 2
    first = data["components"][0]
    assert first["label"] == "Three Panel Window"
    assert first["sections"]["DC30F"] == 141
    assert first["area_sq_ft"] == 12.0
    assert data["required_sections"] == [
        "D29", "DC26C", "DC26F", "DC30C", "DC30F", "M23", "M24", "M28",
    ]


def test_price_reference_scenario(client, panel_fields, panel_rates):
    resp = client.post("/api/estimate/price", json={
        "shape": 1,
        "items": [panel_fields],
        "rates": panel_rates,
    })
    assert resp.status_code == 200
    data = resp.json()

    assert data["aluminium_total"] == 3540.0
    assert data["total_sq_ft"] == 12.0
    assert data["window_count"] == 1
    assert data["missing_rates"] == []
    assert data["components"][0]["total"] == 3540.0
    assert data["session"] == {"aluminium_total": 3540.0, "total_sq_ft": 12.0, "window_count": 1}


def test_price_accumulates_session(client, panel_fields, panel_rates):
    payload = {"shape": 1, "items": [panel_fields], "rates": panel_rates}
    first = client.post("/api/estimate/price", json=payload).json()

    payload["session"] = first["session"]
    second = client.post("/api/estimate/price", json=payload).json()

    assert second["aluminium_total"] == 3540.0
    assert second["session"]["aluminium_total"] == 7080.0
    assert second["session"]["total_sq_ft"] == 24.0
    assert second["session"]["window_count"] == 2


def test_price_missing_rate_is_skipped(client, panel_fields, panel_rates):
    rates = {k: v for k, v in panel_rates.items() if k != "D29"}
    resp = client.post("/api/estimate/price", json={
        "shape": 1, "items": [panel_fields], "rates": rates,
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["aluminium_total"] == 2660.0
    assert data["missing_rates"] == ["D29"]
    assert data["components"][0]["missing_rates"] == ["D29"]


def test_unknown_shape_returns_404(client, panel_fields):
    resp = client.post("/api/estimate/sections", json={"shape": 99, "items": [panel_fields]})
    assert resp.status_code == 404
    body = resp.json()
    assert body["error_type"] == "unsupported_shape"
    assert body["details"][0]["available"] == list(range(1, 15))


def test_invalid_dimensions_return_422(client):
    resp = client.post("/api/estimate/sections", json={
        "shape": 1, "items": [{"collar_type": 1, "height": -5, "width": 36}],
    })
    assert resp.status_code == 422
    body = resp.json()
    assert body["error_type"] == "invalid_input"
    assert any(d["field"] == "height" for d in body["details"])


def test_negative_rate_returns_422(client, panel_fields, panel_rates):
    resp = client.post("/api/estimate/price", json={
        "shape": 1, "items": [panel_fields], "rates": dict(panel_rates, M24=-10),
    })
    assert resp.status_code == 422
    body = resp.json()
    assert body["error_type"] == "invalid_input"
    assert body["details"] == [{"field": "M24", "message": "negative rate"}]


def test_summary(client):
    resp = client.post("/api/estimate/summary", json={
        "session": {"aluminium_total": 1000.0, "total_sq_ft": 20.0, "window_count": 2},
        "glass_rate": 50,
        "labor_rate": 30,
        "hardware_rate": 200,
        "discount_pct": 10,
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["discount"] == 100.0
    assert data["aluminium_after_discount"] == 900.0
    assert data["glass"] == 1000.0
    assert data["labor"] == 600.0
    assert data["hardware"] == 400.0
    assert data["net_total"] == 2900.0
    assert data["currency"] == "Rs."


def test_summary_empty_session(client):
    resp = client.post("/api/estimate/summary", json={"session": {}})
    assert resp.status_code == 422
    body = resp.json()
    assert body["error_type"] == "invalid_input"
    assert "No windows added" in body["error"]


def test_summary_rejects_discount_over_100(client):
    resp = client.post("/api/estimate/summary", json={
        "session": {"aluminium_total": 100.0, "total_sq_ft": 1.0, "window_count": 1},
        "discount_pct": 150,
    })
    assert resp.status_code == 422


def _post_raw(client, url, body):
    """Send JSON text as-is; NaN and Infinity literals are not valid for json= encoding."""
    return client.post(url, content=body, headers={"Content-Type": "application/json"})


def test_infinite_dimension_returns_422(client):
    resp = _post_raw(client, "/api/estimate/price",
                     '{"shape": 6, "items": [{"length": Infinity}], "rates": {"D54": 1}}')
    assert resp.status_code == 422
    body = resp.json()
    assert body["error_type"] == "invalid_input"
    assert any(d["field"] == "length" for d in body["details"])


def test_overflowing_dimension_returns_422(client):
    resp = client.post("/api/estimate/price", json={
        "shape": 1, "items": [{"collar_type": 1, "height": 1e308, "width": 36}], "rates": {"M23": 1},
    })
    assert resp.status_code == 422
    assert resp.json()["error_type"] == "invalid_input"


def test_nan_rate_returns_422(client):
    resp = _post_raw(client, "/api/estimate/price",
                     '{"shape": 1, "items": [{"collar_type": 1, "height": 48, "width": 36}],'
                     ' "rates": {"DC30F": NaN, "DC26F": 100}}')
    assert resp.status_code == 422
    body = resp.json()
    assert body["error_type"] == "invalid_input"
    assert body["details"] == [{"field": "DC30F", "message": "rate is not a finite number"}]


def test_settings_surface():
    """Only the settings the app reads are configurable."""
    from aluframe.config import Settings

    assert set(Settings.model_fields) == {
        "APP_NAME", "CURRENCY_LABEL", "LOG_LEVEL",
        "GLASS_RATE_DEFAULT", "LABOR_RATE_DEFAULT", "HARDWARE_RATE_DEFAULT", "DISCOUNT_PCT_DEFAULT",
    }
