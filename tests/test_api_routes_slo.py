"""
Test Suite for API Routes - SLO

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

import main as app_main
from api.requests import SloSuggestRequest
from api.routes import slo as slo_route


@pytest.mark.asyncio
async def test_slo_suggest_returns_two_windows():
    req = SloSuggestRequest(throughput=1000, slo=99.9, duration_hours=24)
    resp = await slo_route.slo_suggest(req)

    assert resp.low_traffic is False
    assert resp.advice is None
    assert [a.type for a in resp.alerts] == ["slow_burn", "fast_burn"]
    assert resp.alerts[0].error_rate == pytest.approx(0.002)
    assert resp.alerts[0].long_window == "2h"
    assert resp.alerts[1].short_window == "2m"
    assert resp.impact.breach_after == "2h24m"


@pytest.mark.asyncio
async def test_slo_suggest_low_traffic_has_advice_and_no_alerts():
    req = SloSuggestRequest(throughput=10, slo=99, duration_hours=24)
    resp = await slo_route.slo_suggest(req)

    assert resp.low_traffic is True
    assert resp.alerts == []
    assert "defeated within 14m24s" in resp.advice


@pytest.mark.asyncio
async def test_slo_suggest_invalid_period_maps_to_422():
    req = SloSuggestRequest(throughput=1000, slo=99.9, duration_hours=36)
    with pytest.raises(HTTPException) as exc:
        await slo_route.slo_suggest(req)
    assert exc.value.status_code == 422
    assert "multiple of 24 hours" in exc.value.detail


@pytest.mark.asyncio
async def test_slo_suggest_unexpected_error_maps_to_500(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(slo_route, "suggest_service", boom)
    with pytest.raises(HTTPException) as exc:
        await slo_route.slo_suggest(SloSuggestRequest(throughput=1, slo=99, duration_hours=24))
    assert exc.value.status_code == 500
    assert exc.value.detail == "boom"


def test_slo_suggest_over_http():
    with TestClient(app_main.app) as client:
        ok = client.post("/api/v1/slo/suggest", json={"throughput": 1000, "slo": 99.9, "duration_hours": 720})
        bad_period = client.post("/api/v1/slo/suggest", json={"throughput": 1000, "slo": 99.9, "duration_hours": 25})
        bad_slo = client.post("/api/v1/slo/suggest", json={"throughput": 1000, "slo": 100, "duration_hours": 24})

    assert ok.status_code == 200
    body = ok.json()
    assert body["slo"] == "SLO of 99.900% over 30d for 1000.000 rpm"
    assert [a["long_window"] for a in body["alerts"]] == ["30d", "1d6h"]
    assert bad_period.status_code == 422
    assert bad_slo.status_code == 422
