"""Tests for the HTTP endpoints."""

from __future__ import annotations

import inspect

from fastapi.testclient import TestClient

from prospect_icp import __version__
from prospect_icp.api import endpoints


def test_root_lists_endpoints(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["version"] == __version__
    assert body["endpoints"]["Score"] == "POST /api/icp/score"


def test_health(client: TestClient) -> None:
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_score_returns_camel_case_breakdown(client: TestClient, retail_ceo: dict[str, str]) -> None:
    response = client.post("/api/icp/score", json={"prospect": retail_ceo})

    assert response.status_code == 200
    body = response.json()
    assert body["icp_score"] == 95
    assert body["icp_range"] == "high"
    assert body["breakdown"]["segment"] == "merchant"
    assert body["breakdown"]["titleAuthority"] == 40
    assert body["breakdown"]["companySize"] == 15


def test_score_requires_prospect(client: TestClient) -> None:
    response = client.post("/api/icp/score", json={})
    assert response.status_code == 422


def test_explain_includes_evidence(client: TestClient, agency_founder: dict[str, str]) -> None:
    response = client.post("/api/icp/explain", json={"prospect": agency_founder})

    assert response.status_code == 200
    body = response.json()
    assert body["breakdown"]["segment"] == "agency"
    assert body["segmentRule"] == "agency"
    assert body["icpRange"] == "high"
    assert "segment_rule" not in body
    assert all("matchedText" in signal for signal in body["signals"])
    tags = {signal["tag"] for signal in body["signals"]}
    assert {"SHOPIFY_PLUS", "SHOPIFY_PARTNER"} <= tags


def test_batch_sorts_and_filters(
    client: TestClient,
    retail_ceo: dict[str, str],
    agency_founder: dict[str, str],
    baseline_manager: dict[str, str],
) -> None:
    prospects = [baseline_manager, agency_founder, retail_ceo]

    response = client.post("/api/icp/score/batch", json={"prospects": prospects})
    body = response.json()
    assert response.status_code == 200
    assert body["total_processed"] == 3
    assert [r["prospect"]["companyName"] for r in body["results"]] == [
        "Zulay Kitchen",
        "Growth Agency",
        "Generic Corp",
    ]

    response = client.post(
        "/api/icp/score/batch",
        json={"prospects": prospects, "sort_by": "icp_asc", "segment": "merchant"},
    )
    body = response.json()
    assert body["returned"] == 2
    assert [r["icp_score"] for r in body["results"]] == [5, 95]

    response = client.post(
        "/api/icp/score/batch",
        json={"prospects": prospects, "icp_range": "high"},
    )
    assert [r["prospect"]["companyName"] for r in response.json()["results"]] == [
        "Zulay Kitchen",
        "Growth Agency",
    ]


def test_batch_rejects_empty_list(client: TestClient) -> None:
    response = client.post("/api/icp/score/batch", json={"prospects": []})
    assert response.status_code == 400


def test_batch_rejects_unknown_sort(client: TestClient, retail_ceo: dict[str, str]) -> None:
    response = client.post(
        "/api/icp/score/batch", json={"prospects": [retail_ceo], "sort_by": "shoe_size"}
    )
    assert response.status_code == 422


def test_segment_endpoint(client: TestClient) -> None:
    response = client.post(
        "/api/icp/segment",
        json={"prospect": {"jobTitle": "Independent Contractor", "companyName": ""}},
    )
    assert response.status_code == 200
    assert response.json()["segment"] == "freelancer"
    assert response.json()["rule"] == "freelancer"


def test_title_endpoint(client: TestClient) -> None:
    response = client.post("/api/icp/title", json={"title": "Vice President of Operations"})
    assert response.status_code == 200
    assert response.json() == {"points": 40, "tier": "top", "matched": "vp of operations"}


def test_recalculate_endpoint(client: TestClient) -> None:
    rows = [
        {"id": "p1", "job_title": "CEO", "company_name": "Zulay Kitchen", "company_industry": "Retail"},
        {"full_name": "Missing Id"},
    ]
    response = client.post("/api/prospects/recalculate-icp", json={"prospects": rows})

    assert response.status_code == 200
    body = response.json()
    assert body["updated"] == 1
    assert body["total"] == 2
    assert body["results"][0]["id"] == "p1"
    assert body["results"][0]["icp_score_breakdown"]["segment"] == "merchant"
    assert body["errors"] == ["Missing id for Missing Id"]


def test_blocking_endpoints_run_in_threadpool() -> None:
    assert not inspect.iscoroutinefunction(endpoints.score_batch)
    assert not inspect.iscoroutinefunction(endpoints.recalculate_icp)
