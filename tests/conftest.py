"""Shared fixtures for the Prospect ICP Engine tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from prospect_icp.api.endpoints import app
from prospect_icp.engine import ICPScoringEngine


@pytest.fixture(scope="session")
def engine() -> ICPScoringEngine:
    return ICPScoringEngine(max_workers=2)


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def retail_ceo() -> dict[str, str]:
    return {
        "jobTitle": "CEO",
        "companyName": "Zulay Kitchen",
        "companyIndustry": "Retail",
        "aboutSummary": "Kitchen products brand, tens of millions of customers served worldwide",
        "companySize": "11-50",
    }


@pytest.fixture
def agency_founder() -> dict[str, str]:
    return {
        "jobTitle": "Founder",
        "companyName": "Growth Agency",
        "companyIndustry": "Marketing and Advertising",
        "aboutSummary": "Shopify Plus partner agency helping brands grow",
    }


@pytest.fixture
def baseline_manager() -> dict[str, str]:
    return {
        "jobTitle": "Manager",
        "companyName": "Generic Corp",
        "companyIndustry": "Professional Services",
        "aboutSummary": "We provide business services",
    }
