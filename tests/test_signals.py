"""Tests for company signal scoring."""

from __future__ import annotations

import pytest

from prospect_icp.engine import ICPScoringEngine, score_company_signals
from prospect_icp.models.schemas import Segment
from prospect_icp.stages.stage3_signals import CompanySignalStage


@pytest.mark.parametrize(
    ("company_name", "industry", "about", "minimum"),
    [
        ("Zulay Kitchen", "Retail", "Kitchen products brand, tens of millions of customers served worldwide", 25),
        ("Big Brand Co", "Consumer Goods", "Over 5 million customers and $50M in revenue", 20),
        ("Fast Growth Inc", "Retail", "Inc 5000 fastest growing company, 8-figure revenue", 25),
        ("Top Seller Brand", "Consumer Goods", "Our products are #1 bestseller on Amazon", 20),
        ("Premium Store", "Retail", "Running our DTC brand on Shopify Plus", 25),
        ("Amazon Brand", "Consumer Goods", "Amazon FBA seller with multiple private label brands", 20),
        ("Multi-Channel", "Retail", "Selling on Shopify, Amazon, and BigCommerce", 25),
        ("Scarlett Gasque", "Retail Apparel and Fashion", "Fashion brand", 15),
        ("Food Brand Co", "Food & Beverages", "Consumer food products", 15),
        ("DTC Brand", "", "Direct-to-consumer e-commerce brand", 15),
        ("Online Shop Co", "", "Online store selling physical products", 10),
        ("Growth Agency", "Marketing and Advertising", "Shopify Plus partner agency helping brands grow", 20),
    ],
)
def test_company_signal_minimums(
    engine: ICPScoringEngine, company_name: str, industry: str, about: str, minimum: int
) -> None:
    breakdown = engine.score_prospect(
        {
            "companyName": company_name,
            "companyIndustry": industry,
            "aboutSummary": about,
            "jobTitle": "Founder",
            "companySize": "11-50",
        }
    )
    assert breakdown.company_signals >= minimum


def test_no_signals_scores_zero() -> None:
    text = "generic corp we provide business services professional services"
    assert score_company_signals(text, Segment.MERCHANT, industry="Professional Services") == 0


def test_signals_are_capped_at_35(engine: ICPScoringEngine) -> None:
    text = (
        "millions of customers dtc brand on shopify plus, sold on amazon, "
        "e-commerce with our own fulfillment warehouse"
    )
    result = engine.stage3.process(text, Segment.MERCHANT, industry="Retail")
    assert result.raw_total > 35
    assert result.score == 35


def test_shopify_tiers_are_exclusive(engine: ICPScoringEngine) -> None:
    result = engine.stage3.process("we run on shopify plus", Segment.MERCHANT, industry="")
    tags = [signal.tag for signal in result.signals]
    assert "SHOPIFY_PLUS" in tags
    assert "SHOPIFY" not in tags
    assert result.score == 12


def test_plain_shopify_scores_ten(engine: ICPScoringEngine) -> None:
    assert engine.stage3.score("our store runs on shopify", Segment.MERCHANT, industry="") == 10


def test_fulfilment_counts_for_merchants_only(engine: ICPScoringEngine) -> None:
    text = "in-house fulfillment and logistics"
    assert engine.stage3.score(text, Segment.MERCHANT, industry="") == 8
    assert engine.stage3.score(text, Segment.AGENCY, industry="") == 0


def test_industry_bonus_for_merchants_only(engine: ICPScoringEngine) -> None:
    assert engine.stage3.score("", Segment.MERCHANT, industry="Retail") == 10
    assert engine.stage3.score("", Segment.AGENCY, industry="Retail") == 0
    assert engine.stage3.score("", Segment.FREELANCER, industry="Retail") == 0


def test_industry_bonus_reads_combined_text_when_industry_omitted(engine: ICPScoringEngine) -> None:
    assert engine.stage3.score("northwind cosmetics", Segment.MERCHANT) == 10


def test_agency_only_signals(engine: ICPScoringEngine) -> None:
    text = "shopify partner serving clients and their brands"
    agency = engine.stage3.process(text, Segment.AGENCY, industry="")
    merchant = engine.stage3.process(text, Segment.MERCHANT, industry="")

    agency_tags = {signal.tag for signal in agency.signals}
    merchant_tags = {signal.tag for signal in merchant.signals}

    assert {"SHOPIFY_PARTNER", "CLIENT_BRANDS"} <= agency_tags
    assert not {"SHOPIFY_PARTNER", "CLIENT_BRANDS"} & merchant_tags


def test_clients_without_brands_is_not_client_brands(engine: ICPScoringEngine) -> None:
    result = engine.stage3.process("we love our clients", Segment.AGENCY, industry="")
    assert "CLIENT_BRANDS" not in {signal.tag for signal in result.signals}


def test_signals_record_matched_text(engine: ICPScoringEngine) -> None:
    result = engine.stage3.process("available on amazon", Segment.MERCHANT, industry="")
    assert len(result.signals) == 1
    assert result.signals[0].tag == "AMAZON_SELLER"
    assert result.signals[0].matched_text == "available on amazon"


def test_custom_signal_library() -> None:
    stage = CompanySignalStage(
        signal_library=(
            {"tag": "SUBSCRIPTION", "category": "model", "pattern": r"subscription", "weight": 7},
        )
    )
    assert stage.score("monthly subscription box", Segment.MERCHANT, industry="") == 7
    assert stage.score("shopify plus", Segment.MERCHANT, industry="") == 0
