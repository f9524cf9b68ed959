"""
FastAPI Endpoints for the Prospect ICP Engine
=============================================
HTTP surface the import pipeline, the add-prospect form and the
recalculation job use to reach the engine.

Base URL: http://localhost:8000

Endpoints:
- GET  /                                - API info
- GET  /api/health                      - Health check
- POST /api/icp/score                   - Score a single prospect
- POST /api/icp/explain                 - Score with evidence
- POST /api/icp/score/batch             - Score, sort and filter many prospects
- POST /api/icp/segment                 - Segment only
- POST /api/icp/title                   - Title authority only
- POST /api/prospects/recalculate-icp   - Recompute stored prospect rows
"""

from datetime import datetime, timezone
from typing import Dict, Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import settings
from ..config.logging import get_logger
from ..models.schemas import (
    ProspectSignals,
    ScoreRequest,
    BatchScoreRequest,
    TitleRequest,
    RecalculateRequest,
)
from ..engine import ICPScoringEngine
from ..ranking import filter_scored, icp_range

logger = get_logger(__name__)


# =============================================================================
# FastAPI App Initialization
# =============================================================================

app = FastAPI(
    title="Prospect ICP Engine API",
    description="""
## Prospect ICP Scoring

Deterministic Ideal Customer Profile scoring for e-commerce prospects.

### Pipeline:
- **Segment**: merchant / agency / freelancer
- **Title Authority**: 0-40 points
- **Company Signals**: 0-35 points
- **Company Size Fit**: -10 to 15 points
- **Bonuses**: product category (+10), profile completeness (+5)

Totals are clamped to 0-100 and banded high (70+), medium (40-69), low.
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.API_CONFIG["cors_origins"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

engine = ICPScoringEngine()


# =============================================================================
# Health & Info Endpoints
# =============================================================================

@app.get("/", tags=["Info"])
async def root():
    """API information and available endpoints"""
    return {
        "service": "Prospect ICP Engine",
        "version": __version__,
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "Score": "POST /api/icp/score",
            "Explain": "POST /api/icp/explain",
            "Batch Score": "POST /api/icp/score/batch",
            "Segment": "POST /api/icp/segment",
            "Title": "POST /api/icp/title",
            "Recalculate": "POST /api/prospects/recalculate-icp",
            "Health": "GET /api/health",
        }
    }


@app.get("/api/health", tags=["Info"])
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "service": "Prospect ICP Engine",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# =============================================================================
# Scoring Endpoints
# =============================================================================

@app.post("/api/icp/score", tags=["Scoring"])
async def score_prospect(request: ScoreRequest):
    """
    Score a single prospect.

    Accepts snake_case rows, camelCase records or scraped profiles.
    Returns the breakdown with camelCase keys, ready to store as
    `icp_score_breakdown`.
    """
    breakdown = engine.score_prospect(request.prospect)
    return {
        "icp_score": breakdown.total,
        "icp_range": icp_range(breakdown.total).value,
        "breakdown": breakdown.model_dump(by_alias=True, mode="json"),
    }


@app.post("/api/icp/explain", tags=["Scoring"])
async def explain_prospect(request: ScoreRequest):
    """Score a single prospect and return the evidence behind each component"""
    result = engine.explain(request.prospect)
    return result.model_dump(by_alias=True, mode="json")


@app.post("/api/icp/score/batch", tags=["Scoring"])
def score_batch(request: BatchScoreRequest):
    """
    Score multiple prospects at once

    - Parallel scoring
    - Sorted by `sort_by` (icp_desc, icp_asc, name_asc, recent)
    - Optionally filtered by `segment` and `icp_range`
    """
    if not request.prospects:
        raise HTTPException(status_code=400, detail="No prospects provided")

    scored = engine.score_batch(request.prospects, sort_by=request.sort_by)
    kept = filter_scored(scored, segment=request.segment, band=request.icp_range)

    return {
        "total_processed": len(scored),
        "returned": len(kept),
        "results": [
            {
                "prospect": prospect,
                "icp_score": breakdown.total,
                "icp_range": icp_range(breakdown.total).value,
                "breakdown": breakdown.model_dump(by_alias=True, mode="json"),
            }
            for prospect, breakdown in kept
        ],
    }


@app.post("/api/icp/segment", tags=["Scoring"])
async def classify_segment(request: ScoreRequest):
    """Classify a prospect as merchant, agency or freelancer"""
    signals = ProspectSignals.from_record(request.prospect)
    result = engine.stage1.process(signals)
    return result.model_dump(mode="json")


@app.post("/api/icp/title", tags=["Scoring"])
async def score_title(request: TitleRequest):
    """Score the decision-making authority of a job title"""
    return engine.stage2.process(request.title).model_dump(mode="json")


# =============================================================================
# Prospect Maintenance
# =============================================================================

@app.post("/api/prospects/recalculate-icp", tags=["Prospects"])
def recalculate_icp(request: RecalculateRequest) -> Dict[str, Any]:
    """
    Recompute ICP scores for stored prospect rows.

    The caller persists `icp_score` and `icp_score_breakdown` for every
    returned id. Rows without an id are listed under `errors`.
    """
    result = engine.recalculate(request.prospects)
    for error in result.errors:
        logger.warning("Recalculation skipped a row: %s", error)
    return result.model_dump(mode="json")


# =============================================================================
# Error Handlers
# =============================================================================

@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc),
            "type": type(exc).__name__,
        }
    )
