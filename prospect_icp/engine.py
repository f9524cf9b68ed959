"""
Prospect ICP Engine - Main Orchestrator
=======================================
Orchestrates the four stages:
  Stage 1: Segment Classification → Stage 2: Title Authority →
  Stage 3: Company Signals → Stage 4: Company Size Fit

Stage 1 runs first because Stages 3 and 4 branch on the segment; the
segment is passed to them explicitly. Every stage is built once and only
read afterwards, so one engine can be shared across threads.
"""

import re
from typing import Optional, List, Any, Mapping, Union
from concurrent.futures import ThreadPoolExecutor

from .models.schemas import (
    ProspectSignals,
    Segment,
    ICPScoreBreakdown,
    ICPScoreResult,
    RecalculatedScore,
    RecalculationResult,
    SortOption,
)
from .config import settings
from .config.logging import get_logger
from .ranking import ScoredProspect, icp_range, sort_scored
from .stages.stage1_segment import SegmentClassificationStage
from .stages.stage2_title import TitleAuthorityStage
from .stages.stage3_signals import CompanySignalStage
from .stages.stage4_size import CompanySizeStage

logger = get_logger(__name__)

ProspectInput = Union[ProspectSignals, Mapping[str, Any]]


class ICPScoringEngine:
    """
    Main ICP Scoring Engine that orchestrates all four stages.
    """

    def __init__(self, max_workers: Optional[int] = None):
        """
        Initialize the scoring engine.

        Args:
            max_workers: Thread pool size for batch scoring
                (defaults to ICP_BATCH_MAX_WORKERS)
        """
        self.max_workers = max_workers or settings.BATCH_MAX_WORKERS

        # Initialize stages
        self.stage1 = SegmentClassificationStage()
        self.stage2 = TitleAuthorityStage()
        self.stage3 = CompanySignalStage()
        self.stage4 = CompanySizeStage()

        self.product_categories = re.compile(settings.PRODUCT_CATEGORY_PATTERN)

    def score_prospect(self, prospect: ProspectInput) -> ICPScoreBreakdown:
        """
        Score a single prospect.

        Args:
            prospect: ProspectSignals or any prospect-like mapping

        Returns:
            Immutable ICPScoreBreakdown
        """
        return self.explain(prospect).breakdown

    def explain(self, prospect: ProspectInput) -> ICPScoreResult:
        """
        Score a single prospect and keep the evidence for each component.

        Args:
            prospect: ProspectSignals or any prospect-like mapping

        Returns:
            ICPScoreResult with the breakdown and what matched
        """
        signals = ProspectSignals.from_record(prospect)
        combined = signals.combined_text

        # =====================================================================
        # STAGE 1: Segment Classification
        # =====================================================================
        segment_result = self.stage1.process(signals)
        segment = segment_result.segment

        # =====================================================================
        # STAGES 2-4: Component Scores
        # =====================================================================
        title_result = self.stage2.process(signals.title_text)
        signal_result = self.stage3.process(
            combined, segment, industry=signals.company_industry or ""
        )
        employees = self.stage4.parse(signals.company_size)
        size_points = self.stage4.process(signals.company_size, segment)

        category_match = self.product_categories.search(combined)
        product_points = settings.PRODUCT_CATEGORY_POINTS if category_match else 0

        about = signals.about_summary or ""
        completeness_points = (
            settings.PROFILE_COMPLETENESS_POINTS
            if len(about) > settings.PROFILE_ABOUT_MIN_LENGTH
            else 0
        )

        # =====================================================================
        # Assemble Final Result
        # =====================================================================
        component_sum = (
            title_result.points
            + signal_result.score
            + size_points
            + product_points
            + completeness_points
        )
        total = max(settings.TOTAL_MIN, min(settings.TOTAL_MAX, component_sum))

        breakdown = ICPScoreBreakdown(
            segment=segment,
            title_authority=title_result.points,
            company_signals=signal_result.score,
            company_size=size_points,
            product_category=product_points,
            profile_completeness=completeness_points,
            total=total,
        )

        logger.debug(
            "Scored %r: segment=%s total=%s (%s)",
            signals.company_name,
            segment.value,
            total,
            segment_result.reason,
        )

        return ICPScoreResult(
            breakdown=breakdown,
            icp_range=icp_range(total),
            segment_rule=segment_result.rule,
            segment_reason=segment_result.reason,
            title_tier=title_result.tier,
            title_match=title_result.matched,
            signals=signal_result.signals,
            raw_signal_total=signal_result.raw_total,
            employee_estimate=employees,
            product_category_match=category_match.group(0) if category_match else None,
        )

    def score_batch(
        self,
        prospects: List[Mapping[str, Any]],
        sort_by: Union[SortOption, str] = SortOption.ICP_DESC,
        max_workers: Optional[int] = None,
    ) -> List[ScoredProspect]:
        """
        Score multiple prospects in parallel.

        Args:
            prospects: Prospect-like mappings
            sort_by: "icp_desc", "icp_asc", "name_asc" or "recent"
            max_workers: Number of parallel workers

        Returns:
            (prospect, breakdown) pairs in the requested order
        """
        if not prospects:
            return []

        workers = max_workers or self.max_workers
        with ThreadPoolExecutor(max_workers=workers) as executor:
            breakdowns = list(executor.map(self.score_prospect, prospects))

        logger.info("Scored batch of %s prospects", len(prospects))
        return sort_scored(list(zip(prospects, breakdowns)), sort_by)

    def recalculate(self, records: List[Mapping[str, Any]]) -> RecalculationResult:
        """
        Recompute scores for stored prospect rows.

        Rows are re-projected into engine input and rescored; the caller
        writes ``icp_score`` and ``icp_score_breakdown`` back. Rows without
        an id cannot be written back and are reported as errors.

        Args:
            records: Stored prospect rows (snake_case, with "id")

        Returns:
            RecalculationResult with per-row updates and errors
        """
        results: List[RecalculatedScore] = []
        errors: List[str] = []

        for index, record in enumerate(records):
            record_id = record.get("id") if isinstance(record, Mapping) else None
            if record_id is None or record_id == "":
                label = _record_label(record) or f"row {index}"
                errors.append(f"Missing id for {label}")
                continue

            breakdown = self.score_prospect(record)
            results.append(
                RecalculatedScore(
                    id=str(record_id),
                    icp_score=breakdown.total,
                    icp_score_breakdown=breakdown.model_dump(by_alias=True, mode="json"),
                )
            )

        logger.info(
            "Recalculated ICP scores for %s of %s prospects", len(results), len(records)
        )
        return RecalculationResult(
            updated=len(results),
            total=len(records),
            results=results,
            errors=errors,
        )

    # =========================================================================
    # Single-stage entry points
    # =========================================================================

    def classify_segment(
        self,
        company_name: Optional[str] = None,
        industry: Optional[str] = None,
        about: Optional[str] = None,
        headline: Optional[str] = None,
        company_size: Optional[str] = None,
        title: Optional[str] = None,
    ) -> Segment:
        """Stage 1 only"""
        return self.stage1.classify(company_name, industry, about, headline, company_size, title)

    def score_title_authority(self, title: Optional[str]) -> int:
        """Stage 2 only"""
        return self.stage2.score(title)

    def score_company_signals(
        self, combined_text: str, segment: Segment, industry: Optional[str] = None
    ) -> int:
        """Stage 3 only"""
        return self.stage3.score(combined_text, segment, industry)

    def score_company_size(self, company_size: Optional[str], segment: Segment) -> int:
        """Stage 4 only"""
        return self.stage4.process(company_size, segment)


def _record_label(record: Any) -> Optional[str]:
    if not isinstance(record, Mapping):
        return None
    return record.get("full_name") or record.get("fullName") or record.get("linkedin_url")


# =============================================================================
# Convenience Functions
# =============================================================================

_default_engine: Optional[ICPScoringEngine] = None


def get_engine() -> ICPScoringEngine:
    """Return the shared default engine, building it on first use"""
    global _default_engine
    if _default_engine is None:
        _default_engine = ICPScoringEngine()
    return _default_engine


def score(prospect: ProspectInput) -> ICPScoreBreakdown:
    """Score a prospect with the default engine"""
    return get_engine().score_prospect(prospect)


def explain(prospect: ProspectInput) -> ICPScoreResult:
    """Score a prospect with evidence using the default engine"""
    return get_engine().explain(prospect)


def classify_segment(
    company_name: Optional[str] = None,
    industry: Optional[str] = None,
    about: Optional[str] = None,
    headline: Optional[str] = None,
    company_size: Optional[str] = None,
    title: Optional[str] = None,
) -> Segment:
    """Classify a prospect's segment with the default engine"""
    return get_engine().classify_segment(
        company_name, industry, about, headline, company_size, title
    )


def score_title_authority(title: Optional[str]) -> int:
    """Score a job title with the default engine"""
    return get_engine().score_title_authority(title)


def score_company_signals(
    combined_text: str, segment: Segment, industry: Optional[str] = None
) -> int:
    """Score combined company text with the default engine"""
    return get_engine().score_company_signals(combined_text, segment, industry)


def score_company_size(company_size: Optional[str], segment: Segment) -> int:
    """Score a company size string with the default engine"""
    return get_engine().score_company_size(company_size, segment)


def parse_company_size(company_size: Optional[str]) -> Optional[int]:
    """Estimate an employee count from a size string"""
    return get_engine().stage4.parse(company_size)
