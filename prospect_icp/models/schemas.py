"""
Pydantic schemas for the Prospect ICP Engine
"""

from enum import Enum
from typing import List, Dict, Optional, Any, Mapping
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# =============================================================================
# ENUMS
# =============================================================================

class Segment(str, Enum):
    """Business type a prospect is classified into"""
    MERCHANT = "merchant"
    AGENCY = "agency"
    FREELANCER = "freelancer"


class IcpRange(str, Enum):
    """Band of the total ICP score used for filtering"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SortOption(str, Enum):
    """Orderings offered for scored prospect lists"""
    ICP_DESC = "icp_desc"
    ICP_ASC = "icp_asc"
    NAME_ASC = "name_asc"
    RECENT = "recent"


# =============================================================================
# INPUT SCHEMAS
# =============================================================================

# Scraped-profile keys that stand in for a missing canonical field
_RECORD_FALLBACKS = {
    "about_summary": ("about", "summary"),
    "job_title": ("title", "position"),
}

_EXPERIENCE_FALLBACKS = {
    "company_name": ("companyName", "company_name", "company"),
    "job_title": ("title",),
}


class ProspectSignals(BaseModel):
    """Engine input: the text fields of a prospect the scorers read"""
    job_title: Optional[str] = None
    headline: Optional[str] = None
    company_name: Optional[str] = None
    company_industry: Optional[str] = None
    company_size: Optional[str] = None
    about_summary: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        """Numbers become text; anything else that isn't text is absent"""
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return str(value)
        return None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "ProspectSignals":
        """
        Build the engine input from an external prospect record.

        Accepts snake_case database rows, camelCase app records and
        scraped profiles (about/summary, title/position, experiences).

        Args:
            record: Prospect-like mapping

        Returns:
            ProspectSignals projection of the record
        """
        if isinstance(record, ProspectSignals):
            return record
        if not isinstance(record, Mapping):
            return cls()

        values: Dict[str, Any] = {}
        for name, field in cls.model_fields.items():
            for key in (name, field.alias):
                if key and _present(record.get(key)):
                    values[name] = record[key]
                    break

        for name, keys in _RECORD_FALLBACKS.items():
            if name not in values:
                for key in keys:
                    if _present(record.get(key)):
                        values[name] = record[key]
                        break

        experiences = record.get("experiences") or record.get("career_history")
        if isinstance(experiences, list) and experiences and isinstance(experiences[0], Mapping):
            current = experiences[0]
            for name, keys in _EXPERIENCE_FALLBACKS.items():
                if name not in values:
                    for key in keys:
                        if _present(current.get(key)):
                            values[name] = current[key]
                            break

        return cls(**values)

    @property
    def title_text(self) -> str:
        """Job title, falling back to the headline"""
        return self.job_title or self.headline or ""

    @property
    def combined_text(self) -> str:
        """Lower-cased company name, about, headline and industry"""
        parts = [
            self.company_name,
            self.about_summary,
            self.headline,
            self.company_industry,
        ]
        return " ".join(p for p in parts if p).lower()


def _present(value: Any) -> bool:
    return value is not None and value != ""


# =============================================================================
# RESULT SCHEMAS
# =============================================================================

class ICPScoreBreakdown(BaseModel):
    """Engine output: segment plus the weighted point breakdown"""
    segment: Segment
    title_authority: int = Field(ge=0, le=40)
    company_signals: int = Field(ge=0, le=35)
    company_size: int = Field(ge=-10, le=15)
    product_category: int = Field(ge=0, le=10)
    profile_completeness: int = Field(ge=0, le=5)
    total: int = Field(ge=0, le=100)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @property
    def component_sum(self) -> int:
        """Unclamped sum of the five components"""
        return (
            self.title_authority
            + self.company_signals
            + self.company_size
            + self.product_category
            + self.profile_completeness
        )


class ExtractedSignal(BaseModel):
    """A single matched company signal"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    tag: str
    category: str
    weight: int
    matched_text: Optional[str] = None


class SignalResult(BaseModel):
    """Result from the company signal scorer"""
    signals: List[ExtractedSignal] = Field(default_factory=list)
    raw_total: int = 0
    score: int = 0


class SegmentResult(BaseModel):
    """Result from the segment classifier"""
    segment: Segment
    rule: str
    reason: str


class TitleResult(BaseModel):
    """Result from the title authority scorer"""
    points: int = 0
    tier: Optional[str] = None
    matched: Optional[str] = None


class ICPScoreResult(BaseModel):
    """Breakdown together with the evidence behind each component"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    breakdown: ICPScoreBreakdown
    icp_range: IcpRange
    segment_rule: str
    segment_reason: str
    title_tier: Optional[str] = None
    title_match: Optional[str] = None
    signals: List[ExtractedSignal] = Field(default_factory=list)
    raw_signal_total: int = 0
    employee_estimate: Optional[int] = None
    product_category_match: Optional[str] = None


class RecalculatedScore(BaseModel):
    """Fresh score for a stored prospect row"""
    id: str
    icp_score: int
    icp_score_breakdown: Dict[str, Any]


class RecalculationResult(BaseModel):
    """Outcome of a batch recalculation"""
    updated: int
    total: int
    results: List[RecalculatedScore] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)


# =============================================================================
# API REQUEST SCHEMAS
# =============================================================================

class ScoreRequest(BaseModel):
    """Request to score a single prospect"""
    prospect: Dict[str, Any]


class BatchScoreRequest(BaseModel):
    """Request to score multiple prospects"""
    prospects: List[Dict[str, Any]]
    sort_by: SortOption = SortOption.ICP_DESC
    segment: Optional[Segment] = None
    icp_range: Optional[IcpRange] = None


class TitleRequest(BaseModel):
    """Request to score a job title"""
    title: Optional[str] = None


class RecalculateRequest(BaseModel):
    """Stored prospect rows to recompute"""
    prospects: List[Dict[str, Any]]
