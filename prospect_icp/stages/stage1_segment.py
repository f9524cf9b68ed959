"""
Stage 1: Segment Classification
===============================
Labels every prospect as a merchant, agency or freelancer.
Later stages read the segment, so this stage always runs first.

Rules, in priority order (first match wins):
- Freelancer phrases or a one-person placeholder company
- Agency: service industry, agency language and agency-style names,
  at least two corroborating
- Merchant: any single merchant signal
- Tiebreaker on C-suite titles
- Fallback on whether a real company name exists
"""

from typing import Optional

from ..models.schemas import ProspectSignals, Segment, SegmentResult
from ..config import settings
from .matching import compile_phrases, first_match, normalize


class SegmentClassificationStage:
    """
    Stage 1: Deterministic merchant / agency / freelancer classifier.
    """

    def __init__(self):
        self.freelancer_indicators = compile_phrases(settings.FREELANCER_INDICATORS, whole_word=True)
        self.single_person_sizes = compile_phrases(settings.SINGLE_PERSON_SIZES, whole_word=True)
        self.agency_industries = compile_phrases(settings.AGENCY_INDUSTRIES)
        self.agency_keywords = compile_phrases(settings.AGENCY_KEYWORDS)
        self.agency_name_words = compile_phrases(settings.AGENCY_NAME_WORDS)
        self.merchant_industries = compile_phrases(settings.MERCHANT_INDUSTRIES)
        self.merchant_keywords = compile_phrases(settings.MERCHANT_KEYWORDS)
        self.merchant_name_words = compile_phrases(settings.MERCHANT_NAME_WORDS)
        self.c_suite_terms = compile_phrases(settings.C_SUITE_TERMS)
        self.tiebreak_terms = compile_phrases(settings.TIEBREAK_AGENCY_INDUSTRY_TERMS)

    def process(self, prospect: ProspectSignals) -> SegmentResult:
        """
        Classify a prospect.

        Args:
            prospect: Engine input

        Returns:
            SegmentResult with the segment and the rule that decided it
        """
        return self.classify_with_reason(
            company_name=prospect.company_name,
            industry=prospect.company_industry,
            about=prospect.about_summary,
            headline=prospect.headline,
            company_size=prospect.company_size,
            title=prospect.title_text,
        )

    def classify(
        self,
        company_name: Optional[str] = None,
        industry: Optional[str] = None,
        about: Optional[str] = None,
        headline: Optional[str] = None,
        company_size: Optional[str] = None,
        title: Optional[str] = None,
    ) -> Segment:
        """Return only the segment label"""
        return self.classify_with_reason(
            company_name, industry, about, headline, company_size, title
        ).segment

    def classify_with_reason(
        self,
        company_name: Optional[str] = None,
        industry: Optional[str] = None,
        about: Optional[str] = None,
        headline: Optional[str] = None,
        company_size: Optional[str] = None,
        title: Optional[str] = None,
    ) -> SegmentResult:
        """Run the rules in priority order and report which one fired"""
        name = normalize(company_name)
        industry = normalize(industry)
        about = normalize(about)
        headline = normalize(headline)
        size = normalize(company_size)
        title = normalize(title)
        combined = " ".join(p for p in (name, about, headline) if p)

        # 1. Freelancer
        for field, text in (("company name", name), ("title", title), ("headline", headline)):
            phrase = first_match(text, self.freelancer_indicators)
            if phrase:
                return SegmentResult(
                    segment=Segment.FREELANCER,
                    rule="freelancer",
                    reason=f"'{phrase}' in {field}",
                )
        if self._is_placeholder_name(name):
            size_phrase = self._single_person_size(size)
            if size_phrase:
                return SegmentResult(
                    segment=Segment.FREELANCER,
                    rule="freelancer",
                    reason=f"No company and one-person size '{size_phrase}'",
                )

        # 2. Agency
        agency_industry = first_match(industry, self.agency_industries)
        agency_keyword = first_match(combined, self.agency_keywords)
        agency_name = first_match(name, self.agency_name_words)
        has_clients = "clients" in combined

        if (
            (agency_industry and (agency_keyword or agency_name))
            or (agency_name and agency_keyword)
            or (has_clients and agency_industry)
        ):
            evidence = [
                f"{label} '{value}'"
                for label, value in (
                    ("industry", agency_industry),
                    ("keyword", agency_keyword),
                    ("name", agency_name),
                )
                if value
            ]
            return SegmentResult(
                segment=Segment.AGENCY,
                rule="agency",
                reason="Agency signals: " + ", ".join(evidence),
            )

        # 3. Merchant
        for label, text, table in (
            ("industry", industry, self.merchant_industries),
            ("keyword", combined, self.merchant_keywords),
            ("name", name, self.merchant_name_words),
        ):
            phrase = first_match(text, table)
            if phrase:
                return SegmentResult(
                    segment=Segment.MERCHANT,
                    rule="merchant",
                    reason=f"Merchant {label} '{phrase}'",
                )

        # 4. Tiebreaker
        has_company = self._has_real_company(name)
        c_suite = first_match(title, self.c_suite_terms)
        if c_suite and has_company:
            if first_match(industry, self.tiebreak_terms):
                return SegmentResult(
                    segment=Segment.AGENCY,
                    rule="tiebreaker",
                    reason=f"'{c_suite}' title in a service industry",
                )
            return SegmentResult(
                segment=Segment.MERCHANT,
                rule="tiebreaker",
                reason=f"'{c_suite}' title with a company",
            )

        # 5. Fallback
        if has_company:
            return SegmentResult(
                segment=Segment.MERCHANT,
                rule="fallback",
                reason="Company name present",
            )
        return SegmentResult(
            segment=Segment.FREELANCER,
            rule="fallback",
            reason="No usable company name",
        )

    def _is_placeholder_name(self, name: str) -> bool:
        return name in settings.FREELANCER_PLACEHOLDER_NAMES

    def _has_real_company(self, name: str) -> bool:
        return len(name) > 2 and not self._is_placeholder_name(name)

    def _single_person_size(self, size: str) -> Optional[str]:
        if size == "1":
            return size
        return first_match(size, self.single_person_sizes)
