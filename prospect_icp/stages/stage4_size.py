"""
Stage 4: Company Size Fit
=========================
Turns a free-text company size ("11-50", "Self-employed", "1,001-5,000
employees") into an employee estimate and scores it against the segment's
sweet spot.

Sweet spots:
- Agency:   10-100 employees (+15), oversized agencies are penalised
- Merchant: 10-200 employees (+15), large merchants still acceptable
- Unknown size is a neutral +5 (0 for freelancers)
"""

import re
from typing import Optional

from ..models.schemas import Segment
from ..config import settings


class CompanySizeStage:
    """
    Stage 4: Score company size fit for a segment.
    """

    _first_integer = re.compile(r"\d+")

    def __init__(self):
        self.midpoints = settings.COMPANY_SIZE_MIDPOINTS
        self.bands = settings.COMPANY_SIZE_BANDS
        self.unknown_points = settings.UNKNOWN_SIZE_POINTS

    def parse(self, company_size: Optional[str]) -> Optional[int]:
        """
        Estimate an employee count from a size string.

        Known LinkedIn ranges map to a representative midpoint; anything
        else falls back to the first integer in the string.

        Args:
            company_size: Human-entered size text

        Returns:
            Employee estimate, or None when nothing parses
        """
        text = (company_size or "").lower().replace(",", "").strip()
        if not text:
            return None

        for marker, midpoint in self.midpoints:
            if marker in text:
                return midpoint

        match = self._first_integer.search(text)
        if match:
            return int(match.group(0))
        return None

    def process(self, company_size: Optional[str], segment: Segment) -> int:
        """
        Score size fit.

        Args:
            company_size: Human-entered size text
            segment: Segment from Stage 1

        Returns:
            Points in [-10, 15]
        """
        segment_value = Segment(segment).value
        employees = self.parse(company_size)

        if employees is None:
            return self.unknown_points[segment_value]

        return self.score_employees(employees, segment_value)

    def score_employees(self, employees: int, segment: Segment) -> int:
        """Score a known employee count against the segment's bands"""
        for low, high, points in self.bands[Segment(segment).value]:
            if low is not None and employees < low:
                continue
            if high is not None and employees > high:
                continue
            return points
        return 0
