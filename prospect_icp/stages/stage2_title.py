"""
Stage 2: Title Authority
========================
Maps a job title to decision-making power. Segment-independent.

Tiers (checked top-down, first containing match wins):
- 40: CEO, founder, owner, COO, president, managing partner,
      operations / e-commerce / partnership leadership
- 30: client-success VPs, partner, principal, operations and
      e-commerce managers, fulfilment and supply chain leads
- 20: other director / head of / VP / chief titles
- 10: senior and lead titles
"""

from typing import Optional

from ..models.schemas import TitleResult
from ..config import settings
from .matching import compile_phrases, first_match, normalize


class TitleAuthorityStage:
    """
    Stage 2: Score how much authority a job title implies.
    """

    def __init__(self):
        self.tiers = tuple(
            (
                points,
                tier,
                compile_phrases(patterns, settings.TITLE_ABBREVIATION_MAX_LENGTH),
            )
            for points, tier, patterns in settings.TITLE_TIERS
        )

    def process(self, title: Optional[str]) -> TitleResult:
        """
        Match a title against the tiers.

        Args:
            title: Job title (or headline) text

        Returns:
            TitleResult with points, tier name and the matching pattern
        """
        text = self.normalize_title(title)
        if not text:
            return TitleResult()

        for points, tier, table in self.tiers:
            matched = first_match(text, table)
            if matched:
                return TitleResult(points=points, tier=tier, matched=matched)

        return TitleResult()

    def score(self, title: Optional[str]) -> int:
        """Return only the points for a title"""
        return self.process(title).points

    @staticmethod
    def normalize_title(title: Optional[str]) -> str:
        """Lower-case, trim and fold synonyms (vice president -> vp)"""
        text = normalize(title)
        for source, target in settings.TITLE_SYNONYMS:
            text = text.replace(source, target)
        return text
