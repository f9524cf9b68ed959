"""
Stage 3: Company Signals
========================
Pattern matching over the combined company text to estimate how strongly
a prospect runs an e-commerce / DTC business.

Signal categories (independent, summed, capped at 35):
- Scale indicators (revenue and volume superlatives)
- Platforms (Shopify tiers, Amazon, BigCommerce, WooCommerce/Magento)
- DTC and e-commerce language
- Fulfilment and logistics (merchants only)
- High-value retail industry (merchants only)
- Shopify partner and client-brand language (agencies only)
- General commerce terms
"""

import re
from typing import Dict, List, Optional, Any, Tuple

from ..models.schemas import ExtractedSignal, Segment, SignalResult
from ..config import settings
from .matching import compile_phrases, first_match, normalize


class CompanySignalStage:
    """
    Stage 3: Extract and score company signals.
    """

    def __init__(self, signal_library: Optional[Tuple[Dict[str, Any], ...]] = None):
        """
        Initialize with a signal library or use defaults.
        """
        self.signals = signal_library or settings.COMPANY_SIGNAL_LIBRARY
        self.cap = settings.COMPANY_SIGNALS_CAP
        self.high_value_industries = compile_phrases(settings.HIGH_VALUE_INDUSTRIES)
        self._compile_patterns()

    def _compile_patterns(self):
        """Pre-compile regex patterns for every rule"""
        self.compiled = []
        for rule in self.signals:
            patterns = rule.get("all_of") or (rule["pattern"],)
            self.compiled.append({
                "tag": rule["tag"],
                "category": rule["category"],
                "weight": rule["weight"],
                "segment": rule.get("segment"),
                "group": rule.get("group"),
                "regexes": tuple(re.compile(p, re.IGNORECASE) for p in patterns),
            })

    def process(
        self,
        combined_text: str,
        segment: Segment,
        industry: Optional[str] = None,
    ) -> SignalResult:
        """
        Score the combined company text for a segment.

        Args:
            combined_text: Company name, about, headline and industry
            segment: Segment from Stage 1
            industry: Industry string for the industry bonus
                (the combined text is used when omitted)

        Returns:
            SignalResult with matched signals, raw sum and capped score
        """
        text = (combined_text or "").lower()
        segment_value = Segment(segment).value
        matched: List[ExtractedSignal] = []
        used_groups = set()

        for rule in self.compiled:
            if rule["segment"] and rule["segment"] != segment_value:
                continue
            if rule["group"] and rule["group"] in used_groups:
                continue

            matches = [regex.search(text) for regex in rule["regexes"]]
            if not all(matches):
                continue

            if rule["group"]:
                used_groups.add(rule["group"])
            matched.append(
                ExtractedSignal(
                    tag=rule["tag"],
                    category=rule["category"],
                    weight=rule["weight"],
                    matched_text=", ".join(m.group(0) for m in matches),
                )
            )

        industry_text = industry if industry is not None else text
        industry_signal = self._industry_bonus(industry_text, segment_value)
        if industry_signal:
            matched.append(industry_signal)

        raw_total = sum(s.weight for s in matched)

        return SignalResult(
            signals=matched,
            raw_total=raw_total,
            score=min(raw_total, self.cap),
        )

    def score(self, combined_text: str, segment: Segment, industry: Optional[str] = None) -> int:
        """Return only the capped score"""
        return self.process(combined_text, segment, industry).score

    def _industry_bonus(self, industry: Optional[str], segment: str) -> Optional[ExtractedSignal]:
        """Bonus for merchants in a high-value retail industry"""
        bonus = settings.INDUSTRY_BONUS
        if segment != bonus["segment"]:
            return None

        phrase = first_match(normalize(industry), self.high_value_industries)
        if not phrase:
            return None

        return ExtractedSignal(
            tag=bonus["tag"],
            category=bonus["category"],
            weight=bonus["weight"],
            matched_text=phrase,
        )
