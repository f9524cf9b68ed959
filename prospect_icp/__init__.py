"""
Prospect ICP Engine - Deterministic Prospect Scoring
====================================================
A four-stage pipeline that rates e-commerce prospects 0-100:
  Stage 1: Segment Classification (merchant / agency / freelancer)
  Stage 2: Title Authority (decision-making power)
  Stage 3: Company Signals (platform, DTC, scale and commerce language)
  Stage 4: Company Size Fit (segment-specific sweet spots)
plus product-category and profile-completeness bonuses.
"""

__version__ = "1.0.0"
__author__ = "Prospect ICP Team"
