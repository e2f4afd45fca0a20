"""Confidence classification for suggested mappings."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel

from rosterimport.models.mapping import ColumnMapping

DEFAULT_THRESHOLD = 0.7
REVIEW_NOTE = "Uncertain mapping, please verify"


class ConfidenceLevel(StrEnum):
    VERIFIED = "verified"
    NEEDS_REVIEW = "needs_review"


class ConfidenceBadge(BaseModel):
    csv_header: str
    level: ConfidenceLevel
    percent: int
    note: Optional[str] = None


def classify(confidence: float, threshold: float = DEFAULT_THRESHOLD) -> ConfidenceLevel:
    if confidence >= threshold:
        return ConfidenceLevel.VERIFIED
    return ConfidenceLevel.NEEDS_REVIEW


def badge_for(mapping: ColumnMapping, threshold: float = DEFAULT_THRESHOLD) -> ConfidenceBadge | None:
    """Badge for a mapped column; unmapped columns get none."""
    if not mapping.target_field:
        return None
    level = classify(mapping.confidence, threshold)
    return ConfidenceBadge(
        csv_header=mapping.csv_header,
        level=level,
        percent=round(mapping.confidence * 100),
        note=REVIEW_NOTE if level == ConfidenceLevel.NEEDS_REVIEW else None,
    )
