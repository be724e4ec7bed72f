"""
Health module data models.

Pain is scored per body site. The backend sums the five scores into a
total pain score on its side.
"""

from datetime import date
from enum import Enum
from typing import Optional
from pydantic import Field

from shared.models import QueryModel, WireModel


class PainRecordType(str, Enum):
    """How a pain record was taken."""

    MANUAL = "MANUAL"
    POST_EXERCISE = "POST_EXERCISE"


class PainRecord(WireModel):
    """A pain self-assessment."""

    leg_pain_score: int = Field(..., ge=0, description="Leg pain score")
    knee_pain_score: int = Field(..., ge=0, description="Knee pain score")
    ankle_pain_score: int = Field(..., ge=0, description="Ankle pain score")
    heel_pain_score: int = Field(..., ge=0, description="Heel pain score")
    back_pain_score: int = Field(..., ge=0, description="Back pain score")
    notes: Optional[str] = None

    @property
    def total_pain_score(self) -> int:
        return (
            self.leg_pain_score
            + self.knee_pain_score
            + self.ankle_pain_score
            + self.heel_pain_score
            + self.back_pain_score
        )


class PainHistoryParams(QueryModel):
    """Optional date range for the pain history query (YYYY-MM-DD)."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
