"""Models for coaching analysis results."""

from pydantic import BaseModel, Field


class CoachAnalysis(BaseModel):
    """Structured nutrition analysis returned by the coach."""

    summary: str
    recommendations: list[str] = Field(default_factory=list)
    score: int = Field(ge=0, le=100)
