"""
Pydantic schemas for the Lead Intent Scoring Engine
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from ..config.settings import FALLBACK_CLASSIFICATION


# =============================================================================
# ENUMS
# =============================================================================

class IntentLabel(str, Enum):
    """Final buying-intent label"""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


# =============================================================================
# INPUT SCHEMAS
# =============================================================================

class Lead(BaseModel):
    """A prospect row from the uploaded lead file"""
    name: str = ""
    role: str = ""
    company: str = ""
    industry: str = ""
    location: str = ""
    linkedin_bio: str = ""

    class Config:
        frozen = True

    @field_validator(
        "name", "role", "company", "industry", "location", "linkedin_bio",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value


class Offer(BaseModel):
    """The product being sold; its ideal use cases act as the ICP"""
    name: str
    value_props: List[str] = Field(..., min_length=1)
    ideal_use_cases: List[str] = Field(..., min_length=1)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "AI Outreach Automation",
                "value_props": ["24/7 outreach", "6x more meetings"],
                "ideal_use_cases": ["B2B SaaS mid-market"],
            }
        }


# =============================================================================
# STAGE RESULT SCHEMAS
# =============================================================================

class RuleBreakdown(BaseModel):
    """Result of the rule scorer (0-50 points)"""
    role: int = 0
    industry: int = 0
    data_quality: int = Field(0, alias="dataQuality")

    class Config:
        populate_by_name = True

    @property
    def total(self) -> int:
        return self.role + self.industry + self.data_quality


class ClassificationResult(BaseModel):
    """Result of the intent classifier (10-50 points)"""
    intent: str
    reasoning: str
    points: int
    is_fallback: bool = False

    @classmethod
    def fallback(cls) -> "ClassificationResult":
        """Default used whenever the LLM cannot give a usable answer"""
        return cls(is_fallback=True, **FALLBACK_CLASSIFICATION)


# =============================================================================
# OUTPUT SCHEMAS
# =============================================================================

class ScoreDetails(BaseModel):
    """Per-component points behind a final score"""
    role_points: int = Field(alias="rolePoints")
    industry_points: int = Field(alias="industryPoints")
    data_quality_points: int = Field(alias="dataQualityPoints")
    ai_intent: str = Field(alias="aiIntent")

    class Config:
        populate_by_name = True


class ScoreBreakdown(BaseModel):
    """Rule and AI contributions to a final score"""
    rule_score: int = Field(alias="ruleScore")
    ai_score: int = Field(alias="aiScore")
    details: ScoreDetails

    class Config:
        populate_by_name = True


class ScoredLead(Lead):
    """A lead with its final intent, score and explanation"""
    intent: IntentLabel
    score: int
    reasoning: str
    score_breakdown: Optional[ScoreBreakdown] = Field(None, alias="scoreBreakdown")
    error: bool = False

    class Config:
        frozen = True
        populate_by_name = True


class BatchSummary(BaseModel):
    """Counts and average score across a scored batch"""
    total: int
    high: int
    medium: int
    low: int
    average_score: int = Field(alias="averageScore")

    class Config:
        populate_by_name = True


class BatchResult(BaseModel):
    """Result from batch scoring"""
    results: List[ScoredLead]
    summary: BatchSummary
    processing_time_ms: float = 0
