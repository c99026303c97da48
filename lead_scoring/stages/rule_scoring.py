"""
Rule Scoring Stage
==================
Deterministic scoring of a lead against the active offer (0-50 points).

Components:
- Role relevance (20): decision maker 20, influencer 10
- Industry fit (20): ICP match 20, adjacent industry 10
- Data quality (10): all six lead fields filled in
"""

from typing import List, Optional

from ..models.schemas import Lead, Offer, RuleBreakdown
from ..config.settings import (
    DECISION_MAKER_ROLES,
    INFLUENCER_ROLES,
    ROLE_POINTS,
    INDUSTRY_POINTS,
    DATA_QUALITY_POINTS,
    REQUIRED_LEAD_FIELDS,
    ADJACENT_INDUSTRIES,
)


def score_role(role: Optional[str]) -> int:
    """Score a job title by buying authority"""
    if not role:
        return ROLE_POINTS["none"]

    role_lower = role.lower().strip()
    if not role_lower:
        return ROLE_POINTS["none"]

    for keyword in DECISION_MAKER_ROLES:
        if keyword in role_lower:
            return ROLE_POINTS["decision_maker"]

    for keyword in INFLUENCER_ROLES:
        if keyword in role_lower:
            return ROLE_POINTS["influencer"]

    return ROLE_POINTS["none"]


def score_industry(industry: Optional[str], ideal_use_cases: Optional[List[str]]) -> int:
    """
    Score a lead's industry against the offer's ideal use cases.

    Args:
        industry: Lead industry
        ideal_use_cases: Offer's ICP descriptions

    Returns:
        20 when the industry and ICP text contain one another, 10 for an
        adjacent industry, otherwise 0
    """
    if not industry or not ideal_use_cases:
        return INDUSTRY_POINTS["none"]

    industry_lower = industry.lower().strip()
    if not industry_lower:
        return INDUSTRY_POINTS["none"]

    icp = " ".join(ideal_use_cases).lower()

    if industry_lower in icp or icp in industry_lower:
        return INDUSTRY_POINTS["match"]

    for key, adjacents in ADJACENT_INDUSTRIES.items():
        if key not in industry_lower:
            continue
        for adjacent in adjacents:
            if adjacent in icp:
                return INDUSTRY_POINTS["adjacent"]

    return INDUSTRY_POINTS["none"]


def score_data_quality(lead: Lead) -> int:
    """Full points only when every required field is non-blank"""
    for field in REQUIRED_LEAD_FIELDS:
        value = getattr(lead, field, None)
        if value is None or not str(value).strip():
            return 0
    return DATA_QUALITY_POINTS


def calculate_rule_score(lead: Lead, offer: Offer) -> RuleBreakdown:
    """Combine the three rule components for one lead"""
    return RuleBreakdown(
        role=score_role(lead.role),
        industry=score_industry(lead.industry, offer.ideal_use_cases),
        data_quality=score_data_quality(lead),
    )


class RuleScoringStage:
    """
    Rule stage of the pipeline. Pure: the same lead and offer always
    produce the same breakdown.
    """

    def process(self, lead: Lead, offer: Offer) -> RuleBreakdown:
        return calculate_rule_score(lead, offer)
